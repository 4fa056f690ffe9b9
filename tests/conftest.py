"""
Shared test fixtures for the arrange engine tests.

Provides default configuration, target builders and a living-room object set.
"""

import pytest
from typing import List

from arrange import LayoutConfig, PlacedObject, Target, Category


@pytest.fixture
def config() -> LayoutConfig:
    """Default tunables."""
    return LayoutConfig()


@pytest.fixture
def make_target():
    """Factory for bare Targets at a given position."""
    def _make(identity, radius=0.5, x=0.0, z=-1.6, category=Category.OTHER) -> Target:
        return Target(identity=identity, category=category, radius=radius, x=x, z=z)
    return _make


@pytest.fixture
def living_room_objects() -> List[PlacedObject]:
    """Table, two chairs and a couch at unit scale."""
    return [
        PlacedObject("table", "RoundTable.glb"),
        PlacedObject("chair-1", "OfficeChair.glb"),
        PlacedObject("chair-2", "OfficeChair.glb"),
        PlacedObject("couch", "Leather_Sofa_01.glb"),
    ]


@pytest.fixture
def mixed_objects() -> List[PlacedObject]:
    """A busier room with every category and a few scaled models."""
    return [
        PlacedObject("sofa", "models/Sofa.glb", (1.2, 1.0, 1.2)),
        PlacedObject("table-a", "Table.glb"),
        PlacedObject("table-b", "CoffeeTable.glb", (0.8, 1.0, 0.8)),
        PlacedObject("chair-a", "Chair.glb"),
        PlacedObject("chair-b", "Chair.glb"),
        PlacedObject("chair-c", "ArmChair.glb", (1.3, 1.0, 1.3)),
        PlacedObject("lamp", "Lamp.glb"),
        PlacedObject("plant", "Plant.glb", (0.5, 1.0, 0.5)),
    ]
