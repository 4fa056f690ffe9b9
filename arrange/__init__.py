"""
Arrange package
Automatic furniture layout on the ground plane for a room label
"""
from .layout_solver import arrange_objects, arrange_positions, apply_recipe, build_targets
from .archetypes import Archetype, ArchetypeRule, DEFAULT_RULES, select_archetype, default_assets
from .config import LayoutConfig, DEFAULT_CONFIG, load_config
from .footprint import Category, classify_asset, footprint_radius, scale_factor
from .strategies import place_line_centered, place_ring, place_arc
from .relax_solver import relax_no_overlap, RelaxStats
from .constraints import (
    clamp_to_bounds,
    find_overlaps,
    is_inside_bounds,
    room_polygon,
    footprint_polygon,
)
from .scene_classes import PlacedObject, Target, TargetGroups, ArrangeResult

__all__ = [
    "arrange_objects",
    "arrange_positions",
    "apply_recipe",
    "build_targets",
    "Archetype",
    "ArchetypeRule",
    "DEFAULT_RULES",
    "select_archetype",
    "default_assets",
    "LayoutConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "Category",
    "classify_asset",
    "footprint_radius",
    "scale_factor",
    "place_line_centered",
    "place_ring",
    "place_arc",
    "relax_no_overlap",
    "RelaxStats",
    "clamp_to_bounds",
    "find_overlaps",
    "is_inside_bounds",
    "room_polygon",
    "footprint_polygon",
    "PlacedObject",
    "Target",
    "TargetGroups",
    "ArrangeResult",
]

__version__ = "0.1.0"
