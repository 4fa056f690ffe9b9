"""
arrange/archetypes.py
---------------------
Room-type label -> layout archetype.

Rules are evaluated top to bottom and the first one whose keyword appears in
the lowercased label wins, so "Living Room / Office" is a living room.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict


class Archetype(str, Enum):
    LIVING = "living"
    DINING = "dining"
    WORK_REST = "work_rest"
    GENERIC = "generic"


class ArchetypeRule(BaseModel):
    """One keyword rule: any keyword contained in the label selects `archetype`."""

    model_config = ConfigDict(frozen=True)

    archetype: Archetype
    keywords: Tuple[str, ...]

    def matches(self, room_label: str) -> bool:
        label = room_label.lower()
        return any(k.lower() in label for k in self.keywords)


DEFAULT_RULES: Tuple[ArchetypeRule, ...] = (
    ArchetypeRule(archetype=Archetype.LIVING, keywords=("living", "hall", "lounge")),
    ArchetypeRule(archetype=Archetype.DINING, keywords=("kitchen", "dining")),
    ArchetypeRule(archetype=Archetype.WORK_REST, keywords=("office", "study", "bedroom")),
)

# Starter sets offered when the room is still empty.
DEFAULT_ASSETS = {
    Archetype.LIVING: ["Couch.glb", "Table.glb", "Chair.glb"],
    Archetype.DINING: ["Table.glb", "Chair.glb", "Chair.glb"],
    Archetype.WORK_REST: ["Table.glb", "Chair.glb"],
    Archetype.GENERIC: ["Table.glb", "Chair.glb", "Chair.glb"],
}


def select_archetype(
    room_label: Optional[str],
    rules: Sequence[ArchetypeRule] = DEFAULT_RULES,
) -> Archetype:
    """Pick the archetype for a free-text room label (Generic when nothing matches)."""
    label = room_label or ""
    for rule in rules:
        if rule.matches(label):
            return rule.archetype
    return Archetype.GENERIC


def default_assets(archetype: Archetype) -> List[str]:
    """Built-in asset names suggested for an empty room of this archetype."""
    return list(DEFAULT_ASSETS[archetype])
