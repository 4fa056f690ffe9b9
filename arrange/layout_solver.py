"""
arrange/layout_solver.py
------------------------
High-level entrypoint that arranges placed furniture for a room label.

Responsibilities:
  • Turn caller records into Targets (category + footprint radius)
  • Pick the room archetype and apply its placement recipe
  • Relax overlaps, then clamp everything into the room bounds
  • Return identity -> (x, z) ground positions

Pure and synchronous: nothing outside the call's own Targets is mutated.
Callers keep ownership of their objects and of y / rotation.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from common.io_utils import log
from .archetypes import Archetype, select_archetype
from .config import DEFAULT_CONFIG, LayoutConfig
from .constraints import clamp_to_bounds, find_overlaps
from .footprint import Category, classify_asset, footprint_radius
from .relax_solver import relax_no_overlap
from .scene_classes import ArrangeResult, PlacedObject, Target, TargetGroups
from .strategies import place_arc, place_line_centered, place_ring


# -------------------------------------------------------------
# Target construction
# -------------------------------------------------------------
def build_targets(objects: Iterable[PlacedObject], config: LayoutConfig) -> List[Target]:
    """One Target per object, at the provisional position."""
    targets = []
    for obj in objects:
        category = classify_asset(obj.asset_identity)
        targets.append(Target(
            identity=obj.identity,
            category=category,
            radius=footprint_radius(category, obj.scale, config),
            x=config.provisional_x,
            z=config.provisional_z,
        ))
    return targets


# -------------------------------------------------------------
# Archetype recipes
# -------------------------------------------------------------
def apply_recipe(archetype: Archetype, groups: TargetGroups, config: LayoutConfig) -> None:
    """Assign initial positions per category group for the given archetype."""
    gap = config.gap_meters
    table_r = groups.max_radius(Category.TABLE, config)
    chair_r = groups.max_radius(Category.CHAIR, config)
    couch_r = groups.max_radius(Category.COUCH, config)

    if archetype == Archetype.LIVING:
        place_line_centered(groups.tables, z=-1.7, spacing=table_r * 2 + gap)
        couch_z = -1.7 - (table_r + couch_r + 0.45)
        place_line_centered(groups.couches, z=couch_z, spacing=couch_r * 2 + 0.35)
        place_ring(groups.chairs, 0.0, -1.7, table_r + chair_r + 0.55)
        place_arc(groups.others, 1.0, -1.9, 1.25)
    elif archetype == Archetype.DINING:
        place_line_centered(groups.tables, z=-1.7, spacing=table_r * 2 + gap)
        place_ring(groups.chairs, 0.0, -1.7, table_r + chair_r + 0.55)
        place_arc(groups.others, 1.0, -2.0, 1.25)
    elif archetype == Archetype.WORK_REST:
        place_line_centered(groups.tables, z=-1.6, spacing=table_r * 2 + gap)
        place_line_centered(groups.chairs, z=-1.1, spacing=chair_r * 2 + gap)
        place_arc(groups.others, -1.0, -2.0, 1.2)
    else:
        place_arc(groups.all, 0.0, -1.7, 1.6)


# -------------------------------------------------------------
# Main entrypoint
# -------------------------------------------------------------
def arrange_objects(
    room_label: Optional[str],
    objects: Iterable[PlacedObject],
    config: Optional[LayoutConfig] = None,
) -> ArrangeResult:
    """
    Arrange objects for a room label.

    Never raises for unknown labels or assets, empty input or an unsettled
    relaxation; the result always carries a clamped position per object.
    """
    config = config or DEFAULT_CONFIG
    archetype = select_archetype(room_label, config.archetype_rules)
    targets = build_targets(objects, config)

    if not targets:
        log("Nothing to arrange", "INFO")
        return ArrangeResult(positions={}, archetype=archetype)

    groups = TargetGroups(targets)
    log(f"Arranging {len(targets)} objects as '{archetype.value}' for room label {room_label!r}", "INFO")

    apply_recipe(archetype, groups, config)
    stats = relax_no_overlap(targets, config)
    clamp_to_bounds(targets, config)

    residual = [
        (targets[i].identity, targets[j].identity)
        for i, j in find_overlaps(targets, config.gap_meters)
    ]
    if residual:
        log(f"{len(residual)} footprint pairs still overlap after arranging", "WARNING")

    positions: Dict[Hashable, Tuple[float, float]] = {t.identity: (t.x, t.z) for t in targets}
    return ArrangeResult(
        positions=positions,
        archetype=archetype,
        iterations=stats.iterations,
        converged=stats.converged,
        residual_overlaps=residual,
        targets=targets,
    )


def arrange_positions(
    room_label: Optional[str],
    objects: Iterable[PlacedObject],
    config: Optional[LayoutConfig] = None,
) -> Dict[Hashable, Tuple[float, float]]:
    """identity -> (x, z) only."""
    return arrange_objects(room_label, objects, config).positions
