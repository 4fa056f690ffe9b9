"""
arrange/relax_solver.py
-----------------------
Pairwise repulsion pass that pushes overlapping footprints apart.

Each sweep visits every unordered pair (i < j) in input order. When two
circles are closer than ra + rb + gap, both move half of the damped
shortfall along the line joining them, in opposite directions. Positions
are updated as soon as a pair is handled, so later pairs in the same sweep
see the new positions.

This is an approximate solver: dense layouts can run out of sweeps with
small overlaps left. That outcome is reported, never raised.
"""

import math
from typing import List

from common.io_utils import log
from .scene_classes import Target

MIN_DISTANCE = 0.0001
# Shortfalls at or below this count as touching.
OVERLAP_EPSILON = 1e-9


class RelaxStats:
    def __init__(self, iterations: int, converged: bool):
        self.iterations = iterations
        self.converged = converged

    def __repr__(self):
        return f"<RelaxStats iterations={self.iterations} converged={self.converged}>"


def _separation_axis(a: Target, b: Target):
    """Unit vector from a to b, plus the floored distance between them."""
    dx = b.x - a.x
    dz = b.z - a.z
    dist = math.sqrt(dx * dx + dz * dz)
    if dist == 0.0:
        # Coincident centers: split along +x so the pair can separate.
        return 1.0, 0.0, MIN_DISTANCE
    dist = max(dist, MIN_DISTANCE)
    return dx / dist, dz / dist, dist


def relax_sweep(items: List[Target], gap: float, damping: float) -> bool:
    """Run one sweep over all pairs. Returns True if anything moved."""
    moved_any = False
    for i in range(len(items)):
        a = items[i]
        for j in range(i + 1, len(items)):
            b = items[j]
            nx, nz, dist = _separation_axis(a, b)
            min_dist = a.radius + b.radius + gap
            if min_dist - dist > OVERLAP_EPSILON:
                push = (min_dist - dist) * 0.5 * damping
                a.x -= nx * push
                a.z -= nz * push
                b.x += nx * push
                b.z += nz * push
                moved_any = True
    return moved_any


def relax_no_overlap(items: List[Target], config) -> RelaxStats:
    """
    Relax items in place until a sweep moves nothing or config.iterations
    sweeps have run.
    """
    if len(items) < 2:
        return RelaxStats(iterations=0, converged=True)

    for sweep in range(config.iterations):
        moved = relax_sweep(items, config.gap_meters, config.damping)
        if sweep % 20 == 0:
            log(f"Relax sweep {sweep:03d} | moved={moved}", "DEBUG")
        if not moved:
            log(f"Relaxation settled after {sweep + 1} sweeps ({len(items)} targets)", "DEBUG")
            return RelaxStats(iterations=sweep + 1, converged=True)

    log(f"Relaxation hit the {config.iterations}-sweep budget with {len(items)} targets", "WARNING")
    return RelaxStats(iterations=config.iterations, converged=False)
