"""
arrange/constraints.py
----------------------
Room-bounds clamping and geometric checks on arranged targets.

Used for:
  • Final clamp of every target into the room rectangle
  • Residual overlap detection after relaxation
  • Shapely shapes for previews and debugging
"""

from typing import List, Tuple

import numpy as np
from shapely.geometry import Point, box

from .relax_solver import OVERLAP_EPSILON
from .scene_classes import Target


# -------------------------------------------------------------
# Bounds
# -------------------------------------------------------------
def clamp_to_bounds(targets: List[Target], config) -> None:
    """Clamp x into [min_x, max_x] and z into [min_z, max_z], in place."""
    for t in targets:
        t.x = max(config.min_x, min(t.x, config.max_x))
        t.z = max(config.min_z, min(t.z, config.max_z))


def room_polygon(config):
    """Shapely rectangle of the usable room area (x -> x, z -> y)."""
    return box(config.min_x, config.min_z, config.max_x, config.max_z)


def is_inside_bounds(x: float, z: float, config) -> bool:
    """True if (x, z) lies inside or on the room rectangle."""
    return room_polygon(config).covers(Point(x, z))


def footprint_polygon(target: Target, resolution: int = 16):
    """Circular footprint as a shapely polygon."""
    return Point(target.x, target.z).buffer(target.radius, resolution)


# -------------------------------------------------------------
# Overlap checks
# -------------------------------------------------------------
def pairwise_distances(targets: List[Target]) -> np.ndarray:
    """(N, N) matrix of center-to-center distances."""
    pts = np.array([[t.x, t.z] for t in targets], dtype=np.float64).reshape(-1, 2)
    diff = pts[:, None, :] - pts[None, :, :]
    return np.linalg.norm(diff, axis=-1)


def find_overlaps(targets: List[Target], gap: float) -> List[Tuple[int, int]]:
    """
    Index pairs (i, j), i < j, whose centers are closer than
    radius_i + radius_j + gap.
    """
    if len(targets) < 2:
        return []
    dist = pairwise_distances(targets)
    radii = np.array([t.radius for t in targets], dtype=np.float64)
    required = radii[:, None] + radii[None, :] + gap
    shortfall = np.triu(required - dist, k=1)
    rows, cols = np.nonzero(shortfall > OVERLAP_EPSILON)
    return [(int(i), int(j)) for i, j in zip(rows, cols)]
