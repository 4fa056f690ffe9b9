"""
arrange/strategies.py
---------------------
Initial-position generators. Each one writes x/z onto the targets it is
given, in order, and does nothing for an empty list.

Ground-plane convention: x is left/right, z is depth with "forward"
(away from the viewer) being -z.
"""

import math
from typing import List

import numpy as np

from .scene_classes import Target


def place_line_centered(items: List[Target], z: float, spacing: float, start_x: float = 0.0) -> None:
    """Evenly spaced along x at depth z, centered on start_x."""
    if not items:
        return
    n = len(items)
    left = start_x - (n - 1) * spacing / 2.0
    for i, t in enumerate(items):
        t.x = left + i * spacing
        t.z = z


def place_ring(items: List[Target], center_x: float, center_z: float, ring_radius: float) -> None:
    """Evenly around a full circle; item 0 sits at angle 0 (+z from the center)."""
    if not items:
        return
    n = len(items)
    angles = 2.0 * math.pi * np.arange(n) / n
    xs = center_x + np.sin(angles) * ring_radius
    zs = center_z + np.cos(angles) * ring_radius
    for t, x, z in zip(items, xs, zs):
        t.x = float(x)
        t.z = float(z)


def place_arc(
    items: List[Target],
    center_x: float,
    center_z: float,
    radius: float,
    spread_degrees: float = 80.0,
) -> None:
    """
    Evenly along an arc of spread_degrees facing forward (-z).
    A single item goes straight ahead of the center.
    """
    if not items:
        return
    n = len(items)
    if n == 1:
        angles = np.zeros(1)
    else:
        spread = math.radians(spread_degrees)
        angles = -spread / 2.0 + np.arange(n) * (spread / (n - 1))
    xs = center_x + np.sin(angles) * radius
    zs = center_z - np.cos(angles) * radius
    for t, x, z in zip(items, xs, zs):
        t.x = float(x)
        t.z = float(z)
