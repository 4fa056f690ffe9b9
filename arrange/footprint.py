"""
arrange/footprint.py
--------------------
Maps a placed object's asset name to a furniture category and a circular
ground-plane footprint.

  • classify_asset   : "Leather_Sofa_01.glb" -> Category.COUCH
  • scale_factor     : average of the x/z scale components
  • footprint_radius : base radius * scale, clamped into [min, max]
"""

from enum import Enum
from typing import Optional, Sequence


class Category(str, Enum):
    COUCH = "couch"
    CHAIR = "chair"
    TABLE = "table"
    OTHER = "other"


BASE_RADII = {
    Category.CHAIR: 0.33,
    Category.TABLE: 0.55,
    Category.COUCH: 0.85,
    Category.OTHER: 0.45,
}

# Checked in order; the first keyword hit decides the category.
CATEGORY_KEYWORDS = (
    (Category.COUCH, ("couch", "sofa")),
    (Category.CHAIR, ("chair",)),
    (Category.TABLE, ("table",)),
)


def classify_asset(asset_identity: Optional[str]) -> Category:
    """Return the furniture category for an asset filename or path."""
    name = (asset_identity or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in name for k in keywords):
            return category
    return Category.OTHER


def scale_factor(scale: Sequence[float]) -> float:
    """Ground-plane scale of an (sx, sy, sz) triple."""
    return (float(scale[0]) + float(scale[2])) / 2.0


def footprint_radius(category: Category, scale: Sequence[float], config) -> float:
    """
    Effective footprint radius in meters.
    config supplies base_radii, min_radius and max_radius.
    """
    base = config.base_radii.get(category, config.base_radii[Category.OTHER])
    radius = base * scale_factor(scale)
    return max(config.min_radius, min(radius, config.max_radius))
