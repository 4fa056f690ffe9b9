"""
arrange/scene_classes.py
------------------------
Lightweight records used by one arrangement pass.

Classes:
  - PlacedObject  : caller's view of a placed model (opaque identity + asset name + scale)
  - Target        : per-object working record mutated during layout
  - TargetGroups  : targets split by category, in input order
  - ArrangeResult : positions keyed by identity plus solver diagnostics
"""

from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from .footprint import Category


# -------------------------------------------------------------
# Input record
# -------------------------------------------------------------
class PlacedObject:
    """
    One object the caller wants arranged.
    identity is only used as a key; it is never inspected.
    """

    def __init__(self, identity: Hashable, asset_identity: str, scale: Sequence[float] = (1.0, 1.0, 1.0)):
        self.identity = identity
        self.asset_identity = asset_identity
        self.scale = tuple(float(s) for s in scale)

    def __repr__(self):
        return f"<PlacedObject {self.identity!r} asset={self.asset_identity!r} scale={self.scale}>"


# -------------------------------------------------------------
# Working record
# -------------------------------------------------------------
class Target:
    """
    Footprint being laid out.
    Attributes:
      identity : caller key
      category : Category, fixed for the pass
      radius   : footprint radius in meters, fixed for the pass
      x, z     : ground-plane position, refined in place
    """

    def __init__(self, identity, category: Category, radius: float, x: float = 0.0, z: float = 0.0):
        self.identity = identity
        self.category = category
        self.radius = radius
        self.x = x
        self.z = z

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.z)

    def distance_to(self, other: "Target") -> float:
        return ((other.x - self.x) ** 2 + (other.z - self.z) ** 2) ** 0.5

    def as_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "category": self.category.value,
            "radius": self.radius,
            "position": [self.x, self.z],
        }

    def __repr__(self):
        return f"<Target {self.identity!r} {self.category.value} r={self.radius:.2f} at ({self.x:.3f}, {self.z:.3f})>"


# -------------------------------------------------------------
# Category split
# -------------------------------------------------------------
class TargetGroups:
    """Targets partitioned by category; every group keeps input order."""

    def __init__(self, targets: List[Target]):
        self.all = targets
        self._groups: Dict[Category, List[Target]] = {c: [] for c in Category}
        for t in targets:
            self._groups[t.category].append(t)

    @property
    def couches(self) -> List[Target]:
        return self._groups[Category.COUCH]

    @property
    def tables(self) -> List[Target]:
        return self._groups[Category.TABLE]

    @property
    def chairs(self) -> List[Target]:
        return self._groups[Category.CHAIR]

    @property
    def others(self) -> List[Target]:
        return self._groups[Category.OTHER]

    def max_radius(self, category: Category, config) -> float:
        """Largest radius in the group, or the category's base radius when empty."""
        group = self._groups[category]
        if not group:
            return config.base_radii.get(category, config.base_radii[Category.OTHER])
        return max(t.radius for t in group)

    def __len__(self):
        return len(self.all)


# -------------------------------------------------------------
# Output
# -------------------------------------------------------------
class ArrangeResult:
    """
    Result of one arrangement request.
    positions maps identity -> (x, z) in input order.
    """

    def __init__(
        self,
        positions: Dict[Hashable, Tuple[float, float]],
        archetype,
        iterations: int = 0,
        converged: bool = True,
        residual_overlaps: Optional[List[Tuple[Hashable, Hashable]]] = None,
        targets: Optional[List[Target]] = None,
    ):
        self.positions = positions
        self.archetype = archetype
        self.iterations = iterations
        self.converged = converged
        self.residual_overlaps = residual_overlaps or []
        self.targets = targets or []

    @property
    def is_empty(self) -> bool:
        return not self.positions

    def as_dict(self) -> Dict[str, Any]:
        """Return JSON-compatible dictionary."""
        return {
            "archetype": self.archetype.value,
            "positions": {str(k): [x, z] for k, (x, z) in self.positions.items()},
            "iterations": self.iterations,
            "converged": self.converged,
            "residual_overlaps": [[str(a), str(b)] for a, b in self.residual_overlaps],
        }

    def __repr__(self):
        return f"<ArrangeResult {self.archetype.value} targets={len(self.positions)} converged={self.converged}>"
