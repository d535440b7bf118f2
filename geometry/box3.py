"""
box3.py
-------
Axis-aligned bounding box.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from vecmath.vector3 import Vector3


@dataclass
class Box3:
    """Axis-aligned box spanned by its *min* and *max* corners.

    ``min <= max`` per component is assumed, not enforced. The corner
    vectors passed to the constructor are kept by reference.
    """
    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)

    def set(self, min_corner: Vector3, max_corner: Vector3) -> Box3:
        """Copy the given corners into this box's own corner vectors."""
        self.min.copy(min_corner)
        self.max.copy(max_corner)
        return self

    def copy(self, box: Box3) -> Box3:
        return self.set(box.min, box.max)

    def clone(self) -> Box3:
        return Box3().copy(self)

    def equal(self, box: Box3) -> bool:
        return self.min.equal(box.min) and self.max.equal(box.max)

    def expand_by_number(self, num: float) -> Box3:
        """Grow the box by *num* on every side."""
        return self.expand_by_vector(Vector3(num, num, num))

    def expand_by_vector(self, vector: Vector3) -> Box3:
        """Grow the box by ``vector.x`` along x on both sides, and so on."""
        self.min.subtract(vector)
        self.max.add(vector)
        return self
