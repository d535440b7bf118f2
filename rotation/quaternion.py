"""
quaternion.py
-------------
Rotation quaternion and its construction from Euler angles.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from rotation.euler import Euler, EulerOrder


@dataclass
class Quaternion:
    """Quaternion ``(x, y, z, w)``: vector part x, y, z and scalar part w.

    Defaults to the identity rotation. No operation renormalizes; callers
    that accumulate rotations must normalize themselves.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def set_from_euler(self, euler: Euler) -> Quaternion:
        """Set from Euler angles, honouring ``euler.order``.

        Each order combines the half-angle sines and cosines with its own
        sign pattern, matching the product of the three axis rotations in
        that order.
        """
        c1 = math.cos(euler.x / 2)
        c2 = math.cos(euler.y / 2)
        c3 = math.cos(euler.z / 2)
        s1 = math.sin(euler.x / 2)
        s2 = math.sin(euler.y / 2)
        s3 = math.sin(euler.z / 2)

        order = euler.order
        if order == EulerOrder.XYZ:
            self.x = s1 * c2 * c3 + c1 * s2 * s3
            self.y = c1 * s2 * c3 - s1 * c2 * s3
            self.z = c1 * c2 * s3 + s1 * s2 * c3
            self.w = c1 * c2 * c3 - s1 * s2 * s3
        elif order == EulerOrder.YXZ:
            self.x = s1 * c2 * c3 + c1 * s2 * s3
            self.y = c1 * s2 * c3 - s1 * c2 * s3
            self.z = c1 * c2 * s3 - s1 * s2 * c3
            self.w = c1 * c2 * c3 + s1 * s2 * s3
        elif order == EulerOrder.ZXY:
            self.x = s1 * c2 * c3 - c1 * s2 * s3
            self.y = c1 * s2 * c3 + s1 * c2 * s3
            self.z = c1 * c2 * s3 + s1 * s2 * c3
            self.w = c1 * c2 * c3 - s1 * s2 * s3
        elif order == EulerOrder.ZYX:
            self.x = s1 * c2 * c3 - c1 * s2 * s3
            self.y = c1 * s2 * c3 + s1 * c2 * s3
            self.z = c1 * c2 * s3 - s1 * s2 * c3
            self.w = c1 * c2 * c3 + s1 * s2 * s3
        elif order == EulerOrder.YZX:
            self.x = s1 * c2 * c3 + c1 * s2 * s3
            self.y = c1 * s2 * c3 + s1 * c2 * s3
            self.z = c1 * c2 * s3 - s1 * s2 * c3
            self.w = c1 * c2 * c3 - s1 * s2 * s3
        elif order == EulerOrder.XZY:
            self.x = s1 * c2 * c3 - c1 * s2 * s3
            self.y = c1 * s2 * c3 - s1 * c2 * s3
            self.z = c1 * c2 * s3 + s1 * s2 * c3
            self.w = c1 * c2 * c3 + s1 * s2 * s3
        return self

    def set(self, x: float, y: float, z: float, w: float) -> Quaternion:
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        return self

    def equal(self, source: Quaternion) -> bool:
        """Exact component equality (``q`` and ``-q`` compare unequal)."""
        return (self.x == source.x and self.y == source.y
                and self.z == source.z and self.w == source.w)

    def copy(self, source: Quaternion) -> Quaternion:
        return self.set(source.x, source.y, source.z, source.w)

    def clone(self) -> Quaternion:
        return Quaternion(self.x, self.y, self.z, self.w)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]
