"""
euler.py
--------
Euler angle rotations and their extraction from rotation matrices.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from vecmath.math_utils import clamp

if TYPE_CHECKING:
    from matrix_interface import Matrix4Like

# |sin| of the middle angle at or above which the decomposition treats the
# rotation as gimbal-locked.
GIMBAL_LOCK_THRESHOLD = 0.9999999


class EulerOrder(IntEnum):
    """Order in which the three axis rotations are applied."""
    XYZ = 0
    YZX = 1
    ZXY = 2
    XZY = 3
    YXZ = 4
    ZYX = 5


@dataclass
class Euler:
    """Three rotation angles in radians plus the order they compose in.

    Angles are stored as given; they are never wrapped into [-pi, pi].

    Attributes
    ----------
    x, y, z : float       Rotation about each axis, radians.
    order   : EulerOrder  One of the six axis permutations (default XYZ).
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    order: EulerOrder = EulerOrder.XYZ

    def __post_init__(self) -> None:
        self.order = _as_order(self.order)

    def set(self, x: float, y: float, z: float,
            order: Optional[EulerOrder] = None) -> Euler:
        """Set the angles, and the order when one is given."""
        self.x = x
        self.y = y
        self.z = z
        if order is not None:
            self.order = _as_order(order)
        return self

    def set_from_rotation_matrix(self, m: Matrix4Like) -> Euler:
        """Extract angles for the current order from the upper 3x3 of *m*.

        The 3x3 block must be a pure rotation (scale already divided out).
        The middle angle comes from ``asin`` of one element, clamped into
        [-1, 1]. When that element reaches the gimbal-lock threshold the
        two outer axes are aligned: one of them absorbs the whole
        remaining rotation and the other is set to 0.
        """
        te = m.to_array()
        m11, m12, m13 = te[0], te[4], te[8]
        m21, m22, m23 = te[1], te[5], te[9]
        m31, m32, m33 = te[2], te[6], te[10]

        order = self.order
        if order == EulerOrder.XYZ:
            self.y = math.asin(clamp(m13, -1.0, 1.0))
            if abs(m13) < GIMBAL_LOCK_THRESHOLD:
                self.x = math.atan2(-m23, m33)
                self.z = math.atan2(-m12, m11)
            else:
                self.x = math.atan2(m32, m22)
                self.z = 0.0
        elif order == EulerOrder.YXZ:
            self.x = math.asin(-clamp(m23, -1.0, 1.0))
            if abs(m23) < GIMBAL_LOCK_THRESHOLD:
                self.y = math.atan2(m13, m33)
                self.z = math.atan2(m21, m22)
            else:
                self.y = math.atan2(-m31, m11)
                self.z = 0.0
        elif order == EulerOrder.ZXY:
            self.x = math.asin(clamp(m32, -1.0, 1.0))
            if abs(m32) < GIMBAL_LOCK_THRESHOLD:
                self.y = math.atan2(-m31, m33)
                self.z = math.atan2(-m12, m22)
            else:
                self.y = 0.0
                self.z = math.atan2(m21, m11)
        elif order == EulerOrder.ZYX:
            self.y = math.asin(-clamp(m31, -1.0, 1.0))
            if abs(m31) < GIMBAL_LOCK_THRESHOLD:
                self.x = math.atan2(m32, m33)
                self.z = math.atan2(m21, m11)
            else:
                self.x = 0.0
                self.z = math.atan2(-m12, m22)
        elif order == EulerOrder.YZX:
            self.z = math.asin(clamp(m21, -1.0, 1.0))
            if abs(m21) < GIMBAL_LOCK_THRESHOLD:
                self.x = math.atan2(-m23, m22)
                self.y = math.atan2(-m31, m11)
            else:
                self.x = 0.0
                self.y = math.atan2(m13, m33)
        elif order == EulerOrder.XZY:
            self.z = math.asin(-clamp(m12, -1.0, 1.0))
            if abs(m12) < GIMBAL_LOCK_THRESHOLD:
                self.x = math.atan2(m32, m22)
                self.y = math.atan2(m13, m11)
            else:
                self.x = math.atan2(-m23, m33)
                self.y = 0.0
        return self

    def equal(self, euler: Euler) -> bool:
        return (self.x == euler.x and self.y == euler.y
                and self.z == euler.z and self.order == euler.order)

    def copy(self, source: Euler) -> Euler:
        return self.set(source.x, source.y, source.z, source.order)

    def clone(self) -> Euler:
        return Euler(self.x, self.y, self.z, self.order)

    def to_array(self) -> list[float]:
        """The three angles ``[x, y, z]``; the order is not included."""
        return [self.x, self.y, self.z]


def _as_order(order: int | str) -> EulerOrder:
    """Coerce an ``EulerOrder``, its integer value or its name ('XYZ', ...)."""
    try:
        if isinstance(order, str):
            return EulerOrder[order.upper()]
        return EulerOrder(order)
    except (KeyError, ValueError):
        raise ValueError(
            f"Invalid rotation order {order!r}, must be one of "
            f"{', '.join(o.name for o in EulerOrder)}"
        ) from None
