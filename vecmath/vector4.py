"""
vector4.py
----------
Mutable 4D vector for homogeneous coordinates (points with w=1,
directions with w=0).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matrix_interface import Matrix4Like


@dataclass
class Vector4:
    """4D vector with in-place, chainable arithmetic."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def set(self, x: float, y: float, z: float, w: float) -> Vector4:
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        return self

    def set_x(self, x: float) -> Vector4:
        self.x = x
        return self

    def set_y(self, y: float) -> Vector4:
        self.y = y
        return self

    def set_z(self, z: float) -> Vector4:
        self.z = z
        return self

    def set_w(self, w: float) -> Vector4:
        self.w = w
        return self

    def apply_matrix4(self, matrix: Matrix4Like) -> Vector4:
        """Full homogeneous product ``matrix * self`` (no divide)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        e = matrix.to_array()
        self.x = e[0] * x + e[4] * y + e[8] * z + e[12] * w
        self.y = e[1] * x + e[5] * y + e[9] * z + e[13] * w
        self.z = e[2] * x + e[6] * y + e[10] * z + e[14] * w
        self.w = e[3] * x + e[7] * y + e[11] * z + e[15] * w
        return self

    def add(self, vector: Vector4) -> Vector4:
        self.x += vector.x
        self.y += vector.y
        self.z += vector.z
        self.w += vector.w
        return self

    def subtract(self, vector: Vector4) -> Vector4:
        self.x -= vector.x
        self.y -= vector.y
        self.z -= vector.z
        self.w -= vector.w
        return self

    def multiply(self, vector: Vector4) -> Vector4:
        self.x *= vector.x
        self.y *= vector.y
        self.z *= vector.z
        self.w *= vector.w
        return self

    def divide(self, vector: Vector4) -> Vector4:
        self.x /= vector.x
        self.y /= vector.y
        self.z /= vector.z
        self.w /= vector.w
        return self

    def multiply_scalar(self, num: float) -> Vector4:
        self.x *= num
        self.y *= num
        self.z *= num
        self.w *= num
        return self

    def divide_scalar(self, num: float) -> Vector4:
        self.x /= num
        self.y /= num
        self.z /= num
        self.w /= num
        return self

    def unit(self) -> Vector4:
        """Scale to length 1.

        Unlike Vector2 and Vector3 there is no zero-length guard here:
        a zero vector raises ``ZeroDivisionError``.
        """
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length
        self.w /= length
        return self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def equal(self, vector: Vector4) -> bool:
        return (self.x == vector.x and self.y == vector.y
                and self.z == vector.z and self.w == vector.w)

    def copy(self, source: Vector4) -> Vector4:
        return self.set(source.x, source.y, source.z, source.w)

    def clone(self) -> Vector4:
        return Vector4(self.x, self.y, self.z, self.w)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]
