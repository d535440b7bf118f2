"""
vector3.py
----------
Mutable 3D vector used for positions, directions and scales.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from matrix_interface import Matrix4Like


@dataclass
class Vector3:
    """3D vector with in-place, chainable arithmetic.

    Every mutator updates the vector and returns it, so calls can be
    chained: ``v.copy(a).subtract(b).unit()``.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> Vector3:
        self.x = x
        self.y = y
        self.z = z
        return self

    def set_x(self, x: float) -> Vector3:
        self.x = x
        return self

    def set_y(self, y: float) -> Vector3:
        self.y = y
        return self

    def set_z(self, z: float) -> Vector3:
        self.z = z
        return self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance_to(self, vector: Vector3) -> float:
        return math.sqrt(self.distance_to_squared(vector))

    def distance_to_squared(self, vector: Vector3) -> float:
        dx = vector.x - self.x
        dy = vector.y - self.y
        dz = vector.z - self.z
        return dx * dx + dy * dy + dz * dz

    def transform_direction(self, matrix: Matrix4Like) -> Vector3:
        """Apply the linear part of *matrix* (no translation) and re-normalize."""
        x, y, z = self.x, self.y, self.z
        e = matrix.to_array()
        self.x = e[0] * x + e[4] * y + e[8] * z
        self.y = e[1] * x + e[5] * y + e[9] * z
        self.z = e[2] * x + e[6] * y + e[10] * z
        return self.unit()

    def apply_matrix4(self, matrix: Matrix4Like) -> Vector3:
        """Transform this point by *matrix*, including the perspective divide.

        A point with homogeneous w of 0 (on the camera plane of a
        projection) comes out with inf/nan components instead of raising.
        """
        x, y, z = self.x, self.y, self.z
        e = matrix.to_array()
        with np.errstate(divide="ignore", invalid="ignore"):
            w = np.float64(1.0) / (e[3] * x + e[7] * y + e[11] * z + e[15])
            self.x = float((e[0] * x + e[4] * y + e[8] * z + e[12]) * w)
            self.y = float((e[1] * x + e[5] * y + e[9] * z + e[13]) * w)
            self.z = float((e[2] * x + e[6] * y + e[10] * z + e[14]) * w)
        return self

    def multiply_scalar(self, num: float) -> Vector3:
        self.x *= num
        self.y *= num
        self.z *= num
        return self

    def divide_scalar(self, num: float) -> Vector3:
        self.x /= num
        self.y /= num
        self.z /= num
        return self

    def add(self, vector: Vector3) -> Vector3:
        self.x += vector.x
        self.y += vector.y
        self.z += vector.z
        return self

    def subtract(self, vector: Vector3) -> Vector3:
        self.x -= vector.x
        self.y -= vector.y
        self.z -= vector.z
        return self

    def multiply(self, vector: Vector3) -> Vector3:
        """Component-wise product."""
        self.x *= vector.x
        self.y *= vector.y
        self.z *= vector.z
        return self

    def divide(self, vector: Vector3) -> Vector3:
        """Component-wise quotient."""
        self.x /= vector.x
        self.y /= vector.y
        self.z /= vector.z
        return self

    def unit(self) -> Vector3:
        """Scale to length 1. A zero vector is left as it is."""
        length = self.length() or 1.0
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def dot(self, vector: Vector3) -> float:
        return self.x * vector.x + self.y * vector.y + self.z * vector.z

    def cross(self, vector: Vector3) -> Vector3:
        """Replace this vector with ``self x vector``."""
        return self.cross_vectors(self, vector)

    def cross_vectors(self, a: Vector3, b: Vector3) -> Vector3:
        """Set this vector to ``a x b``. Either operand may be ``self``."""
        ax, ay, az = a.x, a.y, a.z
        bx, by, bz = b.x, b.y, b.z
        self.x = ay * bz - az * by
        self.y = az * bx - ax * bz
        self.z = ax * by - ay * bx
        return self

    def rotate(self, angle: float, axis: Vector3) -> Vector3:
        """Rotate by *angle* radians about the unit vector *axis* (Rodrigues)."""
        u, v, w = self.x, self.y, self.z
        x, y, z = axis.x, axis.y, axis.z
        sin = math.sin(angle)
        cos = math.cos(angle)
        m = (x * u + y * v + z * w) * (1.0 - cos)

        self.x = u * cos + (y * w - z * v) * sin + x * m
        self.y = v * cos + (z * u - x * w) * sin + y * m
        self.z = w * cos + (x * v - y * u) * sin + z * m
        return self

    def equal(self, vector: Vector3) -> bool:
        return self.x == vector.x and self.y == vector.y and self.z == vector.z

    def copy(self, source: Vector3) -> Vector3:
        return self.set(source.x, source.y, source.z)

    def clone(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]
