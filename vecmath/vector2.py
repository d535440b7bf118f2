"""
vector2.py
----------
Mutable 2D vector for screen and texture coordinates.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from vecmath.math_utils import clamp


@dataclass
class Vector2:
    """2D vector with in-place, chainable arithmetic."""
    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def set_x(self, x: float) -> Vector2:
        self.x = x
        return self

    def set_y(self, y: float) -> Vector2:
        self.y = y
        return self

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, vector: Vector2) -> float:
        return math.sqrt(self.distance_to_squared(vector))

    def distance_to_squared(self, vector: Vector2) -> float:
        dx = vector.x - self.x
        dy = vector.y - self.y
        return dx * dx + dy * dy

    def multiply_scalar(self, num: float) -> Vector2:
        self.x *= num
        self.y *= num
        return self

    def divide_scalar(self, num: float) -> Vector2:
        self.x /= num
        self.y /= num
        return self

    def add(self, vector: Vector2) -> Vector2:
        self.x += vector.x
        self.y += vector.y
        return self

    def subtract(self, vector: Vector2) -> Vector2:
        self.x -= vector.x
        self.y -= vector.y
        return self

    def multiply(self, vector: Vector2) -> Vector2:
        self.x *= vector.x
        self.y *= vector.y
        return self

    def divide(self, vector: Vector2) -> Vector2:
        self.x /= vector.x
        self.y /= vector.y
        return self

    def angle_to(self, vector: Vector2) -> float:
        """Signed angle in radians from this vector to *vector*.

        Positive when *vector* lies counter-clockwise of this one; 0 when
        either vector has zero length.
        """
        m = self.length() * vector.length()
        if m == 0:
            return 0.0
        cos = clamp((self.x * vector.x + self.y * vector.y) / m, -1.0, 1.0)
        side = -1.0 if self.cross(vector) < 0 else 1.0
        return side * math.acos(cos)

    def normal(self) -> Vector2:
        """Turn into the clockwise perpendicular ``(y, -x)``."""
        self.x, self.y = self.y, -self.x
        return self

    def unit(self) -> Vector2:
        length = self.length() or 1.0
        self.x /= length
        self.y /= length
        return self

    def dot(self, vector: Vector2) -> float:
        return self.x * vector.x + self.y * vector.y

    def cross(self, vector: Vector2) -> float:
        """Z component of the 3D cross product (a scalar in 2D)."""
        return self.x * vector.y - vector.x * self.y

    def rotate(self, angle: float) -> Vector2:
        sin = math.sin(angle)
        cos = math.cos(angle)
        self.x, self.y = cos * self.x - sin * self.y, sin * self.x + cos * self.y
        return self

    def equal(self, vector: Vector2) -> bool:
        return self.x == vector.x and self.y == vector.y

    def copy(self, source: Vector2) -> Vector2:
        return self.set(source.x, source.y)

    def clone(self) -> Vector2:
        return Vector2(self.x, self.y)

    def to_array(self) -> list[float]:
        return [self.x, self.y]
