"""
vecmath
-------
Vector, color and scalar primitives.

Re-exports the main classes so callers can write::

    from vecmath import Vector3, Color
"""

from vecmath.color import Color
from vecmath.vector2 import Vector2
from vecmath.vector3 import Vector3
from vecmath.vector4 import Vector4

__all__ = ["Vector2", "Vector3", "Vector4", "Color"]
