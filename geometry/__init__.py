"""
geometry
--------
Bounding boxes and ray queries.
"""

from geometry.box3 import Box3
from geometry.ray import Ray

__all__ = ["Box3", "Ray"]
