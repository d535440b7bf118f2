"""
transform
---------
4x4 transform and projection matrices.

Re-exports Matrix4 so callers can write::

    from transform import Matrix4
"""

from transform.matrix4 import Matrix4, PlaneEquation

__all__ = ["Matrix4", "PlaneEquation"]
