"""
matrix_interface.py
-------------------
Protocol interface for 4x4 matrices.

Vectors and Euler angles only need to read a matrix, never build one, so
they depend on this protocol instead of importing Matrix4:
  - to_array(): the 16 matrix values in column-major order
"""
from __future__ import annotations

from typing import Protocol


class Matrix4Like(Protocol):
    """Protocol for anything that can be read as a column-major 4x4 matrix.

    Element ``i`` of the returned sequence is row ``i % 4``, column
    ``i // 4``; the translation lives in elements 12, 13 and 14.
    """

    def to_array(self) -> list[float]:
        """Return the 16 matrix values in column-major order."""
        ...
