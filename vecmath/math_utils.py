"""
math_utils.py
-------------
Scalar helpers shared by the vector, rotation and geometry packages.
"""
from __future__ import annotations

import functools
import uuid
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_UINT32 = 0xFFFFFFFF


def clamp(num: float, min_value: float, max_value: float) -> float:
    """Restrict *num* to ``[min_value, max_value]``."""
    if num < min_value:
        return min_value
    if num > max_value:
        return max_value
    return num


def _imul(a: int, b: int) -> int:
    """32-bit wrapping integer multiply, result as an unsigned int."""
    return (a * b) & _UINT32


def hash_code(text: str, seed: int = 0) -> int:
    """53-bit string hash (cyrb53).

    Characters are mixed as UTF-16 code units so the result matches the
    same hash computed by browser-side code for the same string.
    """
    h1 = (0xDEADBEEF ^ seed) & _UINT32
    h2 = (0x41C6CE57 ^ seed) & _UINT32
    units = text.encode("utf-16-le")
    for i in range(0, len(units), 2):
        ch = units[i] | (units[i + 1] << 8)
        h1 = _imul(h1 ^ ch, 2654435761)
        h2 = _imul(h2 ^ ch, 1597334677)
    h1 = _imul(h1 ^ (h1 >> 16), 2246822507)
    h1 ^= _imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = _imul(h2 ^ (h2 >> 16), 2246822507)
    h2 ^= _imul(h1 ^ (h1 >> 13), 3266489909)

    return 4294967296 * (0x1FFFFF & h2) + h1


def generate_uuid() -> str:
    """Random RFC 4122 version-4 UUID as a lower-case string."""
    return str(uuid.uuid4())


def smoothstep(x: float, min_value: float, max_value: float) -> float:
    """Hermite interpolation of *x* between the two edges, in ``[0, 1]``."""
    if x <= min_value:
        return 0.0
    if x >= max_value:
        return 1.0
    t = (x - min_value) / (max_value - min_value)
    return t * t * (3.0 - 2.0 * t)


def merge_sort(items: list[T], compare: Callable[[T, T], float]) -> None:
    """Sort *items* in place with a three-way *compare* callback.

    The sort is stable: items comparing equal keep their input order.
    """
    items.sort(key=functools.cmp_to_key(compare))


def is_clockwise(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> bool:
    """True if the turn ``p1 -> p2 -> p3`` is clockwise (y axis up)."""
    v1x, v1y = p2[0] - p1[0], p2[1] - p1[1]
    v2x, v2y = p3[0] - p2[0], p3[1] - p2[1]
    return v1x * v2y - v2x * v1y < 0


def is_clockwise_ring(ring: Sequence[Sequence[float]]) -> bool:
    """True if the closed polygon *ring* winds clockwise (shoelace sign)."""
    area = 0.0
    for i, p1 in enumerate(ring):
        p2 = ring[(i + 1) % len(ring)]
        area += (p2[0] - p1[0]) * (p2[1] + p1[1])
    return area > 0
