"""
ray.py
------
Half-line geometry: point queries, closest distances and intersection
tests against boxes and triangles.

Queries that can miss return ``None`` instead of raising. Every method
works on call-local temporaries, so a Ray can be used from several
threads or re-entered from a callback without shared scratch state.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from geometry.box3 import Box3
from vecmath.vector3 import Vector3

if TYPE_CHECKING:
    from matrix_interface import Matrix4Like


def _slab(lo: float, hi: float, origin: float, inv_dir: np.float64) -> tuple[np.float64, np.float64]:
    """Entry and exit distances of the ray across one pair of box planes."""
    if inv_dir >= 0:
        return (lo - origin) * inv_dir, (hi - origin) * inv_dir
    return (hi - origin) * inv_dir, (lo - origin) * inv_dir


@dataclass
class Ray:
    """Ray ``origin + t * direction`` for ``t >= 0``.

    *origin* and *direction* are held by reference: the vectors passed in
    are the ones that ``look_at``, ``recast`` and ``apply_matrix4`` later
    modify. ``copy`` and ``clone`` copy values instead.
    """
    origin: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)

    def set(self, origin: Vector3, direction: Vector3) -> Ray:
        self.origin = origin
        self.direction = direction
        return self

    def at(self, t: float, target: Optional[Vector3] = None) -> Vector3:
        """Point at parameter *t*, written into *target* when one is given."""
        if target is None:
            target = Vector3()
        return target.copy(self.direction).multiply_scalar(t).add(self.origin)

    def look_at(self, v: Vector3) -> Ray:
        """Point the direction from the origin towards *v* (normalized)."""
        self.direction.copy(v).subtract(self.origin).unit()
        return self

    def recast(self, t: float) -> Ray:
        """Move the origin to the point at parameter *t*."""
        self.origin.copy(self.at(t))
        return self

    def closest_point_to_point(self, point: Vector3,
                               target: Optional[Vector3] = None) -> Vector3:
        """Point on the ray nearest to *point*.

        Points behind the origin map to the origin itself.
        """
        if target is None:
            target = Vector3()
        direction_distance = target.copy(point).subtract(self.origin).dot(self.direction)
        if direction_distance < 0:
            return target.copy(self.origin)
        return target.copy(self.direction).multiply_scalar(direction_distance).add(self.origin)

    def distance_sq_to_point(self, point: Vector3) -> float:
        return self.closest_point_to_point(point).distance_to_squared(point)

    def distance_to_point(self, point: Vector3) -> float:
        return math.sqrt(self.distance_sq_to_point(point))

    def distance_sq_to_segment(self, v0: Vector3, v1: Vector3,
                               point_on_ray: Optional[Vector3] = None,
                               point_on_segment: Optional[Vector3] = None) -> float:
        """Squared distance between the ray and the segment ``v0``-``v1``.

        The segment is parametrised about its centre as
        ``center + s1 * seg_dir`` with ``|s1| <= extent``, the ray as
        ``origin + s0 * direction`` with ``s0 >= 0``. The unconstrained
        minimiser ``(s0, s1)`` is classified into one of the regions of
        that parameter rectangle and clamped onto the boundary where it
        falls outside. A parallel ray and segment are handled separately.

        When given, *point_on_ray* and *point_on_segment* receive the two
        closest points.
        """
        seg_center = v0.clone().add(v1).multiply_scalar(0.5)
        seg_dir = v1.clone().subtract(v0).unit()
        diff = self.origin.clone().subtract(seg_center)

        seg_extent = v0.distance_to(v1) * 0.5
        a01 = -self.direction.dot(seg_dir)
        b0 = diff.dot(self.direction)
        b1 = -diff.dot(seg_dir)
        c = diff.length_squared()
        det = abs(1 - a01 * a01)

        if det > 0:
            s0 = a01 * b1 - b0
            s1 = a01 * b0 - b1
            ext_det = seg_extent * det

            if s0 >= 0:
                if s1 >= -ext_det:
                    if s1 <= ext_det:
                        # Interior: both closest points are unconstrained.
                        inv_det = 1 / det
                        s0 *= inv_det
                        s1 *= inv_det
                        sqr_dist = (s0 * (s0 + a01 * s1 + 2 * b0)
                                    + s1 * (a01 * s0 + s1 + 2 * b1) + c)
                    else:
                        s1 = seg_extent
                        s0 = max(0.0, -(a01 * s1 + b0))
                        sqr_dist = -s0 * s0 + s1 * (s1 + 2 * b1) + c
                else:
                    s1 = -seg_extent
                    s0 = max(0.0, -(a01 * s1 + b0))
                    sqr_dist = -s0 * s0 + s1 * (s1 + 2 * b1) + c
            elif s1 <= -ext_det:
                s0 = max(0.0, -(-a01 * seg_extent + b0))
                if s0 > 0:
                    s1 = -seg_extent
                else:
                    s1 = min(max(-seg_extent, -b1), seg_extent)
                sqr_dist = -s0 * s0 + s1 * (s1 + 2 * b1) + c
            elif s1 <= ext_det:
                s0 = 0.0
                s1 = min(max(-seg_extent, -b1), seg_extent)
                sqr_dist = s1 * (s1 + 2 * b1) + c
            else:
                s0 = max(0.0, -(a01 * seg_extent + b0))
                if s0 > 0:
                    s1 = seg_extent
                else:
                    s1 = min(max(-seg_extent, -b1), seg_extent)
                sqr_dist = -s0 * s0 + s1 * (s1 + 2 * b1) + c
        else:
            # Parallel: pick the segment end the ray is heading towards.
            s1 = -seg_extent if a01 > 0 else seg_extent
            s0 = max(0.0, -(a01 * s1 + b0))
            sqr_dist = -s0 * s0 + s1 * (s1 + 2 * b1) + c

        if point_on_ray is not None:
            self.at(s0, point_on_ray)
        if point_on_segment is not None:
            point_on_segment.copy(seg_dir).multiply_scalar(s1).add(seg_center)

        return sqr_dist

    def intersect_box(self, box: Box3) -> Optional[Vector3]:
        """Nearest point where the ray meets *box* (slab method), or None.

        A ray starting inside the box returns its exit point. Zero
        direction components are divided through as IEEE floats: the
        resulting infinities, and the NaNs from ``0 * inf``, fail every
        comparison and so drop out of the interval tests.
        """
        origin = self.origin
        with np.errstate(divide="ignore", invalid="ignore"):
            inv_x = np.float64(1.0) / self.direction.x
            inv_y = np.float64(1.0) / self.direction.y
            inv_z = np.float64(1.0) / self.direction.z

            tmin, tmax = _slab(box.min.x, box.max.x, origin.x, inv_x)
            tymin, tymax = _slab(box.min.y, box.max.y, origin.y, inv_y)

            if tmin > tymax or tymin > tmax:
                return None
            if tymin > tmin:
                tmin = tymin
            if tymax < tmax:
                tmax = tymax

            tzmin, tzmax = _slab(box.min.z, box.max.z, origin.z, inv_z)

            if tmin > tzmax or tzmin > tmax:
                return None
            if tzmin > tmin:
                tmin = tzmin
            if tzmax < tmax:
                tmax = tzmax

        # Box entirely behind the origin.
        if tmax < 0:
            return None

        return self.at(float(tmin if tmin >= 0 else tmax))

    def intersect_triangle(self, a: Vector3, b: Vector3, c: Vector3,
                           backface_culling: bool = False) -> Optional[Vector3]:
        """Point where the ray crosses triangle ``a, b, c``, or None.

        Solves ``Q + t*D = b1*E1 + b2*E2`` (Q = origin - a, D = direction,
        E1 = b - a, E2 = c - a, N = E1 x E2) using
        ``|D.N| * b1 = sign(D.N) * D.(Q x E2)``,
        ``|D.N| * b2 = sign(D.N) * D.(E1 x Q)`` and
        ``|D.N| * t = -sign(D.N) * Q.N``.

        The front face is the one ``a, b, c`` wind counter-clockwise
        around. With *backface_culling* a ray hitting the back face
        misses. A ray parallel to the triangle's plane always misses.
        """
        edge1 = b.clone().subtract(a)
        edge2 = c.clone().subtract(a)
        normal = Vector3().cross_vectors(edge1, edge2)

        d_dot_n = self.direction.dot(normal)
        if d_dot_n > 0:
            if backface_culling:
                return None
            sign = 1
        elif d_dot_n < 0:
            sign = -1
            d_dot_n = -d_dot_n
        else:
            return None

        diff = self.origin.clone().subtract(a)

        # b1 < 0
        d_dot_q_x_e2 = sign * self.direction.dot(Vector3().cross_vectors(diff, edge2))
        if d_dot_q_x_e2 < 0:
            return None

        # b2 < 0
        d_dot_e1_x_q = sign * self.direction.dot(edge1.cross(diff))
        if d_dot_e1_x_q < 0:
            return None

        # b1 + b2 > 1
        if d_dot_q_x_e2 + d_dot_e1_x_q > d_dot_n:
            return None

        # The line hits the triangle; t < 0 means the ray does not.
        q_dot_n = -sign * diff.dot(normal)
        if q_dot_n < 0:
            return None

        return self.at(q_dot_n / d_dot_n)

    def apply_matrix4(self, matrix: Matrix4Like) -> Ray:
        """Transform the origin as a point and the direction as a direction.

        The direction is re-normalized afterwards.
        """
        self.origin.apply_matrix4(matrix)
        self.direction.transform_direction(matrix)
        return self

    def equal(self, ray: Ray) -> bool:
        return self.origin.equal(ray.origin) and self.direction.equal(ray.direction)

    def copy(self, source: Ray) -> Ray:
        """Copy the values of *source*'s vectors into this ray's own vectors."""
        self.origin.copy(source.origin)
        self.direction.copy(source.direction)
        return self

    def clone(self) -> Ray:
        return Ray().copy(self)
