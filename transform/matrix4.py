"""
matrix4.py
----------
4x4 transform matrix: composition, decomposition, inversion and
projection construction.

Values are stored column-major in a flat float64 array, so element ``i``
is row ``i % 4``, column ``i // 4`` and the translation occupies
elements 12, 13 and 14.

Degenerate input never raises. A singular matrix is not inverted, a
projection with collapsed bounds is not built and a zero-length rotation
axis is ignored; in each case the matrix is left exactly as it was.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from rotation.euler import Euler
from rotation.quaternion import Quaternion
from vecmath.vector3 import Vector3
from vecmath.vector4 import Vector4

logger = logging.getLogger(__name__)

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

# (i, j) element pairs exchanged by a transpose.
_TRANSPOSE_PAIRS = ((1, 4), (2, 8), (3, 12), (6, 9), (7, 13), (11, 14))


@dataclass
class PlaneEquation:
    """Plane ``a*x + b*y + c*z + d = 0``."""
    a: float
    b: float
    c: float
    d: float


class Matrix4:
    """Mutable 4x4 matrix.

    Nearly every method changes the matrix in place and returns it, so
    transforms can be chained::

        view = Matrix4().look_at(eye, target, up)
        mvp = Matrix4().perspective(60, aspect, 0.1, 100).multiply(view)

    Parameters
    ----------
    values : sequence of 16 floats, optional
        Initial column-major values. Defaults to the identity.
    """

    __slots__ = ("_value",)

    def __init__(self, values: Optional[Sequence[float]] = None) -> None:
        if values is None:
            values = _IDENTITY
        elif len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        self._value = np.array(values, dtype=np.float64)

    def __repr__(self) -> str:
        rows = self._as_square().tolist()
        return "Matrix4(" + ", ".join(str(row) for row in rows) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # mutable

    @property
    def elements(self) -> np.ndarray:
        """The live column-major float64 storage, e.g. for buffer upload."""
        return self._value

    def _as_square(self) -> np.ndarray:
        """4x4 row/column view of the storage."""
        return self._value.reshape((4, 4), order="F")

    # ── Composition ───────────────────────────────────────────────────────────

    def compose(self, position: Vector3, euler: Euler, scale: Vector3) -> Matrix4:
        """Set to the affine transform ``T * R * S``.

        The rotation goes through a quaternion built from *euler*, so any
        of the six rotation orders is honoured.
        """
        q = Quaternion().set_from_euler(euler)
        x, y, z, w = q.x, q.y, q.z, q.w

        x2, y2, z2 = x + x, y + y, z + z
        xx, xy, xz = x * x2, x * y2, x * z2
        yy, yz, zz = y * y2, y * z2, z * z2
        wx, wy, wz = w * x2, w * y2, w * z2

        sx, sy, sz = scale.x, scale.y, scale.z

        te = self._value
        te[0] = (1 - (yy + zz)) * sx
        te[1] = (xy + wz) * sx
        te[2] = (xz - wy) * sx
        te[3] = 0.0

        te[4] = (xy - wz) * sy
        te[5] = (1 - (xx + zz)) * sy
        te[6] = (yz + wx) * sy
        te[7] = 0.0

        te[8] = (xz + wy) * sz
        te[9] = (yz - wx) * sz
        te[10] = (1 - (xx + yy)) * sz
        te[11] = 0.0

        te[12] = position.x
        te[13] = position.y
        te[14] = position.z
        te[15] = 1.0
        return self

    def decompose(self, out_position: Vector3, out_euler: Euler,
                  out_scale: Vector3) -> Matrix4:
        """Split an affine transform back into position, rotation and scale.

        Scale factors are the lengths of the three basis columns; a
        negative determinant is attributed to the x axis. ``out_euler``
        keeps its rotation order and receives angles for that order.

        Note: this matrix is modified. Its upper-left 3x3 block is divided
        by the extracted scale and left normalized; clone first if the
        original is still needed.
        """
        te = self._value

        sx = math.sqrt(te[0] * te[0] + te[1] * te[1] + te[2] * te[2])
        sy = math.sqrt(te[4] * te[4] + te[5] * te[5] + te[6] * te[6])
        sz = math.sqrt(te[8] * te[8] + te[9] * te[9] + te[10] * te[10])

        if self.determinant() < 0:
            sx = -sx

        out_position.set(float(te[12]), float(te[13]), float(te[14]))
        out_scale.set(sx, sy, sz)

        # A collapsed axis (scale 0) yields inf/nan entries, not an error.
        with np.errstate(divide="ignore", invalid="ignore"):
            te[0:3] /= sx
            te[4:7] /= sy
            te[8:11] /= sz

        out_euler.set_from_rotation_matrix(self)
        return self

    def rotate_from_euler(self, euler: Euler) -> Matrix4:
        """Set to the pure rotation described by *euler*."""
        return self.compose(Vector3(0.0, 0.0, 0.0), euler, Vector3(1.0, 1.0, 1.0))

    # ── Products ──────────────────────────────────────────────────────────────

    def identity(self) -> Matrix4:
        self._value[:] = _IDENTITY
        return self

    def multiply_matrices(self, a: Matrix4, b: Matrix4) -> Matrix4:
        """Set this matrix to ``a * b``. Either operand may be ``self``."""
        product = a._as_square() @ b._as_square()
        self._value[:] = product.ravel(order="F")
        return self

    def multiply(self, other: Matrix4) -> Matrix4:
        """``self = self * other``: *other* is applied first."""
        return self.multiply_matrices(self, other)

    def premultiply(self, other: Matrix4) -> Matrix4:
        """``self = other * self``: *other* is applied last."""
        return self.multiply_matrices(other, self)

    def transpose(self) -> Matrix4:
        e = self._value
        for i, j in _TRANSPOSE_PAIRS:
            e[i], e[j] = e[j], e[i]
        return self

    def invert(self) -> Matrix4:
        """Invert in place via the adjugate.

        If the determinant is exactly 0 the matrix is left unchanged.
        """
        s = self._value
        inv = np.empty(16, dtype=np.float64)

        inv[0] = (s[5] * s[10] * s[15] - s[5] * s[11] * s[14] - s[9] * s[6] * s[15]
                  + s[9] * s[7] * s[14] + s[13] * s[6] * s[11] - s[13] * s[7] * s[10])
        inv[4] = (-s[4] * s[10] * s[15] + s[4] * s[11] * s[14] + s[8] * s[6] * s[15]
                  - s[8] * s[7] * s[14] - s[12] * s[6] * s[11] + s[12] * s[7] * s[10])
        inv[8] = (s[4] * s[9] * s[15] - s[4] * s[11] * s[13] - s[8] * s[5] * s[15]
                  + s[8] * s[7] * s[13] + s[12] * s[5] * s[11] - s[12] * s[7] * s[9])
        inv[12] = (-s[4] * s[9] * s[14] + s[4] * s[10] * s[13] + s[8] * s[5] * s[14]
                   - s[8] * s[6] * s[13] - s[12] * s[5] * s[10] + s[12] * s[6] * s[9])

        inv[1] = (-s[1] * s[10] * s[15] + s[1] * s[11] * s[14] + s[9] * s[2] * s[15]
                  - s[9] * s[3] * s[14] - s[13] * s[2] * s[11] + s[13] * s[3] * s[10])
        inv[5] = (s[0] * s[10] * s[15] - s[0] * s[11] * s[14] - s[8] * s[2] * s[15]
                  + s[8] * s[3] * s[14] + s[12] * s[2] * s[11] - s[12] * s[3] * s[10])
        inv[9] = (-s[0] * s[9] * s[15] + s[0] * s[11] * s[13] + s[8] * s[1] * s[15]
                  - s[8] * s[3] * s[13] - s[12] * s[1] * s[11] + s[12] * s[3] * s[9])
        inv[13] = (s[0] * s[9] * s[14] - s[0] * s[10] * s[13] - s[8] * s[1] * s[14]
                   + s[8] * s[2] * s[13] + s[12] * s[1] * s[10] - s[12] * s[2] * s[9])

        inv[2] = (s[1] * s[6] * s[15] - s[1] * s[7] * s[14] - s[5] * s[2] * s[15]
                  + s[5] * s[3] * s[14] + s[13] * s[2] * s[7] - s[13] * s[3] * s[6])
        inv[6] = (-s[0] * s[6] * s[15] + s[0] * s[7] * s[14] + s[4] * s[2] * s[15]
                  - s[4] * s[3] * s[14] - s[12] * s[2] * s[7] + s[12] * s[3] * s[6])
        inv[10] = (s[0] * s[5] * s[15] - s[0] * s[7] * s[13] - s[4] * s[1] * s[15]
                   + s[4] * s[3] * s[13] + s[12] * s[1] * s[7] - s[12] * s[3] * s[5])
        inv[14] = (-s[0] * s[5] * s[14] + s[0] * s[6] * s[13] + s[4] * s[1] * s[14]
                   - s[4] * s[2] * s[13] - s[12] * s[1] * s[6] + s[12] * s[2] * s[5])

        inv[3] = (-s[1] * s[6] * s[11] + s[1] * s[7] * s[10] + s[5] * s[2] * s[11]
                  - s[5] * s[3] * s[10] - s[9] * s[2] * s[7] + s[9] * s[3] * s[6])
        inv[7] = (s[0] * s[6] * s[11] - s[0] * s[7] * s[10] - s[4] * s[2] * s[11]
                  + s[4] * s[3] * s[10] + s[8] * s[2] * s[7] - s[8] * s[3] * s[6])
        inv[11] = (-s[0] * s[5] * s[11] + s[0] * s[7] * s[9] + s[4] * s[1] * s[11]
                   - s[4] * s[3] * s[9] - s[8] * s[1] * s[7] + s[8] * s[3] * s[5])
        inv[15] = (s[0] * s[5] * s[10] - s[0] * s[6] * s[9] - s[4] * s[1] * s[10]
                   + s[4] * s[2] * s[9] + s[8] * s[1] * s[6] - s[8] * s[2] * s[5])

        det = s[0] * inv[0] + s[1] * inv[4] + s[2] * inv[8] + s[3] * inv[12]
        if det == 0:
            logger.debug("invert: determinant is 0, matrix left unchanged")
            return self

        s[:] = inv * (1.0 / det)
        return self

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the bottom row."""
        te = self._value
        n11, n12, n13, n14 = te[0], te[4], te[8], te[12]
        n21, n22, n23, n24 = te[1], te[5], te[9], te[13]
        n31, n32, n33, n34 = te[2], te[6], te[10], te[14]
        n41, n42, n43, n44 = te[3], te[7], te[11], te[15]

        return float(
            n41 * (n14 * n23 * n32 - n13 * n24 * n32 - n14 * n22 * n33
                   + n12 * n24 * n33 + n13 * n22 * n34 - n12 * n23 * n34)
            + n42 * (n11 * n23 * n34 - n11 * n24 * n33 + n14 * n21 * n33
                     - n13 * n21 * n34 + n13 * n24 * n31 - n14 * n23 * n31)
            + n43 * (n11 * n24 * n32 - n11 * n22 * n34 - n14 * n21 * n32
                     + n12 * n21 * n34 + n14 * n22 * n31 - n12 * n24 * n31)
            + n44 * (-n13 * n22 * n31 - n11 * n23 * n32 + n11 * n22 * n33
                     + n13 * n21 * n32 - n12 * n21 * n33 + n12 * n23 * n31)
        )

    # ── Projections ───────────────────────────────────────────────────────────

    def ortho(self, left: float, right: float, bottom: float, top: float,
              near: float, far: float) -> Matrix4:
        """Set to an orthographic projection (OpenGL clip-space conventions)."""
        if left == right or bottom == top or near == far:
            logger.debug("ortho: degenerate bounds, matrix left unchanged")
            return self

        rw = 1.0 / (right - left)
        rh = 1.0 / (top - bottom)
        rd = 1.0 / (far - near)

        self._value[:] = (
            2 * rw, 0.0, 0.0, 0.0,
            0.0, 2 * rh, 0.0, 0.0,
            0.0, 0.0, -2 * rd, 0.0,
            -(right + left) * rw, -(top + bottom) * rh, -(far + near) * rd, 1.0,
        )
        return self

    def frustum(self, left: float, right: float, bottom: float, top: float,
                near: float, far: float) -> Matrix4:
        """Set to a perspective projection bounded by the near-plane rectangle."""
        if left == right or top == bottom or near == far or near <= 0 or far <= 0:
            logger.debug("frustum: degenerate bounds, matrix left unchanged")
            return self

        rw = 1.0 / (right - left)
        rh = 1.0 / (top - bottom)
        rd = 1.0 / (far - near)

        self._value[:] = (
            2 * near * rw, 0.0, 0.0, 0.0,
            0.0, 2 * near * rh, 0.0, 0.0,
            (right + left) * rw, (top + bottom) * rh, -(far + near) * rd, -1.0,
            0.0, 0.0, -2 * near * far * rd, 0.0,
        )
        return self

    def perspective(self, fov: float, aspect: float, near: float, far: float) -> Matrix4:
        """Set to a symmetric perspective projection.

        Parameters
        ----------
        fov    : float  Vertical field of view in DEGREES.
        aspect : float  Viewport width / height.
        near   : float  Near plane distance (> 0).
        far    : float  Far plane distance (> 0).
        """
        if near == far or aspect == 0 or near <= 0 or far <= 0:
            logger.debug("perspective: degenerate parameters, matrix left unchanged")
            return self

        half_fov = math.pi * fov / 180 / 2
        s = math.sin(half_fov)
        if s == 0:
            logger.debug("perspective: zero field of view, matrix left unchanged")
            return self

        rd = 1.0 / (far - near)
        ct = math.cos(half_fov) / s

        self._value[:] = (
            ct / aspect, 0.0, 0.0, 0.0,
            0.0, ct, 0.0, 0.0,
            0.0, 0.0, -(far + near) * rd, -1.0,
            0.0, 0.0, -2 * near * far * rd, 0.0,
        )
        return self

    # ── Incremental transforms ────────────────────────────────────────────────

    def scale(self, x: float, y: float, z: float) -> Matrix4:
        """Post-multiply by a scale: columns 0-2 are multiplied by x, y, z."""
        e = self._value
        e[0:4] *= x
        e[4:8] *= y
        e[8:12] *= z
        return self

    def translate(self, x: float, y: float, z: float) -> Matrix4:
        """Post-multiply by a translation (applied before this transform)."""
        e = self._value
        e[12:16] += e[0:4] * x + e[4:8] * y + e[8:12] * z
        return self

    def rotate(self, angle: float, axis: Vector3) -> Matrix4:
        """Post-multiply by a rotation of *angle* radians about *axis*.

        The axis is normalized here; a zero-length axis leaves the matrix
        unchanged.
        """
        length = math.sqrt(axis.x * axis.x + axis.y * axis.y + axis.z * axis.z)
        if length == 0:
            logger.debug("rotate: zero-length axis, matrix left unchanged")
            return self

        x = axis.x / length
        y = axis.y / length
        z = axis.z / length

        s = math.sin(angle)
        c = math.cos(angle)
        t = 1 - c

        # Rodrigues rotation, one column per row of this array.
        rotation = np.array((
            (x * x * t + c, y * x * t + z * s, z * x * t - y * s),
            (x * y * t - z * s, y * y * t + c, z * y * t + x * s),
            (x * z * t + y * s, y * z * t - x * s, z * z * t + c),
        ))
        a = self._value
        basis = a[0:12].reshape((3, 4))
        a[0:12] = (rotation @ basis).ravel()
        return self

    def look_at(self, eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """Set to a view matrix for a camera at *eye* looking at *target*.

        ``forward = unit(target - eye)``, ``side = unit(forward x up)`` and
        the recomputed ``up = side x forward`` fill the rotation rows; the
        result is then translated by ``-eye``.
        """
        forward = target.clone().subtract(eye).unit()
        side = forward.clone().cross(up).unit()
        true_up = side.clone().cross(forward)

        self._value[:] = (
            side.x, true_up.x, -forward.x, 0.0,
            side.y, true_up.y, -forward.y, 0.0,
            side.z, true_up.z, -forward.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
        return self.translate(-eye.x, -eye.y, -eye.z)

    def drop_shadow(self, plane: PlaneEquation, light: Vector4) -> Matrix4:
        """Post-multiply by the projection that flattens geometry onto *plane*.

        *light* is homogeneous: ``w = 1`` for a point light at
        ``(x, y, z)``, ``w = 0`` for a directional light along ``(x, y, z)``.
        """
        dot = plane.a * light.x + plane.b * light.y + plane.c * light.z + plane.d * light.w
        shadow = Matrix4()
        e = shadow._value

        e[0] = dot - light.x * plane.a
        e[1] = -light.y * plane.a
        e[2] = -light.z * plane.a
        e[3] = -light.w * plane.a

        e[4] = -light.x * plane.b
        e[5] = dot - light.y * plane.b
        e[6] = -light.z * plane.b
        e[7] = -light.w * plane.b

        e[8] = -light.x * plane.c
        e[9] = -light.y * plane.c
        e[10] = dot - light.z * plane.c
        e[11] = -light.w * plane.c

        e[12] = -light.x * plane.d
        e[13] = -light.y * plane.d
        e[14] = -light.z * plane.d
        e[15] = dot - light.w * plane.d

        return self.multiply(shadow)

    # ── Value semantics ───────────────────────────────────────────────────────

    def equal(self, matrix: Matrix4) -> bool:
        """Exact element-wise equality."""
        return bool(np.array_equal(self._value, matrix._value))

    def copy(self, source: Matrix4) -> Matrix4:
        self._value[:] = source._value
        return self

    def clone(self) -> Matrix4:
        return Matrix4(self._value)

    def to_array(self) -> list[float]:
        """The 16 values in column-major order, as a new list."""
        return self._value.tolist()
