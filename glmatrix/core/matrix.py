# glmatrix/core/matrix.py
"""
TransformMatrix - 4x4 transform with in-place incremental updates.

Storage is a flat 16-element float64 array in column-major order
(indices 12-14 hold translation), ready to upload as a mat4 uniform.
"""

from __future__ import annotations
import math
from typing import Iterable, Optional, Tuple

import numpy as np


_IDENTITY = np.array((
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
), dtype=np.float64)

# (a, b) index triples of the rotation plane per axis.
# new_a = a*c - b*s, new_b = b*c + a*s
_X_PLANE = ((1, 5, 9), (2, 6, 10))
_Y_PLANE = ((2, 6, 10), (0, 4, 8))
_Z_PLANE = ((0, 4, 8), (1, 5, 9))


def deg_to_rad(angle: float) -> float:
    return angle * math.pi / 180


class TransformMatrix:
    """4x4 matrix for camera projection and model transforms."""

    __slots__ = ('_values',)

    def __init__(self):
        self._values: Optional[np.ndarray] = None
        self.set_identity()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def values(self) -> Optional[np.ndarray]:
        return self._values

    @values.setter
    def values(self, values: Optional[Iterable[float]]):
        if values is None:
            self._values = None
            return
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"TransformMatrix needs a flat column-major sequence, got shape {arr.shape}")
        if arr.shape != (16,):
            raise ValueError(f"TransformMatrix needs 16 values, got {arr.size}")
        self._values = arr

    @staticmethod
    def from_values(values: Iterable[float]) -> TransformMatrix:
        mat = TransformMatrix()
        mat.values = values
        return mat

    def set_identity(self) -> None:
        self._values = _IDENTITY.copy()

    def _require_values(self) -> np.ndarray:
        if self._values is None:
            raise IndexError("TransformMatrix values unset")
        return self._values

    deg_to_rad = staticmethod(deg_to_rad)

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def set_perspective(self, fov_y_deg: float, aspect: float,
                        z_min: float, z_max: float) -> None:
        """
        Right-handed perspective projection.

        fov_y_deg is in degrees. Equal clip planes or a zero tangent give
        inf/NaN entries; nothing is raised.
        """
        aspect = np.float64(aspect)
        z_min = np.float64(z_min)
        z_max = np.float64(z_max)

        with np.errstate(divide='ignore', invalid='ignore'):
            tan = np.tan(deg_to_rad(np.float64(fov_y_deg) / 2))
            a = -(z_max + z_min) / (z_max - z_min)
            b = (-2 * z_max * z_min) / (z_max - z_min)

            self._values = np.array((
                0.5 / tan, 0.0,              0.0, 0.0,
                0.0,       0.5 * aspect / tan, 0.0, 0.0,
                0.0,       0.0,              a,   -1.0,
                0.0,       0.0,              b,   0.0,
            ), dtype=np.float64)

    def set_ortho(self, left: float, right: float, bottom: float, top: float,
                  near: float, far: float) -> None:
        """Orthographic projection. Degenerate extents give inf/NaN."""
        dx = np.float64(right) - np.float64(left)
        dy = np.float64(top) - np.float64(bottom)
        dz = np.float64(far) - np.float64(near)

        with np.errstate(divide='ignore', invalid='ignore'):
            self._values = np.array((
                2.0 / dx, 0.0,      0.0,       0.0,
                0.0,      2.0 / dy, 0.0,       0.0,
                0.0,      0.0,      -2.0 / dz, 0.0,
                0.0,      0.0,      0.0,       1.0,
            ), dtype=np.float64)

    # -------------------------------------------------------------------------
    # Incremental transforms
    # -------------------------------------------------------------------------

    def _rotate_plane(self, plane, angle: float) -> None:
        if self._values is None:
            self.set_identity()

        c = math.cos(angle)
        s = math.sin(angle)
        a_idx, b_idx = plane
        v = self._values

        # fancy indexing copies, so both reads see pre-update values
        va = v[list(a_idx)]
        vb = v[list(b_idx)]
        v[list(a_idx)] = va * c - vb * s
        v[list(b_idx)] = vb * c + va * s

    def x_rotate(self, angle: float) -> None:
        """Rotate about X by angle (radians)."""
        self._rotate_plane(_X_PLANE, angle)

    def y_rotate(self, angle: float) -> None:
        """Rotate about Y by angle (radians)."""
        self._rotate_plane(_Y_PLANE, angle)

    def z_rotate(self, angle: float) -> None:
        """Rotate about Z by angle (radians)."""
        self._rotate_plane(_Z_PLANE, angle)

    def _translate(self, index: int, amount: float) -> None:
        # No identity fallback here, unlike the rotations
        self._require_values()[index] += amount

    def x_translate(self, amount: float) -> None:
        self._translate(12, amount)

    def y_translate(self, amount: float) -> None:
        self._translate(13, amount)

    def z_translate(self, amount: float) -> None:
        self._translate(14, amount)

    # -------------------------------------------------------------------------
    # Readout
    # -------------------------------------------------------------------------

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"TransformMatrix index out of range: ({row}, {col})")
        return float(self._require_values()[col * 4 + row])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        if self._values is None or other._values is None:
            return self._values is None and other._values is None
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        if self._values is None:
            return "TransformMatrix(unset)"
        cols = ", ".join(
            "[" + ", ".join(f"{x:.4g}" for x in self._values[c * 4:c * 4 + 4]) + "]"
            for c in range(4)
        )
        return f"TransformMatrix({cols})"

    @property
    def translation(self) -> Tuple[float, float, float]:
        v = self._require_values()
        return (float(v[12]), float(v[13]), float(v[14]))

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(float(x) for x in self._require_values())

    def to_list_column_major(self) -> list:
        """For GPU upload (storage order is already column-major)."""
        return [float(x) for x in self._require_values()]

    def to_bytes(self, dtype: str = "f4") -> bytes:
        """mat4 uniform payload, column-major."""
        return self._require_values().astype(dtype).tobytes()

    def copy(self) -> TransformMatrix:
        mat = TransformMatrix()
        mat._values = None if self._values is None else self._values.copy()
        return mat
