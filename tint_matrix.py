# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_matrix.py — Full-precision 3x3 matrix utilities.

Published color matrices are usually rounded to four decimals, and their
published "inverses" are rounded independently, so pairing them breaks
round-trip identity.  Here only the forward matrix is reference data: the
inverse is always computed in closed form (adjugate / determinant) so that
A⁻¹·A·x == x to within accumulated floating-point error alone.

The kernels compile with ``fastmath=False``.  Reassociation would trade away
exactly the bits this module exists to keep.
"""

from __future__ import annotations

import logging
from typing import Final, Sequence, Tuple, TypeAlias, Union

import numpy as np
import numpy.typing as npt
from numba import njit

from tint_errors import ConfigurationError

__all__ = [
    "ArrayFloat",
    "MatrixLike",
    "determinant_3x3",
    "inverse_3x3",
    "identity_error",
    "TransformMatrix",
    "BRADFORD",
]

logger = logging.getLogger(__name__)

ArrayFloat: TypeAlias = npt.NDArray[np.floating]
MatrixLike: TypeAlias = Union[ArrayFloat, Sequence[Sequence[float]]]

# Relative determinant threshold below which a matrix is treated as singular.
_SINGULAR_RTOL: Final[float] = 1e-14


# =============================================================================
# 1. KERNELS
# =============================================================================

@njit(cache=True, fastmath=False)
def _det3_kernel(m: ArrayFloat) -> float:
    """Cofactor expansion along the first row."""
    return (m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
            - m[0, 1] * (m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0])
            + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0]))

@njit(cache=True, fastmath=False)
def _inverse3_kernel(m: ArrayFloat, det: float) -> ArrayFloat:
    """
    Closed-form inverse: transpose of the cofactor matrix over the
    determinant.  No pivoting, no iteration.
    """
    out = np.empty((3, 3), dtype=np.float64)
    out[0, 0] = (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1]) / det
    out[0, 1] = (m[0, 2] * m[2, 1] - m[0, 1] * m[2, 2]) / det
    out[0, 2] = (m[0, 1] * m[1, 2] - m[0, 2] * m[1, 1]) / det
    out[1, 0] = (m[1, 2] * m[2, 0] - m[1, 0] * m[2, 2]) / det
    out[1, 1] = (m[0, 0] * m[2, 2] - m[0, 2] * m[2, 0]) / det
    out[1, 2] = (m[0, 2] * m[1, 0] - m[0, 0] * m[1, 2]) / det
    out[2, 0] = (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0]) / det
    out[2, 1] = (m[0, 1] * m[2, 0] - m[0, 0] * m[2, 1]) / det
    out[2, 2] = (m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]) / det
    return out


# =============================================================================
# 2. PUBLIC HELPERS
# =============================================================================

def _as_matrix(m: MatrixLike) -> ArrayFloat:
    arr = np.ascontiguousarray(m, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {arr.shape}")
    return arr

def determinant_3x3(m: MatrixLike) -> float:
    """Determinant of a 3x3 matrix."""
    return float(_det3_kernel(_as_matrix(m)))

def inverse_3x3(m: MatrixLike) -> ArrayFloat:
    """
    Exact (to float64 precision) inverse of a 3x3 matrix.

    Args:
        m: 3x3 matrix, array or nested sequence.

    Returns:
        New (3, 3) float64 array.

    Raises:
        ConfigurationError: If ``m`` is singular or holds non-finite entries.
            A singular transform means the color space itself is malformed.
    """
    arr = _as_matrix(m)
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError(f"Matrix has non-finite entries:\n{arr}")

    det = float(_det3_kernel(arr))
    scale = float(np.max(np.abs(arr)))
    if scale == 0.0 or abs(det) <= _SINGULAR_RTOL * scale ** 3:
        raise ConfigurationError(f"Matrix is singular (det={det!r}):\n{arr}")
    return _inverse3_kernel(arr, det)

def identity_error(a: MatrixLike, b: MatrixLike) -> float:
    """Largest absolute deviation of ``a @ b`` from the identity."""
    prod = _as_matrix(a) @ _as_matrix(b)
    return float(np.max(np.abs(prod - np.eye(3))))


# =============================================================================
# 3. TRANSFORM MATRIX
# =============================================================================

class TransformMatrix:
    """
    Immutable 3x3 linear map, always paired with its computed inverse.

    Both ``forward`` and ``inverse`` are read-only arrays; the pair is built
    once and shared process-wide.

    Example:
        >>> m = TransformMatrix([[2, 0, 0], [0, 4, 0], [0, 0, 8]])
        >>> m.apply_inverse(m.apply((1.0, 1.0, 1.0)))
        array([1., 1., 1.])
    """

    __slots__ = ("_forward", "_inverse")

    def __init__(self, forward: MatrixLike):
        fwd = _as_matrix(forward).copy()
        inv = inverse_3x3(fwd)
        fwd.setflags(write=False)
        inv.setflags(write=False)
        self._forward = fwd
        self._inverse = inv

    @classmethod
    def from_primaries(
        cls,
        red_xy: Tuple[float, float],
        green_xy: Tuple[float, float],
        blue_xy: Tuple[float, float],
        white_xyz: Sequence[float],
    ) -> TransformMatrix:
        """
        Derives the linear RGB → XYZ matrix of an RGB space analytically.

        Each primary's chromaticity gives an unscaled XYZ column; the columns
        are then scaled so that RGB (1, 1, 1) lands exactly on the white
        point.  See Lindbloom, "RGB/XYZ Matrices".

        Args:
            red_xy, green_xy, blue_xy: CIE 1931 (x, y) of the primaries.
            white_xyz: Reference white (Y = 1).

        Raises:
            ConfigurationError: If the primaries are collinear (or degenerate).
        """
        cols = []
        for x, y in (red_xy, green_xy, blue_xy):
            if y == 0.0:
                raise ConfigurationError(f"Primary chromaticity ({x}, {y}) has y = 0.")
            cols.append((x / y, 1.0, (1.0 - x - y) / y))
        primaries = np.array(cols, dtype=np.float64).T

        white = np.asarray(white_xyz, dtype=np.float64)
        scale = inverse_3x3(primaries) @ white
        forward = primaries * scale[np.newaxis, :]
        logger.debug("Derived RGB->XYZ matrix from primaries %s %s %s:\n%s",
                     red_xy, green_xy, blue_xy, forward)
        return cls(forward)

    @property
    def forward(self) -> ArrayFloat:
        return self._forward

    @property
    def inverse(self) -> ArrayFloat:
        return self._inverse

    def apply(self, vec: Sequence[float]) -> ArrayFloat:
        """Forward map of a length-3 vector."""
        return self._forward @ np.asarray(vec, dtype=np.float64)

    def apply_inverse(self, vec: Sequence[float]) -> ArrayFloat:
        """Inverse map of a length-3 vector."""
        return self._inverse @ np.asarray(vec, dtype=np.float64)

    def identity_error(self) -> float:
        """Max deviation of ``forward @ inverse`` from the identity."""
        return identity_error(self._forward, self._inverse)

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(f"{v:.10g}" for v in row) + "]" for row in self._forward
        )
        return f"TransformMatrix([{rows}])"


# =============================================================================
# 4. REFERENCE MATRICES
# =============================================================================

# XYZ -> sharpened cone response (Lam, 1985).  Only the forward matrix is
# reference data.
_M_BRADFORD = np.array([
    [ 0.8951000,  0.2664000, -0.1614000],
    [-0.7502000,  1.7135000,  0.0367000],
    [ 0.0389000, -0.0685000,  1.0296000]
], dtype=np.float64)
BRADFORD: Final[TransformMatrix] = TransformMatrix(_M_BRADFORD)
