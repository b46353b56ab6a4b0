# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_adaptation.py — Bradford chromatic adaptation.

Re-expresses a tristimulus value measured under one illuminant as the same
surface would appear under another:

    1. XYZ → "sharpened" cone response (LMS) via the Bradford matrix M.
    2. Source and target white points → LMS the same way.
    3. Von Kries gain: scale each cone channel by LMS_dst / LMS_src.
    4. LMS → XYZ via M⁻¹.

Full adaptation (D = 1) is assumed.  Because white points are normalised to
Y = 1 no luminance factor is needed and the whole transform collapses to a
single linear map M_c = M⁻¹ · diag(gains) · M, which is built once per
(source, target) pair and memoised.

M⁻¹ is computed by :mod:`tint_matrix`, never copied from a rounded table.

References:
    - Lam, K. M. (1985). "Metamerism and Colour Constancy". PhD thesis.
    - Lindbloom, B. "Chromatic Adaptation".
"""

from __future__ import annotations

import functools
import logging
from typing import Final, Sequence, Tuple

import numpy as np

from tint_illuminants import IlluminantLike
from tint_matrix import BRADFORD, ArrayFloat

__all__ = ["BRADFORD", "bradford_matrix", "adapt"]

logger = logging.getLogger(__name__)

_IDENTITY: Final[ArrayFloat] = np.eye(3, dtype=np.float64)
_IDENTITY.setflags(write=False)


@functools.lru_cache(maxsize=64)
def _get_cached_bradford_matrix(source: IlluminantLike, target: IlluminantLike) -> ArrayFloat:
    """
    Cached worker for the composite adaptation matrix.

    Illuminants are hashable value types, so the cache key is the pair
    itself.  Racing callers compute the same read-only result.
    """
    src_lms = BRADFORD.apply(source.white_point())
    dst_lms = BRADFORD.apply(target.white_point())
    gains = dst_lms / src_lms
    composite = BRADFORD.inverse @ np.diag(gains) @ BRADFORD.forward
    composite.setflags(write=False)
    logger.debug("Built Bradford matrix %r -> %r, gains=%s", source, target, gains)
    return composite

def bradford_matrix(source: IlluminantLike, target: IlluminantLike) -> ArrayFloat:
    """
    Composite Bradford matrix mapping column-vector XYZ under ``source`` to
    XYZ under ``target``.

    Returns:
        Read-only (3, 3) array.  The identity when the illuminants are equal.
    """
    if source == target:
        return _IDENTITY
    return _get_cached_bradford_matrix(source, target)

def adapt(
    xyz: Sequence[float],
    source: IlluminantLike,
    target: IlluminantLike,
) -> Tuple[float, float, float]:
    """
    Adapts a tristimulus value from ``source`` to ``target`` lighting.

    Same-illuminant adaptation returns the input components untouched (no
    matrix multiply, so no drift).  Negative and out-of-gamut values pass
    through unclamped.

    Args:
        xyz: (X, Y, Z) under ``source``.
        source: Illuminant the value was measured under.
        target: Illuminant to re-express it under.

    Returns:
        (X, Y, Z) under ``target``.
    """
    x, y, z = xyz
    if source == target:
        return (float(x), float(y), float(z))
    out = _get_cached_bradford_matrix(source, target) @ np.array([x, y, z], dtype=np.float64)
    return (float(out[0]), float(out[1]), float(out[2]))
