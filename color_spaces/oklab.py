# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: oklab.py — Oklab perceptual space (Ottosson, 2020).

    XYZ (D65) --M1--> LMS --cbrt--> LMS' --M2--> (L, a, b)

Only the forward M1 / M2 are reference data; their inverses are computed by
:class:`~tint_matrix.TransformMatrix`.  The cube root is the real (signed)
one, so out-of-gamut XYZ with negative cone responses still round-trips.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, Optional

import numpy as np

from tint_colorengine import Color, XYZColor
from tint_colorpoint import ColorPoint
from tint_coord import Coord
from tint_illuminants import Illuminant, IlluminantLike
from tint_matrix import TransformMatrix

__all__ = ["OklabColor"]

# M1: XYZ to cone response (LMS)
OKLAB_M1: Final[TransformMatrix] = TransformMatrix([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715,  0.0361456387],
    [0.0482003018, 0.2643662691,  0.6338517070]
])
# M2: non-linear LMS' to (L, a, b)
OKLAB_M2: Final[TransformMatrix] = TransformMatrix([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660]
])


@dataclass(frozen=True)
class OklabColor(ColorPoint, Color):
    """
    Oklab (D65).

    Attributes:
        l: Perceived lightness, 0 .. 1 for in-gamut colors.
        a: Green (−) to red (+).
        b: Blue (−) to yellow (+).
    """
    l: float
    a: float
    b: float

    reference_illuminant: ClassVar[Optional[IlluminantLike]] = Illuminant.D65

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        lms_prime = OKLAB_M2.apply_inverse((self.l, self.a, self.b))
        x, y, z = OKLAB_M1.apply_inverse(lms_prime ** 3)
        return self._native_xyz((float(x), float(y), float(z)), illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> OklabColor:
        lms = OKLAB_M1.apply(cls._reference_components(xyz))
        l, a, b = OKLAB_M2.apply(np.cbrt(lms))
        return cls(float(l), float(a), float(b))

    def to_coord(self) -> Coord:
        return Coord(self.l, self.a, self.b)

    @classmethod
    def from_coord(cls, coord: Coord) -> OklabColor:
        return cls(coord.x, coord.y, coord.z)
