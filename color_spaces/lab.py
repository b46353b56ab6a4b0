# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: lab.py — CIE 1976 L*a*b* and its cylindrical form L*C*h.

Both spaces are relative to D50, the ICC profile connection white.  The
piecewise CIE function uses the exact rational constants (δ = 6/29) rather
than the rounded 0.008856 / 903.3, so the cube-root and linear branches meet
at the same point from both sides.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Optional, Tuple

import numpy as np

from tint_colorengine import Color, XYZColor
from tint_colorpoint import ColorPoint
from tint_coord import Coord
from tint_illuminants import IlluminantLike

from .polar import CylindricalPoint, from_polar, to_polar

__all__ = ["CIELABColor", "CIELCHColor", "LAB_EPSILON", "LAB_KAPPA"]

# --- Exact Rational Math Constants ---
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA   # ~0.008856
LAB_KAPPA: Final[float] = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0)  # ~903.296


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return float(np.cbrt(t))
    return (LAB_KAPPA * t + 16.0) / 116.0

def _lab_f_inv(t: float) -> float:
    if t > _LAB_DELTA:
        return t * t * t
    return (116.0 * t - 16.0) / LAB_KAPPA


@dataclass(frozen=True)
class CIELABColor(ColorPoint, Color):
    """
    CIE L*a*b* (D50).

    Attributes:
        l: Lightness, 0 (black) .. 100 (reference white).
        a: Green (−) to red (+).
        b: Blue (−) to yellow (+).
    """
    l: float
    a: float
    b: float

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        xn, yn, zn = self.reference_illuminant.white_point()
        fy = (self.l + 16.0) / 116.0
        fx = fy + self.a / 500.0
        fz = fy - self.b / 200.0
        xyz = (xn * _lab_f_inv(fx), yn * _lab_f_inv(fy), zn * _lab_f_inv(fz))
        return self._native_xyz(xyz, illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELABColor:
        x, y, z = cls._reference_components(xyz)
        xn, yn, zn = cls.reference_illuminant.white_point()
        fx, fy, fz = _lab_f(x / xn), _lab_f(y / yn), _lab_f(z / zn)
        return cls(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))

    def chroma(self) -> float:
        return math.hypot(self.a, self.b)

    def hue(self) -> float:
        """Hue angle in degrees, [0, 360)."""
        return to_polar(self.a, self.b)[1]

    def to_coord(self) -> Coord:
        return Coord(self.l, self.a, self.b)

    @classmethod
    def from_coord(cls, coord: Coord) -> CIELABColor:
        return cls(coord.x, coord.y, coord.z)


@dataclass(frozen=True)
class CIELCHColor(CylindricalPoint, Color):
    """
    CIE L*C*h (D50), the polar form of :class:`CIELABColor`.

    Attributes:
        l: Lightness.
        c: Chroma, >= 0.
        h: Hue angle in degrees, normalised to [0, 360).
    """
    l: float
    c: float
    h: float

    @classmethod
    def from_lab(cls, lab: CIELABColor) -> CIELCHColor:
        c, h = to_polar(lab.a, lab.b)
        return cls(lab.l, c, h)

    def to_lab(self) -> CIELABColor:
        a, b = from_polar(self.c, self.h)
        return CIELABColor(self.l, a, b)

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        return self.to_lab().to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELCHColor:
        return cls.from_lab(CIELABColor.from_xyz(xyz))

    def _cylinder(self) -> Tuple[float, float, float]:
        return (self.c, self.h, self.l)

    @classmethod
    def _from_cylinder(cls, radius: float, hue: float, height: float) -> CIELCHColor:
        return cls(height, radius, hue)
