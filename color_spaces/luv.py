# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: luv.py — CIE 1976 L*u*v* and L*C*h(uv).

Relative to D50 like CIELAB.  Lightness uses the same piecewise function as
L*a*b*; chromaticity is measured in the u'v' UCS diagram relative to the
reference white.

Black (L* = 0) has no defined chromaticity: it maps to u* = v* = 0 and back
to XYZ (0, 0, 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tint_colorengine import Color, XYZColor
from tint_colorpoint import ColorPoint
from tint_coord import Coord
from tint_illuminants import IlluminantLike

from .lab import _lab_f, _lab_f_inv
from .polar import CylindricalPoint, from_polar, to_polar

__all__ = ["CIELUVColor", "CIELCHuvColor", "uv_prime"]


def uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    """
    CIE 1976 UCS chromaticity (u', v').

    A zero denominator (black) returns (0, 0).
    """
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0.0:
        return (0.0, 0.0)
    return (4.0 * x / denom, 9.0 * y / denom)


@dataclass(frozen=True)
class CIELUVColor(ColorPoint, Color):
    """
    CIE L*u*v* (D50).

    Attributes:
        l: Lightness, 0 .. 100.
        u: Red-green opponent coordinate.
        v: Yellow-blue opponent coordinate.
    """
    l: float
    u: float
    v: float

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        white = self.reference_illuminant.white_point()
        un, vn = uv_prime(*white)
        y = white[1] * _lab_f_inv((self.l + 16.0) / 116.0)

        if self.l == 0.0:
            return self._native_xyz((0.0, 0.0, 0.0), illuminant)

        inv_13l = 1.0 / (13.0 * self.l)
        up = self.u * inv_13l + un
        vp = self.v * inv_13l + vn
        if vp == 0.0:
            return self._native_xyz((0.0, y, 0.0), illuminant)

        x = y * 9.0 * up / (4.0 * vp)
        z = y * (12.0 - 3.0 * up - 20.0 * vp) / (4.0 * vp)
        return self._native_xyz((x, y, z), illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELUVColor:
        x, y, z = cls._reference_components(xyz)
        white = cls.reference_illuminant.white_point()
        un, vn = uv_prime(*white)

        if y == 0.0:
            return cls(0.0, 0.0, 0.0)
        l = 116.0 * _lab_f(y / white[1]) - 16.0
        up, vp = uv_prime(x, y, z)
        return cls(l, 13.0 * l * (up - un), 13.0 * l * (vp - vn))

    def to_coord(self) -> Coord:
        return Coord(self.l, self.u, self.v)

    @classmethod
    def from_coord(cls, coord: Coord) -> CIELUVColor:
        return cls(coord.x, coord.y, coord.z)


@dataclass(frozen=True)
class CIELCHuvColor(CylindricalPoint, Color):
    """
    CIE L*C*h(uv) (D50), the polar form of :class:`CIELUVColor`.

    Attributes:
        l: Lightness.
        c: Chroma, >= 0.
        h: Hue angle in degrees, [0, 360).
    """
    l: float
    c: float
    h: float

    @classmethod
    def from_luv(cls, luv: CIELUVColor) -> CIELCHuvColor:
        c, h = to_polar(luv.u, luv.v)
        return cls(luv.l, c, h)

    def to_luv(self) -> CIELUVColor:
        u, v = from_polar(self.c, self.h)
        return CIELUVColor(self.l, u, v)

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        return self.to_luv().to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELCHuvColor:
        return cls.from_luv(CIELUVColor.from_xyz(xyz))

    def _cylinder(self) -> Tuple[float, float, float]:
        return (self.c, self.h, self.l)

    @classmethod
    def _from_cylinder(cls, radius: float, hue: float, height: float) -> CIELCHuvColor:
        return cls(height, radius, hue)
