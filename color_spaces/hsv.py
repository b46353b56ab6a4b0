# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: hsv.py — HSV and HSL, the hexcone models of sRGB.

Both are pure re-parameterisations of :class:`~color_spaces.rgb.RGBColor`
and inherit its D65 reference white.  Hue is in degrees [0, 360); saturation,
value and lightness are fractions where 1.0 is full.

Achromatic colors (r == g == b) have no hue; they report h = 0 and s = 0.
Out-of-gamut input hits the same singularity where the saturation
denominator vanishes: an HSL lightness of exactly 0 or 1, or an HSV value of
exactly 0, reports s = 0 even when the channels differ, so such a color does
not survive the round trip (RGB(1.2, 0.8, 0.9) comes back as white).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from tint_colorengine import Color, XYZColor
from tint_illuminants import Illuminant, IlluminantLike

from .polar import CylindricalPoint, normalize_hue
from .rgb import RGBColor

__all__ = ["HSVColor", "HSLColor"]


def _hue_and_range(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """(hue, max, min) of an RGB triple."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    if delta == 0.0:
        h = 0.0
    elif mx == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif mx == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)
    return normalize_hue(h), mx, mn

def _hue_to_rgb(h: float, c: float, m: float) -> Tuple[float, float, float]:
    """Inverse hexcone: chroma ``c`` at hue ``h`` lifted by ``m``."""
    hp = normalize_hue(h) / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    sector = int(hp) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return (r + m, g + m, b + m)


class _HexconeColor(CylindricalPoint, Color):
    """Routing through sRGB shared by HSV and HSL."""

    __slots__ = ()

    reference_illuminant: ClassVar[Optional[IlluminantLike]] = Illuminant.D65

    def to_rgb(self) -> RGBColor:
        raise NotImplementedError

    @classmethod
    def from_rgb(cls, rgb: RGBColor):
        raise NotImplementedError

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        return self.to_rgb().to_xyz(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor):
        return cls.from_rgb(RGBColor.from_xyz(xyz))


@dataclass(frozen=True)
class HSVColor(_HexconeColor):
    """
    Hue / saturation / value.

    Attributes:
        h: Hue in degrees, [0, 360).
        s: Saturation, 0 (gray) .. 1.
        v: Value (brightest channel), 0 .. 1.
    """
    h: float
    s: float
    v: float

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> HSVColor:
        h, mx, mn = _hue_and_range(rgb.r, rgb.g, rgb.b)
        s = (mx - mn) / mx if mx != 0.0 else 0.0
        return cls(h, s, mx)

    def to_rgb(self) -> RGBColor:
        c = self.v * self.s
        return RGBColor(*_hue_to_rgb(self.h, c, self.v - c))

    def _cylinder(self) -> Tuple[float, float, float]:
        return (self.s, self.h, self.v)

    @classmethod
    def _from_cylinder(cls, radius: float, hue: float, height: float) -> HSVColor:
        return cls(hue, radius, height)


@dataclass(frozen=True)
class HSLColor(_HexconeColor):
    """
    Hue / saturation / lightness.

    Attributes:
        h: Hue in degrees, [0, 360).
        s: Saturation, 0 (gray) .. 1.
        l: Lightness (mean of brightest and darkest channel), 0 .. 1.
    """
    h: float
    s: float
    l: float

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> HSLColor:
        h, mx, mn = _hue_and_range(rgb.r, rgb.g, rgb.b)
        l = (mx + mn) / 2.0
        denom = 1.0 - abs(2.0 * l - 1.0)
        s = (mx - mn) / denom if denom != 0.0 else 0.0
        return cls(h, s, l)

    def to_rgb(self) -> RGBColor:
        c = (1.0 - abs(2.0 * self.l - 1.0)) * self.s
        return RGBColor(*_hue_to_rgb(self.h, c, self.l - c / 2.0))

    def _cylinder(self) -> Tuple[float, float, float]:
        return (self.s, self.h, self.l)

    @classmethod
    def _from_cylinder(cls, radius: float, hue: float, height: float) -> HSLColor:
        return cls(hue, radius, height)
