# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: polar.py — Helpers shared by the cylindrical spaces.

LCH, LCHuv, HSV and HSL all store (radius, hue, height).  Hues are in degrees
and always normalised to [0, 360).  For embedding they are unrolled to the
Cartesian point (radius·cos h, radius·sin h, height), so mixing and distance
never have to worry about hue wrap-around.
"""

from __future__ import annotations

import math
from typing import Tuple, Type, TypeVar

from tint_colorpoint import ColorPoint
from tint_coord import Coord

__all__ = ["normalize_hue", "to_polar", "from_polar", "CylindricalPoint"]

Y = TypeVar("Y", bound="CylindricalPoint")


def normalize_hue(h: float) -> float:
    """Hue angle in degrees folded into [0, 360)."""
    h = h % 360.0
    # tiny negative inputs fold to exactly 360.0
    return 0.0 if h >= 360.0 else h

def to_polar(x: float, y: float) -> Tuple[float, float]:
    """(x, y) → (radius, hue in degrees)."""
    return math.hypot(x, y), normalize_hue(math.degrees(math.atan2(y, x)))

def from_polar(radius: float, hue: float) -> Tuple[float, float]:
    """(radius, hue in degrees) → (x, y)."""
    rad = math.radians(hue)
    return radius * math.cos(rad), radius * math.sin(rad)


class CylindricalPoint(ColorPoint):
    """
    ColorPoint for (radius, hue, height) spaces.

    Subclasses supply ``_cylinder()`` and ``_from_cylinder()``.
    """

    __slots__ = ()

    def _cylinder(self) -> Tuple[float, float, float]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _cylinder()"
        )

    @classmethod
    def _from_cylinder(cls: Type[Y], radius: float, hue: float, height: float) -> Y:
        raise NotImplementedError(
            f"{cls.__name__} must implement _from_cylinder()"
        )

    def to_coord(self) -> Coord:
        radius, hue, height = self._cylinder()
        x, y = from_polar(radius, hue)
        return Coord(x, y, height)

    @classmethod
    def from_coord(cls: Type[Y], coord: Coord) -> Y:
        radius, hue = to_polar(coord.x, coord.y)
        return cls._from_cylinder(radius, hue, coord.z)
