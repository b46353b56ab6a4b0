# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_illuminants.py — Standard and custom illuminants.

Every illuminant resolves to a white point (X, Y, Z) normalised to Y = 1
under the CIE 1931 2° standard observer.

Standard illuminants are a closed enumeration backed by a constant table
(ASTM E308-01 values, as tabulated by Lindbloom).  Custom illuminants are
either derived from a correlated color temperature or given an explicit
white point.

References:
    - CIE 15:2004 "Colorimetry"
    - Kim, Y.-S. et al. (2002). US Patent 7,024,034 (Planckian locus cubic
      spline approximation, 1667 K .. 25000 K).
    - Judd, MacAdam & Wyszecki (1964). CIE daylight locus.
"""

from __future__ import annotations

import enum
import math
import warnings
from dataclasses import dataclass
from typing import Dict, Final, Optional, Sequence, Tuple, TypeAlias, Union

from tint_errors import ConfigurationError, OutOfRangeError
from tint_matrix import BRADFORD

__all__ = [
    "WhitePoint",
    "Illuminant",
    "CustomIlluminant",
    "IlluminantLike",
    "PLANCKIAN_CCT_RANGE",
    "DAYLIGHT_CCT_RANGE",
    "xy_to_white_point",
    "planckian_xy",
    "daylight_xy",
]

WhitePoint: TypeAlias = Tuple[float, float, float]

# Valid domains of the locus approximations (Kelvin, inclusive)
PLANCKIAN_CCT_RANGE: Final[Tuple[float, float]] = (1667.0, 25000.0)
DAYLIGHT_CCT_RANGE: Final[Tuple[float, float]] = (2500.0, 25000.0)


# =============================================================================
# 1. STANDARD ILLUMINANTS
# =============================================================================

class Illuminant(enum.Enum):
    """CIE standard illuminants (2° observer)."""

    A = "A"        # Incandescent / tungsten, ~2856 K
    B = "B"        # Direct noon sunlight (obsolete)
    C = "C"        # Average daylight (obsolete, pre-D65)
    D50 = "D50"    # Horizon light, ICC profile PCS
    D55 = "D55"    # Mid-morning / mid-afternoon daylight
    D65 = "D65"    # Noon daylight, sRGB / television
    D75 = "D75"    # North sky daylight
    E = "E"        # Equal energy
    F2 = "F2"      # Cool white fluorescent
    F7 = "F7"      # Broad-band daylight fluorescent
    F11 = "F11"    # Narrow tri-band fluorescent

    def white_point(self) -> WhitePoint:
        """Tristimulus white point with Y = 1."""
        return _STANDARD_WHITE_POINTS[self]

    @staticmethod
    def from_cct(cct: float, daylight: bool = False) -> CustomIlluminant:
        """Shorthand for :meth:`CustomIlluminant.from_cct`."""
        return CustomIlluminant.from_cct(cct, daylight=daylight)

    def __repr__(self) -> str:
        return f"Illuminant.{self.name}"


_STANDARD_WHITE_POINTS: Final[Dict[Illuminant, WhitePoint]] = {
    Illuminant.A:   (1.09850, 1.00000, 0.35585),
    Illuminant.B:   (0.99072, 1.00000, 0.85223),
    Illuminant.C:   (0.98074, 1.00000, 1.18232),
    Illuminant.D50: (0.96422, 1.00000, 0.82521),
    Illuminant.D55: (0.95682, 1.00000, 0.92149),
    Illuminant.D65: (0.95047, 1.00000, 1.08883),
    Illuminant.D75: (0.94972, 1.00000, 1.22638),
    Illuminant.E:   (1.00000, 1.00000, 1.00000),
    Illuminant.F2:  (0.99186, 1.00000, 0.67393),
    Illuminant.F7:  (0.95041, 1.00000, 1.08747),
    Illuminant.F11: (1.00962, 1.00000, 0.64350),
}


def _check_white_point(white: Sequence[float], label: str) -> WhitePoint:
    x, y, z = (float(v) for v in white)
    if not all(math.isfinite(v) and v > 0.0 for v in (x, y, z)):
        raise ConfigurationError(
            f"White point of {label} must have strictly positive, finite "
            f"components, got ({x!r}, {y!r}, {z!r})"
        )
    cone = BRADFORD.apply((x, y, z))
    if not all(c > 0.0 for c in cone):
        raise ConfigurationError(
            f"White point of {label} has a non-positive Bradford cone response "
            f"({cone[0]!r}, {cone[1]!r}, {cone[2]!r})"
        )
    return (x, y, z)

for _ill, _wp in _STANDARD_WHITE_POINTS.items():
    _check_white_point(_wp, repr(_ill))
del _ill, _wp


# =============================================================================
# 2. LOCUS APPROXIMATIONS
# =============================================================================

def _check_cct(cct: float, bounds: Tuple[float, float], name: str) -> float:
    t = float(cct)
    lo, hi = bounds
    if not math.isfinite(t) or not lo <= t <= hi:
        raise OutOfRangeError(name, t, lo, hi)
    return t

def planckian_xy(cct: float) -> Tuple[float, float]:
    """
    CIE 1931 (x, y) of a black-body radiator (Kim et al. cubic spline).

    Raises:
        OutOfRangeError: If ``cct`` is not finite or lies outside
            1667 K .. 25000 K.
    """
    t = _check_cct(cct, PLANCKIAN_CCT_RANGE, "Planckian CCT")
    t2, t3 = t * t, t * t * t

    if t <= 4000.0:
        x = -0.2661239e9 / t3 - 0.2343589e6 / t2 + 0.8776956e3 / t + 0.179910
    else:
        x = -3.0258469e9 / t3 + 2.1070379e6 / t2 + 0.2226347e3 / t + 0.240390

    if t <= 2222.0:
        y = -1.1063814 * x**3 - 1.34811020 * x**2 + 2.18555832 * x - 0.20219683
    elif t <= 4000.0:
        y = -0.9549476 * x**3 - 1.37418593 * x**2 + 2.09137015 * x - 0.16748867
    else:
        y = 3.0817580 * x**3 - 5.87338670 * x**2 + 3.75112997 * x - 0.37001483
    return (x, y)

def daylight_xy(cct: float) -> Tuple[float, float]:
    """
    CIE 1931 (x, y) on the CIE daylight locus.

    The polynomial is defined down to 2500 K but is only accurate from about
    4000 K; lower temperatures emit a ``UserWarning``.

    Raises:
        OutOfRangeError: If ``cct`` is not finite or lies outside
            2500 K .. 25000 K.
    """
    t = _check_cct(cct, DAYLIGHT_CCT_RANGE, "Daylight CCT")
    if t < 4000.0:
        warnings.warn(
            f"Daylight CCT {t:g} K is below 4000 K; the daylight locus "
            "is only accurate down to about 4000 K.",
            UserWarning,
            stacklevel=3,
        )
    t2, t3 = t * t, t * t * t
    if t <= 7000.0:
        x = -4.6070e9 / t3 + 2.9678e6 / t2 + 0.09911e3 / t + 0.244063
    else:
        x = -2.0064e9 / t3 + 1.9018e6 / t2 + 0.24748e3 / t + 0.237040
    y = -3.0 * x * x + 2.870 * x - 0.275
    return (x, y)

def xy_to_white_point(x: float, y: float) -> WhitePoint:
    """Chromaticity (x, y) to tristimulus (X, 1, Z)."""
    if y <= 0.0:
        raise ConfigurationError(f"Chromaticity y must be positive, got {y!r}")
    return (x / y, 1.0, (1.0 - x - y) / y)


# =============================================================================
# 3. CUSTOM ILLUMINANTS
# =============================================================================

@dataclass(frozen=True)
class CustomIlluminant:
    """
    An illuminant outside the standard table.

    Build with :meth:`from_cct` or :meth:`from_white_point`.  The stored
    white point is always normalised to Y = 1.  Instances are hashable and
    compare by value, so two illuminants built from the same temperature are
    the same illuminant.

    Attributes:
        white: Normalised white point (X, 1, Z).
        cct: Correlated color temperature in Kelvin, when the illuminant was
            derived from one.
        daylight: True if ``cct`` was placed on the daylight locus rather
            than the Planckian locus.
    """
    white: WhitePoint
    cct: Optional[float] = None
    daylight: bool = False

    def __post_init__(self) -> None:
        x, y, z = _check_white_point(self.white, "custom illuminant")
        object.__setattr__(self, "white", (x / y, 1.0, z / y))

    @classmethod
    def from_cct(cls, cct: float, daylight: bool = False) -> CustomIlluminant:
        """
        Illuminant whose white point sits on the Planckian locus (default)
        or the CIE daylight locus at the given temperature.

        Raises:
            OutOfRangeError: If ``cct`` is outside the locus' valid domain.
        """
        x, y = daylight_xy(cct) if daylight else planckian_xy(cct)
        return cls(white=xy_to_white_point(x, y), cct=float(cct), daylight=daylight)

    @classmethod
    def from_white_point(cls, white: Sequence[float]) -> CustomIlluminant:
        """
        Illuminant with an explicit tristimulus white point.

        Raises:
            ConfigurationError: If any component, or any Bradford cone
                response of the white point, is non-positive.
        """
        x, y, z = white
        return cls(white=(x, y, z))

    def white_point(self) -> WhitePoint:
        return self.white


IlluminantLike: TypeAlias = Union[Illuminant, CustomIlluminant]
