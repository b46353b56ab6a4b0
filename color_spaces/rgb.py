# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: rgb.py — RGB working spaces.

Every RGB space here is fully described by three things:

  - primaries  (CIE 1931 xy of R, G, B)
  - reference white
  - transfer function (encode: linear → stored, decode: stored → linear)

The RGB ↔ XYZ matrix is derived from the primaries and white point at import
(``TransformMatrix.from_primaries``), so the forward matrix and its inverse
are consistent to float64 precision and RGB (1, 1, 1) is exactly the white.

Components are unclamped floats where 1.0 is full intensity.  Values outside
[0, 1] are valid (out-of-gamut) intermediates; the transfer functions are
odd-symmetric so negative channels round-trip too.

Spaces:
    LinearRGBColor : sRGB primaries, no transfer curve (D65)
    RGBColor       : sRGB, IEC 61966-2-1 (D65)
    AdobeRGBColor  : Adobe RGB (1998), γ = 563/256 (D65)
    ROMMRGBColor   : ROMM / ProPhoto RGB, γ = 1.8 with linear toe (D50)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Final, Optional, Tuple, Type, TypeVar

from tint_colorengine import Color, XYZColor
from tint_colorpoint import BoxGamut, ColorPoint
from tint_coord import Coord
from tint_errors import OutOfRangeError
from tint_illuminants import Illuminant, IlluminantLike
from tint_matrix import TransformMatrix

__all__ = [
    "RGBSpace",
    "LinearRGBColor",
    "RGBColor",
    "AdobeRGBColor",
    "ROMMRGBColor",
    "SRGB_MATRIX",
    "ADOBE_RGB_MATRIX",
    "ROMM_RGB_MATRIX",
]

R = TypeVar("R", bound="RGBSpace")

# --- Primaries (CIE 1931 xy) ---
_SRGB_PRIMARIES = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
_ADOBE_PRIMARIES = ((0.64, 0.33), (0.21, 0.71), (0.15, 0.06))
_ROMM_PRIMARIES = ((0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001))

SRGB_MATRIX: Final[TransformMatrix] = TransformMatrix.from_primaries(
    *_SRGB_PRIMARIES, Illuminant.D65.white_point())
ADOBE_RGB_MATRIX: Final[TransformMatrix] = TransformMatrix.from_primaries(
    *_ADOBE_PRIMARIES, Illuminant.D65.white_point())
ROMM_RGB_MATRIX: Final[TransformMatrix] = TransformMatrix.from_primaries(
    *_ROMM_PRIMARIES, Illuminant.D50.white_point())

# --- sRGB transfer break points ---
# The encoded cutoff is derived from the linear one so both branches agree
# on which side of the toe a value sits.
_SRGB_LINEAR_CUTOFF: Final[float] = 0.0031308
_SRGB_ENCODED_CUTOFF: Final[float] = 12.92 * _SRGB_LINEAR_CUTOFF

_ADOBE_GAMMA: Final[float] = 563.0 / 256.0

_ROMM_GAMMA: Final[float] = 1.8
_ROMM_LINEAR_CUTOFF: Final[float] = 1.0 / 512.0
_ROMM_ENCODED_CUTOFF: Final[float] = 16.0 / 512.0


# =============================================================================
# 1. TRANSFER FUNCTIONS (scalar, odd-symmetric)
# =============================================================================

def _srgb_encode(v: float) -> float:
    a = abs(v)
    if a <= _SRGB_LINEAR_CUTOFF:
        e = 12.92 * a
    else:
        e = 1.055 * a ** (1.0 / 2.4) - 0.055
    return math.copysign(e, v)

def _srgb_decode(v: float) -> float:
    a = abs(v)
    if a <= _SRGB_ENCODED_CUTOFF:
        d = a / 12.92
    else:
        d = ((a + 0.055) / 1.055) ** 2.4
    return math.copysign(d, v)

def _adobe_encode(v: float) -> float:
    return math.copysign(abs(v) ** (1.0 / _ADOBE_GAMMA), v)

def _adobe_decode(v: float) -> float:
    return math.copysign(abs(v) ** _ADOBE_GAMMA, v)

def _romm_encode(v: float) -> float:
    a = abs(v)
    e = 16.0 * a if a < _ROMM_LINEAR_CUTOFF else a ** (1.0 / _ROMM_GAMMA)
    return math.copysign(e, v)

def _romm_decode(v: float) -> float:
    a = abs(v)
    d = a / 16.0 if a < _ROMM_ENCODED_CUTOFF else a ** _ROMM_GAMMA
    return math.copysign(d, v)


# =============================================================================
# 2. SHARED RGB BEHAVIOUR
# =============================================================================

class RGBSpace(ColorPoint, Color):
    """
    Shared machinery for matrix + transfer-curve RGB spaces.

    Concrete spaces are frozen dataclasses with fields ``r``, ``g``, ``b``
    and set the ClassVars below.
    """

    __slots__ = ()

    matrix: ClassVar[TransformMatrix]
    reference_illuminant: ClassVar[Optional[IlluminantLike]] = Illuminant.D65

    @staticmethod
    def _encode(v: float) -> float:
        return v

    @staticmethod
    def _decode(v: float) -> float:
        return v

    def to_linear(self) -> Tuple[float, float, float]:
        """Linear-light (r, g, b)."""
        r, g, b = self.components
        return (self._decode(r), self._decode(g), self._decode(b))

    @classmethod
    def from_linear(cls: Type[R], r: float, g: float, b: float) -> R:
        return cls(cls._encode(r), cls._encode(g), cls._encode(b))  # type: ignore[call-arg]

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        x, y, z = self.matrix.apply(self.to_linear())
        return self._native_xyz((float(x), float(y), float(z)), illuminant)

    @classmethod
    def from_xyz(cls: Type[R], xyz: XYZColor) -> R:
        r, g, b = cls.matrix.apply_inverse(cls._reference_components(xyz))
        return cls.from_linear(float(r), float(g), float(b))

    def is_in_gamut(self) -> bool:
        """True if every channel lies in [0, 1]."""
        return all(0.0 <= v <= 1.0 for v in self.components)

    def clamped(self: R) -> R:
        """Nearest in-gamut color by per-channel clipping."""
        return self.nearest_in_gamut(BoxGamut.unit_cube())

    # -- embedding -----------------------------------------------------------
    def to_coord(self) -> Coord:
        return Coord(*self.components)

    @classmethod
    def from_coord(cls: Type[R], coord: Coord) -> R:
        return cls(coord.x, coord.y, coord.z)  # type: ignore[call-arg]


# =============================================================================
# 3. CONCRETE SPACES
# =============================================================================

@dataclass(frozen=True)
class LinearRGBColor(RGBSpace):
    """Linear-light sRGB (sRGB primaries, D65, no transfer curve)."""
    r: float
    g: float
    b: float

    matrix: ClassVar[TransformMatrix] = SRGB_MATRIX


@dataclass(frozen=True)
class RGBColor(RGBSpace):
    """
    sRGB (IEC 61966-2-1), D65.

    Components are floats with 1.0 as full intensity.  Use :meth:`from_rgb8`
    and :meth:`to_rgb8` for the usual 0..255 integer triple.

    Example:
        >>> RGBColor.from_rgb8(255, 0, 0).to_rgb8()
        (255, 0, 0)
    """
    r: float
    g: float
    b: float

    matrix: ClassVar[TransformMatrix] = SRGB_MATRIX

    _encode = staticmethod(_srgb_encode)
    _decode = staticmethod(_srgb_decode)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> RGBColor:
        """
        Builds a color from 8-bit channel values.

        Raises:
            OutOfRangeError: If a channel is outside 0..255.
        """
        channels = []
        for name, v in (("red", r), ("green", g), ("blue", b)):
            if not 0 <= v <= 255:
                raise OutOfRangeError(f"8-bit {name} channel", v, 0, 255)
            channels.append(v / 255.0)
        return cls(*channels)

    def to_rgb8(self) -> Tuple[int, int, int]:
        """Clamped and rounded 8-bit (r, g, b)."""
        r, g, b = (int(round(min(max(v, 0.0), 1.0) * 255.0)) for v in self.components)
        return (r, g, b)

    def to_hex(self) -> str:
        """``#RRGGBB`` of the clamped 8-bit value."""
        return "#{:02X}{:02X}{:02X}".format(*self.to_rgb8())


@dataclass(frozen=True)
class AdobeRGBColor(RGBSpace):
    """Adobe RGB (1998), D65, pure power curve γ = 563/256."""
    r: float
    g: float
    b: float

    matrix: ClassVar[TransformMatrix] = ADOBE_RGB_MATRIX

    _encode = staticmethod(_adobe_encode)
    _decode = staticmethod(_adobe_decode)


@dataclass(frozen=True)
class ROMMRGBColor(RGBSpace):
    """
    ROMM RGB (ProPhoto), D50.

    γ = 1.8 with a linear segment of slope 16 below 1/512 linear.  The two
    pieces meet exactly at (1/512, 1/32), so the curve is continuous.
    """
    r: float
    g: float
    b: float

    matrix: ClassVar[TransformMatrix] = ROMM_RGB_MATRIX
    reference_illuminant: ClassVar[Optional[IlluminantLike]] = Illuminant.D50

    _encode = staticmethod(_romm_encode)
    _decode = staticmethod(_romm_decode)
