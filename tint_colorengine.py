# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_colorengine.py — CIE XYZ hub and generic color conversion.

Every color space knows exactly two things: how to express itself as CIE
XYZ and how to build itself from CIE XYZ.  Conversion between any two
spaces goes through that hub:

    source.to_xyz()  →  Bradford adapt to target's reference white  →  Target.from_xyz()

so adding a new space never requires writing conversions to the others.

Reference illuminants
---------------------
Each color class carries a ``reference_illuminant`` ClassVar.  A space's
native formulas assume that white (sRGB and friends: D65, CIELAB and the
ICC-flavoured spaces: D50).  ``XYZColor`` itself carries its illuminant per
instance and has no class-level reference.

Classes:
    Color    : Base class.  Subclasses override ``to_xyz`` / ``from_xyz``.
    XYZColor : The hub.  Tristimulus value plus the illuminant it was
               measured under.

Functions:
    convert : Generic hub conversion between any two color types.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import ClassVar, Optional, Tuple, Type, TypeVar

import numpy as np

from tint_adaptation import adapt
from tint_coord import Coord
from tint_colorpoint import ColorPoint
from tint_illuminants import Illuminant, IlluminantLike, WhitePoint

__all__ = ["Color", "XYZColor", "convert"]

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Color")


# =============================================================================
# 1. BASE CLASS
# =============================================================================

class Color:
    """
    Base class for all color representations.

    Subclasses must override:
        - to_xyz(illuminant=None)   → XYZColor
        - from_xyz(xyz) (classmethod) → Self

    and set ``reference_illuminant`` if their native white is not D50.
    Concrete colors are frozen dataclasses whose first three fields are the
    numeric components.
    """

    __slots__ = ()

    reference_illuminant: ClassVar[Optional[IlluminantLike]] = Illuminant.D50

    def __post_init__(self) -> None:
        # Normalise ints / numpy scalars to float so equality is by value
        for f in fields(self):  # type: ignore[arg-type]
            v = getattr(self, f.name)
            if isinstance(v, (int, float, np.number)) and not isinstance(v, bool):
                object.__setattr__(self, f.name, float(v))

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        """
        Expresses this color as CIE XYZ.

        Args:
            illuminant: Lighting to express the result under.  ``None`` keeps
                the space's reference white.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement to_xyz()"
        )

    @classmethod
    def from_xyz(cls: Type[C], xyz: XYZColor) -> C:
        """Builds a color of this space from any XYZ value."""
        raise NotImplementedError(
            f"{cls.__name__} must implement from_xyz()"
        )

    def convert(self, target: Type[C]) -> C:
        """Method form of :func:`convert`."""
        return convert(self, target)

    @property
    def components(self) -> Tuple[float, float, float]:
        """The three numeric components in declaration order."""
        a, b, c = (getattr(self, f.name) for f in fields(self)[:3])  # type: ignore[arg-type]
        return (a, b, c)

    # -- helpers for subclasses ---------------------------------------------
    def _native_xyz(
        self,
        xyz: Tuple[float, float, float],
        illuminant: Optional[IlluminantLike],
    ) -> XYZColor:
        """Wraps tristimulus computed under the reference white, adapting on request."""
        native = XYZColor(*xyz, illuminant=self.reference_illuminant)
        return native if illuminant is None else native.color_adapt(illuminant)

    @classmethod
    def _reference_components(cls, xyz: XYZColor) -> Tuple[float, float, float]:
        """(X, Y, Z) of ``xyz`` re-expressed under this space's reference white."""
        ref = cls.reference_illuminant
        if ref is None:
            return xyz.components
        return xyz.color_adapt(ref).components


# =============================================================================
# 2. XYZ HUB
# =============================================================================

@dataclass(frozen=True)
class XYZColor(ColorPoint, Color):
    """
    CIE 1931 tristimulus value, normalised so the reference white has Y = 1.

    Negative and above-white components are legal intermediate values and are
    never clamped.

    Attributes:
        x, y, z: Tristimulus components.
        illuminant: Lighting the value was measured or computed under.
    """
    x: float
    y: float
    z: float
    illuminant: IlluminantLike = Illuminant.D50

    reference_illuminant: ClassVar[Optional[IlluminantLike]] = None

    def to_xyz(self, illuminant: Optional[IlluminantLike] = None) -> XYZColor:
        return self if illuminant is None else self.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return xyz

    def color_adapt(self, illuminant: IlluminantLike) -> XYZColor:
        """
        The same surface seen under ``illuminant`` (Bradford, full adaptation).

        Adapting to the illuminant already carried returns ``self``.
        """
        if illuminant == self.illuminant:
            return self
        x, y, z = adapt((self.x, self.y, self.z), self.illuminant, illuminant)
        return XYZColor(x, y, z, illuminant)

    @classmethod
    def white_point(cls, illuminant: IlluminantLike) -> XYZColor:
        """The reference white of ``illuminant`` (Y = 1) as a color."""
        wx, wy, wz = illuminant.white_point()
        return cls(wx, wy, wz, illuminant)

    def chromaticity(self) -> Tuple[float, float]:
        """
        CIE 1931 (x, y).  Black maps to the chromaticity of the illuminant.
        """
        total = self.x + self.y + self.z
        if total == 0.0:
            wp: WhitePoint = self.illuminant.white_point()
            total = sum(wp)
            return (wp[0] / total, wp[1] / total)
        return (self.x / total, self.y / total)

    # -- comparison ----------------------------------------------------------
    def approx_equal(self, other: XYZColor, tol: float = 1e-3) -> bool:
        """
        Componentwise equality within ``tol``.  Illuminants are not
        compared; see :meth:`approx_visually_equal`.
        """
        return all(math.isclose(a, b, rel_tol=0.0, abs_tol=tol)
                   for a, b in zip(self.components, other.components))

    def approx_visually_equal(self, other: XYZColor, tol: float = 1e-3) -> bool:
        """
        True if ``other`` looks the same as ``self`` once both are seen
        under this color's illuminant.
        """
        return self.approx_equal(other.color_adapt(self.illuminant), tol=tol)

    # -- embedding -----------------------------------------------------------
    def to_coord(self) -> Coord:
        return Coord(self.x, self.y, self.z)

    @classmethod
    def from_coord(cls, coord: Coord) -> XYZColor:
        return cls(coord.x, coord.y, coord.z)

    def _rebuild(self, coord: Coord) -> XYZColor:
        return XYZColor(coord.x, coord.y, coord.z, self.illuminant)

    def _align(self, other: XYZColor) -> XYZColor:
        return other.color_adapt(self.illuminant)


# =============================================================================
# 3. GENERIC CONVERSION
# =============================================================================

def convert(color: Color, target: Type[C]) -> C:
    """
    Converts ``color`` into the color type ``target`` via CIE XYZ.

    The intermediate XYZ value is Bradford-adapted to the target's reference
    white before ``target.from_xyz`` sees it.  Converting to the color's own
    type returns it unchanged.

    Args:
        color: Any color instance.
        target: Destination color class.

    Returns:
        Instance of ``target``.

    Raises:
        TypeError: If ``target`` is not a color class.
    """
    if not (isinstance(target, type) and issubclass(target, Color)):
        raise TypeError(f"Conversion target must be a Color subclass, got {target!r}")
    if type(color) is target:
        return color  # type: ignore[return-value]

    xyz = color.to_xyz()
    dest = target.reference_illuminant
    if dest is not None:
        xyz = xyz.color_adapt(dest)
    logger.debug("convert %s -> %s via XYZ under %r",
                 type(color).__name__, target.__name__, xyz.illuminant)
    return target.from_xyz(xyz)

