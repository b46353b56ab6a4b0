# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_coord.py — Three-component value vector.

``Coord`` is the geometric backing for every color that embeds in 3-space.
It is a frozen value type: arithmetic always returns a new instance.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np

__all__ = ["Coord"]


@dataclass(frozen=True)
class Coord:
    """
    An ordered triple (x, y, z) with vector arithmetic.

    Supports ``+``, ``-``, unary ``-``, multiplication by a scalar (either
    side) and division by a scalar.
    """
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        # Normalise numpy scalars / ints so equality and hashing are stable
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    # -- construction ------------------------------------------------------
    @classmethod
    def from_array(cls, arr: Iterable[float]) -> Coord:
        x, y, z = arr
        return cls(x, y, z)

    @classmethod
    def average(cls, coords: Iterable[Coord]) -> Coord:
        """
        Arithmetic mean of one or more coordinates.

        Raises:
            ValueError: If ``coords`` is empty.
        """
        pts = list(coords)
        if not pts:
            raise ValueError("Cannot average an empty collection of coordinates.")
        n = float(len(pts))
        return cls(
            math.fsum(p.x for p in pts) / n,
            math.fsum(p.y for p in pts) / n,
            math.fsum(p.z for p in pts) / n,
        )

    # -- sequence protocol -------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # -- arithmetic --------------------------------------------------------
    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Coord:
        if isinstance(scalar, Coord):
            return NotImplemented
        s = float(scalar)
        return Coord(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Coord:
        s = float(scalar)
        return Coord(self.x / s, self.y / s, self.z / s)

    # -- geometry ----------------------------------------------------------
    def euclidean_distance(self, other: Coord) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def lerp(self, other: Coord, t: float) -> Coord:
        """
        Linear interpolation ``self + (other - self) * t``.

        The endpoints are exact: ``t == 0`` returns ``self`` and ``t == 1``
        returns ``other``.  Equal components never drift.
        """
        if t == 0.0:
            return self
        if t == 1.0:
            return other
        return Coord(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def midpoint(self, other: Coord) -> Coord:
        return self.lerp(other, 0.5)

    def weighted_midpoint(self, other: Coord, weight: float) -> Coord:
        """
        Weighted average with ``weight`` on ``self`` and ``1 - weight`` on
        ``other``; ``weight == 1`` returns ``self``.
        """
        return self.lerp(other, 1.0 - weight)
