# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_colorpoint.py — Geometric embedding of colors in 3-space.

A color space that maps onto a :class:`~tint_coord.Coord` (``to_coord`` /
``from_coord``) gets interpolation, distance, gradients and gamut projection
from the :class:`ColorPoint` mixin.  All operations happen in the space's
*own* coordinates: mixing two colors in RGB and mixing the same two colors
in CIELAB give different results, which is why only colors of the same type
can be mixed.

Distance here is plain Euclidean distance in the embedding.  It is only as
perceptually uniform as the space itself; see :mod:`tint_metrics` for
proper color-difference formulas.

Gamuts
------
A gamut is anything with ``contains(coord)`` and ``nearest(coord)``:

  - ``BoxGamut``     axis-aligned bounds, nearest point is the clamp.
  - ``PointGamut``   finite candidate set (optionally filtered by a
                     membership predicate), searched with a SciPy k-d tree.
  - ``SampledGamut`` a predicate evaluated on a regular lattice.

Ties in nearest-point search go to the lexicographically smallest
coordinate so results are deterministic.
"""

from __future__ import annotations

import math
from collections.abc import Sequence as SequenceABC
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    overload,
    runtime_checkable,
)

import numpy as np
from scipy.spatial import cKDTree

from tint_coord import Coord
from tint_errors import OutOfRangeError

__all__ = [
    "ColorPoint",
    "Gradient",
    "Gamut",
    "BoxGamut",
    "PointGamut",
    "SampledGamut",
    "mix",
    "distance",
    "gradient",
    "nearest_in_gamut",
]

P = TypeVar("P", bound="ColorPoint")

# Relative slack used to detect equidistant candidates.
_TIE_RTOL = 1e-12


# =============================================================================
# 1. GAMUTS
# =============================================================================

@runtime_checkable
class Gamut(Protocol):
    """
    Minimal interface a gamut must satisfy.

    contains(coord) → bool    membership predicate
    nearest(coord)  → Coord   closest member
    """
    def contains(self, coord: Coord) -> bool: ...
    def nearest(self, coord: Coord) -> Coord: ...


class BoxGamut:
    """Axis-aligned box ``lower <= coord <= upper`` (componentwise)."""

    __slots__ = ("lower", "upper")

    def __init__(self, lower: Iterable[float], upper: Iterable[float]) -> None:
        lo = Coord.from_array(lower)
        hi = Coord.from_array(upper)
        if any(l > h for l, h in zip(lo, hi)):
            raise ValueError(f"BoxGamut lower bound {lo} exceeds upper bound {hi}")
        self.lower = lo
        self.upper = hi

    @classmethod
    def unit_cube(cls) -> BoxGamut:
        """[0, 1]³, the displayable range of an RGB space."""
        return cls((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))

    def contains(self, coord: Coord) -> bool:
        return all(l <= v <= h for v, l, h in zip(coord, self.lower, self.upper))

    def nearest(self, coord: Coord) -> Coord:
        # The clamp is the unique Euclidean projection onto a box
        return Coord(*(min(max(v, l), h) for v, l, h in zip(coord, self.lower, self.upper)))

    def __repr__(self) -> str:
        return f"BoxGamut(lower={self.lower.as_tuple()}, upper={self.upper.as_tuple()})"


class PointGamut:
    """
    Finite gamut given by candidate points.

    If ``predicate`` is supplied, candidates failing it are discarded and
    membership is decided by the predicate; otherwise membership means being
    one of the candidates.

    Raises:
        ValueError: If no candidate survives the predicate.
    """

    def __init__(
        self,
        points: Iterable[Union[Coord, Sequence[float]]],
        predicate: Optional[Callable[[Coord], bool]] = None,
    ) -> None:
        coords = [p if isinstance(p, Coord) else Coord.from_array(p) for p in points]
        if predicate is not None:
            coords = [c for c in coords if predicate(c)]
        if not coords:
            raise ValueError("PointGamut needs at least one admissible point.")

        self._predicate = predicate
        self._points: Tuple[Coord, ...] = tuple(coords)
        self._members = frozenset(self._points)
        self._tree = cKDTree(np.array([c.as_tuple() for c in self._points], dtype=np.float64))

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[Coord, ...]:
        return self._points

    def contains(self, coord: Coord) -> bool:
        if self._predicate is not None:
            return bool(self._predicate(coord))
        return coord in self._members

    def nearest(self, coord: Coord) -> Coord:
        query = coord.as_array()
        best, _ = self._tree.query(query)
        radius = best + _TIE_RTOL * max(1.0, best)
        idx = self._tree.query_ball_point(query, r=radius)
        # query_ball_point can miss the winner by one ulp at radius 0
        if not idx:
            _, i = self._tree.query(query)
            return self._points[int(i)]
        return min((self._points[i] for i in idx), key=Coord.as_tuple)


class SampledGamut(PointGamut):
    """
    A membership predicate sampled on a regular ``steps``³ lattice spanning
    ``lower`` .. ``upper``.
    """

    def __init__(
        self,
        predicate: Callable[[Coord], bool],
        lower: Iterable[float],
        upper: Iterable[float],
        steps: int = 17,
    ) -> None:
        if steps < 2:
            raise ValueError(f"steps must be >= 2, got {steps}")
        axes = [np.linspace(l, h, steps) for l, h in zip(lower, upper)]
        grid = np.stack(np.meshgrid(*axes, indexing="ij"), axis=-1).reshape(-1, 3)
        super().__init__((Coord.from_array(row) for row in grid), predicate)


# =============================================================================
# 2. GRADIENT SEQUENCE
# =============================================================================

class Gradient(SequenceABC):
    """
    ``n`` colors evenly spaced (in the embedding) from ``start`` to ``end``.

    Lazily evaluated and restartable: iterate it as often as you like.
    Element 0 *is* ``start`` and element ``n - 1`` *is* ``end``.  Interior
    colors are interpolated toward ``toward`` (``end`` expressed in
    ``start``'s frame) when given, else toward ``end``.
    """

    __slots__ = ("_start", "_end", "_n", "_a", "_b")

    def __init__(self, start: ColorPoint, end: ColorPoint, n: int,
                 toward: Optional[ColorPoint] = None) -> None:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"Gradient length must be an integer, got {type(n).__name__}")
        if n < 2:
            raise ValueError(f"Gradient needs at least 2 colors (both endpoints), got {n}")
        self._start = start
        self._end = end
        self._n = int(n)
        self._a = start.to_coord()
        self._b = (end if toward is None else toward).to_coord()

    def __len__(self) -> int:
        return self._n

    @overload
    def __getitem__(self, index: int) -> Any: ...
    @overload
    def __getitem__(self, index: slice) -> List[Any]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._n))]
        i = int(index)
        if i < 0:
            i += self._n
        if not 0 <= i < self._n:
            raise IndexError(f"Gradient index {index} out of range for length {self._n}")
        if i == 0:
            return self._start
        if i == self._n - 1:
            return self._end
        return self._start._rebuild(self._a.lerp(self._b, i / (self._n - 1)))

    def __repr__(self) -> str:
        return f"Gradient({self._start!r} -> {self._end!r}, n={self._n})"


# =============================================================================
# 3. COLORPOINT MIXIN
# =============================================================================

class ColorPoint:
    """
    Embedding capability for colors that map onto a 3-D coordinate.

    Subclasses implement ``to_coord`` and ``from_coord``.  Two hooks may be
    overridden where a coordinate alone does not capture the color:

      - ``_rebuild(coord)``  build a color of the same kind as ``self``
      - ``_align(other)``    bring ``other`` into ``self``'s frame before
                             comparing (e.g. a common illuminant)
    """

    __slots__ = ()

    def to_coord(self) -> Coord:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement to_coord()"
        )

    @classmethod
    def from_coord(cls: type[P], coord: Coord) -> P:
        raise NotImplementedError(
            f"{cls.__name__} must implement from_coord()"
        )

    # -- hooks -------------------------------------------------------------
    def _rebuild(self: P, coord: Coord) -> P:
        return type(self).from_coord(coord)

    def _align(self: P, other: P) -> P:
        return other

    def _peer(self: P, other: Any) -> P:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}; "
                f"convert one of them first."
            )
        return self._align(other)

    # -- operations --------------------------------------------------------
    def mix(self: P, other: P, t: float = 0.5) -> P:
        """
        Color at fraction ``t`` of the way from ``self`` to ``other``.

        Args:
            other: Color of the same type.
            t: Interpolation fraction in [0, 1].

        Raises:
            OutOfRangeError: If ``t`` is not within [0, 1].
            TypeError: If ``other`` is of a different color type.
        """
        t = float(t)
        if not (math.isfinite(t) and 0.0 <= t <= 1.0):
            raise OutOfRangeError("Interpolation fraction", t, 0.0, 1.0)
        peer = self._peer(other)
        if t == 0.0 or peer == self:
            return self
        if t == 1.0:
            return other
        return self._rebuild(self.to_coord().lerp(peer.to_coord(), t))

    def midpoint(self: P, other: P) -> P:
        return self.mix(other, 0.5)

    def weighted_midpoint(self: P, other: P, weight: float) -> P:
        """``weight`` on ``self``, ``1 - weight`` on ``other``."""
        return self.mix(other, 1.0 - float(weight))

    @classmethod
    def average(cls: type[P], colors: Iterable[P]) -> P:
        """
        Centroid of one or more colors, in the frame of the first one.

        Raises:
            ValueError: If ``colors`` is empty.
        """
        items = list(colors)
        if not items:
            raise ValueError("Cannot average an empty collection of colors.")
        anchor = items[0]
        if not isinstance(anchor, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(anchor).__name__}")
        coords = [anchor._peer(c).to_coord() for c in items]
        return anchor._rebuild(Coord.average(coords))

    def distance(self: P, other: P) -> float:
        """Euclidean distance between the embeddings of two same-type colors."""
        return self.to_coord().euclidean_distance(self._peer(other).to_coord())

    def gradient(self: P, other: P, n: int) -> Gradient:
        """
        ``n`` evenly spaced colors from ``self`` to ``other`` inclusive.

        For ``n == 2`` the sequence is exactly ``[self, other]``.
        """
        return Gradient(self, other, n, toward=self._peer(other))

    def nearest_in_gamut(self: P, gamut: Gamut) -> P:
        """
        Closest color (in this space's embedding) that lies in ``gamut``.

        A color already inside the gamut is returned unchanged.
        """
        coord = self.to_coord()
        if gamut.contains(coord):
            return self
        return self._rebuild(gamut.nearest(coord))


# =============================================================================
# 4. FREE-FUNCTION FORM
# =============================================================================

def mix(a: P, b: P, t: float = 0.5) -> P:
    """Function form of :meth:`ColorPoint.mix`."""
    return a.mix(b, t)

def distance(a: ColorPoint, b: ColorPoint) -> float:
    """Function form of :meth:`ColorPoint.distance`."""
    return a.distance(b)

def gradient(a: ColorPoint, b: ColorPoint, n: int) -> Gradient:
    """Function form of :meth:`ColorPoint.gradient`."""
    return a.gradient(b, n)

def nearest_in_gamut(color: P, gamut: Gamut) -> P:
    """Function form of :meth:`ColorPoint.nearest_in_gamut`."""
    return color.nearest_in_gamut(gamut)
