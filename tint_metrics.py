# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_metrics.py — Perceptual color difference (ΔE).

Every metric takes two colors of *any* type, converts both to CIELAB (D50)
through the XYZ hub and applies its formula there:

    delta_e_cie1976   Euclidean distance in L*a*b*
    delta_e_cie1994   CIE 116-1995, graphic-arts or textile weights
    delta_e_cie2000   CIEDE2000 with parametric factors k_L, k_C, k_H
    delta_e_cmc       CMC l:c (1984)
    delta_e_din99     DIN 6176

CIE94 and CMC are asymmetric: the first argument is the reference (standard)
and the second the sample (batch).

Each formula is written once as an inlined Numba core and compiled twice,
with ``fastmath=True`` (default) and ``fastmath=False``.  Toggle with
:func:`set_strict_ieee`.

The switch is a process-wide module global, not per call: flipping it
affects every thread and every later metric call.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Final, Tuple

from numba import njit

from color_spaces.lab import CIELABColor
from tint_colorengine import Color, convert

__all__ = [
    "set_strict_ieee",
    "delta_e_cie1976",
    "delta_e_cie1994",
    "delta_e_cie2000",
    "delta_e_cmc",
    "delta_e_din99",
    "color_difference",
    "METHODS",
]

C25_7: Final[float] = 25.0 ** 7
DEG2RAD: Final[float] = math.pi / 180.0
RAD2DEG: Final[float] = 180.0 / math.pi


# --- Runtime Configuration ---
# When True, metrics use fastmath=False kernels that preserve strict IEEE 754
# semantics (inf / NaN propagation, no FP reassociation).
_STRICT_IEEE: bool = False

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)


# =============================================================================
# 1. FORMULA CORES (inlined into the compiled wrappers below)
# =============================================================================

@njit(inline="always")
def _de76_core(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float) -> float:
    dL = L1 - L2
    da = a1 - a2
    db = b1 - b2
    return math.sqrt(dL * dL + da * da + db * db)

@njit(inline="always")
def _de94_core(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
               k_L: float, K1: float, K2: float) -> float:
    dL = L1 - L2
    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    dC = C1 - C2

    da = a1 - a2
    db = b1 - b2
    # dH² = da² + db² - dC²  (can be negative due to FP noise → clamp)
    dH_sq = da * da + db * db - dC * dC
    if dH_sq < 0.0:
        dH_sq = 0.0

    SC = 1.0 + K1 * C1
    SH = 1.0 + K2 * C1

    term_L = dL / k_L
    term_C = dC / SC
    return math.sqrt(term_L * term_L + term_C * term_C + dH_sq / (SH * SH))

@njit(inline="always")
def _decmc_core(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                pl: float, pc: float) -> float:
    dL = L1 - L2
    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    dC = C1 - C2

    da = a1 - a2
    db = b1 - b2
    dH_sq = da * da + db * db - dC * dC
    if dH_sq < 0.0:
        dH_sq = 0.0

    # Hue angle of reference (degrees)
    h1 = (math.atan2(b1, a1) * RAD2DEG) % 360.0

    if L1 < 16.0:
        SL = 0.511
    else:
        SL = (0.040975 * L1) / (1.0 + 0.01765 * L1)

    SC = (0.0638 * C1) / (1.0 + 0.0131 * C1) + 0.638

    if 164.0 <= h1 <= 345.0:
        T = 0.56 + abs(0.2 * math.cos((h1 + 168.0) * DEG2RAD))
    else:
        T = 0.36 + abs(0.4 * math.cos((h1 + 35.0) * DEG2RAD))

    C1_4 = C1 * C1 * C1 * C1
    F = math.sqrt(C1_4 / (C1_4 + 1900.0))
    SH = SC * (F * T + 1.0 - F)

    term_L = dL / (pl * SL)
    term_C = dC / (pc * SC)
    return math.sqrt(term_L * term_L + term_C * term_C + dH_sq / (SH * SH))

@njit(inline="always")
def _de2000_core(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                 k_L: float, k_C: float, k_H: float) -> float:
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_bar = (C1 + C2) * 0.5
    C_bar_7 = C_bar ** 7
    G = 0.5 * (1.0 - math.sqrt(C_bar_7 / (C_bar_7 + C25_7)))
    a1_p = (1.0 + G) * a1
    a2_p = (1.0 + G) * a2
    C1_p = math.hypot(a1_p, b1)
    C2_p = math.hypot(a2_p, b2)
    h1_p = (math.atan2(b1, a1_p) * RAD2DEG) % 360.0
    h2_p = (math.atan2(b2, a2_p) * RAD2DEG) % 360.0

    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    dh_p = 0.0
    if C1_p * C2_p != 0.0:
        diff = h2_p - h1_p
        if abs(diff) <= 180.0:
            dh_p = diff
        elif diff > 180.0:
            dh_p = diff - 360.0
        else:
            dh_p = diff + 360.0
    dH_p = 2.0 * math.sqrt(C1_p * C2_p) * math.sin(dh_p * DEG2RAD * 0.5)

    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_bar_p = h1_p + h2_p
    if C1_p * C2_p != 0.0:
        if abs(h1_p - h2_p) <= 180.0:
            h_bar_p *= 0.5
        elif h_bar_p < 360.0:
            h_bar_p = (h_bar_p + 360.0) * 0.5
        else:
            h_bar_p = (h_bar_p - 360.0) * 0.5

    T = (1.0 - 0.17 * math.cos((h_bar_p - 30.0) * DEG2RAD)
         + 0.24 * math.cos((2.0 * h_bar_p) * DEG2RAD)
         + 0.32 * math.cos((3.0 * h_bar_p + 6.0) * DEG2RAD)
         - 0.20 * math.cos((4.0 * h_bar_p - 63.0) * DEG2RAD))
    d_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    C_bar_p_7 = C_bar_p ** 7
    RC = 2.0 * math.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))
    RT = -math.sin((2.0 * d_theta) * DEG2RAD) * RC
    L_term = (L_bar_p - 50.0) ** 2
    SL = 1.0 + (0.015 * L_term) / math.sqrt(20.0 + L_term)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T

    tL = dL_p / (k_L * SL)
    tC = dC_p / (k_C * SC)
    tH = dH_p / (k_H * SH)
    return math.sqrt(tL * tL + tC * tC + tH * tH + RT * tC * tH)

@njit(inline="always")
def _din99_lab(L: float, a: float, b: float, kE: float, kCH: float) -> Tuple[float, float, float]:
    """CIELAB → DIN99 (L99, a99, b99).  The a/b plane is rotated by 16°."""
    cos_16 = math.cos(16.0 * DEG2RAD)
    sin_16 = math.sin(16.0 * DEG2RAD)
    L99 = 105.51 * math.log(1.0 + 0.0158 * L)
    e = a * cos_16 + b * sin_16
    f = 0.7 * (-a * sin_16 + b * cos_16)
    G = math.sqrt(e * e + f * f)
    if G < 1e-12:
        return L99, 0.0, 0.0
    C99 = math.log(1.0 + 0.045 * G) / (0.045 * kCH * kE)
    h99 = math.atan2(f, e)
    return L99, C99 * math.cos(h99), C99 * math.sin(h99)

@njit(inline="always")
def _din99_core(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                kE: float, kCH: float) -> float:
    L99_1, a99_1, b99_1 = _din99_lab(L1, a1, b1, kE, kCH)
    L99_2, a99_2, b99_2 = _din99_lab(L2, a2, b2, kE, kCH)
    dL = (L99_1 - L99_2) / kE
    da = a99_1 - a99_2
    db = b99_1 - b99_2
    return math.sqrt(dL * dL + da * da + db * db)


# =============================================================================
# 2. COMPILED VARIANTS
# =============================================================================

@njit(cache=True, fastmath=True)
def _de76_fast(L1, a1, b1, L2, a2, b2):
    return _de76_core(L1, a1, b1, L2, a2, b2)

@njit(cache=True, fastmath=False)
def _de76_strict(L1, a1, b1, L2, a2, b2):
    return _de76_core(L1, a1, b1, L2, a2, b2)

@njit(cache=True, fastmath=True)
def _de94_fast(L1, a1, b1, L2, a2, b2, k_L, K1, K2):
    return _de94_core(L1, a1, b1, L2, a2, b2, k_L, K1, K2)

@njit(cache=True, fastmath=False)
def _de94_strict(L1, a1, b1, L2, a2, b2, k_L, K1, K2):
    return _de94_core(L1, a1, b1, L2, a2, b2, k_L, K1, K2)

@njit(cache=True, fastmath=True)
def _decmc_fast(L1, a1, b1, L2, a2, b2, pl, pc):
    return _decmc_core(L1, a1, b1, L2, a2, b2, pl, pc)

@njit(cache=True, fastmath=False)
def _decmc_strict(L1, a1, b1, L2, a2, b2, pl, pc):
    return _decmc_core(L1, a1, b1, L2, a2, b2, pl, pc)

@njit(cache=True, fastmath=True)
def _de2000_fast(L1, a1, b1, L2, a2, b2, k_L, k_C, k_H):
    return _de2000_core(L1, a1, b1, L2, a2, b2, k_L, k_C, k_H)

@njit(cache=True, fastmath=False)
def _de2000_strict(L1, a1, b1, L2, a2, b2, k_L, k_C, k_H):
    return _de2000_core(L1, a1, b1, L2, a2, b2, k_L, k_C, k_H)

@njit(cache=True, fastmath=True)
def _din99_fast(L1, a1, b1, L2, a2, b2, kE, kCH):
    return _din99_core(L1, a1, b1, L2, a2, b2, kE, kCH)

@njit(cache=True, fastmath=False)
def _din99_strict(L1, a1, b1, L2, a2, b2, kE, kCH):
    return _din99_core(L1, a1, b1, L2, a2, b2, kE, kCH)


def _pick(fast: Callable[..., float], strict: Callable[..., float]) -> Callable[..., float]:
    return strict if _STRICT_IEEE else fast


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def _lab_pair(reference: Color, sample: Color) -> Tuple[float, ...]:
    l1 = convert(reference, CIELABColor)
    l2 = convert(sample, CIELABColor)
    return (l1.l, l1.a, l1.b, l2.l, l2.a, l2.b)

def delta_e_cie1976(reference: Color, sample: Color) -> float:
    """CIE 1976 ΔE*ab, the Euclidean distance in L*a*b*."""
    return float(_pick(_de76_fast, _de76_strict)(*_lab_pair(reference, sample)))

def delta_e_cie1994(reference: Color, sample: Color, textiles: bool = False,
                    k_L: float = 1.0, K1: float = 0.045, K2: float = 0.015) -> float:
    """
    CIE 1994 color difference (CIE Publication 116-1995).

    Note: This metric is **asymmetric**: ``reference`` sets the weighting
    functions.

    Args:
        reference: Reference color.
        sample: Sample color.
        textiles: If True, overrides k_L=2.0, K1=0.048, K2=0.014.
        k_L: Lightness parametric factor (1.0 for graphic arts).
        K1: Chroma weighting constant.
        K2: Hue weighting constant.
    """
    if textiles:
        k_L, K1, K2 = 2.0, 0.048, 0.014
    return float(_pick(_de94_fast, _de94_strict)(
        *_lab_pair(reference, sample), float(k_L), float(K1), float(K2)))

def delta_e_cie2000(reference: Color, sample: Color,
                    k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0,
                    textiles: bool = False) -> float:
    """
    CIEDE2000 color difference.

    Args:
        reference: Reference color.
        sample: Sample color.
        k_L: Parametric lightness weight.
        k_C: Parametric chroma weight.
        k_H: Parametric hue weight.
        textiles: If True, overrides k_L=2.0, k_C=1.0, k_H=1.0.

    References:
        Sharma, Wu & Dalal (2005). "The CIEDE2000 Color-Difference Formula:
        Implementation Notes, Supplementary Test Data, and Mathematical
        Observations".
    """
    if textiles:
        k_L, k_C, k_H = 2.0, 1.0, 1.0
    return float(_pick(_de2000_fast, _de2000_strict)(
        *_lab_pair(reference, sample), float(k_L), float(k_C), float(k_H)))

def delta_e_cmc(reference: Color, sample: Color, pl: float = 2.0, pc: float = 1.0) -> float:
    """
    CMC l:c (1984) color difference.

    Args:
        reference: Standard.
        sample: Batch.
        pl: Lightness factor (2.0 for acceptability, 1.0 for perceptibility).
        pc: Chroma factor.
    """
    return float(_pick(_decmc_fast, _decmc_strict)(
        *_lab_pair(reference, sample), float(pl), float(pc)))

def delta_e_din99(reference: Color, sample: Color, textiles: bool = False) -> float:
    """
    DIN99 color difference (DIN 6176).

    Args:
        textiles: If True, uses kE=2.0, kCH=0.5.
    """
    kE = 2.0 if textiles else 1.0
    kCH = 0.5 if textiles else 1.0
    return float(_pick(_din99_fast, _din99_strict)(*_lab_pair(reference, sample), kE, kCH))


METHODS: Final[Dict[str, Callable[..., float]]] = {
    "cie1976": delta_e_cie1976,
    "cie1994": delta_e_cie1994,
    "cie2000": delta_e_cie2000,
    "cmc": delta_e_cmc,
    "din99": delta_e_din99,
}

def color_difference(reference: Color, sample: Color, method: str = "cie2000",
                     **kwargs: Any) -> float:
    """
    ΔE between two colors of any type by the named formula.

    Args:
        method: One of ``METHODS`` (case-insensitive).
        **kwargs: Forwarded to the formula (e.g. ``textiles=True``).

    Raises:
        ValueError: If ``method`` is unknown.
    """
    try:
        func = METHODS[method.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown color difference method {method!r}; "
            f"expected one of {sorted(METHODS)}"
        ) from None
    return func(reference, sample, **kwargs)
