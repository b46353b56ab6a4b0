# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_errors.py — Exception hierarchy.

Only two things can go wrong in the engine:
  - A formula is asked to evaluate outside its valid domain (a correlated
    color temperature beyond the locus approximation, an interpolation
    fraction outside [0, 1]).  Reported to the caller as OutOfRangeError.
  - A static definition is broken (singular transform matrix, white point
    with a non-positive component).  Raised as ConfigurationError while the
    space or illuminant is being built, never per conversion call.

Conversions themselves are total: negative, out-of-gamut and imaginary
colors are valid values.
"""

__all__ = ["TintError", "OutOfRangeError", "ConfigurationError"]


class TintError(Exception):
    """Base class for all errors raised by Tint."""


class OutOfRangeError(TintError, ValueError):
    """
    An input to a formula-based computation lies outside the domain the
    formula is valid for.

    Attributes:
        value: The offending input.
        lower: Inclusive lower bound of the valid domain.
        upper: Inclusive upper bound of the valid domain.
    """

    def __init__(self, name: str, value: float, lower: float, upper: float):
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"{name} must be within [{lower:g}, {upper:g}], got {value!r}"
        )


class ConfigurationError(TintError, RuntimeError):
    """A color space or illuminant definition is malformed."""
