# -*- coding: utf-8 -*-
"""
Tint: Tristimulus conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Package: color_spaces — Concrete color spaces built on the XYZ hub.
"""

from .hsv import HSLColor, HSVColor
from .lab import CIELABColor, CIELCHColor
from .luv import CIELCHuvColor, CIELUVColor
from .oklab import OklabColor
from .rgb import AdobeRGBColor, LinearRGBColor, RGBColor, ROMMRGBColor

__all__ = [
    "RGBColor",
    "LinearRGBColor",
    "AdobeRGBColor",
    "ROMMRGBColor",
    "CIELABColor",
    "CIELCHColor",
    "CIELUVColor",
    "CIELCHuvColor",
    "HSVColor",
    "HSLColor",
    "OklabColor",
]
