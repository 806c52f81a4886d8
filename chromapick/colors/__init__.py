"""
Chromapick Color Classes
========================

Immutable RGB color values used by the spectrum compositor and the locator.

Features
--------
- Immutable color instances (frozen after initialization)
- Integer (0-255) and unit float (0.0-1.0) formats
- Value clamping to valid ranges
- Conversion between formats and between RGB and RGBA
- Hex parsing in the #RGB / #ARGB / #RRGGBB / #AARRGGBB forms
- Alpha channel support with WithAlpha mixin

Usage
-----
>>> from chromapick.colors import ColorRGBINT
>>>
>>> color = ColorRGBINT((255, 128, 0))
>>> color.luminosity
0.5
>>> color.convert("rgba").value
(255, 128, 0, 255)
>>> ColorRGBINT.from_hex("#0c0b36").value
(12, 11, 54)
"""

from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorLike,
    rgb_tuple_to_class,
    to_rgb_int,
    to_rgba_int,
)
from .hex import parse_hex, format_hex


__all__ = [
    'ColorBase',
    'WithAlpha',
    'ColorRGBINT',
    'ColorRGBAINT',
    'ColorUnitRGB',
    'ColorUnitRGBA',
    'ColorLike',
    'rgb_tuple_to_class',
    'to_rgb_int',
    'to_rgba_int',
    'parse_hex',
    'format_hex',
]
