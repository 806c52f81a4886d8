"""Chromapick: two-dimensional color spectrum rendering with forward and inverse picking."""

from .colors.rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)
from .colors.color_base import ColorBase

# Friendly aliases for common integer variants
ColorRGB = ColorRGBINT
ColorRGBA = ColorRGBAINT

from .types.format_type import FormatType
from .types.spectrum_types import Axis, GradientStyle, StopColor
from .types.geometry import Point, SearchRegion, SampleResult
from .defaults import DEFAULT_HUE_LIST, FALLBACK_POINT
from .surface import Surface
from .gradients import Gradient1D, compose, style_stops
from .locator import (
    ColumnRange,
    ColumnRule,
    RowRange,
    RowRule,
    classify_columns,
    classify_rows,
    resolve_region,
    region_for,
    search,
    locate,
)
from .pointer import draw_pointer, render_pointer, pointer_diameters
from .picker import (
    ColorChanged,
    ColorPicker,
    Frame,
    PickerConfig,
    PickerState,
    Touch,
    handle_touch,
    redraw,
)

__version__ = "0.1.0"

__all__ = [
    # core color types
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorRGB",
    "ColorRGBA",
    "FormatType",
    # spectrum types
    "Axis",
    "GradientStyle",
    "StopColor",
    "Point",
    "SearchRegion",
    "SampleResult",
    "DEFAULT_HUE_LIST",
    "FALLBACK_POINT",
    # compositor
    "Surface",
    "Gradient1D",
    "compose",
    "style_stops",
    # locator
    "ColumnRange",
    "ColumnRule",
    "RowRange",
    "RowRule",
    "classify_columns",
    "classify_rows",
    "resolve_region",
    "region_for",
    "search",
    "locate",
    # pointer
    "draw_pointer",
    "render_pointer",
    "pointer_diameters",
    # orchestration
    "ColorChanged",
    "ColorPicker",
    "Frame",
    "PickerConfig",
    "PickerState",
    "Touch",
    "handle_touch",
    "redraw",
]
