from .format_type import FormatType
from .spectrum_types import Axis, GradientStyle, StopColor, style_stop_sequences
from .geometry import Point, SearchRegion, SampleResult

__all__ = [
    "FormatType",
    "Axis",
    "GradientStyle",
    "StopColor",
    "style_stop_sequences",
    "Point",
    "SearchRegion",
    "SampleResult",
]
