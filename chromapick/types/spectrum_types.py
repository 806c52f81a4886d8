from enum import Enum


class Axis(str, Enum):
    """Direction along which the hue list runs."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class StopColor(str, Enum):
    """Secondary-axis stop colors available to a gradient style."""
    TRANSPARENT = "transparent"
    BLACK = "black"
    WHITE = "white"


class GradientStyle(str, Enum):
    """Lightness recipe layered over the hue ramp."""
    COLORS_ONLY = "colors_only"
    COLORS_TO_DARK = "colors_to_dark"
    DARK_TO_COLORS = "dark_to_colors"
    COLORS_TO_LIGHT = "colors_to_light"
    LIGHT_TO_COLORS = "light_to_colors"
    LIGHT_TO_COLORS_TO_DARK = "light_to_colors_to_dark"
    DARK_TO_COLORS_TO_LIGHT = "dark_to_colors_to_light"


_T, _B, _W = StopColor.TRANSPARENT, StopColor.BLACK, StopColor.WHITE

style_stop_sequences = {
    GradientStyle.COLORS_ONLY: (_T,),
    GradientStyle.COLORS_TO_DARK: (_T, _B),
    GradientStyle.DARK_TO_COLORS: (_B, _T),
    GradientStyle.COLORS_TO_LIGHT: (_T, _W),
    GradientStyle.LIGHT_TO_COLORS: (_W, _T),
    GradientStyle.LIGHT_TO_COLORS_TO_DARK: (_W, _T, _B),
    GradientStyle.DARK_TO_COLORS_TO_LIGHT: (_B, _T, _W),
}
