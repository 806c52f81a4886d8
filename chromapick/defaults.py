from .colors.rgb import ColorRGBINT, ColorRGBAINT
from .types.geometry import Point
from .types.spectrum_types import Axis, GradientStyle, StopColor

# RED
RED = ColorRGBINT((255, 0, 0))
# YELLOW
YELLOW = ColorRGBINT((255, 255, 0))
# LIME
LIME = ColorRGBINT((0, 255, 0))
# AQUA
AQUA = ColorRGBINT((0, 255, 255))
# BLUE
BLUE = ColorRGBINT((0, 0, 255))
# FUCHSIA
FUCHSIA = ColorRGBINT((255, 0, 255))
# WHITE
WHITE = ColorRGBINT((255, 255, 255))
# BLACK
BLACK = ColorRGBINT((0, 0, 0))

# Closed rainbow; the trailing white anchors the gray column
DEFAULT_HUE_LIST = (RED, YELLOW, LIME, AQUA, BLUE, FUCHSIA, WHITE)

# Premultiplied interpolation makes the RGB of a transparent stop irrelevant
STOP_COLORS = {
    StopColor.TRANSPARENT: ColorRGBAINT((0, 0, 0, 0)),
    StopColor.BLACK: ColorRGBAINT((0, 0, 0, 255)),
    StopColor.WHITE: ColorRGBAINT((255, 255, 255, 255)),
}

# Canvas color under the hue layer
BACKGROUND = ColorRGBAINT((255, 255, 255, 255))
# Outer ring of the pointer
POINTER_RING = ColorRGBAINT((255, 255, 255, 255))

DEFAULT_STYLE = GradientStyle.COLORS_TO_DARK
DEFAULT_AXIS = Axis.HORIZONTAL
# Fraction of a tenth of the longer surface side
DEFAULT_DIAMETER_UNITS = 0.6
# Fraction of the pointer diameter
DEFAULT_BORDER_UNITS = 0.3

ROW_UNITS = 3
FALLBACK_POINT = Point(1, 1)
# Picked color before anything is set
INITIAL_COLOR = ColorRGBAINT((0, 0, 0, 0))
