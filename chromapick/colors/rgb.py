from typing import ClassVar, Tuple, Union
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry
from .hex import parse_hex, format_hex


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    @classmethod
    def from_hex(cls, hex_str: str) -> "ColorRGBINT":
        """Parse #RGB, #ARGB, #RRGGBB or #AARRGGBB; any alpha is dropped."""
        r, g, b, _ = parse_hex(hex_str)
        return cls((r, g, b))

    def to_hex(self) -> str:
        return format_hex(self.value)


class ColorRGBAINT(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    @classmethod
    def from_hex(cls, hex_str: str) -> "ColorRGBAINT":
        """Parse #RGB, #ARGB, #RRGGBB or #AARRGGBB; alpha defaults to opaque."""
        return cls(parse_hex(hex_str))

    def to_hex(self) -> str:
        r, g, b, a = self.value
        return format_hex((a, r, g, b))


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


ColorLike = Union[ColorBase, Tuple[int, ...], str]


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)


def to_rgba_int(color: ColorLike) -> ColorRGBAINT:
    """
    Coerce a color object, an int tuple (RGB or RGBA) or a hex string into ColorRGBAINT.

    Raises:
        TypeError: for any other input type
        ValueError: for a tuple of the wrong length or a malformed hex string
    """
    if isinstance(color, ColorRGBAINT):
        return color
    if isinstance(color, ColorBase):
        return ColorRGBAINT(color)
    if isinstance(color, str):
        return ColorRGBAINT.from_hex(color)
    if isinstance(color, (tuple, list)):
        if len(color) == 3:
            return ColorRGBAINT(ColorRGBINT(tuple(color)))
        return ColorRGBAINT(tuple(color))
    raise TypeError(f"Cannot interpret {color!r} as a color")


def to_rgb_int(color: ColorLike) -> ColorRGBINT:
    """Same as to_rgba_int, dropping alpha."""
    if isinstance(color, ColorRGBINT):
        return color
    return ColorRGBINT(to_rgba_int(color))
