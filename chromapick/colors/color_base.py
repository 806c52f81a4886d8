from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast, Self
from boundednumbers import clamp
from ..types.format_type import FormatType, format_classes, max_channel
from ..types.color_types import ColorElement, Scalar, ColorSpace, is_alpha_space
from ..utils.dimension import get_dimension
from abc import ABC
import math
class ColorBase:
    __slots__ = ('_value',)  # with __setattr__ below, instances are immutable

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        if self.num_channels != get_dimension(self.maxima):
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = value._converted_value(self.mode, self.format_type)

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {value!r}"
            )

        # type enforcement, then clamp into [0, maxima]
        cast_type = format_classes[self.format_type]
        value = tuple(
            cast_type(clamp(cast_type(v), 0, m))
            for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def rgb(self) -> Tuple[Scalar, Scalar, Scalar]:
        """The color channels without alpha."""
        r, g, b = self._value[:3]
        return r, g, b

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return is_alpha_space(self.mode)

    @property
    def unit_values(self) -> Tuple[float, ...]:
        """Channel values scaled to 0.0-1.0."""
        scale = float(max_channel[self.format_type])
        return tuple(float(v) / scale for v in self._value)

    @property
    def luminosity(self) -> float:
        """HSL lightness in [0, 1]: the mean of the largest and smallest RGB channel."""
        r, g, b = self.unit_values[:3]
        return (max(r, g, b) + min(r, g, b)) / 2.0

    def distance(self, other: ColorBase) -> float:
        """Euclidean RGB distance on the 0-255 scale; alpha is ignored."""
        a = _to_int_rgb(self)
        b = _to_int_rgb(other)
        return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))

    def convert(self, to_space: ColorSpace | None = None, to_format: FormatType | str | None = None) -> ColorBase:
        """
        Convert this color to a different space and/or format.

        Args:
            to_space: Target color space ("rgb" or "rgba"). Defaults to current space.
            to_format: Target format type (INT or FLOAT). Defaults to current format.

        Returns:
            New ColorBase instance in the target space/format
        """
        from .rgb import rgb_tuple_to_class
        to_space = cast(ColorSpace, (to_space or self.mode).lower())
        to_format = FormatType(to_format or self.format_type)
        cls = rgb_tuple_to_class[(to_space, to_format)]
        return cls(self._converted_value(to_space, to_format))

    def _converted_value(self, to_space: ColorSpace, to_format: FormatType) -> Tuple[Scalar, ...]:
        units = list(self.unit_values)
        if self.has_alpha and not is_alpha_space(to_space):
            units = units[:3]
        elif not self.has_alpha and is_alpha_space(to_space):
            units.append(1.0)
        scale = max_channel[to_format]
        if to_format == FormatType.INT:
            return tuple(int(round(u * scale)) for u in units)
        return tuple(float(u * scale) for u in units)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (self.mode, self.format_type, self._value) == (other.mode, other.format_type, other._value)

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def _to_int_rgb(color: ColorBase) -> Tuple[int, int, int]:
    if color.format_type == FormatType.INT:
        r, g, b = color.rgb
        return int(r), int(g), int(b)
    r, g, b = color.unit_values[:3]
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[Tuple[Scalar, ...]]
    mode: ClassVar[ColorSpace]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == self.maxima[self.alpha_index]

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped into the channel range.

        Returns:
            New color instance with updated alpha.
        """
        a = clamp(alpha, 0, self.maxima[self.alpha_index])
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
