"""
Picker Orchestration
====================

Ties the compositor, the locator and the pointer renderer into one redraw
cycle, with the picker's memory held in an explicit, immutable
:class:`PickerState` value.

Per redraw:

- a touch inside the surface sets the point directly, and the locator is skipped
- a color set any other way clears the point, and the next redraw re-derives
  it with an inverse search
- every successful redraw yields exactly one :class:`ColorChanged` notification

The functional API (:func:`handle_touch`, :func:`redraw`) takes and returns
state values. :class:`ColorPicker` is a small stateful convenience wrapper
around it for callers that prefer an object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple, Union

from PIL import Image

from .colors.rgb import ColorLike, ColorRGBAINT, ColorRGBINT, to_rgba_int
from .defaults import (
    DEFAULT_AXIS,
    DEFAULT_BORDER_UNITS,
    DEFAULT_DIAMETER_UNITS,
    DEFAULT_HUE_LIST,
    DEFAULT_STYLE,
    INITIAL_COLOR,
)
from .gradients.compositor import compose
from .locator import search
from .pointer import draw_pointer
from .surface import Surface
from .types.geometry import Point
from .types.spectrum_types import Axis, GradientStyle
from .utils.default import enum_or_default, value_or_default

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerConfig:
    """Rendering parameters shared by every redraw."""
    hue_list: Tuple[ColorLike, ...] = DEFAULT_HUE_LIST
    style: GradientStyle = DEFAULT_STYLE
    axis: Axis = DEFAULT_AXIS
    diameter_units: float = DEFAULT_DIAMETER_UNITS
    border_units: float = DEFAULT_BORDER_UNITS

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue_list", tuple(self.hue_list))
        object.__setattr__(self, "style", enum_or_default(self.style, GradientStyle, DEFAULT_STYLE))
        object.__setattr__(self, "axis", enum_or_default(self.axis, Axis, DEFAULT_AXIS))


@dataclass(frozen=True)
class PickerState:
    """Last resolved point and picked color."""
    point: Point = Point.EMPTY
    color: ColorRGBAINT = field(default=INITIAL_COLOR)

    def with_color(self, color: ColorLike) -> PickerState:
        """A state for an externally set color; the point is re-derived on redraw."""
        return PickerState(Point.EMPTY, to_rgba_int(color))

    def with_point(self, point: Point) -> PickerState:
        return replace(self, point=point)


class ColorChanged(NamedTuple):
    """Notification carried by every successful redraw."""
    color: ColorRGBINT
    point: Point


class Touch(NamedTuple):
    """A touch event in surface pixel coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class Frame:
    """Result of one redraw. ``image`` and ``update`` are None for a no-op."""
    image: Optional[Image.Image]
    state: PickerState
    update: Optional[ColorChanged] = None
    surface: Optional[Surface] = None


def handle_touch(
    state: PickerState,
    x: float,
    y: float,
    width: int,
    height: int,
) -> Tuple[PickerState, bool]:
    """
    Apply a touch to ``state``.

    Only touches strictly inside the surface are accepted; anything else is
    ignored, not clamped.

    Returns:
        (new state, consumed). A rejected touch returns ``state`` itself and False.
    """
    if 0 < x < width and 0 < y < height:
        return state.with_point(Point(int(x), int(y))), True
    log.debug("Ignoring touch at (%s, %s) outside %dx%d surface", x, y, width, height)
    return state, False


def redraw(
    state: PickerState,
    config: Optional[PickerConfig],
    width: int,
    height: int,
) -> Frame:
    """
    Render one frame: spectrum, resolved point and pointer overlay.

    If ``state`` has no usable point, it is located from ``state.color``.
    The returned state carries the resolved point and the color read back
    from the surface there.
    """
    config = value_or_default(config, PickerConfig())
    if width <= 0 or height <= 0:
        return Frame(None, state)

    surface = compose(width, height, config.axis, config.hue_list, config.style)
    if surface.is_empty:
        return Frame(None, state, surface=surface)

    point = state.point
    if point.is_empty or not surface.contains(point):
        point = search(
            state.color, width, height,
            config.hue_list, config.style, config.axis, surface,
        ).point
        # The fallback point can miss a one-pixel-wide surface
        point = Point(min(point.x, width - 1), min(point.y, height - 1))

    picked = surface.pixel_at(point.x, point.y)
    image = surface.to_image().convert("RGBA")
    draw_pointer(image, point, picked, config.diameter_units, config.border_units)

    new_state = PickerState(point, ColorRGBAINT(picked))
    return Frame(image, new_state, ColorChanged(picked, point), surface)


class ColorPicker:
    """
    Stateful wrapper over :func:`handle_touch` and :func:`redraw`.

    Owns a single :class:`PickerState`; every mutating call redraws and
    returns the resulting notification.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: Optional[PickerConfig] = None,
        state: Optional[PickerState] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.config = value_or_default(config, PickerConfig())
        self._state = value_or_default(state, PickerState())
        self._frame: Optional[Frame] = None

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def picked_color(self) -> ColorRGBAINT:
        return self._state.color

    @property
    def point(self) -> Point:
        return self._state.point

    @property
    def frame(self) -> Optional[Frame]:
        """The most recent frame, if any redraw has happened."""
        return self._frame

    def resize(self, width: int, height: int) -> Optional[ColorChanged]:
        self.width, self.height = width, height
        return self.redraw().update

    def redraw(self) -> Frame:
        frame = redraw(self._state, self.config, self.width, self.height)
        self._state = frame.state
        self._frame = frame
        return frame

    def touch(self, x: float, y: float) -> Optional[ColorChanged]:
        """Pick by touch. Returns None if the touch was rejected."""
        state, consumed = handle_touch(self._state, x, y, self.width, self.height)
        if not consumed:
            return None
        self._state = state
        return self.redraw().update

    def set_color(self, color: ColorLike) -> Optional[ColorChanged]:
        """Set the picked color programmatically; the point follows by inverse search."""
        self._state = self._state.with_color(color)
        return self.redraw().update

    def iter_updates(self, events: Iterable[Union[Touch, ColorLike]]) -> Iterator[ColorChanged]:
        """
        Lazily apply touches and colors, yielding one notification per redraw.

        Rejected touches and no-op redraws yield nothing.
        """
        for event in events:
            if isinstance(event, Touch):
                update = self.touch(event.x, event.y)
            else:
                update = self.set_color(event)
            if update is not None:
                yield update
