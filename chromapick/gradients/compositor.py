"""
Spectrum Compositor
===================

Builds the two-layer color spectrum the picker displays and searches.

Layers
------
1. Hue layer: a linear ramp through the hue list, running along the
   primary axis and constant across it.
2. Shade layer: a linear ramp through the gradient style's stops
   (transparent / black / white), running along the other axis.

Both layers are clamped at the edges. The hue layer is composited over a white
canvas and the shade layer over that, with Pillow's ``alpha_composite``. The
result is an opaque RGB :class:`~chromapick.surface.Surface`.

The output depends only on the arguments, so the same call always yields a
byte-identical surface. The locator relies on this to treat a fresh
``compose`` as ground truth.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from PIL import Image

from ..colors.rgb import ColorLike, ColorRGBAINT
from ..defaults import BACKGROUND, DEFAULT_AXIS, DEFAULT_HUE_LIST, DEFAULT_STYLE, STOP_COLORS
from ..surface import Surface
from ..types.spectrum_types import Axis, GradientStyle, style_stop_sequences
from ..utils.default import enum_or_default
from .gradient1d import Gradient1D


def style_stops(style: Union[GradientStyle, str]) -> Tuple[ColorRGBAINT, ...]:
    """Stop colors of the shade layer for ``style``, in ramp order."""
    style = enum_or_default(style, GradientStyle, DEFAULT_STYLE)
    return tuple(STOP_COLORS[stop] for stop in style_stop_sequences[style])


def compose(
    width: int,
    height: int,
    axis: Union[Axis, str] = DEFAULT_AXIS,
    hue_list: Sequence[ColorLike] = DEFAULT_HUE_LIST,
    style: Union[GradientStyle, str] = DEFAULT_STYLE,
) -> Surface:
    """
    Render the spectrum.

    Args:
        width: Surface width in pixels
        height: Surface height in pixels
        axis: Direction the hue list runs in
        hue_list: Hue stops as color objects, int tuples or hex strings
        style: Shade recipe layered over the hues

    Returns:
        Surface of shape (height, width, 3). Non-positive dimensions or an
        empty hue list give an empty surface.
    """
    axis = enum_or_default(axis, Axis, DEFAULT_AXIS)
    if width <= 0 or height <= 0 or not hue_list:
        return Surface.empty()

    if axis == Axis.HORIZONTAL:
        primary, secondary, shade_axis = width, height, Axis.VERTICAL
    else:
        primary, secondary, shade_axis = height, width, Axis.HORIZONTAL

    hue_layer = Gradient1D.from_stops(hue_list, primary).as_layer(width, height, axis)
    shade_layer = Gradient1D.from_stops(style_stops(style), secondary).as_layer(width, height, shade_axis)

    canvas = Image.new("RGBA", (width, height), BACKGROUND.value)
    canvas = Image.alpha_composite(canvas, Image.fromarray(hue_layer))
    canvas = Image.alpha_composite(canvas, Image.fromarray(shade_layer))
    return Surface.from_image(canvas)
