"""Pointer overlay: a white ring around a disc of the picked color."""

from __future__ import annotations

import warnings
from typing import Tuple

from boundednumbers import UnitFloat
from PIL import Image, ImageDraw

from .colors.rgb import ColorLike, to_rgba_int
from .defaults import DEFAULT_BORDER_UNITS, DEFAULT_DIAMETER_UNITS, POINTER_RING
from .types.geometry import Point


def _unit_ratio(name: str, value: float) -> float:
    ratio = UnitFloat(value)
    if ratio != value:
        warnings.warn(f"{name}={value} is outside [0, 1]; using {float(ratio)}", stacklevel=3)
    return float(ratio)


def pointer_diameters(
    width: int,
    height: int,
    diameter_units: float = DEFAULT_DIAMETER_UNITS,
    border_units: float = DEFAULT_BORDER_UNITS,
) -> Tuple[float, float]:
    """
    Outer and inner diameters of the pointer in pixels.

    The outer diameter is ``diameter_units`` tenths of the longer surface side;
    the inner disc is smaller by ``border_units`` of the outer diameter.
    """
    diameter_units = _unit_ratio("diameter_units", diameter_units)
    border_units = _unit_ratio("border_units", border_units)
    outer = max(width, height) * (diameter_units / 10.0)
    inner = outer - outer * border_units
    return outer, inner


def _bbox(point: Point, diameter: float) -> Tuple[float, float, float, float]:
    radius = diameter / 2.0
    return (point.x - radius, point.y - radius, point.x + radius, point.y + radius)


def draw_pointer(
    image: Image.Image,
    point: Point,
    color: ColorLike,
    diameter_units: float = DEFAULT_DIAMETER_UNITS,
    border_units: float = DEFAULT_BORDER_UNITS,
) -> None:
    """
    Draw the pointer onto ``image`` in place, sized against the image.

    Nothing is drawn for an empty point or a zero-sized image.
    """
    width, height = image.size
    if point.is_empty or width <= 0 or height <= 0:
        return
    outer, inner = pointer_diameters(width, height, diameter_units, border_units)
    if outer <= 0:
        return

    bands = len(image.getbands())
    draw = ImageDraw.Draw(image)
    draw.ellipse(_bbox(point, outer), fill=POINTER_RING.value[:bands])
    if inner > 0:
        draw.ellipse(_bbox(point, inner), fill=to_rgba_int(color).value[:bands])


def render_pointer(
    point: Point,
    color: ColorLike,
    width: int,
    height: int,
    diameter_units: float = DEFAULT_DIAMETER_UNITS,
    border_units: float = DEFAULT_BORDER_UNITS,
) -> Image.Image:
    """
    Render the pointer on a transparent RGBA overlay of the surface size.

    Returns:
        A (width x height) RGBA image; fully transparent for an empty point.
        Non-positive dimensions yield a 0x0 image.
    """
    overlay = Image.new("RGBA", (max(width, 0), max(height, 0)), (0, 0, 0, 0))
    draw_pointer(overlay, point, color, diameter_units, border_units)
    return overlay
