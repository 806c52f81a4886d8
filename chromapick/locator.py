"""
Color Locator
=============

Inverse mapping for the spectrum: given a target color, find the surface
position whose composited color matches it best.

The full surface is never scanned. A coarse, rule-based classification of
the target narrows the search to a small rectangle first:

- columns come from channel equalities and the dominant channel
  (one column unit = width / len(hue_list))
- rows come from luminosity (three row units over the height)

The rectangle is then materialized once and scanned exhaustively in
row-major order for the smallest Euclidean RGB distance. An exact match
(distance 0) ends the scan at the first such pixel.

Classification is a heuristic inverse of the default rainbow. For some
inputs the best pixel lies outside the classified rectangle; the locator
then reports the nearest match inside it.
"""

from __future__ import annotations

import logging
import math
import time
from enum import IntEnum
from typing import NamedTuple, Optional, Sequence, Union

import numpy as np
from boundednumbers import clamp

from .colors.rgb import ColorLike, ColorRGBINT, to_rgb_int
from .defaults import DEFAULT_AXIS, DEFAULT_HUE_LIST, DEFAULT_STYLE, FALLBACK_POINT, ROW_UNITS
from .gradients.compositor import compose
from .surface import Surface
from .types.geometry import Point, SampleResult, SearchRegion
from .types.spectrum_types import Axis, GradientStyle

log = logging.getLogger(__name__)


class ColumnRule(IntEnum):
    GRAY = 1
    RED_GREEN = 2
    GREEN_BLUE = 3
    RED_BLUE = 4
    DOMINANT_CHANNEL = 5
    FULL_WIDTH = 6


class RowRule(IntEnum):
    DARK = 1
    MID = 2
    LIGHT = 3


class ColumnRange(NamedTuple):
    rule: ColumnRule
    start: float
    stop: float


class RowRange(NamedTuple):
    rule: RowRule
    start: float
    stop: float


def classify_columns(color: ColorLike, n: int) -> ColumnRange:
    """
    Fractional column range (in units of width / n) where ``color`` should sit.

    Rules are tried in order; the first match wins. Ties for the dominant
    channel resolve r, then g, then b, so black lands in the red column.
    """
    r, g, b = to_rgb_int(color).rgb
    if r == g == b and b > 0:
        return ColumnRange(ColumnRule.GRAY, n - 0.5, float(n))
    if r == g and r > 0:
        return ColumnRange(ColumnRule.RED_GREEN, 0.5, 1.5)
    if g == b and b > 0:
        return ColumnRange(ColumnRule.GREEN_BLUE, 2.5, 3.5)
    if r == b and b > 0:
        return ColumnRange(ColumnRule.RED_BLUE, 4.5, 5.5)

    top = max(r, g, b)
    if top == r:
        return ColumnRange(ColumnRule.DOMINANT_CHANNEL, 0.0, 1.0)
    if top == g:
        return ColumnRange(ColumnRule.DOMINANT_CHANNEL, 1.5, 2.5)
    if top == b:
        return ColumnRange(ColumnRule.DOMINANT_CHANNEL, 3.5, 4.5)
    return ColumnRange(ColumnRule.FULL_WIDTH, 0.0, float(n))


def classify_rows(color: ColorLike) -> RowRange:
    """Fractional row range (in units of height / 3) from the color's luminosity."""
    luminosity = to_rgb_int(color).luminosity
    if 0.0 <= luminosity <= 1 / 3:
        return RowRange(RowRule.DARK, 0.0, 1.0)
    if 1 / 3 <= luminosity <= 2 / 3:
        return RowRange(RowRule.MID, 0.5, 1.5)
    return RowRange(RowRule.LIGHT, 2.0, 3.0)


def resolve_region(
    columns: ColumnRange,
    rows: RowRange,
    width: int,
    height: int,
    n: int,
) -> SearchRegion:
    """
    Convert fractional ranges into pixel bounds clipped to the surface.

    The result always satisfies 0 <= start_x <= end_x <= width and
    0 <= start_y <= end_y <= height. Degenerate inputs give an empty region.
    """
    if width <= 0 or height <= 0 or n <= 0:
        return SearchRegion(0, 0, 0, 0)

    column_unit = width / n
    row_unit = height / ROW_UNITS

    start_x = clamp(math.floor(column_unit * columns.start), 0, width)
    end_x = clamp(math.floor(column_unit * columns.stop), start_x, width)
    start_y = clamp(math.floor(row_unit * rows.start), 0, height)
    end_y = clamp(math.floor(row_unit * rows.stop), start_y, height)
    return SearchRegion(int(start_x), int(end_x), int(start_y), int(end_y))


def region_for(color: ColorLike, width: int, height: int, n: int) -> SearchRegion:
    """Classify ``color`` and resolve its search region in one step."""
    return resolve_region(classify_columns(color, n), classify_rows(color), width, height, n)


def search(
    target: ColorLike,
    width: int,
    height: int,
    hue_list: Sequence[ColorLike] = DEFAULT_HUE_LIST,
    style: Union[GradientStyle, str] = DEFAULT_STYLE,
    axis: Union[Axis, str] = DEFAULT_AXIS,
    surface: Optional[Surface] = None,
) -> SampleResult:
    """
    Find the best-matching point for ``target`` inside its classified region.

    Args:
        target: Color to locate
        width: Surface width in pixels
        height: Surface height in pixels
        hue_list: Hue stops the spectrum was composed with
        style: Gradient style the spectrum was composed with
        axis: Axis the spectrum was composed with
        surface: Already composed surface to sample; composed on demand if
            omitted or if its size differs from width x height

    Returns:
        SampleResult with the point, the surface color there and its distance
        to ``target``. Degenerate inputs (empty region, non-positive size,
        empty hue list) give the fallback point.
    """
    target_rgb = to_rgb_int(target)
    n = len(hue_list)
    region = region_for(target_rgb, width, height, n)

    if region.is_empty:
        log.debug("Empty search region for %s on %dx%d with %d hues", target_rgb, width, height, n)
        return _fallback(target_rgb, width, height, surface)

    if surface is None or (surface.width, surface.height) != (width, height):
        surface = compose(width, height, axis, hue_list, style)

    started = time.perf_counter()
    # Materialized once; the scan below never goes back to the surface
    block = surface.region(region)
    diff = block - np.asarray(target_rgb.rgb, dtype=np.int32)
    squared = np.einsum("ijk,ijk->ij", diff, diff).ravel()

    # argmin returns the first minimum in row-major order, which also makes
    # the first exact match win
    index = int(np.argmin(squared))
    dy, dx = divmod(index, region.width)
    point = Point(region.start_x + dx, region.start_y + dy)
    distance = math.sqrt(int(squared[index]))

    log.debug(
        "Located %s at %s (distance %.3f) scanning %s in %.2f ms",
        target_rgb.to_hex(), tuple(point), distance, tuple(region),
        (time.perf_counter() - started) * 1000.0,
    )
    return SampleResult(point, surface.pixel_at(point.x, point.y), distance)


def locate(
    target: ColorLike,
    width: int,
    height: int,
    hue_list: Sequence[ColorLike] = DEFAULT_HUE_LIST,
    style: Union[GradientStyle, str] = DEFAULT_STYLE,
    axis: Union[Axis, str] = DEFAULT_AXIS,
    surface: Optional[Surface] = None,
) -> Point:
    """Surface position whose composited color best matches ``target``."""
    return search(target, width, height, hue_list, style, axis, surface).point


def _fallback(
    target: ColorRGBINT,
    width: int,
    height: int,
    surface: Optional[Surface],
) -> SampleResult:
    if surface is not None and surface.contains(FALLBACK_POINT):
        color = surface.pixel_at(*FALLBACK_POINT)
        return SampleResult(FALLBACK_POINT, color, target.distance(color))
    return SampleResult(FALLBACK_POINT, None, math.inf)
