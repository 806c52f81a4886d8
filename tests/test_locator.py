import itertools
import math

import numpy as np
import pytest

from chromapick import ColorRGBINT, GradientStyle, Point, compose, locate, search
from chromapick.locator import (
    ColumnRange,
    ColumnRule,
    RowRange,
    RowRule,
    classify_columns,
    classify_rows,
    region_for,
    resolve_region,
)
from chromapick.types.geometry import SearchRegion


@pytest.mark.parametrize("rgb, rule, span", [
    ((128, 128, 128), ColumnRule.GRAY, (6.5, 7.0)),
    ((200, 200, 0), ColumnRule.RED_GREEN, (0.5, 1.5)),
    ((0, 200, 200), ColumnRule.GREEN_BLUE, (2.5, 3.5)),
    ((200, 100, 100), ColumnRule.GREEN_BLUE, (2.5, 3.5)),
    ((200, 0, 200), ColumnRule.RED_BLUE, (4.5, 5.5)),
    ((255, 0, 0), ColumnRule.DOMINANT_CHANNEL, (0.0, 1.0)),
    ((10, 200, 30), ColumnRule.DOMINANT_CHANNEL, (1.5, 2.5)),
    ((10, 30, 200), ColumnRule.DOMINANT_CHANNEL, (3.5, 4.5)),
    ((0, 0, 0), ColumnRule.DOMINANT_CHANNEL, (0.0, 1.0)),
])
def test_classify_columns(rgb, rule, span):
    columns = classify_columns(rgb, 7)
    assert columns.rule is rule
    assert (columns.start, columns.stop) == span


def test_gray_column_follows_hue_count():
    assert classify_columns((50, 50, 50), 4)[1:] == (3.5, 4.0)


@pytest.mark.parametrize("rgb, rule", [
    ((0, 0, 0), RowRule.DARK),
    ((60, 60, 60), RowRule.DARK),
    ((128, 128, 128), RowRule.MID),
    ((255, 0, 0), RowRule.MID),
    ((200, 200, 200), RowRule.LIGHT),
    ((255, 255, 255), RowRule.LIGHT),
])
def test_classify_rows(rgb, rule):
    assert classify_rows(rgb).rule is rule


def test_row_spans():
    assert classify_rows((0, 0, 0))[1:] == (0.0, 1.0)
    assert classify_rows((255, 0, 0))[1:] == (0.5, 1.5)
    assert classify_rows((255, 255, 255))[1:] == (2.0, 3.0)


COLUMN_CASES = [ColumnRange(rule, a, b) for rule, a, b in [
    (ColumnRule.GRAY, 6.5, 7.0),
    (ColumnRule.RED_GREEN, 0.5, 1.5),
    (ColumnRule.GREEN_BLUE, 2.5, 3.5),
    (ColumnRule.RED_BLUE, 4.5, 5.5),
    (ColumnRule.DOMINANT_CHANNEL, 3.5, 4.5),
    (ColumnRule.FULL_WIDTH, 0.0, 7.0),
]]
ROW_CASES = [RowRange(RowRule.DARK, 0.0, 1.0), RowRange(RowRule.MID, 0.5, 1.5), RowRange(RowRule.LIGHT, 2.0, 3.0)]


@pytest.mark.parametrize("columns, rows, size, n", list(itertools.product(
    COLUMN_CASES, ROW_CASES, [(1, 1), (7, 3), (13, 5), (700, 300)], [1, 3, 7],
)))
def test_region_stays_inside_surface(columns, rows, size, n):
    width, height = size
    region = resolve_region(columns, rows, width, height, n)
    assert 0 <= region.start_x <= region.end_x <= width
    assert 0 <= region.start_y <= region.end_y <= height


def test_region_is_clipped_to_width():
    columns = ColumnRange(ColumnRule.GREEN_BLUE, 2.5, 3.5)
    region = resolve_region(columns, RowRange(RowRule.DARK, 0.0, 1.0), 300, 300, 3)
    assert region == SearchRegion(250, 300, 0, 100)


@pytest.mark.parametrize("width, height, n", [(0, 10, 7), (10, 0, 7), (10, 10, 0), (-1, 10, 7)])
def test_degenerate_region_is_empty(width, height, n):
    region = resolve_region(COLUMN_CASES[0], ROW_CASES[0], width, height, n)
    assert region.is_empty


def test_region_bounds_use_fractional_column_unit():
    # 1000 / 7 is not whole; bounds floor the scaled float, not a floored unit
    columns = ColumnRange(ColumnRule.RED_BLUE, 4.5, 5.5)
    region = resolve_region(columns, RowRange(RowRule.MID, 0.5, 1.5), 1000, 300, 7)
    assert (region.start_x, region.end_x) == (642, 785)


def test_red_region_on_scenario_surface():
    assert region_for((255, 0, 0), 700, 300, 7) == SearchRegion(0, 100, 50, 150)


def test_locate_red(scenario_surface):
    result = search((255, 0, 0), 700, 300, style=GradientStyle.COLORS_TO_DARK, surface=scenario_surface)
    assert 0 <= result.point.x < 100
    assert 50 <= result.point.y < 150
    # Row 0 holds pure red but sits above the region; the least shaded
    # row of the region wins
    assert result.point == Point(0, 50)
    assert result.distance > 0
    assert result.color == scenario_surface.pixel_at(0, 50)


def test_locate_black(scenario_surface):
    point = locate((0, 0, 0), 700, 300, style="colors_to_dark", surface=scenario_surface)
    assert 0 <= point.x < 100
    assert 0 <= point.y < 100
    # Adjacent shade rows can round to the same alpha; the earliest of the
    # darkest rows wins
    reds = scenario_surface.value[:100, 0, 0]
    assert point == Point(0, int(np.argmin(reds)))
    assert point == Point(0, 98)
    assert scenario_surface.pixel_at(0, 98) == scenario_surface.pixel_at(0, 99)


def test_search_reports_distance_to_picked_pixel(scenario_surface):
    target = (120, 60, 30)
    result = search(target, 700, 300, surface=scenario_surface)
    assert result.distance == pytest.approx(result.color.distance(ColorRGBINT(target)))
    assert result.color == scenario_surface.pixel_at(*result.point)


def test_round_trip_on_small_surface(small_surface):
    checked = 0
    for y in range(small_surface.height):
        for x in range(small_surface.width):
            color = small_surface.pixel_at(x, y)
            region = region_for(color, 70, 30, 7)
            if not region.contains(Point(x, y)):
                continue
            result = search(color, 70, 30, surface=small_surface)
            assert result.distance == 0.0
            block = small_surface.value[region.start_y:region.end_y, region.start_x:region.end_x]
            matches = int(np.all(block == color.value, axis=-1).sum())
            if matches == 1:
                assert result.point == Point(x, y)
            checked += 1
    assert checked > 0


def test_surface_is_reused_or_recomposed(scenario_surface, small_surface):
    fresh = search((10, 200, 30), 700, 300)
    assert search((10, 200, 30), 700, 300, surface=scenario_surface) == fresh
    # A surface of the wrong size is ignored
    assert search((10, 200, 30), 700, 300, surface=small_surface) == fresh


def test_empty_hue_list_falls_back():
    result = search((255, 0, 0), 700, 300, hue_list=[])
    assert result.point == Point(1, 1)
    assert result.color is None
    assert math.isinf(result.distance)


@pytest.mark.parametrize("width, height", [(0, 300), (700, 0), (0, 0)])
def test_zero_size_falls_back(width, height):
    assert locate((255, 0, 0), width, height) == Point(1, 1)


def test_fallback_reads_supplied_surface():
    surface = compose(70, 30)
    result = search((255, 0, 0), 70, 30, hue_list=[], surface=surface)
    assert result.point == Point(1, 1)
    assert result.color == surface.pixel_at(1, 1)
    assert result.distance == pytest.approx(result.color.distance(ColorRGBINT((255, 0, 0))))


def test_accepts_hex_and_rgba_targets(small_surface):
    by_hex = locate("#ff0000", 70, 30, surface=small_surface)
    by_rgba = locate((255, 0, 0, 17), 70, 30, surface=small_surface)
    assert by_hex == by_rgba == locate((255, 0, 0), 70, 30, surface=small_surface)
