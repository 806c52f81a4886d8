import math

import pytest

from chromapick.colors import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    to_rgb_int,
    to_rgba_int,
)
from chromapick.types.format_type import FormatType


def test_values_are_clamped():
    assert ColorRGBINT((300, -5, 10)).value == (255, 0, 10)
    assert ColorUnitRGB((1.5, -0.2, 0.25)).value == (1.0, 0.0, 0.25)


def test_color_is_immutable():
    color = ColorRGBINT((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        ColorRGBINT((1, 2))
    with pytest.raises(ValueError):
        ColorRGBAINT((1, 2, 3))


def test_convert_int_to_float():
    red = ColorRGBINT((255, 0, 0))
    unit = red.convert("rgb", FormatType.FLOAT)
    assert isinstance(unit, ColorUnitRGB)
    assert unit.value == (1.0, 0.0, 0.0)


def test_convert_rgb_to_rgba_and_back():
    color = ColorRGBINT((12, 11, 54))
    rgba = color.convert("rgba")
    assert isinstance(rgba, ColorRGBAINT)
    assert rgba.value == (12, 11, 54, 255)
    assert rgba.convert("rgb") == color


def test_construct_from_other_color_class():
    unit = ColorUnitRGBA((1.0, 0.5, 0.0, 0.5))
    assert ColorRGBAINT(unit).value == (255, 128, 0, 128)
    assert ColorRGBINT(unit).value == (255, 128, 0)


@pytest.mark.parametrize("rgb, expected", [
    ((255, 0, 0), 0.5),
    ((255, 255, 255), 1.0),
    ((0, 0, 0), 0.0),
    ((0, 255, 255), 0.5),
])
def test_luminosity_is_hsl_lightness(rgb, expected):
    assert ColorRGBINT(rgb).luminosity == pytest.approx(expected)


def test_luminosity_ignores_alpha():
    assert ColorRGBAINT((255, 0, 0, 10)).luminosity == pytest.approx(0.5)


def test_distance_on_255_scale():
    black = ColorRGBINT((0, 0, 0))
    white = ColorRGBINT((255, 255, 255))
    assert black.distance(white) == pytest.approx(math.sqrt(3 * 255 ** 2))
    assert white.distance(ColorUnitRGB((1.0, 1.0, 1.0))) == 0.0
    assert ColorRGBINT((3, 4, 0)).distance(black) == 5.0


def test_hex_round_trip():
    assert ColorRGBINT.from_hex("#0c0b36").value == (12, 11, 54)
    assert ColorRGBINT((12, 11, 54)).to_hex() == "#0c0b36"


@pytest.mark.parametrize("hex_str, expected", [
    ("#f00", (255, 0, 0, 255)),
    ("8f00", (255, 0, 0, 136)),
    ("00FF00", (0, 255, 0, 255)),
    ("#80ff0000", (255, 0, 0, 128)),
])
def test_hex_forms(hex_str, expected):
    assert ColorRGBAINT.from_hex(hex_str).value == expected


def test_rgba_hex_puts_alpha_first():
    assert ColorRGBAINT((255, 0, 0, 128)).to_hex() == "#80ff0000"


@pytest.mark.parametrize("bad", ["#12345", "zzzzzz", "", "#"])
def test_malformed_hex_raises(bad):
    with pytest.raises(ValueError):
        ColorRGBINT.from_hex(bad)


def test_with_alpha():
    color = ColorRGBAINT((10, 20, 30, 255))
    faded = color.with_alpha(300)
    assert faded.alpha == 255
    assert color.with_alpha(0).is_transparent
    assert color.is_opaque


def test_equality_and_hash():
    assert ColorRGBINT((1, 2, 3)) == ColorRGBINT((1, 2, 3))
    assert ColorRGBINT((1, 2, 3)) != ColorRGBAINT((1, 2, 3, 255))
    assert len({ColorRGBINT((1, 2, 3)), ColorRGBINT((1, 2, 3))}) == 1


def test_coercion_helpers():
    assert to_rgba_int((1, 2, 3)).value == (1, 2, 3, 255)
    assert to_rgba_int([1, 2, 3, 4]).value == (1, 2, 3, 4)
    assert to_rgb_int("#ffffff").value == (255, 255, 255)
    assert to_rgb_int(ColorUnitRGB((0.0, 1.0, 0.0))).value == (0, 255, 0)
    with pytest.raises(TypeError):
        to_rgba_int(42)
