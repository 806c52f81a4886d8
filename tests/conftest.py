import pytest

from chromapick import GradientStyle, compose


@pytest.fixture(scope="session")
def small_surface():
    """Default rainbow, colors-to-dark, 70x30 horizontal."""
    return compose(70, 30)


@pytest.fixture(scope="session")
def scenario_surface():
    """The 700x300 surface the picking scenarios are stated against."""
    return compose(700, 300, "horizontal", style=GradientStyle.COLORS_TO_DARK)
