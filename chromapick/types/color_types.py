from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
IntVector = Tuple[int, ...]
ColorElement = Union[IntVector, Tuple[float, ...]]
ColorSpace = Literal["rgb", "rgba"]
ALPHA_SPACES = {"rgba"}

def is_alpha_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space carries an alpha channel.

    Args:
        color_space: Color space string
    Returns:
        True if the last channel is alpha, False otherwise
    """
    return color_space.lower() in ALPHA_SPACES
