"""
Spectrum Surface
================

Immutable RGB pixel buffer produced by the compositor.

The surface is the ground truth for both directions of the picker:
``pixel_at`` is the forward mapping (position to color), and ``region``
hands the locator a contiguous sub-rectangle to scan in memory.
"""

from __future__ import annotations

from numpy import ndarray as NDArray
import numpy as np
from typing import Tuple
from PIL import Image

from .colors.rgb import ColorRGBINT
from .types.geometry import Point, SearchRegion


class Surface:
    """
    Composited spectrum as a (height, width, 3) ``uint8`` array.

    The array is flagged read-only; every accessor hands out views or copies,
    never a writable alias.
    """

    __slots__ = ('_value',)

    def __init__(self, value: NDArray) -> None:
        value = np.asarray(value)
        if value.ndim != 3 or value.shape[-1] != 3:
            raise ValueError(
                f"Surface requires (height, width, 3) array, got shape {value.shape}"
            )
        if value.dtype != np.uint8:
            value = value.astype(np.uint8)
        else:
            value = value.copy()
        value.setflags(write=False)
        self._value = value

    @classmethod
    def empty(cls) -> Surface:
        """A surface with no pixels; what zero-sized renders produce."""
        return cls(np.zeros((0, 0, 3), dtype=np.uint8))

    @classmethod
    def from_image(cls, image: Image.Image) -> Surface:
        return cls(np.asarray(image.convert("RGB")))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> NDArray:
        return self._value

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._value.shape

    @property
    def width(self) -> int:
        return self._value.shape[1]

    @property
    def height(self) -> int:
        return self._value.shape[0]

    @property
    def is_empty(self) -> bool:
        return self._value.size == 0

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        if dtype is None:
            return self._value
        return self._value.astype(dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Surface):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._value, other._value))

    __hash__ = None  # type: ignore[assignment]

    # ------------------ LOOKUPS ------------------
    def contains(self, point: Point) -> bool:
        return point.in_bounds(self.width, self.height)

    def pixel_at(self, x: int, y: int) -> ColorRGBINT:
        """
        Forward mapping: the composited color at pixel (x, y).

        Raises:
            IndexError: if (x, y) is outside the surface
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} surface")
        r, g, b = self._value[y, x]
        return ColorRGBINT((int(r), int(g), int(b)))

    def region(self, search_region: SearchRegion) -> NDArray:
        """
        Materialize a sub-rectangle for in-memory scanning.

        Returns:
            Read-only int32 array of shape (region height, region width, 3).
            The wider dtype keeps channel differences from wrapping.
        """
        sx, ex, sy, ey = search_region
        block = self._value[sy:ey, sx:ex].astype(np.int32)
        block.setflags(write=False)
        return block

    # ------------------ EXPORT ------------------
    def tobytes(self) -> bytes:
        return self._value.tobytes()

    def to_image(self) -> Image.Image:
        """Copy the surface into a Pillow RGB image."""
        if self.is_empty:
            return Image.new("RGB", (self.width, self.height))
        return Image.fromarray(np.ascontiguousarray(self._value))
