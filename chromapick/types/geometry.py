from __future__ import annotations
import math
from typing import NamedTuple, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.rgb import ColorRGBINT


class Point(NamedTuple):
    """Integer pixel coordinate on the spectrum surface."""
    x: int
    y: int

    @property
    def is_empty(self) -> bool:
        return self == Point.EMPTY

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


# Not yet resolved; every resolved point has x, y >= 0
Point.EMPTY = Point(-1, -1)  # type: ignore[attr-defined]


class SearchRegion(NamedTuple):
    """Rectangle of candidate pixels. End bounds are exclusive."""
    start_x: int
    end_x: int
    start_y: int
    end_y: int

    @property
    def width(self) -> int:
        return self.end_x - self.start_x

    @property
    def height(self) -> int:
        return self.end_y - self.start_y

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.area == 0

    def contains(self, point: Point) -> bool:
        return self.start_x <= point.x < self.end_x and self.start_y <= point.y < self.end_y


class SampleResult(NamedTuple):
    point: Point
    color: Optional["ColorRGBINT"]
    distance: float = math.inf

    @property
    def is_exact(self) -> bool:
        return self.distance == 0.0
