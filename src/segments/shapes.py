"""
Segmented Display - Draw Calls
Rectangles and the polygon/circle shapes the compositor emits
"""

from typing import NamedTuple, Tuple

from .geometry import Point
from .style import Color, Stroke

Size = Tuple[float, float]


class Rect(NamedTuple):
    """Axis-aligned rectangle, y grows down"""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    @property
    def left_center(self) -> Point:
        return (self.left, self.top + self.height / 2.0)

    def corners(self) -> Tuple[Point, ...]:
        """Clockwise from the top-left corner"""
        return (
            (self.left, self.top),
            (self.right, self.top),
            (self.right, self.bottom),
            (self.left, self.bottom),
        )

    @classmethod
    def from_size(cls, size: Size, origin: Point = (0.0, 0.0)) -> 'Rect':
        return cls(origin[0], origin[1], size[0], size[1])


class PolygonShape(NamedTuple):
    """Filled and optionally outlined polygon"""
    points: Tuple[Point, ...]
    fill: Color
    stroke: Stroke

    def paint(self, painter):
        painter.draw_polygon(self.points, self.fill, self.stroke)


class CircleShape(NamedTuple):
    """Filled and optionally outlined circle"""
    center: Point
    radius: float
    fill: Color
    stroke: Stroke

    def paint(self, painter):
        painter.draw_circle(self.center, self.radius, self.fill, self.stroke)
