"""
Segmented Display - Painter Interface
The three calls a host toolkit has to provide, and a recorder for inspection
"""

from typing import List, Sequence, Tuple

from .geometry import Point
from .shapes import Rect, Size
from .style import Color, Stroke


class Painter:
    """Minimal drawing surface a display row is painted on"""

    def allocate_rect(self, desired_size: Size) -> Rect:
        """Reserve room for a row and return where it goes"""
        raise NotImplementedError

    def draw_polygon(self, points: Sequence[Point], fill: Color, stroke: Stroke):
        raise NotImplementedError

    def draw_circle(self, center: Point, radius: float, fill: Color, stroke: Stroke):
        raise NotImplementedError


class RecordingPainter(Painter):
    """Painter that only remembers what it was asked to draw"""

    def __init__(self, origin: Point = (0.0, 0.0)):
        self.origin = origin
        self.allocated: List[Rect] = []
        self.calls: List[Tuple] = []

    def allocate_rect(self, desired_size: Size) -> Rect:
        rect = Rect.from_size(desired_size, self.origin)
        self.allocated.append(rect)
        return rect

    def draw_polygon(self, points: Sequence[Point], fill: Color, stroke: Stroke):
        self.calls.append(('polygon', tuple(points), fill, stroke))

    def draw_circle(self, center: Point, radius: float, fill: Color, stroke: Stroke):
        self.calls.append(('circle', center, radius, fill, stroke))

    def count(self, kind: str) -> int:
        """Number of recorded 'polygon' or 'circle' calls"""
        return sum(1 for call in self.calls if call[0] == kind)

    def clear(self):
        self.allocated.clear()
        self.calls.clear()
