"""
Segmented Display - Image Rendering
Paints display rows onto Pillow images
"""

import math
from contextlib import contextmanager
from typing import Optional, Sequence

from PIL import Image, ImageDraw

from .geometry import Point
from .painter import Painter
from .shapes import Rect, Size
from .style import Color, Stroke


class ImagePainter(Painter):
    """
    Painter backed by a Pillow RGBA image.

    Drawing on an RGBA image replaces pixels outright, so shapes with any
    translucent color go through an overlay that is alpha-composited back.
    """

    def __init__(self, image: Image.Image, scale: float = 1.0, origin: Point = (0.0, 0.0)):
        self.image = image
        self.scale = scale
        self.origin = origin
        self.draw = ImageDraw.Draw(image)

    @contextmanager
    def _drawing(self, *colors: Optional[Color]):
        if all(color is None or color[3] == 255 for color in colors):
            yield self.draw
            return

        overlay = Image.new('RGBA', self.image.size, (0, 0, 0, 0))
        yield ImageDraw.Draw(overlay)
        self.image.alpha_composite(overlay)

    def allocate_rect(self, desired_size: Size) -> Rect:
        return Rect.from_size(desired_size, self.origin)

    def _xy(self, point: Point) -> tuple:
        return (point[0] * self.scale, point[1] * self.scale)

    def _outline(self, stroke: Stroke):
        if not stroke.visible:
            return None, 0
        return stroke.color, max(1, int(round(stroke.width * self.scale)))

    def draw_polygon(self, points: Sequence[Point], fill: Color, stroke: Stroke):
        outline, width = self._outline(stroke)
        xy = [self._xy(point) for point in points]
        with self._drawing(fill, outline) as draw:
            if outline is None:
                draw.polygon(xy, fill=fill)
            else:
                draw.polygon(xy, fill=fill, outline=outline, width=width)

    def draw_circle(self, center: Point, radius: float, fill: Color, stroke: Stroke):
        outline, width = self._outline(stroke)
        x, y = self._xy(center)
        r = radius * self.scale
        bbox = [x - r, y - r, x + r, y + r]
        with self._drawing(fill, outline) as draw:
            if outline is None:
                draw.ellipse(bbox, fill=fill)
            else:
                draw.ellipse(bbox, fill=fill, outline=outline, width=width)


def render_to_image(display, scale: float = 1.0, background: Optional[Color] = None) -> Image.Image:
    """
    Render a SegmentedDisplay into a new RGBA image sized to fit it.

    The image is rounded up to whole pixels; `background` fills that slack
    and defaults to the display's own background color.
    """
    if background is None:
        background = display.current_style.background_color

    width, height = display.desired_size()
    image_size = (max(1, int(math.ceil(width * scale))), max(1, int(math.ceil(height * scale))))
    image = Image.new('RGBA', image_size, background)

    display.paint(ImagePainter(image, scale=scale))
    return image
