"""
Tests for Pillow image rendering
Renders small displays and inspects the resulting pixels
"""

import math
from unittest.mock import Mock

from PIL import Image

from segments import SegmentedDisplay, StylePreset, Stroke
from segments.image import ImagePainter, render_to_image
from segments.shapes import Rect


def _colors(image):
    return {color for _, color in image.getcolors(maxcolors=image.width * image.height)}


class TestRenderToImage:
    """Test cases for render_to_image"""

    def test_image_matches_desired_size(self):
        display = SegmentedDisplay.seven_segment("88").digit_height(40)
        width, height = display.desired_size()
        image = render_to_image(display)

        assert image.mode == 'RGBA'
        assert image.size == (math.ceil(width), math.ceil(height))

    def test_scale_multiplies_size(self):
        display = SegmentedDisplay.seven_segment("1").digit_height(40)
        small = render_to_image(display)
        large = render_to_image(display, scale=2)

        assert large.width >= 2 * small.width - 1
        assert large.height >= 2 * small.height - 1

    def test_on_and_off_colors_present(self):
        style = StylePreset.DEFAULT.style()
        display = SegmentedDisplay.seven_segment("1").digit_height(60)
        colors = _colors(render_to_image(display))

        assert style.background_color in colors
        assert style.active_foreground_color in colors
        assert style.inactive_foreground_color in colors

    def test_background_fills_corners(self):
        style = StylePreset.AMBER.style()
        display = SegmentedDisplay.seven_segment("0").style_preset(StylePreset.AMBER)
        image = render_to_image(display)

        assert image.getpixel((0, 0)) == style.background_color
        assert image.getpixel((image.width - 1, image.height - 1)) == style.background_color

    def test_translucent_segments_are_blended(self):
        """Test alpha segments mix with the background instead of replacing it"""
        style = StylePreset.LIGHT_BLUE.style()
        display = SegmentedDisplay.seven_segment("8").style_preset(StylePreset.LIGHT_BLUE).digit_height(60)
        colors = _colors(render_to_image(display))

        assert style.active_foreground_color not in colors
        assert all(color[3] == 255 for color in colors)

    def test_empty_display(self):
        image = render_to_image(SegmentedDisplay())
        assert image.width >= 1 and image.height >= 1


class TestImagePainter:
    """Test cases for ImagePainter calls"""

    def test_allocate_rect_uses_origin(self):
        painter = ImagePainter(Image.new('RGBA', (10, 10)), origin=(2.0, 3.0))
        assert painter.allocate_rect((4.0, 5.0)) == Rect(2.0, 3.0, 4.0, 5.0)

    def test_polygon_without_stroke(self):
        painter = ImagePainter(Image.new('RGBA', (10, 10)), scale=2.0)
        painter.draw = Mock()
        painter.draw_polygon([(1.0, 1.0), (2.0, 1.0), (2.0, 2.0)], (255, 0, 0, 255), Stroke.NONE)

        painter.draw.polygon.assert_called_once_with(
            [(2.0, 2.0), (4.0, 2.0), (4.0, 4.0)], fill=(255, 0, 0, 255))

    def test_circle_with_stroke(self):
        painter = ImagePainter(Image.new('RGBA', (10, 10)))
        painter.draw = Mock()
        painter.draw_circle((5.0, 5.0), 2.0, (0, 255, 0, 255), Stroke(1.4, (0, 0, 0, 255)))

        painter.draw.ellipse.assert_called_once_with(
            [3.0, 3.0, 7.0, 7.0], fill=(0, 255, 0, 255), outline=(0, 0, 0, 255), width=1)

    def test_stroke_is_drawn(self):
        image = Image.new('RGBA', (20, 20), (0, 0, 0, 255))
        painter = ImagePainter(image)
        painter.draw_polygon([(2.0, 2.0), (17.0, 2.0), (17.0, 17.0), (2.0, 17.0)],
                             (0, 0, 255, 255), Stroke(2.0, (255, 255, 255, 255)))

        assert image.getpixel((2, 10)) == (255, 255, 255, 255)
        assert image.getpixel((10, 10)) == (0, 0, 255, 255)
