"""
Segmented Display - Digit Row Compositor
Lays out a row of digits and emits one draw call per segment and decoration
"""

from typing import List, NamedTuple, Optional, Sequence, Union

import numpy as np

from .digits import Digit
from .geometry import Point, decoration_geometry
from .kinds import DisplayKind
from .metrics import DisplayMetrics, ResolvedMetrics, resolve_metrics
from .shapes import CircleShape, PolygonShape, Rect, Size
from .style import DisplayStyle

Shape = Union[PolygonShape, CircleShape]


class RowLayout(NamedTuple):
    desired_size: Size
    draw_calls: List[Shape]


def shear_points(points: Sequence[Point], center: Point, digit_shearing: float,
                 digit_height: float) -> List[Point]:
    """
    Move digit-local points to `center`, slanting them by `digit_shearing`.

    The horizontal offset grows linearly with the distance from the digit's
    horizontal center line and reaches `digit_shearing` at the top and bottom
    edges. Points above the center line move right, points below move left.
    """
    local = np.asarray(points, dtype=float).reshape(-1, 2)
    placed = local + np.asarray(center, dtype=float)
    if digit_shearing:
        placed[:, 0] -= digit_shearing * (local[:, 1] / (digit_height / 2.0))
    return [(x, y) for x, y in placed.tolist()]


def desired_size(digit_count: int, resolved: ResolvedMetrics) -> Size:
    """Row size, including room for sheared digits at both ends"""
    return (
        (resolved.digit_width * digit_count)
        + (resolved.digit_spacing * max(digit_count - 1, 0))
        + (2.0 * resolved.margin_horizontal)
        + (2.0 * abs(resolved.digit_shearing)),
        resolved.digit_height + (2.0 * resolved.margin_vertical),
    )


def digit_centers(digit_count: int, resolved: ResolvedMetrics, rect: Rect) -> List[Point]:
    """Center of every digit position inside `rect`"""
    left, middle = rect.left_center
    start = left + resolved.margin_horizontal + abs(resolved.digit_shearing) + (resolved.digit_width / 2.0)
    return [(start + resolved.digit_pitch * index, middle) for index in range(digit_count)]


def emit(digits: Sequence[Digit], resolved: ResolvedMetrics, style: DisplayStyle,
         display_kind: DisplayKind, rect: Rect, show_dots: bool = True,
         show_colons: bool = True, show_apostrophes: bool = True) -> List[Shape]:
    """
    Draw calls for every digit in `rect`.

    Every segment is emitted, unlit ones in the inactive style, and so is
    every enabled decoration whether or not the digit uses it.
    """
    segment_geometry = display_kind.geometry(
        resolved.digit_width,
        resolved.digit_height,
        resolved.segment_thickness,
        resolved.segment_spacing,
        resolved.digit_median,
    )
    decorations = decoration_geometry(
        resolved.digit_width,
        resolved.digit_height,
        resolved.segment_thickness,
        resolved.digit_spacing,
        resolved.digit_median,
        resolved.colon_separation,
    )

    shearing, height = resolved.digit_shearing, resolved.digit_height
    draw_calls: List[Shape] = []

    for digit, center in zip(digits, digit_centers(len(digits), resolved, rect)):
        for segment_index, segment_points in enumerate(segment_geometry):
            active = ((digit.glyph >> segment_index) & 0x01) != 0x00
            draw_calls.append(PolygonShape(
                tuple(shear_points(segment_points, center, shearing, height)),
                style.foreground_color(active),
                style.foreground_stroke(active),
            ))

        if show_dots:
            draw_calls.append(_circle(decorations.dot, decorations.radius, digit.dot,
                                      center, resolved, style))

        if show_colons:
            for anchor in (decorations.colon_top, decorations.colon_bottom):
                draw_calls.append(_circle(anchor, decorations.radius, digit.colon,
                                          center, resolved, style))

        if show_apostrophes:
            draw_calls.append(PolygonShape(
                tuple(shear_points(decorations.apostrophe, center, shearing, height)),
                style.foreground_color(digit.apostrophe),
                style.foreground_stroke(digit.apostrophe),
            ))

    return draw_calls


def _circle(anchor: Point, radius: float, active: bool, center: Point,
            resolved: ResolvedMetrics, style: DisplayStyle) -> CircleShape:
    (placed,) = shear_points([anchor], center, resolved.digit_shearing, resolved.digit_height)
    return CircleShape(placed, radius, style.foreground_color(active), style.foreground_stroke(active))


def layout_and_emit(digits: Sequence[Digit], metrics: DisplayMetrics, style: DisplayStyle,
                    digit_height: float, display_kind: DisplayKind, show_dots: bool = True,
                    show_colons: bool = True, show_apostrophes: bool = True,
                    rect: Optional[Rect] = None) -> RowLayout:
    """
    Resolve metrics, size the row and emit its draw calls.

    Without a `rect` the row is laid out at the origin with its desired size.
    """
    resolved = resolve_metrics(metrics, digit_height)
    size = desired_size(len(digits), resolved)
    if rect is None:
        rect = Rect.from_size(size)

    return RowLayout(size, emit(digits, resolved, style, display_kind, rect,
                                show_dots, show_colons, show_apostrophes))
