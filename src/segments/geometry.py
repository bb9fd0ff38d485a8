"""
Segmented Display - Segment Geometry
Procedural segment outlines for seven, nine and sixteen segment digits
"""

from functools import lru_cache
from typing import NamedTuple, Tuple

Point = Tuple[float, float]
Polygon = Tuple[Point, ...]

# Digit-local coordinates: origin at the digit center, x grows right, y grows down.
# Bevels are cut at quarter, half and full segment thickness so neighbouring
# segments meet on a shared diagonal, separated only by segment_spacing.


def _horizontal_bar(x0: float, x1: float, y: float, t: float, outward: float) -> Polygon:
    """Bar along an outer edge between x0 < x1; `outward` is -1 at the top, +1 at the bottom"""
    return (
        (x0 + t / 4.0, y - outward * (t / 4.0)),
        (x0 + t / 2.0, y),
        (x1 - t / 2.0, y),
        (x1 - t / 4.0, y - outward * (t / 4.0)),
        (x1 - t, y - outward * t),
        (x0 + t, y - outward * t),
    )


def _vertical_bar(x: float, inward: float, y_end: float, y_mid: float,
                  t: float, s: float, downward: float) -> Polygon:
    """
    Bar along an outer side, running from the outer corner `y_end` towards the
    median `y_mid`. `inward` points from the edge into the digit (+1 on the left),
    `downward` is +1 for the upper half and -1 for the lower half.
    """
    return (
        (x + inward * t, y_end + downward * (t + s)),
        (x + inward * (t / 4.0), y_end + downward * (t / 4.0 + s)),
        (x, y_end + downward * (t / 2.0 + s)),
        (x, y_mid - downward * (t / 2.0 + s)),
        (x + inward * (t / 2.0), y_mid - downward * s),
        (x + inward * t, y_mid - downward * (t / 2.0 + s)),
    )


def _middle_bar(x0: float, x1: float, m: float, t: float) -> Polygon:
    return (
        (x0 + t / 2.0, m),
        (x0 + t, m - t / 2.0),
        (x1 - t, m - t / 2.0),
        (x1 - t / 2.0, m),
        (x1 - t, m + t / 2.0),
        (x0 + t, m + t / 2.0),
    )


def _outer_verticals(w2: float, h2: float, t: float, s: float, m: float) -> Tuple[Polygon, ...]:
    """Upper-right, lower-right, lower-left and upper-left bars, in that order"""
    return (
        _vertical_bar(w2, -1.0, -h2, m, t, s, 1.0),
        _vertical_bar(w2, -1.0, h2, m, t, s, -1.0),
        _vertical_bar(-w2, 1.0, h2, m, t, s, -1.0),
        _vertical_bar(-w2, 1.0, -h2, m, t, s, 1.0),
    )


@lru_cache(maxsize=256)
def seven_segment_geometry(digit_width: float, digit_height: float, segment_thickness: float,
                           segment_spacing: float, digit_median: float) -> Tuple[Polygon, ...]:
    """Outlines for segments a-g: top, upper-right, lower-right, bottom, lower-left, upper-left, middle"""
    w2, h2 = digit_width / 2.0, digit_height / 2.0
    t, s, m = segment_thickness, segment_spacing, digit_median

    upper_right, lower_right, lower_left, upper_left = _outer_verticals(w2, h2, t, s, m)

    return (
        _horizontal_bar(-w2 + s, w2 - s, -h2, t, -1.0),
        upper_right,
        lower_right,
        _horizontal_bar(-w2 + s, w2 - s, h2, t, 1.0),
        lower_left,
        upper_left,
        _middle_bar(-w2 + s, w2 - s, m, t),
    )


@lru_cache(maxsize=256)
def nine_segment_geometry(digit_width: float, digit_height: float, segment_thickness: float,
                          segment_spacing: float, digit_median: float) -> Tuple[Polygon, ...]:
    """Seven segment outlines plus the upper-right and lower-left diagonals"""
    w2, h2 = digit_width / 2.0, digit_height / 2.0
    t, s, m = segment_thickness, segment_spacing, digit_median

    upper_right_diagonal = (
        (w2 - (t * 1.5) - s, -h2 + t + s),
        (w2 - t - s, -h2 + t + s),
        (w2 - t - s, -h2 + (t * 1.5) + s),
        ((t / 2.0) + s, -(t / 2.0) - s + m),
        (s, -(t / 2.0) - s + m),
        (s, -t - s + m),
    )
    lower_left_diagonal = (
        (-w2 + (t * 1.5) + s, h2 - t - s),
        (-w2 + t + s, h2 - t - s),
        (-w2 + t + s, h2 - (t * 1.5) - s),
        (-(t / 2.0) - s, (t / 2.0) + s + m),
        (-s, (t / 2.0) + s + m),
        (-s, t + s + m),
    )

    return seven_segment_geometry(digit_width, digit_height, segment_thickness,
                                  segment_spacing, digit_median) + (
        upper_right_diagonal,
        lower_left_diagonal,
    )


@lru_cache(maxsize=256)
def sixteen_segment_geometry(digit_width: float, digit_height: float, segment_thickness: float,
                             segment_spacing: float, digit_median: float) -> Tuple[Polygon, ...]:
    """
    Outlines for the sixteen segments.

    Index order: top-left half, top-right half, upper-right, lower-right,
    bottom-right half, bottom-left half, lower-left, upper-left, upper-left
    diagonal, upper vertical, upper-right diagonal, middle-right half,
    lower-right diagonal, lower vertical, lower-left diagonal, middle-left half.
    """
    w2, h2 = digit_width / 2.0, digit_height / 2.0
    t, s, m = segment_thickness, segment_spacing, digit_median

    upper_right, lower_right, lower_left, upper_left = _outer_verticals(w2, h2, t, s, m)

    def half_bar(y: float, outward: float, side: float) -> Polygon:
        # Outer end bevelled like a full bar, inner end pointed at the vertical center line
        edge = side * (w2 - s)
        return (
            (edge - side * (t / 4.0), y - outward * (t / 4.0)),
            (edge - side * (t / 2.0), y),
            (side * ((t / 2.0) + s), y),
            (side * s, y - outward * (t / 2.0)),
            (side * ((t / 2.0) + s), y - outward * t),
            (edge - side * t, y - outward * t),
        )

    def middle_half(side: float) -> Polygon:
        return (
            (side * (t + s), (t / 2.0) + m),
            (side * s, m),
            (side * (t + s), -(t / 2.0) + m),
            (side * (w2 - t - s), -(t / 2.0) + m),
            (side * (w2 - (t / 2.0) - s), m),
            (side * (w2 - t - s), (t / 2.0) + m),
        )

    def center_vertical(downward: float) -> Polygon:
        y_end = -downward * h2
        return (
            (-(t / 2.0), y_end + downward * (t + s)),
            (0.0, y_end + downward * ((t / 2.0) + s)),
            ((t / 2.0), y_end + downward * (t + s)),
            ((t / 2.0), m - downward * (t + s)),
            (0.0, m - downward * s),
            (-(t / 2.0), m - downward * (t + s)),
        )

    upper_left_diagonal = (
        (-s, -s + m),
        (-(t / 2.0) - s, -t - s + m),
        (-w2 + (t * 1.5) + s, -h2 + t + s),
        (-w2 + t + s, -h2 + t + s),
        (-w2 + t + s, -h2 + (t * 1.5) + s),
        (-t - s, -(t / 2.0) - s + m),
    )
    upper_right_diagonal = (
        ((t / 2.0) + s, -t - s + m),
        (w2 - (t * 1.5) - s, -h2 + t + s),
        (w2 - t - s, -h2 + t + s),
        (w2 - t - s, -h2 + (t * 1.5) + s),
        (t + s, -(t / 2.0) - s + m),
        (s, -s + m),
    )
    lower_right_diagonal = (
        (s, s + m),
        ((t / 2.0) + s, t + s + m),
        (w2 - (t * 1.5) - s, h2 - t - s),
        (w2 - t - s, h2 - t - s),
        (w2 - t - s, h2 - (t * 1.5) - s),
        (t + s, (t / 2.0) + s + m),
    )
    lower_left_diagonal = (
        (-(t / 2.0) - s, t + s + m),
        (-w2 + (t * 1.5) + s, h2 - t - s),
        (-w2 + t + s, h2 - t - s),
        (-w2 + t + s, h2 - (t * 1.5) - s),
        (-t - s, (t / 2.0) + s + m),
        (-s, s + m),
    )

    return (
        half_bar(-h2, -1.0, -1.0),
        half_bar(-h2, -1.0, 1.0),
        upper_right,
        lower_right,
        half_bar(h2, 1.0, 1.0),
        half_bar(h2, 1.0, -1.0),
        lower_left,
        upper_left,
        upper_left_diagonal,
        center_vertical(1.0),
        upper_right_diagonal,
        middle_half(1.0),
        lower_right_diagonal,
        center_vertical(-1.0),
        lower_left_diagonal,
        middle_half(-1.0),
    )


class Decorations(NamedTuple):
    """Dot, colon and apostrophe anchors shared by every digit in a row"""
    apostrophe: Polygon
    colon_top: Point
    colon_bottom: Point
    dot: Point
    radius: float


@lru_cache(maxsize=256)
def decoration_geometry(digit_width: float, digit_height: float, segment_thickness: float,
                        digit_spacing: float, digit_median: float,
                        colon_separation: float) -> Decorations:
    """
    Place the decorations in the gaps between digits: the colon and apostrophe
    sit in the gap to the left of a digit, the dot in the gap to its right.
    """
    w2, h2 = digit_width / 2.0, digit_height / 2.0
    t = segment_thickness
    left_gap = -w2 - (digit_spacing / 2.0)
    right_gap = w2 + (digit_spacing / 2.0)

    return Decorations(
        apostrophe=(
            (left_gap - (t / 2.0), -h2),
            (left_gap + (t / 2.0), -h2),
            (left_gap - (t / 2.0), -h2 + (t * 2.0)),
        ),
        colon_top=(left_gap, digit_median - colon_separation),
        colon_bottom=(left_gap, digit_median + colon_separation),
        dot=(right_gap, h2 - (t / 2.0)),
        radius=t / 2.0,
    )
