"""
Segmented Display - Display Builder
Fluent construction of a digit row and rendering through any painter
"""

from typing import Iterable, List, NamedTuple, Optional, Union

from .compositor import Shape, desired_size, layout_and_emit
from .digits import Digit, decompose
from .glyphs import Glyph
from .kinds import DisplayKind
from .metrics import DisplayMetrics, MetricsPreset, resolve_metrics
from .painter import Painter
from .shapes import PolygonShape, Rect, Size
from .style import DisplayStyle, Stroke, StylePreset

DEFAULT_DIGIT_HEIGHT = 80.0


class RenderResult(NamedTuple):
    desired_size: Size
    rect: Rect
    background: PolygonShape
    draw_calls: List[Shape]


class SegmentedDisplay:
    """
    A row of segmented digits.

    Setters return the display itself so calls can be chained:

        SegmentedDisplay.seven_segment("12:34").style_preset(StylePreset.AMBER)

    Text is split into digits when it is pushed, using the dot, colon and
    apostrophe switches in effect at that moment.
    """

    def __init__(self, display_kind: Union[DisplayKind, str] = DisplayKind.SEVEN_SEGMENT):
        self.display_kind = DisplayKind.from_name(display_kind)
        self.digits: List[Digit] = []
        self._digit_height = DEFAULT_DIGIT_HEIGHT
        self._metrics = MetricsPreset.DEFAULT.metrics()
        self._style = StylePreset.DEFAULT.style()
        self._show_dots = True
        self._show_colons = True
        self._show_apostrophes = True

    @classmethod
    def seven_segment(cls, value: str) -> 'SegmentedDisplay':
        return cls(DisplayKind.SEVEN_SEGMENT).push_string(value)

    @classmethod
    def nine_segment(cls, value: str) -> 'SegmentedDisplay':
        return cls(DisplayKind.NINE_SEGMENT).push_string(value)

    @classmethod
    def sixteen_segment(cls, value: str) -> 'SegmentedDisplay':
        return cls(DisplayKind.SIXTEEN_SEGMENT).push_string(value)

    # Content

    def push_string(self, value: str) -> 'SegmentedDisplay':
        """Append the digits of `value`; unmapped characters are skipped"""
        self.digits.extend(decompose(
            str(value),
            self.display_kind.font,
            show_dots=self._show_dots,
            show_colons=self._show_colons,
            show_apostrophes=self._show_apostrophes,
        ))
        return self

    def push_digit(self, digit: Digit) -> 'SegmentedDisplay':
        self.digits.append(digit)
        return self

    def push_glyph(self, glyph: Glyph, dot: bool = False, colon: bool = False,
                   apostrophe: bool = False) -> 'SegmentedDisplay':
        """Append a raw glyph, e.g. one frame of an animation"""
        return self.push_digit(Digit(glyph, dot, colon, apostrophe))

    def push_glyphs(self, glyphs: Iterable[Glyph]) -> 'SegmentedDisplay':
        for glyph in glyphs:
            self.push_glyph(glyph)
        return self

    def clear(self) -> 'SegmentedDisplay':
        """Drop all digits, keeping the configuration"""
        self.digits = []
        return self

    # Configuration

    def digit_height(self, digit_height: float) -> 'SegmentedDisplay':
        self._digit_height = float(digit_height)
        return self

    def style(self, style: DisplayStyle) -> 'SegmentedDisplay':
        self._style = style
        return self

    def style_preset(self, preset: Union[StylePreset, str]) -> 'SegmentedDisplay':
        self._style = StylePreset.from_name(preset).style()
        return self

    def metrics(self, metrics: DisplayMetrics) -> 'SegmentedDisplay':
        self._metrics = metrics
        return self

    def metrics_preset(self, preset: Union[MetricsPreset, str]) -> 'SegmentedDisplay':
        self._metrics = MetricsPreset.from_name(preset).metrics()
        return self

    def show_dots(self, show_dots: bool) -> 'SegmentedDisplay':
        self._show_dots = bool(show_dots)
        return self

    def show_colons(self, show_colons: bool) -> 'SegmentedDisplay':
        self._show_colons = bool(show_colons)
        return self

    def show_apostrophes(self, show_apostrophes: bool) -> 'SegmentedDisplay':
        self._show_apostrophes = bool(show_apostrophes)
        return self

    # Read-only views of the configuration

    @property
    def current_style(self) -> DisplayStyle:
        return self._style

    @property
    def current_metrics(self) -> DisplayMetrics:
        return self._metrics

    @property
    def current_digit_height(self) -> float:
        return self._digit_height

    # Rendering

    def desired_size(self) -> Size:
        return desired_size(len(self.digits), resolve_metrics(self._metrics, self._digit_height))

    def render(self, rect: Optional[Rect] = None) -> RenderResult:
        """Compute the draw calls for this row, placed in `rect` or at the origin"""
        if rect is None:
            rect = Rect.from_size(self.desired_size())

        layout = layout_and_emit(
            self.digits,
            self._metrics,
            self._style,
            self._digit_height,
            self.display_kind,
            show_dots=self._show_dots,
            show_colons=self._show_colons,
            show_apostrophes=self._show_apostrophes,
            rect=rect,
        )
        background = PolygonShape(rect.corners(), self._style.background_color, Stroke.NONE)
        return RenderResult(layout.desired_size, rect, background, layout.draw_calls)

    def paint(self, painter: Painter) -> RenderResult:
        """Allocate room on `painter` and draw the background, then every segment"""
        rect = painter.allocate_rect(self.desired_size())
        result = self.render(rect)

        result.background.paint(painter)
        for shape in result.draw_calls:
            shape.paint(painter)

        return result

    def __len__(self) -> int:
        return len(self.digits)

    def __repr__(self) -> str:
        return f"SegmentedDisplay({self.display_kind.label}, {len(self.digits)} digits)"
