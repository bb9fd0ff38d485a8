"""
Segmented display package initialization
"""

from .glyphs import (
    FontTable, Glyph, glyph_for, segment_active, set_segment, toggle_segment,
    glyph_from_segments, active_segments, format_glyph,
)
from .fonts import SEVEN_SEGMENT_FONT, NINE_SEGMENT_FONT, SIXTEEN_SEGMENT_FONT, ANIMATIONS
from .kinds import DisplayKind
from .digits import Digit, decompose
from .metrics import DisplayMetrics, MetricsPreset, ResolvedMetrics, resolve_metrics
from .style import Color, Stroke, DisplayStyle, StylePreset
from .shapes import Rect, PolygonShape, CircleShape
from .compositor import layout_and_emit
from .painter import Painter, RecordingPainter
from .display import SegmentedDisplay, RenderResult

__all__ = [
    'FontTable', 'Glyph', 'glyph_for', 'segment_active', 'set_segment', 'toggle_segment',
    'glyph_from_segments', 'active_segments', 'format_glyph',
    'SEVEN_SEGMENT_FONT', 'NINE_SEGMENT_FONT', 'SIXTEEN_SEGMENT_FONT', 'ANIMATIONS',
    'DisplayKind', 'Digit', 'decompose',
    'DisplayMetrics', 'MetricsPreset', 'ResolvedMetrics', 'resolve_metrics',
    'Color', 'Stroke', 'DisplayStyle', 'StylePreset',
    'Rect', 'PolygonShape', 'CircleShape', 'layout_and_emit',
    'Painter', 'RecordingPainter', 'SegmentedDisplay', 'RenderResult',
]
