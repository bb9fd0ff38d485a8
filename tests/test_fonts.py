"""
Tests for the built-in font data
Known glyphs, bit widths per display kind and the animation frame sets
"""

import pytest
from segments.fonts import (
    SEVEN_SEGMENT_FONT, NINE_SEGMENT_FONT, SIXTEEN_SEGMENT_FONT, ANIMATIONS,
    HALFWIDTH_NUMBERS, FADE_LEFT_RIGHT, FADE_RIGHT_LEFT, FADE_TOP_BOTTOM, FADE_BOTTOM_TOP,
    BLOCKS, SPINNER_1, SPINNER_2, SPINNER_3, SPINNER_4, SPINNER_5,
)
from segments.kinds import DisplayKind


def test_seven_segment_digits():
    """Test the classic seven segment digits"""
    expected = {
        '0': 0x3F, '1': 0x06, '2': 0x5B, '3': 0x4F, '4': 0x66,
        '5': 0x6D, '6': 0x7D, '7': 0x27, '8': 0x7F, '9': 0x6F,
    }
    for char, glyph in expected.items():
        assert SEVEN_SEGMENT_FONT.glyph_for(char) == glyph


def test_nine_segment_uses_diagonals():
    """Test nine segment glyphs light the extra diagonals where needed"""
    assert NINE_SEGMENT_FONT.glyph_for('0') == 0x01BF
    assert NINE_SEGMENT_FONT.glyph_for('/') == 0x0180
    assert NINE_SEGMENT_FONT.glyph_for('A') == 0x0077


def test_sixteen_segment_samples():
    """Test a few sixteen segment glyphs"""
    assert SIXTEEN_SEGMENT_FONT.glyph_for('A') == 0x88CF
    assert SIXTEEN_SEGMENT_FONT.glyph_for('8') == 0x88FF
    assert SIXTEEN_SEGMENT_FONT.glyph_for(' ') == 0x0000


@pytest.mark.parametrize("kind", list(DisplayKind))
def test_glyphs_fit_segment_count(kind):
    """Test no glyph lights a segment the kind does not have"""
    limit = 1 << kind.segment_count
    for char, glyph in kind.font.items():
        assert 0 <= glyph < limit, f"{char!r} overflows {kind.label}"


def test_animation_lengths():
    """Test each animation has its full set of frames"""
    assert len(HALFWIDTH_NUMBERS) == 20
    for fade in (FADE_LEFT_RIGHT, FADE_RIGHT_LEFT, FADE_TOP_BOTTOM, FADE_BOTTOM_TOP):
        assert len(fade) == 6
        assert fade[0] == 0x0000
        assert fade[-1] == 0xFFFF
    assert len(BLOCKS) == 16
    assert len(SPINNER_1) == 64
    assert len(SPINNER_2) == 60
    assert len(SPINNER_3) == len(SPINNER_4) == len(SPINNER_5) == 8


def test_animation_registry():
    """Test the registry exposes every frame set by name"""
    assert ANIMATIONS['blocks'] is BLOCKS
    assert ANIMATIONS['spinner_3'] is SPINNER_3
    assert len(ANIMATIONS) == 11
    for frames in ANIMATIONS.values():
        assert all(0 <= glyph <= 0xFFFF for glyph in frames)
