"""
Unit tests for display metrics
Tests presets, name lookup and resolution to absolute units
"""

import pytest
from segments.metrics import DisplayMetrics, MetricsPreset, resolve_metrics


class TestMetricsPresets:
    """Test cases for the named metrics"""

    def test_default_values(self):
        metrics = MetricsPreset.DEFAULT.metrics()

        assert metrics == DisplayMetrics()
        assert metrics.segment_spacing == 0.01
        assert metrics.segment_thickness == 0.1
        assert metrics.digit_median == -0.05
        assert metrics.digit_ratio == 0.6
        assert metrics.digit_shearing == 0.1
        assert metrics.digit_spacing == 0.35
        assert metrics.margin_horizontal == 0.3
        assert metrics.margin_vertical == 0.1
        assert metrics.colon_separation == 0.25

    def test_knight_rider_values(self):
        metrics = MetricsPreset.KNIGHT_RIDER.metrics()

        assert metrics.segment_spacing == 0.02
        assert metrics.segment_thickness == 0.12
        assert metrics.digit_ratio == 1.0
        assert metrics.digit_spacing == 0.20
        assert metrics.digit_shearing == 0.1

    @pytest.mark.parametrize("name,expected", [
        ("Default", MetricsPreset.DEFAULT),
        ("knight rider", MetricsPreset.KNIGHT_RIDER),
        ("KNIGHT_RIDER", MetricsPreset.KNIGHT_RIDER),
        (MetricsPreset.DEFAULT, MetricsPreset.DEFAULT),
    ])
    def test_from_name(self, name, expected):
        assert MetricsPreset.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Invalid metrics preset"):
            MetricsPreset.from_name("Kitt")

    def test_display_name(self):
        assert MetricsPreset.KNIGHT_RIDER.display_name == "Knight Rider"


class TestDisplayMetrics:
    """Test cases for DisplayMetrics values"""

    def test_with_changes(self):
        metrics = DisplayMetrics().with_changes(digit_shearing=0.0)

        assert metrics.digit_shearing == 0.0
        assert metrics.digit_ratio == 0.6


class TestResolveMetrics:
    """Test cases for resolve_metrics"""

    def test_default_at_height_80(self):
        resolved = resolve_metrics(DisplayMetrics(), 80)

        assert resolved.digit_height == 80.0
        assert resolved.digit_width == pytest.approx(48.0)
        assert resolved.segment_thickness == pytest.approx(8.0)
        assert resolved.segment_spacing == pytest.approx(0.8)
        assert resolved.margin_vertical == pytest.approx(8.0)
        # Relative to the digit width
        assert resolved.digit_shearing == pytest.approx(4.8)
        assert resolved.digit_spacing == pytest.approx(16.8)
        assert resolved.margin_horizontal == pytest.approx(14.4)
        # Relative to half the digit height
        assert resolved.digit_median == pytest.approx(-2.0)
        assert resolved.colon_separation == pytest.approx(10.0)

    def test_digit_pitch(self):
        resolved = resolve_metrics(DisplayMetrics(), 80)
        assert resolved.digit_pitch == pytest.approx(48.0 + 16.8)

    def test_scales_linearly(self):
        small = resolve_metrics(DisplayMetrics(), 40)
        large = resolve_metrics(DisplayMetrics(), 80)

        assert large.digit_width == pytest.approx(2 * small.digit_width)
        assert large.segment_thickness == pytest.approx(2 * small.segment_thickness)
        assert large.colon_separation == pytest.approx(2 * small.colon_separation)
