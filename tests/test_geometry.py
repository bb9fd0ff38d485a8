"""
Unit tests for segment geometry
Tests segment counts, memoisation, shared bevels and decoration anchors
"""

import pytest
from segments.geometry import (
    seven_segment_geometry, nine_segment_geometry, sixteen_segment_geometry, decoration_geometry,
)
from segments.kinds import DisplayKind

# Default metrics resolved at digit height 80
WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN = 48.0, 80.0, 8.0, 0.8, -2.0


def _approx_point(point):
    return pytest.approx(point, abs=1e-9)


class TestSegmentCounts:
    """Test each generator produces one outline per glyph bit"""

    @pytest.mark.parametrize("kind", list(DisplayKind))
    def test_geometry_length_matches_segment_count(self, kind):
        polygons = kind.geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        assert len(polygons) == kind.segment_count

    @pytest.mark.parametrize("kind", list(DisplayKind))
    def test_polygons_are_closed_outlines(self, kind):
        """Test every segment has at least three points"""
        for polygon in kind.geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN):
            assert len(polygon) >= 3

    @pytest.mark.parametrize("kind", list(DisplayKind))
    def test_points_stay_inside_digit_box(self, kind):
        """Test no segment pokes out of the digit cell"""
        for polygon in kind.geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN):
            for x, y in polygon:
                assert -WIDTH / 2 - 1e-9 <= x <= WIDTH / 2 + 1e-9
                assert -HEIGHT / 2 - 1e-9 <= y <= HEIGHT / 2 + 1e-9

    def test_kind_geometry_accepts_ints(self):
        """Test integer inputs give the same outlines as floats"""
        assert (DisplayKind.SEVEN_SEGMENT.geometry(48, 80, 8, 1, 0)
                == DisplayKind.SEVEN_SEGMENT.geometry(48.0, 80.0, 8.0, 1.0, 0.0))

    def test_geometry_length_mismatch_fails(self, monkeypatch):
        """Test a kind whose outlines disagree with its segment count is rejected"""
        from segments import kinds
        data = kinds._KIND_TABLE[DisplayKind.SEVEN_SEGMENT]
        monkeypatch.setitem(kinds._KIND_TABLE, DisplayKind.SEVEN_SEGMENT, data._replace(segment_count=8))

        with pytest.raises(AssertionError):
            DisplayKind.SEVEN_SEGMENT.geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)


class TestDeterminism:
    """Test the generators are pure and memoised"""

    @pytest.mark.parametrize("generator", [
        seven_segment_geometry, nine_segment_geometry, sixteen_segment_geometry,
    ])
    def test_same_inputs_same_output(self, generator):
        first = generator(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        second = generator(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        assert first == second
        # Served from the cache
        assert first is second

    def test_different_inputs_differ(self):
        assert (seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
                != seven_segment_geometry(WIDTH, HEIGHT, THICKNESS * 2, SPACING, MEDIAN))


class TestSevenSegmentShape:
    """Test the seven segment outlines in detail"""

    def test_zero_spacing_shares_corner_vertex(self):
        """Test top bar and upper-right bar meet on the same bevel point"""
        polygons = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, 0.0, MEDIAN)
        corner = (WIDTH / 2 - THICKNESS / 4, -HEIGHT / 2 + THICKNESS / 4)

        assert any(point == _approx_point(corner) for point in polygons[0])
        assert any(point == _approx_point(corner) for point in polygons[1])

    def test_top_bar_touches_top_edge(self):
        top = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)[0]
        assert min(y for _, y in top) == pytest.approx(-HEIGHT / 2)
        assert max(y for _, y in top) == pytest.approx(-HEIGHT / 2 + THICKNESS)

    def test_middle_bar_follows_median(self):
        """Test the middle bar is centred on the median"""
        middle = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)[6]
        ys = [y for _, y in middle]
        assert (min(ys) + max(ys)) / 2 == pytest.approx(MEDIAN)

    def test_vertical_mirror_symmetry_without_median(self):
        """Test top and bottom bars mirror each other when the median is zero"""
        polygons = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, 0.0)
        top = sorted(polygons[0])
        bottom = sorted((x, -y) for x, y in polygons[3])
        assert top == [_approx_point(point) for point in bottom]

    def test_horizontal_mirror_symmetry(self):
        """Test upper-right and upper-left bars mirror each other"""
        polygons = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        right = sorted(polygons[1])
        left = sorted((-x, y) for x, y in polygons[5])
        assert right == [_approx_point(point) for point in left]

    def test_spacing_separates_segments(self):
        """Test the top bar ends are pulled in by the spacing"""
        top = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, 2.0, MEDIAN)[0]
        assert max(x for x, _ in top) == pytest.approx(WIDTH / 2 - 2.0 - THICKNESS / 4)


class TestNineAndSixteen:
    """Test the extended kinds build on the same outer frame"""

    def test_nine_segment_extends_seven(self):
        seven = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        nine = nine_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        assert nine[:7] == seven

    def test_nine_segment_diagonals_are_opposite(self):
        """Test the two diagonals are point-symmetric when the median is zero"""
        nine = nine_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, 0.0)
        upper_right = sorted(nine[7])
        lower_left = sorted((-x, -y) for x, y in nine[8])
        assert upper_right == [_approx_point(point) for point in lower_left]

    def test_sixteen_segment_shares_outer_verticals(self):
        seven = seven_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        sixteen = sixteen_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        # upper-right, lower-right, lower-left, upper-left
        assert sixteen[2:4] == seven[1:3]
        assert sixteen[6:8] == seven[4:6]

    def test_sixteen_segment_half_bars_mirror(self):
        sixteen = sixteen_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        top_left = sorted(sixteen[0])
        top_right = sorted((-x, y) for x, y in sixteen[1])
        assert top_left == [_approx_point(point) for point in top_right]

    def test_sixteen_segment_center_verticals_meet_median(self):
        sixteen = sixteen_segment_geometry(WIDTH, HEIGHT, THICKNESS, SPACING, MEDIAN)
        upper, lower = sixteen[9], sixteen[13]
        assert max(y for _, y in upper) == pytest.approx(MEDIAN - SPACING)
        assert min(y for _, y in lower) == pytest.approx(MEDIAN + SPACING)


class TestDecorations:
    """Test the dot, colon and apostrophe anchors"""

    def test_anchor_positions(self):
        digit_spacing, colon_separation = 16.8, 10.0
        decorations = decoration_geometry(WIDTH, HEIGHT, THICKNESS, digit_spacing, MEDIAN, colon_separation)
        left_gap = -WIDTH / 2 - digit_spacing / 2

        assert decorations.radius == pytest.approx(THICKNESS / 2)
        assert decorations.dot == _approx_point((WIDTH / 2 + digit_spacing / 2, HEIGHT / 2 - THICKNESS / 2))
        assert decorations.colon_top == _approx_point((left_gap, MEDIAN - colon_separation))
        assert decorations.colon_bottom == _approx_point((left_gap, MEDIAN + colon_separation))
        assert decorations.apostrophe == (
            _approx_point((left_gap - THICKNESS / 2, -HEIGHT / 2)),
            _approx_point((left_gap + THICKNESS / 2, -HEIGHT / 2)),
            _approx_point((left_gap - THICKNESS / 2, -HEIGHT / 2 + 2 * THICKNESS)),
        )
