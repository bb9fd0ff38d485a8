"""
Segmented Display - Display Kinds
The closed set of supported displays, each with its font and segment geometry
"""

from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

from .fonts import NINE_SEGMENT_FONT, SEVEN_SEGMENT_FONT, SIXTEEN_SEGMENT_FONT
from .geometry import (
    Polygon,
    nine_segment_geometry,
    seven_segment_geometry,
    sixteen_segment_geometry,
)
from .glyphs import FontTable, Glyph


class _KindData(NamedTuple):
    segment_count: int
    font: FontTable
    geometry: Callable[..., Tuple[Polygon, ...]]


class DisplayKind(Enum):
    """Enumeration for the supported segmented displays"""
    SEVEN_SEGMENT = "seven_segment"
    NINE_SEGMENT = "nine_segment"
    SIXTEEN_SEGMENT = "sixteen_segment"

    @property
    def segment_count(self) -> int:
        return _KIND_TABLE[self].segment_count

    @property
    def font(self) -> FontTable:
        return _KIND_TABLE[self].font

    @property
    def label(self) -> str:
        return f"{self.segment_count}-segment"

    def glyph(self, char: Optional[str]) -> Optional[Glyph]:
        """Glyph for `char` in this kind's font, None when unmapped"""
        return _KIND_TABLE[self].font.glyph_for(char)

    def geometry(self, digit_width: float, digit_height: float, segment_thickness: float,
                 segment_spacing: float, digit_median: float) -> Tuple[Polygon, ...]:
        """One outline per segment, index-aligned with the glyph bits"""
        polygons = _KIND_TABLE[self].geometry(
            float(digit_width),
            float(digit_height),
            float(segment_thickness),
            float(segment_spacing),
            float(digit_median),
        )
        assert len(polygons) == self.segment_count, \
            f"{self.label} geometry produced {len(polygons)} segments"
        return polygons

    @classmethod
    def from_name(cls, name: Union[str, 'DisplayKind']) -> 'DisplayKind':
        """Accept a member, its value, its name, or a segment count such as '16'"""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace('-', '_')
        for kind in cls:
            if key in (kind.value, kind.name.lower(), str(kind.segment_count),
                       kind.label.replace('-', '_')):
                return kind
        raise ValueError(f"Invalid display kind: {name}. Must be seven_segment, nine_segment, or sixteen_segment.")


_KIND_TABLE: Dict[DisplayKind, _KindData] = {
    DisplayKind.SEVEN_SEGMENT: _KindData(7, SEVEN_SEGMENT_FONT, seven_segment_geometry),
    DisplayKind.NINE_SEGMENT: _KindData(9, NINE_SEGMENT_FONT, nine_segment_geometry),
    DisplayKind.SIXTEEN_SEGMENT: _KindData(16, SIXTEEN_SEGMENT_FONT, sixteen_segment_geometry),
}
