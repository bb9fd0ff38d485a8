"""
Segmented Display - Glyphs and Font Tables
A glyph is a bitmask of lit segments; a font table maps characters to glyphs
"""

from bisect import bisect_left
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

# Glyphs are plain ints; 16 bits cover every display kind
Glyph = int

MAX_SEGMENTS = 16


def _check_segment_index(index: int):
    if not 0 <= index < MAX_SEGMENTS:
        raise ValueError(f"Invalid segment index: {index}. Must be between 0 and {MAX_SEGMENTS - 1}.")


def segment_active(glyph: Glyph, index: int) -> bool:
    """Check whether segment `index` is lit in `glyph`"""
    _check_segment_index(index)
    return ((glyph >> index) & 0x01) != 0x00


def set_segment(glyph: Glyph, index: int, on: bool = True) -> Glyph:
    """Return `glyph` with segment `index` switched on or off"""
    _check_segment_index(index)
    return (glyph & ~(1 << index) & 0xFFFF) | (int(bool(on)) << index)


def toggle_segment(glyph: Glyph, index: int) -> Glyph:
    """Return `glyph` with segment `index` flipped"""
    return set_segment(glyph, index, not segment_active(glyph, index))


def glyph_from_segments(indices: Iterable[int]) -> Glyph:
    """Build a glyph from the indices of its lit segments"""
    glyph = 0
    for index in indices:
        glyph = set_segment(glyph, index)
    return glyph


def active_segments(glyph: Glyph, segment_count: int = MAX_SEGMENTS) -> List[int]:
    """List the lit segment indices of `glyph`, lowest first"""
    return [index for index in range(segment_count) if segment_active(glyph, index)]


def format_glyph(glyph: Glyph) -> str:
    """Format a glyph the way font tables spell it, e.g. 0x007F"""
    return f"0x{glyph:04X}"


class FontTable:
    """
    Immutable character -> glyph mapping, sorted by character.

    The pairs are static data baked into each display kind, so an unsorted
    table is a programming error and fails loudly on construction.
    """

    def __init__(self, pairs: Sequence[Tuple[str, Glyph]]):
        pairs = tuple(pairs)
        assert all(k1 < k2 for (k1, _), (k2, _) in zip(pairs, pairs[1:])), \
            "Font table must be strictly increasing by character"

        self._keys = tuple(key for key, _ in pairs)
        self._glyphs = tuple(glyph for _, glyph in pairs)

    def glyph_for(self, char: Optional[str]) -> Optional[Glyph]:
        """Binary search for the glyph of `char`, None when not mapped"""
        if char is None:
            return None
        index = bisect_left(self._keys, char)
        if index < len(self._keys) and self._keys[index] == char:
            return self._glyphs[index]
        return None

    def chars(self) -> Tuple[str, ...]:
        """All mapped characters in table order"""
        return self._keys

    def items(self) -> Iterator[Tuple[str, Glyph]]:
        return zip(self._keys, self._glyphs)

    def __contains__(self, char) -> bool:
        return self.glyph_for(char) is not None

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Tuple[str, Glyph]]:
        return self.items()

    def __repr__(self) -> str:
        return f"FontTable({len(self)} glyphs)"


def glyph_for(table: FontTable, char: Optional[str]) -> Optional[Glyph]:
    """Look up `char` in `table`"""
    return table.glyph_for(char)
