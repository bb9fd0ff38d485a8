"""
Segmented Display - Digits
Digit records and the text decomposer that produces them
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from .glyphs import FontTable, Glyph, format_glyph


@dataclass(frozen=True)
class Digit:
    """One rendered position: a glyph plus its dot, colon and apostrophe flags"""
    glyph: Glyph = 0
    dot: bool = False
    colon: bool = False
    apostrophe: bool = False

    def with_glyph(self, glyph: Glyph) -> 'Digit':
        return replace(self, glyph=glyph)

    def __repr__(self) -> str:
        flags = [name for name in ('dot', 'colon', 'apostrophe') if getattr(self, name)]
        suffix = f", {', '.join(flags)}" if flags else ""
        return f"Digit({format_glyph(self.glyph)}{suffix})"


def decompose(text: str, font: FontTable, show_dots: bool = True, show_colons: bool = True,
              show_apostrophes: bool = True) -> List[Digit]:
    """
    Split `text` into digits using `font`.

    Enabled dots, colons and apostrophes never take a position of their own:
    a dot lights up on the digit before it, colons and apostrophes on the digit
    after them. Characters without a glyph are dropped.
    """
    window: List[Optional[str]] = [None] + list(text) + [None]
    digits = []

    for prev, curr, next_char in zip(window, window[1:], window[2:]):
        if curr == '.' and show_dots:
            continue
        if curr == ':' and show_colons:
            continue
        if curr == '\'' and show_apostrophes:
            continue

        glyph = font.glyph_for(curr)
        if glyph is None:
            continue

        digits.append(Digit(
            glyph=glyph,
            dot=show_dots and next_char == '.',
            colon=show_colons and prev == ':',
            apostrophe=show_apostrophes and prev == '\'',
        ))

    return digits
