"""
Segmented Display - Styles
Colors and strokes for lit and unlit segments, with the classic display presets
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

# (red, green, blue, alpha), 0-255 each
Color = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


def rgb(red: int, green: int, blue: int) -> Color:
    """Opaque color"""
    return (red, green, blue, 255)


def black_alpha(alpha: int) -> Color:
    """Translucent black"""
    return (0, 0, 0, alpha)


def lerp_color(start: Color, end: Color, value: float) -> Color:
    """Linear interpolation between two colors, `value` clamped to [0, 1]"""
    value = min(max(value, 0.0), 1.0)
    return tuple(int(round(a + (b - a) * value)) for a, b in zip(start, end))


def blend_over(color: Color, background: Color) -> Color:
    """Composite `color` over an opaque `background`"""
    alpha = color[3] / 255.0
    return tuple(int(round(c * alpha + b * (1.0 - alpha))) for c, b in zip(color[:3], background[:3])) + (255,)


def to_hex(color: Color) -> str:
    """Tk-style #rrggbb, alpha is dropped"""
    return '#{:02x}{:02x}{:02x}'.format(*color[:3])


@dataclass(frozen=True)
class Stroke:
    """Outline drawn around a shape; zero width means no outline"""
    width: float = 0.0
    color: Color = TRANSPARENT

    @property
    def visible(self) -> bool:
        return self.width > 0.0 and self.color[3] > 0


Stroke.NONE = Stroke()


@dataclass(frozen=True)
class DisplayStyle:
    """Colors for one display row, shared by all of its digits"""
    background_color: Color
    active_foreground_color: Color
    inactive_foreground_color: Color
    active_foreground_stroke: Stroke = Stroke.NONE
    inactive_foreground_stroke: Stroke = Stroke.NONE

    def foreground_color(self, active: bool) -> Color:
        """Fill for a lit or unlit segment"""
        return self.active_foreground_color if active else self.inactive_foreground_color

    def foreground_stroke(self, active: bool) -> Stroke:
        """Outline for a lit or unlit segment"""
        return self.active_foreground_stroke if active else self.inactive_foreground_stroke

    def foreground_color_blend(self, value: float) -> Color:
        """Fill part way between unlit (0.0) and lit (1.0), for fading segments"""
        return lerp_color(self.inactive_foreground_color, self.active_foreground_color, value)

    def foreground_stroke_blend(self, value: float) -> Stroke:
        """Outline part way between unlit (0.0) and lit (1.0)"""
        value = min(max(value, 0.0), 1.0)
        inactive, active = self.inactive_foreground_stroke, self.active_foreground_stroke
        return Stroke(
            width=inactive.width + (active.width - inactive.width) * value,
            color=lerp_color(inactive.color, active.color, value),
        )


class StylePreset(Enum):
    """Color schemes of real-world displays"""
    DEFAULT = "Default"
    CALCULATOR = "Calculator"
    NINTENDO_GAME_BOY = "Nintendo Game Boy"
    KNIGHT_RIDER = "Knight Rider"
    BLUE_NEGATIVE = "Blue Negative"
    AMBER = "Amber"
    LIGHT_BLUE = "Light Blue"
    DELOREAN_RED = "DeLorean Red"
    DELOREAN_GREEN = "DeLorean Green"
    DELOREAN_AMBER = "DeLorean Amber"
    YAMAHA_MU2000 = "Yamaha MU2000"

    @property
    def display_name(self) -> str:
        return self.value

    def style(self) -> DisplayStyle:
        return _STYLE_PRESETS[self]

    @classmethod
    def from_name(cls, name: Union[str, 'StylePreset']) -> 'StylePreset':
        """Look up a preset by member name or display name, case-insensitively"""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for preset in cls:
            if key in (preset.name.lower(), preset.value.lower()):
                return preset
        raise ValueError(f"Invalid style preset: {name}. Must be one of {', '.join(p.name for p in cls)}.")


_STYLE_PRESETS = {
    StylePreset.DEFAULT: DisplayStyle(
        background_color=rgb(0x00, 0x20, 0x00),
        active_foreground_color=rgb(0x00, 0xF0, 0x00),
        inactive_foreground_color=rgb(0x00, 0x30, 0x00),
    ),
    StylePreset.CALCULATOR: DisplayStyle(
        background_color=rgb(0xC5, 0xCB, 0xB6),
        active_foreground_color=rgb(0x00, 0x00, 0x00),
        inactive_foreground_color=rgb(0xB9, 0xBE, 0xAB),
    ),
    StylePreset.NINTENDO_GAME_BOY: DisplayStyle(
        background_color=rgb(0x9B, 0xBC, 0x0F),
        active_foreground_color=rgb(0x0F, 0x38, 0x0F),
        inactive_foreground_color=rgb(0x8B, 0xAC, 0x0F),
    ),
    StylePreset.KNIGHT_RIDER: DisplayStyle(
        background_color=rgb(0x10, 0x00, 0x00),
        active_foreground_color=rgb(0xC8, 0x00, 0x00),
        inactive_foreground_color=rgb(0x20, 0x00, 0x00),
    ),
    StylePreset.BLUE_NEGATIVE: DisplayStyle(
        background_color=rgb(0x00, 0x00, 0xFF),
        active_foreground_color=rgb(0xE0, 0xFF, 0xFF),
        inactive_foreground_color=rgb(0x28, 0x28, 0xFF),
    ),
    StylePreset.AMBER: DisplayStyle(
        background_color=rgb(0x1D, 0x12, 0x07),
        active_foreground_color=rgb(0xFF, 0x9A, 0x21),
        inactive_foreground_color=rgb(0x33, 0x20, 0x00),
    ),
    StylePreset.LIGHT_BLUE: DisplayStyle(
        background_color=rgb(0x0F, 0xB0, 0xBC),
        active_foreground_color=black_alpha(223),
        inactive_foreground_color=black_alpha(60),
    ),
    StylePreset.DELOREAN_RED: DisplayStyle(
        background_color=rgb(0x12, 0x07, 0x0A),
        active_foreground_color=rgb(0xFF, 0x59, 0x13),
        inactive_foreground_color=rgb(0x48, 0x0A, 0x0B),
    ),
    StylePreset.DELOREAN_GREEN: DisplayStyle(
        background_color=rgb(0x05, 0x0A, 0x0A),
        active_foreground_color=rgb(0x4A, 0xF5, 0x0F),
        inactive_foreground_color=rgb(0x07, 0x29, 0x0F),
    ),
    StylePreset.DELOREAN_AMBER: DisplayStyle(
        background_color=rgb(0x08, 0x08, 0x0B),
        active_foreground_color=rgb(0xF2, 0xC4, 0x21),
        inactive_foreground_color=rgb(0x51, 0x2C, 0x0F),
    ),
    StylePreset.YAMAHA_MU2000: DisplayStyle(
        background_color=rgb(0x8C, 0xD7, 0x01),
        active_foreground_color=rgb(0x04, 0x4A, 0x00),
        inactive_foreground_color=rgb(0x7B, 0xCE, 0x02),
    ),
}
