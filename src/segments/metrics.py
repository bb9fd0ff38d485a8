"""
Segmented Display - Metrics
Size-relative digit proportions, named presets and their resolution to absolute units
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class DisplayMetrics:
    """
    Digit proportions relative to the digit height (or width, where noted).

    Values are not validated: negative thickness or a zero digit ratio give
    undefined geometry. Thickness and spacing are expected in [0, 0.5).
    """
    segment_spacing: float = 0.01
    segment_thickness: float = 0.1

    digit_median: float = -0.05      # relative to half the digit height
    digit_ratio: float = 0.6         # digit width / digit height
    digit_shearing: float = 0.1      # relative to digit width
    digit_spacing: float = 0.35      # relative to digit width

    margin_horizontal: float = 0.3   # relative to digit width
    margin_vertical: float = 0.1

    colon_separation: float = 0.25   # relative to half the digit height

    def with_changes(self, **changes) -> 'DisplayMetrics':
        """Copy with some ratios replaced"""
        return replace(self, **changes)


class MetricsPreset(Enum):
    """Named metrics bundles"""
    DEFAULT = "Default"
    KNIGHT_RIDER = "Knight Rider"

    @property
    def display_name(self) -> str:
        return self.value

    def metrics(self) -> DisplayMetrics:
        """The preset's values; a fresh value, not a live binding"""
        return _METRICS_PRESETS[self]

    @classmethod
    def from_name(cls, name: Union[str, 'MetricsPreset']) -> 'MetricsPreset':
        """Look up a preset by member name or display name, case-insensitively"""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for preset in cls:
            if key in (preset.name.lower(), preset.value.lower()):
                return preset
        raise ValueError(f"Invalid metrics preset: {name}. Must be one of {', '.join(p.name for p in cls)}.")


_METRICS_PRESETS = {
    MetricsPreset.DEFAULT: DisplayMetrics(),
    MetricsPreset.KNIGHT_RIDER: DisplayMetrics(
        segment_spacing=0.02,
        segment_thickness=0.12,
        digit_median=-0.05,
        digit_ratio=1.0,
        digit_shearing=0.1,
        digit_spacing=0.20,
        margin_horizontal=0.3,
        margin_vertical=0.1,
        colon_separation=0.25,
    ),
}


@dataclass(frozen=True)
class ResolvedMetrics:
    """Absolute dimensions for one digit height"""
    digit_height: float
    digit_width: float
    segment_thickness: float
    segment_spacing: float
    digit_shearing: float
    digit_spacing: float
    margin_horizontal: float
    margin_vertical: float
    digit_median: float
    colon_separation: float

    @property
    def digit_pitch(self) -> float:
        """Distance between the centers of neighbouring digits"""
        return self.digit_width + self.digit_spacing


def resolve_metrics(metrics: DisplayMetrics, digit_height: float) -> ResolvedMetrics:
    """Turn relative metrics into absolute units for `digit_height`"""
    digit_height = float(digit_height)
    digit_width = digit_height * metrics.digit_ratio
    half_height = digit_height / 2.0

    return ResolvedMetrics(
        digit_height=digit_height,
        digit_width=digit_width,
        segment_thickness=metrics.segment_thickness * digit_height,
        segment_spacing=metrics.segment_spacing * digit_height,
        digit_shearing=metrics.digit_shearing * digit_width,
        digit_spacing=metrics.digit_spacing * digit_width,
        margin_horizontal=metrics.margin_horizontal * digit_width,
        margin_vertical=metrics.margin_vertical * digit_height,
        digit_median=metrics.digit_median * half_height,
        colon_separation=metrics.colon_separation * half_height,
    )
