"""
Segmented Display Preferences
Persists the demo window's display choices between runs
"""

import json
import os
from typing import Any, Dict, Optional

from segments import DisplayKind, MetricsPreset, StylePreset


class PreferencesManager:
    """Manages preference data and persistence"""

    def __init__(self, data_file: Optional[str] = None):
        # Default data file location
        if data_file is None:
            data_dir = os.path.join(os.path.expanduser("~"), ".segmented_display")
            data_file = os.path.join(data_dir, "preferences.json")

        self.data_file = data_file
        self.data = self._load_data()

    def _get_default_data(self) -> Dict:
        """Get default data structure"""
        return {
            "display_kind": DisplayKind.SEVEN_SEGMENT.value,
            "style_preset": StylePreset.DEFAULT.value,
            "metrics_preset": MetricsPreset.DEFAULT.value,
            "animation": "spinner_3",
            "digit_height": 48.0,
            "text": "12:34.5",
            "show_dots": True,
            "show_colons": True,
            "show_apostrophes": True,
        }

    def _load_data(self) -> Dict:
        """Load data from file or create default"""
        default_data = self._get_default_data()
        try:
            if os.path.exists(self.data_file):
                with open(self.data_file, 'r') as f:
                    data = json.load(f)

                if not isinstance(data, dict):
                    print(f"Ignoring malformed preferences in {self.data_file}")
                    return default_data

                # Ensure all required keys exist
                for key in default_data:
                    if key not in data:
                        data[key] = default_data[key]

                return data
            else:
                return default_data
        except (json.JSONDecodeError, IOError) as e:
            print(f"Error loading preferences: {e}")
            return default_data

    def _save_data(self):
        """Save data to file"""
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.data_file)), exist_ok=True)
            with open(self.data_file, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            print(f"Error saving preferences: {e}")

    def get_preference(self, key: str, default: Any = None) -> Any:
        """Get a preference value"""
        return self.data.get(key, default)

    def set_preference(self, key: str, value: Any):
        """Set a preference value and save it"""
        self.data[key] = value
        self._save_data()

    def digit_height(self) -> float:
        """Saved digit height, falling back to the default height"""
        default = self._get_default_data()["digit_height"]
        try:
            height = float(self.data["digit_height"])
        except (TypeError, ValueError) as e:
            print(f"Ignoring saved digit height: {e}")
            return default
        if not height > 0:
            print(f"Ignoring saved digit height: {height} is not positive")
            return default
        return height

    def display_kind(self) -> DisplayKind:
        """Saved display kind, falling back to seven segments"""
        try:
            return DisplayKind.from_name(self.data["display_kind"])
        except ValueError as e:
            print(f"Ignoring saved display kind: {e}")
            return DisplayKind.SEVEN_SEGMENT

    def style_preset(self) -> StylePreset:
        """Saved style preset, falling back to the default style"""
        try:
            return StylePreset.from_name(self.data["style_preset"])
        except ValueError as e:
            print(f"Ignoring saved style preset: {e}")
            return StylePreset.DEFAULT

    def metrics_preset(self) -> MetricsPreset:
        """Saved metrics preset, falling back to the default metrics"""
        try:
            return MetricsPreset.from_name(self.data["metrics_preset"])
        except ValueError as e:
            print(f"Ignoring saved metrics preset: {e}")
            return MetricsPreset.DEFAULT

    def reset(self):
        """Forget every saved choice"""
        self.data = self._get_default_data()
        self._save_data()
