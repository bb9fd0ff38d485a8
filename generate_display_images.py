"""
Segmented Display - Image Generator
Renders sample rows for every display kind and style preset into assets/displays
"""

import argparse
import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from segments import DisplayKind, SegmentedDisplay, StylePreset, MetricsPreset
from segments.image import render_to_image

OUTPUT_DIR = os.path.join('assets', 'displays')

# Sample text per kind; the seven segment font has no real letters
SAMPLES = {
    DisplayKind.SEVEN_SEGMENT: "12:34.56",
    DisplayKind.NINE_SEGMENT: "0123456789",
    DisplayKind.SIXTEEN_SEGMENT: "HELLO'WORLD",
}


def generate_display_image(kind: DisplayKind, preset: StylePreset, output_dir: str,
                           digit_height: float = 48.0, scale: float = 2.0) -> str:
    """Render one sample row and return the written path"""
    metrics = MetricsPreset.KNIGHT_RIDER if preset == StylePreset.KNIGHT_RIDER else MetricsPreset.DEFAULT
    display = (SegmentedDisplay(kind)
               .digit_height(digit_height)
               .style_preset(preset)
               .metrics_preset(metrics)
               .push_string(SAMPLES[kind]))

    filename = f"{kind.value}_{preset.name.lower()}.png"
    path = os.path.join(output_dir, filename)
    render_to_image(display, scale=scale).save(path)
    return path


def generate_all_display_images(output_dir: str = OUTPUT_DIR, digit_height: float = 48.0, scale: float = 2.0):
    """Generate images for every kind in every style preset"""
    # Create output directory if it doesn't exist
    os.makedirs(output_dir, exist_ok=True)

    count = 0
    for kind in DisplayKind:
        for preset in StylePreset:
            path = generate_display_image(kind, preset, output_dir, digit_height, scale)
            print(f"Generated display image: {os.path.basename(path)}")
            count += 1

    return count


def main():
    parser = argparse.ArgumentParser(description="Render sample segmented display images")
    parser.add_argument("--output", type=str, default=OUTPUT_DIR,
                        help=f"Output directory (default: {OUTPUT_DIR})")
    parser.add_argument("--height", type=float, default=48.0,
                        help="Digit height in pixels before scaling (default: 48)")
    parser.add_argument("--scale", type=float, default=2.0,
                        help="Supersampling factor (default: 2)")
    args = parser.parse_args()

    try:
        count = generate_all_display_images(args.output, args.height, args.scale)
    except OSError as e:
        print(f"❌ Error writing images: {e}")
        sys.exit(1)

    print(f"✅ All {count} display images generated in {args.output}")


if __name__ == "__main__":
    main()
