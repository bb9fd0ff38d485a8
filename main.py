"""
Segmented Display - Main Entry Point
Demo window for the seven, nine and sixteen segment display engine
"""

import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ui.gui import SegmentedDisplayGUI


def main():
    """Main entry point for the segmented display demo"""
    try:
        # Create and run the demo
        demo = SegmentedDisplayGUI()
        demo.run()
    except KeyboardInterrupt:
        print("\nDemo interrupted by user")
        sys.exit(0)
    except Exception as e:
        print(f"Error running segmented display demo: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
