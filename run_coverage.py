#!/usr/bin/env python3
"""
Coverage test runner for the segmented display project
Runs the test suite with coverage over both packages and reports the result
"""

import argparse
import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage(open_report: bool = False, extra_args=None) -> bool:
    """Run tests with coverage and generate HTML report"""
    print("🧪 Running tests with coverage...")
    print("=" * 50)

    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--cov=segments",
        "--cov=ui",
        "--cov-report=term-missing",
        "--cov-report=html:htmlcov",
        "-v",
    ] + list(extra_args or [])

    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        print("❌ Error: Python or pytest not found")
        return False

    if result.returncode == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Some tests failed (exit code: {result.returncode})")

    html_report = Path("htmlcov/index.html")
    if html_report.exists():
        print(f"\n📊 Coverage report generated: {html_report.absolute()}")
        if open_report:
            webbrowser.open(html_report.absolute().as_uri())
            print("🌐 Coverage report opened in browser")

    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Run the segmented display tests with coverage")
    parser.add_argument("--open", action="store_true",
                        help="Open the HTML report in a browser afterwards")
    parser.add_argument("pytest_args", nargs="*",
                        help="Extra arguments passed through to pytest")
    args = parser.parse_args()

    success = run_coverage(open_report=args.open, extra_args=args.pytest_args)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
