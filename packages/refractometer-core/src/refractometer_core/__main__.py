"""
Command-line entry point.

Run with: python -m refractometer_core
"""

import sys

from refractometer_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
