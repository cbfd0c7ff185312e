"""
Entry point for running drawstyle as a module.

Usage:
    python -m drawstyle name Helvetica --size 18 --bold
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
