"""Main entry point for running basekalk_pkg as a module.

This allows running Basekalk with:
    python -m basekalk_pkg
    python -m basekalk_pkg --health-check
    python -m basekalk_pkg -i 16 -e "ff+1"

This is equivalent to running:
    python -m basekalk_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
