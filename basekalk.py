#!/usr/bin/env python3
"""
Basekalk - arbitrary-base calculator

Thin wrapper that delegates all functionality to the basekalk_pkg package.

Usage:
    python basekalk.py                        # Interactive REPL
    python basekalk.py -i 16 -e "ff+1"        # Evaluate expression
    python basekalk.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Basekalk.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from basekalk_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
