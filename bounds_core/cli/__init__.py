"""Command-line interface for osmbounds.

This module provides the CLI entry point for the osmbounds command.
It is used by setuptools to create the console script.

Usage:
    # After pip install:
    osmbounds --help
    osmbounds --in-file region.osm.pbf --out-file boundaries.jsonl
    osmbounds --in-file region.osm.pbf stats

    # Or via Python:
    python -m bounds_core.cli
"""

import sys
from bounds_core.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main() -> int:
    """Entry point for the osmbounds CLI.

    This function is called by the console script created by setuptools.
    It wraps the actual main function to ensure proper exit code handling.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        return _main() or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
