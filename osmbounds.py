#!/usr/bin/env python3
"""
osmbounds - Administrative boundary extractor for OpenStreetMap PBF extracts

This is the CLI entry point. The implementation is in the bounds_core package.

Usage:
    osmbounds --in-file region.osm.pbf > boundaries.jsonl
    osmbounds --in-file region.osm.pbf --out-file boundaries.jsonl
    osmbounds --in-file region.osm.pbf stats

For more information, run: osmbounds --help
"""
import sys

from bounds_core.cli import main


if __name__ == "__main__":
    sys.exit(main())
