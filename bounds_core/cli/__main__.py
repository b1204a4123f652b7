"""Allow running bounds_core.cli as a module.

Usage:
    python -m bounds_core.cli --help
    python -m bounds_core.cli --in-file region.osm.pbf
"""

import sys
from bounds_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
