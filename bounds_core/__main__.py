"""Allow running bounds_core as a module.

Usage:
    python -m bounds_core --help
    python -m bounds_core --in-file region.osm.pbf
    python -m bounds_core --in-file region.osm.pbf stats
"""

import sys
from bounds_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
