"""Stats command - count boundary relations by boundary type."""
from bounds_core.api import OSMBounds


def setup_parser(subparsers):
    """Setup the stats subcommand parser."""
    parser = subparsers.add_parser(
        'stats',
        help='Count boundary relations per boundary type',
        description='Write one "<boundary> <count>" line per boundary tag value, '
                    'most frequent first. Relations without a boundary tag are '
                    'counted as "(none)".'
    )
    parser.set_defaults(func=run)
    return parser


def run(args, config=None) -> int:
    """Execute the stats command.

    Args:
        args: Parsed arguments with ``in_file`` and ``out_file``
        config: Optional BoundaryConfig override

    Returns:
        Exit code
    """
    OSMBounds(config).extract_stats(args.in_file, args.out_file)
    return 0
