"""CLI main entry point."""
import argparse
import sys
from typing import Optional

from loguru import logger

from bounds_core import __version__
from bounds_core.errors import BoundsError
from bounds_core.filters.semantic_categories import (
    CANDIDATE_ADMIN_LEVELS, TARGET_BOUNDARY_TYPES, describe_admin_levels
)

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>"


def setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Send log output to stderr at the requested level.

    Args:
        verbose: Verbosity count; any value above zero enables DEBUG
        quiet: Only report warnings and errors
    """
    logger.remove()
    if quiet:
        level = "WARNING"
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser.

    Returns:
        Configured ArgumentParser
    """
    admin_levels = describe_admin_levels(CANDIDATE_ADMIN_LEVELS)
    boundary_types = ', '.join(sorted(TARGET_BOUNDARY_TYPES))

    parser = argparse.ArgumentParser(
        prog='osmbounds',
        description='Extract administrative boundary relations from OSM PBF extracts',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f'''
Selected admin levels: {admin_levels}
Selected boundary types: {boundary_types}

Examples:
  osmbounds --in-file region.osm.pbf > boundaries.jsonl
  osmbounds -i region.osm.pbf -o boundaries.jsonl
  osmbounds -i region.osm.pbf stats
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'osmbounds {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Only log warnings and errors')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    parser.add_argument('-i', '--in-file', required=True,
                        help='PBF file to read')
    parser.add_argument('-o', '--out-file', default=None,
                        help='Path to output file. If unspecified output is written to stdout')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Without a command, boundary '
                                       'relations are written as JSON lines')

    from bounds_core.cli.commands.stats import setup_parser as setup_stats
    setup_stats(subparsers)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    setup_logging(parsed_args.verbose, parsed_args.quiet)

    try:
        if parsed_args.command == 'stats':
            from bounds_core.cli.commands.stats import run as cmd_stats
            return cmd_stats(parsed_args)
        else:
            from bounds_core.cli.commands.extract import run as cmd_extract
            return cmd_extract(parsed_args)

    except BoundsError as e:
        print(f"osmbounds: error: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"osmbounds: error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
