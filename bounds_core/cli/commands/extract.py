"""Default command - write boundary relations as JSON lines."""
from bounds_core.api import OSMBounds


def run(args, config=None) -> int:
    """Execute the extract command.

    Args:
        args: Parsed arguments with ``in_file`` and ``out_file``
        config: Optional BoundaryConfig override

    Returns:
        Exit code
    """
    OSMBounds(config).extract_to_jsonl(args.in_file, args.out_file)
    return 0
