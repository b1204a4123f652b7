"""CLI command implementations."""

from bounds_core.cli.commands.extract import run as cmd_extract
from bounds_core.cli.commands.stats import run as cmd_stats

__all__ = ['cmd_extract', 'cmd_stats']
