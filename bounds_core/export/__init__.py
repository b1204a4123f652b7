"""Export functionality for the supported output formats."""

from bounds_core.export.base import BaseExporter, open_sink
from bounds_core.export.jsonl_exporter import JSONLinesExporter, emit, serialize
from bounds_core.export.stats_exporter import StatsReportExporter, format_summary

__all__ = [
    'BaseExporter', 'open_sink',
    'JSONLinesExporter', 'emit', 'serialize',
    'StatsReportExporter', 'format_summary',
]
