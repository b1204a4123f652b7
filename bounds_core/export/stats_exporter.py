"""Plain text boundary statistics report."""
from typing import List, Optional, TextIO, Tuple

from loguru import logger

from bounds_core.errors import BoundsIOError
from bounds_core.export.base import BaseExporter, sink_name
from bounds_core.extraction.boundary_stats import summarize
from bounds_core.filters.predicates import RelationPredicates


def format_summary(summary: List[Tuple[Optional[str], int]],
                   absent_label: str = '(none)') -> List[str]:
    """Render ranked ``(value, count)`` pairs as ``<value> <count>`` lines."""
    return [
        f"{absent_label if value is None else value} {count}"
        for value, count in summary
    ]


class StatsReportExporter(BaseExporter):
    """Export boundary value counts, most frequent first."""

    def __init__(self, predicates: Optional[RelationPredicates] = None,
                 absent_label: str = '(none)'):
        """Initialize stats exporter.

        Args:
            predicates: Predicates supplying the candidate test
            absent_label: Label for relations without a boundary tag
        """
        self.predicates = predicates or RelationPredicates()
        self.absent_label = absent_label

    def get_format_name(self) -> str:
        return 'stats'

    def export(self, result_set, sink: TextIO) -> int:
        """Write the boundary report for ``result_set`` to ``sink``.

        Returns:
            Number of report lines written

        Raises:
            BoundsIOError: If writing to the sink fails
        """
        lines = format_summary(summarize(result_set, self.predicates), self.absent_label)
        try:
            for line in lines:
                sink.write(line)
                sink.write('\n')
        except OSError as e:
            name = sink_name(sink)
            raise BoundsIOError(f"Cannot write {name or 'output'}: {e}", name) from e

        self.flush(sink)
        logger.debug(f"Wrote {len(lines)} boundary types")
        return len(lines)
