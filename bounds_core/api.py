"""Main osmbounds API.

Provides the high-level OSMBounds class tying together the object source,
the closure loader and the exporters.
"""
import time
from typing import Any, Dict, List, Optional, TextIO, Tuple

from loguru import logger

from bounds_core.config import BoundaryConfig, DEFAULT_CONFIG
from bounds_core.export.base import open_sink
from bounds_core.export.jsonl_exporter import JSONLinesExporter
from bounds_core.export.stats_exporter import StatsReportExporter
from bounds_core.extraction.boundary_stats import summarize
from bounds_core.filters.predicates import RelationPredicates
from bounds_core.models.result_set import ResultSet
from bounds_core.parsing.closure import DependencyClosureLoader, Predicate
from bounds_core.parsing.pbf_source import PBFObjectSource


class OSMBounds:
    """Administrative boundary extraction from OSM extracts."""

    def __init__(self, config: Optional[BoundaryConfig] = None):
        """Initialize OSMBounds.

        Args:
            config: Allowlists and loader settings (defaults to DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        self.predicates = RelationPredicates.from_config(self.config)
        self.loader = DependencyClosureLoader(
            root_types=self.predicates.element_types,
            max_passes=self.config.max_passes,
        )

        # Processing statistics
        self.stats: Dict[str, Any] = {
            'files_processed': 0,
            'total_processing_time': 0.0,
            'last_closure': None,
        }

    def load(self, osm_file_path, predicate: Predicate) -> ResultSet:
        """Load the dependency closure of ``predicate`` from a file.

        Args:
            osm_file_path: Path to an OSM PBF file
            predicate: Selects the root objects

        Returns:
            ResultSet with roots and all resolvable dependencies
        """
        start_time = time.time()
        source = PBFObjectSource(osm_file_path)
        source.check_readable()

        logger.info(f"Unpacking relations from {source.path}")
        result_set = self.loader.load(source, predicate)

        self.stats['files_processed'] += 1
        self.stats['total_processing_time'] += time.time() - start_time
        self.stats['last_closure'] = result_set.stats.to_dict()
        return result_set

    def load_candidates(self, osm_file_path) -> ResultSet:
        """Closure of all candidate relations."""
        return self.load(osm_file_path, self.predicates.is_candidate)

    def load_targets(self, osm_file_path) -> ResultSet:
        """Closure of target relations only."""
        return self.load(osm_file_path, self.predicates.is_target)

    def write_records(self, osm_file_path, sink: TextIO) -> int:
        """Write target relations of a file as JSON lines.

        Loads with the candidate predicate and emits targets, so member
        relations that are only candidates are still resolved.

        Returns:
            Number of relations written
        """
        result_set = self.load_candidates(osm_file_path)
        return JSONLinesExporter(self.predicates).export(result_set, sink)

    def extract_to_jsonl(self, osm_file_path, output_file: Optional[str] = None) -> int:
        """Write target relations to ``output_file`` (stdout if None).

        The input is fully loaded before the output file is created, so a
        failed load leaves no partial output behind.

        Returns:
            Number of relations written
        """
        result_set = self.load_candidates(osm_file_path)
        with open_sink(output_file) as sink:
            return JSONLinesExporter(self.predicates).export(result_set, sink)

    def boundary_summary(self, osm_file_path) -> List[Tuple[Optional[str], int]]:
        """Ranked boundary value counts for a file."""
        return summarize(self._load_for_stats(osm_file_path), self.predicates)

    def extract_stats(self, osm_file_path, output_file: Optional[str] = None) -> int:
        """Write the boundary report to ``output_file`` (stdout if None).

        Returns:
            Number of report lines written
        """
        result_set = self._load_for_stats(osm_file_path)
        exporter = StatsReportExporter(self.predicates, self.config.absent_label)
        with open_sink(output_file) as sink:
            return exporter.export(result_set, sink)

    def _load_for_stats(self, osm_file_path) -> ResultSet:
        # Stats load the target closure and count candidates inside it
        result_set = self.load_targets(osm_file_path)
        logger.info("Gathering some stats..")
        return result_set
