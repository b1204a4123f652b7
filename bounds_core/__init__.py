"""Bounds Core - administrative boundary extraction from OSM extracts.

This package selects boundary relations from an OSM PBF file, resolves
everything they reference, and writes them as JSON lines or as a boundary
type histogram.
"""

__version__ = "1.0.0"

# Errors
from bounds_core.errors import (
    BoundsError, BoundsIOError, BoundsPermissionError, DecodeError, SerializationError
)

# Data models
from bounds_core.models.elements import (
    ElementType, ObjectId, RelationMember, OSMNode, OSMWay, OSMRelation
)
from bounds_core.models.result_set import ResultSet, ClosureStats
from bounds_core.models.statistics import BoundaryTally

# Configuration and predicates
from bounds_core.config import BoundaryConfig, DEFAULT_CONFIG
from bounds_core.filters.predicates import (
    RelationPredicates, is_candidate_relation, is_target_relation
)

# Loading
from bounds_core.parsing.pbf_source import PBFObjectSource
from bounds_core.parsing.closure import DependencyClosureLoader, load_closure

# Aggregation and export
from bounds_core.extraction.boundary_stats import summarize, tally_boundaries
from bounds_core.export.jsonl_exporter import JSONLinesExporter, emit
from bounds_core.export.stats_exporter import StatsReportExporter

# Main API
from bounds_core.api import OSMBounds

__all__ = [
    # Version
    '__version__',
    # Errors
    'BoundsError', 'BoundsIOError', 'BoundsPermissionError', 'DecodeError',
    'SerializationError',
    # Models
    'ElementType', 'ObjectId', 'RelationMember', 'OSMNode', 'OSMWay', 'OSMRelation',
    'ResultSet', 'ClosureStats', 'BoundaryTally',
    # Configuration and predicates
    'BoundaryConfig', 'DEFAULT_CONFIG',
    'RelationPredicates', 'is_candidate_relation', 'is_target_relation',
    # Loading
    'PBFObjectSource', 'DependencyClosureLoader', 'load_closure',
    # Aggregation and export
    'summarize', 'tally_boundaries', 'JSONLinesExporter', 'emit', 'StatsReportExporter',
    # API
    'OSMBounds',
]
