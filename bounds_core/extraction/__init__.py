"""Aggregations over closure results."""

from bounds_core.extraction.boundary_stats import tally_boundaries, summarize

__all__ = ['tally_boundaries', 'summarize']
