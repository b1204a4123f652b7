"""Boundary type aggregation over a closure result."""
from typing import List, Mapping, Optional, Tuple

from bounds_core.filters.predicates import RelationPredicates
from bounds_core.models.elements import ObjectId, OSMObject
from bounds_core.models.statistics import BoundaryTally


def tally_boundaries(result_set: Mapping[ObjectId, OSMObject],
                     predicates: Optional[RelationPredicates] = None) -> BoundaryTally:
    """Count candidate relations per ``boundary`` tag value.

    Only candidate relations are counted, whichever predicate built the
    closure. Relations without a boundary tag go to the ``None`` bucket.

    Args:
        result_set: Closure result (any ObjectId to element mapping)
        predicates: Predicates supplying the candidate test

    Returns:
        BoundaryTally with one entry per observed value
    """
    predicates = predicates or RelationPredicates()
    tally = BoundaryTally()

    for obj in result_set.values():
        if predicates.is_candidate(obj):
            tally.add(obj.tags.get('boundary'))

    return tally


def summarize(result_set: Mapping[ObjectId, OSMObject],
              predicates: Optional[RelationPredicates] = None
              ) -> List[Tuple[Optional[str], int]]:
    """Ranked ``(boundary value, count)`` pairs, most frequent first."""
    return tally_boundaries(result_set, predicates).ranked()
