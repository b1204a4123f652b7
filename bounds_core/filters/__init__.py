"""Tag rules and relation predicates for boundary selection."""

from bounds_core.filters.base import TagRule
from bounds_core.filters.predicates import (
    RelationPredicates, is_candidate_relation, is_target_relation
)
from bounds_core.filters.semantic_categories import (
    ADMIN_LEVEL_NAMES, CANDIDATE_ADMIN_LEVELS, TARGET_BOUNDARY_TYPES,
    describe_admin_levels
)

__all__ = [
    'TagRule', 'RelationPredicates', 'is_candidate_relation', 'is_target_relation',
    'ADMIN_LEVEL_NAMES', 'CANDIDATE_ADMIN_LEVELS', 'TARGET_BOUNDARY_TYPES',
    'describe_admin_levels',
]
