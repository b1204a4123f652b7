"""Relation predicates for administrative boundary selection.

Two levels are provided. A *candidate* relation is a named relation with a
supported admin_level; a *target* relation is a candidate whose boundary
tag is one of the accepted boundary types. Every target is a candidate.
"""
from typing import TYPE_CHECKING, FrozenSet, Iterable, Tuple

from bounds_core.filters.base import TagRule
from bounds_core.filters.semantic_categories import (
    CANDIDATE_ADMIN_LEVELS, TARGET_BOUNDARY_TYPES
)
from bounds_core.models.elements import ElementType, OSMObject, OSMRelation

if TYPE_CHECKING:
    from bounds_core.config import BoundaryConfig


class RelationPredicates:
    """Candidate and target predicates built from injected allowlists."""

    # Only relations can satisfy either predicate
    element_types: FrozenSet[ElementType] = frozenset({ElementType.RELATION})

    def __init__(self, admin_levels: Iterable[str] = CANDIDATE_ADMIN_LEVELS,
                 boundary_types: Iterable[str] = TARGET_BOUNDARY_TYPES):
        """Initialize predicates.

        Args:
            admin_levels: Accepted admin_level values
            boundary_types: Accepted boundary values
        """
        self.candidate_rules: Tuple[TagRule, ...] = (
            TagRule('name', non_empty=True),
            TagRule('admin_level', frozenset(admin_levels)),
        )
        self.boundary_rule = TagRule('boundary', frozenset(boundary_types))

    @classmethod
    def from_config(cls, config: 'BoundaryConfig') -> 'RelationPredicates':
        return cls(config.admin_levels, config.boundary_types)

    @property
    def admin_levels(self) -> FrozenSet[str]:
        return self.candidate_rules[1].values

    @property
    def boundary_types(self) -> FrozenSet[str]:
        return self.boundary_rule.values

    def is_candidate(self, obj: OSMObject) -> bool:
        """Named relation with an accepted admin_level."""
        if not isinstance(obj, OSMRelation):
            return False
        return all(rule.matches(obj.tags) for rule in self.candidate_rules)

    def is_target(self, obj: OSMObject) -> bool:
        """Candidate relation with an accepted boundary type."""
        return self.is_candidate(obj) and self.boundary_rule.matches(obj.tags)

    def __repr__(self) -> str:
        rules = ', '.join(str(r) for r in self.candidate_rules + (self.boundary_rule,))
        return f"RelationPredicates({rules})"


_DEFAULT_PREDICATES = RelationPredicates()


def is_candidate_relation(obj: OSMObject) -> bool:
    """Candidate predicate with the default allowlists."""
    return _DEFAULT_PREDICATES.is_candidate(obj)


def is_target_relation(obj: OSMObject) -> bool:
    """Target predicate with the default allowlists."""
    return _DEFAULT_PREDICATES.is_target(obj)
