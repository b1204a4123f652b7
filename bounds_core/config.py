"""Runtime configuration for relation selection and reporting."""
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Optional

from bounds_core.filters.semantic_categories import (
    CANDIDATE_ADMIN_LEVELS, TARGET_BOUNDARY_TYPES
)


@dataclass(frozen=True)
class BoundaryConfig:
    """Immutable settings injected into predicates, loader and reports.

    Attributes:
        admin_levels: admin_level values a candidate relation may carry
        boundary_types: boundary values a target relation may carry
        absent_label: Report label for relations without a boundary tag
        max_passes: Upper bound on loader passes (None resolves fully)
    """
    admin_levels: FrozenSet[str] = CANDIDATE_ADMIN_LEVELS
    boundary_types: FrozenSet[str] = TARGET_BOUNDARY_TYPES
    absent_label: str = '(none)'
    max_passes: Optional[int] = None

    def __post_init__(self):
        # Accept any iterable of strings but always store frozensets
        object.__setattr__(self, 'admin_levels', _as_frozenset(self.admin_levels))
        object.__setattr__(self, 'boundary_types', _as_frozenset(self.boundary_types))
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {self.max_passes}")

    def with_overrides(self, **changes) -> 'BoundaryConfig':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def _as_frozenset(values: Iterable[str]) -> FrozenSet[str]:
    if isinstance(values, str):
        return frozenset({values})
    return frozenset(values)


DEFAULT_CONFIG = BoundaryConfig()
