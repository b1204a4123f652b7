"""Boundary tag statistics data model."""
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class BoundaryTally:
    """Relation counts keyed by the value of their ``boundary`` tag.

    Relations without the tag are counted under the ``None`` key.
    """
    counts: Dict[Optional[str], int] = field(default_factory=lambda: defaultdict(int))

    def add(self, value: Optional[str], count: int = 1) -> None:
        """Record ``count`` more relations with the given boundary value."""
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")
        self.counts[value] += count

    @property
    def total(self) -> int:
        """Total number of relations tallied."""
        return sum(self.counts.values())

    @property
    def absent(self) -> int:
        """Number of relations without a boundary tag."""
        return self.counts.get(None, 0)

    def ranked(self) -> List[Tuple[Optional[str], int]]:
        """Values sorted by count descending.

        Ties are ordered lexicographically by value, with the absent
        bucket after every named value.
        """
        return sorted(
            self.counts.items(),
            key=lambda item: (-item[1], item[0] is None, item[0] or '')
        )

    def to_dict(self, absent_label: str = '(none)') -> Dict[str, Any]:
        """Convert to a dictionary representation.

        Args:
            absent_label: Key used for relations without a boundary tag

        Returns:
            Dict with ranked values and the total
        """
        return {
            'boundaries': [
                {'value': absent_label if value is None else value, 'count': count}
                for value, count in self.ranked()
            ],
            'total': self.total,
        }
