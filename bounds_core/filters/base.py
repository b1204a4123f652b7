"""Base filter classes and data structures."""
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional


@dataclass(frozen=True)
class TagRule:
    """A single tag condition.

    With ``values`` set, the tag must be present and its value one of them.
    Without ``values``, the tag must be present (and non-empty when
    ``non_empty`` is set). A missing tag never matches.
    """
    key: str
    values: Optional[FrozenSet[str]] = None
    non_empty: bool = False

    def matches(self, tags: Mapping[str, str]) -> bool:
        """Check if a tag mapping satisfies this rule.

        Args:
            tags: Element's tag dictionary

        Returns:
            True if the element matches this rule
        """
        value = tags.get(self.key)
        if value is None:
            return False

        if self.values is not None:
            return value in self.values
        if self.non_empty:
            return value != ''
        return True

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.values is not None:
            value_str = ','.join(sorted(self.values))
        else:
            value_str = '+' if self.non_empty else '*'
        return f"{self.key}={value_str}"
