"""Read-only, ID-ordered collection produced by a dependency closure."""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, Optional

from bounds_core.models.elements import (
    ElementType, ObjectId, OSMNode, OSMObject, OSMRelation, OSMWay
)


@dataclass(frozen=True)
class ClosureStats:
    """Bookkeeping for one closure load."""
    passes: int = 0
    roots: int = 0
    objects: int = 0
    dangling: int = 0
    truncated: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            'passes': self.passes,
            'roots': self.roots,
            'objects': self.objects,
            'dangling': self.dangling,
            'truncated': self.truncated,
        }


class ResultSet(Mapping):
    """Mapping of ObjectId to element, iterated in ObjectId order.

    Holds the selected root relations and every object reachable from them
    that was present in the source. Built once by the loader and never
    modified afterwards.
    """

    def __init__(self, objects: Dict[ObjectId, OSMObject],
                 roots: Iterable[ObjectId] = (),
                 dangling: Iterable[ObjectId] = (),
                 stats: Optional[ClosureStats] = None):
        self._objects: Dict[ObjectId, OSMObject] = {
            key: objects[key] for key in sorted(objects)
        }
        self.roots: FrozenSet[ObjectId] = frozenset(roots)
        self.dangling: FrozenSet[ObjectId] = frozenset(dangling)
        self.stats = stats or ClosureStats(
            roots=len(self.roots),
            objects=len(self._objects),
            dangling=len(self.dangling),
        )

    def __getitem__(self, key: ObjectId) -> OSMObject:
        return self._objects[key]

    def __iter__(self) -> Iterator[ObjectId]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return (f"ResultSet(objects={len(self)}, roots={len(self.roots)}, "
                f"dangling={len(self.dangling)})")

    def nodes(self) -> Iterator[OSMNode]:
        return (obj for obj in self._objects.values() if isinstance(obj, OSMNode))

    def ways(self) -> Iterator[OSMWay]:
        return (obj for obj in self._objects.values() if isinstance(obj, OSMWay))

    def relations(self) -> Iterator[OSMRelation]:
        return (obj for obj in self._objects.values() if isinstance(obj, OSMRelation))

    def count_by_type(self) -> Dict[str, int]:
        """Count contained objects per element type label."""
        counts = {element_type.label: 0 for element_type in ElementType}
        for key in self._objects:
            counts[key.type.label] += 1
        return counts
