"""Dependency-closing loader.

Selects root objects with a predicate and pulls in everything they
reference, transitively, by re-reading the source. A relation references
its members by ID only, and members may appear anywhere in the stream, so
each pass collects the objects requested so far and queues their own
references for the next pass. Loading stops once a pass queues nothing new.

IDs that are still pending when loading stops never appeared in the source
(typical at the edges of a clipped extract) and are reported as dangling
rather than treated as errors.
"""
import time
from typing import Callable, Dict, Iterable, Optional, Set

from loguru import logger

from bounds_core.models.elements import (
    ElementType, ObjectId, OSMObject, dependencies
)
from bounds_core.models.result_set import ClosureStats, ResultSet

Predicate = Callable[[OSMObject], bool]


class _ClosureState:
    """Mutable bookkeeping for a single load."""

    def __init__(self):
        self.resolved: Dict[ObjectId, OSMObject] = {}
        self.pending: Set[ObjectId] = set()
        self.roots: Set[ObjectId] = set()
        self.queued_this_pass = 0

    def insert(self, obj: OSMObject) -> None:
        object_id = obj.object_id
        self.pending.discard(object_id)
        if object_id in self.resolved:
            # First write wins
            return
        self.resolved[object_id] = obj

        for dep in dependencies(obj):
            if dep not in self.resolved and dep not in self.pending:
                self.pending.add(dep)
                self.queued_this_pass += 1


class DependencyClosureLoader:
    """Builds a ResultSet of predicate matches plus their dependencies."""

    def __init__(self, root_types: Optional[Iterable[ElementType]] = None,
                 max_passes: Optional[int] = None):
        """Initialize loader.

        Args:
            root_types: Element types the predicate can match. Objects of
                other types are only decoded when something depends on
                them. None means every type is offered to the predicate.
            max_passes: Stop after this many passes even if references
                remain unresolved (None resolves fully)
        """
        self.root_types = frozenset(root_types) if root_types is not None else None
        self.max_passes = max_passes

    def load(self, source, predicate: Predicate) -> ResultSet:
        """Scan ``source`` and return the dependency closure of ``predicate``.

        Args:
            source: Object with ``scan(visit, wanted=None)``, e.g. PBFObjectSource
            predicate: Selects root objects

        Returns:
            ResultSet ordered by ObjectId

        Raises:
            BoundsIOError: If the source cannot be read
            DecodeError: If the source stream is invalid
        """
        start_time = time.time()
        state = _ClosureState()
        passes = 0
        truncated = False

        def first_pass_wanted(object_id: ObjectId) -> bool:
            return object_id.type in self.root_types or object_id in state.pending

        def first_pass_visit(obj: OSMObject) -> None:
            object_id = obj.object_id
            if predicate(obj):
                state.roots.add(object_id)
                state.insert(obj)
            elif object_id in state.pending:
                state.insert(obj)

        def later_pass_visit(obj: OSMObject) -> None:
            if obj.object_id in state.pending:
                state.insert(obj)

        while True:
            passes += 1
            state.queued_this_pass = 0

            if passes == 1:
                wanted = first_pass_wanted if self.root_types is not None else None
                source.scan(first_pass_visit, wanted)
            else:
                source.scan(later_pass_visit, state.pending.__contains__)

            logger.debug(
                f"Pass {passes}: {len(state.resolved)} objects resolved, "
                f"{len(state.pending)} pending"
            )

            if state.queued_this_pass == 0 or not state.pending:
                break
            if self.max_passes is not None and passes >= self.max_passes:
                truncated = True
                logger.warning(
                    f"Stopped after {passes} passes with {len(state.pending)} "
                    f"references unresolved"
                )
                break

        stats = ClosureStats(
            passes=passes,
            roots=len(state.roots),
            objects=len(state.resolved),
            dangling=len(state.pending),
            truncated=truncated,
        )
        logger.info(
            f"Closure: {stats.roots} roots, {stats.objects} objects, "
            f"{stats.dangling} dangling references in {stats.passes} passes "
            f"({time.time() - start_time:.2f}s)"
        )
        if state.pending:
            logger.debug(f"{len(state.pending)} referenced objects missing from source")

        return ResultSet(state.resolved, state.roots, state.pending, stats)


def load_closure(source, predicate: Predicate,
                 root_types: Optional[Iterable[ElementType]] = None,
                 max_passes: Optional[int] = None) -> ResultSet:
    """Functional shortcut for ``DependencyClosureLoader(...).load``."""
    loader = DependencyClosureLoader(root_types, max_passes)
    return loader.load(source, predicate)
