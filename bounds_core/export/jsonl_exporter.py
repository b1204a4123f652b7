"""Newline-delimited JSON export of boundary relations."""
import json
from typing import Any, Dict, Optional, TextIO

from loguru import logger

from bounds_core.errors import BoundsIOError, SerializationError
from bounds_core.export.base import BaseExporter, sink_name
from bounds_core.filters.predicates import RelationPredicates
from bounds_core.models.elements import OSMObject


def serialize(obj: OSMObject) -> str:
    """Serialize one element to a single line of JSON.

    Raises:
        SerializationError: If the element cannot be JSON encoded
    """
    try:
        record: Dict[str, Any] = obj.to_record()
        return json.dumps(record, ensure_ascii=False)
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Cannot serialize {obj!r}: {e}") from e


class JSONLinesExporter(BaseExporter):
    """Export target relations as one JSON document per line."""

    def __init__(self, predicates: Optional[RelationPredicates] = None):
        """Initialize JSON lines exporter.

        Args:
            predicates: Predicates supplying the target test
        """
        self.predicates = predicates or RelationPredicates()

    def get_format_name(self) -> str:
        return 'jsonl'

    def export(self, result_set, sink: TextIO) -> int:
        """Write every target relation of ``result_set`` to ``sink``.

        Lines already written stay on the sink if a later write fails.

        Args:
            result_set: ResultSet produced by the closure loader
            sink: Writable text stream

        Returns:
            Number of relations written

        Raises:
            BoundsIOError: If writing to the sink fails
            SerializationError: If a relation cannot be encoded
        """
        written = 0
        try:
            for obj in result_set.values():
                if not self.predicates.is_target(obj):
                    continue
                sink.write(serialize(obj))
                sink.write('\n')
                written += 1
        except OSError as e:
            name = sink_name(sink)
            raise BoundsIOError(f"Cannot write {name or 'output'}: {e}", name) from e

        self.flush(sink)
        logger.info(f"Wrote {written} relations")
        return written


def emit(result_set, sink: TextIO,
         predicates: Optional[RelationPredicates] = None) -> int:
    """Functional shortcut for ``JSONLinesExporter(predicates).export``."""
    return JSONLinesExporter(predicates).export(result_set, sink)
