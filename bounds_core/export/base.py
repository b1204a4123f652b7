"""Base classes for export functionality.

Provides the BaseExporter abstract class for format-specific exporters and
``open_sink`` for acquiring the output stream.
"""
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from bounds_core.errors import BoundsIOError, BoundsPermissionError


@contextmanager
def open_sink(output_file: Optional[str] = None) -> Iterator[TextIO]:
    """Open the output stream, defaulting to stdout.

    Files are opened buffered and are flushed and closed on every exit
    path. stdout is flushed but left open.

    Args:
        output_file: Output file path, or None for stdout

    Yields:
        Writable text stream

    Raises:
        BoundsIOError: If the file cannot be created or the final flush fails
    """
    if output_file is None:
        try:
            yield sys.stdout
        finally:
            _flush(sys.stdout, None)
        return

    try:
        stream = open(output_file, 'w', encoding='utf-8')
    except PermissionError as e:
        raise BoundsPermissionError(f"Permission denied: {output_file}", output_file) from e
    except OSError as e:
        raise BoundsIOError(f"Cannot create {output_file}: {e}", output_file) from e

    try:
        yield stream
    finally:
        try:
            stream.close()
        except OSError as e:
            raise BoundsIOError(f"Cannot write {output_file}: {e}", output_file) from e


def _flush(stream: TextIO, path: Optional[str]) -> None:
    try:
        stream.flush()
    except OSError as e:
        raise BoundsIOError(f"Cannot write {path or 'stdout'}: {e}", path) from e


def sink_name(stream: TextIO) -> Optional[str]:
    """Best-effort file name of a stream, for error messages."""
    name = getattr(stream, 'name', None)
    return name if isinstance(name, str) else None


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, result_set, sink: TextIO) -> int:
        """Write data to an open text stream.

        Args:
            result_set: ResultSet produced by the closure loader
            sink: Writable text stream

        Returns:
            Number of lines written
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'jsonl', 'stats').

        Returns:
            Format name string
        """
        pass

    def flush(self, sink: TextIO) -> None:
        """Flush ``sink``, reporting failures as BoundsIOError."""
        _flush(sink, sink_name(sink))
