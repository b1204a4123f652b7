"""Exception hierarchy for osmbounds.

Every error carries the process exit code the CLI reports for it.
"""
from typing import Optional


class BoundsError(Exception):
    """Base class for all osmbounds errors."""

    exit_code = 1


class BoundsIOError(BoundsError):
    """An input or output file could not be opened, read or written."""

    exit_code = 3

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BoundsPermissionError(BoundsIOError):
    """Access to an input or output file was denied."""

    exit_code = 4


class DecodeError(BoundsError):
    """The OSM data stream is structurally invalid."""

    exit_code = 5

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class SerializationError(BoundsError):
    """An OSM object could not be converted to its output representation."""

    exit_code = 6
