# epgseg/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all epgseg exceptions."""


# ---- Validation / construction errors ----
class InvalidTimeSeries(CoreError):
    """Raised when a CombinedSeries is constructed with invalid inputs."""


class InvalidSegment(CoreError):
    """Raised when a Segment is constructed with invalid inputs."""


class InvalidConfigError(CoreError, ValueError):
    """Raised for a non-positive sampling rate, an unknown plot mode, etc."""


# ---- File system errors (also behave like FileNotFoundError) ----
class NotFoundError(CoreError, FileNotFoundError):
    """Raised when the seed file (or a segment file) does not exist."""


class NoMatchError(CoreError, FileNotFoundError):
    """Raised when no sibling file matches the base identifier and suffix."""


# ---- Decoding errors ----
class CorruptSegmentError(CoreError, ValueError):
    """Raised when a segment payload cannot be read as float32 samples."""


# ---- Lookup errors (also behave like KeyError for dict-like inputs) ----
class SchemaError(CoreError, KeyError):
    """Raised when plotting input lacks the `time` / `signal` fields."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""
