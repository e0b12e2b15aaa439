# epgseg/core/__init__.py
"""
Core domain objects for epgseg.

This module defines the format-agnostic data model:
- Segment: one decoded .D## file (float32 samples + raw header lines)
- CombinedSeries: the reconstructed, gap-free recording
- SegmentSpan / RecordingMeta: where each segment sits in the recording
- LoaderConfig / PlotConfig: validated configuration surface

The core layer is independent from I/O and plotting.
"""

from .timeseries import CombinedSeries
from .segment import Segment
from .metadata import SegmentSpan, RecordingMeta
from .config import (
    DEFAULT_SAMPLING_RATE,
    LoaderConfig,
    PlotConfig,
    PlotMode,
)
from .exceptions import (
    CoreError,
    InvalidTimeSeries,
    InvalidSegment,
    InvalidConfigError,
    NotFoundError,
    NoMatchError,
    CorruptSegmentError,
    SchemaError,
)


__all__ = [
    # time series
    "CombinedSeries",

    # domain objects
    "Segment",

    # metadata
    "SegmentSpan",
    "RecordingMeta",

    # configuration
    "DEFAULT_SAMPLING_RATE",
    "LoaderConfig",
    "PlotConfig",
    "PlotMode",

    # exceptions
    "CoreError",
    "InvalidTimeSeries",
    "InvalidSegment",
    "InvalidConfigError",
    "NotFoundError",
    "NoMatchError",
    "CorruptSegmentError",
    "SchemaError",
]
