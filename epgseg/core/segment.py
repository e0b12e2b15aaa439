# epgseg/core/segment.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .config import check_sampling_rate
from .exceptions import InvalidSegment


@dataclass(frozen=True, slots=True)
class Segment:
    """
    A Segment is one physical .D## file, decoded.

    Design goals:
    - ephemeral: read once, appended into a CombinedSeries, discarded
    - safe: samples are a read-only 1D float32 array
    - header lines are kept as text for inspection, never interpreted
    """
    path: Path
    index: int | None
    samples: np.ndarray = field(repr=False)
    header: tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.path, (str, Path)) or not str(self.path).strip():
            raise InvalidSegment("Segment.path must be a non-empty path.")
        if self.index is not None:
            if isinstance(self.index, bool) or not isinstance(self.index, (int, np.integer)):
                raise InvalidSegment("Segment.index must be an integer or None.")
            if self.index < 0:
                raise InvalidSegment(f"Segment.index must be >= 0, got {self.index}.")

        samples = np.asarray(self.samples)
        if samples.ndim != 1:
            raise InvalidSegment(f"Segment.samples must be 1D, got shape {samples.shape}")
        if samples.dtype != np.float32:
            samples = samples.astype(np.float32)
        else:
            samples = samples.copy() if samples.flags.writeable else samples
        samples.flags.writeable = False

        object.__setattr__(self, "path", Path(self.path))
        if self.index is not None:
            object.__setattr__(self, "index", int(self.index))
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "header", tuple(self.header))

    @property
    def n(self) -> int:
        return int(self.samples.size)

    @property
    def name(self) -> str:
        return self.path.name

    def time_axis(self, offset: int, sampling_rate: float) -> np.ndarray:
        """
        Timestamps (seconds) of this segment's samples when its first sample
        is global sample number `offset`.

        Computed from the global sample index, so consecutive segments share
        the same grid: t[k] == k / sampling_rate.
        """
        if offset < 0:
            raise InvalidSegment(f"offset must be >= 0, got {offset}.")
        rate = check_sampling_rate(sampling_rate)
        return (offset + np.arange(self.n, dtype=np.float64)) / rate
