# epgseg/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import InvalidSegment, InvalidTimeSeries


@dataclass(frozen=True, slots=True)
class SegmentSpan:
    """
    Position of one segment file inside a CombinedSeries.

    - start: global sample offset of the first sample
    - n: number of samples contributed (may be 0)
    """
    path: Path
    index: int | None
    start: int
    n: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.n < 0:
            raise InvalidSegment(
                f"SegmentSpan start/n must be >= 0, got start={self.start}, n={self.n}."
            )

    @property
    def stop(self) -> int:
        return self.start + self.n


@dataclass(frozen=True, slots=True)
class RecordingMeta:
    """
    Metadata attached to a CombinedSeries.

    - base_name: shared file name prefix ("8hr_0zt_2022-10-01-ch4")
    - directory: folder the segments were discovered in
    - segments: one SegmentSpan per file, in concatenation order
    - attrs: arbitrary additional fields
    """
    base_name: str | None = None
    directory: Path | None = None
    segments: tuple[SegmentSpan, ...] = ()
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidTimeSeries("RecordingMeta.attrs must be a dict.")
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def n_samples(self) -> int:
        return sum(s.n for s in self.segments)

    def copy(self) -> "RecordingMeta":
        return RecordingMeta(
            base_name=self.base_name,
            directory=self.directory,
            segments=self.segments,
            attrs=self.attrs.copy(),
        )
