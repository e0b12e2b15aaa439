# epgseg/core/config.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidConfigError


DEFAULT_SAMPLING_RATE = 100.0
SORT_ORDERS = ("lexical", "numeric")


class PlotMode(str, Enum):
    LINE = "line"
    SCATTER = "scatter"

    @classmethod
    def parse(cls, value: "PlotMode | str") -> "PlotMode":
        if isinstance(value, PlotMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            choices = ", ".join(m.value for m in cls)
            raise InvalidConfigError(
                f"Unsupported plot mode: {value!r}. Choose one of: {choices}."
            ) from e


def check_sampling_rate(sampling_rate: float) -> float:
    """Return `sampling_rate` as float, or raise InvalidConfigError."""
    if isinstance(sampling_rate, bool):
        raise InvalidConfigError("sampling_rate must be a number, got bool.")
    try:
        rate = float(sampling_rate)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(f"sampling_rate must be a number, got {sampling_rate!r}.") from e
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidConfigError(f"sampling_rate must be a finite value > 0, got {sampling_rate!r}.")
    return rate


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """
    Settings for SegmentLoader.

    - sampling_rate: samples per second, constant across all segments
    - strict: fail on payloads whose length is not a multiple of 4 bytes
      (False truncates the trailing bytes)
    - sort: "lexical" (file name order) or "numeric" (by suffix number)
    """
    sampling_rate: float = DEFAULT_SAMPLING_RATE
    strict: bool = True
    sort: str = "lexical"

    def __post_init__(self) -> None:
        object.__setattr__(self, "sampling_rate", check_sampling_rate(self.sampling_rate))
        if not isinstance(self.strict, bool):
            raise InvalidConfigError("LoaderConfig.strict must be a bool.")
        if self.sort not in SORT_ORDERS:
            raise InvalidConfigError(
                f"LoaderConfig.sort must be one of {SORT_ORDERS}, got {self.sort!r}."
            )


@dataclass(frozen=True, slots=True)
class PlotConfig:
    """Rendering mode, title and the default time window (seconds)."""
    mode: PlotMode = PlotMode.LINE
    title: str = "EPG Signal"
    start_s: float = 0.0
    duration: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", PlotMode.parse(self.mode))
        if not isinstance(self.title, str):
            raise InvalidConfigError("PlotConfig.title must be a string.")
        start_s, duration = check_window(self.start_s, self.duration)
        object.__setattr__(self, "start_s", start_s)
        object.__setattr__(self, "duration", duration)


def check_window(start_s: float, duration: float) -> tuple[float, float]:
    try:
        start = float(start_s)
        dur = float(duration)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(
            f"Window start/duration must be numbers, got {start_s!r} / {duration!r}."
        ) from e
    if not math.isfinite(start):
        raise InvalidConfigError(f"Window start must be finite, got {start_s!r}.")
    if not math.isfinite(dur) or dur <= 0:
        raise InvalidConfigError(f"Window duration must be a finite value > 0, got {duration!r}.")
    return start, dur
