# epgseg/core/timeseries.py
from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import Iterator

import numpy as np
import pandas as pd

from .config import check_sampling_rate, check_window
from .exceptions import InvalidTimeSeries
from .metadata import RecordingMeta


@dataclass(frozen=True, slots=True)
class CombinedSeries:
    """
    Immutable reconstructed recording: float64 time vector + float32 signal.

    Behaves like an ordered sequence of (timestamp, amplitude) pairs:
    len(), iteration and integer indexing all work on pairs.
    """

    time: np.ndarray = field(repr=False)
    signal: np.ndarray = field(repr=False)
    sampling_rate: float | None = None
    meta: RecordingMeta = field(default_factory=RecordingMeta, repr=False)
    # False: take ownership of `time` / `signal` instead of copying them
    copy: InitVar[bool] = True

    def __post_init__(self, copy: bool) -> None:
        t = np.asarray(self.time, dtype=np.float64)
        v = np.asarray(self.signal, dtype=np.float32)

        if t.ndim != 1:
            raise InvalidTimeSeries(f"`time` must be 1D, got shape {t.shape}")
        if v.ndim != 1:
            raise InvalidTimeSeries(f"`signal` must be 1D, got shape {v.shape}")
        if t.size != v.size:
            raise InvalidTimeSeries(
                f"`time` and `signal` must have same length, got {t.size} vs {v.size}"
            )

        if t.size > 0:
            if not np.isfinite(t).all():
                raise InvalidTimeSeries("`time` contains non-finite values (NaN/Inf).")
            if np.any(np.diff(t) <= 0):
                raise InvalidTimeSeries("`time` must be strictly increasing.")

        if self.sampling_rate is not None:
            try:
                rate = check_sampling_rate(self.sampling_rate)
            except ValueError as e:
                raise InvalidTimeSeries(str(e)) from e
            object.__setattr__(self, "sampling_rate", rate)

        if self.meta is None:
            object.__setattr__(self, "meta", RecordingMeta())
        elif not isinstance(self.meta, RecordingMeta):
            raise InvalidTimeSeries("CombinedSeries.meta must be a RecordingMeta instance.")

        # Never alias caller-owned buffers: no mutation after construction
        if copy and t is self.time:
            t = t.copy()
        if copy and v is self.signal:
            v = v.copy()
        t.flags.writeable = False
        v.flags.writeable = False
        object.__setattr__(self, "time", t)
        object.__setattr__(self, "signal", v)

    # ---- sequence of pairs ----
    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for t, v in zip(self.time.tolist(), self.signal.tolist()):
            yield t, v

    def __getitem__(self, i: int | slice) -> "tuple[float, float] | CombinedSeries":
        if isinstance(i, slice):
            if i.step is not None and i.step <= 0:
                raise IndexError("CombinedSeries slices must have a positive step.")
            return self._replace(self.time[i], self.signal[i])
        return float(self.time[i]), float(self.signal[i])

    def pairs(self) -> list[tuple[float, float]]:
        return list(self)

    # ---- derived bounds ----
    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def t_start(self) -> float | None:
        return None if self.n == 0 else float(self.time[0])

    @property
    def t_end(self) -> float | None:
        return None if self.n == 0 else float(self.time[-1])

    @property
    def duration(self) -> float:
        """Seconds between the first and the last timestamp (0.0 for < 2 samples)."""
        if self.n < 2:
            return 0.0
        return float(self.time[-1] - self.time[0])

    # ---- transformations ----
    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "left",
    ) -> "CombinedSeries":
        if closed not in {"both", "left", "right", "neither"}:
            raise ValueError("closed must be one of: both, left, right, neither")

        if self.n == 0:
            return self

        t = self.time
        mask = np.ones_like(t, dtype=bool)

        if t_min is not None:
            if closed in {"both", "left"}:
                mask &= (t >= t_min)
            else:
                mask &= (t > t_min)

        if t_max is not None:
            if closed in {"both", "right"}:
                mask &= (t <= t_max)
            else:
                mask &= (t < t_max)

        return self._replace(t[mask], self.signal[mask])

    def window(self, start_s: float = 0.0, duration: float = 10.0) -> "CombinedSeries":
        """All pairs with start_s <= t < start_s + duration."""
        start, dur = check_window(start_s, duration)
        return self.slice_time(start, start + dur, closed="left")

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.signal.copy()
        return self.time, self.signal

    def to_frame(self):
        """pandas DataFrame with columns `time` (float64) and `signal` (float32)."""
        return pd.DataFrame({"time": self.time.copy(), "signal": self.signal.copy()})

    def _replace(self, time: np.ndarray, signal: np.ndarray) -> "CombinedSeries":
        return CombinedSeries(
            time=time,
            signal=signal,
            sampling_rate=self.sampling_rate,
            meta=self.meta.copy(),
            copy=False,
        )
