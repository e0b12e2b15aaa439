# epgseg/io/load.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import numpy as np
import pandas as pd

from epgseg.core import (
    DEFAULT_SAMPLING_RATE,
    CombinedSeries,
    LoaderConfig,
    RecordingMeta,
    Segment,
    SegmentSpan,
)
from epgseg.io.d0x_reader import decode_segment, read_segment
from epgseg.io.discovery import base_identifier, discover_segments


logger = logging.getLogger(__name__)


# (1-based segment number, path, sample count)
ProgressCallback = Callable[[int, Path, int], None]


class SegmentLoader:
    """Stateless service that rebuilds one continuous recording from .D## files.

    Every call works only on its explicit inputs plus the (immutable)
    LoaderConfig, so a single loader can be shared freely.
    """

    def __init__(self, config: LoaderConfig | None = None):
        self.config = config if config is not None else LoaderConfig()

    @property
    def sampling_rate(self) -> float:
        return self.config.sampling_rate

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------
    def discover(self, seed_path: str | Path) -> list[Path]:
        return discover_segments(seed_path, sort=self.config.sort)

    def decode(self, path: str | Path) -> np.ndarray:
        return decode_segment(path, strict=self.config.strict)

    def read(self, path: str | Path) -> Segment:
        return read_segment(path, strict=self.config.strict)

    # ------------------------------------------------------------------
    # Full reconstruction
    # ------------------------------------------------------------------
    def load(
        self,
        seed_path: str | Path,
        progress: ProgressCallback | None = None,
    ) -> CombinedSeries:
        """Discover, decode and concatenate all segments of a recording.

        Parameters
        ----------
        seed_path:
            Any one segment file of the recording.
        progress:
            Optional callback, called once per segment after it is decoded.

        Returns
        -------
        CombinedSeries
            Timestamps follow t[k] = k / sampling_rate over the global
            sample index k, so there are no gaps or overlaps at segment
            boundaries.
        """
        rate = self.config.sampling_rate
        paths = self.discover(seed_path)

        times: list[np.ndarray] = []
        signals: list[np.ndarray] = []
        spans: list[SegmentSpan] = []
        total_samples = 0

        for number, path in enumerate(paths, start=1):
            logger.info("Processing file %d: %s", number, path)
            segment = self.read(path)

            times.append(segment.time_axis(total_samples, rate))
            signals.append(segment.samples)
            spans.append(
                SegmentSpan(path=segment.path, index=segment.index, start=total_samples, n=segment.n)
            )
            logger.info("  - read %d samples", segment.n)
            if progress is not None:
                progress(number, path, segment.n)

            total_samples += segment.n

        time = np.concatenate(times) if times else np.array([], dtype=np.float64)
        signal = np.concatenate(signals) if signals else np.array([], dtype=np.float32)

        seed = Path(seed_path).expanduser().absolute()
        meta = RecordingMeta(
            base_name=base_identifier(seed.name),
            directory=seed.parent,
            segments=tuple(spans),
        )
        series = CombinedSeries(time=time, signal=signal, sampling_rate=rate, meta=meta, copy=False)
        logger.debug(
            "Combined %d segment(s) into %d samples (%.3f s)",
            len(spans), series.n, series.duration,
        )
        return series


def build_combined_series(
    seed_path: str | Path,
    sampling_rate: float = DEFAULT_SAMPLING_RATE,
    *,
    strict: bool = True,
    sort: str = "lexical",
    progress: ProgressCallback | None = None,
) -> CombinedSeries:
    loader = SegmentLoader(LoaderConfig(sampling_rate=sampling_rate, strict=strict, sort=sort))
    return loader.load(seed_path, progress=progress)


def load_d0x_files(file_path: str | Path, sampling_rate: float = DEFAULT_SAMPLING_RATE) -> pd.DataFrame:
    """Load all .D## siblings of `file_path` as a DataFrame with `time` and `signal`."""
    return build_combined_series(file_path, sampling_rate).to_frame()
