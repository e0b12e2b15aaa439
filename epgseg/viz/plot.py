# epgseg/viz/plot.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from epgseg.core import CombinedSeries, PlotConfig, PlotMode, SchemaError
from epgseg.core.config import check_window


logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("time", "signal")
X_LABEL = "Time (s)"
Y_LABEL = "Signal"


def as_series(data: Any) -> CombinedSeries:
    """Coerce plotting input into a CombinedSeries.

    Accepts a CombinedSeries, a pandas DataFrame or any mapping that has
    `time` and `signal` fields. Raises SchemaError otherwise.
    """
    if isinstance(data, CombinedSeries):
        return data

    if isinstance(data, pd.DataFrame):
        present = set(map(str, data.columns))
    elif isinstance(data, Mapping):
        present = set(map(str, data.keys()))
    else:
        raise SchemaError(
            f"Expected a CombinedSeries, DataFrame or mapping with columns "
            f"{REQUIRED_FIELDS}, got {type(data).__name__}."
        )

    missing = [c for c in REQUIRED_FIELDS if c not in present]
    if missing:
        raise SchemaError(f"Input must have columns :time and :signal (missing: {', '.join(missing)}).")

    return CombinedSeries(
        time=np.asarray(data["time"], dtype=np.float64),
        signal=np.asarray(data["signal"], dtype=np.float32),
    )


def slice_window(data: Any, start_s: float = 0.0, duration: float = 10.0) -> CombinedSeries:
    """Pairs with start_s <= t < start_s + duration."""
    return as_series(data).window(start_s, duration)


def _draw(ax: Axes, series: CombinedSeries, mode: PlotMode) -> None:
    t, v = series.to_numpy()
    if mode is PlotMode.LINE:
        ax.plot(t, v, linewidth=0.8)
    else:
        ax.scatter(t, v, s=4)


def plot_signal(
    data: Any,
    mode: PlotMode | str = PlotMode.LINE,
    title: str = "EPG Signal",
    *,
    ax: Axes | None = None,
    output: str | Path | None = None,
) -> Figure:
    """Plot signal against time.

    Returns the matplotlib Figure so the caller can display or modify it.
    Nothing is written to disk unless `output` is given.
    """
    cfg = PlotConfig(mode=mode, title=title)
    series = as_series(data)

    if ax is None:
        fig, ax = plt.subplots(figsize=(10.0, 4.0))
    else:
        fig = ax.figure

    _draw(ax, series, cfg.mode)
    ax.set_xlabel(X_LABEL)
    ax.set_ylabel(Y_LABEL)
    ax.set_title(cfg.title)

    if output is not None:
        fig.savefig(output, dpi=150, bbox_inches="tight")
        logger.info("Saved figure to %s", output)

    return fig


def chunk_title(start_s: float, duration: float) -> str:
    return f"EPG Signal ({start_s}s - {start_s + duration}s)"


def plot_signal_chunk(
    data: Any,
    start_s: float = 0.0,
    duration: float = 10.0,
    mode: PlotMode | str = PlotMode.LINE,
    *,
    ax: Axes | None = None,
    output: str | Path | None = None,
) -> Figure:
    """Plot only [start_s, start_s + duration) of the signal."""
    start, dur = check_window(start_s, duration)
    subset = slice_window(data, start, dur)
    if subset.n == 0:
        logger.warning("Window %.3f s + %.3f s contains no samples", start, dur)
    return plot_signal(subset, mode=mode, title=chunk_title(start, dur), ax=ax, output=output)
