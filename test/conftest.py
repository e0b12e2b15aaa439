# test/conftest.py
from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


HEADER = b"EPG recording\nchannel 4\nsaved 2022-10-01\n"


def write_segment(path: Path, samples, header: bytes = HEADER) -> Path:
    """Write a synthetic .D## file: 3 header lines + little-endian float32 payload."""
    path.write_bytes(header + np.asarray(samples, dtype="<f4").tobytes())
    return path


@pytest.fixture
def recording(tmp_path):
    """rec.D01 = [1, 2, 3, 4], rec.D02 = [5, 6]."""
    write_segment(tmp_path / "rec.D01", [1.0, 2.0, 3.0, 4.0])
    write_segment(tmp_path / "rec.D02", [5.0, 6.0])
    return tmp_path / "rec.D01"


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
