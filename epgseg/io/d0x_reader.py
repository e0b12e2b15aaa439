from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np

from epgseg.core.exceptions import CorruptSegmentError, NotFoundError
from epgseg.core.segment import Segment
from epgseg.io.discovery import segment_index


logger = logging.getLogger(__name__)


HEADER_LINES = 3          # textual header, discarded unread
SAMPLE_DTYPE = np.dtype("<f4")


def _skip_header(fh: BinaryIO, path: Path) -> list[bytes]:
    lines: list[bytes] = []
    for i in range(HEADER_LINES):
        line = fh.readline()
        if not line.endswith(b"\n"):
            raise CorruptSegmentError(
                f"{path}: expected {HEADER_LINES} newline-terminated header lines, "
                f"found {i}."
            )
        lines.append(line)
    return lines


def _to_samples(payload: bytes, path: Path, strict: bool) -> np.ndarray:
    rem = len(payload) % SAMPLE_DTYPE.itemsize
    if rem != 0:
        if strict:
            raise CorruptSegmentError(
                f"{path}: payload of {len(payload)} bytes is not a multiple of "
                f"{SAMPLE_DTYPE.itemsize} (float32)."
            )
        # lenient: drop the partial trailing sample
        logger.warning("%s: ignoring %d trailing byte(s) after the last full sample", path, rem)
        payload = payload[: len(payload) - rem]

    if not payload:
        return np.empty(0, dtype=np.float32)
    return np.frombuffer(payload, dtype=SAMPLE_DTYPE).astype(np.float32, copy=False)


def _read(path: str | Path, strict: bool) -> tuple[Path, list[bytes], np.ndarray]:
    p = Path(path)
    try:
        with p.open("rb") as fh:
            header = _skip_header(fh, p)
            payload = fh.read()
    except FileNotFoundError as e:
        raise NotFoundError(f"File not found: {p}") from e
    return p, header, _to_samples(payload, p, strict)


def decode_segment(path: str | Path, *, strict: bool = True) -> np.ndarray:
    """Decode one segment file into its float32 samples (file order).

    The first 3 lines are skipped; every remaining byte is read as a
    little-endian IEEE-754 float32. An empty payload yields an empty array.
    """
    _, _, samples = _read(path, strict)
    return samples


def read_segment(path: str | Path, *, strict: bool = True) -> Segment:
    """Like decode_segment(), but returns a Segment with header lines and index."""
    p, header, samples = _read(path, strict)
    idx = segment_index(p.name)
    return Segment(
        path=p.absolute(),
        index=idx,
        samples=samples,
        header=tuple(line.decode("latin-1").rstrip("\r\n") for line in header),
    )
