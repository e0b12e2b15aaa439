from __future__ import annotations

import logging
import re
from pathlib import Path

from epgseg.core.config import SORT_ORDERS
from epgseg.core.exceptions import InvalidConfigError, NoMatchError, NotFoundError


logger = logging.getLogger(__name__)


# ".D" followed by one or more digits at the end of the file name
SEGMENT_SUFFIX_RE = re.compile(r"\.D(?P<idx>\d+)$")


def is_segment_name(name: str) -> bool:
    """True if `name` ends with the ".D##" segment suffix."""
    return SEGMENT_SUFFIX_RE.search(name) is not None


def base_identifier(name: str) -> str:
    """Strip the trailing ".D##" suffix from a file name.

    Examples
    --------
    "8hr_0zt_2022-10-01-ch4.D01" -> "8hr_0zt_2022-10-01-ch4"
    "rec.D7"                     -> "rec"
    "notes.txt"                  -> "notes.txt"
    """
    return SEGMENT_SUFFIX_RE.sub("", name)


def segment_index(name: str) -> int | None:
    """Parse the numeric suffix of a segment file name.

    Examples
    --------
    "rec.D01" -> 1
    "rec.D10" -> 10
    "rec.txt" -> None
    """
    m = SEGMENT_SUFFIX_RE.search(name)
    if not m:
        return None
    return int(m.group("idx"))


def _numeric_key(path: Path) -> tuple[int, str]:
    idx = segment_index(path.name)
    return (idx if idx is not None else -1, path.name)


def discover_segments(seed_path: str | Path, *, sort: str = "lexical") -> list[Path]:
    """Find every segment file belonging to the same recording as `seed_path`.

    Parameters
    ----------
    seed_path:
        Any one existing segment file of the recording.
    sort:
        "lexical" orders by file name (D01 < D02 < D10, but D1 < D10 < D2
        when suffixes are not zero-padded). "numeric" orders by the parsed
        suffix number.

    Returns
    -------
    list[Path]
        Absolute paths, in concatenation order. Never empty.
    """
    if sort not in SORT_ORDERS:
        raise InvalidConfigError(f"sort must be one of {SORT_ORDERS}, got {sort!r}.")

    seed = Path(seed_path).expanduser()
    if not seed.is_file():
        raise NotFoundError(f"File not found: {seed}")

    # as given (symlinks not followed): the link's own folder and name count
    seed = seed.absolute()
    directory = seed.parent
    base_name = base_identifier(seed.name)

    # Non-recursive scan; the name minus its suffix must equal the base exactly
    matched: set[Path] = set()
    for p in directory.iterdir():
        if not is_segment_name(p.name):
            continue
        if base_identifier(p.name) != base_name:
            continue
        if not p.is_file():
            continue
        matched.add(p)

    if not matched:
        raise NoMatchError(
            f"No matching .D## files found in directory '{directory}' for base name '{base_name}'."
        )

    lexical = sorted(matched, key=lambda p: p.name)
    numeric = sorted(matched, key=_numeric_key)

    if sort == "numeric":
        ordered = numeric
    else:
        ordered = lexical
        if lexical != numeric:
            logger.warning(
                "Segment suffixes of '%s' are not zero-padded: file name order %s "
                "differs from numeric order %s. Pass sort='numeric' to order by number.",
                base_name,
                [p.name for p in lexical],
                [p.name for p in numeric],
            )

    logger.debug("files_matched = %s", [str(p) for p in ordered])
    return ordered
