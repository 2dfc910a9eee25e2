"""
FARS File Reader (Imperative Shell)

Maps a year onto the FARS file naming convention and reads one accident
file into a DataFrame.

Package Location: src/fars/data/reader.py

File naming convention:
    ``accident_<year>.csv.bz2`` where ``<year>`` is a plain base-10 integer,
    e.g. ``accident_2013.csv.bz2``.  Files live in a single data directory
    resolved by :func:`fars.utils.paths.resolve_data_dir`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from ..utils.numbers import coerce_int
from ..utils.paths import PathLike, resolve_data_dir

log = logging.getLogger(__name__)

_FILENAME_TEMPLATE = "accident_{year}.csv.bz2"


class MissingFileError(FileNotFoundError):
    """Raised when a requested FARS file does not exist."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"file '{path}' does not exist")
        self.filename = str(path)

    def __str__(self) -> str:
        # OSError switches to its errno format once filename is set.
        return self.args[0]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the conventional FARS file name for *year*.

    Args:
        year: Anything coercible to an integer year (``2013``, ``2013.7``,
            ``"2013"``, ``"2013.0"``).  Non-integral values truncate
            toward zero.

    Returns:
        File name such as ``'accident_2013.csv.bz2'``.

    Raises:
        ValueError: If *year* cannot be interpreted as a number.
    """
    return _FILENAME_TEMPLATE.format(year=coerce_year(year))


def resolve_year_path(year: Any, data_dir: Optional[PathLike] = None) -> Path:
    """Return the full path of *year*'s accident file inside *data_dir*."""
    return resolve_data_dir(data_dir) / make_filename(year)


def fars_read(path: PathLike) -> pd.DataFrame:
    """
    Read one FARS accident file into a DataFrame.

    Compression (``.bz2``, ``.gz``, ``.zip`` ...) is inferred from the file
    extension.  Column types are inferred from the whole file at once
    (``low_memory=False``) so pandas does not emit mixed-dtype warnings for
    large files.

    Args:
        path: Path to a comma-separated, optionally compressed file with a
            header row.

    Returns:
        DataFrame with one row per data line, in file order.

    Raises:
        MissingFileError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise MissingFileError(path)

    df = pd.read_csv(path, low_memory=False)
    log.debug(
        f"Read {len(df)} rows from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def coerce_year(year: Any) -> int:
    """
    Coerce *year* to ``int``, truncating toward zero.

    Raises:
        ValueError: For values that are not numeric, or not finite.
    """
    return coerce_int(year, label="year")
