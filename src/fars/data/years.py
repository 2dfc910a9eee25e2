"""
FARS Year Extraction (Imperative Shell)

Loads one accident file per requested year and reduces each to the
``(MONTH, year)`` pairs needed for monthly summaries.

Package Location: src/fars/data/years.py

Per-year isolation:
    A year whose file is missing or malformed never aborts the batch.  It
    produces a ``YearFailed`` result, a ``UserWarning`` reading
    ``invalid year: <year>``, and processing moves on to the next year.
    Output order always matches input order, one slot per requested year.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import MONTH_COL, YEAR_COL
from ..utils.paths import PathLike
from .reader import coerce_year, fars_read, resolve_year_path

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearLoaded:
    """A year whose file was read; *table* has columns ``[MONTH, year]``.

    Equality and hashing use *year* only.
    """

    year: int
    table: pd.DataFrame = field(compare=False)


@dataclass(frozen=True)
class YearFailed:
    """A year that could not be read.  *year* is kept as requested."""

    year: Any
    reason: str


YearResult = Union[YearLoaded, YearFailed]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_year_results(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
    *,
    stacklevel: int = 2,
) -> List[YearResult]:
    """
    Load the ``(MONTH, year)`` table for each requested year.

    Args:
        years: Year values, in the order results should be returned.
            Duplicates are loaded (and counted) once per occurrence.
        data_dir: Directory holding the accident files.  See
            :func:`fars.utils.paths.resolve_data_dir`.
        stacklevel: Passed to ``warnings.warn`` so the warning points at
            the caller's line.  Wrappers add one per extra frame.

    Returns:
        One ``YearLoaded`` or ``YearFailed`` per input year, in input order.
        A ``UserWarning`` is emitted for every ``YearFailed``.  Python's
        default filter shows a given warning once per calling line.
    """
    results: List[YearResult] = []
    for year in years:
        try:
            results.append(_load_year(year, data_dir))
        except (OSError, EOFError, ValueError, KeyError) as exc:
            # ParserError and EmptyDataError are ValueError subclasses.
            log.debug(
                f"Could not load year {year}: {exc}",
                extra={"year": str(year), "reason": str(exc)},
            )
            warnings.warn(f"invalid year: {year}", UserWarning, stacklevel=stacklevel)
            results.append(YearFailed(year=year, reason=str(exc)))
    return results


def fars_read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the ``(MONTH, year)`` table for each requested year.

    Same as :func:`read_year_results` but each failed year is represented
    by ``None`` instead of a ``YearFailed``.

    Example::

        >>> tables = fars_read_years([2013, 2012], data_dir="data")
        # UserWarning: invalid year: 2012
        >>> tables[1] is None
        True
    """
    return [
        result.table if isinstance(result, YearLoaded) else None
        for result in read_year_results(years, data_dir, stacklevel=3)
    ]


def loaded_tables(results: Iterable[YearResult]) -> List[pd.DataFrame]:
    """Return the tables of the successful results, in order."""
    return [r.table for r in results if isinstance(r, YearLoaded)]


def failed_years(results: Iterable[YearResult]) -> List[Any]:
    """Return the requested year values that failed to load, in order."""
    return [r.year for r in results if isinstance(r, YearFailed)]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_year(year: Any, data_dir: Optional[PathLike]) -> YearLoaded:
    year_int = coerce_year(year)
    df = fars_read(resolve_year_path(year_int, data_dir))
    if MONTH_COL not in df.columns:
        raise KeyError(f"column '{MONTH_COL}' not found")

    table = (
        df[[MONTH_COL]]
        .assign(**{YEAR_COL: year_int})
        .reset_index(drop=True)
    )
    return YearLoaded(year=year_int, table=table)
