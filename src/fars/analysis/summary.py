"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain dicts.

Turns per-year ``(MONTH, year)`` tables into a month-by-year count table.

Package Location: src/fars/analysis/summary.py

Summary table layout::

    MONTH  2013  2014
        1  2230  2168
        2  1952  1893
      ...
       12  2541  2497

Exactly twelve rows (months 1-12, ascending) regardless of which months
have data; a month/year combination without accidents is ``0``.
Year columns are labelled with the stringified year, ascending by
numeric year.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

import pandas as pd

log = logging.getLogger(__name__)

MONTH_COL = "MONTH"
YEAR_COL = "year"
COUNT_COL = "n"

MONTHS: List[int] = list(range(1, 13))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def count_by_month(tables: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Count accidents per ``(year, MONTH)`` across several year tables.

    Rows whose ``MONTH`` is missing or outside 1-12 are dropped (and
    logged) since they have no row in the summary table.

    Args:
        tables: DataFrames with at least ``MONTH`` and ``year`` columns.
            Not modified.

    Returns:
        Long-form DataFrame with columns ``[year, MONTH, n]`` sorted by
        year then month.  Empty (with those columns) when there is no data.
    """
    frames = [t[[YEAR_COL, MONTH_COL]] for t in tables if not t.empty]
    if not frames:
        return pd.DataFrame(columns=[YEAR_COL, MONTH_COL, COUNT_COL])

    combined = pd.concat(frames, ignore_index=True)
    month = pd.to_numeric(combined[MONTH_COL], errors="coerce")
    valid = month.isin(MONTHS)

    n_dropped = int((~valid).sum())
    if n_dropped:
        log.warning(
            f"Ignoring {n_dropped} rows with MONTH outside 1-12",
            extra={"rows": n_dropped},
        )

    combined = combined.loc[valid].assign(**{MONTH_COL: month[valid].astype(int)})
    if combined.empty:
        return pd.DataFrame(columns=[YEAR_COL, MONTH_COL, COUNT_COL])

    return (
        combined.groupby([YEAR_COL, MONTH_COL])
        .size()
        .rename(COUNT_COL)
        .reset_index()
    )


def pivot_month_counts(
    counts: pd.DataFrame,
    zero_years: Iterable[int] = (),
) -> pd.DataFrame:
    """
    Reshape long-form ``[year, MONTH, n]`` counts into the summary table.

    Args:
        counts: Output of :func:`count_by_month`.
        zero_years: Extra years to include as all-zero columns when they
            have no rows in *counts* (e.g. years whose file failed to load).

    Returns:
        DataFrame with ``MONTH`` (1-12) followed by one ``int`` column per
        year, labelled ``str(year)`` and ordered by year.
    """
    by_year = _nested_counts(counts)
    for year in zero_years:
        by_year.setdefault(int(year), {})

    table = pd.DataFrame({MONTH_COL: MONTHS})
    for year in sorted(by_year):
        month_counts = by_year[year]
        table[str(year)] = pd.Series(
            [month_counts.get(m, 0) for m in MONTHS], dtype="int64"
        )
    return table


def summarize_tables(
    tables: Iterable[pd.DataFrame],
    zero_years: Iterable[int] = (),
) -> pd.DataFrame:
    """Count and pivot in one step.  See :func:`count_by_month`."""
    return pivot_month_counts(count_by_month(tables), zero_years=zero_years)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _nested_counts(counts: pd.DataFrame) -> Dict[int, Dict[int, int]]:
    """Build ``{year: {month: count}}`` from long-form counts."""
    by_year: Dict[int, Dict[int, int]] = {}
    for row in counts.itertuples(index=False):
        year = int(getattr(row, YEAR_COL))
        month = int(getattr(row, MONTH_COL))
        by_year.setdefault(year, {})[month] = int(getattr(row, COUNT_COL))
    return by_year
