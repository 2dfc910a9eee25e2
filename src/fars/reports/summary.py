"""
FARS Monthly Summary Report (Imperative Shell)

Thin orchestration layer: loads the requested years through
``data.years``, hands the tables to the pure summary functions in
``analysis.summary``, and optionally writes the result to CSV.

Package Location: src/fars/reports/summary.py

Usage::

    from fars import fars_summarize_years

    table = fars_summarize_years([2013, 2014, 2015], data_dir="data")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import pandas as pd

from ..analysis.summary import summarize_tables
from ..data.reader import coerce_year
from ..data.years import (
    YearLoaded,
    YearResult,
    failed_years,
    loaded_tables,
    read_year_results,
)
from ..utils.paths import PathLike

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
    fill_missing_years: bool = False,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be read produce an ``invalid year: <year>``
    warning and contribute no rows.

    Args:
        years: Year values to summarise.
        data_dir: Directory holding the accident files.
        fill_missing_years: When ``True`` every requested year that failed
            to load still gets a column, filled with zeros.  When ``False``
            (default) such years have no column.

    Returns:
        DataFrame with ``MONTH`` (1-12) and one count column per year,
        labelled ``str(year)`` in ascending year order.
    """
    results = read_year_results(list(years), data_dir, stacklevel=3)
    return summarize_year_results(results, fill_missing_years=fill_missing_years)


def summarize_year_results(
    results: Iterable[YearResult],
    fill_missing_years: bool = False,
) -> pd.DataFrame:
    """
    Build the summary table from already-loaded year results.

    Every loaded year gets a column, all zeros when its file has no rows.
    Failed years get a zero column only when *fill_missing_years* is set.
    """
    results = list(results)
    zero_years = [r.year for r in results if isinstance(r, YearLoaded)]
    if fill_missing_years:
        zero_years += [y for y in map(_try_coerce, failed_years(results)) if y is not None]

    table = summarize_tables(loaded_tables(results), zero_years=zero_years)
    log.info(
        f"Summarised {len(table.columns) - 1} year(s)",
        extra={"years": list(table.columns[1:])},
    )
    return table


def write_summary_csv(table: pd.DataFrame, path: PathLike) -> Path:
    """
    Write a summary table to CSV, creating parent directories as needed.

    Returns:
        The path written.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(out_path, index=False)
    log.info(f"Summary saved → {out_path}", extra={"path": str(out_path)})
    return out_path


def _try_coerce(year: Any) -> Optional[int]:
    # A year that is not even numeric cannot be labelled as a column.
    try:
        return coerce_year(year)
    except ValueError:
        return None
