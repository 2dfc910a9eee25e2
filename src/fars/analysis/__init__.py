"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or plain values.

Modules:
- summary: Monthly accident counts and the month-by-year pivot
- geo:     State selection and coordinate cleaning for maps
"""

from .summary import (
    COUNT_COL,
    MONTH_COL,
    MONTHS,
    YEAR_COL,
    count_by_month,
    pivot_month_counts,
    summarize_tables,
)

from .geo import (
    LAT_COL,
    LON_COL,
    STATE_COL,
    STATE_NAMES,
    InvalidStateError,
    clean_coordinates,
    coordinate_bounds,
    filter_state,
    locatable,
    state_name,
    validate_state,
)

__all__ = [
    # Summary
    'COUNT_COL',
    'MONTH_COL',
    'MONTHS',
    'YEAR_COL',
    'count_by_month',
    'pivot_month_counts',
    'summarize_tables',
    # Geo
    'LAT_COL',
    'LON_COL',
    'STATE_COL',
    'STATE_NAMES',
    'InvalidStateError',
    'clean_coordinates',
    'coordinate_bounds',
    'filter_state',
    'locatable',
    'state_name',
    'validate_state',
]
