"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: File naming convention and single-file loading
- years:  Per-year loading with failure isolation
"""

from .reader import (
    MissingFileError,
    coerce_year,
    fars_read,
    make_filename,
    resolve_year_path,
)

from .years import (
    YearFailed,
    YearLoaded,
    YearResult,
    failed_years,
    fars_read_years,
    loaded_tables,
    read_year_results,
)

__all__ = [
    # Reader
    'MissingFileError',
    'coerce_year',
    'fars_read',
    'make_filename',
    'resolve_year_path',
    # Years
    'YearFailed',
    'YearLoaded',
    'YearResult',
    'failed_years',
    'fars_read_years',
    'loaded_tables',
    'read_year_results',
]
