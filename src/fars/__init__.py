"""
FARS - Fatality Analysis Reporting System toolkit

Reads yearly FARS accident files, counts accidents by month and year,
and maps accident locations for a state.

Structure:
- data/     : Imperative Shell (file naming, reading, per-year loading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration of the public operations
"""

from .analysis.geo import InvalidStateError
from .data.reader import MissingFileError, fars_read, make_filename, resolve_year_path
from .data.years import YearFailed, YearLoaded, fars_read_years, read_year_results
from .reports.maps import fars_map_state
from .reports.summary import fars_summarize_years, summarize_year_results, write_summary_csv

__version__ = "0.1.0"

__all__ = [
    'InvalidStateError',
    'MissingFileError',
    'YearFailed',
    'YearLoaded',
    'fars_map_state',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'make_filename',
    'read_year_results',
    'resolve_year_path',
    'summarize_year_results',
    'write_summary_csv',
]
