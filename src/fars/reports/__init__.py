"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, pure analysis and plotting into the
user-facing operations.

Modules:
    summary: Month-by-year accident count table (and CSV export)
    maps:    State accident map (HTML export or browser)
"""

from .summary import fars_summarize_years, summarize_year_results, write_summary_csv
from .maps import fars_map_state

__all__ = [
    'fars_summarize_years',
    'summarize_year_results',
    'write_summary_csv',
    'fars_map_state',
]
