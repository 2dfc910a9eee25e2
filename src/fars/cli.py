"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]   Monthly accident counts per year
    fars map --state 1 --year 2013 [...]     State accident map as HTML

The data directory is taken from ``--data-dir``, then the ``FARS_DATA_DIR``
environment variable, then the current working directory.

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .analysis.geo import InvalidStateError
from .data.reader import MissingFileError, coerce_year
from .utils.logging import configure_logging
from .utils.numbers import coerce_int


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or save) the month-by-year accident count table.

    Years that cannot be read are reported as warnings and skipped; the
    command only fails when no requested year could be read.  A year whose
    file holds no accidents is printed as a column of zeros.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data.years import loaded_tables, read_year_results
    from fars.reports.summary import summarize_year_results, write_summary_csv

    results = read_year_results(args.years, data_dir=args.data_dir)
    if not loaded_tables(results):
        _die(f"No accident data found for years: {', '.join(args.years)}")

    table = summarize_year_results(results, fill_missing_years=args.fill_missing)

    if args.output:
        out_path = write_summary_csv(table, args.output)
        print(f"✅  Summary saved → {out_path}")
    else:
        with pd.option_context("display.max_columns", None, "display.width", 120):
            print(table.to_string(index=False))


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Write the accident map for one state and year to HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.maps import fars_map_state

    output = args.output
    if output is None:
        try:
            state = coerce_int(args.state, label="STATE number")
            output = Path(f"state_{state}_{coerce_year(args.year)}.html")
        except ValueError as exc:
            _die(str(exc))

    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output_path=output,
            show=False,
        )
    except (MissingFileError, InvalidStateError) as exc:
        _die(str(exc))
    except ValueError as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    if fig is None:
        print("⚠️   No accidents to plot, no map written.")
    else:
        print(f"✅  Map saved → {output}")


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Summarise and map FARS fatal accident data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Directory holding accident_<year>.csv.bz2 files "
            "(default: $FARS_DATA_DIR or the current directory)."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="COMMAND")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Count accidents per month for each requested year.\n\n"
            "Years whose file is missing or unreadable are reported as\n"
            "'invalid year' warnings and left out of the table."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--fill-missing",
        action="store_true",
        default=False,
        help="Keep a zero-filled column for each year that failed to load.",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Write the table to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map accident locations for one state and year.",
        description=(
            "Plot the accidents of one STATE code for one year on a map\n"
            "and write it to an HTML file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="CODE",
        help="FARS STATE code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="Year of the accident file, e.g. 2013.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Output HTML path (default: state_<code>_<year>.html).",
    )
    p_map.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print full tracebacks for unexpected errors.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
