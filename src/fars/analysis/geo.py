"""
FARS Accident Locations (Functional Core)

Pure functions only. No I/O, no side effects.

Selects one state's accidents from a year's data and cleans the
coordinates before mapping.

Package Location: src/fars/analysis/geo.py

Sentinel coordinates:
    FARS encodes unknown locations with out-of-range values
    (``LONGITUD`` 777.7777 / 888.8888 / 999.9999, ``LATITUDE`` 77.7777 ...
    99.9999).  Anything above 900 (longitude) or 90 (latitude) is treated
    as missing and set to ``NaN``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.numbers import coerce_int

STATE_COL = "STATE"
LAT_COL = "LATITUDE"
LON_COL = "LONGITUD"

_LAT_SENTINEL = 90
_LON_SENTINEL = 900

# FARS STATE codes are US FIPS codes (plus 43 Puerto Rico, 52 Virgin Islands).
STATE_NAMES: Dict[int, str] = {
    1: "Alabama", 2: "Alaska", 4: "Arizona", 5: "Arkansas",
    6: "California", 8: "Colorado", 9: "Connecticut", 10: "Delaware",
    11: "District of Columbia", 12: "Florida", 13: "Georgia", 15: "Hawaii",
    16: "Idaho", 17: "Illinois", 18: "Indiana", 19: "Iowa",
    20: "Kansas", 21: "Kentucky", 22: "Louisiana", 23: "Maine",
    24: "Maryland", 25: "Massachusetts", 26: "Michigan", 27: "Minnesota",
    28: "Mississippi", 29: "Missouri", 30: "Montana", 31: "Nebraska",
    32: "Nevada", 33: "New Hampshire", 34: "New Jersey", 35: "New Mexico",
    36: "New York", 37: "North Carolina", 38: "North Dakota", 39: "Ohio",
    40: "Oklahoma", 41: "Oregon", 42: "Pennsylvania", 43: "Puerto Rico",
    44: "Rhode Island", 45: "South Carolina", 46: "South Dakota",
    47: "Tennessee", 48: "Texas", 49: "Utah", 50: "Vermont",
    51: "Virginia", 52: "Virgin Islands", 53: "Washington",
    54: "West Virginia", 55: "Wisconsin", 56: "Wyoming",
}


class InvalidStateError(ValueError):
    """Raised when a STATE code does not occur in the loaded data."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_state(df: pd.DataFrame, state_num: Any) -> int:
    """
    Check that *state_num* occurs in ``df['STATE']``.

    Args:
        df: A year's accident data.
        state_num: State code; coerced to ``int`` (``"1.0"`` gives ``1``).

    Returns:
        The state code as ``int``.

    Raises:
        InvalidStateError: If the code is not present in the data.
        ValueError: If *state_num* cannot be coerced to an integer.
    """
    state = coerce_int(state_num, label="STATE number")
    _validate_columns(df, required=[STATE_COL])
    if state not in set(df[STATE_COL].dropna().unique().tolist()):
        raise InvalidStateError(f"invalid STATE number: {state}")
    return state


def filter_state(df: pd.DataFrame, state: int) -> pd.DataFrame:
    """Return a copy of the rows of *df* whose ``STATE`` equals *state*."""
    return df.loc[df[STATE_COL] == state].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    ``LONGITUD`` > 900 and ``LATITUDE`` > 90 become ``NaN``; the row itself
    is kept.  Returns a new DataFrame; *df* is not modified.

    Raises:
        ValueError: If either coordinate column is missing.
    """
    _validate_columns(df, required=[LAT_COL, LON_COL])
    lat = pd.to_numeric(df[LAT_COL], errors="coerce")
    lon = pd.to_numeric(df[LON_COL], errors="coerce")
    return df.assign(**{
        LAT_COL: lat.where(~(lat > _LAT_SENTINEL), np.nan),
        LON_COL: lon.where(~(lon > _LON_SENTINEL), np.nan),
    })


def locatable(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a cleaned frame that have both a latitude and a longitude."""
    return df.dropna(subset=[LAT_COL, LON_COL])


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Bounding box of the non-missing coordinates.

    Latitude and longitude ranges are taken independently, ignoring
    ``NaN`` in each column.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))`` or ``None`` when either
        column has no values.
    """
    lat = df[LAT_COL].dropna()
    lon = df[LON_COL].dropna()
    if lat.empty or lon.empty:
        return None
    return (
        (float(lat.min()), float(lat.max())),
        (float(lon.min()), float(lon.max())),
    )


def state_name(state: int) -> str:
    """Human-readable name for a FARS STATE code, e.g. ``'State 70'`` if unknown."""
    return STATE_NAMES.get(int(state), f"State {state}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident data is missing required columns: {missing}")
