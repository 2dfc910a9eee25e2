"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: cleaned accident DataFrame for one state (see ``analysis.geo``).
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    A Scattergeo figure over North America with state boundaries drawn
    (``showsubunits``).  The latitude and longitude axes are each clamped
    to the range of the known values in that column, so the view is scoped
    to the selected state.  Only accidents with both coordinates are drawn.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.geo import LAT_COL, LON_COL, coordinate_bounds, locatable

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added around a single-point (zero-width) bounding box.
_MIN_SPAN_DEG: float = 0.5

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size': 3,
    'symbol': 'circle',
    'opacity': 0.7,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    df_points: pd.DataFrame,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a map of accident locations.

    Args:
        df_points: Accident rows with cleaned ``LATITUDE`` / ``LONGITUD``
            columns (sentinels already replaced by ``NaN``).  Extra
            columns such as ``ST_CASE`` are shown in the hover text when
            present.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If no row has both a latitude and a longitude.
    """
    df = locatable(df_points)
    bounds = coordinate_bounds(df_points)
    if df.empty or bounds is None:
        raise ValueError("no accident locations to plot")
    lat_range, lon_range = (_pad(r) for r in bounds)

    hover = (
        'Case ' + df['ST_CASE'].astype(str)
        if 'ST_CASE' in df.columns
        else None
    )

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=df[LON_COL],
        lat=df[LAT_COL],
        mode='markers',
        marker=_MARKER_STYLE,
        text=hover,
        name='Accident',
        hovertemplate=(
            "%{text}<br>" if hover is not None else ""
        ) + "Lat: %{lat:.4f}<br>Lon: %{lon:.4f}<extra></extra>",
    ))

    fig.update_geos(
        scope='north america',
        projection_type='mercator',
        showland=True,
        landcolor='white',
        showlakes=True,
        showsubunits=True,
        subunitcolor='gray',
        showcountries=True,
        countrycolor='black',
        lataxis_range=list(lat_range),
        lonaxis_range=list(lon_range),
    )
    fig.update_layout(
        title=title,
        showlegend=False,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
    )
    return fig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _pad(value_range: tuple[float, float]) -> tuple[float, float]:
    lo, hi = value_range
    if hi - lo < _MIN_SPAN_DEG:
        mid = (lo + hi) / 2.0
        return mid - _MIN_SPAN_DEG / 2.0, mid + _MIN_SPAN_DEG / 2.0
    return lo, hi
