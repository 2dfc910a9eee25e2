"""
FARS State Map Report (Imperative Shell)

Loads one year's accident file, selects a state through the pure
functions in ``analysis.geo``, builds the figure with
``plotting.state_map`` and renders it (HTML file or browser).

Package Location: src/fars/reports/maps.py

Outcomes of :func:`fars_map_state`:

- unknown file            → ``MissingFileError`` (raised)
- STATE not in the data   → ``InvalidStateError`` (raised)
- no rows / no locations  → INFO log, returns ``None``, nothing rendered
- otherwise               → figure rendered and returned
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import plotly.graph_objects as go

from ..analysis.geo import (
    clean_coordinates,
    filter_state,
    locatable,
    state_name,
    validate_state,
)
from ..data.reader import coerce_year, fars_read, resolve_year_path
from ..plotting.state_map import plot_state_accidents
from ..utils.paths import PathLike

log = logging.getLogger(__name__)


def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Args:
        state_num: FARS STATE code; coerced to ``int``.
        year: Year of the accident file to read.
        data_dir: Directory holding the accident files.
        output_path: When given, the map is written to this HTML file
            instead of being shown.
        show: Call ``fig.show()`` when no *output_path* is given.

    Returns:
        The rendered figure, or ``None`` when there was nothing to plot.

    Raises:
        MissingFileError: If the year's file does not exist.
        InvalidStateError: If *state_num* does not occur in that year.
    """
    df = fars_read(resolve_year_path(year, data_dir))
    state = validate_state(df, state_num)

    df_state = filter_state(df, state)
    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state, "year": str(year)})
        return None

    df_state = clean_coordinates(df_state)
    if locatable(df_state).empty:
        log.info(
            "no accident locations to plot",
            extra={"state": state, "year": str(year)},
        )
        return None

    title = f"{state_name(state)} – Fatal Accidents {coerce_year(year)}"
    fig = plot_state_accidents(df_state, title=title)

    if output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path), include_plotlyjs='cdn')
        log.info(f"Map saved → {out_path}", extra={"path": str(out_path)})
    elif show:
        fig.show()

    return fig
