from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

_COLUMNS = ["ST_CASE", "STATE", "MONTH", "DAY", "FATALS", "LATITUDE", "LONGITUD"]

# (ST_CASE, STATE, MONTH, DAY, FATALS, LATITUDE, LONGITUD)
ROWS_2013 = [
    (10001, 1, 1, 3, 1, 32.5012, -86.5103),
    (10002, 1, 1, 17, 2, 33.1005, -87.0121),
    (10003, 1, 2, 9, 1, 99.9999, 999.9999),
    (10004, 1, 3, 21, 1, 31.2034, 999.9999),
    (10005, 1, 12, 30, 1, 34.0087, -85.9042),
    (60001, 6, 5, 2, 1, 36.7378, -119.7871),
    (60002, 6, 5, 28, 3, 34.0522, -118.2437),
    (60003, 6, 7, 4, 1, 38.5816, -121.4944),
]

ROWS_2014 = [
    (10001, 1, 1, 11, 1, 32.3668, -86.3000),
    (10002, 1, 6, 14, 1, 30.6954, -88.0399),
    (20001, 2, 4, 8, 1, 99.9999, 999.9999),
    (60001, 6, 6, 19, 2, 37.7749, -122.4194),
    (60002, 6, 11, 23, 1, 32.7157, -117.1611),
]


def write_fars_file(directory: Path, year: int, rows: list[tuple]) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=_COLUMNS).to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "fars_data"
    directory.mkdir()
    write_fars_file(directory, 2013, ROWS_2013)
    write_fars_file(directory, 2014, ROWS_2014)
    return directory


@pytest.fixture
def write_year(data_dir: Path):
    """Write an extra accident file into ``data_dir``."""

    def _write(year: int, rows: list[tuple]) -> Path:
        return write_fars_file(data_dir, year, rows)

    return _write
