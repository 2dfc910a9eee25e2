from __future__ import annotations

import pandas as pd

from fars.analysis import count_by_month, pivot_month_counts, summarize_tables


def _year_table(year: int, months: list[int]) -> pd.DataFrame:
    return pd.DataFrame({"MONTH": months, "year": year})


def test_count_by_month_counts_each_year_month_pair() -> None:
    counts = count_by_month([
        _year_table(2013, [1, 1, 3]),
        _year_table(2014, [1, 12]),
    ])

    assert counts.columns.tolist() == ["year", "MONTH", "n"]
    assert list(counts.itertuples(index=False, name=None)) == [
        (2013, 1, 2),
        (2013, 3, 1),
        (2014, 1, 1),
        (2014, 12, 1),
    ]


def test_count_by_month_drops_months_outside_calendar_range() -> None:
    counts = count_by_month([_year_table(2013, [1, 13, 99, 12])])

    assert counts["MONTH"].tolist() == [1, 12]
    assert counts["n"].sum() == 2


def test_count_by_month_does_not_modify_input_tables() -> None:
    table = _year_table(2013, [2, 99])
    before = table.copy()

    count_by_month([table])

    pd.testing.assert_frame_equal(table, before)


def test_pivot_month_counts_zero_fills_all_twelve_months() -> None:
    counts = count_by_month([_year_table(2013, [2, 2, 7])])

    table = pivot_month_counts(counts)

    assert table.columns.tolist() == ["MONTH", "2013"]
    assert table["MONTH"].tolist() == list(range(1, 13))
    assert table["2013"].tolist() == [0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0]
    assert table["2013"].dtype == "int64"


def test_pivot_month_counts_orders_year_columns_numerically() -> None:
    table = summarize_tables([
        _year_table(2015, [1]),
        _year_table(999, [1]),
        _year_table(2013, [1]),
    ])

    assert table.columns.tolist() == ["MONTH", "999", "2013", "2015"]


def test_pivot_month_counts_adds_zero_columns_for_requested_years() -> None:
    counts = count_by_month([_year_table(2013, [5])])

    table = pivot_month_counts(counts, zero_years=[2012, 2013])

    assert table.columns.tolist() == ["MONTH", "2012", "2013"]
    assert table["2012"].tolist() == [0] * 12
    assert table["2013"].sum() == 1


def test_summarize_tables_without_data_keeps_month_rows() -> None:
    table = summarize_tables([])

    assert table.columns.tolist() == ["MONTH"]
    assert table["MONTH"].tolist() == list(range(1, 13))
