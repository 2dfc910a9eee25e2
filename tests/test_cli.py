from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd
import pytest

import fars.cli as cli
from fars.utils.logging import JsonFormatter


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda *args, **kwargs: None)


def test_summarize_prints_month_table(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--data-dir", str(data_dir), "summarize", "--years", "2013", "2014"])

    out = capsys.readouterr().out
    header = out.splitlines()[0].split()
    assert header == ["MONTH", "2013", "2014"]
    assert len(out.strip().splitlines()) == 13


def test_summarize_writes_csv_and_skips_missing_year(data_dir: Path, tmp_path: Path) -> None:
    out_path = tmp_path / "summary.csv"

    with pytest.warns(UserWarning, match="invalid year: 2012"):
        cli.main([
            "--data-dir", str(data_dir),
            "summarize", "--years", "2012", "2013",
            "--fill-missing", "--output", str(out_path),
        ])

    written = pd.read_csv(out_path)
    assert written.columns.tolist() == ["MONTH", "2012", "2013"]
    assert written["2012"].sum() == 0
    assert written["2013"].sum() == 8


def test_summarize_exits_when_no_year_has_data(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.warns(UserWarning), pytest.raises(SystemExit) as exc_info:
        cli.main(["--data-dir", str(data_dir), "summarize", "--years", "2011"])

    assert exc_info.value.code == 1
    assert "No accident data found" in capsys.readouterr().err


def test_summarize_prints_zero_column_for_year_without_accidents(
    data_dir: Path, write_year, capsys: pytest.CaptureFixture[str]
) -> None:
    write_year(2015, [])

    cli.main(["--data-dir", str(data_dir), "summarize", "--years", "2015"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["MONTH", "2015"]
    assert [line.split()[1] for line in lines[1:]] == ["0"] * 12


def test_map_exits_with_error_for_unknown_state(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--data-dir", str(data_dir), "map", "--state", "70", "--year", "2013"])

    assert exc_info.value.code == 1
    assert "invalid STATE number: 70" in capsys.readouterr().err


def test_map_exits_with_error_for_missing_year(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--data-dir", str(data_dir), "map", "--state", "1", "--year", "2012"])

    assert exc_info.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_map_writes_default_html_file(
    data_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    cli.main(["--data-dir", str(data_dir), "map", "--state", "6", "--year", "2013"])

    assert (tmp_path / "state_6_2013.html").exists()


def test_map_accepts_decimal_state_code(
    data_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    cli.main(["--data-dir", str(data_dir), "map", "--state", "6.0", "--year", "2013"])

    assert (tmp_path / "state_6_2013.html").exists()


def test_map_exits_with_error_for_non_numeric_state(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--data-dir", str(data_dir), "map", "--state", "AL", "--year", "2013"])

    assert exc_info.value.code == 1
    assert "Invalid STATE number" in capsys.readouterr().err


def test_json_formatter_merges_extra_fields() -> None:
    record = logging.LogRecord(
        name="fars.data.years",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Could not load year %s",
        args=(2012,),
        exc_info=None,
    )
    record.year = "2012"
    record.reason = "file 'accident_2012.csv.bz2' does not exist"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "Could not load year 2012"
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "fars.data.years"
    assert payload["year"] == "2012"
    assert payload["reason"] == "file 'accident_2012.csv.bz2' does not exist"
    assert "lineno" not in payload


def test_configure_logging_installs_single_handler() -> None:
    from fars.utils.logging import configure_logging

    fars_logger = logging.getLogger("fars")
    saved_level = fars_logger.level
    try:
        configure_logging("DEBUG", json_output=True)
        handler = configure_logging("INFO", json_output=True)

        installed = [h for h in fars_logger.handlers if h.get_name() == "fars"]
        assert installed == [handler]
        assert isinstance(handler.formatter, JsonFormatter)
        assert fars_logger.level == logging.INFO
    finally:
        logging.captureWarnings(False)
        for name in ("fars", "py.warnings"):
            logger = logging.getLogger(name)
            logger.handlers = [h for h in logger.handlers if h.get_name() != "fars"]
        fars_logger.setLevel(saved_level)
