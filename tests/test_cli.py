"""Tests for the timenow CLI handlers and entry point."""

import io
import sys

import pytest

from timenow import config
from timenow.main import main
from timenow.profile import run_set_command
from timenow.zone_cmd import run_detect_command, run_list_command, run_resolve_command


def _capture_stdout(fn, *args):
    old = sys.stdout
    sys.stdout = buf = io.StringIO()
    try:
        fn(*args)
    finally:
        sys.stdout = old
    return buf.getvalue()


def _run_main(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["timenow", *argv])
    return _capture_stdout(main)


def test_resolve_prints_identifier():
    assert _capture_stdout(run_resolve_command, ["new", "york"]) == "America/New_York\n"


def test_resolve_failure_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_resolve_command(["Nonexistent_Place_Xyz123"])

    assert exc_info.value.code == 1
    assert "Nonexistent_Place_Xyz123" in capsys.readouterr().err


def test_detect_prints_option():
    config.set_option("Asia/Tokyo")

    assert _capture_stdout(run_detect_command, ["-q"]) == "Asia/Tokyo\n"


def test_list_filters_case_insensitively():
    output = _capture_stdout(run_list_command, ["perth"])

    assert output.splitlines() == ["Australia/Perth"]


def test_list_without_pattern_prints_catalog():
    output = _capture_stdout(run_list_command, [])

    assert "America/New_York" in output.splitlines()
    assert len(output.splitlines()) > 300


def test_list_no_match_exits():
    with pytest.raises(SystemExit):
        _capture_stdout(run_list_command, ["zzzzzz"])


def test_set_writes_profile_and_shows_time(profile_file):
    output = _capture_stdout(run_set_command, ["Perth", "Australia"])

    assert "R_TIMENOW_TZ=Australia/Perth" in output
    assert "(Australia/Perth)" in output
    assert profile_file.read_text() == "R_TIMENOW_TZ=Australia/Perth\n"


def test_set_unresolved_exits(profile_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_set_command(["Nonexistent_Place_Xyz123"])

    assert exc_info.value.code == 1
    assert not profile_file.exists()


def test_main_shows_resolved_time(monkeypatch):
    output = _run_main(monkeypatch, "tokyo")

    lines = output.splitlines()
    assert lines[0].endswith("(UTC)")
    assert lines[1].endswith("(Asia/Tokyo)")
    assert lines[2] == "+9h from UTC"


def test_main_uses_detection_without_tz(monkeypatch):
    config.set_option("Europe/London")

    output = _run_main(monkeypatch, "-q")

    assert "(Europe/London)" in output


def test_main_help(monkeypatch):
    output = _run_main(monkeypatch, "help")

    assert "R_TIMENOW_TZ" in output
    assert "detection order" in output


def test_main_routes_subcommands(monkeypatch):
    assert _run_main(monkeypatch, "resolve", "Perth") == "Australia/Perth\n"


def test_main_unresolved_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["timenow", "Nonexistent_Place_Xyz123"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
