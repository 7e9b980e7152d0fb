"""Tests for the findr command line."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from findr import __version__
from findr.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_runs_finder_with_cli_settings(tmp_path):
    with patch("findr.ui.finder_app.run_finder") as run_finder:
        result = runner.invoke(app, ["--root", str(tmp_path), "--debounce-ms", "100", "-v"])

    assert result.exit_code == 0
    settings = run_finder.call_args.args[0]
    assert settings.root == Path(tmp_path)
    assert settings.debounce_seconds == 0.1
    assert settings.log_level == "DEBUG"


def test_defaults_to_current_directory():
    with patch("findr.ui.finder_app.run_finder") as run_finder:
        result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert run_finder.call_args.args[0].root == Path(".")


def test_invalid_environment_exits_with_error(monkeypatch):
    monkeypatch.setenv("FINDR_MAX_WORKERS", "0")
    with patch("findr.ui.finder_app.run_finder") as run_finder:
        result = runner.invoke(app, [])

    assert result.exit_code == 1
    run_finder.assert_not_called()


def test_negative_debounce_exits_with_error():
    with patch("findr.ui.finder_app.run_finder") as run_finder:
        result = runner.invoke(app, ["--debounce-ms=-5"])

    assert result.exit_code == 1
    run_finder.assert_not_called()


def test_ui_failure_exits_with_error():
    with patch("findr.ui.finder_app.run_finder", side_effect=RuntimeError("no terminal")):
        result = runner.invoke(app, [])
    assert result.exit_code == 1
