"""Tests for the shell-colors command line."""

import io
import logging
import sys
from collections.abc import Iterator

import pytest
import typer
from typer.testing import CliRunner

import shell_colors.cli.app as app_module
from shell_colors.cli.app import MODE_ENVVAR, format_value, setup_logging, swatch_style
from shell_colors.core.color import Color


class TestDescribe:
    """Tests for the describe command."""

    def test_named(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "red"])
        assert result.exit_code == 0
        assert "red: named(1: red) -> 1" in result.output

    def test_rgb_default_true_color(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "#f3a035"])
        assert result.exit_code == 0
        assert "rgb(0xf3a035) -> 243,160,53" in result.output

    def test_mode_option(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "--mode", "256", "#f3a035"])
        assert result.exit_code == 0
        assert "-> 215" in result.output

    def test_mode_from_environment(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "#ff0000"], env={MODE_ENVVAR: "16"})
        assert result.exit_code == 0
        assert "-> 9" in result.output

    def test_special(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "normal", "reset"])
        assert result.exit_code == 0
        assert "normal: normal" in result.output
        assert "reset: reset" in result.output
        assert "->" not in result.output

    def test_unknown_spec(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "zz", "red"])
        assert result.exit_code == 1
        assert "Unknown color 'zz'" in result.output
        assert "named(1: red)" in result.output

    def test_bad_mode(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["describe", "--mode", "88", "red"])
        assert result.exit_code != 0


class TestPrintColors:
    """Tests for the print-colors command."""

    def test_visible(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["print-colors"])
        assert result.exit_code == 0
        lines = result.output.split()
        assert lines[0] == "black"
        assert lines[-1] == "normal"
        assert "brown" not in lines

    def test_all(self, runner: CliRunner, app: typer.Typer) -> None:
        result = runner.invoke(app, ["print-colors", "--all"])
        assert result.exit_code == 0
        lines = result.output.split()
        assert "brown" in lines
        assert "normal" not in lines
        assert len(lines) == 22


class TestHelpers:
    """Tests for output helpers."""

    def test_format_value(self) -> None:
        assert format_value(9) == "9"
        assert format_value((1, 2, 3)) == "1,2,3"

    def test_swatch_style(self) -> None:
        assert swatch_style(Color.normal()) is None
        assert swatch_style(Color.parse("red")) is not None
        assert swatch_style(Color.parse("#123456")) is not None


class TestSetupLogging:
    """Tests for CLI logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self) -> Iterator[None]:
        root_logger = logging.getLogger()
        level = root_logger.level
        yield
        if app_module._log_handler is not None:
            root_logger.removeHandler(app_module._log_handler)
            app_module._log_handler = None
        root_logger.setLevel(level)

    def test_levels(self) -> None:
        setup_logging(0)
        assert logging.getLogger().level == logging.WARNING
        setup_logging(1)
        assert logging.getLogger().level == logging.INFO
        setup_logging(3)
        assert logging.getLogger().level == logging.DEBUG

    def test_follows_current_stderr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first, second = io.StringIO(), io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        setup_logging(0)
        monkeypatch.setattr(sys, "stderr", second)
        setup_logging(0)

        logging.getLogger("shell_colors.test").warning("where does this go")

        assert "where does this go" in second.getvalue()
        assert "where does this go" not in first.getvalue()
        ours = [h for h in logging.getLogger().handlers if h is app_module._log_handler]
        assert len(ours) == 1

