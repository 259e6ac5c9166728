"""Shared fixtures for shell-colors tests."""

import pytest
import typer
from typer.testing import CliRunner

from shell_colors.cli.app import MODE_ENVVAR, create_app
from shell_colors.core.table import NAMED_COLORS


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CLI runner with no color depth inherited from the environment."""
    monkeypatch.delenv(MODE_ENVVAR, raising=False)
    return CliRunner()


@pytest.fixture
def app() -> typer.Typer:
    return create_app()


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize tests that take a table entry over the whole table."""
    if "named_color" in metafunc.fixturenames:
        metafunc.parametrize("named_color", NAMED_COLORS, ids=lambda c: c.name)
