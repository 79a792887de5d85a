"""Shared pytest fixtures for exprcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from exprcalc.core.expression_lang import Calculator


@pytest.fixture
def calculator() -> Calculator:
    """Return a calculator with the built-in tables."""
    return Calculator()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a [repl] table to a TOML file."""

    def _write(body: str) -> Path:
        path = tmp_path / "exprcalc.toml"
        path.write_text("[repl]\n" + body)
        return path

    return _write
