"""
exprcalc CLI utilities.

Shared helpers used across CLI modules: version display, logging setup and
result/error formatting.
"""

from __future__ import annotations

import logging
import math
import platform

import typer
from rich.markup import escape

from exprcalc._version import get_version
from exprcalc.core.errors import ExprCalcError


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()
        typer.echo(f"exprcalc {get_version()}")
        typer.echo(f"Python {python_version} ({python_impl})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr: DEBUG with --verbose, otherwise WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def format_number(value: float, precision: int | None = None) -> str:
    """Format a result for display.

    Integral values print without a fraction (``3`` not ``3.0``), infinities
    as ``inf``/``-inf`` and NaN as ``NaN``. With ``precision`` the value is
    printed with that many significant digits.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if precision is not None:
        return f"{value:.{precision}g}"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_error(error: ExprCalcError, source: str) -> str:
    """Render an error as rich markup, with a caret under the bad column."""
    lines = [f"[red]{escape(str(error))}[/red]"]
    context = error.context(source)
    if context is not None:
        lines.append(f"[dim]{escape(context.format())}[/dim]")
    return "\n".join(lines)
