"""
exprcalc CLI package.

- repl.py: interactive read-evaluate-print loop
- utils.py: version display, logging setup, result formatting

Running ``exprcalc`` with no command starts the interactive shell.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exprcalc._version import get_version
from exprcalc.cli.repl import run_line, run_repl
from exprcalc.cli.utils import configure_logging, version_callback
from exprcalc.core.config import ReplConfig, load_repl_config
from exprcalc.core.errors import ConfigError
from exprcalc.core.expression_lang import Calculator
from exprcalc.core.expression_lang.functions import list_constants, list_functions

__version__ = get_version()

app = typer.Typer(
    help="""exprcalc – arithmetic expression evaluator

Operators (low to high): + -, then * / % ^ (same tier, left to right),
then unary -. Functions: see 'exprcalc functions'. Constants: pi, e.
""",
    invoke_without_command=True,
)

console = Console()


def _config(ctx: typer.Context) -> ReplConfig:
    """Settings resolved by the main callback, or defaults if it did not run."""
    return ctx.ensure_object(ReplConfig)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    precision: int | None = typer.Option(
        None,
        "--precision",
        "-p",
        min=1,
        max=17,
        help="Significant digits for results (default: shortest exact form)",
    ),
    show_tree: bool | None = typer.Option(
        None,
        "--show-tree/--no-show-tree",
        help="Print the parsed expression tree before each result",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML file with a [repl] table of settings",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
) -> None:
    """exprcalc main callback for global options."""
    configure_logging(verbose)
    try:
        config = load_repl_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(2)
    ctx.obj = config.with_overrides(precision=precision, show_tree=show_tree)

    if ctx.invoked_subcommand is None:
        run_repl(Calculator(), ctx.obj, console)


@app.command(name="repl")
def repl_command(ctx: typer.Context) -> None:
    """Start the interactive shell (the default command)."""
    run_repl(Calculator(), _config(ctx), console)


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expressions: list[str] = typer.Argument(..., help="Expressions to evaluate"),
) -> None:
    """Evaluate expressions and print one result per line."""
    calculator = Calculator()
    config = _config(ctx)
    failed = 0
    for expression in expressions:
        if not run_line(calculator, expression, config, console):
            failed += 1
    if failed:
        raise typer.Exit(1)


@app.command(name="functions")
def functions_command() -> None:
    """List built-in functions and constants."""
    table = Table(title="Functions")
    table.add_column("Name", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")
    for spec in list_functions():
        table.add_row(spec.name, spec.arity, spec.summary)
    console.print(table)

    constants = Table(title="Constants")
    constants.add_column("Name", style="cyan")
    constants.add_column("Value")
    for name, value in list_constants().items():
        constants.add_row(name, repr(value))
    console.print(constants)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
