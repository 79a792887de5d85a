"""
Interactive read-evaluate-print loop.

Reads one expression per line, prints its value or the error, and keeps going
until end of input, Ctrl-C, or a quit command.
"""

from __future__ import annotations

import logging

from rich.console import Console

from exprcalc.cli.utils import format_error, format_number
from exprcalc.core.config import ReplConfig
from exprcalc.core.errors import ExprCalcError
from exprcalc.core.expression_lang import Calculator

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit"})


def run_line(calculator: Calculator, line: str, config: ReplConfig, console: Console) -> bool:
    """Evaluate one expression and print the outcome.

    Returns:
        True if the expression evaluated, False if an error was printed.
    """
    try:
        expr = calculator.parse(line)
        if config.show_tree:
            console.print(str(expr), markup=False, highlight=False, soft_wrap=True)
        value = calculator.evaluate(expr)
    except ExprCalcError as e:
        logger.debug("failed to evaluate %r: %r", line, e)
        console.print(format_error(e, line), highlight=False, soft_wrap=True)
        return False

    console.print(format_number(value, config.precision), markup=False, highlight=False, soft_wrap=True)
    return True


def _enable_history() -> None:
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline is not available; line editing disabled")


def run_repl(calculator: Calculator, config: ReplConfig, console: Console) -> None:
    """Run the interactive loop until end of input or a quit command."""
    if config.history:
        _enable_history()

    while True:
        try:
            line = console.input(config.prompt, markup=False)
        except EOFError:
            console.print("CTRL-D")
            break
        except KeyboardInterrupt:
            console.print("CTRL-C")
            break

        line = line.strip()
        if not line:
            continue
        if line in QUIT_COMMANDS:
            break
        run_line(calculator, line, config, console)
