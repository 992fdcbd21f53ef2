"""
Terminal output helpers.

Command output goes to ``console`` (stdout); errors and warnings go to
``err_console`` (stderr). Handlers call the functions below instead of
holding their own console reference, so both consoles can be swapped out
in one place.
"""

import logging
import time
from typing import Callable

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

logger = logging.getLogger(__name__)


def configure_console(no_color: bool = False):
    """Apply the --no-color setting to both consoles."""
    console.no_color = no_color
    err_console.no_color = no_color


def handle_error(error: BaseException):
    """Report an error to the user."""
    logger.debug(f"Reporting {type(error).__name__}: {error}")
    error_message(str(error))


def error_message(message: str):
    err_console.print(f"[bold red]Error![/bold red] {escape(message)}")


def warn(message: str):
    err_console.print(f"[yellow]WARN![/yellow] {escape(message)}")


def success(message: str):
    console.print(f"[green]Success![/green] {message}")


def log(message: str):
    console.print(f"[dim]>[/dim] {message}")


def show(*objects):
    console.print(*objects)


def stamp() -> Callable[[], str]:
    """Start a timer; calling the result returns the elapsed time as ``[123ms]``."""
    start = time.monotonic()

    def elapsed() -> str:
        ms = int((time.monotonic() - start) * 1000)
        if ms >= 1000:
            return f"[{ms / 1000:.1f}s]"
        return f"[{ms}ms]"

    return elapsed
