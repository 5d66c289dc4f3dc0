"""Console and logging helpers shared by CLI commands."""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

console = Console()
# Log records go to stderr; stdout carries only command output.
err_console = Console(stderr=True)

TAGLINE = "electronize - turn a Vite + React project into an Electron app"


def show_banner() -> None:
    """Display the tool name and tagline."""
    console.print(Align.center(Text("electronize", style="bold bright_cyan")))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through rich when *verbose*.

    Without ``--verbose`` the stage results already carry every warning and
    error, so library records are dropped.
    """
    package_logger = logging.getLogger("electronize_cli")
    package_logger.propagate = False
    if verbose:
        package_logger.handlers = [RichHandler(console=err_console, show_time=False, markup=False)]
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.handlers = [logging.NullHandler()]
        package_logger.setLevel(logging.WARNING)


__all__ = ["TAGLINE", "configure_logging", "console", "err_console", "show_banner"]
