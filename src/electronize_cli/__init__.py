"""
electronize - turn a Vite + React project into a Vite + React + Electron app.

Usage:
    electronize apply
    electronize apply --install
    electronize apply --force
    electronize restore
"""

import sys

import typer
from rich.align import Align
from typer.core import TyperGroup

from electronize_cli.cli.commands import register_commands
from electronize_cli.cli.helpers import console, show_banner

__version__ = "0.1.0"


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="electronize",
    help="Convert a Vite + React project into an Electron desktop app without losing existing files",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


@app.callback()
def callback(ctx: typer.Context):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'electronize --help' for usage information[/dim]"))
        console.print()


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
