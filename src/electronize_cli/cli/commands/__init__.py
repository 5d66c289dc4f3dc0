"""CLI command modules for electronize."""

from __future__ import annotations

import typer

from .apply_cmd import apply
from .restore_cmd import restore
from .stages_cmd import stages


def register_commands(app: typer.Typer) -> None:
    """Attach every command to *app*."""
    app.command()(apply)
    app.command()(restore)
    app.command()(stages)


__all__ = ["apply", "register_commands", "restore", "stages"]
