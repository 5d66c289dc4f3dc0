"""Restore package.json from the backup taken by ``electronize apply``."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from electronize_cli.cli.helpers import configure_logging, console
from electronize_cli.core.constants import BACKUP_SUFFIX, PACKAGE_JSON
from electronize_cli.engine.guarded_write import WriteStatus
from electronize_cli.engine.manifest import restore_manifest
from electronize_cli.errors import ManifestNotFoundError


def restore(
    path: Path = typer.Option(
        Path("."), "--path", "-p", help="Project root (defaults to the current directory)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed log output"),
) -> None:
    """Restore package.json from package.json.bak-electronize.

    Generated files and the src/ui move are left as they are; only the
    manifest is reverted.
    """
    configure_logging(verbose)
    manifest = path.resolve() / PACKAGE_JSON

    if not yes:
        confirmed = typer.confirm(f"Overwrite {PACKAGE_JSON} with {PACKAGE_JSON}{BACKUP_SUFFIX}?")
        if not confirmed:
            raise typer.Abort()

    try:
        result = restore_manifest(manifest)
    except ManifestNotFoundError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if result.status is WriteStatus.FAILED:
        console.print(f"[red]Error:[/red] Could not restore {PACKAGE_JSON}: {escape(result.reason or '')}")
        raise typer.Exit(1)
    if result.status is WriteStatus.UNCHANGED:
        console.print(f"[dim]{PACKAGE_JSON} already matches the backup.[/dim]")
        return
    console.print(f"[green]Restored {PACKAGE_JSON} from {PACKAGE_JSON}{BACKUP_SUFFIX}.[/green]")


__all__ = ["restore"]
