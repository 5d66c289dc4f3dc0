"""Apply command: electronize the project in the current directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from electronize_cli.cli.helpers import configure_logging, console, show_banner
from electronize_cli.core.config import build_config
from electronize_cli.errors import ConfigError
from electronize_cli.pipeline import PipelineResult, run_pipeline
from electronize_cli.toolchain import check_node_version

NEXT_STEPS = """[bold]Next steps:[/bold]
  • Development (recommended):
      npm run dev
    (this runs Vite renderer and Electron together)

  • If Vite dev server uses a different port, set:
      cross-env VITE_DEV_SERVER_URL=http://localhost:5173 npm run dev

  • Production:
      npm run build
      npm run electron:build
      npm run package

  • If you want to revert package.json changes:
      electronize restore"""


def _print_result(result: PipelineResult) -> None:
    for name, stage_result in result.results.items():
        console.print(f"[cyan]›[/cyan] [bold]{name}[/bold]")
        for line in stage_result.changes_made:
            style = "dim" if line.startswith("Unchanged") else "white"
            console.print(f"    [{style}]{escape(line)}[/{style}]")
        for warning in stage_result.warnings:
            console.print(f"    [yellow]⚠ {escape(warning)}[/yellow]")
        for error in stage_result.errors:
            console.print(f"    [red]✗ {escape(error)}[/red]")

    for name, reason in result.skipped.items():
        console.print(f"[dim]○ {name}: {escape(reason)}[/dim]")


def apply(
    install: Optional[bool] = typer.Option(
        None, "--install/--no-install", help="Install devDependencies after all files are written"
    ),
    force: Optional[bool] = typer.Option(
        None, "--force/--no-force", help="Rewrite generated files even when unchanged"
    ),
    path: Path = typer.Option(
        Path("."), "--path", "-p", help="Project root (defaults to the current directory)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed log output"),
) -> None:
    """Convert a Vite + React project into a Vite + React + Electron project.

    Existing files are never lost: overwritten files are backed up to
    <file>.bak-electronize and conflicting package.json scripts are kept
    under scripts._backup_<name>. Running the command again is safe.

    Examples:
        electronize apply              # Create files and patch config
        electronize apply --install    # ...then run npm install
        electronize apply --force      # Rewrite generated files
    """
    configure_logging(verbose)

    try:
        config = build_config(path, force=force, install=install)
    except ConfigError as exc:
        if json_output:
            typer.echo(json.dumps({"status": "failed", "errors": [str(exc)]}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if not json_output:
        show_banner()
        node_warning = check_node_version()
        if node_warning:
            console.print(f"[yellow]⚠ {node_warning}[/yellow]")
        console.print(f"[cyan]Project:[/cyan] {config.root_directory}")
        console.print()

    result = run_pipeline(config)

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        if not result.success:
            raise typer.Exit(1)
        return

    _print_result(result)
    console.print()

    if result.halted_at is not None:
        console.print(
            Panel(
                escape("\n".join(result.errors)) or "Unknown failure",
                title=f"[red]Stopped at {result.halted_at}[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(1)

    if not result.success:
        console.print("[bold red]Electronization finished with errors.[/bold red]")
        raise typer.Exit(1)

    console.print("[bold green]✅ Electronization complete![/bold green]")
    console.print()
    console.print(NEXT_STEPS)


__all__ = ["apply"]
