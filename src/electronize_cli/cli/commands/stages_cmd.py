"""List the pipeline stages in execution order."""

from __future__ import annotations

from rich.table import Table

from electronize_cli.cli.helpers import console


def stages() -> None:
    """Show the stages ``electronize apply`` runs, in order."""
    # Import stages so they register themselves
    from electronize_cli.pipeline import stages as _stages  # noqa: F401
    from electronize_cli.pipeline.registry import StageRegistry

    table = Table(title="Electronize Pipeline", header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Stage", style="bright_white", no_wrap=True)
    table.add_column("Description", style="dim")

    for index, stage in enumerate(StageRegistry.get_all(), start=1):
        table.add_row(str(index), stage.name, stage.description)

    console.print(table)


__all__ = ["stages"]
