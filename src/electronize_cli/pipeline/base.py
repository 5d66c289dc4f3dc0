"""Base class and result type for pipeline stages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from electronize_cli.core.config import ElectronizeConfig
from electronize_cli.engine.guarded_write import WriteResult


@dataclass
class StageResult:
    """Result of running one stage.

    A ``fatal`` result halts the pipeline. Non-fatal ``errors`` are recorded
    and the pipeline continues.
    """

    success: bool
    fatal: bool = False
    changes_made: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    artifacts: list[WriteResult] = field(default_factory=list)

    @classmethod
    def fatal_error(cls, message: str) -> "StageResult":
        return cls(success=False, fatal=True, errors=[message])

    def record(self, write: WriteResult, root: Path) -> WriteResult:
        """Add a write outcome as a one-line status."""
        self.artifacts.append(write)
        try:
            label = write.path.relative_to(root).as_posix()
        except ValueError:
            label = str(write.path)
        self.changes_made.append(f"{write.status.value.capitalize()}: {label}")
        if write.failed:
            self.success = False
            self.errors.append(f"Failed to write {label}: {write.reason}")
        elif write.reason:
            self.warnings.append(f"{label}: {write.reason}")
        return write


class BaseStage(ABC):
    """A named, ordered step of the electronize pipeline."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    order: ClassVar[int] = 0
    # Stages that only run when every earlier stage finished without errors.
    requires_clean_run: ClassVar[bool] = False

    @abstractmethod
    def run(self, config: ElectronizeConfig) -> StageResult:
        """Execute the stage against ``config.root_directory``."""

    def should_run(self, config: ElectronizeConfig) -> tuple[bool, str]:
        """Return (True, "") when the stage applies to this run."""
        return True, ""


__all__ = ["BaseStage", "StageResult"]
