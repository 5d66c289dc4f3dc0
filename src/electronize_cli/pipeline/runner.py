"""Run the registered stages in order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from electronize_cli.core.config import ElectronizeConfig

from .base import BaseStage, StageResult
from .registry import StageRegistry

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a pipeline run."""

    results: dict[str, StageResult] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)
    halted_at: str | None = None

    @property
    def success(self) -> bool:
        return self.halted_at is None and all(r.success for r in self.results.values())

    @property
    def warnings(self) -> list[str]:
        return [w for r in self.results.values() for w in r.warnings]

    @property
    def errors(self) -> list[str]:
        return [e for r in self.results.values() for e in r.errors]

    def to_dict(self) -> dict[str, object]:
        return {
            "status": "success" if self.success else "failed",
            "halted_at": self.halted_at,
            "stages": [
                {
                    "name": name,
                    "success": result.success,
                    "fatal": result.fatal,
                    "changes": result.changes_made,
                    "warnings": result.warnings,
                    "errors": result.errors,
                }
                for name, result in self.results.items()
            ],
            "skipped": self.skipped,
            "warnings": self.warnings,
            "errors": self.errors,
        }


def run_pipeline(
    config: ElectronizeConfig,
    stages: Sequence[BaseStage] | None = None,
) -> PipelineResult:
    """Run *stages* (default: every registered stage) against *config*.

    Stops at the first fatal result. Stages marked ``requires_clean_run``
    are skipped when an earlier stage reported errors.
    """
    if stages is None:
        # Import stages so they register themselves
        from electronize_cli.pipeline import stages as _stages  # noqa: F401

        stages = StageRegistry.get_all()

    outcome = PipelineResult()
    for stage in stages:
        applies, reason = stage.should_run(config)
        if not applies:
            outcome.skipped[stage.name] = reason
            logger.debug("Skipping %s: %s", stage.name, reason)
            continue

        if stage.requires_clean_run and outcome.errors:
            outcome.skipped[stage.name] = "Earlier stages reported errors"
            logger.warning("Skipping %s because earlier stages reported errors", stage.name)
            continue

        logger.info("Running stage %s", stage.name)
        result = stage.run(config)
        outcome.results[stage.name] = result
        if result.fatal:
            outcome.halted_at = stage.name
            logger.error("Stage %s failed: %s", stage.name, "; ".join(result.errors))
            break

    return outcome


__all__ = ["PipelineResult", "run_pipeline"]
