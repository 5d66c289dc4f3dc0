"""Ordered pipeline of electronize stages."""

from __future__ import annotations

from .base import BaseStage, StageResult
from .registry import StageRegistry
from .runner import PipelineResult, run_pipeline

__all__ = [
    "BaseStage",
    "PipelineResult",
    "StageRegistry",
    "StageResult",
    "run_pipeline",
]
