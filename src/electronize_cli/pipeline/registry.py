"""Stage registry for the electronize pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Type

if TYPE_CHECKING:
    from .base import BaseStage


class StageRegistry:
    """Registry of all pipeline stages, ordered by ``order``."""

    _stages: Dict[str, Type["BaseStage"]] = {}

    @classmethod
    def register(cls, stage_class: Type["BaseStage"]) -> Type["BaseStage"]:
        """Decorator to register a stage class.

        Args:
            stage_class: The stage class to register

        Returns:
            The same stage class (for decorator use)

        Raises:
            ValueError: If name is not set or already taken by another class
        """
        if not stage_class.name:
            raise ValueError(f"Stage {stage_class.__name__} must have a name")
        existing = cls._stages.get(stage_class.name)
        if existing is not None and existing is not stage_class:
            raise ValueError(
                f"Stage name '{stage_class.name}' is already registered by {existing.__name__}"
            )
        cls._stages[stage_class.name] = stage_class
        return stage_class

    @classmethod
    def get_all(cls) -> List["BaseStage"]:
        """Get all stages as instances, in pipeline order."""
        instances = [s() for s in cls._stages.values()]
        return sorted(instances, key=lambda s: (s.order, s.name))

    @classmethod
    def get_by_name(cls, name: str) -> "BaseStage | None":
        stage_class = cls._stages.get(name)
        return stage_class() if stage_class else None

    @classmethod
    def clear(cls) -> None:
        """Clear all registered stages (for testing)."""
        cls._stages.clear()


__all__ = ["StageRegistry"]
