"""Core configuration and layout constants."""

from __future__ import annotations

from .config import ElectronizeConfig, ProjectSettings, build_config, load_project_settings
from .constants import BACKUP_SUFFIX, TOOL_NAME

__all__ = [
    "BACKUP_SUFFIX",
    "TOOL_NAME",
    "ElectronizeConfig",
    "ProjectSettings",
    "build_config",
    "load_project_settings",
]
