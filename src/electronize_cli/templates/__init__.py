"""Generated file payloads."""

from __future__ import annotations

from .content import (
    DESIRED_DEV_DEPENDENCIES,
    DESIRED_SCRIPTS,
    MAIN_TS,
    PLACEHOLDER_ICON,
    PRELOAD_TS,
    VITE_ELECTRON_CONFIG,
    VITE_RENDERER_CONFIG,
    render_electron_builder,
    render_index_html,
    render_tsconfig_electron,
)

__all__ = [
    "DESIRED_DEV_DEPENDENCIES",
    "DESIRED_SCRIPTS",
    "MAIN_TS",
    "PLACEHOLDER_ICON",
    "PRELOAD_TS",
    "VITE_ELECTRON_CONFIG",
    "VITE_RENDERER_CONFIG",
    "render_electron_builder",
    "render_index_html",
    "render_tsconfig_electron",
]
