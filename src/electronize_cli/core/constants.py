"""Shared path constants for the electronized project layout."""

from __future__ import annotations

TOOL_NAME = "electronize"
BACKUP_SUFFIX = f".bak-{TOOL_NAME}"
CONFIG_FILENAME = f".{TOOL_NAME}.yaml"

SRC_DIR = "src"
UI_DIR = "ui"
ELECTRON_DIR = "electron"
PUBLIC_DIR = "public"

INDEX_HTML = "index.html"
PACKAGE_JSON = "package.json"
TSCONFIG_ELECTRON = "tsconfig.electron.json"
VITE_ELECTRON_CONFIG = "vite.electron.config.ts"
VITE_RENDERER_CONFIG = "vite.renderer.config.ts"
ELECTRON_BUILDER_YML = "electron-builder.yml"

PACKAGE_MANAGERS = ("npm", "pnpm", "yarn", "bun")

__all__ = [
    "TOOL_NAME",
    "BACKUP_SUFFIX",
    "CONFIG_FILENAME",
    "SRC_DIR",
    "UI_DIR",
    "ELECTRON_DIR",
    "PUBLIC_DIR",
    "INDEX_HTML",
    "PACKAGE_JSON",
    "TSCONFIG_ELECTRON",
    "VITE_ELECTRON_CONFIG",
    "VITE_RENDERER_CONFIG",
    "ELECTRON_BUILDER_YML",
    "PACKAGE_MANAGERS",
]
