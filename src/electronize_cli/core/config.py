"""Run configuration for electronize.

The CLI builds one :class:`ElectronizeConfig` per invocation and hands it to
every pipeline stage. Stages never read the working directory or the
environment themselves.

Project-level defaults may be stored in ``.electronize.yaml`` at the project
root::

    force_overwrite: false
    auto_install: true
    package_manager: pnpm
    exclude:
      - electron
      - workers
    product_name: MyApp
    app_id: com.example.myapp
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

from electronize_cli.core.constants import (
    CONFIG_FILENAME,
    ELECTRON_DIR,
    INDEX_HTML,
    PACKAGE_JSON,
    PACKAGE_MANAGERS,
    PUBLIC_DIR,
    SRC_DIR,
    UI_DIR,
)
from electronize_cli.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "ElectronizedReactApp"
DEFAULT_APP_ID = "com.react.electron.app"


@dataclass(frozen=True)
class ElectronizeConfig:
    """Immutable settings for one electronize run.

    Attributes:
        root_directory: Project root containing ``src/`` and ``package.json``.
        force_overwrite: Rewrite generated artifacts even when unchanged.
        auto_install: Run the package manager install after all writes.
        package_manager: Executable used for the install step.
        exclude: Names under ``src/`` that stay in place during relocation.
        product_name: ``productName`` written to electron-builder.yml.
        app_id: ``appId`` written to electron-builder.yml.
    """

    root_directory: Path
    force_overwrite: bool = False
    auto_install: bool = False
    package_manager: str = "npm"
    exclude: tuple[str, ...] = (ELECTRON_DIR,)
    product_name: str = DEFAULT_PRODUCT_NAME
    app_id: str = DEFAULT_APP_ID

    @property
    def src_dir(self) -> Path:
        return self.root_directory / SRC_DIR

    @property
    def ui_dir(self) -> Path:
        return self.src_dir / UI_DIR

    @property
    def electron_dir(self) -> Path:
        return self.src_dir / ELECTRON_DIR

    @property
    def public_dir(self) -> Path:
        return self.root_directory / PUBLIC_DIR

    @property
    def index_html(self) -> Path:
        return self.root_directory / INDEX_HTML

    @property
    def package_json(self) -> Path:
        return self.root_directory / PACKAGE_JSON


@dataclass
class ProjectSettings:
    """Values read from ``.electronize.yaml``; ``None`` means not set."""

    force_overwrite: bool | None = None
    auto_install: bool | None = None
    package_manager: str | None = None
    exclude: list[str] = field(default_factory=list)
    product_name: str | None = None
    app_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ProjectSettings":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping")

        settings = cls()
        for key in ("force_overwrite", "auto_install"):
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, bool):
                raise ConfigError(f"Invalid {key} in {CONFIG_FILENAME}: expected true or false")
            setattr(settings, key, value)

        manager = data.get("package_manager")
        if manager is not None:
            if manager not in PACKAGE_MANAGERS:
                valid = ", ".join(PACKAGE_MANAGERS)
                raise ConfigError(
                    f"Unknown package_manager '{manager}' in {CONFIG_FILENAME}. Valid: {valid}"
                )
            settings.package_manager = str(manager)

        exclude = data.get("exclude")
        if isinstance(exclude, str):
            exclude = [exclude]
        if exclude is not None:
            if not isinstance(exclude, list) or not all(isinstance(e, str) for e in exclude):
                raise ConfigError(
                    f"Invalid exclude in {CONFIG_FILENAME}: expected a list of names"
                )
            settings.exclude = [e.strip("/") for e in exclude if e.strip("/")]

        for key in ("product_name", "app_id"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                setattr(settings, key, value.strip())

        return settings


def load_project_settings(root: Path) -> ProjectSettings:
    """Load ``.electronize.yaml`` from *root*, returning defaults when absent."""
    config_file = root / CONFIG_FILENAME
    if not config_file.exists():
        logger.debug("No %s in %s", CONFIG_FILENAME, root)
        return ProjectSettings()

    yaml = YAML(typ="safe")
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except Exception as exc:
        logger.error("Failed to load config: %s", exc)
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc

    return ProjectSettings.from_dict(data)


def build_config(
    root: Path,
    force: bool | None = None,
    install: bool | None = None,
) -> ElectronizeConfig:
    """Combine ``.electronize.yaml`` with command-line flags.

    Flags that are ``None`` fall back to the project file, then to defaults.
    """
    root = root.resolve()
    settings = load_project_settings(root)

    config = ElectronizeConfig(root_directory=root)
    if settings.force_overwrite is not None:
        config = replace(config, force_overwrite=settings.force_overwrite)
    if settings.auto_install is not None:
        config = replace(config, auto_install=settings.auto_install)
    if settings.package_manager:
        config = replace(config, package_manager=settings.package_manager)
    if settings.exclude:
        names = dict.fromkeys([ELECTRON_DIR, *settings.exclude])
        config = replace(config, exclude=tuple(names))
    if settings.product_name:
        config = replace(config, product_name=settings.product_name)
    if settings.app_id:
        config = replace(config, app_id=settings.app_id)

    if force is not None:
        config = replace(config, force_overwrite=force)
    if install is not None:
        config = replace(config, auto_install=install)
    return config


__all__ = [
    "DEFAULT_APP_ID",
    "DEFAULT_PRODUCT_NAME",
    "ElectronizeConfig",
    "ProjectSettings",
    "build_config",
    "load_project_settings",
]
