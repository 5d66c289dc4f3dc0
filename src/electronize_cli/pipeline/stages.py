"""The electronize stages, registered in execution order."""

from __future__ import annotations

import logging

from electronize_cli.core.config import ElectronizeConfig
from electronize_cli.core import constants
from electronize_cli.engine.anchor import (
    MODULE_SCRIPT_PATTERN,
    AnchorOutcome,
    patch_anchor,
    script_tag_for,
)
from electronize_cli.engine.entry import locate
from electronize_cli.engine.guarded_write import ensure_binary_asset, guarded_write
from electronize_cli.engine.manifest import (
    backup_manifest,
    load_manifest,
    merge,
    write_manifest,
)
from electronize_cli.engine.relocate import RelocationStatus, relocate
from electronize_cli.errors import InstallError, ManifestError, RelocationError
from electronize_cli.templates import (
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
from electronize_cli.toolchain import run_install

from .base import BaseStage, StageResult
from .registry import StageRegistry

logger = logging.getLogger(__name__)


@StageRegistry.register
class RelocateSourcesStage(BaseStage):
    """Move ``src/*`` into ``src/ui/``, leaving ``src/electron`` in place."""

    name = "relocate-sources"
    description = "Move src/ into src/ui/ (non-electron files)"
    order = 10

    def run(self, config: ElectronizeConfig) -> StageResult:
        if not config.src_dir.is_dir():
            return StageResult.fatal_error(
                "No src/ directory found. Run this in the React project root."
            )

        try:
            report = relocate(config.src_dir, config.ui_dir, config.exclude)
        except RelocationError as exc:
            return StageResult.fatal_error(str(exc))

        result = StageResult(success=True)
        if report.status is RelocationStatus.ALREADY_MIGRATED:
            result.changes_made.append("src/ui already exists, skipping move")
        elif report.status is RelocationStatus.NOTHING_TO_MOVE:
            result.changes_made.append("src contains only excluded entries, nothing to move")
        else:
            for name in report.moved:
                result.changes_made.append(f"Moved: src/{name} -> src/ui/{name}")
            if report.copied:
                result.warnings.append(
                    f"Copied instead of renamed: {', '.join(report.copied)}"
                )
        return result


@StageRegistry.register
class ElectronEntryPointsStage(BaseStage):
    """Write the Electron main and preload scripts."""

    name = "electron-entry-points"
    description = "Write src/electron/main.ts and preload.ts"
    order = 20

    def run(self, config: ElectronizeConfig) -> StageResult:
        result = StageResult(success=True)
        force = config.force_overwrite
        for filename, content in (("main.ts", MAIN_TS), ("preload.ts", PRELOAD_TS)):
            write = guarded_write(config.electron_dir / filename, content, force=force)
            result.record(write, config.root_directory)
        return result


@StageRegistry.register
class IndexHtmlStage(BaseStage):
    """Point index.html at the renderer entry under ``src/ui``."""

    name = "index-html"
    description = "Patch index.html to load /src/ui/<entry>"
    order = 30

    def run(self, config: ElectronizeConfig) -> StageResult:
        entry = locate(config.ui_dir)
        tag = script_tag_for(entry)
        patch = patch_anchor(
            config.index_html,
            MODULE_SCRIPT_PATTERN,
            tag,
            render_index_html(tag),
        )

        result = StageResult(success=True)
        result.record(patch.write, config.root_directory)
        if patch.outcome is AnchorOutcome.ALREADY_SATISFIED:
            result.changes_made.append(f"index.html already loads /src/ui/{entry}")
        elif patch.changed:
            result.changes_made.append(f"index.html now loads /src/ui/{entry}")
        return result


@StageRegistry.register
class BuildConfigStage(BaseStage):
    """Write the TypeScript, Vite and electron-builder configuration."""

    name = "build-config"
    description = "Write tsconfig.electron.json, Vite configs and electron-builder.yml"
    order = 40

    def run(self, config: ElectronizeConfig) -> StageResult:
        root = config.root_directory
        artifacts = (
            (constants.TSCONFIG_ELECTRON, render_tsconfig_electron()),
            (constants.VITE_ELECTRON_CONFIG, VITE_ELECTRON_CONFIG),
            (constants.VITE_RENDERER_CONFIG, VITE_RENDERER_CONFIG),
            (
                constants.ELECTRON_BUILDER_YML,
                render_electron_builder(config.product_name, config.app_id),
            ),
        )
        result = StageResult(success=True)
        for filename, content in artifacts:
            write = guarded_write(root / filename, content, force=config.force_overwrite)
            result.record(write, root)
        return result


@StageRegistry.register
class PackageManifestStage(BaseStage):
    """Back up and merge package.json."""

    name = "package-manifest"
    description = "Merge electron scripts and devDependencies into package.json"
    order = 50

    def run(self, config: ElectronizeConfig) -> StageResult:
        path = config.package_json
        try:
            document = load_manifest(path)
        except ManifestError as exc:
            return StageResult.fatal_error(str(exc))

        try:
            backup = backup_manifest(path)
        except OSError as exc:
            return StageResult.fatal_error(f"Could not back up package.json: {exc}")

        result = StageResult(success=True)
        result.changes_made.append(f"Backed up package.json to {backup.backup_path.name}")

        try:
            report = merge(document, DESIRED_SCRIPTS, DESIRED_DEV_DEPENDENCIES)
        except ManifestError as exc:
            return StageResult.fatal_error(str(exc))

        result.warnings.extend(report.warnings)
        if report.added_dependencies:
            result.changes_made.append(
                f"Added devDependencies: {', '.join(report.added_dependencies)}"
            )
        if report.kept_dependencies:
            result.changes_made.append(
                f"Kept existing versions: {', '.join(report.kept_dependencies)}"
            )

        write = write_manifest(path, report.document)
        result.record(write, config.root_directory)
        if write.failed:
            result.fatal = True
        return result


@StageRegistry.register
class PublicIconsStage(BaseStage):
    """Create placeholder icons when the project has none."""

    name = "public-icons"
    description = "Ensure public/favicon.ico and public/icon.png"
    order = 60

    def run(self, config: ElectronizeConfig) -> StageResult:
        result = StageResult(success=True)
        for filename in ("favicon.ico", "icon.png"):
            write = ensure_binary_asset(config.public_dir / filename, PLACEHOLDER_ICON)
            result.record(write, config.root_directory)
        return result


@StageRegistry.register
class InstallDependenciesStage(BaseStage):
    """Run the package manager once every file is in place."""

    name = "install-dependencies"
    description = "Install devDependencies (only with --install)"
    order = 70
    requires_clean_run = True

    def should_run(self, config: ElectronizeConfig) -> tuple[bool, str]:
        if not config.auto_install:
            return False, (
                f"Skipped {config.package_manager} install. Run `{config.package_manager} install` "
                "manually or re-run with --install."
            )
        return True, ""

    def run(self, config: ElectronizeConfig) -> StageResult:
        try:
            run_install(config.root_directory, config.package_manager)
        except InstallError as exc:
            return StageResult.fatal_error(str(exc))
        return StageResult(
            success=True,
            changes_made=[f"{config.package_manager} install finished"],
        )


__all__ = [
    "BuildConfigStage",
    "ElectronEntryPointsStage",
    "IndexHtmlStage",
    "InstallDependenciesStage",
    "PackageManifestStage",
    "PublicIconsStage",
    "RelocateSourcesStage",
]
