"""Merge electron scripts and devDependencies into package.json.

Two conflict policies apply:

- scripts use overwrite-with-backup: a differing script is replaced by the
  desired command and the previous command is kept under
  ``_backup_<name>`` (an existing backup key is never overwritten)
- dependencies use keep-existing: a package already declared in
  ``devDependencies`` or ``dependencies`` keeps its version

No key is ever removed from the document.
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from electronize_cli.engine.guarded_write import (
    BackupRecord,
    WriteResult,
    WriteStatus,
    backup_file,
    backup_path_for,
    guarded_write,
)
from electronize_cli.errors import ManifestError, ManifestNotFoundError

logger = logging.getLogger(__name__)

BACKUP_KEY_PREFIX = "_backup_"
MODULE_TYPE = "module"
DEFAULT_MAIN = "src/electron/main"


@dataclass(frozen=True)
class ConflictRecord:
    """A script whose existing command differed from the desired one."""

    key: str
    original_value: Any
    desired_value: Any
    backup_key: str
    backup_created: bool


@dataclass
class MergeReport:
    """The merged document plus what changed on the way."""

    document: dict[str, Any]
    added_scripts: list[str] = field(default_factory=list)
    updated_scripts: list[str] = field(default_factory=list)
    conflicts: list[ConflictRecord] = field(default_factory=list)
    added_dependencies: list[str] = field(default_factory=list)
    kept_dependencies: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added_scripts or self.updated_scripts or self.added_dependencies)


def demoted_key(name: str) -> str:
    return f"{BACKUP_KEY_PREFIX}{name}"


def _section(document: dict[str, Any], name: str) -> dict[str, Any]:
    value = document.get(name)
    if value is None:
        value = {}
        document[name] = value
    if not isinstance(value, dict):
        raise ManifestError(f"package.json field '{name}' must be an object")
    return value


def _merge_scripts(scripts: dict[str, Any], desired: Mapping[str, str], report: MergeReport) -> None:
    for name, command in desired.items():
        if name not in scripts:
            scripts[name] = command
            report.added_scripts.append(name)
            continue
        existing = scripts[name]
        if existing == command:
            continue

        backup_key = demoted_key(name)
        backup_created = backup_key not in scripts
        if backup_created:
            scripts[backup_key] = existing
        scripts[name] = command
        report.updated_scripts.append(name)
        report.conflicts.append(
            ConflictRecord(name, existing, command, backup_key, backup_created)
        )
        message = f'script "{name}" existed and was saved to scripts.{backup_key} before updating.'
        if not backup_created:
            message = f'script "{name}" was replaced; scripts.{backup_key} already held an earlier value.'
        report.warnings.append(message)
        logger.warning(message)


def _merge_dependencies(
    dev_dependencies: dict[str, Any],
    runtime_dependencies: Mapping[str, Any],
    desired: Mapping[str, str],
    report: MergeReport,
) -> None:
    for name, version in desired.items():
        if name in dev_dependencies or name in runtime_dependencies:
            report.kept_dependencies.append(name)
            logger.debug("Keeping existing declaration for %s", name)
            continue
        dev_dependencies[name] = version
        report.added_dependencies.append(name)


def merge(
    target: Mapping[str, Any],
    desired_scripts: Mapping[str, str],
    desired_dependencies: Mapping[str, str],
    *,
    module_type: str = MODULE_TYPE,
    entry_point: str = DEFAULT_MAIN,
) -> MergeReport:
    """Return a merged copy of *target*; the input mapping is not modified.

    Raises:
        ManifestError: If ``scripts``, ``devDependencies`` or
            ``dependencies`` is present but not an object.
    """
    document: dict[str, Any] = copy.deepcopy(dict(target))
    report = MergeReport(document=document)

    current_type = document.get("type")
    if current_type and current_type != module_type:
        message = (
            f"Existing package.json 'type' is '{current_type}', overriding with '{module_type}'."
        )
        report.warnings.append(message)
        logger.warning(message)
    document["type"] = module_type

    if not document.get("main"):
        document["main"] = entry_point

    _merge_scripts(_section(document, "scripts"), desired_scripts, report)

    runtime = document.get("dependencies") or {}
    if not isinstance(runtime, dict):
        raise ManifestError("package.json field 'dependencies' must be an object")
    _merge_dependencies(_section(document, "devDependencies"), runtime, desired_dependencies, report)

    return report


def load_manifest(path: Path) -> dict[str, Any]:
    """Read package.json, preserving key order.

    Raises:
        ManifestNotFoundError: If the file does not exist.
        ManifestError: If the file is not a JSON object.
    """
    path = Path(path)
    if not path.exists():
        raise ManifestNotFoundError(f"{path.name} not found in {path.parent}")
    try:
        data = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return data


def render_manifest(document: Mapping[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def backup_manifest(path: Path) -> BackupRecord:
    """Copy the current package.json to its backup, unconditionally.

    Unlike generated artifacts, a failed manifest backup is not swallowed.

    Raises:
        OSError: If the copy fails.
    """
    return backup_file(Path(path))


def write_manifest(path: Path, document: Mapping[str, Any]) -> WriteResult:
    return guarded_write(Path(path), render_manifest(document), force=True)


def restore_manifest(path: Path) -> WriteResult:
    """Put the backed-up package.json back in place.

    Raises:
        ManifestNotFoundError: If no backup exists.
    """
    path = Path(path)
    backup = backup_path_for(path)
    if not backup.exists():
        raise ManifestNotFoundError(f"No backup found at {backup}")
    content = backup.read_bytes()
    if path.exists() and path.read_bytes() == content:
        return WriteResult(path, WriteStatus.UNCHANGED)
    # The backup itself is the copy being restored, so it must not be replaced.
    try:
        path.write_bytes(content)
    except OSError as exc:
        return WriteResult(path, WriteStatus.FAILED, reason=str(exc))
    logger.info("Restored %s from %s", path, backup)
    return WriteResult(path, WriteStatus.WRITTEN)


__all__ = [
    "BACKUP_KEY_PREFIX",
    "ConflictRecord",
    "DEFAULT_MAIN",
    "MODULE_TYPE",
    "MergeReport",
    "backup_manifest",
    "demoted_key",
    "load_manifest",
    "merge",
    "render_manifest",
    "restore_manifest",
    "write_manifest",
]
