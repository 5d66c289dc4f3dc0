"""Guarded file writes: skip identical content, back up before overwriting.

Every file the pipeline touches goes through :func:`guarded_write`. The
contract:

- missing file: parents are created and the file is written (``CREATED``)
- existing identical file without ``force``: nothing happens (``UNCHANGED``)
- existing different file, or ``force``: the current content is copied to
  ``<path>.bak-electronize`` and the file is overwritten (``WRITTEN``)

A failed backup does not stop the write. The result is reported as
``WRITTEN_WITHOUT_BACKUP`` so callers can surface the degraded path.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from electronize_cli.core.constants import BACKUP_SUFFIX

logger = logging.getLogger(__name__)


class WriteStatus(Enum):
    """Outcome of a guarded write."""

    CREATED = "created"
    UNCHANGED = "unchanged"
    WRITTEN = "wrote"
    WRITTEN_WITHOUT_BACKUP = "wrote (no backup)"
    FAILED = "failed"


@dataclass(frozen=True)
class BackupRecord:
    """A copy of a file taken right before it was overwritten."""

    original_path: Path
    backup_path: Path


@dataclass(frozen=True)
class FileArtifact:
    """One file the pipeline may need to create or update."""

    path: Path
    desired_content: str | bytes
    force_overwrite: bool = False


@dataclass(frozen=True)
class WriteResult:
    """Result of a guarded write."""

    path: Path
    status: WriteStatus
    backup: BackupRecord | None = None
    reason: str | None = None

    @property
    def changed(self) -> bool:
        return self.status in (
            WriteStatus.CREATED,
            WriteStatus.WRITTEN,
            WriteStatus.WRITTEN_WITHOUT_BACKUP,
        )

    @property
    def failed(self) -> bool:
        return self.status is WriteStatus.FAILED


def _as_bytes(content: str | bytes) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def path_exists(path: Path) -> bool:
    return path.exists()


def content_matches(path: Path, content: str | bytes) -> bool:
    """Return True when *path* holds exactly *content* (byte comparison)."""
    try:
        return path.read_bytes() == _as_bytes(content)
    except OSError:
        return False


def backup_path_for(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def backup_file(path: Path) -> BackupRecord:
    """Copy *path* to its sibling backup, replacing any previous backup.

    Raises:
        OSError: If the copy fails.
    """
    target = backup_path_for(path)
    shutil.copy2(path, target)
    return BackupRecord(original_path=path, backup_path=target)


def guarded_write(path: Path, content: str | bytes, force: bool = False) -> WriteResult:
    """Write *content* to *path* unless it is already there.

    Args:
        path: File to create or update.
        content: Desired text (UTF-8 encoded) or raw bytes.
        force: Skip the identical-content check; always back up and rewrite.

    Returns:
        WriteResult describing what happened.
    """
    path = Path(path)
    payload = _as_bytes(content)

    if not path_exists(path):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as exc:
            logger.error("Failed to create %s: %s", path, exc)
            return WriteResult(path, WriteStatus.FAILED, reason=str(exc))
        logger.info("Created %s", path)
        return WriteResult(path, WriteStatus.CREATED)

    if not force and content_matches(path, payload):
        logger.debug("Unchanged: %s", path)
        return WriteResult(path, WriteStatus.UNCHANGED)

    backup: BackupRecord | None = None
    backup_error: str | None = None
    try:
        backup = backup_file(path)
        logger.warning("Backed up existing file to %s", backup.backup_path)
    except OSError as exc:
        backup_error = f"backup failed: {exc}"
        logger.warning("Could not back up %s (%s); overwriting anyway", path, exc)

    try:
        path.write_bytes(payload)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return WriteResult(path, WriteStatus.FAILED, backup=backup, reason=str(exc))

    logger.info("Wrote %s", path)
    if backup is None:
        return WriteResult(path, WriteStatus.WRITTEN_WITHOUT_BACKUP, reason=backup_error)
    return WriteResult(path, WriteStatus.WRITTEN, backup=backup)


def write_artifact(artifact: FileArtifact) -> WriteResult:
    return guarded_write(artifact.path, artifact.desired_content, force=artifact.force_overwrite)


def ensure_binary_asset(path: Path, payload: bytes) -> WriteResult:
    """Create *path* with *payload* only if it does not exist yet."""
    path = Path(path)
    if path_exists(path):
        return WriteResult(path, WriteStatus.UNCHANGED)
    return guarded_write(path, payload)


__all__ = [
    "BackupRecord",
    "FileArtifact",
    "WriteResult",
    "WriteStatus",
    "backup_file",
    "backup_path_for",
    "content_matches",
    "ensure_binary_asset",
    "guarded_write",
    "path_exists",
    "write_artifact",
]
