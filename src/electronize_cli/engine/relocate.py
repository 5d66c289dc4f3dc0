"""Move the children of a directory into a new sibling, keeping exclusions.

Used to turn ``src/*`` into ``src/ui/*`` while ``src/electron`` stays put.
Idempotence is at the directory level: once the destination exists the
relocation is considered done and nothing is touched.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from electronize_cli.errors import RelocationError

logger = logging.getLogger(__name__)


class RelocationStatus(Enum):
    MOVED = "moved"
    ALREADY_MIGRATED = "already_migrated"
    NOTHING_TO_MOVE = "nothing_to_move"


@dataclass(frozen=True)
class DirectoryMigration:
    """A one-time move of ``source_dir`` children into ``dest_dir``."""

    source_dir: Path
    dest_dir: Path
    excluded_names: frozenset[str] = frozenset()


@dataclass
class RelocationReport:
    """What a relocation did.

    ``copied`` lists the entries that could not be renamed and were copied
    then deleted instead; they also appear in ``moved``.
    """

    status: RelocationStatus
    moved: list[str] = field(default_factory=list)
    copied: list[str] = field(default_factory=list)


def _move_entry(source: Path, target: Path) -> bool:
    """Move *source* to *target*; return True when the copy fallback was used."""
    try:
        source.rename(target)
        return False
    except OSError as exc:
        logger.debug("Rename %s -> %s failed (%s); copying instead", source, target, exc)

    try:
        if source.is_dir() and not source.is_symlink():
            shutil.copytree(source, target, symlinks=True)
            shutil.rmtree(source)
        else:
            shutil.copy2(source, target, follow_symlinks=False)
            source.unlink()
    except OSError as exc:
        raise RelocationError(f"Failed to move {source} to {target}: {exc}") from exc
    return True


def relocate(
    source_dir: Path,
    dest_dir: Path,
    excluded_names: Iterable[str] = (),
) -> RelocationReport:
    """Move every child of *source_dir* not in *excluded_names* into *dest_dir*.

    Raises:
        RelocationError: If *source_dir* is missing or a fallback copy fails.
    """
    migration = DirectoryMigration(Path(source_dir), Path(dest_dir), frozenset(excluded_names))
    return relocate_tree(migration)


def relocate_tree(migration: DirectoryMigration) -> RelocationReport:
    source_dir = migration.source_dir
    dest_dir = migration.dest_dir

    if not source_dir.is_dir():
        raise RelocationError(f"Source directory not found: {source_dir}")

    if dest_dir.exists():
        logger.info("%s already exists, skipping move", dest_dir)
        return RelocationReport(RelocationStatus.ALREADY_MIGRATED)

    names = sorted(entry.name for entry in source_dir.iterdir())
    to_move = [name for name in names if name not in migration.excluded_names]
    if not to_move:
        logger.info("%s holds only excluded entries, nothing to move", source_dir)
        return RelocationReport(RelocationStatus.NOTHING_TO_MOVE)

    try:
        dest_dir.mkdir(parents=True)
    except OSError as exc:
        raise RelocationError(f"Could not create {dest_dir}: {exc}") from exc
    report = RelocationReport(RelocationStatus.MOVED)
    for name in to_move:
        used_copy = _move_entry(source_dir / name, dest_dir / name)
        report.moved.append(name)
        if used_copy:
            report.copied.append(name)
        logger.info("Moved %s -> %s", source_dir / name, dest_dir / name)

    return report


__all__ = [
    "DirectoryMigration",
    "RelocationReport",
    "RelocationStatus",
    "relocate",
    "relocate_tree",
]
