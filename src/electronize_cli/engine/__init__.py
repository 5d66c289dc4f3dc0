"""Transformation engine: guarded writes, relocation, anchor patching, merging."""

from __future__ import annotations

from .anchor import (
    MODULE_SCRIPT_PATTERN,
    AnchorMatch,
    AnchorOutcome,
    AnchorPatchResult,
    patch_anchor,
    script_tag_for,
)
from .entry import DEFAULT_ENTRY, ENTRY_CANDIDATES, locate
from .guarded_write import (
    BackupRecord,
    FileArtifact,
    WriteResult,
    WriteStatus,
    ensure_binary_asset,
    guarded_write,
    write_artifact,
)
from .manifest import ConflictRecord, MergeReport, demoted_key, load_manifest, merge
from .relocate import DirectoryMigration, RelocationReport, RelocationStatus, relocate

__all__ = [
    "AnchorMatch",
    "AnchorOutcome",
    "AnchorPatchResult",
    "BackupRecord",
    "ConflictRecord",
    "DEFAULT_ENTRY",
    "DirectoryMigration",
    "ENTRY_CANDIDATES",
    "FileArtifact",
    "MODULE_SCRIPT_PATTERN",
    "MergeReport",
    "RelocationReport",
    "RelocationStatus",
    "WriteResult",
    "WriteStatus",
    "demoted_key",
    "ensure_binary_asset",
    "guarded_write",
    "load_manifest",
    "locate",
    "merge",
    "patch_anchor",
    "relocate",
    "script_tag_for",
    "write_artifact",
]
