"""Rewrite the module script tag of index.html.

Only one anchor is expected in the document. When several tags match, the
first one is rewritten and the rest are left alone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from electronize_cli.engine.guarded_write import WriteResult, WriteStatus, guarded_write

logger = logging.getLogger(__name__)

# Attribute order matters: type= must precede src=. Tags written the other way
# round are not recognised, and the fragment is inserted alongside them.
MODULE_SCRIPT_PATTERN = re.compile(
    r"""<script[^>]*type=["']module["'][^>]*src=["'][^"']+["'][^>]*>\s*</script>""",
    re.IGNORECASE,
)

BODY_CLOSE = "</body>"


class AnchorOutcome(Enum):
    CREATED = "created"
    REPLACED = "replaced"
    INSERTED = "inserted"
    ALREADY_SATISFIED = "already_satisfied"
    FAILED = "failed"


@dataclass(frozen=True)
class AnchorMatch:
    found: bool
    pattern: re.Pattern[str]
    replacement: str
    span: tuple[int, int] | None = None


@dataclass(frozen=True)
class AnchorPatchResult:
    outcome: AnchorOutcome
    write: WriteResult

    @property
    def changed(self) -> bool:
        return self.write.changed


def script_tag_for(entry: str, prefix: str = "/src/ui") -> str:
    """Return the module script tag loading ``<prefix>/<entry>``."""
    return f'<script type="module" src="{prefix.rstrip("/")}/{entry}"></script>'


def find_anchor(text: str, pattern: re.Pattern[str], replacement: str) -> AnchorMatch:
    match = pattern.search(text)
    if match is None:
        return AnchorMatch(found=False, pattern=pattern, replacement=replacement)
    return AnchorMatch(found=True, pattern=pattern, replacement=replacement, span=match.span())


def apply_anchor(text: str, anchor: AnchorMatch, closing_marker: str = BODY_CLOSE) -> tuple[str, AnchorOutcome]:
    """Return the patched *text* and how the fragment got there."""
    fragment = anchor.replacement
    if anchor.found and anchor.span is not None:
        start, end = anchor.span
        return text[:start] + fragment + text[end:], AnchorOutcome.REPLACED

    if fragment in text:
        return text, AnchorOutcome.ALREADY_SATISFIED

    index = text.find(closing_marker)
    if index == -1:
        suffix = "" if text.endswith("\n") or not text else "\n"
        return f"{text}{suffix}{fragment}\n", AnchorOutcome.INSERTED
    return f"{text[:index]}  {fragment}\n{text[index:]}", AnchorOutcome.INSERTED


def patch_anchor(
    document_path: Path,
    pattern: re.Pattern[str],
    fragment: str,
    fallback_document: str,
    closing_marker: str = BODY_CLOSE,
) -> AnchorPatchResult:
    """Make *document_path* contain *fragment* at the anchor position.

    A missing document is created from *fallback_document*. An existing one
    has its first *pattern* match replaced, or the fragment inserted before
    *closing_marker* when nothing matches. Modified documents are persisted
    with ``force=True``; a document whose patched text equals what is on disk
    is left untouched.
    """
    document_path = Path(document_path)
    if not document_path.exists():
        write = guarded_write(document_path, fallback_document, force=False)
        return AnchorPatchResult(AnchorOutcome.CREATED, write)

    # Decode bytes directly so CRLF line endings survive the round trip.
    try:
        original = document_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", document_path, exc)
        failed = WriteResult(document_path, WriteStatus.FAILED, reason=f"could not read: {exc}")
        return AnchorPatchResult(AnchorOutcome.FAILED, failed)
    anchor = find_anchor(original, pattern, fragment)
    patched, outcome = apply_anchor(original, anchor, closing_marker)

    if patched == original:
        if outcome is AnchorOutcome.REPLACED:
            outcome = AnchorOutcome.ALREADY_SATISFIED
        logger.info("%s already loads the entry, skipping patch", document_path.name)
        return AnchorPatchResult(outcome, WriteResult(document_path, WriteStatus.UNCHANGED))

    write = guarded_write(document_path, patched, force=True)
    return AnchorPatchResult(outcome, write)


__all__ = [
    "AnchorMatch",
    "AnchorOutcome",
    "AnchorPatchResult",
    "BODY_CLOSE",
    "MODULE_SCRIPT_PATTERN",
    "apply_anchor",
    "find_anchor",
    "patch_anchor",
    "script_tag_for",
]
