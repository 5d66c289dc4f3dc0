"""Find the renderer entry module inside ``src/ui``."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

ENTRY_CANDIDATES: tuple[str, ...] = (
    "main.tsx",
    "main.jsx",
    "index.tsx",
    "index.jsx",
    "main.ts",
    "index.ts",
    "main.js",
    "index.js",
)
DEFAULT_ENTRY = "main.tsx"


def locate(
    directory: Path,
    candidates: Sequence[str] = ENTRY_CANDIDATES,
    default: str = DEFAULT_ENTRY,
) -> str:
    """Return the first of *candidates* present in *directory*, else *default*.

    Candidates are checked in the given order.
    """
    for name in candidates:
        if (Path(directory) / name).is_file():
            return name
    return default


__all__ = ["DEFAULT_ENTRY", "ENTRY_CANDIDATES", "locate"]
