"""Tests for locating the renderer entry module."""

from __future__ import annotations

from pathlib import Path

import pytest

from electronize_cli.engine.entry import DEFAULT_ENTRY, ENTRY_CANDIDATES, locate


def test_returns_default_when_nothing_exists(tmp_path: Path) -> None:
    assert locate(tmp_path) == DEFAULT_ENTRY == "main.tsx"


def test_missing_directory_returns_default(tmp_path: Path) -> None:
    assert locate(tmp_path / "src" / "ui") == "main.tsx"


@pytest.mark.parametrize(
    ("present", "expected"),
    [
        (["index.js", "main.jsx"], "main.jsx"),
        (["index.tsx", "main.ts"], "index.tsx"),
        (["main.js", "index.ts"], "index.ts"),
        (["index.js"], "index.js"),
    ],
)
def test_priority_follows_candidate_order(tmp_path: Path, present: list[str], expected: str) -> None:
    for name in present:
        (tmp_path / name).write_text("", encoding="utf-8")

    assert locate(tmp_path) == expected


def test_directories_are_not_entries(tmp_path: Path) -> None:
    (tmp_path / "main.tsx").mkdir()
    (tmp_path / "index.jsx").write_text("", encoding="utf-8")

    assert locate(tmp_path) == "index.jsx"


def test_custom_candidates_and_default(tmp_path: Path) -> None:
    (tmp_path / "b.ts").write_text("", encoding="utf-8")

    assert locate(tmp_path, ["a.ts", "b.ts"], default="z.ts") == "b.ts"
    assert locate(tmp_path, ["a.ts"], default="z.ts") == "z.ts"


def test_candidate_list() -> None:
    assert ENTRY_CANDIDATES[0] == "main.tsx"
    assert len(ENTRY_CANDIDATES) == 8
