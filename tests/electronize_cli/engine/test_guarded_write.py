"""Tests for guarded writes and backups."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from electronize_cli.engine.guarded_write import (
    FileArtifact,
    WriteStatus,
    backup_path_for,
    content_matches,
    ensure_binary_asset,
    guarded_write,
    write_artifact,
)


class TestContentMatches:
    def test_identical_text(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        target.write_bytes(b"hello\n")
        assert content_matches(target, "hello\n") is True

    def test_line_endings_are_significant(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        target.write_bytes(b"hello\r\n")
        assert content_matches(target, "hello\n") is False

    def test_missing_file(self, tmp_path: Path) -> None:
        assert content_matches(tmp_path / "nope.txt", "x") is False


class TestGuardedWrite:
    def test_creates_missing_file_and_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "src" / "electron" / "main.ts"

        result = guarded_write(target, "console.log(1)\n")

        assert result.status is WriteStatus.CREATED
        assert result.changed
        assert target.read_text(encoding="utf-8") == "console.log(1)\n"
        assert not backup_path_for(target).exists()

    def test_identical_content_is_left_alone(self, tmp_path: Path) -> None:
        target = tmp_path / "main.ts"
        target.write_text("same\n", encoding="utf-8")
        before = target.stat().st_mtime_ns

        result = guarded_write(target, "same\n")

        assert result.status is WriteStatus.UNCHANGED
        assert not result.changed
        assert target.stat().st_mtime_ns == before
        assert not backup_path_for(target).exists()

    def test_different_content_is_backed_up_then_overwritten(self, tmp_path: Path) -> None:
        target = tmp_path / "main.ts"
        target.write_text("mine\n", encoding="utf-8")

        result = guarded_write(target, "generated\n")

        assert result.status is WriteStatus.WRITTEN
        assert result.backup is not None
        assert result.backup.backup_path == tmp_path / "main.ts.bak-electronize"
        assert result.backup.backup_path.read_text(encoding="utf-8") == "mine\n"
        assert target.read_text(encoding="utf-8") == "generated\n"

    def test_force_rewrites_identical_content_with_fresh_backup(self, tmp_path: Path) -> None:
        target = tmp_path / "main.ts"
        target.write_text("same\n", encoding="utf-8")

        result = guarded_write(target, "same\n", force=True)

        assert result.status is WriteStatus.WRITTEN
        assert backup_path_for(target).read_text(encoding="utf-8") == "same\n"

    def test_backup_is_single_generation(self, tmp_path: Path) -> None:
        target = tmp_path / "main.ts"
        target.write_text("v1\n", encoding="utf-8")

        guarded_write(target, "v2\n")
        guarded_write(target, "v3\n")

        assert backup_path_for(target).read_text(encoding="utf-8") == "v2\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["main.ts", "main.ts.bak-electronize"]

    def test_bytes_payload(self, tmp_path: Path) -> None:
        target = tmp_path / "icon.png"
        result = guarded_write(target, b"\x89PNG")
        assert result.status is WriteStatus.CREATED
        assert target.read_bytes() == b"\x89PNG"

    def test_failed_backup_still_writes(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        target = tmp_path / "main.ts"
        target.write_text("mine\n", encoding="utf-8")

        def refuse(*args, **kwargs):
            raise PermissionError("read-only directory")

        monkeypatch.setattr(shutil, "copy2", refuse)
        with caplog.at_level(logging.WARNING, logger="electronize_cli"):
            result = guarded_write(target, "generated\n")

        assert result.status is WriteStatus.WRITTEN_WITHOUT_BACKUP
        assert result.changed
        assert "read-only directory" in (result.reason or "")
        assert target.read_text(encoding="utf-8") == "generated\n"
        assert "Could not back up" in caplog.text

    def test_failed_write_is_reported(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "main.ts"
        target.write_text("mine\n", encoding="utf-8")
        original_write = Path.write_bytes

        def failing_write(self: Path, data: bytes) -> int:
            if self == target:
                raise OSError("disk full")
            return original_write(self, data)

        monkeypatch.setattr(Path, "write_bytes", failing_write)
        result = guarded_write(target, "generated\n")

        assert result.status is WriteStatus.FAILED
        assert result.failed
        assert result.reason == "disk full"
        assert result.backup is not None
        assert target.read_text(encoding="utf-8") == "mine\n"


def test_write_artifact_threads_force(tmp_path: Path) -> None:
    target = tmp_path / "vite.renderer.config.ts"
    target.write_text("x\n", encoding="utf-8")

    assert write_artifact(FileArtifact(target, "x\n")).status is WriteStatus.UNCHANGED
    assert write_artifact(FileArtifact(target, "x\n", force_overwrite=True)).status is WriteStatus.WRITTEN


def test_ensure_binary_asset_never_overwrites(tmp_path: Path) -> None:
    icon = tmp_path / "public" / "icon.png"

    assert ensure_binary_asset(icon, b"placeholder").status is WriteStatus.CREATED
    icon.write_bytes(b"real icon")
    assert ensure_binary_asset(icon, b"placeholder").status is WriteStatus.UNCHANGED
    assert icon.read_bytes() == b"real icon"
    assert not backup_path_for(icon).exists()


def test_backup_preserves_original_bytes(tmp_path: Path) -> None:
    target = tmp_path / "index.html"
    target.write_bytes(b"<html>\r\n</html>\r\n")
    snapshot = tmp_path / "snapshot"
    shutil.copy(target, snapshot)

    guarded_write(target, "<html></html>\n")

    assert backup_path_for(target).read_bytes() == snapshot.read_bytes()
