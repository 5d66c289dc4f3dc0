"""Tests for the Node version check and package manager install."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from electronize_cli import toolchain
from electronize_cli.errors import InstallError


def _completed(stdout: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class TestCheckNodeVersion:
    @pytest.mark.parametrize("output", ["v20.11.1\n", "v18.0.0\n", "v22.3.0"])
    def test_supported_versions_are_silent(self, monkeypatch: pytest.MonkeyPatch, output: str) -> None:
        monkeypatch.setattr(toolchain.subprocess, "run", lambda *a, **k: _completed(output))

        assert toolchain.check_node_version() is None

    def test_old_version_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(toolchain.subprocess, "run", lambda *a, **k: _completed("v16.20.2\n"))

        warning = toolchain.check_node_version()

        assert warning is not None
        assert "16.20.2" in warning
        assert "Node 18+" in warning

    def test_missing_node_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def not_found(*args, **kwargs):
            raise FileNotFoundError("node")

        monkeypatch.setattr(toolchain.subprocess, "run", not_found)

        assert "not found" in toolchain.check_node_version()

    def test_unparseable_output_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(toolchain.subprocess, "run", lambda *a, **k: _completed("garbage"))

        assert toolchain.check_node_version() is None

    def test_custom_minimum(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(toolchain.subprocess, "run", lambda *a, **k: _completed("v20.0.0"))

        assert toolchain.check_node_version("22") is not None


class TestRunInstall:
    def test_runs_in_project_root(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        seen: dict[str, object] = {}

        def fake_run(cmd, cwd=None, check=False):
            seen["cmd"] = cmd
            seen["cwd"] = cwd
            return _completed()

        monkeypatch.setattr(toolchain.sys, "platform", "linux")
        monkeypatch.setattr(toolchain.subprocess, "run", fake_run)

        toolchain.run_install(tmp_path, "pnpm")

        assert seen == {"cmd": ["pnpm", "install"], "cwd": tmp_path}

    def test_windows_uses_cmd_shim(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        commands: list[list[str]] = []

        def fake_run(cmd, cwd=None, check=False):
            commands.append(cmd)
            return _completed()

        monkeypatch.setattr(toolchain.sys, "platform", "win32")
        monkeypatch.setattr(toolchain.subprocess, "run", fake_run)

        toolchain.run_install(tmp_path)

        assert commands == [["npm.cmd", "install"]]

    def test_non_zero_exit_raises(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(toolchain.subprocess, "run", lambda *a, **k: _completed(returncode=3))

        with pytest.raises(InstallError, match=r"npm install failed \(exit code 3\)"):
            toolchain.run_install(tmp_path)

    def test_missing_executable_raises(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        def not_found(*args, **kwargs):
            raise FileNotFoundError("bun")

        monkeypatch.setattr(toolchain.subprocess, "run", not_found)

        with pytest.raises(InstallError, match="Could not run bun"):
            toolchain.run_install(tmp_path, "bun")
