"""External tools: Node version check and dependency install."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from packaging.version import InvalidVersion, Version

from electronize_cli.errors import InstallError

logger = logging.getLogger(__name__)

MINIMUM_NODE_VERSION = "18"


def _executable(name: str) -> str:
    return f"{name}.cmd" if sys.platform == "win32" else name


def check_node_version(minimum: str = MINIMUM_NODE_VERSION) -> str | None:
    """Return a warning when Node is missing or older than *minimum*."""
    try:
        result = subprocess.run(
            ["node", "--version"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return "Node.js was not found on PATH. Electron tooling requires Node 18+."

    raw = result.stdout.strip().lstrip("v")
    try:
        installed = Version(raw)
    except InvalidVersion:
        logger.debug("Unrecognised node version output: %r", result.stdout)
        return None

    if installed < Version(minimum):
        return (
            f"Node version {installed} detected. This tool expects Node {minimum}+. "
            "Continue at your own risk."
        )
    return None


def run_install(root: Path, package_manager: str = "npm") -> None:
    """Run ``<package_manager> install`` in *root*, streaming its output.

    Raises:
        InstallError: If the command cannot be started or exits non-zero.
    """
    cmd = [_executable(package_manager), "install"]
    logger.info("Running %s in %s", " ".join(cmd), root)
    try:
        result = subprocess.run(cmd, cwd=root, check=False)
    except OSError as exc:
        raise InstallError(f"Could not run {package_manager}: {exc}") from exc
    if result.returncode != 0:
        raise InstallError(f"{package_manager} install failed (exit code {result.returncode})")


__all__ = ["MINIMUM_NODE_VERSION", "check_node_version", "run_install"]
