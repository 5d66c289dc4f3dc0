"""Exception hierarchy for electronize."""

from __future__ import annotations


class ElectronizeError(RuntimeError):
    """Base class for every error raised by electronize."""


class ConfigError(ElectronizeError):
    """Raised when .electronize.yaml cannot be parsed or validated."""


class RelocationError(ElectronizeError):
    """Raised when the source tree is missing or cannot be moved."""


class ManifestError(ElectronizeError):
    """Raised when package.json cannot be read or parsed."""


class ManifestNotFoundError(ManifestError):
    """Raised when package.json does not exist."""


class InstallError(ElectronizeError):
    """Raised when the dependency install command fails."""


__all__ = [
    "ElectronizeError",
    "ConfigError",
    "RelocationError",
    "ManifestError",
    "ManifestNotFoundError",
    "InstallError",
]
