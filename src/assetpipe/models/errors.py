"""Error taxonomy for pipeline runs."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base error for a failed pipeline run."""


class ConfigError(BuildError):
    """Package metadata or pipeline settings are missing or malformed."""


class SourceNotFound(BuildError):
    """A source directory is absent or a glob matched no files."""


class CssParseError(BuildError):
    """A stylesheet failed the syntax check."""

    def __init__(self, path: Path | str, line: int, message: str):
        self.path = Path(path)
        self.line = line
        self.reason = message
        super().__init__(f"{self.path}:{line}: {message}")


class AssetIOError(BuildError):
    """Reading or writing an asset failed."""

    def __init__(self, path: Path | str, error: OSError):
        self.path = Path(path)
        self.error = error
        detail = error.strerror or str(error)
        super().__init__(f"{self.path}: {detail}")


__all__ = [
    "AssetIOError",
    "BuildError",
    "ConfigError",
    "CssParseError",
    "SourceNotFound",
]
