"""Exceptions raised by the scaffolder."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class ManifestParseError(ScaffoldError):
    """Raised when a manifest cannot be parsed as a JSON object."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid manifest {self.path}: {message}")


class OperationCancelledError(ScaffoldError):
    """Raised when the user aborts before rendering starts."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
