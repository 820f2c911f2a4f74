"""Error taxonomy for a pack run.

Every failure aborts the run; nothing here is caught inside the library.
The CLI maps `PackError` to a nonzero exit status.
"""

from __future__ import annotations

from pathlib import Path


class PackError(Exception):
    """Base class for all pack failures."""


class FileSystemError(PackError):
    """A directory could not be read, created or removed."""

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class MissingInputError(PackError):
    """An expected source file or directory does not exist."""

    def __init__(self, path: Path, *, what: str):
        super().__init__(f"{what}: missing input {path}")
        self.path = Path(path)
        self.what = what


class ManifestError(PackError, ValueError):
    """The source package.json is not a JSON object."""
