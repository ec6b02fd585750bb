from __future__ import annotations

from pathlib import Path


class RenamerError(Exception):
    """Base class for errors that abort processing of a file."""


class MetadataReadError(RenamerError):
    """The image format was recognized but its metadata could not be parsed."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Unable to parse metadata of {self.path.name}")


class MissingDateFieldError(RenamerError):
    """The image carries metadata but none of it records a capture time."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"No original date found in {filename}")


class FilenameError(RenamerError):
    """A directory entry whose name cannot be represented as a native filename."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Filename contains illegal character combinations: {name!r}")
