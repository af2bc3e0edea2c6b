"""Domain models for uploaded files and their cleanup."""

from dataclasses import dataclass, field
from typing import BinaryIO


@dataclass(frozen=True)
class IncomingFile:
    """An uploaded file before it is written to storage."""

    original_name: str
    content: BinaryIO
    field_name: str = "file"


@dataclass(frozen=True)
class StoredFile:
    """A file written to local storage and its public address."""

    filename: str
    url: str


@dataclass(frozen=True)
class FileCleanupFailure:
    """A backing file that could not be removed."""

    filename: str
    reason: str
    missing: bool


@dataclass
class CleanupReport:
    """Non-fatal diagnostics from best-effort file deletion."""

    deleted: list[str] = field(default_factory=list)
    failures: list[FileCleanupFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return true when every file was removed."""
        return not self.failures
