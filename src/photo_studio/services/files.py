"""File storage interface and best-effort cleanup."""

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from photo_studio.domain.files import (
    CleanupReport,
    FileCleanupFailure,
    IncomingFile,
    StoredFile,
)

logger = logging.getLogger(__name__)


class FileStorage(Protocol):
    """Interface for storing uploaded binaries on disk."""

    def save(self, upload: IncomingFile) -> StoredFile:
        """Write the upload under a generated filename and return it."""

    def delete(self, filename: str) -> None:
        """Delete a stored file, raising FileNotFoundError if it is missing."""

    def path_for(self, filename: str) -> Path:
        """Return the on-disk path for a stored filename."""

    def url_for(self, filename: str) -> str:
        """Return the public URL for a stored filename."""


async def remove_files(storage: FileStorage, filenames: Iterable[str]) -> CleanupReport:
    """Delete files concurrently and collect failures without raising."""
    names = list(filenames)
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(storage.delete, name) for name in names),
        return_exceptions=True,
    )
    report = CleanupReport()
    for name, outcome in zip(names, outcomes, strict=True):
        if isinstance(outcome, FileNotFoundError):
            logger.warning(
                "File already missing: %s", storage.path_for(name), extra={"file": name}
            )
            report.failures.append(
                FileCleanupFailure(filename=name, reason="missing", missing=True)
            )
        elif isinstance(outcome, OSError):
            logger.error(
                "Failed to delete file %s: %s", storage.path_for(name), outcome
            )
            report.failures.append(
                FileCleanupFailure(filename=name, reason=str(outcome), missing=False)
            )
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            logger.info("Deleted file %s", name)
            report.deleted.append(name)
    return report
