"""Local disk storage for uploaded images."""

import secrets
import shutil
import time
from dataclasses import dataclass
from pathlib import Path

from photo_studio.domain.files import IncomingFile, StoredFile
from photo_studio.services.files import FileStorage


@dataclass
class LocalFileStorage(FileStorage):
    """Stores files in one directory served under a static mount."""

    directory: Path
    base_url: str
    mount: str

    def save(self, upload: IncomingFile) -> StoredFile:
        """Copy the upload to disk under a collision-resistant name."""
        filename = self.generate_filename(upload.original_name, upload.field_name)
        with self.path_for(filename).open("wb") as buffer:
            shutil.copyfileobj(upload.content, buffer)
        return StoredFile(filename=filename, url=self.url_for(filename))

    def delete(self, filename: str) -> None:
        """Remove a stored file."""
        self.path_for(filename).unlink()

    def path_for(self, filename: str) -> Path:
        """Return the on-disk path of a stored file."""
        return self.directory / filename

    def url_for(self, filename: str) -> str:
        """Return the public URL of a stored file."""
        return f"{self.base_url.rstrip('/')}/{self.mount}/{filename}"

    @staticmethod
    def generate_filename(original_name: str, field_name: str = "file") -> str:
        """Build <field>-<epoch ms>-<random><ext>, keeping the original extension."""
        suffix = Path(original_name or "").suffix
        stamp = int(time.time() * 1000)
        return f"{field_name}-{stamp}-{secrets.randbelow(10**9)}{suffix}"
