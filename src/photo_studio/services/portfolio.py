"""Services for the photographer's portfolio gallery."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from photo_studio.domain.errors import BadRequestError, NotFoundError
from photo_studio.domain.files import CleanupReport, IncomingFile
from photo_studio.domain.portfolio import DEFAULT_CATEGORY, DEFAULT_TITLE, PortfolioItem
from photo_studio.services.files import FileStorage, remove_files

logger = logging.getLogger(__name__)


class PortfolioRepository(Protocol):
    """Persistence interface for portfolio items."""

    def add_items(self, items: list[PortfolioItem]) -> None:
        """Append items to the collection."""

    def get_item(self, item_id: str) -> PortfolioItem | None:
        """Return an item by id, if present."""

    def list_items(self, category: str | None = None) -> list[PortfolioItem]:
        """Return items, newest first, optionally restricted to a category."""

    def delete_item(self, item_id: str) -> None:
        """Remove an item record."""

    def flush(self) -> None:
        """Persist the current state."""


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class PortfolioService:
    """Application service for portfolio uploads and deletion."""

    repository: PortfolioRepository
    storage: FileStorage
    id_factory: Callable[[], str] = _new_id
    clock: Callable[[], datetime] = _utcnow

    async def add_items(
        self, category: str | None, uploads: list[IncomingFile]
    ) -> list[PortfolioItem]:
        """Store every upload as its own item and persist them in one save."""
        if not uploads:
            raise BadRequestError("No files received")
        resolved_category = (category or "").strip() or DEFAULT_CATEGORY
        items = []
        for upload in uploads:
            stored = await asyncio.to_thread(self.storage.save, upload)
            items.append(
                PortfolioItem(
                    id=self.id_factory(),
                    title=DEFAULT_TITLE,
                    description="",
                    category=resolved_category,
                    url=stored.url,
                    filename=stored.filename,
                    created_at=self.clock(),
                )
            )
        self.repository.add_items(items)
        self.repository.flush()
        logger.info(
            "%d portfolio items uploaded, category: %s", len(items), resolved_category
        )
        return items

    def list_items(self, category: str | None = None) -> list[PortfolioItem]:
        """Return portfolio items, newest first."""
        return self.repository.list_items(category)

    async def delete_item(self, item_id: str) -> CleanupReport:
        """Delete an item and its backing file."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Portfolio item does not exist")
        self.repository.delete_item(item_id)
        report = await remove_files(self.storage, [item.filename])
        self.repository.flush()
        logger.info("Portfolio item %s deleted", item_id)
        return report
