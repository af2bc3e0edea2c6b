"""Portfolio repository backed by the in-memory studio document."""

from dataclasses import dataclass

from photo_studio.adapters.json_document_store import JsonDocumentStore
from photo_studio.domain.portfolio import PortfolioItem
from photo_studio.domain.studio import StudioDocument
from photo_studio.services.portfolio import PortfolioRepository
from photo_studio.services.queries import ALL_FILTER, newest_first


@dataclass
class JsonPortfolioRepository(PortfolioRepository):
    """Portfolio items held in memory and flushed to the JSON document store."""

    store: JsonDocumentStore
    document: StudioDocument

    def add_items(self, items: list[PortfolioItem]) -> None:
        """Append items in upload order."""
        self.document.portfolio_items.extend(items)

    def get_item(self, item_id: str) -> PortfolioItem | None:
        """Return an item by id, if present."""
        for item in self.document.portfolio_items:
            if item.id == item_id:
                return item
        return None

    def list_items(self, category: str | None = None) -> list[PortfolioItem]:
        """Return items newest first, filtered by exact category."""
        items = self.document.portfolio_items
        if category and category != ALL_FILTER:
            items = [item for item in items if item.category == category]
        return newest_first(items, lambda item: item.created_at)

    def delete_item(self, item_id: str) -> None:
        """Remove an item record if present."""
        self.document.portfolio_items[:] = [
            item for item in self.document.portfolio_items if item.id != item_id
        ]

    def flush(self) -> None:
        """Rewrite the whole document."""
        self.store.save(self.document)
