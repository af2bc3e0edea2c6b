"""JSON file persistence for the whole studio document."""

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from photo_studio.adapters.document_models import (
    PhotoDocument,
    PortfolioItemDocument,
    SessionDocument,
    StudioDocumentModel,
)
from photo_studio.domain.portfolio import PortfolioItem
from photo_studio.domain.sessions import PhotoRecord, SessionRecord
from photo_studio.domain.studio import StudioDocument

logger = logging.getLogger(__name__)


@dataclass
class JsonDocumentStore:
    """Loads and rewrites the studio document as a single JSON file.

    There is no journal: each save overwrites the file, so the last
    successful write wins. Save failures are logged and the in-memory
    document stays authoritative until the next successful save.
    """

    path: Path

    def load(self) -> StudioDocument:
        """Read the document, creating an empty one when the file is missing."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.warning("%s does not exist, creating an empty document", self.path)
            document = StudioDocument()
            self.save(document)
            return document
        except OSError:
            logger.exception("Failed to read %s", self.path)
            return StudioDocument()

        try:
            model = StudioDocumentModel.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError):
            logger.exception("Corrupt document at %s, starting empty", self.path)
            return StudioDocument()
        logger.info("Loaded studio document from %s", self.path)
        return _from_model(model)

    def save(self, document: StudioDocument) -> None:
        """Overwrite the backing file with the full document."""
        payload = _to_model(document).model_dump_json(by_alias=True, indent=2)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError:
            logger.exception("Failed to save studio document to %s", self.path)
            return
        logger.info("Saved studio document to %s", self.path)


def _from_model(model: StudioDocumentModel) -> StudioDocument:
    sessions = {
        session_id: SessionRecord(
            id=session_id,
            customer_name=entry.customer_name,
            status=entry.status,
            created_at=entry.created_at,
            photos=[
                PhotoRecord(
                    id=photo.id,
                    url=photo.url,
                    filename=photo.filename,
                    selected=photo.selected,
                )
                for photo in entry.photos
            ],
        )
        for session_id, entry in model.sessions.items()
    }
    items = [
        PortfolioItem(
            id=item.id,
            title=item.title,
            description=item.description,
            category=item.category,
            url=item.url,
            filename=item.filename,
            created_at=item.created_at,
        )
        for item in model.portfolio_items
    ]
    return StudioDocument(sessions=sessions, portfolio_items=items)


def _to_model(document: StudioDocument) -> StudioDocumentModel:
    return StudioDocumentModel(
        sessions={
            session_id: SessionDocument(
                customer_name=session.customer_name,
                status=session.status,
                created_at=session.created_at,
                photos=[
                    PhotoDocument(
                        id=photo.id,
                        url=photo.url,
                        filename=photo.filename,
                        selected=photo.selected,
                    )
                    for photo in session.photos
                ],
            )
            for session_id, session in document.sessions.items()
        },
        portfolio_items=[
            PortfolioItemDocument(
                id=item.id,
                title=item.title,
                description=item.description,
                category=item.category,
                url=item.url,
                filename=item.filename,
                created_at=item.created_at,
            )
            for item in document.portfolio_items
        ],
    )
