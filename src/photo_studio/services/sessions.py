"""Photo session lifecycle: uploads, removal, finishing and client selection."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from photo_studio.domain.errors import (
    BadRequestError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)
from photo_studio.domain.files import CleanupReport, IncomingFile
from photo_studio.domain.sessions import (
    ROLE_PHOTOGRAPHER,
    STATUS_DRAFT,
    STATUS_READY,
    STATUS_SUBMITTED,
    UNKNOWN_CUSTOMER,
    PhotoRecord,
    PhotoUploadResult,
    PhotoView,
    SessionRecord,
)
from photo_studio.services.files import FileStorage, remove_files
from photo_studio.services.queries import PageRequest, SessionFilter, SessionPage

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for photo sessions."""

    def create_session(
        self, session_id: str, customer_name: str = UNKNOWN_CUSTOMER
    ) -> SessionRecord:
        """Create a draft session, replacing any record with the same id."""

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""

    def exists(self, session_id: str) -> bool:
        """Return true when a session with the id exists."""

    def delete_session(self, session_id: str) -> None:
        """Remove a session record."""

    def list_sessions(
        self, session_filter: SessionFilter, page_request: PageRequest
    ) -> SessionPage:
        """Return one filtered page of session summaries."""

    def flush(self) -> None:
        """Persist the current state."""


def _new_id() -> str:
    return str(uuid4())


@dataclass
class SessionService:
    """Lifecycle manager for sessions and their photos.

    Status only moves forward: draft -> ready (finish) -> submitted
    (selection). Every mutating call flushes the repository before it
    returns; file cleanup is best-effort and reported, never raised.
    """

    repository: SessionRepository
    storage: FileStorage
    id_factory: Callable[[], str] = _new_id

    async def add_photo(
        self,
        upload: IncomingFile | None,
        session_id: str | None = None,
        customer_name: str | None = None,
    ) -> PhotoUploadResult:
        """Store an uploaded photo, creating the session when needed."""
        if upload is None:
            raise BadRequestError("No file received")
        stored = await asyncio.to_thread(self.storage.save, upload)

        resolved_id = session_id or self.id_factory()
        session = self.repository.get_session(resolved_id)
        if session is None:
            session = self.repository.create_session(
                resolved_id, customer_name or UNKNOWN_CUSTOMER
            )
        elif customer_name and session.customer_name == UNKNOWN_CUSTOMER:
            session.customer_name = customer_name

        photo = PhotoRecord(
            id=self.id_factory(), url=stored.url, filename=stored.filename
        )
        session.photos.append(photo)
        self.repository.flush()
        logger.info(
            "Photo %s uploaded to session %s for %s",
            photo.id,
            session.id,
            session.customer_name,
        )
        return PhotoUploadResult(
            session_id=session.id, photo_id=photo.id, photo_url=photo.url
        )

    async def remove_photo(self, session_id: str, photo_id: str) -> CleanupReport:
        """Remove one photo; a session left without photos is deleted."""
        session = self._require_session(session_id)
        photo = session.find_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo does not exist in this session")

        session.photos.remove(photo)
        if not session.photos:
            self.repository.delete_session(session.id)
            logger.info("Session %s has no photos left, deleted", session.id)

        report = await remove_files(self.storage, [photo.filename])
        self.repository.flush()
        logger.info("Photo %s removed from session %s", photo_id, session.id)
        return report

    async def delete_session(self, session_id: str) -> CleanupReport:
        """Delete a session together with every photo file it owns."""
        session = self._require_session(session_id)
        report = await remove_files(
            self.storage, [photo.filename for photo in session.photos]
        )
        self.repository.delete_session(session.id)
        self.repository.flush()
        logger.info(
            "Session %s deleted with %d photos", session.id, len(session.photos)
        )
        return report

    def finish_session(self, session_id: str | None) -> None:
        """Mark a session ready for client selection."""
        session = self._require_session(session_id)
        if not session.photos:
            raise InvalidStateError("Session has no photos and cannot be finished")
        session.status = STATUS_READY
        self.repository.flush()
        logger.info("Session %s marked ready", session.id)

    def list_photos(
        self, session_id: str | None, requester_role: str
    ) -> list[PhotoView]:
        """Return the photos visible to the requester."""
        session = self._require_session(session_id)
        if session.status == STATUS_DRAFT and requester_role != ROLE_PHOTOGRAPHER:
            raise ForbiddenError(
                "This selection code is not ready yet, please contact the photographer"
            )
        logger.info("Listing photos for session %s", session.id)
        return [
            PhotoView(id=photo.id, url=photo.url, selected=photo.selected)
            for photo in session.photos
        ]

    def submit_selection(self, session_id: str | None, selected_ids: object) -> None:
        """Replace the session's selection with the given photo ids."""
        session = self._require_session(session_id)
        if not isinstance(selected_ids, list) or not all(
            isinstance(photo_id, str) for photo_id in selected_ids
        ):
            raise BadRequestError("selectedPhotoIds must be a list of photo ids")

        chosen = set(selected_ids)
        for photo in session.photos:
            photo.selected = photo.id in chosen
        session.status = STATUS_SUBMITTED
        self.repository.flush()
        logger.info(
            "Selection submitted for session %s: %s", session.id, sorted(chosen)
        )

    def list_sessions(
        self,
        status: str | None = None,
        search: str | None = None,
        page: object = None,
        limit: object = None,
    ) -> SessionPage:
        """Return a filtered, newest-first page of session summaries."""
        return self.repository.list_sessions(
            SessionFilter(status=status, search=search),
            PageRequest.parse(page, limit),
        )

    def _require_session(self, session_id: str | None) -> SessionRecord:
        session = self.repository.get_session(session_id) if session_id else None
        if session is None:
            raise NotFoundError("Session does not exist")
        return session
