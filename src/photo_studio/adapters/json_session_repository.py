"""Session repository backed by the in-memory studio document."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from photo_studio.adapters.json_document_store import JsonDocumentStore
from photo_studio.domain.sessions import (
    STATUS_DRAFT,
    UNKNOWN_CUSTOMER,
    SessionRecord,
    SessionSummary,
)
from photo_studio.domain.studio import StudioDocument
from photo_studio.services.queries import (
    PageRequest,
    SessionFilter,
    SessionPage,
    paginate_sessions,
)
from photo_studio.services.sessions import SessionRepository


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class JsonSessionRepository(SessionRepository):
    """Sessions held in memory and flushed to the JSON document store."""

    store: JsonDocumentStore
    document: StudioDocument
    clock: Callable[[], datetime] = _utcnow

    def create_session(
        self, session_id: str, customer_name: str = UNKNOWN_CUSTOMER
    ) -> SessionRecord:
        """Insert a draft session, replacing any record at the same id."""
        session = SessionRecord(
            id=session_id,
            customer_name=customer_name,
            status=STATUS_DRAFT,
            created_at=self.clock(),
        )
        self.document.sessions[session_id] = session
        return session

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""
        return self.document.sessions.get(session_id)

    def exists(self, session_id: str) -> bool:
        """Return true when the session exists."""
        return session_id in self.document.sessions

    def delete_session(self, session_id: str) -> None:
        """Remove a session record if present."""
        self.document.sessions.pop(session_id, None)

    def list_sessions(
        self, session_filter: SessionFilter, page_request: PageRequest
    ) -> SessionPage:
        """Return one filtered, newest-first page of summaries."""
        summaries = (
            SessionSummary(
                id=session.id,
                customer_name=session.customer_name,
                status=session.status,
                photo_count=len(session.photos),
                created_at=session.created_at,
            )
            for session in self.document.sessions.values()
        )
        return paginate_sessions(summaries, session_filter, page_request)

    def flush(self) -> None:
        """Rewrite the whole document."""
        self.store.save(self.document)
