"""Shared test fixtures."""

import io
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from photo_studio.config import Settings
from photo_studio.containers import AppContainer, build_container
from photo_studio.domain.files import IncomingFile, StoredFile
from photo_studio.domain.portfolio import PortfolioItem
from photo_studio.domain.sessions import (
    STATUS_DRAFT,
    UNKNOWN_CUSTOMER,
    SessionRecord,
    SessionSummary,
)
from photo_studio.services.codes import CodeRenderer
from photo_studio.services.files import FileStorage
from photo_studio.services.portfolio import PortfolioRepository
from photo_studio.services.queries import (
    ALL_FILTER,
    PageRequest,
    SessionFilter,
    SessionPage,
    newest_first,
    paginate_sessions,
)
from photo_studio.services.sessions import SessionRepository


@dataclass
class TickingClock:
    """Clock that advances one second per call."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@dataclass
class InMemoryFileStorage(FileStorage):
    """File storage that keeps contents in a dict."""

    files: dict[str, bytes] = field(default_factory=dict)
    counter: int = 0

    def save(self, upload: IncomingFile) -> StoredFile:
        self.counter += 1
        suffix = Path(upload.original_name).suffix
        filename = f"{upload.field_name}-{self.counter}{suffix}"
        self.files[filename] = upload.content.read()
        return StoredFile(filename=filename, url=self.url_for(filename))

    def delete(self, filename: str) -> None:
        if filename not in self.files:
            raise FileNotFoundError(filename)
        del self.files[filename]

    def path_for(self, filename: str) -> Path:
        return Path("/memory") / filename

    def url_for(self, filename: str) -> str:
        return f"http://studio.test/uploads/{filename}"


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    clock: TickingClock = field(default_factory=TickingClock)
    flush_count: int = 0

    def create_session(
        self, session_id: str, customer_name: str = UNKNOWN_CUSTOMER
    ) -> SessionRecord:
        session = SessionRecord(
            id=session_id,
            customer_name=customer_name,
            status=STATUS_DRAFT,
            created_at=self.clock(),
        )
        self.sessions[session_id] = session
        return session

    def get_session(self, session_id: str) -> SessionRecord | None:
        return self.sessions.get(session_id)

    def exists(self, session_id: str) -> bool:
        return session_id in self.sessions

    def delete_session(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)

    def list_sessions(
        self, session_filter: SessionFilter, page_request: PageRequest
    ) -> SessionPage:
        summaries = [
            SessionSummary(
                id=session.id,
                customer_name=session.customer_name,
                status=session.status,
                photo_count=len(session.photos),
                created_at=session.created_at,
            )
            for session in self.sessions.values()
        ]
        return paginate_sessions(summaries, session_filter, page_request)

    def flush(self) -> None:
        self.flush_count += 1


@dataclass
class InMemoryPortfolioRepository(PortfolioRepository):
    """In-memory portfolio repository for tests."""

    items: list[PortfolioItem] = field(default_factory=list)
    flush_count: int = 0

    def add_items(self, items: list[PortfolioItem]) -> None:
        self.items.extend(items)

    def get_item(self, item_id: str) -> PortfolioItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def list_items(self, category: str | None = None) -> list[PortfolioItem]:
        items = self.items
        if category and category != ALL_FILTER:
            items = [item for item in items if item.category == category]
        return newest_first(items, lambda item: item.created_at)

    def delete_item(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.id != item_id]

    def flush(self) -> None:
        self.flush_count += 1


@dataclass
class FakeCodeRenderer(CodeRenderer):
    """Code renderer that records requests instead of drawing images."""

    rendered: list[tuple[str, str]] = field(default_factory=list)
    fail: bool = False

    def render(self, name: str, content: str) -> str:
        if self.fail:
            raise OSError("disk full")
        self.rendered.append((name, content))
        return f"http://studio.test/qrcodes/{name}"


class SequentialIds:
    """Deterministic id factory: prefix-1, prefix-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


def make_upload(
    name: str = "portrait.jpg", content: bytes = b"jpeg-bytes"
) -> IncomingFile:
    return IncomingFile(original_name=name, content=io.BytesIO(content))


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        debug_mode=True,
        base_url="http://studio.test",
        data_file=tmp_path / "db.json",
        upload_dir=tmp_path / "uploads",
        qrcode_dir=tmp_path / "qrcodes",
        portfolio_dir=tmp_path / "portfolio_uploads",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
