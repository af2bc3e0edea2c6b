"""Dependency container wiring for the application."""

from dataclasses import dataclass

from photo_studio.adapters.json_document_store import JsonDocumentStore
from photo_studio.adapters.json_portfolio_repository import JsonPortfolioRepository
from photo_studio.adapters.json_session_repository import JsonSessionRepository
from photo_studio.adapters.local_file_storage import LocalFileStorage
from photo_studio.adapters.qrcode_renderer import QrcodeRenderer
from photo_studio.config import Settings
from photo_studio.services.codes import SelectionCodeService
from photo_studio.services.portfolio import PortfolioService
from photo_studio.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: JsonDocumentStore
    session_service: SessionService
    portfolio_service: PortfolioService
    code_service: SelectionCodeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    for directory in (
        resolved_settings.upload_dir,
        resolved_settings.qrcode_dir,
        resolved_settings.portfolio_dir,
        resolved_settings.data_file.parent,
    ):
        directory.mkdir(parents=True, exist_ok=True)

    base_url = resolved_settings.public_base_url
    store = JsonDocumentStore(resolved_settings.data_file)
    document = store.load()
    session_repository = JsonSessionRepository(store=store, document=document)
    portfolio_repository = JsonPortfolioRepository(store=store, document=document)

    photo_storage = LocalFileStorage(resolved_settings.upload_dir, base_url, "uploads")
    portfolio_storage = LocalFileStorage(
        resolved_settings.portfolio_dir, base_url, "portfolio_uploads"
    )
    code_storage = LocalFileStorage(resolved_settings.qrcode_dir, base_url, "qrcodes")

    return AppContainer(
        settings=resolved_settings,
        store=store,
        session_service=SessionService(
            repository=session_repository, storage=photo_storage
        ),
        portfolio_service=PortfolioService(
            repository=portfolio_repository, storage=portfolio_storage
        ),
        code_service=SelectionCodeService(
            repository=session_repository, renderer=QrcodeRenderer(code_storage)
        ),
    )
