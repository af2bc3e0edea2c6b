"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Form, Header, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from photo_studio.api.request_models import (
    FinishSessionRequest,
    GenerateCodeRequest,
    SubmitSelectionRequest,
)
from photo_studio.app_logging import configure_logging
from photo_studio.config import parse_cors_origins
from photo_studio.containers import AppContainer
from photo_studio.domain.errors import (
    BadRequestError,
    ForbiddenError,
    InternalError,
    InvalidStateError,
    NotFoundError,
    StudioError,
)
from photo_studio.domain.files import IncomingFile
from photo_studio.domain.portfolio import PortfolioItem
from photo_studio.domain.sessions import SessionSummary, resolve_role

_ERROR_STATUS = {
    NotFoundError: 404,
    InvalidStateError: 400,
    BadRequestError: 400,
    ForbiddenError: 403,
    InternalError: 500,
}


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Photo studio API serving at %s", settings.public_base_url)
        logger.info("Session uploads: %s", settings.upload_dir.resolve())
        logger.info("Selection codes: %s", settings.qrcode_dir.resolve())
        logger.info("Portfolio uploads: %s", settings.portfolio_dir.resolve())
        logger.info("Data file: %s", settings.data_file.resolve())
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_origins, settings.debug_mode),
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "X-Client-Type"],
    )
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")
    app.mount("/qrcodes", StaticFiles(directory=settings.qrcode_dir), name="qrcodes")
    app.mount(
        "/portfolio_uploads",
        StaticFiles(directory=settings.portfolio_dir),
        name="portfolio_uploads",
    )

    @app.exception_handler(StudioError)
    async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
        return JSONResponse(
            status_code=_ERROR_STATUS.get(type(exc), 500),
            content={"code": 1, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Rejected malformed request to %s", request.url.path)
        return JSONResponse(
            status_code=400, content={"code": 1, "message": "Malformed request"}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/upload")
    async def upload_photo(
        request: Request,
        file: UploadFile | None = File(default=None),
        session_id: str | None = Form(default=None, alias="sessionId"),
        customer_name: str | None = Form(default=None, alias="customerName"),
    ) -> dict[str, object]:
        """Upload one photo into a new or existing session."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.session_service.add_photo(
            _incoming(file) if file is not None else None,
            session_id=session_id,
            customer_name=customer_name,
        )
        return {
            "code": 0,
            "message": "success",
            "photoId": result.photo_id,
            "photoUrl": result.photo_url,
            "sessionId": result.session_id,
        }

    @app.delete("/photo/{session_id}/{photo_id}")
    async def delete_photo(
        session_id: str, photo_id: str, request: Request
    ) -> dict[str, object]:
        """Delete one photo from a session."""
        state_container: AppContainer = request.app.state.container
        await state_container.session_service.remove_photo(session_id, photo_id)
        return {"code": 0, "message": "Photo deleted"}

    @app.delete("/session/{session_id}")
    async def delete_session(session_id: str, request: Request) -> dict[str, object]:
        """Delete a session and all of its photos."""
        state_container: AppContainer = request.app.state.container
        await state_container.session_service.delete_session(session_id)
        return {"code": 0, "message": "Session and all of its photos deleted"}

    @app.post("/finishSession")
    async def finish_session(
        payload: FinishSessionRequest, request: Request
    ) -> dict[str, object]:
        """Mark a session ready so the client can start selecting."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.finish_session(payload.session_id)
        return {"code": 0, "message": "Session finished, the client can now select"}

    @app.get("/sessions")
    async def list_sessions(
        request: Request,
        status: str | None = None,
        search: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> dict[str, object]:
        """Return sessions for the photographer, newest first."""
        state_container: AppContainer = request.app.state.container
        result = state_container.session_service.list_sessions(
            status=status, search=search, page=page, limit=limit
        )
        return {
            "code": 0,
            "message": "success",
            "sessions": [_serialize_summary(summary) for summary in result.sessions],
            "total": result.total,
            "page": result.page,
            "limit": result.limit,
        }

    @app.get("/photos")
    async def list_photos(
        request: Request,
        session_id: str | None = Query(default=None, alias="sessionId"),
        x_client_type: str | None = Header(default=None),
    ) -> dict[str, object]:
        """Return a session's photos for the photographer or the client."""
        state_container: AppContainer = request.app.state.container
        photos = state_container.session_service.list_photos(
            session_id, resolve_role(x_client_type)
        )
        return {
            "code": 0,
            "message": "success",
            "photos": [
                {"id": photo.id, "url": photo.url, "selected": photo.selected}
                for photo in photos
            ],
        }

    @app.post("/submitSelection")
    async def submit_selection(
        payload: SubmitSelectionRequest, request: Request
    ) -> dict[str, object]:
        """Record the client's selected photos."""
        state_container: AppContainer = request.app.state.container
        state_container.session_service.submit_selection(
            payload.session_id, payload.selected_photo_ids
        )
        return {"code": 0, "message": "Selection submitted"}

    @app.post("/generateQRCode")
    async def generate_code(
        payload: GenerateCodeRequest, request: Request
    ) -> dict[str, object]:
        """Render the QR code a client scans to open the selection page."""
        state_container: AppContainer = request.app.state.container
        code_url = await state_container.code_service.generate_code(
            payload.session_id, payload.page
        )
        return {"code": 0, "message": "success", "qrCodeUrl": code_url}

    @app.post("/portfolio/upload")
    async def upload_portfolio(
        request: Request,
        file: list[UploadFile] | None = File(default=None),
        category: str | None = Form(default=None),
    ) -> dict[str, object]:
        """Upload one or more portfolio items sharing a category."""
        state_container: AppContainer = request.app.state.container
        items = await state_container.portfolio_service.add_items(
            category, [_incoming(upload) for upload in file or []]
        )
        return {
            "code": 0,
            "message": "success",
            "uploadedItems": [
                {"itemId": item.id, "itemUrl": item.url} for item in items
            ],
        }

    @app.get("/portfolio")
    async def list_portfolio(
        request: Request, category: str | None = None
    ) -> dict[str, object]:
        """Return portfolio items, newest first."""
        state_container: AppContainer = request.app.state.container
        items = state_container.portfolio_service.list_items(category)
        return {
            "code": 0,
            "message": "success",
            "portfolioItems": [_serialize_portfolio_item(item) for item in items],
        }

    @app.delete("/portfolio/{item_id}")
    async def delete_portfolio_item(
        item_id: str, request: Request
    ) -> dict[str, object]:
        """Delete a portfolio item and its file."""
        state_container: AppContainer = request.app.state.container
        await state_container.portfolio_service.delete_item(item_id)
        return {"code": 0, "message": "Portfolio item deleted"}

    return app


def _incoming(upload: UploadFile) -> IncomingFile:
    """Adapt a FastAPI upload to the storage descriptor."""
    return IncomingFile(original_name=upload.filename or "", content=upload.file)


def _serialize_summary(summary: SessionSummary) -> dict[str, object]:
    return {
        "id": summary.id,
        "customerName": summary.customer_name,
        "status": summary.status,
        "photoCount": summary.photo_count,
        "createdAt": summary.created_at.isoformat(),
    }


def _serialize_portfolio_item(item: PortfolioItem) -> dict[str, object]:
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "category": item.category,
        "url": item.url,
        "filename": item.filename,
        "createdAt": item.created_at.isoformat(),
    }
