"""Selection code generation for sharing a session with a client."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from photo_studio.domain.errors import BadRequestError, InternalError
from photo_studio.services.sessions import SessionRepository

logger = logging.getLogger(__name__)


class CodeRenderer(Protocol):
    """Interface for rendering a scannable code image."""

    def render(self, name: str, content: str) -> str:
        """Render content to an image stored under name and return its URL."""


@dataclass
class SelectionCodeService:
    """Builds the QR code that points a client at a session's selection page."""

    repository: SessionRepository
    renderer: CodeRenderer

    async def generate_code(self, session_id: str | None, page: str | None) -> str:
        """Render the selection code for a session and return its URL."""
        if not session_id or not page:
            raise BadRequestError("sessionId and page are required")
        session = self.repository.get_session(session_id)
        if session is None or not session.photos:
            raise BadRequestError(
                "Session does not exist or has no photos, cannot generate a code"
            )

        target = f"{page}?sessionId={session_id}"
        try:
            url = await asyncio.to_thread(
                self.renderer.render, f"qrcode-{session_id}.png", target
            )
        except Exception as exc:
            logger.exception(
                "Failed to generate selection code", extra={"session_id": session_id}
            )
            raise InternalError("Failed to generate QR code") from exc
        logger.info("Selection code generated: %s", url)
        return url
