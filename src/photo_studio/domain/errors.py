"""Errors raised by studio services."""


class StudioError(Exception):
    """Base class for client-facing service errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StudioError):
    """A session, photo or portfolio item does not exist."""


class InvalidStateError(StudioError):
    """The operation violates a session lifecycle precondition."""


class BadRequestError(StudioError):
    """The request input is malformed."""


class ForbiddenError(StudioError):
    """The requester may not see the resource yet."""


class InternalError(StudioError):
    """Artifact generation or unexpected I/O failed."""
