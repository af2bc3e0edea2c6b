"""Domain models for photo sessions."""

from dataclasses import dataclass, field
from datetime import datetime

STATUS_DRAFT = "draft"
STATUS_READY = "ready"
STATUS_SUBMITTED = "submitted"

UNKNOWN_CUSTOMER = "Unknown customer"

ROLE_PHOTOGRAPHER = "photographer"
ROLE_CLIENT = "client"


@dataclass
class PhotoRecord:
    """A photo stored within a session."""

    id: str
    url: str
    filename: str
    selected: bool = False


@dataclass
class SessionRecord:
    """Represents a photo session held in the studio document."""

    id: str
    customer_name: str
    status: str
    created_at: datetime
    photos: list[PhotoRecord] = field(default_factory=list)

    def find_photo(self, photo_id: str) -> PhotoRecord | None:
        """Return the photo with the given id, if present."""
        for photo in self.photos:
            if photo.id == photo_id:
                return photo
        return None


@dataclass(frozen=True)
class SessionSummary:
    """Listing row for a session."""

    id: str
    customer_name: str
    status: str
    photo_count: int
    created_at: datetime


@dataclass(frozen=True)
class PhotoView:
    """Photo as exposed to photographers and clients."""

    id: str
    url: str
    selected: bool


@dataclass(frozen=True)
class PhotoUploadResult:
    """Outcome of adding a photo to a session."""

    session_id: str
    photo_id: str
    photo_url: str


def resolve_role(client_type: str | None) -> str:
    """Map the client-type header to a requester role."""
    if client_type == ROLE_PHOTOGRAPHER:
        return ROLE_PHOTOGRAPHER
    return ROLE_CLIENT
