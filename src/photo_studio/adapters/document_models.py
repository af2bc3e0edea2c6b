"""Pydantic models for the persisted studio document."""

from datetime import UTC, datetime
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from photo_studio.domain.portfolio import DEFAULT_CATEGORY, DEFAULT_TITLE
from photo_studio.domain.sessions import UNKNOWN_CUSTOMER

# Records written before timestamps were stored sort after everything else.
LEGACY_CREATED_AT = datetime(1970, 1, 1, tzinfo=UTC)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


StoredTimestamp = Annotated[datetime, AfterValidator(_as_utc)]


class PhotoDocument(BaseModel):
    """Stored photo entry."""

    id: str
    url: str
    filename: str
    selected: bool = False


class SessionDocument(BaseModel):
    """Stored session entry, keyed by session id in the document."""

    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(default=UNKNOWN_CUSTOMER, alias="customerName")
    photos: list[PhotoDocument] = Field(default_factory=list)
    status: Literal["draft", "ready", "submitted"] = "draft"
    created_at: StoredTimestamp = Field(default=LEGACY_CREATED_AT, alias="createdAt")


class PortfolioItemDocument(BaseModel):
    """Stored portfolio entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = DEFAULT_TITLE
    description: str = ""
    category: str = DEFAULT_CATEGORY
    url: str
    filename: str
    created_at: StoredTimestamp = Field(default=LEGACY_CREATED_AT, alias="createdAt")


class StudioDocumentModel(BaseModel):
    """Top-level document: session map plus portfolio list."""

    model_config = ConfigDict(populate_by_name=True)

    sessions: dict[str, SessionDocument] = Field(default_factory=dict)
    portfolio_items: list[PortfolioItemDocument] = Field(
        default_factory=list, alias="portfolioItems"
    )
