"""Domain models for the portfolio gallery."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_TITLE = "Untitled"
DEFAULT_CATEGORY = "uncategorized"


@dataclass(frozen=True)
class PortfolioItem:
    """Represents a standalone portfolio media item."""

    id: str
    title: str
    description: str
    category: str
    url: str
    filename: str
    created_at: datetime
