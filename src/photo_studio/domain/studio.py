"""The full studio document persisted as one JSON file."""

from dataclasses import dataclass, field

from photo_studio.domain.portfolio import PortfolioItem
from photo_studio.domain.sessions import SessionRecord


@dataclass
class StudioDocument:
    """In-memory state shared by the session and portfolio repositories."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    portfolio_items: list[PortfolioItem] = field(default_factory=list)
