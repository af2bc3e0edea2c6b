"""Filtering, sorting and pagination over in-memory collections."""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

from photo_studio.domain.sessions import SessionSummary

ALL_FILTER = "all"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

T = TypeVar("T")


@dataclass(frozen=True)
class SessionFilter:
    """Optional status and free-text filters for session listings."""

    status: str | None = None
    search: str | None = None

    def matches(self, summary: SessionSummary) -> bool:
        """Return true when the summary passes both filters."""
        if self.status and self.status != ALL_FILTER and summary.status != self.status:
            return False
        if self.search:
            needle = self.search.lower()
            return (
                needle in summary.id.lower()
                or needle in summary.customer_name.lower()
            )
        return True


@dataclass(frozen=True)
class PageRequest:
    """A 1-indexed page and page size."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def parse(cls, page: object = None, limit: object = None) -> "PageRequest":
        """Build a page request, falling back to defaults for invalid values."""
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
        )

    def slice(self, items: list[T]) -> list[T]:
        """Return the items on this page; out-of-range pages are empty."""
        start = (self.page - 1) * self.limit
        return items[start : start + self.limit]


@dataclass(frozen=True)
class SessionPage:
    """One page of session summaries plus the filtered total."""

    sessions: list[SessionSummary]
    total: int
    page: int
    limit: int


def newest_first(items: Iterable[T], created_at: Callable[[T], datetime]) -> list[T]:
    """Sort items by creation time, most recent first."""
    return sorted(items, key=created_at, reverse=True)


def paginate_sessions(
    summaries: Iterable[SessionSummary],
    session_filter: SessionFilter,
    page_request: PageRequest,
) -> SessionPage:
    """Filter, sort and paginate session summaries."""
    matching = newest_first(
        (summary for summary in summaries if session_filter.matches(summary)),
        lambda summary: summary.created_at,
    )
    return SessionPage(
        sessions=page_request.slice(matching),
        total=len(matching),
        page=page_request.page,
        limit=page_request.limit,
    )


def _positive_int(value: object, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    match = _LEADING_INT.match(str(value))
    if match is None:
        return default
    parsed = int(match.group(1))
    return parsed if parsed >= 1 else default
