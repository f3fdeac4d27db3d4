"""Search and pagination over an already-ranked list.

Ranking is done once over the full set; these helpers never re-rank, so the
rank shown next to a filtered row is its rank on the full leaderboard.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence, TypeVar

from contribboard.errors import InvalidInput


class _HasLogin(Protocol):
    login: str


T = TypeVar("T", bound=_HasLogin)

TOP_PERFORMER_COUNT = 3


def filter_by_login(entries: Sequence[T], query: str | None) -> list[T]:
    """Case-insensitive substring match on login. Blank query keeps everything."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(entries)
    return [e for e in entries if needle in e.login.lower()]


def top_performers(entries: Sequence[T], limit: int = TOP_PERFORMER_COUNT) -> list[T]:
    return list(entries[: max(0, limit)])


def paginate(entries: Sequence[T], page: int, page_size: int) -> dict:
    """Slice one 1-based page. Pages past the end are empty, not an error."""
    if page < 1:
        raise InvalidInput(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise InvalidInput(f"page_size must be >= 1, got {page_size}")
    total = len(entries)
    total_pages = math.ceil(total / page_size) if total else 0
    start = (page - 1) * page_size
    end = start + page_size
    return {
        "page": page,
        "page_size": page_size,
        "total": total,
        "total_pages": total_pages,
        "has_previous": page > 1,
        "has_next": end < total,
        "items": list(entries[start:end]),
    }
