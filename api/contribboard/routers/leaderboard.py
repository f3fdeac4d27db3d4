"""Global contributor leaderboard across all tracked repositories."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from contribboard.config import Settings
from contribboard.models.error import ErrorDetail
from contribboard.models.leaderboard import LeaderboardPage
from contribboard.routers.deps import get_client, get_settings
from contribboard.services import leaderboard_service, view_service
from contribboard.services.github_client import GitHubClient

router = APIRouter()


@router.get(
    "/leaderboard",
    response_model=LeaderboardPage,
    responses={422: {"model": ErrorDetail}},
)
async def get_leaderboard(
    q: str = Query("", description="Case-insensitive substring match on login."),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    client: GitHubClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
) -> LeaderboardPage:
    """Ranked leaderboard, filtered and paged for display. Rank is over the full set."""
    ranked = await leaderboard_service.build_leaderboard(
        settings.tracked_repositories,
        client.fetch_contributors,
        timeout=settings.timeout_seconds,
    )
    filtered = view_service.filter_by_login(ranked, q)
    paged = view_service.paginate(filtered, page, page_size or settings.leaderboard_page_size)
    return LeaderboardPage(
        query=q,
        data_available=bool(ranked),
        top_performers=view_service.top_performers(ranked),
        **paged,
    )
