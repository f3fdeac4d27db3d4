"""Tracked project listing and per-project contributor views."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from contribboard.config import Settings
from contribboard.models.error import ErrorDetail
from contribboard.models.leaderboard import ProjectContributorsPage
from contribboard.models.repository import ProjectSummary, RepositoryMetadata
from contribboard.routers.deps import get_client, get_settings
from contribboard.services import leaderboard_service, scoring_service, view_service
from contribboard.services.github_client import GitHubClient

router = APIRouter()


@router.get("/projects", response_model=list[ProjectSummary])
async def list_projects(
    client: GitHubClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
) -> list[ProjectSummary]:
    return await leaderboard_service.list_projects(client, settings.tracked_repositories)


@router.get(
    "/projects/{owner}/{name}",
    response_model=RepositoryMetadata,
    responses={404: {"model": ErrorDetail}},
)
async def get_project(owner: str, name: str, client: GitHubClient = Depends(get_client)) -> RepositoryMetadata:
    project = await client.fetch_repository(owner, name)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/projects/{owner}/{name}/contributors", response_model=ProjectContributorsPage)
async def get_project_contributors(
    owner: str,
    name: str,
    q: str = Query("", description="Case-insensitive substring match on login."),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    client: GitHubClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
) -> ProjectContributorsPage:
    """One project's contributors with badge and score, no cross-repository merge."""
    scored = scoring_service.score_contributors(await client.fetch_contributors(owner, name))
    filtered = view_service.filter_by_login(scored, q)
    paged = view_service.paginate(filtered, page, page_size or settings.project_page_size)
    return ProjectContributorsPage(
        owner=owner,
        name=name,
        query=q,
        top_performers=view_service.top_performers(scored),
        **paged,
    )
