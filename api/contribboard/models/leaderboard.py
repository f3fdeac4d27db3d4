"""Paged leaderboard responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from contribboard.models.contributor import AggregatedContributor, ScoredContributor


class PageInfo(BaseModel):
    query: str = ""
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    has_previous: bool
    has_next: bool


class LeaderboardPage(PageInfo):
    """GET /api/leaderboard response."""

    data_available: bool
    top_performers: list[AggregatedContributor] = Field(default_factory=list)
    items: list[AggregatedContributor] = Field(default_factory=list)


class ProjectContributorsPage(PageInfo):
    """GET /api/projects/{owner}/{name}/contributors response."""

    owner: str
    name: str
    top_performers: list[ScoredContributor] = Field(default_factory=list)
    items: list[ScoredContributor] = Field(default_factory=list)
