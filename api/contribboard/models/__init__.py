"""Pydantic models."""

from contribboard.models.contributor import (
    AggregatedContributor,
    Badge,
    RawContributor,
    ScoredContributor,
)
from contribboard.models.error import ErrorDetail
from contribboard.models.leaderboard import LeaderboardPage, ProjectContributorsPage
from contribboard.models.repository import ProjectSummary, RepositoryMetadata, TrackedRepository

__all__ = [
    "AggregatedContributor",
    "Badge",
    "ErrorDetail",
    "LeaderboardPage",
    "ProjectContributorsPage",
    "ProjectSummary",
    "RawContributor",
    "RepositoryMetadata",
    "ScoredContributor",
    "TrackedRepository",
]
