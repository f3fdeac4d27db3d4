"""Contributor records: raw per-repository rows, per-project scored rows, and leaderboard entries."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Badge(str, Enum):
    """Contribution tier, highest first."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class RawContributor(BaseModel):
    """One row of GET /repos/{owner}/{name}/contributors."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    login: str = Field(min_length=1)
    avatar_url: str = ""
    contributions: int = Field(default=0, ge=0)


class ScoredContributor(RawContributor):
    """Single-project contributor with badge, score and in-project rank attached."""

    score: int
    badge: Badge
    rank: int = Field(ge=1)


class AggregatedContributor(BaseModel):
    """Cross-repository leaderboard entry keyed by login."""

    model_config = ConfigDict(frozen=True)

    login: str
    avatar_url: str = ""
    total_contributions: int = Field(ge=0)
    repository_count: int = Field(ge=0)
    score: int
    badge: Badge
    rank: int = Field(ge=1)
