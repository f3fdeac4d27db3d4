"""Tracked repository configuration and GitHub repository metadata."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackedRepository(BaseModel):
    """One repository to monitor. Fixed configuration, never mutated."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @field_validator("owner", "name")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must be non-empty")
        if "/" in value:
            raise ValueError("must not contain '/'")
        return value

    @classmethod
    def parse(cls, raw: str) -> "TrackedRepository":
        """Parse an ``owner/name`` string."""
        owner, sep, name = (raw or "").strip().partition("/")
        if not sep:
            raise ValueError(f"expected owner/name, got {raw!r}")
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


class RepositoryMetadata(BaseModel):
    """Subset of GET /repos/{owner}/{name} used by the project views."""

    model_config = ConfigDict(extra="ignore")

    name: str
    full_name: str = ""
    owner: str = ""
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    homepage: Optional[str] = None
    html_url: Optional[str] = None
    private: bool = False

    @field_validator("owner", mode="before")
    @classmethod
    def _owner_login(cls, value):
        # GitHub nests the owner as {"login": ..., ...}
        if isinstance(value, dict):
            return str(value.get("login") or "")
        return value or ""


class ProjectSummary(RepositoryMetadata):
    """Project card data: metadata plus how many contributors the project has."""

    contributor_count: int = 0
