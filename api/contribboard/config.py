"""Process configuration, read once from the environment at startup.

Config: GITHUB_TOKEN (or GH_TOKEN), GITHUB_API_BASE, TRACKED_REPOSITORIES
(comma-separated owner/name), GITHUB_TIMEOUT_SECONDS, GITHUB_CONTRIBUTORS_MAX_PAGES,
LEADERBOARD_PAGE_SIZE, PROJECT_PAGE_SIZE, ALLOWED_ORIGINS, API_SLOW_REQUEST_MS.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from contribboard.models.repository import TrackedRepository

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_TRACKED_REPOSITORIES = (
    "byteom/quiz-lab",
    "byteom/my-portfolio",
    "vaishnavirajj/Task-Management-Board",
    "ankit071105/Ticket-Booking",
)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    github_token: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    tracked_repositories: tuple[TrackedRepository, ...] = Field(default_factory=tuple)
    timeout_seconds: float = 10.0
    contributors_max_pages: int = 5
    leaderboard_page_size: int = 10
    project_page_size: int = 5
    allowed_origins: tuple[str, ...] = ("http://localhost:3000",)
    slow_request_ms: float = 1500.0


def _env_str(env: Mapping[str, str], name: str) -> Optional[str]:
    raw = env.get(name)
    if raw is None:
        return None
    return raw.strip() or None


def _env_int(env: Mapping[str, str], name: str, default: int, low: int, high: int) -> int:
    raw = (env.get(name) or str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        value = default
    return max(low, min(value, high))


def _env_float(env: Mapping[str, str], name: str, default: float, low: float, high: float) -> float:
    raw = (env.get(name) or str(default)).strip()
    try:
        value = float(raw)
    except ValueError:
        value = default
    return max(low, min(value, high))


def parse_tracked_repositories(raw: Optional[str]) -> tuple[TrackedRepository, ...]:
    """Parse ``owner/name,owner/name``. Malformed and duplicate entries are skipped."""
    if raw is None:
        entries: list[str] = list(DEFAULT_TRACKED_REPOSITORIES)
    else:
        entries = [s.strip() for s in raw.split(",") if s.strip()]
    out: list[TrackedRepository] = []
    seen: set[TrackedRepository] = set()
    for entry in entries:
        try:
            repo = TrackedRepository.parse(entry)
        except ValueError:
            logger.warning("tracked_repository_invalid entry=%r", entry)
            continue
        if repo in seen:
            continue
        seen.add(repo)
        out.append(repo)
    return tuple(out)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    token = _env_str(env, "GITHUB_TOKEN") or _env_str(env, "GH_TOKEN")
    origins_raw = env.get("ALLOWED_ORIGINS", "http://localhost:3000")
    return Settings(
        github_token=token,
        api_base=(_env_str(env, "GITHUB_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
        tracked_repositories=parse_tracked_repositories(env.get("TRACKED_REPOSITORIES")),
        timeout_seconds=_env_float(env, "GITHUB_TIMEOUT_SECONDS", 10.0, 1.0, 120.0),
        contributors_max_pages=_env_int(env, "GITHUB_CONTRIBUTORS_MAX_PAGES", 5, 1, 50),
        leaderboard_page_size=_env_int(env, "LEADERBOARD_PAGE_SIZE", 10, 1, 100),
        project_page_size=_env_int(env, "PROJECT_PAGE_SIZE", 5, 1, 100),
        allowed_origins=tuple(o.strip() for o in origins_raw.split(",") if o.strip()),
        slow_request_ms=_env_float(env, "API_SLOW_REQUEST_MS", 1500.0, 25.0, 600000.0),
    )
