"""Cross-repository leaderboard and per-project aggregation.

Flow: tracked repositories -> concurrent contributor fetch -> flatten in tracked
order -> merge by login -> score/badge -> stable sort by score desc -> rank.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterable, Optional, Sequence, Union

from contribboard.models.contributor import AggregatedContributor, RawContributor
from contribboard.models.repository import ProjectSummary, TrackedRepository
from contribboard.services import scoring_service
from contribboard.services.github_client import GitHubClient

log = logging.getLogger(__name__)

ContributorFetcher = Callable[
    [str, str], Union[Sequence[RawContributor], Awaitable[Sequence[RawContributor]]]
]


@dataclass
class _Group:
    login: str
    avatar_url: str
    total: int = 0
    repositories: set[TrackedRepository] = field(default_factory=set)


async def _call_fetch(fetch: ContributorFetcher, repo: TrackedRepository):
    if inspect.iscoroutinefunction(fetch):
        return await fetch(repo.owner, repo.name)
    # Blocking fetchers run in a worker thread.
    result = await asyncio.to_thread(fetch, repo.owner, repo.name)
    if inspect.isawaitable(result):
        result = await result
    return result


async def _fetch_one(
    fetch: ContributorFetcher, repo: TrackedRepository, timeout: Optional[float] = None
) -> list[RawContributor]:
    try:
        result = await asyncio.wait_for(_call_fetch(fetch, repo), timeout)
        return list(result or [])
    except asyncio.TimeoutError:
        log.warning("leaderboard_fetch_timed_out repo=%s timeout_s=%s", repo.full_name, timeout)
        return []
    except Exception as exc:
        log.warning("leaderboard_fetch_skipped repo=%s error=%s", repo.full_name, exc)
        return []


async def fetch_all(
    tracked: Sequence[TrackedRepository], fetch: ContributorFetcher, timeout: Optional[float] = None
) -> list[tuple[TrackedRepository, list[RawContributor]]]:
    """Fetch every repository concurrently; results stay in tracked order."""
    results = await asyncio.gather(*(_fetch_one(fetch, repo, timeout) for repo in tracked))
    return list(zip(tracked, results))


def merge_contributors(
    per_repository: Iterable[tuple[TrackedRepository, Sequence[RawContributor]]],
) -> list[AggregatedContributor]:
    """Merge tagged per-repository rows by login and rank the result."""
    groups: dict[str, _Group] = {}
    for repo, contributors in per_repository:
        for c in contributors:
            group = groups.get(c.login)
            if group is None:
                group = _Group(login=c.login, avatar_url=c.avatar_url)
                groups[c.login] = group
            group.total += c.contributions
            if c.contributions > 0:
                group.repositories.add(repo)

    ordered = sorted(groups.values(), key=lambda g: scoring_service.score(g.total), reverse=True)
    return [
        AggregatedContributor(
            login=g.login,
            avatar_url=g.avatar_url,
            total_contributions=g.total,
            repository_count=len(g.repositories),
            score=scoring_service.score(g.total),
            badge=scoring_service.classify(g.total),
            rank=position,
        )
        for position, g in enumerate(ordered, start=1)
    ]


async def build_leaderboard(
    tracked: Sequence[TrackedRepository],
    fetch: ContributorFetcher,
    timeout: Optional[float] = None,
) -> list[AggregatedContributor]:
    """Build the global leaderboard.

    A repository whose fetch fails, or does not finish within ``timeout`` seconds,
    contributes nothing.
    """
    if not tracked:
        return []
    per_repository = await fetch_all(tracked, fetch, timeout)
    leaderboard = merge_contributors(per_repository)
    if not leaderboard:
        log.warning("leaderboard_empty tracked=%s", len(tracked))
    else:
        log.info(
            "leaderboard_built tracked=%s contributors=%s",
            len(tracked),
            len(leaderboard),
        )
    return leaderboard


async def list_projects(client: GitHubClient, tracked: Sequence[TrackedRepository]) -> list[ProjectSummary]:
    """Metadata plus contributor count for each tracked repository, in tracked order.

    Repositories whose metadata cannot be fetched are left out.
    """

    async def _summary(repo: TrackedRepository) -> ProjectSummary | None:
        metadata, contributors = await asyncio.gather(
            client.fetch_repository(repo.owner, repo.name),
            client.fetch_contributors(repo.owner, repo.name),
        )
        if metadata is None:
            return None
        return ProjectSummary(**metadata.model_dump(), contributor_count=len(contributors))

    summaries = await asyncio.gather(*(_summary(repo) for repo in tracked))
    return [s for s in summaries if s is not None]
