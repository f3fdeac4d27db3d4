"""GitHub API client for repository metadata and contributor lists.

Async REST wrapper with:
- optional bearer token auth (passed in explicitly, never read from a global)
- a fixed per-request timeout
- capped contributor pagination

``fetch_contributors`` and ``fetch_repository`` never raise; failures are logged
and reported as an empty list / ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from contribboard.config import DEFAULT_API_BASE, Settings
from contribboard.errors import FetchFailure
from contribboard.models.contributor import RawContributor
from contribboard.models.repository import RepositoryMetadata

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = DEFAULT_API_BASE,
        user_agent: str = "contribboard/1.0",
        timeout: float = 10.0,
        max_pages: int = 5,
        per_page: int = 100,
    ) -> None:
        self._token = (token or "").strip() or None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_pages = max(1, max_pages)
        self._per_page = max(1, min(per_page, 100))
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            self._headers["Authorization"] = f"Bearer {self._token}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubClient":
        return cls(
            token=settings.github_token,
            base_url=settings.api_base,
            timeout=settings.timeout_seconds,
            max_pages=settings.contributors_max_pages,
        )

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, headers=self._headers)

    async def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> Any:
        """GET JSON for a path or full URL. Raises FetchFailure on any failure.

        Pass ``client`` to reuse one connection pool across several requests.
        """
        if client is None:
            async with self._http_client() as own_client:
                return await self.get_json(path, params=params, client=own_client)

        url = path if path.startswith("http") else f"{self._base_url}{path}"
        try:
            r = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise FetchFailure(url, f"{exc.__class__.__name__}: {exc}") from exc

        if r.status_code >= 400:
            raise FetchFailure(url, f"status {r.status_code}: {r.text[:200]}", status_code=r.status_code)
        if r.status_code == 204:
            # GitHub answers 204 for empty repositories.
            return None
        try:
            return r.json()
        except ValueError as exc:
            raise FetchFailure(url, "invalid JSON body", status_code=r.status_code) from exc

    async def list_contributors(self, owner: str, name: str) -> list[RawContributor]:
        """List contributors across pages. Raises FetchFailure."""
        out: list[RawContributor] = []
        path = f"/repos/{owner}/{name}/contributors"
        async with self._http_client() as client:
            for page in range(1, self._max_pages + 1):
                data = await self.get_json(
                    path, params={"per_page": self._per_page, "page": page}, client=client
                )
                if data is None:
                    break
                if not isinstance(data, list):
                    raise FetchFailure(f"{self._base_url}{path}", "expected a JSON array")
                try:
                    out.extend(RawContributor.model_validate(row) for row in data)
                except ValidationError as exc:
                    raise FetchFailure(f"{self._base_url}{path}", f"malformed contributor: {exc}") from exc
                if len(data) < self._per_page:
                    break
        return out

    async def fetch_contributors(self, owner: str, name: str) -> list[RawContributor]:
        try:
            return await self.list_contributors(owner, name)
        except FetchFailure as exc:
            logger.warning("github_contributors_fetch_failed owner=%s name=%s error=%s", owner, name, exc)
            return []

    async def fetch_repository(self, owner: str, name: str) -> RepositoryMetadata | None:
        try:
            data = await self.get_json(f"/repos/{owner}/{name}")
            if not isinstance(data, dict):
                raise FetchFailure(f"{self._base_url}/repos/{owner}/{name}", "expected a JSON object")
            try:
                return RepositoryMetadata.model_validate(data)
            except ValidationError as exc:
                raise FetchFailure(f"{self._base_url}/repos/{owner}/{name}", f"malformed repository: {exc}") from exc
        except FetchFailure as exc:
            logger.warning("github_repository_fetch_failed owner=%s name=%s error=%s", owner, name, exc)
            return None
