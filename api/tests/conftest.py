"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contribboard.config import Settings  # noqa: E402
from contribboard.main import create_app  # noqa: E402
from contribboard.models.repository import TrackedRepository  # noqa: E402


@pytest.fixture
def tracked() -> tuple[TrackedRepository, ...]:
    return (
        TrackedRepository(owner="acme", name="x"),
        TrackedRepository(owner="acme", name="y"),
    )


@pytest.fixture
def settings(tracked) -> Settings:
    return Settings(github_token="test-token", tracked_repositories=tracked)


@pytest_asyncio.fixture
async def client(settings: Settings):
    """ASGI client against a fresh app built from test settings."""
    app = create_app(settings)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
