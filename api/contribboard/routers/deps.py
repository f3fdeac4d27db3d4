from __future__ import annotations

from fastapi import Request

from contribboard.config import Settings
from contribboard.services.github_client import GitHubClient


def get_client(request: Request) -> GitHubClient:
    return request.app.state.github_client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
