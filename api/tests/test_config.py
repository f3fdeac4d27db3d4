"""Tests for environment-driven settings."""

from contribboard.config import DEFAULT_TRACKED_REPOSITORIES, load_settings, parse_tracked_repositories
from contribboard.models.repository import TrackedRepository


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings({})

    assert settings.github_token is None
    assert settings.api_base == "https://api.github.com"
    assert [r.full_name for r in settings.tracked_repositories] == list(DEFAULT_TRACKED_REPOSITORIES)
    assert settings.timeout_seconds == 10.0
    assert settings.leaderboard_page_size == 10
    assert settings.project_page_size == 5


def test_token_falls_back_to_gh_token() -> None:
    assert load_settings({"GH_TOKEN": " abc "}).github_token == "abc"
    assert load_settings({"GITHUB_TOKEN": "one", "GH_TOKEN": "two"}).github_token == "one"
    assert load_settings({"GITHUB_TOKEN": "  "}).github_token is None


def test_numeric_settings_fall_back_and_clamp() -> None:
    settings = load_settings(
        {
            "GITHUB_TIMEOUT_SECONDS": "not-a-number",
            "GITHUB_CONTRIBUTORS_MAX_PAGES": "999",
            "LEADERBOARD_PAGE_SIZE": "0",
            "GITHUB_API_BASE": "https://ghe.example/api/v3/",
        }
    )

    assert settings.timeout_seconds == 10.0
    assert settings.contributors_max_pages == 50
    assert settings.leaderboard_page_size == 1
    assert settings.api_base == "https://ghe.example/api/v3"


def test_tracked_repositories_skip_malformed_and_duplicate_entries(caplog) -> None:
    repos = parse_tracked_repositories("a/one, nope ,a/one,/missing-owner,b/two,c/")

    assert repos == (TrackedRepository(owner="a", name="one"), TrackedRepository(owner="b", name="two"))
    assert "tracked_repository_invalid" in caplog.text


def test_empty_tracked_repositories_is_allowed() -> None:
    assert load_settings({"TRACKED_REPOSITORIES": ""}).tracked_repositories == ()
