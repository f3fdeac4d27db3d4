"""Tests for search filtering and pagination over a ranked leaderboard."""

import pytest

from contribboard.errors import InvalidInput
from contribboard.models.contributor import AggregatedContributor
from contribboard.services.scoring_service import classify, score
from contribboard.services.view_service import filter_by_login, paginate, top_performers


def _ranked(*logins: str) -> list[AggregatedContributor]:
    out = []
    for rank, login in enumerate(logins, start=1):
        total = 100 - rank
        out.append(
            AggregatedContributor(
                login=login,
                total_contributions=total,
                repository_count=1,
                score=score(total),
                badge=classify(total),
                rank=rank,
            )
        )
    return out


def test_filter_is_case_insensitive_substring_and_keeps_full_set_rank() -> None:
    board = _ranked("Alice", "bob", "MALICE", "carol")

    hits = filter_by_login(board, "alic")

    assert [e.login for e in hits] == ["Alice", "MALICE"]
    assert [e.rank for e in hits] == [1, 3]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_keeps_everything(query) -> None:
    board = _ranked("a", "b")
    assert filter_by_login(board, query) == board


def test_paginate_slices_one_based_pages() -> None:
    board = _ranked(*[f"user{i}" for i in range(23)])

    first = paginate(board, 1, 10)
    last = paginate(board, 3, 10)

    assert [e.login for e in first["items"]] == [f"user{i}" for i in range(10)]
    assert first["total"] == 23
    assert first["total_pages"] == 3
    assert first["has_previous"] is False
    assert first["has_next"] is True
    assert [e.rank for e in last["items"]] == [21, 22, 23]
    assert last["has_next"] is False
    assert last["has_previous"] is True


def test_paginate_past_the_end_is_empty() -> None:
    page = paginate(_ranked("a", "b"), 5, 10)
    assert page["items"] == []
    assert page["has_next"] is False


def test_paginate_empty_input() -> None:
    page = paginate([], 1, 10)
    assert page["total"] == 0
    assert page["total_pages"] == 0
    assert page["items"] == []


@pytest.mark.parametrize(("page", "page_size"), [(0, 10), (-1, 10), (1, 0)])
def test_paginate_rejects_invalid_arguments(page: int, page_size: int) -> None:
    with pytest.raises(InvalidInput):
        paginate(_ranked("a"), page, page_size)


def test_top_performers_are_taken_from_the_given_order() -> None:
    board = _ranked("a", "b", "c", "d")
    assert [e.login for e in top_performers(board)] == ["a", "b", "c"]
    assert top_performers(board[:2]) == board[:2]
