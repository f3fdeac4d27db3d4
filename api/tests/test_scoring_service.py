"""Tests for the badge/score policy."""

import pytest

from contribboard.errors import InvalidInput
from contribboard.models.contributor import Badge, RawContributor
from contribboard.services.scoring_service import classify, score, score_contributors, tier_index


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, Badge.E),
        (5, Badge.E),
        (6, Badge.D),
        (10, Badge.D),
        (11, Badge.C),
        (15, Badge.C),
        (16, Badge.B),
        (20, Badge.B),
        (21, Badge.A),
        (1_000_000, Badge.A),
    ],
)
def test_classify_threshold_boundaries(count: int, expected: Badge) -> None:
    assert classify(count) == expected


def test_classify_is_monotonic() -> None:
    tiers = [tier_index(classify(n)) for n in range(0, 60)]
    # Lower index is a better tier, so it never increases as counts grow.
    assert all(a >= b for a, b in zip(tiers, tiers[1:]))


def test_every_count_maps_to_one_tier() -> None:
    assert {classify(n) for n in range(0, 30)} == set(Badge)


@pytest.mark.parametrize("bad", [-1, -100, 1.5, "3", None, True])
def test_classify_rejects_out_of_domain_values(bad) -> None:
    with pytest.raises(InvalidInput):
        classify(bad)


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        score(-1)


def test_score_is_ten_per_contribution() -> None:
    assert score(0) == 0
    assert score(13) == 130
    assert score(1_000_000) == 10_000_000


def test_score_contributors_ranks_by_score_and_keeps_upstream_ties() -> None:
    rows = [
        RawContributor(id=1, login="low", contributions=2),
        RawContributor(id=2, login="tie-first", contributions=9),
        RawContributor(id=3, login="high", contributions=30),
        RawContributor(id=4, login="tie-second", contributions=9),
    ]

    scored = score_contributors(rows)

    assert [c.login for c in scored] == ["high", "tie-first", "tie-second", "low"]
    assert [c.rank for c in scored] == [1, 2, 3, 4]
    assert scored[0].score == 300
    assert scored[0].badge == Badge.A
    assert scored[1].badge == Badge.D
    assert scored[3].badge == Badge.E
    assert scored[0].id == 3


def test_score_contributors_empty() -> None:
    assert score_contributors([]) == []
