"""Badge and score policy for contribution counts."""

from __future__ import annotations

from typing import Iterable

from contribboard.errors import InvalidInput
from contribboard.models.contributor import Badge, RawContributor, ScoredContributor

SCORE_PER_CONTRIBUTION = 10

# Strict lower bounds, highest tier first. Anything not above a bound is E.
BADGE_THRESHOLDS: tuple[tuple[int, Badge], ...] = (
    (20, Badge.A),
    (15, Badge.B),
    (10, Badge.C),
    (5, Badge.D),
)
_TIER_ORDER = (Badge.A, Badge.B, Badge.C, Badge.D, Badge.E)


def _require_count(count: object) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidInput(f"contribution count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidInput(f"contribution count must be non-negative, got {count}")
    return count


def classify(count: int) -> Badge:
    """Map a contribution count to its badge tier."""
    count = _require_count(count)
    for bound, badge in BADGE_THRESHOLDS:
        if count > bound:
            return badge
    return Badge.E


def score(count: int) -> int:
    return _require_count(count) * SCORE_PER_CONTRIBUTION


def tier_index(badge: Badge) -> int:
    """A=0 (best) .. E=4."""
    return _TIER_ORDER.index(Badge(badge))


def score_contributors(contributors: Iterable[RawContributor]) -> list[ScoredContributor]:
    """Annotate one project's contributors and rank them by score.

    No cross-repository merge happens here. Equal scores keep upstream order.
    """
    rows = list(contributors)
    ordered = sorted(rows, key=lambda c: score(c.contributions), reverse=True)
    return [
        ScoredContributor(
            **c.model_dump(),
            score=score(c.contributions),
            badge=classify(c.contributions),
            rank=position,
        )
        for position, c in enumerate(ordered, start=1)
    ]
