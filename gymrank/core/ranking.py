"""Ranking engine for gymnastics competition scores.

Every function here is pure: totals and ranks are recomputed from the
scores on each call and input records are never modified.

Ranking is positional. Competitors with equal totals keep their input
order and still get distinct consecutive ranks (1, 2 rather than 1, 1).
"""

from dataclasses import replace
from collections import defaultdict

from .levels import sort_levels
from .models import Competitor


def compute_total(scores: dict) -> float:
    """Sum every recorded event score. Missing events contribute nothing."""
    return sum(scores.values(), 0.0)


def rank_competitors(competitors: list[Competitor]) -> list[Competitor]:
    """Return new records sorted by total score, best first, with ranks set.

    The sort is stable, so ties stay in input order. There is no
    secondary key.
    """
    scored = [replace(c, scores=dict(c.scores), total_score=compute_total(c.scores))
              for c in competitors]
    # sorted() keeps equal elements in input order even with reverse=True
    scored = sorted(scored, key=lambda c: c.total_score, reverse=True)
    for position, competitor in enumerate(scored, start=1):
        competitor.rank = position
    return scored


def available_levels(competitors: list[Competitor]) -> list[str]:
    """Distinct levels present, numbered levels ascending then Elite."""
    return sort_levels(c.level for c in competitors)


def filter_by_level(competitors: list[Competitor],
                    level: str | None) -> list[Competitor]:
    """Members at the given level, order preserved. None means no filter."""
    if level is None:
        return competitors
    return [c for c in competitors if c.level == level]


def group_by_level_and_rank(
        competitors: list[Competitor]) -> list[tuple[str, list[Competitor]]]:
    """Partition by level and rank each level on its own.

    Groups come back in level order and ranks restart at 1 in each group.
    """
    by_level: dict[str, list[Competitor]] = defaultdict(list)
    for competitor in competitors:
        by_level[competitor.level].append(competitor)

    return [(level, rank_competitors(by_level[level]))
            for level in sort_levels(by_level)]
