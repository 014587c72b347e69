"""Summary statistics and per-level slicing over ranked results."""

from .models import Competitor, Event


def competition_stats(competitors: list[Competitor], events: list[Event]) -> dict:
    """Count recorded routines against the number expected.

    Returns:
        Dict with:
          total_competitors: number of competitors
          completed_routines: number of recorded event scores
          total_routines: competitors x events
          completion_rate: completed / total as a percentage (0 when empty)
    """
    total_competitors = len(competitors)
    completed = sum(len(c.scores) for c in competitors)
    total = total_competitors * len(events)
    rate = (completed / total) * 100 if total > 0 else 0.0

    return {
        'total_competitors': total_competitors,
        'completed_routines': completed,
        'total_routines': total,
        'completion_rate': rate,
    }


def top_per_level(groups: list[tuple[str, list[Competitor]]],
                  n: int) -> list[tuple[str, list[Competitor]]]:
    """Keep the first n of each ranked level group, groups in the same order."""
    return [(level, ranked[:n]) for level, ranked in groups]
