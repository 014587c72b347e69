"""Entry checks applied before scores and competitors reach the ranking engine.

The engine itself never validates; it sums whatever it is given.
"""

import math
from dataclasses import replace

from .levels import is_valid_level
from .models import Competitor, Event


class InvalidScoreError(ValueError):
    """A score that is not a number or lies outside 0..max_score."""

    def __init__(self, event: Event, value):
        self.event = event
        self.value = value
        super().__init__(f"Score must be between 0 and {event.max_score}")


def validate_score(value, event: Event) -> float:
    """Parse and bounds-check a score for an event.

    Accepts numbers or numeric strings ("9.45"). Returns the score as a float.

    Raises:
        InvalidScoreError: if the value is not numeric or out of range.
    """
    if isinstance(value, bool):
        raise InvalidScoreError(event, value)
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise InvalidScoreError(event, value) from None

    if math.isnan(score) or score < 0 or score > event.max_score:
        raise InvalidScoreError(event, value)
    return score


def validate_competitor(name: str, team: str, level: str) -> list[str]:
    """Return a list of problems with a competitor entry (empty when valid)."""
    name, team, level = name.strip(), team.strip(), level.strip()
    errors = []
    if not name:
        errors.append('Name is required')
    if not team:
        errors.append('Team is required')
    if not level:
        errors.append('Level is required')
    elif not is_valid_level(level):
        errors.append(f'Invalid level: {level}. Must be Level 1-10 or Elite')
    return errors


def record_score(competitor: Competitor, event: Event, value) -> Competitor:
    """Return a copy of the competitor with a validated score for the event."""
    score = validate_score(value, event)
    scores = dict(competitor.scores)
    scores[event.id] = score
    return replace(competitor, scores=scores)
