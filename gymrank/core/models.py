"""Data models for the gymnastics competition ranking system."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Event:
    """One judged discipline within a section."""
    id: str                   # "vault", "uneven-bars", ...
    name: str                 # "Uneven Bars"
    short_name: str           # "UB"
    max_score: float = 10.0
    icon: str = ''            # Display only


@dataclass
class Competitor:
    """A gymnast and the scores recorded for them.

    total_score and rank are derived by the ranking engine and are
    overwritten on every ranking pass.
    """
    id: str
    name: str
    team: str
    level: str                # "Level 1" .. "Level 10", "Elite"
    scores: dict = field(default_factory=dict)  # event id -> score
    total_score: float = 0.0
    rank: int = 0


@dataclass
class MeetConfig:
    """Configuration for a single ranking run."""
    meet_name: str            # "2025 Spring Invitational"
    section: str = 'women'    # "women" or "men"
    level: str | None = None  # Only rank this level; None ranks everyone
    top: int | None = None    # Keep the first N per level group
    by_level: bool = False    # Rank each level independently
