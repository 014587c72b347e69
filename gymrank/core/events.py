"""Event catalogs for the women's and men's sections."""

from .models import Competitor, Event


WOMEN_EVENTS = (
    Event('vault', 'Vault', 'VT', 10.0, 'Zap'),
    Event('uneven-bars', 'Uneven Bars', 'UB', 10.0, 'Minus'),
    Event('balance-beam', 'Balance Beam', 'BB', 10.0, 'GitBranch'),
    Event('floor-exercise', 'Floor Exercise', 'FX', 10.0, 'Square'),
)

MEN_EVENTS = (
    Event('floor-exercise', 'Floor Exercise', 'FX', 10.0, 'Square'),
    Event('pommel-horse', 'Pommel Horse', 'PH', 10.0, 'Waves'),
    Event('still-rings', 'Still Rings', 'SR', 10.0, 'Circle'),
    Event('vault', 'Vault', 'VT', 10.0, 'Zap'),
    Event('parallel-bars', 'Parallel Bars', 'PB', 10.0, 'Equal'),
    Event('horizontal-bar', 'Horizontal Bar', 'HB', 10.0, 'Minus'),
)

SECTIONS = ('women', 'men')

SECTION_TITLES = {'women': "Women's", 'men': "Men's"}


def events_for_section(section: str) -> tuple[Event, ...]:
    """Return the event catalog for a section ("women" or "men")."""
    if section == 'women':
        return WOMEN_EVENTS
    if section == 'men':
        return MEN_EVENTS
    raise ValueError(f"Unknown section: {section!r} (expected one of {', '.join(SECTIONS)})")


def find_event(events: list[Event], event_id: str) -> Event | None:
    for event in events:
        if event.id == event_id:
            return event
    return None


def get_event_score(competitor: Competitor, event_id: str) -> float:
    """Recorded score for an event, 0.0 if not yet scored."""
    return competitor.scores.get(event_id, 0.0)
