"""Tests for event catalogs, score entry validation and meet statistics."""

import os
import sys
from dataclasses import FrozenInstanceError
import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from gymrank.core.models import Competitor, Event
from gymrank.core.events import (
    MEN_EVENTS, WOMEN_EVENTS, events_for_section, find_event, get_event_score
)
from gymrank.core.validation import (
    InvalidScoreError, record_score, validate_competitor, validate_score
)
from gymrank.core.ranking import group_by_level_and_rank
from gymrank.core.stats import competition_stats, top_per_level

VAULT = Event('vault', 'Vault', 'VT', 10.0, 'Zap')


def make(cid: str, level: str = 'Level 5', **scores) -> Competitor:
    return Competitor(id=cid, name=f'Gymnast {cid}', team='Apex Academy',
                      level=level, scores=dict(scores))


class TestEventCatalog:
    def test_women_events(self):
        assert [e.short_name for e in WOMEN_EVENTS] == ['VT', 'UB', 'BB', 'FX']

    def test_men_events(self):
        assert [e.short_name for e in MEN_EVENTS] == ['FX', 'PH', 'SR', 'VT', 'PB', 'HB']

    def test_all_max_scores_are_ten(self):
        assert all(e.max_score == 10.0 for e in WOMEN_EVENTS + MEN_EVENTS)

    def test_events_for_section(self):
        assert events_for_section('women') == WOMEN_EVENTS
        assert events_for_section('men') == MEN_EVENTS

    def test_catalog_cannot_be_modified(self):
        vault = events_for_section('women')[0]
        with pytest.raises(FrozenInstanceError):
            vault.max_score = 20.0
        with pytest.raises(AttributeError):
            events_for_section('men').append(VAULT)
        assert WOMEN_EVENTS[0].max_score == 10.0
        assert len(MEN_EVENTS) == 6

    def test_unknown_section(self):
        with pytest.raises(ValueError, match='Unknown section'):
            events_for_section('mixed')

    def test_find_event(self):
        assert find_event(MEN_EVENTS, 'pommel-horse').name == 'Pommel Horse'
        assert find_event(WOMEN_EVENTS, 'pommel-horse') is None

    def test_get_event_score(self):
        c = make('a', vault=9.25)
        assert get_event_score(c, 'vault') == 9.25
        assert get_event_score(c, 'balance-beam') == 0.0


class TestValidateScore:
    @pytest.mark.parametrize('value, expected', [
        (0, 0.0), (10, 10.0), (9.45, 9.45), ('8.9', 8.9), (' 7.5 ', 7.5),
    ])
    def test_accepts_in_range(self, value, expected):
        assert validate_score(value, VAULT) == expected

    @pytest.mark.parametrize('value', [-0.01, 10.01, 'abc', '', None, 'nan', True, False])
    def test_rejects(self, value):
        with pytest.raises(InvalidScoreError, match='Score must be between 0 and 10.0'):
            validate_score(value, VAULT)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_score(11, VAULT)

    def test_respects_event_max(self):
        short = Event('dance', 'Dance', 'DN', 5.0)
        assert validate_score(5, short) == 5.0
        with pytest.raises(InvalidScoreError):
            validate_score(5.5, short)


class TestRecordScore:
    def test_returns_updated_copy(self):
        c = make('a', vault=8.0)
        updated = record_score(c, find_event(WOMEN_EVENTS, 'uneven-bars'), '9.1')

        assert updated.scores == {'vault': 8.0, 'uneven-bars': 9.1}
        assert c.scores == {'vault': 8.0}

    def test_overwrites_existing_score(self):
        c = make('a', vault=8.0)
        assert record_score(c, VAULT, 9.0).scores == {'vault': 9.0}

    def test_invalid_score_leaves_competitor_alone(self):
        c = make('a', vault=8.0)
        with pytest.raises(InvalidScoreError):
            record_score(c, VAULT, 12)
        assert c.scores == {'vault': 8.0}


class TestValidateCompetitor:
    def test_valid(self):
        assert validate_competitor('Jane Smith', 'Elite Academy', 'Level 7') == []
        assert validate_competitor('Jane Smith', 'Elite Academy', 'Elite') == []

    def test_missing_fields(self):
        assert validate_competitor('', ' ', '') == [
            'Name is required', 'Team is required', 'Level is required'
        ]

    def test_invalid_level(self):
        assert validate_competitor('Jane', 'Club', 'Level 11') == [
            'Invalid level: Level 11. Must be Level 1-10 or Elite'
        ]


class TestCompetitionStats:
    def test_counts(self):
        competitors = [make('a', vault=9.0, **{'uneven-bars': 8.0}), make('b'),
                       make('c', vault=7.0)]
        stats = competition_stats(competitors, WOMEN_EVENTS)

        assert stats['total_competitors'] == 3
        assert stats['completed_routines'] == 3
        assert stats['total_routines'] == 12
        assert stats['completion_rate'] == pytest.approx(25.0)

    def test_empty(self):
        stats = competition_stats([], WOMEN_EVENTS)
        assert stats['total_routines'] == 0
        assert stats['completion_rate'] == 0


class TestTopPerLevel:
    def test_slices_each_group(self):
        competitors = [make(str(i), 'Level 5' if i % 2 else 'Elite', vault=float(i))
                       for i in range(8)]
        groups = top_per_level(group_by_level_and_rank(competitors), 2)

        assert [level for level, _ in groups] == ['Level 5', 'Elite']
        assert [(c.id, c.rank) for c in dict(groups)['Level 5']] == [('7', 1), ('5', 2)]
        assert [(c.id, c.rank) for c in dict(groups)['Elite']] == [('6', 1), ('4', 2)]

    def test_n_larger_than_group(self):
        groups = top_per_level(group_by_level_and_rank([make('a')]), 5)
        assert len(dict(groups)['Level 5']) == 1
