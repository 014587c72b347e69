#!/usr/bin/env python3
"""CLI entry point for ranking a gymnastics competition.

Usage:
    python -m gymrank.rank_meet --data competitors.json --section women \\
        --meet "2025 Spring Invitational" --by-level --top 3
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gymrank.core.models import Competitor, Event, MeetConfig
from gymrank.core.events import SECTIONS, SECTION_TITLES, events_for_section, get_event_score
from gymrank.core.ranking import (
    available_levels, filter_by_level, group_by_level_and_rank, rank_competitors
)
from gymrank.core.stats import competition_stats, top_per_level
from gymrank.core.log import setup_logging
from gymrank.adapters.competitor_adapter import CompetitorAdapter


def format_standings(ranked: list[Competitor], events: list[Event]) -> list[str]:
    """Render ranked competitors as fixed-width table lines."""
    name_w = max([len('Name')] + [len(c.name) for c in ranked])
    team_w = max([len('Team')] + [len(c.team) for c in ranked])
    level_w = max([len('Level')] + [len(c.level) for c in ranked])

    header = f"{'Rank':>4}  {'Name':<{name_w}}  {'Team':<{team_w}}  {'Level':<{level_w}}"
    for event in events:
        header += f"  {event.short_name:>6}"
    header += f"  {'Total':>7}"

    lines = [header, '-' * len(header)]
    for c in ranked:
        line = f"{c.rank:>4}  {c.name:<{name_w}}  {c.team:<{team_w}}  {c.level:<{level_w}}"
        for event in events:
            line += f"  {get_event_score(c, event.id):>6.2f}"
        line += f"  {c.total_score:>7.2f}"
        lines.append(line)
    return lines


def print_summary(config: MeetConfig, competitors: list[Competitor],
                  events: list[Event]) -> None:
    """Print the meet title and score completion summary."""
    stats = competition_stats(competitors, events)
    print(f"\n{config.meet_name} - {SECTION_TITLES[config.section]} Division")
    print(f"Level filter: {config.level or 'All Levels'}")
    print(f"Competitors: {stats['total_competitors']}, "
          f"routines scored: {stats['completed_routines']}/{stats['total_routines']} "
          f"({stats['completion_rate']:.1f}%)")


def run(config: MeetConfig, competitors: list[Competitor]) -> None:
    """Rank the competitors per the config and print the standings."""
    events = events_for_section(config.section)
    selected = filter_by_level(competitors, config.level)
    print_summary(config, selected, events)

    if config.by_level:
        groups = group_by_level_and_rank(selected)
        if config.top is not None:
            groups = top_per_level(groups, config.top)
        for level, ranked in groups:
            print(f"\n== {level} ({len(ranked)} shown) ==")
            print('\n'.join(format_standings(ranked, events)))
    else:
        ranked = rank_competitors(selected)
        if config.top is not None:
            ranked = ranked[:config.top]
        print()
        print('\n'.join(format_standings(ranked, events)))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Rank a gymnastics competition')
    parser.add_argument('--data', nargs='+', required=True,
                        help='Competitor JSON file(s), directories or glob patterns')
    parser.add_argument('--section', default='women', choices=list(SECTIONS),
                        help="Competition section (selects the event set)")
    parser.add_argument('--meet', default='Gymnastics Competition Results',
                        help='Meet name for the report title')
    parser.add_argument('--level', default=None,
                        help='Only rank this level (e.g. "Level 5" or "Elite")')
    parser.add_argument('--by-level', action='store_true',
                        help='Rank each level separately, ranks restarting at 1')
    parser.add_argument('--top', type=int, default=None,
                        help='Show only the first N (per level with --by-level)')
    parser.add_argument('--verbose', action='store_true', help='Log adapter details')

    args = parser.parse_args(argv)

    setup_logging('gymrank', logging.INFO if args.verbose else logging.WARNING)

    config = MeetConfig(
        meet_name=args.meet,
        section=args.section,
        level=args.level,
        top=args.top,
        by_level=args.by_level,
    )

    if config.top is not None and config.top < 1:
        print(f"--top must be at least 1, got {config.top}")
        return 1

    adapter = CompetitorAdapter()
    competitors = []
    for data_path in args.data:
        print(f"Loading {data_path}...")
        try:
            batch = adapter.parse(data_path)
        except (OSError, ValueError) as e:
            print(f"Could not load {data_path}: {e}")
            return 1
        print(f"  -> {len(batch)} competitors")
        competitors.extend(batch)

    levels = available_levels(competitors)
    print(f"Levels ({len(levels)}): {', '.join(levels)}")
    if config.level is not None and config.level not in levels:
        print(f"No competitors at {config.level}")

    run(config, competitors)
    return 0


if __name__ == '__main__':
    sys.exit(main())
