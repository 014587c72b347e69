"""Adapter for competitor documents exported from the competition store.

Handles two JSON shapes:
  - Array of competitor objects with keys like id, name, team, level, scores
  - A competition object whose "competitors" key holds that array

Keys are matched by name (case-insensitive). Stored totalScore and rank
values are ignored; the ranking engine recomputes them.
"""

import glob
import json
import logging
import math
import os
import uuid

from gymrank.core.levels import is_valid_level
from gymrank.core.models import Competitor
from .base import BaseAdapter

logger = logging.getLogger(__name__)


# Map common key variations to our canonical names
FIELD_ALIASES = {
    'id': 'id',
    'competitorid': 'id',
    'name': 'name',
    'athlete': 'name',
    'gymnast': 'name',
    'team': 'team',
    'gym': 'team',
    'club': 'team',
    'level': 'level',
    'lvl': 'level',
    'scores': 'scores',
}


def generate_id() -> str:
    """Short random identifier for documents stored without one."""
    return uuid.uuid4().hex[:9]


def from_document(doc: dict) -> Competitor | None:
    """Build a Competitor from one stored document.

    Returns None when the document has no usable name.
    """
    mapped = {}
    for key, value in doc.items():
        canonical = FIELD_ALIASES.get(str(key).lower().replace(' ', '').replace('_', ''))
        if canonical:
            mapped[canonical] = value

    name = str(mapped.get('name') or '').strip()
    if not name:
        return None

    level = str(mapped.get('level') or '').strip()
    if not is_valid_level(level):
        logger.warning("Competitor %r has unrecognised level %r", name, level)

    return Competitor(
        id=str(mapped.get('id') or generate_id()),
        name=name,
        team=str(mapped.get('team') or '').strip(),
        level=level,
        scores=CompetitorAdapter._parse_scores(mapped.get('scores')),
    )


class CompetitorAdapter(BaseAdapter):
    """Parse competitor documents from JSON files."""

    def parse(self, data_path: str) -> list[Competitor]:
        """Load competitors from a file, a directory or a glob pattern.

        data_path can be:
          - A single .json file
          - A directory (all .json files inside are loaded and merged)
          - A glob pattern (e.g. /path/to/exports/session_*.json)
        """
        if os.path.isdir(data_path):
            competitors = []
            for fpath in sorted(glob.glob(os.path.join(data_path, '*.json'))):
                competitors.extend(self._parse_single_file(fpath))
            return competitors

        if '*' in data_path or '?' in data_path:
            competitors = []
            for fpath in sorted(glob.glob(data_path)):
                competitors.extend(self._parse_single_file(fpath))
            return competitors

        return self._parse_single_file(data_path)

    def _parse_single_file(self, data_path: str) -> list[Competitor]:
        with open(data_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if isinstance(data, dict):
            # Competition document, or a single competitor
            data = data['competitors'] if 'competitors' in data else [data]
        if not isinstance(data, list):
            raise ValueError(f"{data_path}: expected a list of competitors")

        return self._parse_json_array(data, data_path)

    def _parse_json_array(self, data: list, source: str) -> list[Competitor]:
        competitors = []
        for index, row in enumerate(data):
            if not isinstance(row, dict):
                logger.warning("%s: skipping entry %d (not an object)", source, index)
                continue

            competitor = from_document(row)
            if competitor is None:
                logger.warning("%s: skipping entry %d (no name)", source, index)
                continue
            competitors.append(competitor)

        logger.info("Loaded %d competitors from %s", len(competitors), source)
        return competitors

    @staticmethod
    def _parse_scores(raw) -> dict:
        """Keep numeric entries of a scores mapping. Empty/invalid entries are dropped."""
        if not isinstance(raw, dict):
            return {}
        scores = {}
        for event_id, val in raw.items():
            score = CompetitorAdapter._parse_score(val)
            if score is not None:
                scores[str(event_id)] = score
        return scores

    @staticmethod
    def _parse_score(val):
        """Parse a score value. Returns None for empty or invalid."""
        if val is None or isinstance(val, bool):
            return None
        s = str(val).strip()
        if not s:
            return None
        try:
            v = float(s)
        except ValueError:
            return None
        return v if math.isfinite(v) else None
