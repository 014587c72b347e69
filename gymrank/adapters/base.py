"""Abstract base adapter for loading competitor records from stored documents."""

from abc import ABC, abstractmethod

from gymrank.core.models import Competitor


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, data_path: str) -> list[Competitor]:
        """Load competitor documents and return Competitor records.

        Each record carries id, name, team, level and scores. total_score
        and rank are left at their defaults for the ranking engine to fill.
        """
        pass
