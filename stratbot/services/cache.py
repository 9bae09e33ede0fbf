from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..models import Indicator, Topic

logger = logging.getLogger(__name__)


class WorldBankCache:
    """
    In-memory cache owned by a single World Bank client.

    Holds the full topic collection (fetched at most once) and indicator
    lists keyed by their normalized topic key. Entries are written once per
    key and never evicted or refreshed; the cache lives exactly as long as
    its client. Callers get copies, so a stored list never changes after it
    is written. Values are only ever replaced whole, so concurrent writers
    racing on the same key leave a complete list behind (last write wins).
    """

    def __init__(self) -> None:
        self._topics: Optional[List[Topic]] = None
        self._indicators: Dict[str, List[Indicator]] = {}
        self.hits = 0
        self.misses = 0

    # Topics -----------------------------------------------------------------

    @property
    def topics_loaded(self) -> bool:
        return self._topics is not None

    def get_topics(self) -> Optional[List[Topic]]:
        if self._topics is None:
            self.misses += 1
            return None
        self.hits += 1
        return list(self._topics)

    def set_topics(self, topics: List[Topic]) -> List[Topic]:
        self._topics = list(topics)
        logger.info(f"Cached {len(self._topics)} World Bank topics")
        return list(self._topics)

    def find_topic(self, topic_id: str) -> Optional[Topic]:
        """Look up a topic in the cached collection (None if absent or not loaded)."""
        for topic in self._topics or ():
            if topic.id == topic_id:
                return topic
        return None

    def has_topic(self, topic_id: str) -> bool:
        return self.find_topic(topic_id) is not None

    # Indicators -------------------------------------------------------------

    def has_indicators(self, key: str) -> bool:
        return key in self._indicators

    def get_indicators(self, key: str) -> Optional[List[Indicator]]:
        indicators = self._indicators.get(key)
        if indicators is None:
            self.misses += 1
            return None
        self.hits += 1
        return list(indicators)

    def combine_indicators(self, keys: Iterable[str]) -> Optional[List[Indicator]]:
        """Concatenate per-key entries, or None unless every key is cached."""
        keys = list(keys)
        if not keys or not all(key in self._indicators for key in keys):
            return None
        self.hits += 1
        return [indicator for key in keys for indicator in self._indicators[key]]

    def set_indicators(self, key: str, indicators: List[Indicator]) -> List[Indicator]:
        self._indicators[key] = list(indicators)
        logger.info(f"Cached {len(indicators)} World Bank indicators for topic key '{key}'")
        return list(self._indicators[key])

    def get_stats(self) -> Dict[str, int | float]:
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0
        return {
            "topics_cached": len(self._topics) if self._topics is not None else 0,
            "indicator_keys": len(self._indicators),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(hit_rate, 2),
        }
