from __future__ import annotations

import unittest

from stratbot.models import Indicator, Topic
from stratbot.services.cache import WorldBankCache
from stratbot.tests.utils import indicator, topic


def topics(*ids: str):
    return [Topic.model_validate(topic(i)) for i in ids]


def indicators(*ids: str):
    return [Indicator.model_validate(indicator(i)) for i in ids]


class WorldBankCacheTests(unittest.TestCase):
    def setUp(self) -> None:
        self.cache = WorldBankCache()

    def test_topics_start_unloaded(self) -> None:
        self.assertFalse(self.cache.topics_loaded)
        self.assertIsNone(self.cache.get_topics())
        self.assertIsNone(self.cache.find_topic("1"))

    def test_empty_topic_list_counts_as_loaded(self) -> None:
        self.cache.set_topics([])
        self.assertTrue(self.cache.topics_loaded)
        self.assertEqual(self.cache.get_topics(), [])

    def test_find_topic(self) -> None:
        self.cache.set_topics(topics("1", "2"))
        self.assertEqual(self.cache.find_topic("2").id, "2")
        self.assertTrue(self.cache.has_topic("1"))
        self.assertFalse(self.cache.has_topic("3"))

    def test_indicator_entries_are_keyed(self) -> None:
        stored = self.cache.set_indicators("1;3", indicators("A", "B"))
        self.assertEqual([i.id for i in stored], ["A", "B"])
        self.assertTrue(self.cache.has_indicators("1;3"))
        self.assertFalse(self.cache.has_indicators("1"))
        self.assertIsNone(self.cache.get_indicators("3;1"))

    def test_empty_indicator_list_is_a_hit(self) -> None:
        self.cache.set_indicators("9", [])
        self.assertEqual(self.cache.get_indicators("9"), [])

    def test_combine_requires_every_key(self) -> None:
        self.cache.set_indicators("1", indicators("A"))
        self.cache.set_indicators("2", indicators("B", "C"))

        self.assertEqual([i.id for i in self.cache.combine_indicators(["2", "1"])], ["B", "C", "A"])
        self.assertIsNone(self.cache.combine_indicators(["1", "3"]))
        self.assertIsNone(self.cache.combine_indicators([]))

    def test_stored_list_is_a_copy(self) -> None:
        source = indicators("A")
        self.cache.set_indicators("1", source)
        source.append(indicators("B")[0])
        self.assertEqual(len(self.cache.get_indicators("1")), 1)

    def test_returned_lists_are_copies(self) -> None:
        self.cache.set_topics(topics("1", "2")).clear()
        self.cache.get_topics().clear()
        self.assertEqual([t.id for t in self.cache.get_topics()], ["1", "2"])

        self.cache.set_indicators("1", indicators("A")).append(indicators("B")[0])
        self.cache.get_indicators("1").clear()
        self.assertEqual([i.id for i in self.cache.get_indicators("1")], ["A"])

    def test_stats(self) -> None:
        self.cache.get_topics()
        self.cache.set_topics(topics("1"))
        self.cache.get_topics()
        self.cache.set_indicators("1", [])

        self.assertEqual(
            self.cache.get_stats(),
            {"topics_cached": 1, "indicator_keys": 1, "hits": 1, "misses": 1, "hit_rate": 50.0},
        )


if __name__ == "__main__":
    unittest.main()
