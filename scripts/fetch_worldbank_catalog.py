#!/usr/bin/env python3
"""
World Bank Catalog Fetcher

Dumps the World Bank topic list and the indicators of each topic to a JSON
file, using the same cached client the agent tools use.

Usage:
    python scripts/fetch_worldbank_catalog.py                      # Topics + indicators of every topic
    python scripts/fetch_worldbank_catalog.py --topic 3 --topic 8  # Only these topics
    python scripts/fetch_worldbank_catalog.py --topics-only        # Skip indicators
    python scripts/fetch_worldbank_catalog.py -o catalog.json      # Write to a file
"""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from stratbot.config import get_settings
from stratbot.providers.worldbank import WorldBankApiClient
from stratbot.services.http_pool import close_http_pool
from stratbot.utils.serialization import json_serialize

logger = logging.getLogger(__name__)


async def fetch_catalog(
    client: WorldBankApiClient,
    topic_ids: Optional[List[str]] = None,
    include_indicators: bool = True,
) -> Dict[str, Any]:
    """
    Fetch topics and, per topic, its indicators.

    Topics are fetched first so unknown IDs in ``topic_ids`` fail with
    NotFoundError before any indicator request.
    """
    topics = await client.get_topics()
    selected = topic_ids or [topic.id for topic in topics]

    catalog: Dict[str, Any] = {
        "topics": [topic for topic in topics if topic.id in selected],
        "indicators": {},
    }
    if not include_indicators:
        return catalog

    for topic_id in selected:
        start = time.time()
        indicators = await client.get_indicators_by_topic_id(topic_id)
        catalog["indicators"][topic_id] = indicators
        logger.info(f"Topic {topic_id}: {len(indicators)} indicators ({time.time() - start:.1f}s)")

    return catalog


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump the World Bank topic/indicator catalog to JSON")
    parser.add_argument("--topic", action="append", dest="topics", help="Topic ID to include (repeatable)")
    parser.add_argument("--topics-only", action="store_true", help="Fetch topics without their indicators")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL from the environment")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, client: Optional[WorldBankApiClient] = None) -> Dict[str, Any]:
    client = client or WorldBankApiClient()
    try:
        catalog = await fetch_catalog(client, args.topics, include_indicators=not args.topics_only)
    finally:
        await close_http_pool()

    payload = json_serialize(catalog, indent=2)
    if args.output:
        args.output.write_text(payload, encoding="utf-8")
        logger.info(f"Wrote catalog to {args.output}")
    else:
        print(payload)

    stats = client.cache_stats()
    logger.info(f"Fetched {stats['topics_cached']} topics, {stats['indicator_keys']} indicator lists")
    return catalog


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper() if args.log_level else get_settings().log_level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    asyncio.run(run(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
