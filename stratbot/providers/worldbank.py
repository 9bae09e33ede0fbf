from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel

from ..config import get_settings
from ..exceptions import NotFoundError
from ..models import (
    DataRecord,
    DataResponse,
    Indicator,
    IndicatorsResponse,
    Topic,
    TopicsResponse,
)
from ..services.cache import WorldBankCache
from ..services.http_pool import get_http_client
from ..utils.params import ALL, DATE_SEPARATOR, LIST_SEPARATOR, MaybeArray, concat_strings
from ..utils.parsing import parse_response

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class WorldBankApiClient:
    """World Bank API client.

    Wraps the v2 REST API (``/topic``, ``/topic/{id}``,
    ``/topic/{id}/indicator``, ``/country/{country}/indicator/{indicator}``),
    validates every body against the models in ``stratbot.models`` and keeps
    two instance-scoped caches:

    - the full topic collection, fetched at most once
    - indicator lists keyed by the normalized topic key

    Data records are never cached. Nothing is retried: transport errors
    (``httpx.HTTPError``) and ``ValidationError`` propagate to the caller.
    """

    PROVIDER_NAME = "WorldBank"

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[WorldBankCache] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, defaults to ``Settings.worldbank_base_url``
            http_client: Client used for requests, defaults to the shared pool
            cache: Cache to populate, defaults to a fresh one owned by this client
        """
        self.base_url = (base_url or get_settings().worldbank_base_url).rstrip("/")
        self._http_client = http_client
        self.cache = cache if cache is not None else WorldBankCache()

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_http_client()

    async def _get(self, path: str, model: Type[R], **query: Any) -> R:
        """Issue one GET against the API and validate the body."""
        params = {"format": "json"}
        params.update({key: value for key, value in query.items() if value is not None})
        url = f"{self.base_url}{path}"

        logger.info(f"World Bank request: GET {path} params={params}")
        response = await self.http_client.get(url, params=params)
        response.raise_for_status()
        return parse_response(model, response.text)

    async def get_topics(self) -> List[Topic]:
        """Fetch and cache the list of topics.

        Concurrent first calls may each hit the network; they all store the
        same collection.
        """
        cached = self.cache.get_topics()
        if cached is not None:
            logger.debug("World Bank topics served from cache")
            return cached

        response = await self._get("/topic", TopicsResponse)
        return self.cache.set_topics(response.records)

    async def get_topic_by_id(self, topic_id: str) -> Optional[Topic]:
        """Fetch a single topic.

        Resolved in memory when the topic collection is cached; otherwise only
        ``/topic/{id}`` is requested, never the whole collection.

        Returns:
            The topic, or None if it does not exist
        """
        if self.cache.topics_loaded:
            return self.cache.find_topic(topic_id)

        response = await self._get(f"/topic/{topic_id}", TopicsResponse)
        return response.records[0] if response.records else None

    async def get_indicators_by_topic_id(self, topic_id: MaybeArray = None) -> List[Indicator]:
        """Fetch indicators associated with one or more topics.

        Args:
            topic_id: A topic ID, a list of topic IDs, or None for all topics

        Returns:
            Indicators of the requested topic(s)

        Raises:
            NotFoundError: If the topic collection is cached and a requested
                topic ID is not in it (no request is made)
        """
        topic_key = concat_strings(topic_id, ALL, LIST_SEPARATOR)

        cached = self.cache.get_indicators(topic_key)
        if cached is not None:
            logger.debug(f"World Bank indicators for '{topic_key}' served from cache")
            return cached

        # A list of individually cached topics needs no round-trip
        if isinstance(topic_id, (list, tuple)):
            combined = self.cache.combine_indicators(topic_id)
            if combined is not None:
                logger.debug(f"World Bank indicators for '{topic_key}' combined from cache")
                return combined

        if self.cache.topics_loaded and topic_key != ALL:
            requested = [topic_id] if isinstance(topic_id, str) else list(topic_id)
            for requested_id in requested:
                if not self.cache.has_topic(requested_id):
                    logger.warning(f"World Bank topic '{requested_id}' not in cached topic list")
                    raise NotFoundError(
                        f"Topic with ID {requested_id} not found.",
                        topic_id=requested_id,
                        provider=self.PROVIDER_NAME,
                    )

        path = f"/topic/{topic_key}/indicator"

        # First request only reads the total from the pagination metadata
        first_page = await self._get(path, IndicatorsResponse, per_page=1)
        total = first_page.meta.total_count

        if total > 0:
            everything = await self._get(path, IndicatorsResponse, per_page=total)
            indicators = everything.records
        else:
            indicators = []

        return self.cache.set_indicators(topic_key, indicators)

    async def fetch_data_for_indicator(
        self,
        indicator_id: MaybeArray,
        country_code: MaybeArray = None,
        date: MaybeArray = None,
        per_page: Optional[int] = None,
    ) -> List[DataRecord]:
        """Fetch data records for an indicator. Results are not cached.

        Args:
            indicator_id: Indicator ID(s), e.g. "NY.GDP.MKTP.CD"
            country_code: ISO2/ISO3 code(s), region codes or "all" (default)
            date: A year, or a [start, end] range joined as "start:end";
                defaults to "all"
            per_page: Page size to request; the API default applies when None

        Returns:
            Data records of the first (and usually only) page
        """
        indicator = concat_strings(indicator_id)
        if not indicator:
            raise ValueError("indicator_id is required")
        country = concat_strings(country_code, ALL, LIST_SEPARATOR)
        date_param = concat_strings(date, ALL, DATE_SEPARATOR)

        response = await self._get(
            f"/country/{country}/indicator/{indicator}",
            DataResponse,
            date=date_param,
            per_page=per_page,
        )
        return response.records

    def cache_stats(self) -> dict:
        """Hit/miss counters of this client's cache."""
        return self.cache.get_stats()
