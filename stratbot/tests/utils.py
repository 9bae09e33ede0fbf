from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx


class MockAsyncResponse:
    def __init__(
        self,
        json_data: Any = None,
        *,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        status_code: int = 200,
    ) -> None:
        self.text = text if text is not None else json.dumps(json_data)
        self.headers = headers or {}
        self.status_code = status_code
        self.url = "https://example.com/mock"

    def raise_for_status(self) -> None:
        if self.status_code < 400:
            return None
        request = httpx.Request("GET", self.url)
        response = httpx.Response(self.status_code, request=request, text=self.text)
        raise httpx.HTTPStatusError(
            f"Server error '{self.status_code}' for url '{self.url}'",
            request=request,
            response=response,
        )

    def json(self) -> Any:
        return json.loads(self.text)


class MockAsyncClient:
    """Stand-in for httpx.AsyncClient that replays responses and records calls."""

    def __init__(self, responses: Iterable[MockAsyncResponse | Exception] = ()) -> None:
        self._responses: List[MockAsyncResponse | Exception] = list(responses)
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]

    async def get(self, url: str, *, params: Optional[Dict[str, Any]] = None, **_kwargs) -> MockAsyncResponse:
        self.calls.append((str(url), dict(params or {})))
        if not self._responses:
            raise AssertionError("No more mock responses available")
        response = self._responses.pop(0)
        response_url = str(url)
        if isinstance(response, Exception):
            raise response
        response.url = response_url
        # Let other coroutines interleave, as a real request would
        await asyncio.sleep(0)
        return response


def run(coro):
    """Helper to run async functions in synchronous tests."""
    return asyncio.run(coro)


# ============================================================================
# World Bank payload builders
# ============================================================================

def meta(total: int | str, per_page: int | str = 50, page: int | str = 1, pages: int | str = 1, **extra: Any) -> Dict[str, Any]:
    return {"page": page, "pages": pages, "per_page": per_page, "total": total, **extra}


def topic(topic_id: str, value: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": topic_id,
        "value": value or f"Topic {topic_id}",
        "sourceNote": f"Description of topic {topic_id}",
    }


def indicator(indicator_id: str, topic_ids: Iterable[str] = ()) -> Dict[str, Any]:
    return {
        "id": indicator_id,
        "name": f"Indicator {indicator_id}",
        "unit": "",
        "source": {"id": "2", "value": "World Development Indicators"},
        "sourceNote": "",
        "sourceOrganization": "World Bank",
        "topics": [{"id": t, "value": f"Topic {t}"} for t in topic_ids],
    }


def data_record(country: str = "USA", date: str = "2020", value: Optional[float] = 21060473613000.0) -> Dict[str, Any]:
    return {
        "indicator": {"id": "NY.GDP.MKTP.CD", "value": "GDP (current US$)"},
        "country": {"id": country[:2], "value": country},
        "countryiso3code": country,
        "date": date,
        "value": value,
        "unit": "",
        "obs_status": "",
        "decimal": 0,
    }


def envelope(records: List[Dict[str, Any]], total: Optional[int | str] = None, per_page: Optional[int | str] = None) -> List[Any]:
    """Wire-format ``[meta, records]`` body."""
    count = len(records) if total is None else total
    return [meta(total=count, per_page=per_page if per_page is not None else max(len(records), 1)), records]
