"""
Shared HTTP Client Pool Service

Provides one reusable httpx.AsyncClient for all World Bank API calls so
clients created by the tool layer share TCP connections.
"""

from __future__ import annotations

import logging
import httpx
from typing import Optional, Dict, Any

from ..config import get_settings

logger = logging.getLogger(__name__)


class HTTPClientPool:
    """
    Singleton HTTP client pool for all external API calls.

    The timeout comes from settings and defaults to None: no request
    timeout is imposed here.
    """

    MAX_CONNECTIONS = 20
    MAX_KEEPALIVE_CONNECTIONS = 10

    _client: Optional[httpx.AsyncClient] = None

    @staticmethod
    def _initialize_client() -> None:
        """Create a shared AsyncClient with connection pooling."""
        settings = get_settings()

        limits = httpx.Limits(
            max_connections=HTTPClientPool.MAX_CONNECTIONS,
            max_keepalive_connections=HTTPClientPool.MAX_KEEPALIVE_CONNECTIONS,
            keepalive_expiry=5.0,
        )

        HTTPClientPool._client = httpx.AsyncClient(
            limits=limits,
            timeout=httpx.Timeout(settings.http_timeout),
            verify=True,  # SSL verification
            follow_redirects=True,  # World Bank redirects some legacy paths
        )

        logger.info(
            f"HTTP Client Pool initialized: max_connections={HTTPClientPool.MAX_CONNECTIONS}, "
            f"timeout={settings.http_timeout}"
        )

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        """Get the shared HTTP client instance."""
        if cls._client is None or cls._client.is_closed:
            cls._initialize_client()
        return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close the shared HTTP client pool."""
        if cls._client:
            await cls._client.aclose()
            cls._client = None
            logger.info("HTTP Client Pool closed")

    @classmethod
    def get_stats(cls) -> Dict[str, Any]:
        """Get current pool statistics."""
        client = cls._client
        if client is None:
            return {"status": "not_initialized"}

        return {
            "status": "active",
            "is_closed": client.is_closed,
            "timeout": client.timeout.read,
            "limits": {
                "max_connections": cls.MAX_CONNECTIONS,
                "max_keepalive_connections": cls.MAX_KEEPALIVE_CONNECTIONS,
            },
        }


def get_http_client() -> httpx.AsyncClient:
    """
    Get the shared HTTP client pool.

    This function should be used instead of creating new AsyncClient instances.

    Returns:
        Shared httpx.AsyncClient instance
    """
    return HTTPClientPool.get_client()


async def close_http_pool() -> None:
    """Close the HTTP client pool (called on application shutdown)."""
    await HTTPClientPool.close()
