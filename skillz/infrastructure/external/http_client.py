"""
HTTP client utilities for calls to the career API.
"""

import time
from typing import Any, Dict, Optional

import httpx

from skillz.config.logging import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """Thin ``httpx.AsyncClient`` wrapper that logs timing for every call."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def request(
        self, method: str, url: str, data: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """Send a request, logging status and response time."""
        if self.client is None:
            raise RuntimeError("HTTPClient must be used as an async context manager")

        start_time = time.time()
        try:
            response = await self.client.request(method, url, json=data)
        except httpx.HTTPError as e:
            logger.error(
                "HTTP request failed",
                method=method,
                url=url,
                error=str(e),
                response_time_ms=(time.time() - start_time) * 1000,
            )
            raise

        logger.debug(
            "HTTP request completed",
            method=method,
            url=url,
            status_code=response.status_code,
            response_time_ms=(time.time() - start_time) * 1000,
        )
        return response

