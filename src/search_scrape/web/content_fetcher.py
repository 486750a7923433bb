"""
Web Content Fetcher

Thin fetch capability over httpx: one request in, (status, body) out.
Status interpretation is left to callers.
"""

import logging
from typing import Protocol

import httpx

from ..errors import TransportFailure
from .url_normalizer import require_valid_url


class Fetcher(Protocol):
    """Anything that can fetch a URL and hand back status and raw body."""

    async def fetch(
        self, url: str, headers: dict[str, str], timeout: float | None = None
    ) -> tuple[int, bytes]: ...


class WebContentFetcher:
    """Fetches raw page bytes with httpx, following redirects."""

    def __init__(
        self,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.transport = transport
        self.logger = logging.getLogger("search_scrape.web")

    async def fetch(
        self, url: str, headers: dict[str, str], timeout: float | None = None
    ) -> tuple[int, bytes]:
        """
        Fetch a URL.

        Args:
            url: Absolute http(s) URL to fetch
            headers: Request headers
            timeout: Per-request timeout override in seconds

        Returns:
            Tuple of HTTP status code and raw response body

        Raises:
            ValidationFailure: If url is not an http(s) URL
            TransportFailure: On DNS, connection, TLS or timeout errors
        """
        require_valid_url(url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(
                    url,
                    headers=headers,
                    timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
                )
        except httpx.TimeoutException as e:
            raise TransportFailure(f"Request to {url} timed out") from e
        except httpx.HTTPError as e:
            raise TransportFailure(f"Request to {url} failed: {str(e)}") from e

        # Debug logging for response details
        self.logger.debug(f"🔍 Response for {url}:")
        self.logger.debug(f"  Status: {response.status_code}")
        self.logger.debug(
            f"  Content-Type: {response.headers.get('content-type', 'unknown')}"
        )
        self.logger.debug(f"  Content-Length: {len(response.content)} bytes")

        return response.status_code, response.content
