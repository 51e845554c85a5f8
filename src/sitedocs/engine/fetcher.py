"""HTTP document fetcher using httpx.

Each call opens its own client, so concurrent tool invocations share no
connection state.
"""

import asyncio
import logging
import time
from typing import Optional

import httpx

from sitedocs.core.exceptions import FetchError
from sitedocs.core.interfaces import DocumentFetcher
from sitedocs.core.models import GatewayConfig

logger = logging.getLogger(__name__)


class HttpFetcher(DocumentFetcher):
    """Fetch documents over HTTP(S)."""

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Timeout, retry and user agent settings.
            transport: Custom httpx transport (used by tests).
        """
        self._config = config or GatewayConfig()
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """Fetch a URL and return its body.

        Transport errors and 5xx responses are retried up to
        ``max_retries`` attempts in total; other statuses fail immediately.

        Args:
            url: URL to fetch.

        Returns:
            Response text.

        Raises:
            FetchError: If every attempt failed.
        """
        last_error: Optional[FetchError] = None

        async with httpx.AsyncClient(
            timeout=self._config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self._config.user_agent},
            transport=self._transport,
        ) as client:
            for attempt in range(1, self._config.max_retries + 1):
                start_time = time.time()
                logger.debug("GET %s (attempt %d)", url, attempt)

                try:
                    response = await client.get(url)
                    response.raise_for_status()
                    logger.debug(
                        "GET %s -> %d in %.0fms",
                        url,
                        response.status_code,
                        (time.time() - start_time) * 1000,
                    )
                    return response.text

                except httpx.HTTPStatusError as e:
                    status = e.response.status_code
                    last_error = FetchError(
                        url, f"HTTP error! status: {status}", status_code=status
                    )
                    if status < 500:
                        break  # Don't retry client errors

                except httpx.HTTPError as e:
                    last_error = FetchError(url, str(e) or type(e).__name__)

                if attempt < self._config.max_retries:
                    logger.debug("Retrying %s: %s", url, last_error.reason)
                    await asyncio.sleep(self._config.retry_delay * attempt)

        error = last_error or FetchError(url, "no attempts made")
        logger.warning("%s", error)
        raise error
