"""Documentation gateway operations.

Each operation resolves the site, works out the URL, fetches it and returns
an OperationResult. Unknown sites and fetch failures are returned as
errors rather than raised.
"""

import logging
from typing import Optional, Union

from sitedocs.core.exceptions import FetchError, UnknownSiteError
from sitedocs.core.interfaces import DocumentFetcher
from sitedocs.core.models import (
    FetchedDocument,
    GatewayConfig,
    OperationResult,
    SearchResult,
    SiteDescriptor,
    SiteKey,
)
from sitedocs.engine.fetcher import HttpFetcher
from sitedocs.engine.search import search_lines
from sitedocs.sites.locator import resolve_index_url, resolve_page_url
from sitedocs.sites.registry import DEFAULT_SITE, SiteRegistry

logger = logging.getLogger(__name__)

SiteArg = Union[str, SiteKey]


class DocsGateway:
    """Fetch and search documentation across registered sites."""

    def __init__(
        self,
        fetcher: Optional[DocumentFetcher] = None,
        config: Optional[GatewayConfig] = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            fetcher: Fetch capability; defaults to HttpFetcher.
            config: Used to build the default fetcher.
        """
        self._fetcher = fetcher or HttpFetcher(config)

    async def fetch_index(
        self, site: SiteArg = DEFAULT_SITE
    ) -> OperationResult[FetchedDocument]:
        """Fetch a site's documentation index."""
        try:
            descriptor = SiteRegistry.resolve(site)
        except UnknownSiteError as e:
            return OperationResult.failure(e)

        return await self._fetch(descriptor, resolve_index_url(descriptor))

    async def fetch_page(
        self, target: str, site: SiteArg = DEFAULT_SITE
    ) -> OperationResult[FetchedDocument]:
        """Fetch a page given as a full URL or a path relative to the site."""
        try:
            descriptor = SiteRegistry.resolve(site)
        except UnknownSiteError as e:
            return OperationResult.failure(e)

        return await self._fetch(descriptor, resolve_page_url(descriptor, target))

    async def search(
        self,
        query: str,
        site: SiteArg = DEFAULT_SITE,
        case_insensitive: bool = True,
    ) -> OperationResult[SearchResult]:
        """Search a site's index for lines containing the query."""
        index = await self.fetch_index(site)
        if not index.ok:
            return OperationResult.failure(index.error, index.site)  # type: ignore[arg-type]

        document: FetchedDocument = index.value  # type: ignore[assignment]
        result = search_lines(document.content, query, case_insensitive)
        logger.debug(
            "Search %r on %s: %d matches", query, document.site.key.value, len(result)
        )
        return OperationResult.success(result, document.site)

    async def _fetch(
        self, site: SiteDescriptor, url: str
    ) -> OperationResult[FetchedDocument]:
        try:
            content = await self._fetcher.fetch(url)
        except FetchError as e:
            return OperationResult.failure(e, site)

        return OperationResult.success(
            FetchedDocument(url=url, site=site, content=content), site
        )
