"""Tests for gateway operations."""

import asyncio

from sitedocs.core.exceptions import FetchError, UnknownSiteError
from sitedocs.core.models import SiteKey
from sitedocs.gateway import DocsGateway


class TestFetchIndex:
    """Tests for DocsGateway.fetch_index."""

    def test_default_site(self, fetcher, sample_index):
        """Test that the default site's index is fetched."""
        result = asyncio.run(DocsGateway(fetcher).fetch_index())

        assert result.ok
        assert result.value.content == sample_index
        assert result.value.url == "https://module-federation.io/llms.txt"
        assert result.site.key is SiteKey.MODULE_FEDERATION

    def test_unknown_site(self, fetcher):
        """Test that an unknown site is returned as an error without fetching."""
        result = asyncio.run(DocsGateway(fetcher).fetch_index("react"))

        assert not result.ok
        assert isinstance(result.error, UnknownSiteError)
        assert result.site is None
        assert fetcher.requested == []

    def test_fetch_failure(self, fetcher):
        """Test that fetch failures are returned with the site attached."""
        result = asyncio.run(DocsGateway(fetcher).fetch_index(SiteKey.MODERNJS))

        assert isinstance(result.error, FetchError)
        assert result.error.url == "https://modernjs.dev/llms.txt"
        assert result.site.key is SiteKey.MODERNJS


class TestFetchPage:
    """Tests for DocsGateway.fetch_page."""

    def test_relative_path(self, fetcher):
        """Test that a bare path is resolved against the site."""
        result = asyncio.run(DocsGateway(fetcher).fetch_page("guide/start/quick-start.md"))

        assert result.ok
        assert result.value.content == "# Quick Start"
        assert fetcher.requested == ["https://module-federation.io/guide/start/quick-start.md"]

    def test_absolute_url_ignores_site(self, fetcher):
        """Test that a full URL is fetched as given."""
        url = "https://module-federation.io/guide/start/quick-start.md"
        result = asyncio.run(DocsGateway(fetcher).fetch_page(url, site="firebase"))

        assert result.ok
        assert result.value.url == url
        assert result.site.key is SiteKey.FIREBASE

    def test_missing_page(self, fetcher):
        """Test that a missing page yields a FetchError result."""
        result = asyncio.run(DocsGateway(fetcher).fetch_page("/nope"))

        assert result.error.status_code == 404


class TestSearch:
    """Tests for DocsGateway.search."""

    def test_search_index(self, fetcher):
        """Test searching the default site's index."""
        result = asyncio.run(DocsGateway(fetcher).search("runtime"))

        assert result.ok
        assert [m.line_number for m in result.value] == [4]
        assert result.site.name == "Module Federation"

    def test_case_sensitive(self, fetcher):
        """Test that case-sensitive search can miss."""
        result = asyncio.run(
            DocsGateway(fetcher).search("RUNTIME", case_insensitive=False)
        )
        assert result.ok
        assert len(result.value) == 0

    def test_search_unknown_site(self, fetcher):
        """Test that search reports unknown sites."""
        result = asyncio.run(DocsGateway(fetcher).search("x", site="vue"))
        assert isinstance(result.error, UnknownSiteError)

    def test_search_fetch_failure(self, fetcher):
        """Test that search reports index fetch failures."""
        result = asyncio.run(DocsGateway(fetcher).search("x", site="firebase"))

        assert isinstance(result.error, FetchError)
        assert result.site.key is SiteKey.FIREBASE
