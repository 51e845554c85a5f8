"""Pytest configuration and fixtures."""

import pytest

from sitedocs.core.exceptions import FetchError
from sitedocs.core.interfaces import DocumentFetcher


class StaticFetcher(DocumentFetcher):
    """Serve documents from a dict and record requested URLs."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = documents
        self.requested: list[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.documents:
            raise FetchError(url, "HTTP error! status: 404", status_code=404)
        return self.documents[url]


@pytest.fixture
def sample_index():
    """Sample llms.txt content."""
    return "\n".join(
        [
            "# Module Federation",
            "",
            "## Guide",
            "- [Quick Start](/guide/start/quick-start.md): Set up a remote",
            "- [Runtime API](/guide/basic/runtime.md): Load remotes at runtime",
            "",
            "## Plugins",
            "- [Rspack Plugin](/guide/basic/rspack.md)",
        ]
    )


@pytest.fixture
def fetcher(sample_index):
    """Fetcher serving the Module Federation index and one page."""
    return StaticFetcher(
        {
            "https://module-federation.io/llms.txt": sample_index,
            "https://module-federation.io/guide/start/quick-start.md": "# Quick Start",
        }
    )
