"""Abstract interfaces for sitedocs."""

from abc import ABC, abstractmethod


class DocumentFetcher(ABC):
    """Abstract base class for retrieving documents as text."""

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Fetch a document.

        Args:
            url: Fully resolved URL.

        Returns:
            The response body as text.

        Raises:
            FetchError: On a non-success status or transport failure.
        """
        ...
