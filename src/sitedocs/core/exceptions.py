"""Errors reported by the gateway."""

from typing import Optional


class GatewayError(Exception):
    """Base class for errors returned to tool callers."""


class UnknownSiteError(GatewayError):
    """A site key outside the registered set was requested."""

    def __init__(self, key: str, valid_keys: list[str]) -> None:
        self.key = key
        self.valid_keys = list(valid_keys)
        super().__init__(
            f'Unknown site "{key}". Valid sites are: {", ".join(self.valid_keys)}'
        )


class FetchError(GatewayError):
    """Retrieving a document failed (transport error or non-success status)."""

    def __init__(
        self, url: str, reason: str, status_code: Optional[int] = None
    ) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch from {url}: {reason}")
