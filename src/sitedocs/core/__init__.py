"""Core models and interfaces for sitedocs."""

from sitedocs.core.exceptions import FetchError, GatewayError, UnknownSiteError
from sitedocs.core.interfaces import DocumentFetcher
from sitedocs.core.models import (
    FetchedDocument,
    GatewayConfig,
    MatchContext,
    OperationResult,
    SearchResult,
    SiteDescriptor,
    SiteKey,
)

__all__ = [
    "FetchedDocument",
    "GatewayConfig",
    "MatchContext",
    "OperationResult",
    "SearchResult",
    "SiteDescriptor",
    "SiteKey",
    "DocumentFetcher",
    "FetchError",
    "GatewayError",
    "UnknownSiteError",
]
