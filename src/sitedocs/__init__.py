"""
sitedocs - Fetch and search documentation from multiple sites.

An MCP server (and CLI) giving agents access to the llms.txt indexes and
pages of several documentation sites.

Usage:
    sitedocs serve
    sitedocs search "remote" --site module-federation
"""

__version__ = "1.0.0"

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
from sitedocs.gateway import DocsGateway

__all__ = [
    "__version__",
    "DocsGateway",
    # Models
    "FetchedDocument",
    "GatewayConfig",
    "MatchContext",
    "OperationResult",
    "SearchResult",
    "SiteDescriptor",
    "SiteKey",
    # Interfaces
    "DocumentFetcher",
    # Errors
    "FetchError",
    "GatewayError",
    "UnknownSiteError",
]
