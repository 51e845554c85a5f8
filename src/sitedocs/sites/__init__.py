"""Supported documentation sites and URL resolution."""

from sitedocs.sites.locator import resolve_index_url, resolve_page_url
from sitedocs.sites.registry import DEFAULT_SITE, SiteRegistry

__all__ = [
    "DEFAULT_SITE",
    "SiteRegistry",
    "resolve_index_url",
    "resolve_page_url",
]
