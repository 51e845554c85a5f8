"""Fetching and searching documentation text."""

from sitedocs.engine.fetcher import HttpFetcher
from sitedocs.engine.search import search_lines

__all__ = [
    "HttpFetcher",
    "search_lines",
]
