"""Render gateway results as tool text."""

from sitedocs.core.exceptions import GatewayError
from sitedocs.core.models import FetchedDocument, SearchResult, SiteDescriptor

MATCH_SEPARATOR = "\n---\n"


def format_index(document: FetchedDocument) -> str:
    return f"Documentation index for {document.site.name}:\n\n{document.content}"


def format_page(document: FetchedDocument) -> str:
    return f"Content from {document.url} ({document.site.name}):\n\n{document.content}"


def format_search(result: SearchResult, site: SiteDescriptor) -> str:
    """Render search matches, or a no-match message.

    Each match is its context lines joined by newlines; matches are
    separated by ``---``.
    """
    if not result.matches:
        return (
            f'No matches found for "{result.query}" '
            f"in the {site.name} documentation index."
        )

    count = len(result.matches)
    plural = "" if count == 1 else "es"
    body = MATCH_SEPARATOR.join("\n".join(match.lines) for match in result)
    return f'Found {count} match{plural} for "{result.query}" in {site.name}:\n\n{body}'


def format_error(error: GatewayError) -> str:
    return f"Error: {error}"
