"""Resolve what to fetch for a documentation site."""

from sitedocs.core.models import SiteDescriptor


def resolve_index_url(site: SiteDescriptor) -> str:
    """Return the URL of the site's index document."""
    return site.base_url + site.index_path


def resolve_page_url(site: SiteDescriptor, target: str) -> str:
    """Resolve a user-supplied page reference against a site.

    Absolute ``http(s)://`` URLs are returned unchanged. Rooted paths are
    appended to the site's base URL; anything else is joined with a ``/``.
    The result is not validated.

    Examples:
        https://other.dev/x -> https://other.dev/x
        /guide/start        -> https://modernjs.dev/guide/start
        guide/start         -> https://modernjs.dev/guide/start

    Args:
        site: Site the reference is relative to.
        target: Full URL, rooted path or bare path.

    Returns:
        URL to fetch.
    """
    if target.startswith(("http://", "https://")):
        return target
    if target.startswith("/"):
        return site.base_url + target
    return f"{site.base_url}/{target}"
