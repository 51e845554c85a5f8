"""Logging setup.

Everything is written to stderr; stdout is reserved for the MCP protocol.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from sitedocs.sites.registry import SiteRegistry

stderr_console = Console(stderr=True)

logger = logging.getLogger("sitedocs")

TOOL_SUMMARIES = {
    "fetch_doc_index": "Get the documentation index for a site",
    "fetch_doc_page": "Fetch a specific documentation page",
    "search_docs": "Search documentation",
}


def configure_logging(verbose: bool = False) -> None:
    """Send sitedocs logs to stderr through Rich."""
    handler = RichHandler(
        console=stderr_console,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def log_startup(transport: str = "stdio") -> None:
    """Log the supported sites and tools once at process start."""
    logger.info("Multi-Site Documentation Server running on %s", transport)
    logger.info("Supported sites: %s", ", ".join(SiteRegistry.list_valid_keys()))
    logger.info("Available tools:")
    for name, summary in TOOL_SUMMARIES.items():
        logger.info("  - %s: %s", name, summary)
