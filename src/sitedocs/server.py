"""MCP server exposing the documentation tools over stdio."""

from collections.abc import Callable
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from sitedocs.core.models import OperationResult, SiteKey
from sitedocs.formatting import format_error, format_index, format_page, format_search
from sitedocs.gateway import DocsGateway
from sitedocs.log import configure_logging, log_startup
from sitedocs.sites.registry import DEFAULT_SITE, SiteRegistry

SERVER_NAME = "multi-site-documentation-server"

VALID_SITES = ", ".join(SiteRegistry.list_valid_keys())


def _tool_result(
    result: OperationResult[Any], render: Callable[[Any], str]
) -> CallToolResult:
    """Wrap an operation outcome as text, flagging failures with isError."""
    if not result.ok:
        return CallToolResult(
            content=[TextContent(type="text", text=format_error(result.error))],  # type: ignore[arg-type]
            isError=True,
        )
    return CallToolResult(content=[TextContent(type="text", text=render(result.value))])


def create_server(gateway: Optional[DocsGateway] = None) -> FastMCP:
    """Build the MCP server with the three documentation tools.

    Args:
        gateway: Gateway to serve; a default HTTP-backed one if omitted.

    Returns:
        Configured FastMCP instance (not yet running).
    """
    gateway = gateway or DocsGateway()
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(
        name="fetch_doc_index",
        description=(
            "Fetches the complete documentation index for a specified site. "
            f"Supported sites: {VALID_SITES}. "
            "The index contains a structured overview of all available documentation pages. "
            "Use this to discover available documentation before fetching specific pages."
        ),
    )
    async def fetch_doc_index(
        site: Annotated[
            SiteKey,
            Field(
                description=(
                    f"The documentation site to fetch from. Options: {VALID_SITES} "
                    f"(default: {DEFAULT_SITE.value})"
                )
            ),
        ] = DEFAULT_SITE,
    ) -> CallToolResult:
        return _tool_result(await gateway.fetch_index(site), format_index)

    @mcp.tool(
        name="fetch_doc_page",
        description=(
            "Fetches content from a specific documentation page. "
            "Provide either a full URL or a relative path (e.g., '/docs/concepts/architecture'). "
            "Use fetch_doc_index first to discover available pages."
        ),
    )
    async def fetch_doc_page(
        url: Annotated[
            str,
            Field(
                description=(
                    "The URL or path to fetch. Can be a full URL (https://...) "
                    "or relative path (/docs/...)"
                )
            ),
        ],
        site: Annotated[
            SiteKey,
            Field(
                description=(
                    f"The documentation site (used for relative paths). Options: {VALID_SITES} "
                    f"(default: {DEFAULT_SITE.value})"
                )
            ),
        ] = DEFAULT_SITE,
    ) -> CallToolResult:
        return _tool_result(await gateway.fetch_page(url, site), format_page)

    @mcp.tool(
        name="search_docs",
        description=(
            "Searches for a term in a documentation site's index. "
            "Returns matching sections from the index with context. "
            "Useful for finding specific topics or features in the documentation."
        ),
    )
    async def search_docs(
        query: Annotated[
            str,
            Field(description="The search term or phrase to look for in the documentation"),
        ],
        site: Annotated[
            SiteKey,
            Field(
                description=(
                    f"The documentation site to search. Options: {VALID_SITES} "
                    f"(default: {DEFAULT_SITE.value})"
                )
            ),
        ] = DEFAULT_SITE,
        caseInsensitive: Annotated[
            bool,
            Field(description="Whether to perform case-insensitive search (default: true)"),
        ] = True,
    ) -> CallToolResult:
        result = await gateway.search(query, site, case_insensitive=caseInsensitive)
        return _tool_result(result, lambda matches: format_search(matches, result.site))

    return mcp


def run(gateway: Optional[DocsGateway] = None, verbose: bool = False) -> None:
    """Configure logging, announce the server and serve on stdio."""
    configure_logging(verbose)
    server = create_server(gateway)
    log_startup("stdio")
    server.run(transport="stdio")
