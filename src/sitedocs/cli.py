"""Command-line interface for sitedocs."""

import asyncio
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from sitedocs import __version__
from sitedocs.core.models import GatewayConfig, OperationResult, SiteKey
from sitedocs.formatting import format_error, format_index, format_page, format_search
from sitedocs.gateway import DocsGateway
from sitedocs.log import configure_logging
from sitedocs.sites.locator import resolve_index_url
from sitedocs.sites.registry import DEFAULT_SITE, SiteRegistry

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]sitedocs[/bold] version {__version__}")
        raise typer.Exit()


def _build_config(timeout: Optional[float], retries: Optional[int]) -> GatewayConfig:
    """Environment settings, overridden by any CLI options given."""
    try:
        config = GatewayConfig.from_env()
    except ValueError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if timeout is not None:
        config.timeout = timeout
    if retries is not None:
        config.max_retries = retries
    return config


def _render(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _fail(result: OperationResult) -> NoReturn:
    err_console.print(format_error(result.error), style="red", markup=False, highlight=False)  # type: ignore[arg-type]
    raise typer.Exit(1)


app = typer.Typer(
    name="sitedocs",
    help="Fetch and search documentation from multiple sites.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def _main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Fetch and search documentation from multiple sites."""


SiteOption = Annotated[
    SiteKey,
    typer.Option("-s", "--site", help="Documentation site"),
]
TimeoutOption = Annotated[
    Optional[float],
    typer.Option("-t", "--timeout", help="Request timeout in seconds"),
]
RetriesOption = Annotated[
    Optional[int],
    typer.Option("-r", "--retries", min=1, help="Total attempts per request"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("-v", "--verbose", help="Verbose output"),
]


@app.command()
def serve(
    timeout: TimeoutOption = None,
    retries: RetriesOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Run the MCP server on stdio."""
    from sitedocs.server import run

    config = _build_config(timeout, retries)
    run(DocsGateway(config=config), verbose=verbose)


@app.command("sites")
def sites() -> None:
    """List supported documentation sites."""
    table = Table(
        title="[bold]Documentation Sites[/bold]",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Site", style="cyan")
    table.add_column("Name")
    table.add_column("Base URL", style="green")
    table.add_column("Index", style="yellow")

    for site in SiteRegistry.list_sites():
        key = site.key.value
        if site.key is DEFAULT_SITE:
            key += " (default)"
        table.add_row(key, site.name, site.base_url, resolve_index_url(site))

    console.print()
    console.print(table)
    console.print()


@app.command()
def index(
    site: SiteOption = DEFAULT_SITE,
    timeout: TimeoutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print a site's documentation index."""
    configure_logging(verbose)
    gateway = DocsGateway(config=_build_config(timeout, None))
    result = asyncio.run(gateway.fetch_index(site))
    if not result.ok:
        _fail(result)
    _render(format_index(result.value))


@app.command()
def page(
    target: Annotated[
        str,
        typer.Argument(help="Full URL (https://...) or path relative to the site"),
    ],
    site: SiteOption = DEFAULT_SITE,
    timeout: TimeoutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print a documentation page.

    \b
    Examples:
        sitedocs page /guide/start/introduction --site modernjs
        sitedocs page https://firebase.google.com/docs/auth.md
    """
    configure_logging(verbose)
    gateway = DocsGateway(config=_build_config(timeout, None))
    result = asyncio.run(gateway.fetch_page(target, site))
    if not result.ok:
        _fail(result)
    _render(format_page(result.value))


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Search term or phrase")],
    site: SiteOption = DEFAULT_SITE,
    case_sensitive: Annotated[
        bool,
        typer.Option("-c", "--case-sensitive", help="Match case exactly"),
    ] = False,
    timeout: TimeoutOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Search a site's documentation index."""
    configure_logging(verbose)
    gateway = DocsGateway(config=_build_config(timeout, None))
    result = asyncio.run(gateway.search(query, site, case_insensitive=not case_sensitive))
    if not result.ok:
        _fail(result)
    _render(format_search(result.value, result.site))


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
