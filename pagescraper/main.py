import asyncio
import logging
from typing import List, Optional
import typer
from rich.console import Console
from rich.json import JSON
from rich.logging import RichHandler
from rich.markup import escape
from .browser import JsScraper
from .core import PageScraper
from .errors import ScrapeError
from .export import Exporter
from .models import ScraperConfig


app = typer.Typer(help="Fetch web pages and extract HTML fragments with CSS selectors")
console = Console()


@app.command()
def scrape(
    url: str = typer.Argument(..., help="URL of the page to scrape"),
    selector: str = typer.Argument(..., help="CSS selector of the elements to extract"),
    delay: float = typer.Option(0, "--delay", help="Seconds to wait before fetching"),
    use_js: bool = typer.Option(
        False,
        "--js",
        help="Render the page in a headless browser (first match only, never cached)"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or csv"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress")
):
    """Scrape a single page."""
    _setup_logging(verbose)
    _check_format(fmt)
    config = ScraperConfig.from_env()

    try:
        if use_js:
            js = JsScraper(headless=config.headless, navigation_timeout=config.navigation_timeout)
            results = asyncio.run(js.scrape_with_js(url, selector))
        else:
            results = asyncio.run(_scrape_async(config, url, selector, delay))
        _emit(results, output, fmt)
    except ScrapeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def paginate(
    base_url: str = typer.Argument(..., help="Listing URL without a query string"),
    selector: str = typer.Argument(..., help="CSS selector of the elements to extract"),
    page_param: str = typer.Option("page", "--param", help="Page-number query parameter"),
    pages: int = typer.Option(1, "--pages", "-p", help="Number of pages to scrape"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or csv"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress")
):
    """Scrape pages 1..N of a paginated listing."""
    _setup_logging(verbose)
    _check_format(fmt)

    try:
        with PageScraper(config=ScraperConfig.from_env()) as scraper:
            results = scraper.scrape_paginated(base_url, page_param, pages, selector)
        _emit(results, output, fmt)
    except ScrapeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


async def _scrape_async(config: ScraperConfig, url: str, selector: str, delay: float) -> List[str]:
    async with PageScraper(config=config) as scraper:
        if delay > 0:
            return await scraper.scrape_with_delay(url, selector, delay)
        return await scraper.scrape_async(url, selector)


def _emit(results: List[str], output: Optional[str], fmt: str):
    """Write results to a file, or print them as JSON."""
    if output:
        if fmt == "csv":
            Exporter.to_csv(results, output)
        else:
            Exporter.to_json_file(results, output)
        console.print(f"[green]Saved {len(results)} fragments to {output}[/green]")
    else:
        console.print(JSON(Exporter.to_json(results)))


def _check_format(fmt: str):
    if fmt not in ("json", "csv"):
        console.print(f"[red]Error: unknown format '{fmt}' (expected json or csv)[/red]")
        raise typer.Exit(2)


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)]
    )


if __name__ == "__main__":
    app()
