"""
Example usage of the pagescraper library.
"""

import asyncio
from pagescraper import PageScraper, JsScraper, Exporter, ScrapeError


def example_1_basic_usage():
    """Basic scraping example."""
    print("=" * 60)
    print("Example 1: Basic Scraping")
    print("=" * 60)

    with PageScraper() as scraper:
        try:
            results = scraper.scrape("https://example.com", "p")
            print(f"\n✓ Extracted {len(results)} fragments")

            # Served from the cache, no second request
            again = scraper.scrape("https://example.com", "p")
            print(f"✓ Cached call returned {len(again)} fragments")

            Exporter.to_csv(results, "output.csv")
            print("✓ Saved to output.csv")

        except ScrapeError as e:
            print(f"Error: {e}")


def example_2_pagination():
    """Scrape the first pages of a paginated listing."""
    print("\n" + "=" * 60)
    print("Example 2: Pagination")
    print("=" * 60)

    with PageScraper() as scraper:
        try:
            # Fetches ...?page=1 through ...?page=3
            results = scraper.scrape_paginated(
                "https://quotes.toscrape.com/search.aspx",
                "page",
                3,
                "span.text"
            )
            print(f"\n✓ {len(results)} fragments from 3 pages")
            print(Exporter.to_json(results[:3]))

        except ScrapeError as e:
            print(f"Error: {e}")


async def example_3_delay():
    """Wait before fetching to go easy on the target site."""
    print("\n" + "=" * 60)
    print("Example 3: Delayed Async Scrape")
    print("=" * 60)

    async with PageScraper() as scraper:
        try:
            results = await scraper.scrape_with_delay("https://example.com", "h1", 2)
            print(f"\n✓ {Exporter.to_json(results)}")
        except ScrapeError as e:
            print(f"Error: {e}")


async def example_4_js_rendering():
    """Browser mode for JavaScript-rendered pages."""
    print("\n" + "=" * 60)
    print("Example 4: JavaScript Rendering")
    print("=" * 60)

    # Requires `playwright install chromium`
    try:
        results = await JsScraper().scrape_with_js("https://quotes.toscrape.com/js/", "div.quote")
        print(f"\n✓ First quote:\n{results[0]}")
    except ScrapeError as e:
        print(f"Error: {e}")


def main():
    """Run examples."""
    print("\n🕷️  pagescraper examples\n")

    example_1_basic_usage()
    example_2_pagination()
    asyncio.run(example_3_delay())
    asyncio.run(example_4_js_rendering())


if __name__ == "__main__":
    main()
