import asyncio
import logging
from typing import List, Optional
import httpx
from .cache import ScrapeCache
from .errors import TransportError
from .models import ScraperConfig
from .parser import FragmentParser

logger = logging.getLogger(__name__)


class PageScraper:
    """Fetches pages and extracts HTML fragments, caching results per URL."""

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None
    ):
        self.config = config or ScraperConfig()
        self.cache = ScrapeCache()
        self._client = client
        self._async_client = async_client
        self._owns_client = client is None
        self._owns_async_client = async_client is None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(**self.config.client_kwargs())
        return self._client

    @property
    def async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(**self.config.client_kwargs())
        return self._async_client

    def scrape(self, url: str, selector: str) -> List[str]:
        """Fetch a page synchronously and return the inner HTML of every match."""
        cached = self._cached(url)
        if cached is not None:
            return cached

        logger.info("Fetching %s", url)
        try:
            response = self.client.get(url)
            response.raise_for_status()
            html = response.text
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        return self._extract_and_store(url, html, selector)

    async def scrape_async(self, url: str, selector: str) -> List[str]:
        """Fetch a page asynchronously and return the inner HTML of every match."""
        cached = self._cached(url)
        if cached is not None:
            return cached

        logger.info("Fetching %s", url)
        try:
            response = await self.async_client.get(url)
            response.raise_for_status()
            html = response.text
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        return self._extract_and_store(url, html, selector)

    def scrape_paginated(
        self,
        base_url: str,
        page_param: str,
        pages: int,
        selector: str
    ) -> List[str]:
        """
        Scrape pages 1..pages of a listing and concatenate the results.

        Args:
            base_url: URL without a query string; "?{page_param}={n}" is appended as-is
            page_param: Name of the page-number query parameter
            pages: Number of pages to fetch
            selector: CSS selector applied to every page

        Returns:
            Fragments from all pages, in page order

        Raises:
            ScrapeError: on the first page that fails; earlier results are discarded
        """
        results: List[str] = []
        for page in range(1, pages + 1):
            url = f"{base_url}?{page_param}={page}"
            page_results = self.scrape(url, selector)
            logger.info("Page %d/%d: %d fragments", page, pages, len(page_results))
            results.extend(page_results)
        return results

    async def scrape_with_delay(self, url: str, selector: str, delay: float) -> List[str]:
        """Wait `delay` seconds, then perform one asynchronous scrape."""
        logger.info("Waiting %ss before fetching %s", delay, url)
        await asyncio.sleep(delay)
        return await self.scrape_async(url, selector)

    def _cached(self, url: str) -> Optional[List[str]]:
        cached = self.cache.get(url)
        if cached is not None:
            logger.info("Cache hit for URL: %s", url)
        return cached

    def _extract_and_store(self, url: str, html: str, selector: str) -> List[str]:
        results = FragmentParser(selector).parse_page(html)
        self.cache.set(url, results)
        return results

    def close(self):
        """Close the sync client if this scraper created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    async def aclose(self):
        """Close both clients if this scraper created them."""
        self.close()
        if self._async_client is not None and self._owns_async_client:
            await self._async_client.aclose()
            self._async_client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
