"""
Browser-based scraping for JavaScript-rendered pages using Playwright.
"""

import logging
from typing import List, Optional
from playwright.async_api import async_playwright, Browser, Error as PlaywrightError
from .errors import BrowserError

logger = logging.getLogger(__name__)


class BrowserScraper:
    """Handles browser automation for JS-heavy sites."""

    def __init__(self, headless: bool = True):
        self.headless = headless
        self.browser: Optional[Browser] = None
        self.playwright = None

    async def __aenter__(self):
        """Context manager entry."""
        logger.info("Launching Chromium (headless=%s)", self.headless)
        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(headless=self.headless)
        except PlaywrightError as e:
            await self._shutdown()
            raise BrowserError(f"Could not launch browser: {e}") from e
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self._shutdown()

    async def _shutdown(self):
        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None

    async def get_inner_html(self, url: str, selector: str, timeout: float = 30000) -> str:
        """
        Render a page and return the inner HTML of the first element matching selector.

        Args:
            url: URL to navigate to
            selector: CSS selector of the element to read
            timeout: Navigation timeout in milliseconds (default: 30000)

        Returns:
            innerHTML of the first match after scripts have run
        """
        if not self.browser:
            raise BrowserError("Browser not initialized. Use async with context manager.")

        page = None

        try:
            try:
                page = await self.browser.new_page()
                await page.goto(url, wait_until="load", timeout=timeout)
                element = await page.query_selector(selector)
                if element is None:
                    raise BrowserError(f"No element matching {selector!r} on {url}")
                html = await element.evaluate("el => el.innerHTML")
            except PlaywrightError as e:
                raise BrowserError(f"Browser scrape of {url} failed: {e}") from e
            return html or ""

        finally:
            if page is not None:
                await page.close()


class JsScraper:
    """Scrapes JavaScript-rendered pages. Results are never cached."""

    def __init__(self, headless: bool = True, navigation_timeout: float = 30000):
        self.headless = headless
        self.navigation_timeout = navigation_timeout

    async def scrape_with_js(self, url: str, selector: str) -> List[str]:
        """Launch a fresh browser, render url and return the first match's inner HTML."""
        async with BrowserScraper(headless=self.headless) as browser:
            html = await browser.get_inner_html(url, selector, timeout=self.navigation_timeout)
        return [html]
