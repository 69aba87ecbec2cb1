"""Shared fixtures for pagescraper tests."""

from typing import Callable, Dict, List

import httpx
import pytest

from pagescraper import PageScraper


PAGES: Dict[str, str] = {
    "https://example.com/": "<html><body><div>A</div><div>B</div></body></html>",
    "https://example.com/links": (
        '<ul><li><a href="/one">One</a></li><li><a href="/two">Two</a></li></ul>'
    ),
    "https://example.com/list?page=1": '<p class="item">p1-a</p><p class="item">p1-b</p>',
    "https://example.com/list?page=2": '<p class="item">p2-a</p>',
    "https://example.com/list?page=3": '<p class="item">p3-a</p><p class="item">p3-b</p>',
}


class RecordingHandler:
    """MockTransport handler serving PAGES and recording every requested URL."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = pages
        self.requested: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url not in self.pages:
            return httpx.Response(404, text="not found", request=request)
        return httpx.Response(
            200,
            text=self.pages[url],
            headers={"Content-Type": "text/html; charset=utf-8"},
            request=request,
        )


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler(dict(PAGES))


@pytest.fixture
def make_scraper(handler) -> Callable[..., PageScraper]:
    """Build a PageScraper whose clients are served by the recording handler."""
    created: List[PageScraper] = []

    def _make(transport_handler=None) -> PageScraper:
        transport = httpx.MockTransport(transport_handler or handler)
        scraper = PageScraper(
            client=httpx.Client(transport=transport),
            async_client=httpx.AsyncClient(transport=transport),
        )
        created.append(scraper)
        return scraper

    yield _make

    for scraper in created:
        scraper.client.close()


@pytest.fixture
def scraper(make_scraper) -> PageScraper:
    return make_scraper()
