"""
Fetch web pages and extract HTML fragments matching a CSS selector.
"""

from .models import ScraperConfig
from .cache import ScrapeCache
from .parser import FragmentParser, extract_fragments
from .core import PageScraper
from .export import Exporter
from .browser import BrowserScraper, JsScraper
from .errors import (
    ScrapeError,
    TransportError,
    SelectorError,
    ExportError,
    BrowserError,
)

__version__ = "1.0.0"

__all__ = [
    "ScraperConfig",
    "ScrapeCache",
    "FragmentParser",
    "extract_fragments",
    "PageScraper",
    "Exporter",
    "BrowserScraper",
    "JsScraper",
    "ScrapeError",
    "TransportError",
    "SelectorError",
    "ExportError",
    "BrowserError",
]
