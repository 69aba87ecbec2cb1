"""
Error types raised by the scraping pipeline.

Every failure surfaces as a ScrapeError; the subclasses only tag the cause.
"""


class ScrapeError(Exception):
    """An operation failed. Carries a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TransportError(ScrapeError):
    """
    The HTTP request could not complete or returned an error status.

    4xx/5xx responses count as failures: error pages are never parsed or cached.
    """


class SelectorError(ScrapeError):
    """The CSS selector string could not be parsed."""


class ExportError(ScrapeError):
    """An export file could not be created or written."""


class BrowserError(ScrapeError):
    """The headless browser failed to launch, navigate, or find an element."""
