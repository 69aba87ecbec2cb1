"""In-memory cache for scrape results."""

import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ScrapeCache:
    """URL -> extracted fragments. Entries live as long as the cache does."""

    def __init__(self):
        self._cache: Dict[str, List[str]] = {}

    def get(self, url: str) -> Optional[List[str]]:
        """Get cached fragments for a URL (exact string match)."""
        entries = self._cache.get(url)
        if entries is None:
            return None
        return list(entries)

    def set(self, url: str, entries: List[str]) -> None:
        """Insert or overwrite the fragments stored for a URL."""
        self._cache[url] = list(entries)
        logger.debug("Cached %d fragments for %s", len(entries), url)

    def __contains__(self, url: str) -> bool:
        return url in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> dict:
        """Get cache statistics."""
        return {"count": len(self._cache), "urls": list(self._cache.keys())}
