"""
Exporting scraped fragments to JSON and line-per-row files.
"""

import json
import logging
from typing import List
from .errors import ExportError

logger = logging.getLogger(__name__)


class Exporter:
    """Serializes scrape results."""

    @staticmethod
    def to_json(data: List[str]) -> str:
        """Compact JSON array of strings, e.g. ["a","b"]."""
        return json.dumps(list(data), separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def to_csv(data: List[str], file_path: str) -> None:
        """
        Write one element per line, overwriting file_path.

        Elements are written verbatim: embedded commas or newlines are not
        quoted or escaped.
        """
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                for row in data:
                    f.write(f"{row}\n")
        except OSError as e:
            raise ExportError(f"Could not write {file_path}: {e}") from e
        logger.info("Wrote %d rows to %s", len(data), file_path)

    @staticmethod
    def to_json_file(data: List[str], file_path: str) -> None:
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(Exporter.to_json(data))
        except OSError as e:
            raise ExportError(f"Could not write {file_path}: {e}") from e
        logger.info("Wrote %d items to %s", len(data), file_path)
