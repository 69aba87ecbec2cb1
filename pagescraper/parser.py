import logging
from typing import List
from selectolax.lexbor import LexborHTMLParser, LexborNode, SelectolaxError
from .errors import SelectorError

logger = logging.getLogger(__name__)


class FragmentParser:
    """Parses HTML and extracts the inner HTML of every node matching a selector."""

    def __init__(self, selector: str):
        self.selector = selector

    def parse_page(self, html: str) -> List[str]:
        """Extract all matching fragments from a single page, in document order."""
        tree = LexborHTMLParser(html)

        try:
            matches = tree.css(self.selector)
        except SelectolaxError as e:
            raise SelectorError(f"Selector parse error: {self.selector!r} ({e})") from e

        fragments = [self._inner_html(node) for node in matches]
        logger.debug("Selector %r matched %d nodes", self.selector, len(fragments))
        return fragments

    @staticmethod
    def _inner_html(node: LexborNode) -> str:
        """Serialize the children of a node, text included."""
        return "".join(child.html or "" for child in node.iter(include_text=True))


def extract_fragments(html: str, selector: str) -> List[str]:
    return FragmentParser(selector).parse_page(html)
