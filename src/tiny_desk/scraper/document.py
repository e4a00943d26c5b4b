# src/tiny_desk/scraper/document.py

"""Small query interface over a parsed page.

The extractors only ever talk to a `Document`, never to BeautifulSoup
directly, so they can be fed any HTML string in tests.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class Document:
    """Read-only view of an HTML document, queried with CSS selectors."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Document":
        return cls(BeautifulSoup(html, "lxml"))

    @property
    def title(self) -> str:
        """Text of the <title> element, or an empty string."""
        tag = self._soup.find("title")
        return tag.get_text() if tag else ""

    def find(self, selector: str, scope: Tag | None = None) -> Tag | None:
        """First element matching `selector`, optionally inside `scope`."""
        root = scope if scope is not None else self._soup
        return root.select_one(selector)

    def find_all(self, selector: str, scope: Tag | None = None) -> list[Tag]:
        """All elements matching `selector` in document order."""
        root = scope if scope is not None else self._soup
        return list(root.select(selector))

    def exists(self, selector: str) -> bool:
        return self.find(selector) is not None

    @staticmethod
    def text(element: Tag) -> str:
        """Full text content of `element`, untrimmed."""
        return element.get_text()

    @staticmethod
    def attribute(element: Tag, name: str) -> str | None:
        value = element.get(name)
        if isinstance(value, list):
            # bs4 returns multi-valued attributes such as class as lists
            return " ".join(value)
        return value

    @staticmethod
    def next_sibling(element: Tag) -> Tag | None:
        """Next sibling *element*, skipping text nodes and comments."""
        return element.find_next_sibling()

    @staticmethod
    def tag_name(element: Tag) -> str:
        return element.name.lower()
