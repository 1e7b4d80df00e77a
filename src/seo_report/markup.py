# src/seo_report/markup.py
"""Markup parser adapter.

The analyzers only ever talk to ``AbstractMarkup``: select elements by tag and
attribute, read their text or attributes. ``SoupMarkup`` implements it on top
of BeautifulSoup so nothing else in the package imports bs4 directly.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class AbstractMarkup(ABC):
    """Queryable view over a parsed HTML document."""

    @property
    @abstractmethod
    def raw_length(self) -> int:
        """Character length of the raw HTML."""
        pass

    @property
    @abstractmethod
    def head(self) -> Optional[Any]:
        """The <head> element, or None when the document has none."""
        pass

    @abstractmethod
    def select(
        self, tag: str, attrs: Optional[dict[str, str]] = None, within: Optional[Any] = None
    ) -> list[Any]:
        """Return every element with the given tag and attribute values, in document order.

        Args:
            tag: Element name, e.g. "meta"
            attrs: Attribute values that must all match exactly
            within: Element to search under (defaults to the whole document)
        """
        pass

    @abstractmethod
    def text(self, element: Any) -> str:
        """Concatenated text content of an element."""
        pass

    @abstractmethod
    def attr(self, element: Any, name: str) -> str:
        """Attribute value of an element, or "" when absent."""
        pass

    @abstractmethod
    def body_text(self) -> str:
        """Text content under <body> (whole document when there is no body)."""
        pass

    def first(self, tag: str, attrs: Optional[dict[str, str]] = None) -> Optional[Any]:
        """First matching element in document order, or None."""
        matches = self.select(tag, attrs)
        return matches[0] if matches else None

    def count(
        self, tag: str, attrs: Optional[dict[str, str]] = None, within: Optional[Any] = None
    ) -> int:
        return len(self.select(tag, attrs, within))

    def exists(
        self, tag: str, attrs: Optional[dict[str, str]] = None, within: Optional[Any] = None
    ) -> bool:
        return self.count(tag, attrs, within) > 0


class SoupMarkup(AbstractMarkup):
    """BeautifulSoup-backed markup document.

    Uses the built-in ``html.parser`` which tolerates malformed markup.
    """

    def __init__(self, html: str, parser: str = "html.parser"):
        self._html = html or ""
        self.soup = BeautifulSoup(self._html, parser)

    @property
    def raw_length(self) -> int:
        return len(self._html)

    @property
    def head(self) -> Optional[Tag]:
        return self.soup.find("head")

    def select(
        self, tag: str, attrs: Optional[dict[str, str]] = None, within: Optional[Tag] = None
    ) -> list[Tag]:
        scope = within if within is not None else self.soup
        return scope.find_all(tag, attrs=attrs or {})

    def text(self, element: Tag) -> str:
        return element.get_text()

    def attr(self, element: Tag, name: str) -> str:
        value = element.get(name)
        if value is None:
            return ""
        # Multi-valued attributes (rel, class) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def body_text(self) -> str:
        body = self.soup.find("body")
        if body is None:
            return self.soup.get_text()
        return body.get_text()
