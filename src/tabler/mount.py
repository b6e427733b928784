"""The mounted table handle.

MountedTable stands for the single <table> element a Table owns. Its content
is replaced wholesale on every render; nothing else in the hosting document
is assumed.

Example:
    >>> root = MountedTable()
    >>> root.replace(["<tbody><tr><td>1</td></tr></tbody>"])
    >>> root.html
    '<table><tbody><tr><td>1</td></tr></tbody></table>'
    >>> [td.get_text() for td in root.find("td")]
    ['1']
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from bs4 import BeautifulSoup, Tag

from tabler.markup import make_tag


class MountedTable:
    """Root table node whose inner HTML the engine owns."""

    __slots__ = ("_attrs", "_content")

    def __init__(self, attrs: Mapping[str, Any] | None = None) -> None:
        self._attrs = dict(attrs or {})
        self._content = ""

    @property
    def inner_html(self) -> str:
        """Current section markup without the <table> wrapper."""
        return self._content

    @property
    def html(self) -> str:
        """The whole element."""
        return make_tag("table", self._content, self._attrs)

    @property
    def is_empty(self) -> bool:
        return not self._content

    def replace(self, fragments: Iterable[str]) -> None:
        """Swap the content for ``fragments``, concatenated in order."""
        self._content = "".join(fragments)

    def empty(self) -> None:
        self._content = ""

    def find(self, selector: str) -> list[Tag]:
        """Query the mounted table with a CSS selector.

        Matches are parsed copies: editing them does not change the table.
        """
        soup = BeautifulSoup(self.html, "html.parser")
        return soup.select(selector)

    def __str__(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return f"MountedTable({self._content!r})"
