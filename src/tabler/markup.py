"""Tag building and column attributes.

make_tag is the one primitive every section goes through. Attribute values
are escaped here; element text is inserted as given.

Example:
    >>> make_tag("td", "Ann", {"width": 120, "class": None})
    '<td width="120">Ann</td>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tabler.spec import ColumnSpec
from tabler.stringbuilder import StringBuilder
from tabler.utils.text import escape_html


def make_tag(tag: str, text: str, attrs: Mapping[str, Any] | None = None) -> str:
    """Build ``<tag attrs>text</tag>``.

    Attributes are emitted in mapping order. Falsy values (None, "", 0,
    False) drop the attribute entirely.

    Args:
        tag: Element name ("td", "th", "tr", ...)
        text: Inner markup, inserted verbatim
        attrs: Attribute name to value

    Returns:
        The element as an HTML string
    """
    sb = StringBuilder()
    sb.append("<").append(tag)
    if attrs:
        for attr, value in attrs.items():
            if value:
                sb.append(f' {attr}="{escape_html(value)}"')
    sb.append(">").append(text).append(f"</{tag}>")
    return sb.build()


def make_column_attrs(col: ColumnSpec) -> dict[str, Any]:
    """Standard attributes shared by a column's header and body cells.

    May contain falsy entries; make_tag drops them.
    """
    return {
        "width": col.width,
        "class": col.class_name,
    }


__all__ = ["make_column_attrs", "make_tag"]
