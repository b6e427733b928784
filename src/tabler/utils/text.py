"""Text helpers for building table markup.

Example:
    >>> from tabler.utils.text import escape_html, to_text
    >>> escape_html('say "hi"')
    'say &quot;hi&quot;'
    >>> to_text(None)
    ''
"""

from __future__ import annotations

import html as html_module
from typing import Any


def escape_html(text: Any) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Non-string values (widths given as ints, for instance) are converted
    with ``str()`` first.

    Args:
        text: Value to escape

    Returns:
        HTML-escaped text safe for use in attribute values

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        "&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;"
        >>> escape_html(120)
        '120'
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def to_text(value: Any) -> str:
    """Convert a display value to cell text.

    ``None`` renders as an empty cell and booleans as "true"/"false";
    everything else goes through ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
