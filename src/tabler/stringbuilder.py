"""StringBuilder for assembling table markup.

Appends to a list and joins once at the end, optionally with a separator,
which is how rows and cells are laid out one per line.

Thread Safety:
StringBuilder instances are local to each section render.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("<tr>").append("<td>1</td>").append("</tr>")
            >>> sb.build("\\n")
            '<tr>\\n<td>1</td>\\n</tr>'

    Empty strings are kept: an empty cell still needs its place when the
    parts are joined with a separator.
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Returns:
            self for method chaining
        """
        self._parts.append(s)
        return self

    def build(self, separator: str = "") -> str:
        """Join all parts into the final string."""
        return separator.join(self._parts)
