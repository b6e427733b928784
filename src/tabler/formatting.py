"""Per-cell value resolution.

Example:
    >>> col = ColumnSpec(field="name", default_text="(none)")
    >>> format_value({"id": 2}, col)
    '(none)'
    >>> col.formatter = lambda value, col, row: value.upper()
    >>> format_value({"name": ""}, col)
    '(NONE)'
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

from tabler.spec import ColumnSpec, Row


def is_empty(value: Any) -> bool:
    """Whether a cell value should be replaced by the column's default text.

    None, the empty string and NaN are empty. NaN is recognized on any
    registered numeric type (float, Decimal, complex, numpy scalars) by
    not equalling itself. The string ``"nan"`` is a value like any other.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Number):
        return bool(value != value)
    return False


def format_value(row: Row, col: ColumnSpec) -> Any:
    """Resolve the display value of one cell.

    Steps:
    1. Read ``row[col.field]`` (missing key reads as None).
    2. Empty values are replaced by ``col.default_text`` when it is set.
       One pass only: an empty default is not substituted again.
    3. With a ``col.formatter``, return ``formatter(value, col, row)``
       verbatim. The formatter sees the substituted value.

    Args:
        row: Source row, never mutated
        col: Column being rendered

    Returns:
        The display value, not yet converted to text
    """
    value = row.get(col.field) if col.field is not None else None

    if is_empty(value) and col.default_text is not None:
        value = col.default_text

    formatter = col.formatter
    if formatter is None:
        return value

    return formatter(value, col, row)


__all__ = ["format_value", "is_empty"]
