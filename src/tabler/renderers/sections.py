"""Header, body and footer section rendering.

Each function takes ``(data, spec)`` where ``spec`` is already filtered down
to the active columns, and returns the inner markup of its section (rows
only, no ``<thead>``/``<tbody>``/``<tfoot>`` wrapper). An empty string means
the section has nothing to show and the table leaves it out.

The per-column hooks are injectable so ``Table`` can route them through its
own (overridable) methods.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from tabler.config import RenderConfig, get_render_config
from tabler.formatting import format_value
from tabler.markup import make_column_attrs, make_tag
from tabler.spec import ColumnSpec, Row
from tabler.stringbuilder import StringBuilder
from tabler.utils.text import escape_html, to_text

AttrsHook = Callable[[ColumnSpec], Mapping[str, Any]]
ValueHook = Callable[[Row, ColumnSpec], Any]


def _text(value: Any, config: RenderConfig) -> str:
    text = to_text(value)
    if config.escape_cell_text:
        return escape_html(text)
    return text


def render_head(
    data: Iterable[Row],
    spec: Sequence[ColumnSpec],
    *,
    column_attrs: AttrsHook = make_column_attrs,
    config: RenderConfig | None = None,
) -> str:
    """Render the header row.

    Emitted only when at least one column has a ``name`` or a
    ``header_formatter``; otherwise returns "". Columns without either get
    an empty ``<th>``.
    """
    if not any(col.name or col.header_formatter for col in spec):
        return ""

    config = config or get_render_config()
    sb = StringBuilder()
    for col in spec:
        label = col.header_formatter(col) if col.header_formatter else col.name
        sb.append(make_tag("th", _text(label, config), column_attrs(col)))

    return f"<tr>{sb.build(config.cell_separator)}</tr>"


def render_body(
    data: Iterable[Row],
    spec: Sequence[ColumnSpec],
    *,
    column_attrs: AttrsHook = make_column_attrs,
    value_formatter: ValueHook = format_value,
    config: RenderConfig | None = None,
) -> str:
    """Render one ``<tr>`` per row with one ``<td>`` per column.

    Returns "" for an empty dataset.
    """
    config = config or get_render_config()
    rows = StringBuilder()
    for row in data:
        cells = StringBuilder()
        cells.append("<tr>")
        for col in spec:
            value = value_formatter(row, col)
            cells.append(make_tag("td", _text(value, config), column_attrs(col)))
        cells.append("</tr>")
        rows.append(cells.build(config.cell_separator))

    return rows.build(config.row_separator)


def render_foot(
    data: Iterable[Row],
    spec: Sequence[ColumnSpec],
    *,
    config: RenderConfig | None = None,
) -> str:
    """Render footer rows. There are none by default.

    Override ``Table.render_foot`` to add summary rows computed from ``data``.
    """
    return ""


__all__ = ["render_body", "render_foot", "render_head"]
