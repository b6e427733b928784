"""
Tabler — declarative HTML tables from column specs and row data.

Give it a column spec and rows; it renders a <table> with thead/tbody/tfoot
sections. Plugins attach to a table at runtime and talk to it through events.

Quick Start:
    >>> from tabler import create
    >>> table = create([
    ...     {"field": "id", "name": "#"},
    ...     {"field": "name", "name": "Name", "default_text": "(none)"},
    ... ])
    >>> table.load([{"id": 1, "name": "Ann"}, {"id": 2}])
    >>> table.render()
    >>> print(table.root)
    <table><thead><tr><th>#</th>
    <th>Name</th></tr></thead><tbody><tr>
    <td>1</td>
    <td>Ann</td>
    </tr>
    <tr>
    <td>2</td>
    <td>(none)</td>
    </tr></tbody></table>

    >>> # Without a spec, one column per field is inferred
    >>> table = create()
    >>> table.render([{"a": 1, "b": 2}])

Plugins:
    >>> class Highlight:
    ...     plugin_name = "highlight"
    ...     def attach(self, table):
    ...         table.make_column_attrs = lambda col: {"class": "hl"}
    >>> table = create(spec, plugins=[Highlight])

Installation:
    pip install tabler
"""

from tabler.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tabler.errors import ConfigurationError, TableDestroyedError, TablerError
from tabler.events import EventEmitter
from tabler.formatting import format_value, is_empty
from tabler.markup import make_column_attrs, make_tag
from tabler.mount import MountedTable
from tabler.plugins import TablerPlugin
from tabler.renderers import render_body, render_foot, render_head
from tabler.spec import ColumnSpec, Dataset, Row, Spec, coerce_spec, infer_spec
from tabler.table import Table, create

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "create",
    "Table",
    "MountedTable",
    # Column specs
    "ColumnSpec",
    "Dataset",
    "Row",
    "Spec",
    "coerce_spec",
    "infer_spec",
    # Cells and markup
    "format_value",
    "is_empty",
    "make_column_attrs",
    "make_tag",
    # Sections
    "render_head",
    "render_body",
    "render_foot",
    # Extensibility
    "EventEmitter",
    "TablerPlugin",
    # Errors
    "TablerError",
    "ConfigurationError",
    "TableDestroyedError",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
