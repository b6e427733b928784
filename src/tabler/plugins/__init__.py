"""Plugin protocol for Tabler tables.

A plugin is a class with a ``plugin_name`` class attribute and an
``attach(table)`` method. That is the whole contract between the core and a
plugin: there are no render or destroy hooks beyond the table's events.

Usage:
    >>> class RowCount:
    ...     plugin_name = "row_count"
    ...
    ...     def __init__(self, label="Rows"):
    ...         self.label = label
    ...
    ...     def attach(self, table):
    ...         self.table = table
    ...         table.on("destroy", self.detach)
    ...
    ...     def detach(self, table=None):
    ...         self.table = None
    >>>
    >>> table = create(spec, plugins=[(RowCount, {"label": "Total"})])
    >>> table.get_plugin("row_count").label
    'Total'

Plugin Lifecycle:
1. ``add_plugin`` checks ``plugin_name``
2. The class is instantiated with the options as keyword arguments
3. ``attach(table)`` runs synchronously, in registration order, so a plugin
   can see whatever earlier plugins set up
4. The instance is stored under its name

An optional ``detach(table)`` is called only when a plugin is replaced with
``add_plugin(..., replace=True)``. Plugins holding resources should also
listen for the table's "destroy" event.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tabler.table import Table

__all__ = [
    "TablerPlugin",
    "plugin_name_of",
]


@runtime_checkable
class TablerPlugin(Protocol):
    """Protocol for Tabler plugins."""

    plugin_name: ClassVar[str]

    def attach(self, table: Table) -> None:
        """Hook into ``table``: subscribe to events, wrap or replace hooks."""
        ...


def plugin_name_of(plugin_cls: Any) -> str | None:
    """Return the plugin's registration name, or None when it has none.

    Empty and non-string names count as missing.
    """
    name = getattr(plugin_cls, "plugin_name", None)
    if not isinstance(name, str) or not name:
        return None
    return name
