"""Exception classes for Tabler.

Provides standardized exceptions for error handling throughout Tabler.

Exceptions raised by column formatters, header formatters or attribute
hooks are never wrapped: they propagate out of ``Table.render()`` unchanged.
"""

from __future__ import annotations

from typing import Any


class TablerError(Exception):
    """Base exception for all Tabler errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(TablerError):
    """Error in plugin registration.

    Raised when a plugin class lacks a ``plugin_name`` or when a name is
    registered twice without ``replace=True``. Nothing is registered when
    this is raised.
    """

    def __init__(self, plugin: Any, message: str) -> None:
        """Initialize configuration error.

        Args:
            plugin: The offending plugin class
            message: Description of the problem
        """
        self.plugin = plugin
        label = getattr(plugin, "__name__", None) or repr(plugin)
        super().__init__(f"Plugin {label}: {message}")


class TableDestroyedError(TablerError):
    """Operation attempted on a table after ``destroy()``."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}() a destroyed table")
