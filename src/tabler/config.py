"""ContextVar-based render configuration for Tabler.

A Table captures its RenderConfig once at construction: either the one
passed explicitly or whatever is active in the current context.

Usage:
    # Explicit
    table = create(spec, config=RenderConfig(escape_cell_text=True))

    # Or scoped, for every table created inside the block
    with render_config_context(RenderConfig(row_separator="")):
        table = create(spec)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        row_separator: Joins body rows
        cell_separator: Joins the cells (and row tags) within one row
        escape_cell_text: HTML-escape cell and header text. Off by default:
            formatter output is trusted markup.
        table_attrs: Attributes placed on the mounted <table> element

    """

    row_separator: str = "\n"
    cell_separator: str = "\n"
    escape_cell_text: bool = False
    table_attrs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. ``table_attrs`` may be given as a mapping.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "escape_cell_text": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escape_cell_text
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        attrs = filtered.get("table_attrs")
        if isinstance(attrs, dict):
            filtered["table_attrs"] = tuple(attrs.items())
        elif attrs is not None:
            filtered["table_attrs"] = tuple(tuple(pair) for pair in attrs)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(escape_cell_text=True)):
        ...     table = create(spec)
        >>> # table keeps the config it captured

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
