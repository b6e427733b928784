"""The table engine.

Table owns a spec, a dataset, a mounted <table> handle, its plugins and an
event emitter. Rendering is synchronous and all-or-nothing: every section is
built before the mounted content changes, so an exception from a formatter
leaves the previous content in place.

Example:
    >>> table = create([{"field": "id"}, {"field": "name", "default_text": "(none)"}])
    >>> table.load([{"id": 1, "name": "Ann"}, {"id": 2}])
    >>> table.render()
    >>> [td.get_text() for td in table.find("td")]
    ['1', 'Ann', '2', '(none)']

Extension Points:
``make_column_attrs``, ``format_value`` and ``render_head/body/foot`` are
plain methods. Subclass Table, or assign a replacement on an instance
(typically from a plugin's ``attach``) to change them for one table.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from tabler.config import RenderConfig, get_render_config
from tabler.errors import ConfigurationError, TableDestroyedError
from tabler.events import EventEmitter, Handler
from tabler.formatting import format_value
from tabler.markup import make_column_attrs
from tabler.mount import MountedTable
from tabler.plugins import TablerPlugin, plugin_name_of
from tabler.renderers import sections
from tabler.spec import ColumnSpec, Row, Spec, coerce_spec, infer_spec
from tabler.utils.logger import get_logger

logger = get_logger(__name__)

PluginEntry = type | tuple[type, Mapping[str, Any] | None]


class Table:
    """Declarative HTML table.

    Attributes:
        spec: Full column spec (disabled columns included), or None until
            one is given or inferred
        data: Last loaded dataset, or None
        root: The mounted table handle
        events: Event emitter backing ``on/off/emit``
        config: Render configuration captured at construction

    """

    def __init__(
        self,
        spec: Iterable[ColumnSpec | Mapping[str, Any]] | None = None,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        self.spec: Spec | None = coerce_spec(spec) if spec is not None else None
        self.data: list[Row] | None = None
        self.config = config or get_render_config()
        self.root = MountedTable(dict(self.config.table_attrs))
        self.events = EventEmitter()
        self._plugins: dict[str, TablerPlugin] = {}
        self._destroyed = False

    # ------------------------------------------------------------------
    # Plugins
    # ------------------------------------------------------------------

    def add_plugin(
        self,
        plugin_cls: type,
        options: Mapping[str, Any] | None = None,
        *,
        replace: bool = False,
    ) -> TablerPlugin:
        """Instantiate a plugin and attach it to this table.

        Args:
            plugin_cls: Plugin class with a ``plugin_name``
            options: Keyword arguments for the plugin's constructor
            replace: Allow replacing a plugin registered under the same name.
                The old instance's ``detach(table)`` runs first, if it has one.

        The instance is stored only after ``attach`` returns.

        Returns:
            The attached plugin instance

        Raises:
            ConfigurationError: If ``plugin_name`` is missing, or the name is
                taken and ``replace`` is False
        """
        self._check_alive("add_plugin")

        name = plugin_name_of(plugin_cls)
        if name is None:
            raise ConfigurationError(plugin_cls, "must have a plugin_name attribute")

        previous = self._plugins.get(name)
        if previous is not None and not replace:
            raise ConfigurationError(
                plugin_cls, f"plugin_name {name!r} is already registered"
            )

        plugin = plugin_cls(**(options or {}))

        if previous is not None:
            detach = getattr(previous, "detach", None)
            if callable(detach):
                detach(self)
            # A detached plugin is gone even if the new attach() fails
            del self._plugins[name]
            logger.debug("Replacing plugin %r", name)

        plugin.attach(self)
        self._plugins[name] = plugin
        logger.debug("Attached plugin %r (%s)", name, type(plugin).__name__)
        return plugin

    def get_plugin(self, name: str) -> TablerPlugin | None:
        """Return the plugin registered as ``name``, or None."""
        return self._plugins.get(name)

    @property
    def plugins(self) -> Mapping[str, TablerPlugin]:
        """Read-only view of attached plugins by name."""
        return MappingProxyType(self._plugins)

    # ------------------------------------------------------------------
    # Data and spec
    # ------------------------------------------------------------------

    def load(self, data: Iterable[Row]) -> None:
        """Store a shallow copy of ``data``. Does not render.

        Later changes to the caller's list are not seen; changes to the row
        objects themselves are.
        """
        self._check_alive("load")
        self.data = list(data)

    def get_field(self, name: str) -> ColumnSpec | None:
        """First column whose ``field`` is ``name``, disabled or not.

        Returns None when there is no such column (or no spec yet).
        """
        for col in self.spec or ():
            if col.field == name:
                return col
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def make_column_attrs(self, col: ColumnSpec) -> Mapping[str, Any]:
        """Attributes for a column's <th> and <td> cells."""
        return make_column_attrs(col)

    def format_value(self, row: Row, col: ColumnSpec) -> Any:
        """Display value of one cell."""
        return format_value(row, col)

    def render_head(self, data: Sequence[Row], spec: Sequence[ColumnSpec]) -> str:
        """Rows for <thead>.

        data: the data being rendered (possibly a subset of ``self.data``)
        spec: the active columns
        """
        return sections.render_head(
            data, spec, column_attrs=self.make_column_attrs, config=self.config
        )

    def render_body(self, data: Sequence[Row], spec: Sequence[ColumnSpec]) -> str:
        """Rows for <tbody>."""
        return sections.render_body(
            data,
            spec,
            column_attrs=self.make_column_attrs,
            value_formatter=self.format_value,
            config=self.config,
        )

    def render_foot(self, data: Sequence[Row], spec: Sequence[ColumnSpec]) -> str:
        """Rows for <tfoot>. Empty unless overridden."""
        return sections.render_foot(data, spec, config=self.config)

    def render(self, data: Iterable[Row] | None = None) -> None:
        """Render ``data`` (or the loaded data) into the mounted table.

        Infers and caches a spec on first use when none was given. Disabled
        columns are skipped. Sections that come out empty are left out
        rather than rendered as empty wrappers.

        Does not emit events.
        """
        self._check_alive("render")

        if data is not None:
            rows: Sequence[Row] = data if isinstance(data, Sequence) else list(data)
        elif self.data is not None:
            rows = self.data
        else:
            rows = []

        if self.spec is None and (data is not None or self.data is not None):
            self.spec = infer_spec(rows)
            logger.debug("Inferred spec with %d columns", len(self.spec))

        active = [col for col in self.spec or () if not col.disabled]

        head = self.render_head(rows, active)
        body = self.render_body(rows, active)
        foot = self.render_foot(rows, active)

        fragments = []
        if head:
            fragments.append(f"<thead>{head}</thead>")
        if body:
            fragments.append(f"<tbody>{body}</tbody>")
        if foot:
            fragments.append(f"<tfoot>{foot}</tfoot>")

        self.root.replace(fragments)
        logger.debug(
            "Rendered %d rows x %d columns (%d sections)",
            len(rows),
            len(active),
            len(fragments),
        )

    def find(self, selector: str) -> list[Any]:
        """Query the mounted table with a CSS selector."""
        return self.root.find(selector)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on(self, event: str, handler: Handler) -> None:
        self.events.on(event, handler)

    def off(self, event: str | None = None, handler: Handler | None = None) -> None:
        self.events.off(event, handler)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        self.events.emit(event, *args, **kwargs)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def destroy(self) -> None:
        """Tear down the table.

        Emits "destroy" with the table as argument so plugins can release
        their own resources, then empties the mounted table and drops every
        subscription. The table cannot be used afterwards.
        """
        self._check_alive("destroy")
        self.emit("destroy", self)
        self.root.empty()
        self.events.off()
        self._destroyed = True
        logger.debug("Destroyed table with plugins %s", sorted(self._plugins))

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _check_alive(self, operation: str) -> None:
        if self._destroyed:
            raise TableDestroyedError(operation)

    def __repr__(self) -> str:
        columns = len(self.spec) if self.spec is not None else None
        rows = len(self.data) if self.data is not None else None
        return f"Table(columns={columns}, rows={rows}, plugins={sorted(self._plugins)})"


def create(
    spec: Iterable[ColumnSpec | Mapping[str, Any]] | None = None,
    *,
    plugins: Iterable[PluginEntry] = (),
    config: RenderConfig | None = None,
) -> Table:
    """Create a table and register ``plugins`` in order.

    Args:
        spec: Column specs (ColumnSpec or dict). None infers one from the
            first rendered data.
        plugins: Plugin classes, or ``(plugin_class, options)`` pairs
        config: Render configuration (defaults to the context's)

    Returns:
        The new Table

    Example:
        >>> table = create(plugins=[Sorter, (Pager, {"per_page": 20})])
    """
    table = Table(spec, config=config)
    for entry in plugins:
        if isinstance(entry, tuple):
            plugin_cls, options = entry
            table.add_plugin(plugin_cls, options)
        else:
            table.add_plugin(entry)
    return table


__all__ = ["Table", "create"]
