"""Column specifications and spec inference.

A Spec is an ordered list of ColumnSpec. Tables take one explicitly or infer
one from the first dataset they render.

Example:
    >>> spec = coerce_spec([{"field": "id"}, {"field": "name", "name": "Name"}])
    >>> spec[1].name
    'Name'
    >>> sorted(col.field for col in infer_spec([{"a": 1}, {"b": 2, "a": 3}]))
    ['a', 'b']

Inferred column order is unspecified. Only the set of fields is guaranteed.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
Dataset = Sequence[Row]


@dataclass(slots=True, eq=False)
class ColumnSpec:
    """Declarative description of one table column.

    Mutable on purpose: plugins toggle ``disabled`` or rewrite ``name`` on the
    live spec and re-render.

    Attributes:
        field: Row key to read
        name: Header label
        header_formatter: ``(col) -> str`` replacing the header label
        formatter: ``(value, col, row) -> display value``
        default_text: Substituted when the value is empty (None, "", NaN, missing)
        width: Rendered as the ``width`` attribute
        class_name: Rendered as the ``class`` attribute
        disabled: Excluded from rendering, still returned by ``get_field``
        extra: Plugin-owned column options

    """

    field: str | None = None
    name: str | None = None
    header_formatter: Callable[[ColumnSpec], Any] | None = None
    formatter: Callable[[Any, ColumnSpec, Row], Any] | None = None
    default_text: Any = None
    width: Any = None
    class_name: str | None = None
    disabled: bool = False
    extra: dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColumnSpec:
        """Build a ColumnSpec from a plain mapping.

        Keys matching attributes are used directly; anything else is kept in
        ``extra`` for plugins. A key that only differs from an attribute in
        case or underscores ("defaultText", "ClassName") is a typo, not a
        plugin option.

        Raises:
            TypeError: On such a misspelled attribute key

        Example:
            >>> col = ColumnSpec.from_dict({"field": "price", "sortable": True})
            >>> col.extra
            {'sortable': True}

        """
        known = {f.name for f in dataclasses.fields(cls)} - {"extra"}
        folded = {_fold(name): name for name in known}
        for key in data:
            if isinstance(key, str) and key not in known and _fold(key) in folded:
                msg = f"Unknown column option {key!r}, did you mean {folded[_fold(key)]!r}?"
                raise TypeError(msg)
        kwargs = {k: v for k, v in data.items() if k in known}
        extra = dict(data.get("extra") or {})
        extra.update((k, v) for k, v in data.items() if k not in known and k != "extra")
        return cls(**kwargs, extra=extra)


Spec = list[ColumnSpec]


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


def coerce_spec(columns: Iterable[ColumnSpec | Mapping[str, Any]]) -> Spec:
    """Normalize a column list into a Spec.

    ColumnSpec instances are kept as-is (not copied); mappings go through
    ``ColumnSpec.from_dict``.

    Raises:
        TypeError: If an entry is neither a ColumnSpec nor a mapping
    """
    spec: Spec = []
    for col in columns:
        if isinstance(col, ColumnSpec):
            spec.append(col)
        elif isinstance(col, Mapping):
            spec.append(ColumnSpec.from_dict(col))
        else:
            msg = f"Column spec entries must be ColumnSpec or mapping, got {type(col).__name__}"
            raise TypeError(msg)
    return spec


def infer_spec(data: Iterable[Row]) -> Spec:
    """Build a spec with one bare column per distinct field in ``data``.

    Args:
        data: Rows to scan

    Returns:
        One ``ColumnSpec(field=key)`` per key seen in any row; empty for
        empty data.
    """
    # dict keeps one entry per key
    keys: dict[str, None] = {}
    for row in data:
        for key in row:
            keys.setdefault(key, None)
    return [ColumnSpec(field=key) for key in keys]


__all__ = [
    "ColumnSpec",
    "Dataset",
    "Row",
    "Spec",
    "coerce_spec",
    "infer_spec",
]
