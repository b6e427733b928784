"""Tests for the Table engine lifecycle and rendering."""

import pytest

from tabler import ColumnSpec, RenderConfig, Table, create
from tabler.errors import TableDestroyedError


def cell_texts(table: Table, selector: str = "td") -> list[str]:
    return [tag.get_text() for tag in table.find(selector)]


class TestCreate:
    """Construction."""

    def test_no_spec(self) -> None:
        table = create()
        assert table.spec is None
        assert table.data is None
        assert table.root.is_empty

    def test_dict_spec_coerced(self) -> None:
        table = create([{"field": "id", "name": "#"}])
        assert isinstance(table.spec[0], ColumnSpec)
        assert table.spec[0].name == "#"

    def test_misspelled_column_option_raises(self) -> None:
        with pytest.raises(TypeError, match="default_text"):
            create([{"field": "name", "defaultText": "(none)"}])

    def test_table_class_directly(self) -> None:
        table = Table([ColumnSpec(field="id")])
        assert table.get_field("id") is table.spec[0]


class TestRenderScenario:
    """End-to-end rendering."""

    def test_default_text_row(self) -> None:
        table = create([{"field": "id"}, {"field": "name", "default_text": "(none)"}])
        table.load([{"id": 1, "name": "Ann"}, {"id": 2}])
        table.render()

        rows = table.find("tbody tr")
        assert len(rows) == 2
        assert [td.get_text() for td in rows[1].find_all("td")] == ["2", "(none)"]

    def test_full_markup(self) -> None:
        table = create(
            [
                {"field": "id", "name": "#"},
                {"field": "name", "name": "Name", "default_text": "(none)"},
            ]
        )
        table.load([{"id": 1, "name": "Ann"}, {"id": 2}])
        table.render()

        assert table.root.html == (
            "<table><thead><tr><th>#</th>\n<th>Name</th></tr></thead>"
            "<tbody><tr>\n<td>1</td>\n<td>Ann</td>\n</tr>\n"
            "<tr>\n<td>2</td>\n<td>(none)</td>\n</tr></tbody></table>"
        )
        assert str(table.root) == table.root.html

    def test_render_returns_none(self) -> None:
        table = create([{"field": "id"}])
        assert table.render([{"id": 1}]) is None

    def test_header_omitted_without_labels(self) -> None:
        table = create([{"field": "id"}])
        table.render([{"id": 1}])
        assert "<thead>" not in table.root.html
        assert table.find("thead") == []

    def test_empty_data_omits_body(self) -> None:
        table = create([{"field": "id", "name": "#"}])
        table.render([])
        assert table.root.inner_html == "<thead><tr><th>#</th></tr></thead>"

    def test_nothing_to_render(self) -> None:
        table = create()
        table.render()
        assert table.root.inner_html == ""
        assert table.spec is None

    def test_table_attrs_from_config(self) -> None:
        config = RenderConfig(table_attrs=(("class", "grid"),))
        table = create([{"field": "id"}], config=config)
        table.render([{"id": 1}])
        assert table.root.html.startswith('<table class="grid"><tbody>')


class TestSpecInference:
    """Spec inferred on first render and then cached."""

    def test_inferred_from_loaded_data(self) -> None:
        table = create()
        table.load([{"a": 1}, {"b": 2}])
        table.render()
        assert {col.field for col in table.spec} == {"a", "b"}

    def test_inferred_from_render_argument(self) -> None:
        table = create()
        table.render([{"x": 1}])
        assert [col.field for col in table.spec] == ["x"]

    def test_inferred_once(self) -> None:
        table = create()
        table.render([{"a": 1}])
        spec = table.spec

        table.render([{"a": 2, "b": 3}])

        assert table.spec is spec
        assert {col.field for col in table.spec} == {"a"}
        assert cell_texts(table) == ["2"]

    def test_explicit_spec_not_replaced(self) -> None:
        table = create([{"field": "a"}])
        table.render([{"a": 1, "b": 2}])
        assert [col.field for col in table.spec] == ["a"]

    def test_spec_can_be_replaced(self) -> None:
        table = create([{"field": "a"}])
        table.load([{"a": 1, "b": 2}])
        table.spec = [ColumnSpec(field="b")]
        table.render()
        assert cell_texts(table) == ["2"]


class TestDisabledColumns:
    """Disabled columns are skipped but still addressable."""

    def test_excluded_from_output(self) -> None:
        table = create(
            [
                {"field": "id", "name": "#"},
                {"field": "secret", "name": "Secret", "disabled": True},
            ]
        )
        table.render([{"id": 1, "secret": "s3cr3t"}])

        assert cell_texts(table, "th") == ["#"]
        assert cell_texts(table) == ["1"]
        assert "s3cr3t" not in table.root.html

    def test_still_returned_by_get_field(self) -> None:
        table = create([{"field": "secret", "disabled": True}])
        table.render([{"secret": 1}])
        col = table.get_field("secret")
        assert col is not None
        assert col.disabled is True

    def test_toggle_and_rerender(self) -> None:
        table = create([{"field": "a"}, {"field": "b"}])
        table.load([{"a": 1, "b": 2}])
        table.get_field("b").disabled = True
        table.render()
        assert cell_texts(table) == ["1"]

        table.get_field("b").disabled = False
        table.render()
        assert cell_texts(table) == ["1", "2"]

    def test_disabled_label_does_not_force_header(self) -> None:
        table = create([{"field": "a"}, {"field": "b", "name": "B", "disabled": True}])
        table.render([{"a": 1, "b": 2}])
        assert table.find("thead") == []


class TestGetField:
    """Lookup by field name."""

    def test_first_match_wins(self) -> None:
        table = create([{"field": "a", "name": "first"}, {"field": "a", "name": "second"}])
        assert table.get_field("a").name == "first"

    def test_unknown_returns_none(self) -> None:
        assert create([{"field": "a"}]).get_field("zzz") is None

    def test_no_spec_returns_none(self) -> None:
        assert create().get_field("a") is None


class TestLoad:
    """Data loading semantics."""

    def test_load_does_not_render(self) -> None:
        table = create([{"field": "a"}])
        table.load([{"a": 1}])
        assert table.root.is_empty

    def test_load_replaces_data(self) -> None:
        table = create([{"field": "a"}])
        table.load([{"a": 1}])
        table.load([{"a": 2}])
        table.render()
        assert cell_texts(table) == ["2"]

    def test_caller_list_changes_not_seen(self) -> None:
        rows = [{"a": 1}]
        table = create([{"field": "a"}])
        table.load(rows)
        rows.append({"a": 2})
        rows[0] = {"a": 99}

        table.render()

        assert cell_texts(table) == ["1"]

    def test_row_object_changes_are_seen(self) -> None:
        row = {"a": 1}
        table = create([{"field": "a"}])
        table.load([row])
        row["a"] = 5
        table.render()
        assert cell_texts(table) == ["5"]

    def test_load_accepts_any_iterable(self) -> None:
        table = create([{"field": "a"}])
        table.load({"a": i} for i in range(3))
        table.render()
        assert cell_texts(table) == ["0", "1", "2"]

    def test_transient_render_keeps_stored_data(self) -> None:
        table = create([{"field": "a"}])
        table.load([{"a": 1}])
        table.render([{"a": 2}])
        assert cell_texts(table) == ["2"]
        assert table.data == [{"a": 1}]

        table.render()
        assert cell_texts(table) == ["1"]


class TestRenderAtomicity:
    """Renders are deterministic and all-or-nothing."""

    def test_rerender_is_identical(self) -> None:
        table = create(
            [
                {"field": "id", "name": "#", "width": 30},
                {"field": "v", "formatter": lambda v, col, row: f"<i>{v}</i>"},
            ]
        )
        table.load([{"id": 1, "v": "x"}, {"id": 2, "v": None}])
        table.render()
        first = table.root.html
        table.render()
        assert table.root.html == first

    def test_formatter_error_keeps_previous_content(self) -> None:
        calls = {"fail": False}

        def flaky(value, col, row):
            if calls["fail"]:
                raise ValueError("formatter broke")
            return value

        table = create([{"field": "a", "formatter": flaky}])
        table.load([{"a": 1}])
        table.render()
        before = table.root.html

        calls["fail"] = True
        with pytest.raises(ValueError, match="formatter broke"):
            table.render()

        assert table.root.html == before

    def test_render_foot_error_keeps_previous_content(self) -> None:
        table = create([{"field": "a"}])
        table.render([{"a": 1}])
        before = table.root.html

        def broken_foot(data, spec):
            raise RuntimeError("foot")

        table.render_foot = broken_foot
        with pytest.raises(RuntimeError):
            table.render([{"a": 2}])
        assert table.root.html == before


class TestOverrides:
    """Per-instance and subclass overrides of the render hooks."""

    def test_render_foot_on_subclass(self) -> None:
        class TotalTable(Table):
            def render_foot(self, data, spec):
                total = sum(row["n"] for row in data)
                return f"<tr><td>{total}</td></tr>"

        table = TotalTable([{"field": "n"}])
        table.render([{"n": 2}, {"n": 3}])

        assert cell_texts(table, "tfoot td") == ["5"]
        assert table.root.inner_html.endswith("<tfoot><tr><td>5</td></tr></tfoot>")

    def test_make_column_attrs_on_instance(self) -> None:
        table = create([{"field": "a", "name": "A"}])
        table.make_column_attrs = lambda col: {"data-field": col.field}
        table.render([{"a": 1}])
        assert [tag["data-field"] for tag in table.find("th, td")] == ["a", "a"]

    def test_format_value_on_subclass(self) -> None:
        class Upper(Table):
            def format_value(self, row, col):
                return str(super().format_value(row, col)).upper()

        table = Upper([{"field": "a"}])
        table.render([{"a": "x"}])
        assert cell_texts(table) == ["X"]


class TestDestroy:
    """Teardown."""

    def test_clears_content_and_events(self) -> None:
        table = create([{"field": "a"}])
        table.on("custom", lambda: None)
        table.render([{"a": 1}])

        table.destroy()

        assert table.root.is_empty
        assert len(table.events) == 0
        assert table.destroyed is True

    def test_emits_destroy_first(self) -> None:
        table = create([{"field": "a"}])
        table.render([{"a": 1}])
        seen: list[tuple] = []
        table.on("destroy", lambda t: seen.append((t, t.root.is_empty)))

        table.destroy()

        assert seen == [(table, False)]

    @pytest.mark.parametrize(
        ("operation", "args"),
        [("render", ()), ("load", ([],)), ("destroy", ()), ("add_plugin", (object,))],
    )
    def test_operations_after_destroy_raise(self, operation: str, args: tuple) -> None:
        table = create([{"field": "a"}])
        table.destroy()
        with pytest.raises(TableDestroyedError, match=operation):
            getattr(table, operation)(*args)


class TestEventsSurface:
    """on/off/emit delegate to the table's emitter."""

    def test_on_emit_off(self) -> None:
        table = create()
        seen: list[int] = []
        handler = seen.append

        table.on("page", handler)
        table.emit("page", 2)
        table.off("page", handler)
        table.emit("page", 3)

        assert seen == [2]

    def test_off_handler_everywhere(self) -> None:
        table = create()
        seen: list[int] = []
        table.on("page", seen.append)
        table.on("sort", seen.append)

        table.off(handler=seen.append)
        table.emit("page", 1)
        table.emit("sort", 2)

        assert seen == []

    def test_render_emits_nothing(self) -> None:
        table = create([{"field": "a"}])
        seen: list[str] = []
        table.on("render", lambda *a: seen.append("render"))
        table.render([{"a": 1}])
        assert seen == []

    def test_repr(self) -> None:
        table = create([{"field": "a"}])
        table.load([{"a": 1}, {"a": 2}])
        assert repr(table) == "Table(columns=1, rows=2, plugins=[])"
