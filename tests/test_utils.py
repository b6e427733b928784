"""Tests for Tabler utility modules."""


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_special_characters(self) -> None:
        from tabler.utils.text import escape_html

        assert escape_html("<a href=\"x\">&'") == "&lt;a href=&quot;x&quot;&gt;&amp;&#x27;"

    def test_non_string(self) -> None:
        from tabler.utils.text import escape_html

        assert escape_html(120) == "120"
        assert escape_html(1.5) == "1.5"

    def test_empty(self) -> None:
        from tabler.utils.text import escape_html

        assert escape_html("") == ""
        assert escape_html(None) == ""


class TestToText:
    """Tests for to_text."""

    def test_none_is_blank(self) -> None:
        from tabler.utils.text import to_text

        assert to_text(None) == ""

    def test_values(self) -> None:
        from tabler.utils.text import to_text

        assert to_text("Ann") == "Ann"
        assert to_text(0) == "0"
        assert to_text(2.5) == "2.5"

    def test_booleans_lowercase(self) -> None:
        from tabler.utils.text import to_text

        assert to_text(True) == "true"
        assert to_text(False) == "false"


class TestLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from tabler.utils.logger import get_logger

        assert get_logger("mymodule").name == "tabler.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from tabler.utils.logger import get_logger

        assert get_logger("tabler.table").name == "tabler.table"
        assert get_logger("tabler").name == "tabler"
