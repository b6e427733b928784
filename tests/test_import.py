"""Verify package imports work correctly."""


def test_import_tabler() -> None:
    """Test that tabler can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import tabler

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert tabler.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from tabler import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Everything in __all__ is importable from the package root."""
    import tabler

    for name in tabler.__all__:
        assert hasattr(tabler, name), name
