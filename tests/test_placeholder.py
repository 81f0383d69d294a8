"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import json_tree_path

    assert json_tree_path.__version__ is not None
    assert json_tree_path.__version__ == "0.1.0"
