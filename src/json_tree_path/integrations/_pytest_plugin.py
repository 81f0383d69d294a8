"""pytest plugin for json-tree-path.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_path import EvaluatorConfig, query
from json_tree_path.engine import Document
from json_tree_path.tree import JsonNode, TreeBuilder


@pytest.fixture(scope="session")
def assert_jsonpath() -> Any:
    """Fixture that returns a callable JSONPath match asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to query() which creates a fresh JSONPathEngine per call).

    Usage in tests::

        def test_prices(assert_jsonpath):
            assert_jsonpath({"a": [1, 2, 3]}, "$.a[1:]", [2, 3])

    Returns:
        A callable ``_assert(document, path, expected, *, config=None) -> None``
        that raises ``AssertionError`` when the matched values differ from
        ``expected`` (order matters).
    """

    def _assert(
        document: Document | Any,
        path: str,
        expected: list[Any],
        *,
        config: EvaluatorConfig | None = None,
    ) -> None:
        """Assert that ``path`` selects exactly ``expected`` from ``document``.

        Args:
            document: JSON bytes/text, a built JsonNode tree, or a plain
                      Python value (dict, list, ...) which is built into a tree first.
            path:     The JSONPath expression.
            expected: The expected matched values, in order.
            config:   Optional EvaluatorConfig.

        Raises:
            AssertionError: When the matched values differ, with a message
                including the path, the matched paths and values.
        """
        if not isinstance(document, (bytes, bytearray, str, JsonNode)):
            document = TreeBuilder().build(document)
        result = query(document, path, config=config)
        actual = result.values()
        if actual != expected:
            raise AssertionError(
                f"JSONPath {path!r} did not match expected values\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  paths:    {result.paths()}"
            )

    return _assert
