"""Tests for JSONPathEngine.

Covers:
- query() populates nodes, commands and timing
- Raw documents (bytes/str) and prebuilt trees
- Path errors surface before the document is decoded
- Per-instance command caching
- Config forwarding to the evaluator
"""

from __future__ import annotations

from typing import Any

import pytest

import json_tree_path.engine as engine_module
from json_tree_path.engine import JSONPathEngine
from json_tree_path.errors import (
    DocumentError,
    ParseError,
    RootPositionError,
    SliceError,
    UnsupportedExpressionError,
)
from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy
from json_tree_path.result import QueryResult
from json_tree_path.tree.document import parse_document

DOC = b'{"store": {"book": [{"price": 8}, {"price": 12}], "bike": {"price": 20}}}'


@pytest.fixture
def document_calls(monkeypatch: pytest.MonkeyPatch) -> list[Any]:
    """Spy on document decoding inside the engine."""
    calls: list[Any] = []

    def spy_parse_document(data: Any) -> Any:
        calls.append(data)
        return parse_document(data)

    monkeypatch.setattr(engine_module, "parse_document", spy_parse_document)
    return calls


class TestQuery:
    def test_result_fields(self) -> None:
        result = JSONPathEngine().query(DOC, "$..price")
        assert isinstance(result, QueryResult)
        assert result.values() == [20, 8, 12]
        assert result.commands == ("$", "..", "price")
        assert result.computation_time_ms >= 0.0

    def test_text_document(self) -> None:
        assert JSONPathEngine().query(DOC.decode(), "$.store.bike.price").values() == [20]

    def test_prebuilt_tree_is_not_reparsed(self, document_calls: list[Any]) -> None:
        root = parse_document(DOC)
        nodes = JSONPathEngine().evaluate(root, "$.store.book[0]")
        assert document_calls == []
        assert nodes[0] is root.children["store"].children["book"].children["0"]

    def test_evaluate_returns_nodes(self) -> None:
        nodes = JSONPathEngine().evaluate(DOC, "$.store.book[*].price")
        assert [n.value for n in nodes] == [8, 12]

    def test_invalid_document(self) -> None:
        with pytest.raises(DocumentError):
            JSONPathEngine().query(b"{not json", "$")


class TestPathErrorsBeforeDocument:
    @pytest.mark.parametrize(
        ("path", "error"),
        [
            ("$.a[", ParseError),
            ("$.a[1:2:3:4]", SliceError),
            ("x", ParseError),
            ("$[?(@.a)]", UnsupportedExpressionError),
        ],
    )
    def test_document_never_decoded(
        self, document_calls: list[Any], path: str, error: type[Exception]
    ) -> None:
        with pytest.raises(error):
            JSONPathEngine().query(DOC, path)
        assert document_calls == []

    def test_slice_error_locates_segment_in_path(self) -> None:
        with pytest.raises(SliceError) as exc_info:
            JSONPathEngine().query(DOC, "$.store.book[1:x]")
        assert exc_info.value.path == "$.store.book[1:x]"
        assert exc_info.value.position == 13

    def test_bad_path_wins_over_bad_document(self, document_calls: list[Any]) -> None:
        with pytest.raises(ParseError):
            JSONPathEngine().query(b"{not json", "$.a[")
        assert document_calls == []

    def test_compile_alone(self) -> None:
        plan = JSONPathEngine().compile("$.a[1:]")
        assert plan.commands == ("$", "a", "1:")


class TestCaching:
    def test_path_cached_per_engine(self) -> None:
        engine = JSONPathEngine()
        engine.query(DOC, "$..price")
        engine.query(b'{"price": 1}', "$..price")
        assert engine.cache.curr_size == 1
        assert "$..price" in engine.cache

    def test_engines_do_not_share_cache(self) -> None:
        first = JSONPathEngine()
        second = JSONPathEngine()
        first.query(DOC, "$")
        assert "$" not in second.cache

    def test_max_cache_size(self) -> None:
        assert JSONPathEngine(max_cache_size=4).cache.max_size == 4


class TestConfig:
    def test_default_config(self) -> None:
        assert JSONPathEngine().config == EvaluatorConfig()

    def test_root_policy_forwarded(self) -> None:
        engine = JSONPathEngine(EvaluatorConfig(root_policy=RootPolicy.REJECT))
        with pytest.raises(RootPositionError):
            engine.query(DOC, "$.store[$]")

    def test_filter_policy_forwarded(self) -> None:
        engine = JSONPathEngine(EvaluatorConfig(filter_policy=FilterPolicy.PASSTHROUGH))
        assert engine.query(DOC, "$.store.bike[?(@.price)].price").values() == [20]
