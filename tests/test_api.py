"""Unit tests for the public API functions: parse, evaluate, query, paths, values."""

from __future__ import annotations

from typing import Any

import pytest

import json_tree_path.engine as engine_module
from json_tree_path import (
    DocumentError,
    EvaluatorConfig,
    JSONPathError,
    JsonNode,
    ParseError,
    QueryResult,
    RootPolicy,
    evaluate,
    parse,
    parse_document,
    paths,
    query,
    values,
)


class TestParse:
    def test_recursive(self) -> None:
        assert parse("$..a") == ["$", "..", "a"]

    def test_quoted_brackets(self) -> None:
        assert parse("$['a']['b']") == ["$", "a", "b"]

    def test_dotted(self) -> None:
        assert parse("$.a.b") == ["$", "a", "b"]

    def test_error_is_jsonpath_error(self) -> None:
        with pytest.raises(JSONPathError):
            parse("$[")


class TestEvaluate:
    @pytest.mark.parametrize("document", [b"{}", b"[1, 2]", b"3", b'"s"', b"null"])
    def test_root_is_whole_document(self, document: bytes) -> None:
        root = parse_document(document)
        assert evaluate(root, "$") == [root]

    def test_accepts_bytes(self) -> None:
        assert values(evaluate(b'{"a": [10, 20, 30, 40, 50]}', "$.a[1:3]")) == [20, 30]

    def test_slices(self) -> None:
        doc = b'{"a": [10, 20, 30, 40, 50]}'
        assert values(evaluate(doc, "$.a[1:]")) == [20, 30, 40, 50]
        assert values(evaluate(doc, "$.a[:2]")) == [10, 20]

    def test_union(self) -> None:
        doc = b'{"a": {"x": 1, "y": 2, "z": 3}}'
        assert values(evaluate(doc, "$.a['x','y']")) == [1, 2]
        assert values(evaluate(doc, "$.a['x','w']")) == [1]

    def test_recursive_descent(self) -> None:
        doc = b'{"a": {"b": {"price": 5}, "c": [{"price": 7}]}}'
        assert values(evaluate(doc, "$..price")) == [5, 7]

    def test_negative_index_is_empty(self) -> None:
        assert evaluate(b'{"a": [1, 2]}', "$.a[-1]") == []

    @pytest.mark.parametrize("path", ["$.a[1:2:3:4]", "$.a["])
    def test_bad_path_never_touches_document(
        self, monkeypatch: pytest.MonkeyPatch, path: str
    ) -> None:
        calls: list[Any] = []
        monkeypatch.setattr(engine_module, "parse_document", calls.append)
        with pytest.raises(ParseError):
            evaluate(b'{"a": [1]}', path)
        assert calls == []

    def test_idempotent(self) -> None:
        root = parse_document(b'{"a": {"b": [1, {"c": 2}]}, "d": [[3]]}')
        first = evaluate(root, "$..*")
        second = evaluate(root, "$..*")
        assert all(a is b for a, b in zip(first, second, strict=True))
        assert len(first) == len(second)

    @pytest.mark.parametrize("depth", [600, 900])
    def test_nested_document_beyond_builder_recursion(self, depth: int) -> None:
        nodes = evaluate("[" * depth + "]" * depth, "$")
        assert len(nodes) == 1
        assert nodes[0].is_array()

    def test_oversized_integer_is_document_error(self) -> None:
        with pytest.raises(DocumentError):
            evaluate(b'{"a": ' + b"1" * 5000 + b"}", "$.a")

    def test_config_passthrough(self) -> None:
        with pytest.raises(JSONPathError):
            evaluate(b"{}", "$[$]", config=EvaluatorConfig(root_policy=RootPolicy.REJECT))


class TestQuery:
    def test_returns_query_result(self) -> None:
        result = query('{"a": 1}', "$.a")
        assert isinstance(result, QueryResult)
        assert result.values() == [1]
        assert result.paths() == ["$['a']"]

    def test_no_global_state_between_calls(self) -> None:
        r1 = query(b'{"a": 1}', "$.a")
        r2 = query(b'{"a": 2}', "$.a")
        assert (r1.values(), r2.values()) == ([1], [2])


class TestPathsAndValues:
    def test_paths_of_results(self) -> None:
        nodes = evaluate(b'{"a": [{"b": 1}, {"b": 2}]}', "$.a[*].b")
        assert paths(nodes) == ["$['a'][0]['b']", "$['a'][1]['b']"]

    def test_paths_reparse_to_same_nodes(self) -> None:
        root = parse_document(b'{"a": [{"b": 1}, {"b": 2}]}')
        for node in evaluate(root, "$..b"):
            assert evaluate(root, node.path()) == [node]

    def test_values_unpack_containers(self) -> None:
        nodes = evaluate(b'{"a": [{"b": 1}]}', "$.a")
        assert values(nodes) == [[{"b": 1}]]
        assert isinstance(nodes[0], JsonNode)
