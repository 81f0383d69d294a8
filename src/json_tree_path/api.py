"""Public API functions for json-tree-path.

This module provides the user-facing functions: parse, evaluate, query,
paths and values.  Each query call creates a fresh JSONPathEngine to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from json_tree_path.engine import Document, JSONPathEngine
from json_tree_path.query.commands import Command
from json_tree_path.query.config import EvaluatorConfig
from json_tree_path.query.tokenizer import parse as _tokenize
from json_tree_path.result import QueryResult, paths, values
from json_tree_path.tree.nodes import JsonNode

__all__ = ["evaluate", "parse", "paths", "query", "values"]


def parse(path: str) -> list[Command]:
    """Tokenize a JSONPath expression into its commands.

    Args:
        path: The JSONPath expression, e.g. ``"$..price"``.

    Returns:
        The commands in order, e.g. ``["$", "..", "price"]``.

    Raises:
        ParseError: On an unterminated bracket or quote, or an unexpected
            symbol.
    """
    return _tokenize(path)


def query(
    document: Document,
    path: str,
    config: EvaluatorConfig | None = None,
) -> QueryResult:
    """Run a JSONPath query and return a rich QueryResult.

    Args:
        document: JSON bytes or text, or the root JsonNode of a built tree.
        path:     The JSONPath expression.
        config:   Evaluator behaviour.  Defaults to ``EvaluatorConfig()`` when None.

    Returns:
        A ``QueryResult`` with nodes, commands and computation_time_ms.
    """
    return JSONPathEngine(config=config).query(document, path)


def evaluate(
    document: Document,
    path: str,
    config: EvaluatorConfig | None = None,
) -> list[JsonNode]:
    """Return the nodes matched by ``path`` in ``document``, in order.

    The path is tokenized and validated before the document is decoded, so
    a malformed path never triggers JSON decoding.

    Args:
        document: JSON bytes or text, or the root JsonNode of a built tree.
        path:     The JSONPath expression.
        config:   Evaluator behaviour.  Defaults to ``EvaluatorConfig()`` when None.

    Returns:
        The matching nodes.  References into the tree, duplicates kept.

    Raises:
        ParseError: The path is malformed.
        EvalError: The path uses a command the config does not allow.
        DocumentError: The document is not valid JSON.
    """
    return query(document, path, config=config).nodes
