"""json-tree-path - JSONPath queries over an ordered JSON node tree."""

from __future__ import annotations

from json_tree_path.api import evaluate, parse, paths, query, values
from json_tree_path.engine import JSONPathEngine
from json_tree_path.errors import (
    DocumentError,
    EvalError,
    JSONPathError,
    ParseError,
    RootPositionError,
    SliceError,
    UnsupportedExpressionError,
)
from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy
from json_tree_path.result import QueryResult
from json_tree_path.tree import JsonNode, NodeType, parse_document

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentError",
    "EvalError",
    "EvaluatorConfig",
    "FilterPolicy",
    "JSONPathEngine",
    "JSONPathError",
    "JsonNode",
    "NodeType",
    "ParseError",
    "QueryResult",
    "RootPolicy",
    "RootPositionError",
    "SliceError",
    "UnsupportedExpressionError",
    "evaluate",
    "parse",
    "parse_document",
    "paths",
    "query",
    "values",
]
