"""JSONPathEngine: orchestrator that wires CommandCache + Evaluator + parse_document.

This is the central wiring layer between the raw tokenizer/evaluator and the
public API.  It turns a node list into a rich QueryResult with the commands
used and timing data.

Architecture:
- query() starts a wall-clock timer, tokenizes the path through the
  per-instance CommandCache, and compiles it with the Evaluator.  All path
  errors (grammar, slice fields, policy violations) surface here.
- Only then is the document decoded (when given as bytes or text).  A
  malformed path therefore never triggers document decoding.
- The compiled plan is executed against the root and the nodes are wrapped
  in a QueryResult.
"""

from __future__ import annotations

import logging
import time

from json_tree_path.cache import CommandCache
from json_tree_path.query.config import EvaluatorConfig
from json_tree_path.query.evaluator import Evaluator, Plan
from json_tree_path.result import QueryResult
from json_tree_path.tree.document import parse_document
from json_tree_path.tree.nodes import JsonNode

__all__ = ["Document", "JSONPathEngine"]

logger = logging.getLogger(__name__)

# A raw JSON document or an already built tree.
Document = bytes | bytearray | str | JsonNode


class JSONPathEngine:
    """Orchestrator for JSONPath queries.

    Tokenized paths are cached per instance, so running the same path over
    many documents tokenizes it once.  Two separate engines never share
    cache state.

    The engine is not thread-safe: the cache is unlocked.  Give each thread
    its own engine, or guard a shared one.

    Example::

        from json_tree_path.engine import JSONPathEngine

        engine = JSONPathEngine()
        result = engine.query(b'{"a": {"x": 1, "y": 2}}', "$.a['x','y']")
        print(result.values())   # [1, 2]
        print(result.paths())    # ["$['a']['x']", "$['a']['y']"]
    """

    def __init__(
        self,
        config: EvaluatorConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Evaluator behaviour.  Defaults to ``EvaluatorConfig()``.
            max_cache_size: Maximum number of tokenized paths held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``EvaluatorConfig``.
        """
        self._config: EvaluatorConfig = config if config is not None else EvaluatorConfig()
        self._cache = CommandCache(max_size=max_cache_size)
        self._evaluator = Evaluator(config=self._config)

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    @property
    def cache(self) -> CommandCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, path: str) -> Plan:
        """Tokenize (through the cache) and validate ``path`` without a document.

        Raises:
            ParseError: The path is malformed (including bad slice fields).
            EvalError: The path uses a command the config does not allow.
        """
        return self._evaluator.compile(self._cache.parse(path), path=path)

    def query(self, document: Document, path: str) -> QueryResult:
        """Run ``path`` against ``document`` and return a QueryResult.

        Args:
            document: JSON as bytes or text, or the root JsonNode of a tree
                that was built earlier.
            path:     The JSONPath expression.

        Returns:
            A ``QueryResult`` with nodes, commands and timing populated.

        Raises:
            ParseError: The path is malformed (including bad slice fields).
            EvalError: The path uses a command the config does not allow.
            DocumentError: The document is not valid JSON.
        """
        t0 = time.perf_counter()

        plan = self.compile(path)

        root = document if isinstance(document, JsonNode) else parse_document(document)
        nodes = self._evaluator.execute(root, plan)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug("query %r matched %d node(s) in %.3f ms", path, len(nodes), elapsed_ms)

        return QueryResult(
            nodes=nodes,
            commands=plan.commands,
            computation_time_ms=elapsed_ms,
        )

    def evaluate(self, document: Document, path: str) -> list[JsonNode]:
        """Return just the matching nodes of ``query()``."""
        return self.query(document, path).nodes
