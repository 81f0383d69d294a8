"""QueryResult dataclass for query output.

This module provides the rich result type returned by query() calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from json_tree_path.query.commands import Command
from json_tree_path.tree.nodes import JsonNode

__all__ = ["QueryResult", "paths", "values"]


def paths(nodes: Iterable[JsonNode]) -> list[str]:
    """Map each node to its canonical path, preserving order."""
    return [node.path() for node in nodes]


def values(nodes: Iterable[JsonNode]) -> list[Any]:
    """Map each node to its plain Python value, preserving order."""
    return [node.unpack() for node in nodes]


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Rich result of a query() call.

    Attributes:
        nodes: Matching nodes in evaluation order.  Duplicates are kept.
            These are references into the queried tree.
        commands: The tokenized path that produced ``nodes``.
        computation_time_ms: Wall-clock duration of the query in milliseconds,
            including document decoding when a raw document was given.
    """

    nodes: list[JsonNode]
    commands: tuple[Command, ...]
    computation_time_ms: float

    def __len__(self) -> int:
        return len(self.nodes)

    def paths(self) -> list[str]:
        """Canonical path of every match, in order."""
        return paths(self.nodes)

    def values(self) -> list[Any]:
        """Plain Python value of every match, in order."""
        return values(self.nodes)
