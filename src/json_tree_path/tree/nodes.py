"""JsonNode dataclass and NodeType StrEnum for the queryable JSON tree.

A document is held as a tree of ``JsonNode`` objects.  Containers (objects
and arrays) keep their children in an insertion-ordered ``dict`` keyed by
string: object members under their own key, array elements under the
stringified zero-based index (``"0"``, ``"1"``, ...).  The array keys are
always contiguous, which the slice operator relies on.

Query results are references to these nodes, never copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonNode", "NodeType"]


class NodeType(StrEnum):
    """The three structural kinds of node in a JSON tree.

    - OBJECT -> "object" : JSON object {}
    - ARRAY  -> "array"  : JSON array []
    - SCALAR -> "scalar" : A leaf value (string, number, bool, null)
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


@dataclass(slots=True, eq=False)
class JsonNode:
    """A node in the JSON tree.

    Equality is identity: two distinct nodes holding equal values are still
    different nodes, and a result list may contain the same node twice.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        key:       Key under the parent (array index as a string); None for
                   the root.
        parent:    The owning container; None for the root.
        value:     Original Python value for SCALAR nodes; None for containers.
        children:  Child nodes keyed by member name or stringified index, in
                   natural order.
    """

    node_type: NodeType
    key: str | None = None
    parent: JsonNode | None = field(default=None, repr=False)
    value: Any = None
    children: dict[str, JsonNode] = field(default_factory=dict, repr=False)

    def is_container(self) -> bool:
        return self.node_type is not NodeType.SCALAR

    def is_array(self) -> bool:
        return self.node_type is NodeType.ARRAY

    def is_object(self) -> bool:
        return self.node_type is NodeType.OBJECT

    def child_by_key(self, key: str) -> JsonNode | None:
        """Return the direct child stored under ``key``, or None.

        Arrays are looked up by the exact stringified index, so ``"01"`` and
        ``"-1"`` never match.
        """
        return self.children.get(key)

    def inheritors(self) -> list[JsonNode]:
        """Return the direct children in natural order (empty for scalars)."""
        return list(self.children.values())

    def path(self) -> str:
        """Return the canonical path of this node, e.g. ``$['store']['book'][0]``.

        Object steps are rendered as ``['key']`` (or ``["key"]`` when the key
        contains a single quote) and array steps as ``[index]``, so the result
        can be fed back to the tokenizer to select this node again.
        """
        steps: list[str] = []
        node: JsonNode | None = self
        while node is not None and node.parent is not None:
            if node.parent.is_array():
                steps.append(f"[{node.key}]")
            else:
                steps.append(_quote_key(node.key or ""))
            node = node.parent
        steps.append("$")
        return "".join(reversed(steps))

    def unpack(self) -> Any:
        """Return the plain Python value (dict, list or scalar) of this subtree."""
        if self.node_type is NodeType.SCALAR:
            return self.value
        # Explicit stack: (node, container being filled) pairs.
        result: Any = {} if self.is_object() else []
        stack: list[tuple[JsonNode, Any]] = [(self, result)]
        while stack:
            node, target = stack.pop()
            for key, child in node.children.items():
                if child.node_type is NodeType.SCALAR:
                    item: Any = child.value
                else:
                    item = {} if child.is_object() else []
                    stack.append((child, item))
                if isinstance(target, dict):
                    target[key] = item
                else:
                    target.append(item)
        return result


def _quote_key(key: str) -> str:
    if "'" in key and '"' not in key:
        return f'["{key}"]'
    return f"['{key}']"
