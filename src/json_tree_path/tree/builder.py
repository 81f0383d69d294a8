"""TreeBuilder: converts any decoded JSON value into a JsonNode tree.

Dispatches dicts, lists, and scalar values to JsonNode objects, filling
containers from an explicit work stack so nesting depth is bounded by memory
rather than the interpreter's recursion limit.  Object members keep their
insertion order; array elements are stored under their stringified index.
Scalar values preserve their original Python type in ``JsonNode.value``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from json_tree_path.tree.nodes import JsonNode, NodeType

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a JsonNode tree.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = TreeBuilder()
        root = builder.build({"a": [10, 20]})
        root.child_by_key("a").child_by_key("1").value   # 20
    """

    def build(
        self,
        value: JsonValue,
        key: str | None = None,
        parent: JsonNode | None = None,
    ) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value:  Any valid JSON value (dict, list, str, int, float, bool, None).
            key:    Key of this node under ``parent``.  None for the root.
            parent: Owning container node.  None for the root.

        Returns:
            The JsonNode for ``value``, with its subtree attached.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        root = self._make_node(value, key, parent)
        # (container node, decoded value whose members it still needs)
        stack: list[tuple[JsonNode, Any]] = [(root, value)]
        while stack:
            node, current = stack.pop()
            members: Iterable[tuple[Any, Any]]
            if isinstance(current, dict):
                members = current.items()
            elif isinstance(current, list):
                members = ((str(idx), item) for idx, item in enumerate(current))
            else:
                continue
            for member, val in members:
                if not isinstance(member, str):
                    raise TypeError(f"JSON object keys must be str, got {type(member)!r}")
                child = self._make_node(val, member, node)
                node.children[member] = child
                if child.is_container():
                    stack.append((child, val))
        return root

    def _make_node(self, value: Any, key: str | None, parent: JsonNode | None) -> JsonNode:
        # bool MUST be checked before int
        if isinstance(value, bool) or value is None:
            return JsonNode(NodeType.SCALAR, key=key, parent=parent, value=value)

        if isinstance(value, dict):
            return JsonNode(NodeType.OBJECT, key=key, parent=parent)

        if isinstance(value, list):
            return JsonNode(NodeType.ARRAY, key=key, parent=parent)

        if isinstance(value, (str, int, float)):
            return JsonNode(NodeType.SCALAR, key=key, parent=parent, value=value)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
