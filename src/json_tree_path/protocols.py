"""TreeNodeLike Protocol: the node contract the evaluator relies on.

The evaluator never touches ``JsonNode`` internals.  Any tree whose nodes
implement these five methods can be queried, without inheriting from any
base class.

Example::

    from json_tree_path.protocols import TreeNodeLike

    class MyNode:
        def is_container(self) -> bool: ...
        def is_array(self) -> bool: ...
        def child_by_key(self, key: str) -> "MyNode | None": ...
        def inheritors(self) -> list["MyNode"]: ...
        def path(self) -> str: ...

    assert isinstance(MyNode(), TreeNodeLike)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TreeNodeLike(Protocol):
    """Structural protocol for queryable tree nodes.

    - ``is_container`` is True for objects and arrays.
    - ``is_array`` is True for arrays, whose children live under the
      contiguous keys ``"0" .. "n-1"``.
    - ``child_by_key`` returns the direct child under an exact key, or None.
    - ``inheritors`` returns direct children in natural order (insertion
      order for objects, ascending index for arrays).
    - ``path`` returns a deterministic canonical path string.
    """

    def is_container(self) -> bool: ...

    def is_array(self) -> bool: ...

    def child_by_key(self, key: str) -> TreeNodeLike | None: ...

    def inheritors(self) -> list[TreeNodeLike]: ...

    def path(self) -> str: ...
