"""Tree subpackage: the JSON node model queried by the evaluator.

Re-exports the public API for the tree module:
- JsonNode: dataclass representing a node in the JSON tree
- NodeType: StrEnum of the three node kinds (OBJECT, ARRAY, SCALAR)
- TreeBuilder: converts any decoded JSON value into a JsonNode tree
- parse_document: decodes JSON bytes/text into a JsonNode tree
"""

from json_tree_path.tree.builder import TreeBuilder
from json_tree_path.tree.document import parse_document
from json_tree_path.tree.nodes import JsonNode, NodeType

__all__ = ["JsonNode", "NodeType", "TreeBuilder", "parse_document"]
