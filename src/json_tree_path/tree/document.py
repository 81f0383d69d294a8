"""Document entry point: raw JSON text to a JsonNode tree."""

from __future__ import annotations

import json

from json_tree_path.errors import DocumentError
from json_tree_path.tree.builder import TreeBuilder
from json_tree_path.tree.nodes import JsonNode

__all__ = ["parse_document"]

_builder = TreeBuilder()


def parse_document(data: bytes | bytearray | str) -> JsonNode:
    """Decode a JSON document and return the root of its node tree.

    Args:
        data: The document as UTF-8 bytes or as text.

    Returns:
        The root JsonNode.

    Raises:
        DocumentError: If the bytes are not valid UTF-8, the text is not
            valid JSON, a number cannot be converted (integer literals past
            the interpreter's digit limit), or the document is nested too
            deeply to decode.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise DocumentError(f"invalid JSON document: {exc}") from exc
    return _builder.build(value)
