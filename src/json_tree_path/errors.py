"""Exception hierarchy for json-tree-path.

Every error raised by the package derives from ``JSONPathError`` so callers
can catch the whole family with one clause:

- ``ParseError``: the path string does not follow the grammar (unterminated
  bracket or quote, unexpected symbol).  ``SliceError`` narrows it to a
  malformed ``[start:stop:step]`` segment.
- ``DocumentError``: the JSON document could not be decoded.
- ``EvalError``: a well-formed command that the evaluator refuses to run
  (filter expressions, a misplaced ``$`` under the strict root policy).

All errors are fail-fast.  No partial result accompanies them.
"""

from __future__ import annotations

__all__ = [
    "DocumentError",
    "EvalError",
    "JSONPathError",
    "ParseError",
    "RootPositionError",
    "SliceError",
    "UnsupportedExpressionError",
]


class JSONPathError(Exception):
    """Base exception for all json-tree-path errors."""


class ParseError(JSONPathError):
    """Raised when a path string cannot be tokenized.

    Attributes:
        path:     The full path string being parsed.
        position: Zero-based character offset where the problem was detected.
        reason:   Short human-readable description.
    """

    def __init__(self, path: str, position: int, reason: str) -> None:
        self.path = path
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in {path!r}")


class SliceError(ParseError):
    """Raised when a slice segment has the wrong field count or a bad field.

    When the segment was tokenized from a full path, ``path`` is that path and
    ``position`` is the offset of the segment's first character in it.
    Otherwise ``path`` is the segment itself and ``position`` is 0.
    """

    def __init__(
        self,
        segment: str,
        reason: str,
        *,
        path: str | None = None,
        position: int = 0,
    ) -> None:
        self.segment = segment
        super().__init__(segment if path is None else path, position, reason)
        msg = f"{reason} in slice {segment!r}"
        if path is not None:
            msg = f"{msg} at position {position} in {path!r}"
        self.args = (msg,)


class DocumentError(JSONPathError):
    """Raised when the JSON document cannot be decoded into a node tree."""


class EvalError(JSONPathError):
    """Raised when a command is well-formed but cannot be evaluated."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"{reason}: {command!r}")


class UnsupportedExpressionError(EvalError):
    """Raised for filter ``?(...)`` and script ``(...)`` expressions."""

    def __init__(self, command: str) -> None:
        super().__init__(command, "filter and script expressions are not supported")


class RootPositionError(EvalError):
    """Raised for a ``$`` command after the first position under ``RootPolicy.REJECT``."""

    def __init__(self, command: str, index: int) -> None:
        self.index = index
        super().__init__(command, f"root command is only valid first, found at {index}")
