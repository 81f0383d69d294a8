"""Tokenizer: turns a JSONPath string into an ordered list of Commands.

Grammar (ASCII)::

    $            root
    .name        child key, scanned up to the next "." or "[" or the end
    ..           recursive descent; the second dot also introduces a name
    [raw]        raw segment up to "]": index, slice, union, "*" or filter
    ['key']      quoted key, taken verbatim (may contain ".", "[", ":" ...)
    ["key"]      same with double quotes
    ['a','b']    quoted union

The tokenizer checks structure only.  Whether ``[1:x]`` is a valid slice is
decided later by the evaluator.
"""

from __future__ import annotations

from json_tree_path.errors import ParseError
from json_tree_path.query.commands import QUOTES, Command, CommandKind

__all__ = ["Cursor", "parse"]

_DOLLAR = "$"
_DOT = "."
_BRACKET_L = "["
_BRACKET_R = "]"
_COMMA = ","

_MEMBER_END = frozenset((_DOT, _BRACKET_L))


class Cursor:
    """A read position over a path string.

    ``peek`` returns an empty string past the end instead of raising, so
    callers can test characters without bounds checks.
    """

    __slots__ = ("index", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        pos = self.index + offset
        if 0 <= pos < len(self.text):
            return self.text[pos]
        return ""

    def advance(self, count: int = 1) -> None:
        self.index += count

    def scan_until(self, delimiters: frozenset[str] | str) -> str:
        """Consume characters up to (not including) the next delimiter or the end."""
        start = self.index
        while self.index < len(self.text) and self.text[self.index] not in delimiters:
            self.index += 1
        return self.text[start : self.index]

    def error(self, reason: str) -> ParseError:
        return ParseError(self.text, self.index, reason)


def parse(path: str) -> list[Command]:
    """Tokenize a JSONPath string.

    Args:
        path: The JSONPath expression, e.g. ``"$.store.book[0:2]"``.

    Returns:
        The commands in order.  ``parse("$.a.b") == ["$", "a", "b"]``.

    Raises:
        ParseError: On an unterminated bracket or quote, or on a character
            that cannot start a segment.
    """
    cursor = Cursor(path)
    commands: list[Command] = []
    while not cursor.at_end():
        ch = cursor.peek()
        if ch == _DOLLAR:
            commands.append(Command(_DOLLAR, CommandKind.ROOT, position=cursor.index))
            cursor.advance()
        elif ch == _DOT:
            _read_member(cursor, commands)
        elif ch == _BRACKET_L:
            commands.append(_read_bracket(cursor))
        else:
            raise cursor.error(f"unexpected symbol {ch!r}")
    return commands


def _read_member(cursor: Cursor, commands: list[Command]) -> None:
    if cursor.peek(1) == _DOT:
        commands.append(Command("..", CommandKind.RECURSIVE, position=cursor.index))
        # Stop on the second dot: it introduces the member that follows.
        cursor.advance()
        return
    cursor.advance()
    start = cursor.index
    name = cursor.scan_until(_MEMBER_END)
    if name:
        commands.append(Command(name, position=start))


def _read_bracket(cursor: Cursor) -> Command:
    cursor.advance()  # "["
    if cursor.at_end():
        raise cursor.error("unterminated bracket")
    if cursor.peek() in QUOTES:
        return _read_quoted(cursor)
    start = cursor.index
    raw = cursor.scan_until(_BRACKET_R)
    if cursor.at_end():
        raise cursor.error("unterminated bracket")
    cursor.advance()  # "]"
    return Command(raw, position=start)


def _read_quoted(cursor: Cursor) -> Command:
    start = cursor.index
    key = _read_quoted_string(cursor)
    ch = cursor.peek()
    if ch == _BRACKET_R:
        cursor.advance()
        return Command.key(key, position=start)
    if ch == _COMMA or ch.isspace():
        return _read_quoted_union(cursor, start)
    if not ch:
        raise cursor.error("unterminated bracket")
    raise cursor.error(f"unexpected symbol {ch!r} after quoted key")


def _read_quoted_string(cursor: Cursor) -> str:
    quote = cursor.peek()
    cursor.advance()
    content = cursor.scan_until(quote)
    if cursor.at_end():
        raise cursor.error("unterminated quoted key")
    cursor.advance()  # closing quote
    return content


def _read_quoted_union(cursor: Cursor, start: int) -> Command:
    # Quote-aware scan so "]" or "," inside a quoted member do not end it.
    while True:
        ch = cursor.peek()
        if not ch:
            raise cursor.error("unterminated bracket")
        if ch == _BRACKET_R:
            break
        if ch in QUOTES:
            _read_quoted_string(cursor)
        else:
            cursor.advance()
    raw = cursor.text[start : cursor.index]
    cursor.advance()  # "]"
    return Command(raw, CommandKind.KEYS, position=start)
