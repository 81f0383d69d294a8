"""Command and CommandKind: the path segments produced by the tokenizer.

A ``Command`` is a plain ``str`` (so a parsed path compares equal to a list
of strings such as ``["$", "..", "price"]``) tagged with a ``CommandKind``.

Unquoted segments are classified by shape:

- ``$``                      -> ROOT
- ``..``                     -> RECURSIVE
- ``*``                      -> WILDCARD
- contains ``:``             -> SLICE
- starts with ``?(`` or ``(`` -> FILTER
- anything else              -> KEYS (a single key or a comma-separated union)

Quoted segments (``['a.b']``, ``['x','y']``) are always KEYS, whatever
characters they contain.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["Command", "CommandKind", "classify", "split_union"]

QUOTES = frozenset("'\"")


class CommandKind(StrEnum):
    """The six shapes a path segment can take."""

    ROOT = auto()
    RECURSIVE = auto()
    WILDCARD = auto()
    SLICE = auto()
    FILTER = auto()
    KEYS = auto()


def classify(text: str) -> CommandKind:
    """Return the CommandKind of an unquoted segment from its shape."""
    if text == "$":
        return CommandKind.ROOT
    if text == "..":
        return CommandKind.RECURSIVE
    if text == "*":
        return CommandKind.WILDCARD
    if ":" in text:
        return CommandKind.SLICE
    if text.startswith(("?(", "(")):
        return CommandKind.FILTER
    return CommandKind.KEYS


def split_union(text: str) -> tuple[str, ...]:
    """Split a union segment on commas that are not inside quotes.

    Quoted members lose their quotes and any whitespace around them;
    unquoted members are kept exactly as written.

    Example::
        split_union("'x', 'y'")   # ("x", "y")
        split_union("0,1")        # ("0", "1")
        split_union("'a,b',c")    # ("a,b", "c")
    """
    members: list[str] = []
    buf: list[str] = []
    quote: str | None = None
    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch == ",":
            members.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    members.append("".join(buf))
    return tuple(_unquote(m) for m in members)


def _unquote(member: str) -> str:
    stripped = member.strip()
    if len(stripped) >= 2 and stripped[0] in QUOTES and stripped[-1] == stripped[0]:
        return stripped[1:-1]
    return member


class Command(str):
    """A single path segment.

    Attributes:
        kind:     The CommandKind of this segment.
        literal:  True for a quoted single key, whose text is the key verbatim
                  and is never split on commas.
        position: Offset of the segment text in the tokenized path (0 for
                  commands built from plain strings).
    """

    kind: CommandKind
    literal: bool
    position: int

    def __new__(
        cls,
        text: str,
        kind: CommandKind | None = None,
        literal: bool = False,
        position: int = 0,
    ) -> Command:
        self = super().__new__(cls, text)
        self.kind = kind if kind is not None else classify(text)
        self.literal = literal
        self.position = position
        return self

    @classmethod
    def key(cls, text: str, position: int = 0) -> Command:
        """Build a literal single-key command from quoted text."""
        return cls(text, CommandKind.KEYS, literal=True, position=position)

    @classmethod
    def coerce(cls, value: str) -> Command:
        """Return ``value`` unchanged if it is a Command, else classify it by shape."""
        if isinstance(value, Command):
            return value
        return cls(value)

    def keys(self) -> tuple[str, ...]:
        """Return the keys selected by a KEYS command, in written order."""
        if self.literal:
            return (str(self),)
        return split_union(self)
