"""CommandCache: LRU-backed cache of tokenized paths.

Tokenizing is cheap but not free, and applications tend to run the same
handful of paths over many documents.  ``CommandCache`` memoizes
``parse()`` per path string.  LRU eviction occurs silently when
``max_size`` is exceeded.

Each ``CommandCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two separate instances never interfere with
each other.  Paths that fail to parse are not cached: the ``ParseError``
propagates and the next call parses again.

Example::

    from json_tree_path.cache import CommandCache

    cache = CommandCache(max_size=256)
    cache.parse("$.store.book[0]")   # tokenizes
    cache.parse("$.store.book[0]")   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from json_tree_path.query.commands import Command
from json_tree_path.query.tokenizer import parse

__all__ = ["CommandCache"]


class CommandCache:
    """LRU-backed memo of ``parse()`` results.

    Cached sequences are tuples, so a caller cannot mutate a cached entry.

    Args:
        max_size: Maximum number of path strings to hold in memory.
            Defaults to 512.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 512) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[str, tuple[Command, ...]] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def parse(self, path: str) -> tuple[Command, ...]:
        """Return the commands for ``path``, tokenizing only on a cache miss.

        Raises:
            ParseError: If ``path`` is malformed.  Nothing is cached.
        """
        commands = self._cache.get(path)
        if commands is None:
            commands = tuple(parse(path))
            self._cache[path] = commands
        return commands

    def __contains__(self, path: object) -> bool:
        return path in self._cache

    def clear(self) -> None:
        self._cache.clear()
