"""SliceSpec: the parsed form of a ``[start:stop:step]`` segment.

An omitted stop is represented by the ``Bound.UNBOUNDED`` sentinel rather
than a large integer.  Iteration runs ``start, start + step, ...`` while the
index is below ``stop`` (forever when unbounded); the evaluator ends each
array's walk at the first index with no child, which always happens because
array keys are contiguous and finite.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from json_tree_path.errors import SliceError

__all__ = ["UNBOUNDED", "Bound", "SliceSpec"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Bound(Enum):
    """Sentinel for an open upper bound."""

    UNBOUNDED = "unbounded"

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Bound.UNBOUNDED


@dataclass(frozen=True, slots=True)
class SliceSpec:
    """A validated slice.

    Attributes:
        start: First index, 0 when omitted.
        stop:  Exclusive upper bound, or UNBOUNDED when omitted.
        step:  Increment, 1 when omitted.  Never 0.
    """

    start: int = 0
    stop: int | Bound = UNBOUNDED
    step: int = 1

    @classmethod
    def parse(cls, segment: str) -> SliceSpec:
        """Parse ``start:stop`` or ``start:stop:step``; every field may be empty.

        Raises:
            SliceError: On anything other than 2 or 3 fields, a field that is
                not an integer, or a zero step.
        """
        fields = segment.split(":")
        if len(fields) not in (2, 3):
            raise SliceError(segment, f"expected 2 or 3 fields, got {len(fields)}")
        start = _field(segment, fields[0], 0)
        stop: int | Bound = UNBOUNDED if fields[1] == "" else _field(segment, fields[1], 0)
        step = _field(segment, fields[2], 1) if len(fields) == 3 else 1
        if step == 0:
            raise SliceError(segment, "slice step must not be zero")
        return cls(start=start, stop=stop, step=step)

    def indices(self) -> Iterator[int]:
        """Yield candidate indices in order.  Unbounded when ``stop`` is UNBOUNDED."""
        i = self.start
        while self.stop is UNBOUNDED or i < self.stop:
            yield i
            i += self.step


def _field(segment: str, text: str, default: int) -> int:
    if text == "":
        return default
    if not _INTEGER.fullmatch(text):
        raise SliceError(segment, f"slice field {text!r} is not an integer")
    return int(text)
