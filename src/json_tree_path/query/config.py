"""EvaluatorConfig, RootPolicy and FilterPolicy for evaluator configuration.

EvaluatorConfig is a frozen (immutable) dataclass holding the choices the
evaluator makes for commands whose behaviour is not fixed by the grammar:
a ``$`` that is not the first command, and filter/script expressions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class RootPolicy(StrEnum):
    """What to do with a ``$`` command after the first position.

    - IGNORE: Treat it as a no-op (the result passes through unchanged).
    - REJECT: Raise RootPositionError.
    """

    IGNORE = auto()
    REJECT = auto()


class FilterPolicy(StrEnum):
    """What to do with filter ``?(...)`` and script ``(...)`` commands.

    - RAISE:       Raise UnsupportedExpressionError.
    - PASSTHROUGH: Consume the command and leave the result unchanged.
    """

    RAISE = auto()
    PASSTHROUGH = auto()


@dataclass(frozen=True, slots=True)
class EvaluatorConfig:
    """Immutable configuration for the Evaluator.

    Attributes:
        root_policy: Handling of a ``$`` command after position 0.  Strings
            such as ``"reject"`` are accepted and converted.
        filter_policy: Handling of filter and script expressions.  Strings
            such as ``"passthrough"`` are accepted and converted.
    """

    root_policy: RootPolicy = RootPolicy.IGNORE
    filter_policy: FilterPolicy = FilterPolicy.RAISE

    def __post_init__(self) -> None:
        try:
            root_policy = RootPolicy(self.root_policy)
        except ValueError:
            msg = f"root_policy must be one of {[p.value for p in RootPolicy]}, got {self.root_policy!r}"
            raise ValueError(msg) from None
        try:
            filter_policy = FilterPolicy(self.filter_policy)
        except ValueError:
            msg = f"filter_policy must be one of {[p.value for p in FilterPolicy]}, got {self.filter_policy!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "root_policy", root_policy)
        object.__setattr__(self, "filter_policy", filter_policy)
