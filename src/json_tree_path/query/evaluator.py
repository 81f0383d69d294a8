"""Evaluator: folds a command list over a working result list.

The result starts empty and each command rewrites it in turn; command
``i + 1`` only ever sees the output of command ``i``.

Evaluation happens in two phases:

1. ``compile()`` checks every command against the grammar and the config
   (slice fields, filter policy, root position) and returns a ``Plan``.  It
   needs no document, so a bad path fails before any JSON is decoded.
2. ``execute()`` walks the tree.  It cannot fail.

Fold semantics per CommandKind:

- ROOT:      first command sets ``[root]``; later ones are a no-op (or an
             error under ``RootPolicy.REJECT``).
- RECURSIVE: APPENDS the descendant containers of every current node.  The
             nodes already in the result stay.
- WILDCARD:  REPLACES the result with the direct children of every node.
- SLICE:     REPLACES the result with the selected elements of every array.
- FILTER:    error, or a no-op under ``FilterPolicy.PASSTHROUGH``.
- KEYS:      REPLACES the result with, key by key, the matching child of
             every container.

RECURSIVE is the only command that appends, which is why ``$..*`` returns
more than ``$.*`` on the same tree.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from json_tree_path.errors import RootPositionError, SliceError, UnsupportedExpressionError
from json_tree_path.protocols import TreeNodeLike
from json_tree_path.query.commands import Command, CommandKind
from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy
from json_tree_path.query.slices import SliceSpec

__all__ = ["Evaluator", "Plan", "Step", "descendant_containers"]

N = TypeVar("N", bound=TreeNodeLike)


@dataclass(frozen=True, slots=True)
class Step:
    """A validated command, with its parsed slice for SLICE commands."""

    command: Command
    slice_spec: SliceSpec | None = None


@dataclass(frozen=True, slots=True)
class Plan:
    """A validated, ready-to-execute command sequence."""

    steps: tuple[Step, ...]

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(step.command for step in self.steps)


class Evaluator:
    """Runs command sequences against a node tree.

    Holds only its (immutable) config, so one instance can serve any number
    of queries.

    Example::

        from json_tree_path.query import Evaluator, parse
        from json_tree_path.tree import parse_document

        root = parse_document(b'{"a": [10, 20, 30]}')
        nodes = Evaluator().run(root, parse("$.a[1:]"))
        [n.value for n in nodes]   # [20, 30]
    """

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self._config: EvaluatorConfig = config if config is not None else EvaluatorConfig()

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, commands: Sequence[str], path: str | None = None) -> Plan:
        """Validate ``commands`` and return an executable Plan.

        Plain strings are classified by shape; Commands from the tokenizer
        keep their kind.  When ``path`` is the string the commands were
        tokenized from, a SliceError reports that path and the offset of the
        bad segment in it.

        Raises:
            SliceError: A slice has the wrong field count, a non-integer
                field, or a zero step.
            UnsupportedExpressionError: A filter/script command under
                ``FilterPolicy.RAISE``.
            RootPositionError: A ``$`` after position 0 under
                ``RootPolicy.REJECT``.
        """
        steps: list[Step] = []
        for index, raw in enumerate(commands):
            command = Command.coerce(raw)
            kind = command.kind
            if kind is CommandKind.SLICE:
                steps.append(Step(command, _parse_slice(command, path)))
                continue
            if kind is CommandKind.FILTER and self._config.filter_policy is FilterPolicy.RAISE:
                raise UnsupportedExpressionError(command)
            if kind is CommandKind.ROOT and index > 0 and self._config.root_policy is RootPolicy.REJECT:
                raise RootPositionError(command, index)
            steps.append(Step(command))
        return Plan(tuple(steps))

    def execute(self, root: N, plan: Plan) -> list[N]:
        """Fold a compiled plan over ``root`` and return the matching nodes."""
        result: list[N] = []
        for index, step in enumerate(plan.steps):
            kind = step.command.kind
            if kind is CommandKind.ROOT:
                if index == 0:
                    result = [root]
            elif kind is CommandKind.RECURSIVE:
                found: list[N] = []
                for node in result:
                    found.extend(descendant_containers(node))
                result = result + found
            elif kind is CommandKind.WILDCARD:
                result = [child for node in result for child in node.inheritors()]  # type: ignore[misc]
            elif kind is CommandKind.SLICE:
                assert step.slice_spec is not None
                result = _select_slice(result, step.slice_spec)
            elif kind is CommandKind.KEYS:
                result = _select_keys(result, step.command.keys())
            # FILTER under PASSTHROUGH leaves the result as it is.
        return result

    def run(self, root: N, commands: Sequence[str]) -> list[N]:
        """Compile and execute in one call."""
        return self.execute(root, self.compile(commands))


def descendant_containers(node: N) -> list[N]:
    """Return every container below ``node``, containers only, in discovery order.

    For a node the list is its direct container children, followed by the
    descendant list of each of those children in turn.  Scalars never appear
    and are never descended into.  Uses an explicit stack, so depth is
    bounded by memory rather than the interpreter's recursion limit.
    """
    found: list[N] = []
    stack: list[N] = [node]
    while stack:
        current = stack.pop()
        if not current.is_container():
            continue
        containers = [c for c in current.inheritors() if c.is_container()]
        found.extend(containers)  # type: ignore[arg-type]
        stack.extend(reversed(containers))  # type: ignore[arg-type]
    return found


def _parse_slice(command: Command, path: str | None) -> SliceSpec:
    try:
        return SliceSpec.parse(command)
    except SliceError as exc:
        if path is None:
            raise
        raise SliceError(command, exc.reason, path=path, position=command.position) from None


def _select_slice(nodes: list[N], spec: SliceSpec) -> list[N]:
    selected: list[N] = []
    for node in nodes:
        if not node.is_array():
            continue
        for i in spec.indices():
            child = node.child_by_key(str(i))
            if child is None:
                break
            selected.append(child)  # type: ignore[arg-type]
    return selected


def _select_keys(nodes: list[N], keys: tuple[str, ...]) -> list[N]:
    selected: list[N] = []
    for key in keys:
        for node in nodes:
            if not node.is_container():
                continue
            child = node.child_by_key(key)
            if child is not None:
                selected.append(child)  # type: ignore[arg-type]
    return selected
