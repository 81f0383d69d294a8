"""Command-line runner: ``json-tree-path PATH [FILE]``.

Prints one line per match, the matched value as compact JSON by default or
its canonical path with ``--paths``.  Reads the document from FILE, or from
standard input when FILE is omitted or ``-``.

Examples::

    json-tree-path '$..price' store.json
    echo '{"a": [1, 2, 3]}' | json-tree-path --paths '$.a[1:]'
    json-tree-path --tokens "$['a.b'][0:2]"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from json_tree_path.engine import JSONPathEngine
from json_tree_path.errors import JSONPathError
from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy
from json_tree_path.query.tokenizer import parse

logger = logging.getLogger("json_tree_path")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-tree-path",
        description="Evaluate a JSONPath expression against a JSON document.",
    )
    parser.add_argument("path", help="JSONPath expression, e.g. '$..price'")
    parser.add_argument("file", nargs="?", default="-", help="JSON file (default: stdin)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--paths", action="store_true", help="print canonical paths instead of values")
    output.add_argument("--tokens", action="store_true", help="print the tokenized path and exit")
    parser.add_argument(
        "--strict-root",
        action="store_true",
        help="reject '$' anywhere but the start of the path",
    )
    parser.add_argument(
        "--filter-policy",
        choices=[p.value for p in FilterPolicy],
        default=FilterPolicy.RAISE.value,
        help="handling of ?() filter expressions (default: raise)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _read_document(file: str) -> bytes:
    if file == "-":
        return sys.stdin.buffer.read()
    return Path(file).read_bytes()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.tokens:
            for command in parse(args.path):
                print(f"{command.kind.value}\t{command}")
            return 0

        config = EvaluatorConfig(
            root_policy=RootPolicy.REJECT if args.strict_root else RootPolicy.IGNORE,
            filter_policy=args.filter_policy,
        )
        engine = JSONPathEngine(config=config)
        # A bad path is reported without reading the input.
        engine.compile(args.path)
        result = engine.query(_read_document(args.file), args.path)
    except (JSONPathError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug("%d match(es) in %.3f ms", len(result), result.computation_time_ms)
    if args.paths:
        for line in result.paths():
            print(line)
    else:
        for value in result.values():
            print(json.dumps(value, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
