"""Query subpackage: tokenizer, slice parsing, evaluator and its config."""

from json_tree_path.query.commands import Command, CommandKind
from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy
from json_tree_path.query.evaluator import Evaluator, Plan, descendant_containers
from json_tree_path.query.slices import UNBOUNDED, SliceSpec
from json_tree_path.query.tokenizer import Cursor, parse

__all__ = [
    "UNBOUNDED",
    "Command",
    "CommandKind",
    "Cursor",
    "Evaluator",
    "EvaluatorConfig",
    "FilterPolicy",
    "Plan",
    "RootPolicy",
    "SliceSpec",
    "descendant_containers",
    "parse",
]
