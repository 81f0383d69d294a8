"""Tests for EvaluatorConfig frozen dataclass and its policy StrEnums.

Covers:
- Default values (root_policy=IGNORE, filter_policy=RAISE)
- String values coerced to the enums
- Immutability (FrozenInstanceError on assignment)
- ValueError on unknown policy values
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_path.query.config import EvaluatorConfig, FilterPolicy, RootPolicy


class TestPolicies:
    def test_root_policy_members(self) -> None:
        assert {m.value for m in RootPolicy} == {"ignore", "reject"}

    def test_filter_policy_members(self) -> None:
        assert {m.value for m in FilterPolicy} == {"raise", "passthrough"}

    def test_is_str_subclass(self) -> None:
        assert isinstance(RootPolicy.IGNORE, str)


class TestEvaluatorConfigDefaults:
    def test_default_root_policy(self) -> None:
        assert EvaluatorConfig().root_policy is RootPolicy.IGNORE

    def test_default_filter_policy(self) -> None:
        assert EvaluatorConfig().filter_policy is FilterPolicy.RAISE


class TestEvaluatorConfigConstruction:
    def test_enum_values(self) -> None:
        config = EvaluatorConfig(
            root_policy=RootPolicy.REJECT, filter_policy=FilterPolicy.PASSTHROUGH
        )
        assert config.root_policy is RootPolicy.REJECT
        assert config.filter_policy is FilterPolicy.PASSTHROUGH

    def test_string_values_coerced(self) -> None:
        config = EvaluatorConfig(root_policy="reject", filter_policy="passthrough")  # type: ignore[arg-type]
        assert config.root_policy is RootPolicy.REJECT
        assert config.filter_policy is FilterPolicy.PASSTHROUGH

    def test_unknown_root_policy(self) -> None:
        with pytest.raises(ValueError, match="root_policy must be one of"):
            EvaluatorConfig(root_policy="strict")  # type: ignore[arg-type]

    def test_unknown_filter_policy(self) -> None:
        with pytest.raises(ValueError, match="filter_policy must be one of"):
            EvaluatorConfig(filter_policy="evaluate")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        config = EvaluatorConfig()
        with pytest.raises(FrozenInstanceError):
            config.root_policy = RootPolicy.REJECT  # type: ignore[misc]

    def test_equality(self) -> None:
        assert EvaluatorConfig() == EvaluatorConfig(root_policy="ignore")  # type: ignore[arg-type]
