"""Tests for loading rule sets from module:attribute references."""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest

from fieldcheck.checklist import CheckList, into_checklist
from fieldcheck.errors import RulesetLoadError, SignatureMismatchError
from fieldcheck.rules.kinds import AnyValue, Between, Exact
from fieldcheck.ruleset import load_ruleset


@pytest.fixture()
def rules_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType("fieldcheck_test_rules")
    module.PAIRS = [  # type: ignore[attr-defined]
        ("A", Exact(expected="abc", message="caution")),
        ("B", Between(lower=0, upper=1, message="m")),
    ]
    module.CHECKS = into_checklist([("X", AnyValue())])  # type: ignore[attr-defined]
    module.BROKEN = [  # type: ignore[attr-defined]
        ("A", AnyValue()),
        ("A", Between(lower=0, upper=1, message="m")),
    ]
    module.NAME = "not rules"  # type: ignore[attr-defined]
    module.MAPPING = {"A": AnyValue()}  # type: ignore[attr-defined]
    module.TRIPLE = [("A", AnyValue(), "extra")]  # type: ignore[attr-defined]
    module.NOT_RULE = [("A", "not a rule")]  # type: ignore[attr-defined]
    module.INT_FIELD = [(1, AnyValue())]  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fieldcheck_test_rules", module)
    return module


class TestLoadRuleset:
    def test_loads_pairs(self, rules_module: types.ModuleType) -> None:
        checklist = load_ruleset("fieldcheck_test_rules:PAIRS")
        assert checklist.fields == ["A", "B"]

    def test_loads_checklist_as_is(self, rules_module: types.ModuleType) -> None:
        checklist = load_ruleset("fieldcheck_test_rules:CHECKS")
        assert isinstance(checklist, CheckList)
        assert checklist is rules_module.CHECKS

    @pytest.mark.parametrize("reference", ["no_colon", ":PAIRS", "fieldcheck_test_rules:"])
    def test_malformed_reference(self, reference: str) -> None:
        with pytest.raises(RulesetLoadError):
            load_ruleset(reference)

    def test_missing_module(self) -> None:
        with pytest.raises(RulesetLoadError, match="Cannot import"):
            load_ruleset("fieldcheck_no_such_module_xyz:PAIRS")

    def test_missing_attribute(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError, match="no attribute"):
            load_ruleset("fieldcheck_test_rules:MISSING")

    def test_string_attribute_rejected(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError):
            load_ruleset("fieldcheck_test_rules:NAME")

    def test_signature_mismatch_propagates(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(SignatureMismatchError):
            load_ruleset("fieldcheck_test_rules:BROKEN")


class TestMalformedTargets:
    def test_mapping_rejected(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError, match="dict"):
            load_ruleset("fieldcheck_test_rules:MAPPING")

    def test_item_must_be_pair(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError, match="item 0"):
            load_ruleset("fieldcheck_test_rules:TRIPLE")

    def test_rule_must_be_checker(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError, match="does not implement"):
            load_ruleset("fieldcheck_test_rules:NOT_RULE")

    def test_field_must_be_str(self, rules_module: types.ModuleType) -> None:
        with pytest.raises(RulesetLoadError, match="must be a str"):
            load_ruleset("fieldcheck_test_rules:INT_FIELD")


class TestImportFailures:
    @pytest.mark.parametrize(
        ("name", "body"),
        [
            ("fieldcheck_raises_on_import", "raise RuntimeError('boom')\n"),
            ("fieldcheck_bad_syntax", "PAIRS = [\n"),
        ],
    )
    def test_failing_module_wrapped(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str, body: str
    ) -> None:
        (tmp_path / f"{name}.py").write_text(body)
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(RulesetLoadError, match="failed during import"):
            load_ruleset(f"{name}:PAIRS")
