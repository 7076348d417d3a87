"""Tests for the fieldcheck CLI application."""

from __future__ import annotations

import sys
import types

import pytest
from typer.testing import CliRunner

from fieldcheck.cli.app import app
from fieldcheck.rules.kinds import AnyValue, Between, Exact

runner = CliRunner()

RULESET = "fieldcheck_cli_rules:PAIRS"


@pytest.fixture(autouse=True)
def rules_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType("fieldcheck_cli_rules")
    module.PAIRS = [  # type: ignore[attr-defined]
        ("A", Exact(expected="abc", message="caution")),
        ("B", Between(lower=-2, upper=2, message="caution").into_attention()),
        ("B", Between(lower=-5, upper=5, message="error").into_error()),
        ("C", AnyValue()),
    ]
    module.BROKEN = [  # type: ignore[attr-defined]
        ("A", AnyValue()),
        ("A", Between(lower=0, upper=1, message="m")),
    ]
    module.MAPPING = {"A": AnyValue()}  # type: ignore[attr-defined]
    module.TRIPLE = [("A", AnyValue(), "extra")]  # type: ignore[attr-defined]
    module.NOT_RULE = [("A", "not a rule")]  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fieldcheck_cli_rules", module)
    return module


class TestVersionCommand:
    def test_version_exits_zero(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "fieldcheck" in result.output


class TestFieldsCommand:
    def test_lists_fields(self) -> None:
        result = runner.invoke(app, ["fields", RULESET])
        assert result.exit_code == 0
        assert "Registered Fields" in result.output
        assert "3 field(s) registered" in result.output

    def test_bad_reference_exits_two(self) -> None:
        result = runner.invoke(app, ["fields", "nope"])
        assert result.exit_code == 2
        assert "Error" in result.output

    def test_signature_mismatch_exits_two(self) -> None:
        result = runner.invoke(app, ["fields", "fieldcheck_cli_rules:BROKEN"])
        assert result.exit_code == 2
        assert "Error" in result.output

    @pytest.mark.parametrize("attribute", ["MAPPING", "TRIPLE", "NOT_RULE"])
    def test_malformed_ruleset_exits_two(self, attribute: str) -> None:
        result = runner.invoke(app, ["fields", f"fieldcheck_cli_rules:{attribute}"])
        assert result.exit_code == 2
        assert "Error" in result.output


class TestCheckCommand:
    def test_clear_values_exit_zero(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "A=abc", "B=0"])
        assert result.exit_code == 0
        assert "ACCEPTED" in result.output

    def test_attention_still_accepted(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "B=3"])
        assert result.exit_code == 0
        assert "Attention" in result.output

    def test_error_exits_one(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "B=6"])
        assert result.exit_code == 1
        assert "REJECTED" in result.output

    def test_unknown_field_exits_one(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "Z=1"])
        assert result.exit_code == 1
        assert "Unknown" in result.output

    def test_literal_flag_causes_kind_error(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "--literal", "B=1"])
        assert result.exit_code == 1
        assert "Invalid kind" in result.output

    def test_malformed_assignment_exits_two(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "B"])
        assert result.exit_code == 2
        assert "FIELD=VALUE" in result.output

    def test_verbose_flag_accepted(self) -> None:
        result = runner.invoke(app, ["--verbose", "check", RULESET, "C=x"])
        assert result.exit_code == 0

    def test_repeated_field_exits_two(self) -> None:
        result = runner.invoke(app, ["check", RULESET, "B=6", "B=0"])
        assert result.exit_code == 2
        assert "more than once" in result.output
