"""Severity wrapper that remaps a rule's Attention outcome.

The same base rule (e.g. a numeric range) can be registered twice at two
severities: a tight range reported as Attention and a wider range whose
Attention is promoted to Error.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from fieldcheck.rules.base import Checker, Rule, Verdict, VerdictLevel
from fieldcheck.value import TypedValue, ValueKind


class SeverityMode(StrEnum):
    """How a wrapped rule's Attention verdicts are reported.

    ATTENTION: Identity mapping.
    ERROR: Attention is escalated to Error, keeping the message.
    """

    ATTENTION = "ATTENTION"
    ERROR = "ERROR"


class Severity(Rule):
    """Decorator rule holding one wrapped rule and a mode flag."""

    rule: Checker = Field(..., description="The wrapped rule")
    mode: SeverityMode = Field(default=SeverityMode.ATTENTION, description="Remapping mode")

    def check(self, value: TypedValue) -> Verdict:
        verdict = self.rule.check(value)
        if self.mode == SeverityMode.ERROR and verdict.level == VerdictLevel.ATTENTION:
            return Verdict.error(verdict.message or "")
        return verdict

    def expecting(self) -> list[ValueKind]:
        return self.rule.expecting()


def attention(rule: Checker) -> Severity:
    """Wrap any checker in ATTENTION mode."""
    return Severity(rule=rule, mode=SeverityMode.ATTENTION)


def error(rule: Checker) -> Severity:
    """Wrap any checker in ERROR mode."""
    return Severity(rule=rule, mode=SeverityMode.ERROR)
