"""Built-in rule kinds.

- AnyValue: accepts everything
- Exact: textual form equals an expected string
- Pattern: textual form matches a regular expression
- Between: numeric value inside an inclusive range
- Custom: escape hatch delegating to any external Checker

Exact, Pattern and Between report a miss as Attention; wrap them with
into_error() to report the miss as Error instead.
"""

from __future__ import annotations

import math
import re

from pydantic import Field, model_validator

from fieldcheck.rules.base import Checker, Rule, Verdict
from fieldcheck.value import TypedValue, ValueKind

_ANY_KIND = [ValueKind.NUMBER, ValueKind.LITERAL]


class AnyValue(Rule):
    """Always Clear."""

    def check(self, value: TypedValue) -> Verdict:
        return Verdict.clear()

    def expecting(self) -> list[ValueKind]:
        return list(_ANY_KIND)


class Exact(Rule):
    """Clear when the value's text equals `expected` exactly."""

    expected: str = Field(..., description="Text the value must equal")
    message: str = Field(..., description="Message reported on mismatch")

    def check(self, value: TypedValue) -> Verdict:
        if str(value) == self.expected:
            return Verdict.clear()
        return Verdict.attention(self.message)

    def expecting(self) -> list[ValueKind]:
        return list(_ANY_KIND)


class Pattern(Rule):
    """Clear when the value's text matches `pattern` anywhere.

    The search is unanchored; use ^ and $ in the pattern to match the
    whole text.
    """

    pattern: re.Pattern[str] = Field(..., description="Compiled regular expression")
    message: str = Field(..., description="Message reported on mismatch")

    def check(self, value: TypedValue) -> Verdict:
        if self.pattern.search(str(value)):
            return Verdict.clear()
        return Verdict.attention(self.message)

    def expecting(self) -> list[ValueKind]:
        return list(_ANY_KIND)


class Between(Rule):
    """Clear when a Number value lies in [lower, upper], bounds inclusive.

    Literal values are rejected with InvalidKindError whatever their text.
    """

    lower: float = Field(..., description="Inclusive lower bound")
    upper: float = Field(..., description="Inclusive upper bound")
    message: str = Field(..., description="Message reported when out of range")

    @model_validator(mode="after")
    def _validate_bounds(self) -> Between:
        if math.isnan(self.lower) or math.isnan(self.upper):
            msg = f"bounds must be numbers, got lower={self.lower} upper={self.upper}"
            raise ValueError(msg)
        if self.lower > self.upper:
            msg = f"lower bound {self.lower} is greater than upper bound {self.upper}"
            raise ValueError(msg)
        return self

    def check(self, value: TypedValue) -> Verdict:
        self.require_kind(value)
        number = value.to_float()
        if self.lower <= number <= self.upper:
            return Verdict.clear()
        return Verdict.attention(self.message)

    def expecting(self) -> list[ValueKind]:
        return [ValueKind.NUMBER]


class Custom(Rule):
    """Delegates to an arbitrary external rule unchanged."""

    rule: Checker = Field(..., description="Any object implementing check/expecting")

    def check(self, value: TypedValue) -> Verdict:
        return self.rule.check(value)

    def expecting(self) -> list[ValueKind]:
        return list(self.rule.expecting())
