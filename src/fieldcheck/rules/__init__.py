"""Validation rules for field values.

Rules are organized by role:
- base: Verdict model, Checker protocol, Rule base class
- kinds: built-in rule vocabulary (AnyValue, Exact, Pattern, Between, Custom)
- severity: wrapper that escalates Attention to Error
- flatten: composer resolving several rules to the most severe verdict
"""

from fieldcheck.rules.base import (
    Checker,
    Rule,
    Verdict,
    VerdictLevel,
)
from fieldcheck.rules.flatten import Flatten, into_flat
from fieldcheck.rules.kinds import AnyValue, Between, Custom, Exact, Pattern
from fieldcheck.rules.severity import Severity, SeverityMode, attention, error

__all__ = [
    "AnyValue",
    "Between",
    "Checker",
    "Custom",
    "Exact",
    "Flatten",
    "Pattern",
    "Rule",
    "Severity",
    "SeverityMode",
    "Verdict",
    "VerdictLevel",
    "attention",
    "error",
    "into_flat",
]
