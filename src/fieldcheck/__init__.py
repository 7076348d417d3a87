"""fieldcheck: composable value validation with severity resolution.

Rules are registered per field, composed into one rule per field, and
evaluated into a single Clear / Attention / Error verdict wrapped in a
Commit record.

Usage:
    from fieldcheck import Between, Exact, TypedValue, into_checklist

    checklist = into_checklist([
        ("A", Exact(expected="abc", message="caution")),
        ("B", Between(lower=-2, upper=2, message="caution").into_attention()),
        ("B", Between(lower=-5, upper=5, message="error").into_error()),
    ])
    checklist.commit("A", TypedValue.of("abc"))
"""

from fieldcheck.checklist import CheckList, into_checklist
from fieldcheck.commit import Commit
from fieldcheck.errors import (
    CheckError,
    FieldCheckError,
    FlattenError,
    InvalidKindError,
    RulesetLoadError,
    SignatureMismatchError,
    ValueParseError,
)
from fieldcheck.report import CommitReport
from fieldcheck.rules import (
    AnyValue,
    Between,
    Checker,
    Custom,
    Exact,
    Flatten,
    Pattern,
    Rule,
    Severity,
    SeverityMode,
    Verdict,
    VerdictLevel,
    attention,
    error,
    into_flat,
)
from fieldcheck.value import TypedValue, ValueKind

__version__ = "0.1.0"

__all__ = [
    # Values
    "TypedValue",
    "ValueKind",
    # Rules
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
    # Registry
    "CheckList",
    "Commit",
    "CommitReport",
    "into_checklist",
    # Errors
    "CheckError",
    "FieldCheckError",
    "FlattenError",
    "InvalidKindError",
    "RulesetLoadError",
    "SignatureMismatchError",
    "ValueParseError",
]
