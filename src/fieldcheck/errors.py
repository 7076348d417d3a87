"""Exception hierarchy for fieldcheck.

Two disjoint channels are modelled here:

- Construction-time failures (FlattenError, SignatureMismatchError): a rule
  set cannot be composed because its members disagree on accepted kinds.
- Evaluation-time failures (CheckError, InvalidKindError): a value's kind is
  incompatible with a rule that needs a specific kind.

Verdicts (Clear/Attention/Error) are results, never exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldcheck.value import ValueKind


class FieldCheckError(Exception):
    """Base class for every error raised by fieldcheck."""


class FlattenError(FieldCheckError):
    """Raised when rules cannot be composed into a single Flatten rule."""

    def __init__(
        self,
        reason: str,
        signatures: list[list[ValueKind]] | None = None,
    ) -> None:
        self.reason = reason
        self.signatures = signatures or []
        super().__init__(reason)


class SignatureMismatchError(FlattenError):
    """Raised when rules registered under one field expect different kinds.

    Carries the offending field name and every distinct signature seen,
    in first-seen order.
    """

    def __init__(self, field: str, signatures: list[list[ValueKind]]) -> None:
        self.field = field
        rendered = ", ".join(
            "[" + ", ".join(str(k) for k in sig) + "]" for sig in signatures
        )
        super().__init__(
            f"Rules for field '{field}' expect different value kinds: {rendered}",
            signatures,
        )


class CheckError(FieldCheckError):
    """Base class for failures raised while evaluating a rule."""


class InvalidKindError(CheckError):
    """Raised when a rule is given a value of a kind it cannot evaluate."""

    def __init__(self, value_kind: ValueKind, expected: list[ValueKind]) -> None:
        self.value_kind = value_kind
        self.expected = expected
        super().__init__(
            f"Invalid kind: got {value_kind}, expected one of "
            + ", ".join(str(k) for k in expected)
        )


class ValueParseError(FieldCheckError, ValueError):
    """Raised when a value's text cannot be converted to a number."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Cannot convert {text!r} to a number")


class RulesetLoadError(FieldCheckError):
    """Raised when a rule set cannot be imported from a module reference."""
