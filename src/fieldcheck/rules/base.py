"""Base models for field validation rules.

Defines the core abstractions: VerdictLevel, Verdict, the Checker protocol
and the Rule base class. All built-in rule kinds subclass Rule and implement
check() and expecting(); any external object with the same two methods is a
rule too.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fieldcheck.errors import CheckError, InvalidKindError
from fieldcheck.value import TypedValue, ValueKind

if TYPE_CHECKING:
    from fieldcheck.rules.severity import Severity

__all__ = [
    "CheckError",
    "Checker",
    "InvalidKindError",
    "Rule",
    "Verdict",
    "VerdictLevel",
]

_RANKS = {"CLEAR": 0, "ATTENTION": 1, "ERROR": 2}


class VerdictLevel(StrEnum):
    """Severity of a verdict, ordered CLEAR < ATTENTION < ERROR.

    CLEAR: Value is acceptable.
    ATTENTION: Value is accepted but mildly concerning.
    ERROR: Value is unacceptable.
    """

    CLEAR = "CLEAR"
    ATTENTION = "ATTENTION"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        """Position in the severity order (0 is the unique minimum)."""
        return _RANKS[self.value]

    @property
    def display_name(self) -> str:
        """Human-friendly display name."""
        return self.value.capitalize()


class Verdict(BaseModel):
    """Outcome of evaluating one value against a rule.

    Ordering compares severity only; the message is payload. Two ATTENTION
    verdicts are order-equal whatever their messages, likewise two ERROR
    verdicts. Equality (==) remains structural.
    """

    model_config = ConfigDict(frozen=True)

    level: VerdictLevel = Field(..., description="Severity level")
    message: str | None = Field(default=None, description="Message for non-clear verdicts")

    @model_validator(mode="after")
    def _validate_message(self) -> Verdict:
        if self.level == VerdictLevel.CLEAR and self.message is not None:
            msg = "a CLEAR verdict carries no message"
            raise ValueError(msg)
        if self.level != VerdictLevel.CLEAR and self.message is None:
            msg = f"a {self.level} verdict requires a message"
            raise ValueError(msg)
        return self

    @classmethod
    def clear(cls) -> Verdict:
        return cls(level=VerdictLevel.CLEAR)

    @classmethod
    def attention(cls, message: str) -> Verdict:
        return cls(level=VerdictLevel.ATTENTION, message=message)

    @classmethod
    def error(cls, message: str) -> Verdict:
        return cls(level=VerdictLevel.ERROR, message=message)

    @property
    def rank(self) -> int:
        return self.level.rank

    @property
    def is_clear(self) -> bool:
        return self.level == VerdictLevel.CLEAR

    @property
    def is_blocking(self) -> bool:
        """True when the value must be rejected."""
        return self.level == VerdictLevel.ERROR

    def same_severity(self, other: Verdict) -> bool:
        return self.rank == other.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        if self.message is None:
            return self.level.display_name
        return f"{self.level.display_name}({self.message})"


@runtime_checkable
class Checker(Protocol):
    """Capability every validation rule provides.

    check() returns a Verdict, or raises InvalidKindError when the value's
    kind is incompatible with the rule. expecting() lists the value kinds
    the rule accepts, in a stable order.
    """

    def check(self, value: TypedValue) -> Verdict: ...

    def expecting(self) -> list[ValueKind]: ...


class Rule(BaseModel):
    """Abstract base class for built-in validation rules.

    Subclasses must implement check() and expecting(). Rules are immutable
    once constructed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @abstractmethod
    def check(self, value: TypedValue) -> Verdict:
        """Evaluate a value.

        Args:
            value: The typed value under evaluation.

        Returns:
            The rule's Verdict for the value.

        Raises:
            InvalidKindError: If the value's kind is not one this rule accepts.
        """
        ...

    @abstractmethod
    def expecting(self) -> list[ValueKind]:
        """Return the value kinds this rule accepts."""
        ...

    def require_kind(self, value: TypedValue) -> None:
        """Raise InvalidKindError unless the value's kind is expected."""
        expected = self.expecting()
        if value.kind not in expected:
            raise InvalidKindError(value.kind, expected)

    def into_attention(self) -> Severity:
        """Wrap this rule so its verdicts keep their severity."""
        from fieldcheck.rules.severity import Severity, SeverityMode

        return Severity(rule=self, mode=SeverityMode.ATTENTION)

    def into_error(self) -> Severity:
        """Wrap this rule so Attention verdicts are escalated to Error."""
        from fieldcheck.rules.severity import Severity, SeverityMode

        return Severity(rule=self, mode=SeverityMode.ERROR)
