"""Typed scalar values under evaluation.

A TypedValue holds the textual form of a value plus a kind tag. The tag is a
conformance hint: numeric conversion parses the text and can fail even for a
Number-tagged value.

Usage:
    from fieldcheck.value import TypedValue

    TypedValue.of(3)        # Number "3"
    TypedValue.of("abc")    # Literal "abc"
    TypedValue.parse("2.5") # Number "2.5" (CLI boundary helper)
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from fieldcheck.errors import ValueParseError


class ValueKind(StrEnum):
    """Kind tag carried by every TypedValue."""

    NUMBER = "Number"
    LITERAL = "Literal"


class TypedValue(BaseModel):
    """Immutable tagged scalar used as evaluation subject."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Lossless textual form of the value")
    kind: ValueKind = Field(..., description="Kind tag fixed at construction")

    @classmethod
    def number(cls, value: int | float | Decimal) -> TypedValue:
        """Build a Number-tagged value from a numeric primitive."""
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            msg = f"Expected an int, float or Decimal, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(text=str(value), kind=ValueKind.NUMBER)

    @classmethod
    def literal(cls, value: str) -> TypedValue:
        """Build a Literal-tagged value from text."""
        if not isinstance(value, str):
            msg = f"Expected a str, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(text=value, kind=ValueKind.LITERAL)

    @classmethod
    def of(cls, value: int | float | Decimal | str) -> TypedValue:
        """Dispatch on the Python type: numbers become Number, text Literal."""
        if isinstance(value, str):
            return cls.literal(value)
        return cls.number(value)

    @classmethod
    def parse(cls, raw: str) -> TypedValue:
        """Tag raw input as Number when it parses as a finite float.

        Used at the command-line boundary where every input arrives as text.
        """
        try:
            parsed = float(raw)
        except ValueError:
            return cls.literal(raw)
        if not math.isfinite(parsed):
            return cls.literal(raw)
        return cls(text=raw.strip(), kind=ValueKind.NUMBER)

    def is_kind_of(self, kind: ValueKind) -> bool:
        return self.kind == kind

    def to_float(self) -> float:
        """Convert the text to a float regardless of the kind tag.

        Raises:
            ValueParseError: If the text is not a valid number.
        """
        try:
            return float(self.text)
        except ValueError as exc:
            raise ValueParseError(self.text) from exc

    def __str__(self) -> str:
        return self.text
