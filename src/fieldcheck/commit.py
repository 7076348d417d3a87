"""Commit record produced by one evaluation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fieldcheck.rules.base import Verdict
from fieldcheck.value import TypedValue


class Commit(BaseModel):
    """Immutable record of one (field, value) evaluation.

    Identity is structural: two commits are equal when field, value and
    verdict are equal.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Field name the value was submitted for")
    value: TypedValue = Field(..., description="The evaluated value")
    verdict: Verdict = Field(..., description="Resolved verdict")

    @property
    def accepted(self) -> bool:
        """True unless the verdict is blocking."""
        return not self.verdict.is_blocking
