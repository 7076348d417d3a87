"""Composer that merges several same-signature rules into one.

Flatten runs every member rule against a value and resolves to the most
severe Verdict, so one field can carry independent checks (pattern AND
range) while still producing a single outcome.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger
from pydantic import Field, model_validator

from fieldcheck.errors import FlattenError
from fieldcheck.rules.base import Checker, Rule, Verdict
from fieldcheck.value import TypedValue, ValueKind


class Flatten(Rule):
    """Ordered, non-empty collection of rules sharing one signature.

    Construction fails with FlattenError when the collection is empty or
    when members disagree on expecting().
    """

    rules: tuple[Checker, ...] = Field(..., description="Member rules in declaration order")

    @model_validator(mode="after")
    def _validate_signatures(self) -> Flatten:
        if not self.rules:
            msg = "Cannot flatten an empty collection of rules"
            raise FlattenError(msg)

        signatures: list[list[ValueKind]] = []
        for rule in self.rules:
            sig = list(rule.expecting())
            if sig not in signatures:
                signatures.append(sig)
        if len(signatures) > 1:
            msg = f"Rules expect different value kinds ({len(signatures)} signatures)"
            raise FlattenError(msg, signatures)
        return self

    @classmethod
    def of(cls, rules: Iterable[Checker]) -> Flatten:
        """Build a Flatten from any ordered iterable of rules."""
        return cls(rules=tuple(rules))

    def check(self, value: TypedValue) -> Verdict:
        """Evaluate every member and return the most severe verdict.

        The first InvalidKindError raised by a member propagates and later
        members are not evaluated. Among members tied at the maximum
        severity the earliest one's verdict is returned.
        """
        worst = Verdict.clear()
        for rule in self.rules:
            verdict = rule.check(value)
            if verdict > worst:
                worst = verdict
        logger.debug("Flattened {} rule(s) to {}", len(self.rules), worst)
        return worst

    def expecting(self) -> list[ValueKind]:
        return list(self.rules[0].expecting())

    def __len__(self) -> int:
        return len(self.rules)


def into_flat(rules: Iterable[Checker]) -> Flatten:
    """Compose an iterable of rules into one Flatten rule."""
    return Flatten.of(rules)
