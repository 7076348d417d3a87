"""Field-keyed rule registry.

A CheckList maps each field name to one Flatten rule built from every rule
registered for that field, and turns submitted (field, value) pairs into
Commit records.

Usage:
    from fieldcheck import Between, Exact, TypedValue, into_checklist

    checklist = into_checklist([
        ("A", Exact(expected="abc", message="caution")),
        ("B", Between(lower=-2, upper=2, message="caution").into_attention()),
        ("B", Between(lower=-5, upper=5, message="error").into_error()),
    ])
    commit = checklist.commit("B", TypedValue.of(3))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from loguru import logger

from fieldcheck.commit import Commit
from fieldcheck.errors import FlattenError, SignatureMismatchError
from fieldcheck.report import CommitReport
from fieldcheck.rules.base import Checker
from fieldcheck.rules.flatten import Flatten
from fieldcheck.value import TypedValue, ValueKind


class CheckList:
    """Read-only registry of composed rules, one per field.

    Built once from ordered (field, rule) pairs; never mutated afterwards,
    so a single instance can be shared between callers.
    """

    def __init__(self, entries: Mapping[str, Flatten]) -> None:
        self._entries: dict[str, Flatten] = dict(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Checker]]) -> CheckList:
        """Group pairs by field name and compose each group.

        Within a field, rules keep their input order. Fields keep the order
        of their first appearance.

        Args:
            pairs: Ordered (field name, rule) pairs.

        Returns:
            The built CheckList.

        Raises:
            SignatureMismatchError: If rules for one field expect different
                value kinds.
        """
        grouped: dict[str, list[Checker]] = {}
        for field, rule in pairs:
            grouped.setdefault(field, []).append(rule)

        entries: dict[str, Flatten] = {}
        for field, rules in grouped.items():
            try:
                entries[field] = Flatten.of(rules)
            except FlattenError as exc:
                logger.debug("Cannot compose rules for field {}: {}", field, exc.reason)
                raise SignatureMismatchError(field, exc.signatures) from exc
            logger.debug("Registered {} rule(s) for field {}", len(rules), field)

        logger.debug("Built checklist with {} field(s)", len(entries))
        return cls(entries)

    @property
    def fields(self) -> list[str]:
        """Registered field names in registration order."""
        return list(self._entries)

    def get(self, field: str) -> Flatten | None:
        return self._entries.get(field)

    def commit(self, field: str, value: TypedValue) -> Commit | None:
        """Evaluate a value for a field.

        Args:
            field: Field name to look up (exact match).
            value: The value to evaluate; it is stored in the returned Commit.

        Returns:
            The Commit, or None if no rules are registered for the field.

        Raises:
            InvalidKindError: If the value's kind is incompatible with one of
                the field's rules.
        """
        flat = self._entries.get(field)
        if flat is None:
            logger.debug("No rules registered for field {}", field)
            return None

        verdict = flat.check(value)
        logger.debug("Committed {}={!r}: {}", field, value.text, verdict)
        return Commit(field=field, value=value, verdict=verdict)

    def commit_all(self, values: Mapping[str, TypedValue]) -> CommitReport:
        """Commit every (field, value) pair and aggregate the outcome.

        Unknown fields are collected in the report rather than raised.
        InvalidKindError from any field propagates.
        """
        report = CommitReport()
        for field, value in values.items():
            commit = self.commit(field, value)
            if commit is None:
                logger.warning("Skipping unknown field {}", field)
                report.unknown_fields.append(field)
                continue
            report.commits.append(commit)

        logger.info(
            "Committed {} value(s): {} clear, {} attention, {} error, {} unknown",
            len(values),
            report.clear_count,
            report.attention_count,
            report.error_count,
            len(report.unknown_fields),
        )
        return report

    def items(self) -> dict[str, list[ValueKind]]:
        """Return the accepted value kinds for every registered field."""
        return {field: flat.expecting() for field, flat in self._entries.items()}

    def accepts(self, field: str, value: TypedValue) -> bool:
        """Check before submission whether a field takes the value's kind.

        Returns False for unknown fields.
        """
        flat = self._entries.get(field)
        if flat is None:
            return False
        return value.kind in flat.expecting()

    def __contains__(self, field: object) -> bool:
        return field in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CheckList(fields={self.fields!r})"


def into_checklist(pairs: Iterable[tuple[str, Checker]]) -> CheckList:
    """Build a CheckList from ordered (field, rule) pairs."""
    return CheckList.from_pairs(pairs)
