"""Commit report model.

Aggregates the commits of one batch submission into a structured report
with per-level counts, the worst verdict seen, fields that were not
registered, and an overall acceptance flag.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from fieldcheck.commit import Commit
from fieldcheck.rules.base import Verdict, VerdictLevel


class CommitReport(BaseModel):
    """Aggregated outcome of committing several values at once."""

    commits: list[Commit] = Field(default_factory=list, description="Commits in submission order")
    unknown_fields: list[str] = Field(
        default_factory=list, description="Submitted fields with no registered rules"
    )

    def _count(self, level: VerdictLevel) -> int:
        return sum(1 for c in self.commits if c.verdict.level == level)

    @property
    def clear_count(self) -> int:
        return self._count(VerdictLevel.CLEAR)

    @property
    def attention_count(self) -> int:
        return self._count(VerdictLevel.ATTENTION)

    @property
    def error_count(self) -> int:
        return self._count(VerdictLevel.ERROR)

    @property
    def worst(self) -> Verdict:
        """Most severe verdict among commits; Clear when there are none.

        Ties resolve to the earliest commit.
        """
        worst = Verdict.clear()
        for commit in self.commits:
            if commit.verdict > worst:
                worst = commit.verdict
        return worst

    @property
    def accepted(self) -> bool:
        """True if no commit carries an Error verdict."""
        return self.error_count == 0

    def by_level(self, level: VerdictLevel) -> list[Commit]:
        """Return commits whose verdict has the given level."""
        return [c for c in self.commits if c.verdict.level == level]

    def summary(self) -> dict[str, int]:
        return {
            "clear": self.clear_count,
            "attention": self.attention_count,
            "error": self.error_count,
            "unknown": len(self.unknown_fields),
        }
