"""Rich display helpers for terminal output.

Provides formatted display functions for registered fields, commit
verdicts and batch summaries using Rich tables.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fieldcheck.checklist import CheckList
from fieldcheck.report import CommitReport
from fieldcheck.rules.base import VerdictLevel

_LEVEL_STYLES = {
    VerdictLevel.CLEAR: "green",
    VerdictLevel.ATTENTION: "yellow",
    VerdictLevel.ERROR: "bold red",
}


def display_fields(checklist: CheckList, console: Console) -> None:
    """Print a table of registered fields and the value kinds they accept.

    Args:
        checklist: The CheckList to describe.
        console: Rich Console for output.
    """
    table = Table(title="Registered Fields", show_lines=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Rules", justify="right")
    table.add_column("Accepts")

    for field, kinds in checklist.items().items():
        flat = checklist.get(field)
        table.add_row(
            escape(field),
            str(len(flat) if flat is not None else 0),
            ", ".join(str(k) for k in kinds),
        )

    console.print(table)
    console.print(f"\n[dim]{len(checklist)} field(s) registered[/dim]")


def display_commits(report: CommitReport, console: Console) -> None:
    """Print one row per commit, coloured by verdict level.

    Args:
        report: CommitReport holding the commits to display.
        console: Rich Console for output.
    """
    if not report.commits:
        console.print("[dim]No values committed.[/dim]")
        return

    table = Table(title="Verdicts", show_lines=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Kind", style="dim")
    table.add_column("Verdict")
    table.add_column("Message")

    for commit in report.commits:
        level = commit.verdict.level
        table.add_row(
            escape(commit.field),
            escape(commit.value.text),
            str(commit.value.kind),
            Text(level.display_name, style=_LEVEL_STYLES[level]),
            escape(commit.verdict.message or ""),
        )

    console.print(table)


def display_summary(report: CommitReport, console: Console) -> None:
    """Print verdict counts and the overall acceptance status."""
    table = Table(title="Summary", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Clear", Text(str(report.clear_count), style="green"))
    attention_style = "yellow" if report.attention_count > 0 else "green"
    table.add_row("Attention", Text(str(report.attention_count), style=attention_style))
    error_style = "bold red" if report.error_count > 0 else "green"
    table.add_row("Error", Text(str(report.error_count), style=error_style))

    if report.unknown_fields:
        table.add_row(
            "Unknown Fields",
            Text(", ".join(report.unknown_fields), style="bold red"),
        )

    status = (
        Text("ACCEPTED", style="bold green")
        if report.accepted and not report.unknown_fields
        else Text("REJECTED", style="bold red")
    )
    table.add_row("Status", status)

    console.print(table)
