"""fieldcheck CLI application entry point.

Provides commands for listing the fields of a rule set and for committing
values against it.

Usage:
    fieldcheck fields <module:attribute>
    fieldcheck check <module:attribute> FIELD=VALUE...
    fieldcheck --verbose check <module:attribute> FIELD=VALUE...
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from fieldcheck.checklist import CheckList
from fieldcheck.errors import FlattenError, InvalidKindError, RulesetLoadError
from fieldcheck.value import TypedValue

app = typer.Typer(
    name="fieldcheck",
    help="Validate field values against composable severity rules.",
    no_args_is_help=True,
)

console = Console()


def _stderr_sink(message: str) -> None:
    sys.stderr.write(message)


def configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr at DEBUG when verbose, else WARNING."""
    logger.remove()
    logger.add(_stderr_sink, level="DEBUG" if verbose else "WARNING", colorize=False)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Validate field values against composable severity rules."""
    configure_logging(verbose)


def _load(reference: str) -> CheckList:
    from fieldcheck.ruleset import load_ruleset

    try:
        return load_ruleset(reference)
    except (RulesetLoadError, FlattenError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2) from e


@app.command()
def version() -> None:
    """Show the current version."""
    from fieldcheck import __version__

    console.print(f"fieldcheck {__version__}")


@app.command()
def fields(
    ruleset: Annotated[
        str,
        typer.Argument(help="Rule set reference as module:attribute"),
    ],
) -> None:
    """List registered fields and the value kinds each accepts."""
    from fieldcheck.cli.display import display_fields

    checklist = _load(ruleset)
    display_fields(checklist, console)


@app.command()
def check(
    ruleset: Annotated[
        str,
        typer.Argument(help="Rule set reference as module:attribute"),
    ],
    assignments: Annotated[
        list[str],
        typer.Argument(help="Values to commit, as FIELD=VALUE"),
    ],
    literal: Annotated[
        bool,
        typer.Option("--literal", "-l", help="Treat every value as Literal text"),
    ] = False,
) -> None:
    """Commit values against a rule set and show the resolved verdicts.

    Values that parse as numbers are submitted as Number unless --literal
    is given. Each field may appear once. Exits with code 1 if any value is
    rejected and with code 2 on malformed or repeated assignments.
    """
    from fieldcheck.cli.display import display_commits, display_summary

    values: dict[str, TypedValue] = {}
    for assignment in assignments:
        field, sep, raw = assignment.partition("=")
        if not sep or not field:
            console.print(
                f"[bold red]Error:[/bold red] Expected FIELD=VALUE, got '{escape(assignment)}'"
            )
            raise typer.Exit(code=2)
        if field in values:
            console.print(
                f"[bold red]Error:[/bold red] Field '{escape(field)}' given more than once"
            )
            raise typer.Exit(code=2)
        values[field] = TypedValue.literal(raw) if literal else TypedValue.parse(raw)

    checklist = _load(ruleset)

    try:
        report = checklist.commit_all(values)
    except InvalidKindError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    display_commits(report, console)
    console.print()
    display_summary(report, console)

    if not report.accepted or report.unknown_fields:
        raise typer.Exit(code=1)
