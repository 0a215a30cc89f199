"""Rich output formatting for the report card CLI.

Human-readable functions write to a :class:`rich.console.Console`
instance (typically bound to *stderr*) so that JSON on *stdout* is never
polluted with decoration.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from report_card.checks.models import Outcome, ReportCard
from report_card.checks.registry import CheckRegistry

# ---------------------------------------------------------------------------
# Outcome colour mapping
# ---------------------------------------------------------------------------

_OUTCOME_COLOURS: dict[Outcome, str] = {
    Outcome.SUCCESS: "green",
    Outcome.WARNING: "yellow",
    Outcome.FAILURE: "red",
}


def _coloured_outcome(outcome: Outcome) -> str:
    """Return a Rich markup string with the outcome colour-coded."""
    colour = _OUTCOME_COLOURS.get(outcome, "white")
    return f"[{colour}]{outcome.value}[/{colour}]"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def render_json(card: ReportCard) -> str:
    """Serialise a report card as an indented JSON document."""
    return json.dumps(card.model_dump(mode="json"), indent=4)


# ---------------------------------------------------------------------------
# Report card listing
# ---------------------------------------------------------------------------


def display_report_card(console: Console, card: ReportCard) -> None:
    """Render a finished report card.

    Results are listed sorted by check name.  Failures and warnings show
    their details on an indented line below.  The last line is the
    summary: ``{score}%  {failures} failures, {warnings} warnings``.

    Parameters
    ----------
    console:
        Rich console to write to (typically stderr).
    card:
        The report card to display.
    """
    console.print(Panel("[bold]Report Card[/bold]", border_style="blue", expand=False))

    if not card.results:
        console.print("[dim]No checks were run.[/dim]")

    for name in sorted(card.results):
        result = card.results[name]
        console.print(f"{_coloured_outcome(result.outcome)}  {escape(name)}")
        if result.outcome != Outcome.SUCCESS and result.details:
            console.print(f"         -> {escape(result.details)}")

    if card.skipped:
        console.print(f"\n[dim]Skipped (unknown type): {escape(', '.join(sorted(card.skipped)))}[/dim]")

    console.print(
        f"\n[cyan]{card.score}%[/cyan]  "
        f"[red]{card.failures} failures[/red], "
        f"[yellow]{card.warnings} warnings[/yellow]"
    )


# ---------------------------------------------------------------------------
# Registered types
# ---------------------------------------------------------------------------


def display_check_types(console: Console, registry: CheckRegistry) -> None:
    """Render the registered check type tags and their aliases."""
    table = Table(title="Check Types", show_lines=False, pad_edge=True, expand=False)
    table.add_column("Type", style="bold")
    table.add_column("Aliases", style="dim")

    for tag in registry.get_types():
        table.add_row(tag, ", ".join(registry.aliases_for(tag)) or "-")

    console.print(table)
