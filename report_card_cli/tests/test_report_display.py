"""Tests for report_card_cli/display.py -- Rich output formatting.

Rendered output is captured via a Console writing to a StringIO buffer
rather than stderr.
"""

from __future__ import annotations

import io
import json

from rich.console import Console

from report_card.checks.models import Outcome, ReportCard, Result
from report_card.checks.registry import create_default_registry
from report_card_cli.display import (
    _OUTCOME_COLOURS,
    _coloured_outcome,
    display_check_types,
    display_report_card,
    render_json,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes plain text to a StringIO buffer."""
    buf = io.StringIO()
    console = Console(file=buf, no_color=True, highlight=False, width=120)
    return console, buf


def _card() -> ReportCard:
    return ReportCard.from_results(
        {
            "zeta": Result.success(),
            "alpha": Result.failure("actual hash was: abc"),
            "mid": Result.warning("heads up"),
            "beta": Result.failure(),
        },
        ["unknown-one"],
    )


# ---------------------------------------------------------------------------
# Outcome colours
# ---------------------------------------------------------------------------


class TestColouredOutcome:
    def test_every_outcome_has_a_colour(self):
        assert set(_OUTCOME_COLOURS) == set(Outcome)

    def test_markup(self):
        assert _coloured_outcome(Outcome.FAILURE) == "[red]failure[/red]"
        assert _coloured_outcome(Outcome.SUCCESS) == "[green]success[/green]"
        assert _coloured_outcome(Outcome.WARNING) == "[yellow]warning[/yellow]"


# ---------------------------------------------------------------------------
# display_report_card
# ---------------------------------------------------------------------------


class TestDisplayReportCard:
    def test_sorted_by_name(self):
        console, buf = _capture_console()
        display_report_card(console, _card())
        output = buf.getvalue()
        positions = [output.index(f"  {name}") for name in ("alpha", "beta", "mid", "zeta")]
        assert positions == sorted(positions)

    def test_details_shown_for_failures_and_warnings(self):
        console, buf = _capture_console()
        display_report_card(console, _card())
        output = buf.getvalue()
        assert "-> actual hash was: abc" in output
        assert "-> heads up" in output

    def test_summary_line_last(self):
        console, buf = _capture_console()
        display_report_card(console, _card())
        lines = [line for line in buf.getvalue().splitlines() if line.strip()]
        assert lines[-1] == "50%  2 failures, 1 warnings"

    def test_skipped_listed(self):
        console, buf = _capture_console()
        display_report_card(console, _card())
        assert "unknown-one" in buf.getvalue()

    def test_empty_card(self):
        console, buf = _capture_console()
        display_report_card(console, ReportCard.from_results({}))
        output = buf.getvalue()
        assert "No checks were run." in output
        assert "100%  0 failures, 0 warnings" in output

    def test_markup_in_names_is_escaped(self):
        console, buf = _capture_console()
        display_report_card(console, ReportCard.from_results({"[bold]odd": Result.failure("[x]")}))
        output = buf.getvalue()
        assert "[bold]odd" in output
        assert "-> [x]" in output


# ---------------------------------------------------------------------------
# render_json
# ---------------------------------------------------------------------------


class TestRenderJson:
    def test_round_trips_through_json(self):
        payload = json.loads(render_json(_card()))
        assert payload["score"] == 50
        assert payload["skipped"] == ["unknown-one"]
        assert payload["results"]["alpha"] == {"outcome": "failure", "details": "actual hash was: abc"}

    def test_indented(self):
        assert '\n    "score": 50' in render_json(_card())


# ---------------------------------------------------------------------------
# display_check_types
# ---------------------------------------------------------------------------


class TestDisplayCheckTypes:
    def test_lists_tags_and_aliases(self):
        console, buf = _capture_console()
        display_check_types(console, create_default_registry())
        output = buf.getvalue()
        assert "FileMatchesJSONSchema" in output
        assert "CheckFileHasJSONSchema" in output
