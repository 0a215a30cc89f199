"""Report card CLI application -- Typer-based developer interface.

Provides ``run`` to execute the checks declared in ``report-card.yml``
and ``types`` to list the registered check types.  Human-readable output
goes to *stderr* via Rich; JSON goes to *stdout* so pipelines can
compose cleanly.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from report_card.checks import create_default_engine, create_default_registry
from report_card.config import OutputFormat, load_settings
from report_card.errors import ReportCardError
from report_card.loader import load_report_card_config
from report_card_cli.display import display_check_types, display_report_card, render_json

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="report-card",
    help="Report Card - score a project against a declarative list of checks.",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Exit codes: 0 = report produced, 1 = below --min-score, 2 = run aborted.
EXIT_BELOW_MIN_SCORE = 1
EXIT_ABORTED = 2


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command(name="run")
def run_command(
    workdir: Path | None = typer.Argument(
        None,
        help="Project root the checks run against. Defaults to REPORT_CARD_WORKDIR or '.'.",
        exists=True,
        file_okay=False,
        resolve_path=True,
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the report card config. Defaults to report-card.yml in the project root.",
    ),
    output_format: OutputFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text or json.",
    ),
    min_score: int | None = typer.Option(
        None,
        "--min-score",
        min=0,
        max=100,
        help="Exit with code 1 when the score is below this percentage.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each check as it runs.",
    ),
) -> None:
    """Run every configured check and print the report card.

    Examples::

        report-card run .
        report-card run ./my-project --format json
        report-card run . --config ci/report-card.yml --min-score 80
    """
    settings = load_settings()
    _configure_logging(verbose or settings.debug)

    root = workdir if workdir is not None else settings.workdir
    path = config_path if config_path is not None else settings.config_path(root)

    try:
        config = load_report_card_config(path)
        card = create_default_engine().run(config, root)
    except ReportCardError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(code=EXIT_ABORTED) from exc

    fmt = output_format if output_format is not None else settings.output_format
    if fmt == OutputFormat.JSON:
        sys.stdout.write(render_json(card) + "\n")
    else:
        display_report_card(console, card)

    if min_score is not None and card.score < min_score:
        raise typer.Exit(code=EXIT_BELOW_MIN_SCORE)


@app.command(name="types")
def types_command() -> None:
    """List the registered check types and their legacy aliases."""
    display_check_types(console, create_default_registry())
