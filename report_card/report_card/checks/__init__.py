"""Report Card check engine.

Turns the named checks of a report card config into executable checks,
runs them and scores the results.

Quick start::

    from report_card.checks import create_default_engine
    from report_card.loader import load_report_card_config

    engine = create_default_engine()
    config = load_report_card_config("project/report-card.yml")
    card = engine.run(config, root="project")
    print(card.score, card.failures)
"""

from report_card.checks.base import BaseCheck
from report_card.checks.engine import CheckEngine, create_default_engine
from report_card.checks.models import Outcome, ReportCard, Result, compute_score
from report_card.checks.registry import CheckRegistry, create_default_registry

__all__ = [
    "BaseCheck",
    "CheckEngine",
    "CheckRegistry",
    "Outcome",
    "ReportCard",
    "Result",
    "compute_score",
    "create_default_engine",
    "create_default_registry",
]
