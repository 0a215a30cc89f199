"""Check Engine -- runs every configured check and builds the report card.

The :class:`CheckEngine` walks the configured checks in declaration
order, builds each through the :class:`CheckRegistry`, executes it and
collects the results.  Any :class:`CheckExecutionError` or
:class:`CheckConfigError` aborts the run: no partial report is built.
"""

from __future__ import annotations

import logging
from pathlib import Path

from report_card.checks.base import BaseCheck
from report_card.checks.models import ReportCard, Result, Timer
from report_card.checks.registry import CheckRegistry, create_default_registry
from report_card.errors import CheckExecutionError
from report_card.loader import ReportCardConfig

logger = logging.getLogger(__name__)


class CheckEngine:
    """Sequential orchestrator for report card checks.

    Parameters
    ----------
    registry:
        Optional pre-configured registry.  When ``None``, a new empty
        registry is created.
    """

    def __init__(self, registry: CheckRegistry | None = None) -> None:
        self._registry = registry or CheckRegistry()

    @property
    def registry(self) -> CheckRegistry:
        """The check registry backing this engine."""
        return self._registry

    def register(self, check_cls: type[BaseCheck]) -> None:
        """Register a check implementation with the engine."""
        self._registry.register(check_cls)

    def get_available_types(self) -> list[str]:
        """Return all registered type tags, sorted."""
        return self._registry.get_types()

    def run(self, config: ReportCardConfig, root: Path | str = ".") -> ReportCard:
        """Execute every configured check and return the report card.

        Parameters
        ----------
        config:
            The loaded report card configuration.
        root:
            Working root that relative check paths are resolved against.

        Raises
        ------
        CheckConfigError
            If a check's configuration cannot be turned into a check.
        CheckExecutionError
            If a check cannot complete; ``check_name`` is set on the error.
        """
        timer = Timer()
        timer.start()
        root = Path(root)

        results: dict[str, Result] = {}
        skipped: list[str] = []

        for name, spec in config.checks.items():
            check = self._registry.build(name, spec, root)
            if check is None:
                logger.warning("skipping %s...", name)
                skipped.append(name)
                continue

            logger.debug("Running check %s (%s)", name, check.type_tag)
            try:
                result = check.execute()
            except CheckExecutionError as exc:
                if exc.check_name is None:
                    exc.check_name = name
                raise
            logger.debug("Check %s: %s", name, result.outcome.value)
            results[name] = result

        card = ReportCard.from_results(results, skipped)
        logger.info(
            "Ran %d check(s) in %dms: score %d%%, %d failure(s), %d skipped",
            card.total,
            timer.elapsed_ms(),
            card.score,
            card.failures,
            len(skipped),
        )
        return card


def create_default_engine() -> CheckEngine:
    """Create a :class:`CheckEngine` with all built-in checks registered."""
    return CheckEngine(create_default_registry())
