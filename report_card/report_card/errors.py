"""Exception hierarchy shared by the loader, the check registry and the engine.

Reportable rule violations are never exceptions: they surface as
:class:`~report_card.checks.models.Result` values with a ``failure``
outcome.  Everything raised from here aborts the whole run.
"""

from __future__ import annotations


class ReportCardError(Exception):
    """Base class for all fatal report card errors."""


class ConfigLoadError(ReportCardError):
    """Raised when the report card config file cannot be read or parsed."""


class CheckConfigError(ReportCardError):
    """Raised when a check's configuration mapping has missing or malformed fields."""

    def __init__(self, check_name: str, check_type: str, detail: str) -> None:
        self.check_name = check_name
        self.check_type = check_type
        self.detail = detail
        super().__init__(f"invalid configuration for check '{check_name}' ({check_type}): {detail}")


class CheckExecutionError(ReportCardError):
    """Raised when a check hits a condition it cannot report as an outcome.

    The engine fills in ``check_name`` before re-raising so the CLI can
    say which check aborted the run.
    """

    def __init__(self, message: str, *, check_name: str | None = None) -> None:
        self.message = message
        self.check_name = check_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.check_name is None:
            return self.message
        return f"check '{self.check_name}' failed to execute: {self.message}"
