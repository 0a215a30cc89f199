"""Data models for the report card check engine.

Defines the outcome enum, the immutable :class:`Result` every check
produces, and the :class:`ReportCard` aggregate with its score.
"""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from enum import Enum
from fractions import Fraction

from pydantic import BaseModel, ConfigDict, Field


class Outcome(str, Enum):
    """Outcome of a single check execution.

    ``WARNING`` is part of the taxonomy but no built-in check produces it.
    """

    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


class Result(BaseModel):
    """The outcome of one check execution, never mutated afterwards."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome = Field(..., description="Outcome of the check execution.")
    details: str = Field(default="", description="Human-readable context for the outcome.")

    @classmethod
    def success(cls) -> Result:
        return cls(outcome=Outcome.SUCCESS)

    @classmethod
    def failure(cls, details: str = "") -> Result:
        return cls(outcome=Outcome.FAILURE, details=details)

    @classmethod
    def warning(cls, details: str = "") -> Result:
        return cls(outcome=Outcome.WARNING, details=details)


def compute_score(results: Mapping[str, Result]) -> int:
    """Return the percentage of results that did not fail, rounded half-up.

    Only ``failure`` outcomes subtract from the score; warnings count as
    passing.  An empty result set scores 100.
    """
    total = len(results)
    if total == 0:
        return 100
    failures = sum(1 for r in results.values() if r.outcome == Outcome.FAILURE)
    exact = Fraction(100 * (total - failures), total)
    return math.floor(exact + Fraction(1, 2))


class ReportCard(BaseModel):
    """Score and full result mapping for one completed run."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Percentage of checks that did not fail.")
    results: dict[str, Result] = Field(
        default_factory=dict,
        description="Check name to result, in configuration order.",
    )
    skipped: list[str] = Field(
        default_factory=list,
        description="Checks whose type tag is not registered; they carry no result.",
    )

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> int:
        return sum(1 for r in self.results.values() if r.outcome == Outcome.FAILURE)

    @property
    def warnings(self) -> int:
        return sum(1 for r in self.results.values() if r.outcome == Outcome.WARNING)

    @property
    def successes(self) -> int:
        return sum(1 for r in self.results.values() if r.outcome == Outcome.SUCCESS)

    @staticmethod
    def from_results(results: Mapping[str, Result], skipped: list[str] | None = None) -> ReportCard:
        """Build a report card from a finished result mapping."""
        return ReportCard(
            score=compute_score(results),
            results=dict(results),
            skipped=list(skipped or []),
        )


class Timer:
    """Simple monotonic timer for measuring run duration."""

    def __init__(self) -> None:
        self._start: float = 0.0

    def start(self) -> None:
        self._start = time.monotonic()

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self._start) * 1000)
