"""Report card config loader.

Reads ``report-card.yml`` and validates it into a
:class:`ReportCardConfig`.  Only the document shape is checked here:
each check's ``config`` mapping stays untyped until the registry builds
the check.

Example::

    version: "1"
    checks:
      readme-present:
        type: FileExists
        config:
          path: README.md
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from report_card.errors import ConfigLoadError

logger = logging.getLogger(__name__)


class CheckSpec(BaseModel):
    """Declarative description of one check, before construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(..., description="Type tag selecting the check implementation.")
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Check-specific configuration, validated when the check is built.",
    )

    @field_validator("config", mode="before")
    @classmethod
    def _empty_config(cls, v: Any) -> Any:
        return {} if v is None else v


class ReportCardConfig(BaseModel):
    """Top-level report card configuration.

    ``checks`` keeps the order the checks are declared in, which is the
    order the engine runs them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(..., description="Config format version.")
    checks: dict[str, CheckSpec] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("checks", mode="before")
    @classmethod
    def _empty_checks(cls, v: Any) -> Any:
        return {} if v is None else v


def parse_report_card_config(text: str, source: str = "<string>") -> ReportCardConfig:
    """Parse YAML *text* into a :class:`ReportCardConfig`.

    Raises
    ------
    ConfigLoadError
        If the text is not YAML or does not match the config shape.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"{source} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{source} must contain a mapping with 'version' and 'checks'")

    try:
        return ReportCardConfig.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '(root)'}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigLoadError(f"invalid report card config {source}: {details}") from exc


def load_report_card_config(path: Path | str) -> ReportCardConfig:
    """Read and parse the report card config at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"unable to read report card config {path}: {exc}") from exc

    config = parse_report_card_config(text, source=str(path))
    logger.debug("Loaded %d check(s) from %s (version %s)", len(config.checks), path, config.version)
    return config
