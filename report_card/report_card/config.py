"""Report card settings loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with REPORT_CARD_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="REPORT_CARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Working root that check paths are relative to
    workdir: Path = Path(".")

    # Config file, relative to workdir unless absolute
    config_file: Path = Path("report-card.yml")

    output_format: OutputFormat = OutputFormat.TEXT

    def config_path(self, workdir: Path | None = None) -> Path:
        """Return the config file path resolved against *workdir*."""
        root = workdir if workdir is not None else self.workdir
        return self.config_file if self.config_file.is_absolute() else root / self.config_file


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings (workdir=%s, config=%s)", settings.workdir, settings.config_file)

    return settings
