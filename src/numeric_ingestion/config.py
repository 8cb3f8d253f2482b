"""Ingestion configuration via environment variables with NUMERIC_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from numeric_ingestion.models.literal import NumericWidth


class Settings(BaseSettings):
    """Numeric ingestion configuration.

    All settings are read from environment variables prefixed with
    ``NUMERIC_``. The parser itself takes no configuration; these settings
    only shape how bulk ingestion treats and reports failures.
    """

    model_config = SettingsConfigDict(env_prefix="NUMERIC_")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    # ── Column Parsing ───────────────────────────────────────────────────
    default_width: NumericWidth = NumericWidth.DECIMAL
    max_failure_ratio: float = Field(default=0.05, ge=0.0, le=1.0)
    treat_blank_as_missing: bool = True
