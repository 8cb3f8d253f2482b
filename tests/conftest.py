"""Shared test fixtures."""
import pytest
import structlog

from numeric_ingestion.config import Settings


@pytest.fixture
def settings():
    """Create settings with explicit values so the environment cannot leak in."""
    return Settings(
        log_level="DEBUG",
        log_json=True,
        default_width="decimal",
        max_failure_ratio=0.25,
        treat_blank_as_missing=True,
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
