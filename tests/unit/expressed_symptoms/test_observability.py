"""
Tests for structlog setup in `expressed_symptoms/observability.py`.
"""

import logging
from collections.abc import Iterator

import pytest
import structlog

from expressed_symptoms.config import LoggingConfig
from expressed_symptoms.observability import configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


@pytest.mark.parametrize(
    "log_format,renderer",
    [
        ("json", structlog.processors.JSONRenderer),
        ("console", structlog.dev.ConsoleRenderer),
    ],
)
def test_configure_logging_picks_renderer(log_format: str, renderer: type) -> None:
    configure_logging(LoggingConfig(format=log_format))  # type: ignore[arg-type]

    processors = structlog.get_config()["processors"]
    assert structlog.is_configured()
    assert isinstance(processors[-1], renderer)


def test_configure_logging_sets_root_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))

    assert logging.getLogger().level == logging.WARNING
