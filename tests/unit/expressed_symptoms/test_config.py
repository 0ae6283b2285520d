"""
Tests for configuration management in `expressed_symptoms/config.py`.

Covers:
- Environment parsing and debug defaults
- Logging level coercion to the expected Literal
- Tracking switches parsed from the environment
- get_config cache behavior
- AppConfig validation (debug only allowed in development)
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from expressed_symptoms.config import (
    AppConfig,
    LoggingConfig,
    TrackingConfig,
    get_config,
    load_config_from_env,
)


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    """Ensure get_config cache is cleared before and after each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "SYMPTOM_LOG_REPORTS",
        "SYMPTOM_WARN_ON_OUT_OF_ORDER",
    ):
        monkeypatch.delenv(name, raising=False)


def test_load_config_dev_defaults() -> None:
    config = load_config_from_env()

    assert config.environment == "development"
    assert config.debug is True
    assert config.logging.format == "console"
    assert config.logging.level == "INFO"
    assert config.tracking == TrackingConfig()
    assert config.tracking.log_reports is False


@pytest.mark.parametrize(
    "raw,expected",
    [("dev", "development"), ("STAGING", "staging"), ("prod", "production"), ("x", "production")],
)
def test_environment_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("ENVIRONMENT", raw)

    config = load_config_from_env()

    assert config.environment == expected
    assert config.debug is (expected == "development")


def test_production_defaults_to_json_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    assert load_config_from_env().logging.format == "json"

    monkeypatch.setenv("LOG_FORMAT", "console")
    assert load_config_from_env().logging.format == "console"


def test_logging_level_literal_coercion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")

    # Unknown level should coerce to INFO
    monkeypatch.setenv("LOG_LEVEL", "unknown")
    config = load_config_from_env()
    assert config.logging.level == "INFO"

    # Known level should pass through
    monkeypatch.setenv("LOG_LEVEL", "error")
    config = load_config_from_env()
    assert config.logging.level == "ERROR"


def test_tracking_switches_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SYMPTOM_LOG_REPORTS", "on")
    monkeypatch.setenv("SYMPTOM_WARN_ON_OUT_OF_ORDER", "yes")

    config = load_config_from_env()

    assert config.tracking.log_reports is True
    assert config.tracking.warn_on_out_of_order is True


def test_get_config_cache() -> None:
    c1 = get_config()
    c2 = get_config()
    assert c1 is c2  # same object due to lru_cache


def test_app_config_debug_only_in_dev_validation() -> None:
    with pytest.raises(ValueError, match="debug mode is only allowed"):
        AppConfig(
            environment="production",
            debug=True,
            tracking=TrackingConfig(),
            logging=LoggingConfig(),
        )


def test_invalid_logging_level_rejected() -> None:
    with pytest.raises(ValueError):
        LoggingConfig(level="LOUD")  # type: ignore[arg-type]
