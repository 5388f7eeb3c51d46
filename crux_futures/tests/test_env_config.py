"""Environment-driven configuration tests."""
from __future__ import annotations

from crux_futures.config import FutureConfig, get_future_config
from crux_futures.config.env import parse_env_bool, parse_env_str


def test_defaults_when_env_unset(monkeypatch):
    for name in ("CRUX_FUTURES_LOG_LEVEL", "CRUX_FUTURES_LOG_JSON", "CRUX_FUTURES_METRICS"):
        monkeypatch.delenv(name, raising=False)
    assert get_future_config() == FutureConfig("WARNING", True, True)  # nosec B101 - pytest assert in tests


def test_env_overrides_and_cache_refresh(monkeypatch):
    monkeypatch.setenv("CRUX_FUTURES_LOG_LEVEL", "debug")
    monkeypatch.setenv("CRUX_FUTURES_LOG_JSON", "off")
    first = get_future_config()
    assert first.log_level == "DEBUG" and first.json_logs is False  # nosec B101 - pytest assert in tests
    assert get_future_config() is first  # nosec B101 - pytest assert in tests

    monkeypatch.setenv("CRUX_FUTURES_METRICS", "no")
    second = get_future_config()
    assert second is not first and second.metrics_enabled is False  # nosec B101 - pytest assert in tests


def test_parse_env_bool(monkeypatch):
    monkeypatch.setenv("CRUX_FUTURES_TEST_FLAG", " YES ")
    assert parse_env_bool("CRUX_FUTURES_TEST_FLAG", False) is True  # nosec B101 - pytest assert in tests
    monkeypatch.setenv("CRUX_FUTURES_TEST_FLAG", "0")
    assert parse_env_bool("CRUX_FUTURES_TEST_FLAG", True) is False  # nosec B101 - pytest assert in tests
    monkeypatch.setenv("CRUX_FUTURES_TEST_FLAG", "maybe")
    assert parse_env_bool("CRUX_FUTURES_TEST_FLAG", True) is True  # nosec B101 - pytest assert in tests
    monkeypatch.delenv("CRUX_FUTURES_TEST_FLAG")
    assert parse_env_bool("CRUX_FUTURES_TEST_FLAG", False) is False  # nosec B101 - pytest assert in tests


def test_parse_env_str(monkeypatch):
    monkeypatch.setenv("CRUX_FUTURES_TEST_STR", "  ")
    assert parse_env_str("CRUX_FUTURES_TEST_STR", "dflt") == "dflt"  # nosec B101 - pytest assert in tests
    monkeypatch.setenv("CRUX_FUTURES_TEST_STR", " info ")
    assert parse_env_str("CRUX_FUTURES_TEST_STR", None) == "info"  # nosec B101 - pytest assert in tests
