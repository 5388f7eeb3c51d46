"""Unified configuration layer for crux_futures.

Goals
-----
* Centralize defaults (log level, log format, metrics toggle).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (``CRUX_FUTURES_*``)
* Provide a single call site: ``get_future_config()``.

Supported environment variables (all optional):
    CRUX_FUTURES_LOG_LEVEL   logging level name (default WARNING)
    CRUX_FUTURES_LOG_JSON    emit JSON lines (default true)
    CRUX_FUTURES_METRICS     record settlement counters (default true)

The configuration is cached per process and refreshed only when one of the
variables above changes, so tests can adjust it at runtime via monkeypatch.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .defaults import (
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    DEFAULT_METRICS_ENABLED,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    ENV_METRICS,
)
from .env import parse_env_bool, parse_env_str


@dataclass(frozen=True)
class FutureConfig:
    """Container for normalized package settings.

    Attributes:
        log_level: Level name applied to the shared ``crux_futures`` logger.
        json_logs: Whether the managed console handler emits JSON lines.
        metrics_enabled: Whether settlements are recorded into the process
            wide settlement counters.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = DEFAULT_LOG_JSON
    metrics_enabled: bool = DEFAULT_METRICS_ENABLED


_CACHED: Optional[FutureConfig] = None
_ENV_GUARD: Optional[str] = None


def _env_guard() -> str:
    return "/".join(os.getenv(name, "") for name in (ENV_LOG_LEVEL, ENV_LOG_JSON, ENV_METRICS))


def get_future_config() -> FutureConfig:
    """Return the process-cached `FutureConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    guard = _env_guard()
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    _CACHED = FutureConfig(
        log_level=(parse_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        json_logs=parse_env_bool(ENV_LOG_JSON, DEFAULT_LOG_JSON),
        metrics_enabled=parse_env_bool(ENV_METRICS, DEFAULT_METRICS_ENABLED),
    )
    _ENV_GUARD = guard
    return _CACHED


def reset_future_config_cache() -> None:
    """Drop the cached configuration so the next read re-parses the environment."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603
    _CACHED = None
    _ENV_GUARD = None


__all__ = ["FutureConfig", "get_future_config", "reset_future_config_cache"]
