"""Pytest configuration for the crux_futures test suite.

Async scenarios are driven with ``asyncio.run`` inside plain tests; the
fixtures here isolate process-wide state (config cache, settlement counters)
between tests.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

import pytest

from crux_futures.base.metrics import FutureSettlementCounters
from crux_futures.config import reset_future_config_cache


class ListHandler(logging.Handler):
    """Collects records emitted to the logger it is attached to."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """Drop the cached env configuration before and after every test."""

    reset_future_config_cache()
    yield
    reset_future_config_cache()


@pytest.fixture()
def counters(monkeypatch: pytest.MonkeyPatch) -> FutureSettlementCounters:
    """Route engine metrics into a fresh counters instance for one test."""

    fresh = FutureSettlementCounters(scope="test")
    monkeypatch.setattr(
        "crux_futures.futures.cancelable_future.get_settlement_counters",
        lambda: fresh,
    )
    return fresh


@pytest.fixture()
def futures_log() -> Iterator[ListHandler]:
    """Capture everything the ``crux_futures`` logger tree emits at DEBUG."""

    base = logging.getLogger("crux_futures")
    handler = ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)
