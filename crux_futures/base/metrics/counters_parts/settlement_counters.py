"""Thread-safe in-memory counters for future settlements.

Tracks how futures created by this package end: resolved, rejected (bucketed
by error code), cancelled, or timed out, plus time-to-settle aggregates.
"""

from __future__ import annotations

import time
from threading import RLock
from typing import Any, Dict, Optional

from .latency_stats_snapshot import LatencyStatsSnapshot
from .settlement_counters_snapshot import SettlementCountersSnapshot


class FutureSettlementCounters:
    """Thread-safe in-memory counters for future settlements."""

    __slots__ = (
        "_scope",
        "_lock",
        "_total",
        "_resolved",
        "_rejected",
        "_cancelled",
        "_timeout",
        "_in_flight",
        "_rejected_by_code",
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self, scope: str = "crux_futures"):
        self._scope = scope
        self._lock = RLock()
        self._total = 0
        self._resolved = 0
        self._rejected = 0
        self._cancelled = 0
        self._timeout = 0
        self._in_flight = 0
        self._rejected_by_code: Dict[str, int] = {}
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    # -------------------------- Static Helpers -------------------------- #
    @staticmethod
    def monotonic_ms() -> int:
        """Return current monotonic time in milliseconds for latency measurement."""
        return int(time.monotonic() * 1000)

    # -------------------------- Record Methods -------------------------- #
    def record_start(self) -> None:
        """Record the creation of a future."""
        with self._lock:
            self._total += 1
            self._in_flight += 1

    def record_success(self, latency_ms: int) -> None:
        """Record a resolution after ``latency_ms`` milliseconds."""
        with self._lock:
            self._resolved += 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_failure(self, error_code: str, latency_ms: Optional[int] = None) -> None:
        """Record a rejection classified under ``error_code``."""
        with self._lock:
            self._rejected += 1
            self._rejected_by_code[error_code] = self._rejected_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)
            if latency_ms is not None:
                self._update_latency(latency_ms)

    def record_cancelled(self) -> None:
        """Record a cancellation outcome."""
        with self._lock:
            self._cancelled += 1
            self._in_flight = max(0, self._in_flight - 1)

    def record_timeout(self) -> None:
        """Record a timeout outcome."""
        with self._lock:
            self._timeout += 1
            self._in_flight = max(0, self._in_flight - 1)

    # -------------------------- Latency Helpers -------------------------- #
    def _update_latency(self, latency_ms: int) -> None:
        if latency_ms < 0:
            return
        if self._latency_min is None or latency_ms < self._latency_min:
            self._latency_min = latency_ms
        if self._latency_max is None or latency_ms > self._latency_max:
            self._latency_max = latency_ms
        self._latency_count += 1
        self._latency_total += latency_ms

    # -------------------------- Snapshot API -------------------------- #
    def snapshot(self, reset: bool = False) -> SettlementCountersSnapshot:
        """Return an immutable snapshot of current counters.

        Args:
            reset: If True, zero counters & latency aggregates after creating
                the snapshot (except in_flight, which tracks pending futures).
        """
        with self._lock:
            avg_ms: Optional[float]
            if self._latency_count:
                avg_ms = self._latency_total / self._latency_count
            else:
                avg_ms = None
            latency_snapshot = LatencyStatsSnapshot(
                count=self._latency_count,
                total_ms=self._latency_total,
                min_ms=self._latency_min,
                max_ms=self._latency_max,
                avg_ms=avg_ms,
            )
            snapshot = SettlementCountersSnapshot(
                scope=self._scope,
                total=self._total,
                resolved=self._resolved,
                rejected=self._rejected,
                cancelled=self._cancelled,
                timeout=self._timeout,
                in_flight=self._in_flight,
                rejected_by_code=dict(self._rejected_by_code),
                latency=latency_snapshot,
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._total = 0
                self._resolved = 0
                self._rejected = 0
                self._cancelled = 0
                self._timeout = 0
                self._rejected_by_code.clear()
                self._latency_count = 0
                self._latency_total = 0
                self._latency_min = None
                self._latency_max = None
            return snapshot

    def as_dict(self, reset: bool = False) -> Dict[str, Any]:
        """Convenience wrapper returning snapshot converted to dictionary."""
        return self.snapshot(reset=reset).to_dict()


__all__ = ["FutureSettlementCounters"]
