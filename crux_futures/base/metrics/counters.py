"""Future Settlement Counters & Aggregated Timing Utilities.

Re-exports one-class-per-file implementations from ``metrics/counters_parts``
and owns the process-wide default counters instance the engine records into.
"""

from __future__ import annotations

from .counters_parts import (
    FutureSettlementCounters,
    SettlementCountersSnapshot,
    LatencyStatsSnapshot,
)

_DEFAULT_COUNTERS = FutureSettlementCounters(scope="crux_futures")


def get_settlement_counters() -> FutureSettlementCounters:
    """Return the process-wide counters used by the futures engine."""
    return _DEFAULT_COUNTERS


__all__ = [
    "FutureSettlementCounters",
    "SettlementCountersSnapshot",
    "LatencyStatsSnapshot",
    "get_settlement_counters",
]
