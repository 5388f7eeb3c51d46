"""Futures metrics package.

Exports settlement counters and snapshots.
"""

from .counters import (
    FutureSettlementCounters,
    SettlementCountersSnapshot,
    LatencyStatsSnapshot,
    get_settlement_counters,
)

__all__ = [
    "FutureSettlementCounters",
    "SettlementCountersSnapshot",
    "LatencyStatsSnapshot",
    "get_settlement_counters",
]
