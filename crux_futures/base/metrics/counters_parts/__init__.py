"""One-class-per-file implementations behind ``metrics.counters``."""

from .latency_stats_snapshot import LatencyStatsSnapshot
from .settlement_counters_snapshot import SettlementCountersSnapshot
from .settlement_counters import FutureSettlementCounters

__all__ = [
    "LatencyStatsSnapshot",
    "SettlementCountersSnapshot",
    "FutureSettlementCounters",
]
