"""Settlement counters snapshot dataclass.

Immutable snapshot of future settlement counters, designed for serialization
and logging. Split into its own file to satisfy one-class-per-file governance.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .latency_stats_snapshot import LatencyStatsSnapshot


@dataclass(frozen=True)
class SettlementCountersSnapshot:
    """Immutable point-in-time snapshot of future settlement counters."""

    scope: str
    total: int
    resolved: int
    rejected: int
    cancelled: int
    timeout: int
    in_flight: int
    rejected_by_code: Dict[str, int]
    latency: LatencyStatsSnapshot
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["SettlementCountersSnapshot"]
