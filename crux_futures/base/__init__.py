"""
Futures Base Package

Exports the engine-agnostic building blocks the futures layer is built on:

- Errors: marker error taxonomy and reason classification
- Cancellation: abort controller/signal and the resolved-result marker
- DTOs: validated ``FutureOptions``
- Logging & metrics: structured events and settlement counters

Nothing in this package depends on the futures engine layer.
"""

from .errors import (
    AbortError,
    CanceledError,
    ErrorCode,
    FutureError,
    FutureTimeoutError,
    classify_reason,
)
from .cancellation import (
    AbortController,
    AbortKind,
    AbortSignal,
    ResolvedResult,
    is_resolve_result,
    with_resolved,
)
from .dto import FutureOptions
from .logging import FutureLogContext, configure_logger, get_logger, log_event
from .metrics import FutureSettlementCounters, get_settlement_counters

__all__ = [
    # Errors
    "AbortError",
    "CanceledError",
    "ErrorCode",
    "FutureError",
    "FutureTimeoutError",
    "classify_reason",
    # Cancellation
    "AbortController",
    "AbortKind",
    "AbortSignal",
    "ResolvedResult",
    "is_resolve_result",
    "with_resolved",
    # DTOs
    "FutureOptions",
    # Logging & metrics
    "FutureLogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "FutureSettlementCounters",
    "get_settlement_counters",
]
