"""crux_futures: cancelable futures for asyncio.

Futures with cooperative cancellation, timeouts, caller-supplied abort
signals, and chains that can be failed (or, for ``ManualFuture``, resolved)
from any link.
"""

from .base.cancellation import (
    AbortController,
    AbortKind,
    AbortSignal,
    ResolvedResult,
    is_resolve_result,
    with_resolved,
)
from .base.dto import FutureOptions
from .base.errors import (
    AbortError,
    CanceledError,
    ErrorCode,
    FutureError,
    FutureTimeoutError,
    classify_reason,
)
from .futures import CancelableFuture, ExecutionContext, ManualFuture

__version__ = "0.1.0"

__all__ = [
    "AbortController",
    "AbortKind",
    "AbortSignal",
    "ResolvedResult",
    "is_resolve_result",
    "with_resolved",
    "FutureOptions",
    "AbortError",
    "CanceledError",
    "ErrorCode",
    "FutureError",
    "FutureTimeoutError",
    "classify_reason",
    "CancelableFuture",
    "ExecutionContext",
    "ManualFuture",
]
