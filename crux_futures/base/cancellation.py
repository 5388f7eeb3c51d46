"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the abort channel constructs via the canonical
``crux_futures.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts`` for organization.

Notes
-----
- ``AbortController`` creates and drives an ``AbortSignal``; only the
  controller can abort it.
- A signal transitions at most once, either to ``ABORTED`` or to ``RESOLVED``
  (carrying a ``ResolvedResult``), and notifies listeners synchronously.
- Cancellation is cooperative: aborting never interrupts running code.
"""

from .cancellation_parts.abort_kind import AbortKind
from .cancellation_parts.resolved_result import (
    ResolvedResult,
    is_resolve_result,
    with_resolved,
)
from .cancellation_parts.abort_signal import AbortListener, AbortSignal
from .cancellation_parts.abort_controller import AbortController

__all__ = [
    "AbortKind",
    "ResolvedResult",
    "is_resolve_result",
    "with_resolved",
    "AbortListener",
    "AbortSignal",
    "AbortController",
]
