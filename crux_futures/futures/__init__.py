"""Cancelable futures package.

Public surface of the futures engine:

- ``CancelableFuture``: future with an abort channel, timeout, external
  signal forwarding and root-bound ``reject`` across chains.
- ``ManualFuture``: adds a root-bound ``resolve``.
- ``ExecutionContext``: producer-side view of the abort channel.
"""

from .context import ExecutionContext
from .cancelable_future import CancelableFuture
from .manual_future import ManualFuture
from .chaining import call_with_context

__all__ = [
    "ExecutionContext",
    "CancelableFuture",
    "ManualFuture",
    "call_with_context",
]
