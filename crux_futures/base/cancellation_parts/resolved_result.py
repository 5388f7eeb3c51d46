"""Result marker carried by the abort channel on successful settlement.

When a future resolves it still aborts its channel, so producers awaiting an
abort are released; the reason they observe is a ``ResolvedResult`` wrapping
the value, which tells "we finished" apart from "someone cancelled us".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedResult(Generic[T]):
    """Abort reason meaning "settled successfully with ``value``"."""

    value: T


def with_resolved(value: T) -> ResolvedResult[T]:
    """Wrap ``value`` into the result marker."""
    return ResolvedResult(value)


def is_resolve_result(value: Any) -> bool:
    """Return True if ``value`` is the result marker of a resolved future.

    Example::

        future = ManualFuture(producer)

        async def producer(resolve, reject, context):
            await do_work()
            if is_resolve_result(context.abort_reason()):
                # Resolved from the outside; our result would be ignored.
                return
            resolve(await more_work())
    """
    return isinstance(value, ResolvedResult)


__all__ = ["ResolvedResult", "with_resolved", "is_resolve_result"]
