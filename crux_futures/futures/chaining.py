"""Chaining helpers shared by ``CancelableFuture`` and ``ManualFuture``.

Authority rebinding
-------------------
A derived future (the result of ``then``/``catch``/``finally_``) gets its own
settlement functions for internal use, but its public ``reject`` (and, for
``ManualFuture``, ``resolve``) handle is overwritten with the parent's handle.
Since the parent's handle was itself rebound when the parent was derived,
every link in a chain ends up pointing at the root's functions.

Without the rebinding, ``chain.reject(err)`` on a link created by ``catch``
would fail that link alone, producing a fresh unhandled failure instead of
reaching the handler that was attached for exactly this purpose.
"""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, TypeVar

from .context import ExecutionContext
from .types import OnFinallyFn

if TYPE_CHECKING:
    from .cancelable_future import CancelableFuture
    from .manual_future import ManualFuture

F = TypeVar("F", bound="CancelableFuture[Any]")
M = TypeVar("M", bound="ManualFuture[Any]")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def assign_reject(child: F, parent: "CancelableFuture[Any]") -> F:
    """Point ``child.reject`` at ``parent.reject`` and return ``child``."""
    child.reject = parent.reject
    return child


def assign_resolve(child: M, parent: "ManualFuture[Any]") -> M:
    """Point ``child.resolve`` at ``parent.resolve`` and return ``child``."""
    child.resolve = parent.resolve
    return child


def call_with_context(fn: Callable[..., Any], context: ExecutionContext[Any]) -> Any:
    """Call ``fn(context)`` if ``fn`` takes a positional argument, else ``fn()``."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return fn(context)
    if any(p.kind in _POSITIONAL for p in params):
        return fn(context)
    return fn()


def _after_finally(result: Any, settle: Callable[[], Any]) -> Any:
    if inspect.isawaitable(result):

        async def _wait() -> Any:
            await result
            return settle()

        return _wait()
    return settle()


def finally_handlers(
    on_finally: Optional[OnFinallyFn],
) -> Tuple[Optional[Callable[[Any], Any]], Optional[Callable[[BaseException], Any]]]:
    """Build the ``then`` handler pair implementing ``finally_`` semantics.

    The parent's outcome passes through unchanged unless ``on_finally`` raises
    or returns an awaitable that fails.
    """
    if on_finally is None:
        return None, None

    def on_fulfilled(value: Any) -> Any:
        return _after_finally(on_finally(), lambda: value)

    def on_rejected(exc: BaseException) -> Any:
        def _reraise() -> Any:
            raise exc

        return _after_finally(on_finally(), _reraise)

    return on_fulfilled, on_rejected


__all__ = [
    "assign_reject",
    "assign_resolve",
    "call_with_context",
    "finally_handlers",
]
