"""Manually resolvable cancelable future.

``ManualFuture`` is a ``CancelableFuture`` that also exposes ``resolve``. Like
``reject``, the ``resolve`` handle of a derived future points at its parent's,
so resolving any link of a chain resolves the root and the outcome flows
forward through the chain once.

Example::

    ready = ManualFuture()
    chain = ready.then(lambda v: v * 2).catch(lambda e: -1)
    chain.resolve(21)          # resolves ``ready``
    assert await chain == 42
"""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Mapping, Optional, TypeVar, Union, cast

from ..base.dto import FutureOptions
from .cancelable_future import CancelableFuture, OptionsLike
from .chaining import assign_resolve, call_with_context
from .context import ExecutionContext
from .types import ExecutorFn, OnFulfilledFn, OnRejectedFn, RejectFn, ResolveFn, WithFnFunction

T = TypeVar("T")


class ManualFuture(CancelableFuture[T]):
    """Cancelable future with an externally callable ``resolve``.

    Attributes:
        resolve: Resolves the root future of this chain; rebound on chaining
            the same way as ``reject``.
    """

    def __init__(
        self,
        executor_or_options: Union[ExecutorFn, FutureOptions, Mapping[str, Any], None] = None,
        options: OptionsLike = None,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        super().__init__(executor_or_options, options, loop=loop)
        self.resolve: ResolveFn = self._resolve

    @classmethod
    def with_fn(cls, fn: WithFnFunction[T], options: OptionsLike = None) -> "ManualFuture[T]":
        """Future settled by ``fn(context)``, started on the next loop iteration.

        The deferred start leaves room for ``resolve``/``reject``/``cancel``
        calls made right after creation; once the future is decided ``fn`` is
        not started at all.
        """
        future: Optional[ManualFuture[T]] = None

        async def _deferred(resolve: ResolveFn, context: ExecutionContext[T]) -> None:
            if future is not None and future._decided:
                return
            result = call_with_context(fn, context)
            # awaited, not adopted: resolve() stays open to external callers
            if inspect.isawaitable(result):
                result = await result
            resolve(result)

        def executor(resolve: ResolveFn, _reject: RejectFn, context: ExecutionContext[T]) -> Any:
            return _deferred(resolve, context)

        future = cls(executor, options)
        return future

    @classmethod
    def resolved(cls, value: Any = None) -> "ManualFuture[Any]":
        def executor(resolve: ResolveFn, _reject: RejectFn, _context: ExecutionContext[Any]) -> None:
            resolve(value)

        return cls(executor)

    @classmethod
    def rejected(cls, reason: Any = None) -> "ManualFuture[Any]":
        return cast("ManualFuture[Any]", super().rejected(reason))

    def then(
        self,
        on_fulfilled: Optional[OnFulfilledFn[Any]] = None,
        on_rejected: Optional[OnRejectedFn[Any]] = None,
    ) -> "ManualFuture[Any]":
        # catch() and finally_() route through here
        derived = cast("ManualFuture[Any]", super().then(on_fulfilled, on_rejected))
        return assign_resolve(derived, self)

    def catch(self, on_rejected: Optional[OnRejectedFn[Any]] = None) -> "ManualFuture[Any]":
        return cast("ManualFuture[Any]", super().catch(on_rejected))

    def finally_(self, on_finally: Optional[Callable[[], Any]] = None) -> "ManualFuture[T]":
        return cast("ManualFuture[T]", super().finally_(on_finally))


__all__ = ["ManualFuture"]
