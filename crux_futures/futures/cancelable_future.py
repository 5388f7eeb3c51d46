"""Cancelable future core.

Purpose
-------
``CancelableFuture`` wraps an ``asyncio.Future`` with cooperative cancellation:
an internal abort channel, an execution context handed to the producer, an
optional timeout, forwarding from a caller-owned ``AbortSignal``, and chaining
that keeps every derived future cancellable through the root.

Settlement
----------
Three independent triggers race to settle a future: the producer calling
``resolve``/``reject``, external ``abort``/``cancel``/``reject`` calls, and
the timeout. All of them converge on ``_resolve``/``_reject``:

- ``_resolve(value)`` sets the result, marks the channel ``RESOLVED`` with the
  value, then runs cleanup.
- ``_reject(reason)`` sets the exception, aborts the channel with the reason,
  then runs cleanup.

The first call wins; later calls are no-ops. Cleanup (listener removal, timer
cancellation) runs synchronously inside that first call, before any chained
future is notified through the loop's callback queue.

Cancellation is advisory: ``abort`` only signals the producer. A future is
rejected by an abort only when ``reject_on_abort`` is true (the default).

Awaiting
--------
``await future`` goes through ``asyncio.shield`` so that cancelling the
awaiting task leaves the future pending for its other consumers. A rejected
future nobody awaits or chains is reported by asyncio's "exception was never
retrieved" diagnostic, exactly like a plain ``asyncio.Future``.
"""
from __future__ import annotations

import asyncio
import contextlib
import inspect
import itertools
import logging
from functools import partial
from typing import Any, Callable, Generator, Generic, List, Mapping, Optional, TypeVar, Union

from ..config import get_future_config
from ..base.cancellation import AbortController
from ..base.dto import FutureOptions
from ..base.errors import (
    AbortError,
    CanceledError,
    ErrorCode,
    FutureTimeoutError,
    classify_reason,
)
from ..base.logging import FutureLogContext, get_logger, log_event
from ..base.metrics import FutureSettlementCounters, get_settlement_counters
from .chaining import assign_reject, call_with_context, finally_handlers
from .context import ExecutionContext
from .types import ExecutorFn, OnFinallyFn, OnFulfilledFn, OnRejectedFn, RejectFn, WithFnFunction

T = TypeVar("T")

OptionsLike = Union[FutureOptions, Mapping[str, Any], None]

_LOGGER = get_logger("crux_futures.futures")
_IDS = itertools.count(1)


def _as_exception(reason: Any) -> BaseException:
    """Return the exception a failed ``asyncio.Future`` should carry for ``reason``."""
    if isinstance(reason, BaseException) and not isinstance(reason, StopIteration):
        return reason
    return AbortError(reason)


class CancelableFuture(Generic[T]):
    """Future with cooperative cancellation, timeout and chain-wide rejection.

    Construct with ``CancelableFuture(executor, options)`` or
    ``CancelableFuture(options)``. The executor is called synchronously as
    ``executor(resolve, reject, context)``; if it raises, or returns an
    awaitable that fails, the future is rejected with that error.

    Attributes:
        reject: Rejects the root future of this chain. Rebound on every
            ``then``/``catch``/``finally_`` so that any link can fail the whole
            chain exactly once.
    """

    def __init__(
        self,
        executor_or_options: Union[ExecutorFn, FutureOptions, Mapping[str, Any], None] = None,
        options: OptionsLike = None,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        executor: Optional[ExecutorFn]
        if executor_or_options is None or callable(executor_or_options):
            executor = executor_or_options
        else:
            if options is not None:
                raise TypeError("options given both positionally and as the second argument")
            executor, options = None, executor_or_options
        opts = FutureOptions.coerce(options)

        self._loop = loop if loop is not None else asyncio.get_running_loop()
        self._future: asyncio.Future[T] = self._loop.create_future()
        self._controller = AbortController()
        self._cleanup: List[Callable[[], None]] = []
        self._settled = False
        self._adopting = False
        self._outcome: Optional[str] = None
        self._executor_task: Optional[asyncio.Future[Any]] = None
        self._id = next(_IDS)
        self._log_ctx = FutureLogContext(future_id=self._id, future_type=type(self).__name__)
        self._counters = get_settlement_counters() if get_future_config().metrics_enabled else None
        self._started_ms = FutureSettlementCounters.monotonic_ms()
        if self._counters is not None:
            self._counters.record_start()
        self._context: ExecutionContext[T] = ExecutionContext(
            self._controller.signal, self._track_cleanup, self._untrack_cleanup
        )
        self.reject: RejectFn = self._reject
        self._wire(executor, opts)

    # ------------------------------------------------------------------ #
    # Factories
    # ------------------------------------------------------------------ #
    @classmethod
    def with_fn(cls, fn: WithFnFunction[T], options: OptionsLike = None) -> "CancelableFuture[T]":
        """Future settled with the outcome of ``fn(context)`` (or ``fn()``).

        Awaitable results are adopted; exceptions, raised or awaited, reject.
        """

        def executor(resolve: Callable[..., None], _reject: RejectFn, context: ExecutionContext[T]) -> None:
            resolve(call_with_context(fn, context))

        return cls(executor, options)

    @classmethod
    def resolved(cls, value: Any = None) -> "CancelableFuture[Any]":
        """Already-resolved future (awaitable values are adopted)."""
        return cls.with_fn(lambda: value)

    @classmethod
    def rejected(cls, reason: Any = None) -> "CancelableFuture[Any]":
        """Already-rejected future."""

        def executor(_resolve: Callable[..., None], reject: RejectFn, _context: ExecutionContext[Any]) -> None:
            reject(reason)

        return cls(executor)

    # ------------------------------------------------------------------ #
    # Wiring
    # ------------------------------------------------------------------ #
    def _wire(self, executor: Optional[ExecutorFn], opts: FutureOptions) -> None:
        external = opts.abort_signal
        if external is not None:
            if external.aborted:
                if opts.reject_on_abort:
                    self._reject(external.reason)
                    return
                self._controller.abort(external.reason)
            else:
                # one-directional: we never abort the caller's signal
                self._cleanup.append(external.add_listener(self._controller.abort))

        if opts.reject_on_abort:
            self._context.on_aborted(self._reject)

        if opts.timeout_ms:
            handle = self._loop.call_later(opts.timeout_ms / 1000, self._on_timeout, opts.timeout_ms)
            self._cleanup.append(handle.cancel)

        if executor is not None:
            self._run_executor(executor)

    def _run_executor(self, executor: ExecutorFn) -> None:
        try:
            result = executor(self._resolve, self._reject, self._context)
        except asyncio.CancelledError:
            self._on_executor_error(CanceledError())
            return
        except Exception as exc:
            self._on_executor_error(exc)
            return
        if inspect.isawaitable(result):
            self._executor_task = asyncio.ensure_future(result, loop=self._loop)
            self._executor_task.add_done_callback(self._on_executor_done)

    def _on_executor_done(self, task: "asyncio.Future[Any]") -> None:
        if task.cancelled():
            self._reject(CanceledError())
            return
        exc = task.exception()
        if exc is not None:
            self._on_executor_error(exc)

    def _on_executor_error(self, exc: BaseException) -> None:
        log_event(
            _LOGGER,
            "future.executor_error",
            self._log_ctx,
            level=logging.DEBUG,
            error=type(exc).__name__,
            settled=self._settled,
        )
        self._reject(exc)

    def _on_timeout(self, timeout_ms: Union[int, float]) -> None:
        log_event(_LOGGER, "future.timeout", self._log_ctx, level=logging.DEBUG, timeout_ms=timeout_ms)
        self._controller.abort(FutureTimeoutError(timeout_ms))

    def _track_cleanup(self, callback: Callable[[], None]) -> None:
        # after settlement the signal is aborted, so late listeners are never retained
        if not self._settled:
            self._cleanup.append(callback)

    def _untrack_cleanup(self, callback: Callable[[], None]) -> None:
        with contextlib.suppress(ValueError):
            self._cleanup.remove(callback)

    # ------------------------------------------------------------------ #
    # Settlement
    # ------------------------------------------------------------------ #
    @property
    def _decided(self) -> bool:
        """True once settled or locked onto an awaitable being adopted."""
        return self._settled or self._adopting

    def _resolve(self, value: Any = None) -> None:
        if self._decided:
            return
        if value is self:
            self._reject(TypeError("a future cannot be resolved with itself"))
            return
        if inspect.isawaitable(value):
            self._adopt(value)
            return
        self._settled = True
        self._future.set_result(value)
        self._controller.mark_resolved(value)
        self._finish("resolved")

    def _reject(self, reason: Any = None) -> None:
        if self._settled:
            return
        if reason is None:
            reason = AbortError()
        self._settled = True
        self._adopting = False
        self._future.set_exception(_as_exception(reason))
        self._controller.abort(reason)
        self._finish("rejected", reason)

    def _adopt(self, value: Any) -> None:
        """Follow an awaitable: its result resolves, its failure rejects."""
        self._adopting = True
        try:
            if isinstance(value, CancelableFuture):
                source = value._future
            else:
                source = asyncio.ensure_future(value, loop=self._loop)
        except (TypeError, ValueError) as exc:
            self._adopting = False
            self._reject(exc)
            return
        source.add_done_callback(self._on_adopted_done)

    def _on_adopted_done(self, source: "asyncio.Future[Any]") -> None:
        self._adopting = False
        if source.cancelled():
            self._reject(CanceledError())
            return
        exc = source.exception()
        if exc is not None:
            self._reject(exc)
        else:
            self._resolve(source.result())

    def _finish(self, outcome: str, reason: Any = None) -> None:
        self._outcome = outcome
        callbacks = list(self._cleanup)
        self._cleanup.clear()
        for callback in callbacks:
            callback()

        latency_ms = FutureSettlementCounters.monotonic_ms() - self._started_ms
        code = classify_reason(reason) if outcome == "rejected" else None
        if self._counters is not None:
            if code is None:
                self._counters.record_success(latency_ms)
            elif code is ErrorCode.CANCELLED:
                self._counters.record_cancelled()
            elif code is ErrorCode.TIMEOUT:
                self._counters.record_timeout()
            else:
                self._counters.record_failure(code.value, latency_ms)
        log_event(
            _LOGGER,
            "future.settle",
            self._log_ctx,
            level=logging.DEBUG,
            outcome=outcome,
            error_code=code.value if code is not None else None,
            latency_ms=latency_ms,
        )

    # ------------------------------------------------------------------ #
    # Public control
    # ------------------------------------------------------------------ #
    def abort(self, reason: Any = None) -> None:
        """Abort execution with ``reason`` (``AbortError()`` when omitted).

        This only notifies the producer through its context. The future is
        rejected as well only when it was created with ``reject_on_abort``
        (the default). No-op once the future has settled.
        """
        if self._settled:
            return
        if reason is None:
            reason = AbortError()
        log_event(_LOGGER, "future.abort", self._log_ctx, level=logging.DEBUG, reason=type(reason).__name__)
        self._controller.abort(reason)

    def cancel(self, use_abort: bool = False) -> None:
        """Fail with ``CanceledError``.

        Args:
            use_abort: Use ``abort()`` (advisory) instead of ``reject()``.
        """
        error = CanceledError()
        if use_abort:
            self.abort(error)
        else:
            self.reject(error)

    # ------------------------------------------------------------------ #
    # Chaining
    # ------------------------------------------------------------------ #
    def then(
        self,
        on_fulfilled: Optional[OnFulfilledFn[Any]] = None,
        on_rejected: Optional[OnRejectedFn[Any]] = None,
    ) -> "CancelableFuture[Any]":
        """Derive a future from this one's outcome.

        Handlers may return awaitables, which are adopted. The derived
        future's ``reject`` is this future's ``reject``.
        """
        derived = type(self)(loop=self._loop)
        derived._log_ctx.parent_id = self._id
        log_event(_LOGGER, "future.derive", derived._log_ctx, level=logging.DEBUG)
        self._future.add_done_callback(partial(derived._follow, on_fulfilled, on_rejected))
        return assign_reject(derived, self)

    def catch(self, on_rejected: Optional[OnRejectedFn[Any]] = None) -> "CancelableFuture[Any]":
        return self.then(None, on_rejected)

    def finally_(self, on_finally: Optional[OnFinallyFn] = None) -> "CancelableFuture[T]":
        """Run ``on_finally()`` on settlement and pass the outcome through."""
        return self.then(*finally_handlers(on_finally))

    def _follow(
        self,
        on_fulfilled: Optional[OnFulfilledFn[Any]],
        on_rejected: Optional[OnRejectedFn[Any]],
        source: "asyncio.Future[Any]",
    ) -> None:
        if source.cancelled():
            self._reject(CanceledError())
            return
        exc = source.exception()
        if exc is None:
            handler: Optional[Callable[[Any], Any]] = on_fulfilled
            arg: Any = source.result()
        else:
            handler, arg = on_rejected, exc
        if handler is None:
            if exc is None:
                self._resolve(arg)
            else:
                self._reject(exc)
            return
        try:
            value = handler(arg)
        except asyncio.CancelledError:
            self._reject(CanceledError())
            return
        except Exception as err:
            self._reject(err)
            return
        self._resolve(value)

    # ------------------------------------------------------------------ #
    # asyncio interop
    # ------------------------------------------------------------------ #
    def __await__(self) -> Generator[Any, None, T]:
        return asyncio.shield(self._future).__await__()

    def done(self) -> bool:
        return self._future.done()

    def result(self) -> T:
        """Return the result; raises like ``asyncio.Future.result``."""
        return self._future.result()

    def exception(self) -> Optional[BaseException]:
        return self._future.exception()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        state = self._outcome or ("adopting" if self._adopting else "pending")
        return f"<{type(self).__name__} #{self._id} {state}>"


__all__ = ["CancelableFuture", "OptionsLike"]
