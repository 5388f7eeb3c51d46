"""ExecutionContext as seen by a producer."""
from __future__ import annotations

import asyncio

import pytest

from crux_futures import (
    AbortError,
    CancelableFuture,
    CanceledError,
    ExecutionContext,
    ResolvedResult,
)


def _capture(options=None):
    contexts = []
    future = CancelableFuture(lambda resolve, reject, ctx: contexts.append(ctx), options)
    return future, contexts[0]


def test_fresh_context_is_unaborted():
    async def scenario():
        future, ctx = _capture()
        assert isinstance(ctx, ExecutionContext)  # nosec B101 - pytest assert in tests
        assert ctx.is_aborted() is False and ctx.is_resolved() is False  # nosec B101 - pytest assert in tests
        assert ctx.abort_reason() is None and ctx.resolved() is None  # nosec B101 - pytest assert in tests
        ctx.throw_if_aborted()
        assert not hasattr(ctx, "abort")  # nosec B101 - pytest assert in tests
        future.cancel()
        future.exception()

    asyncio.run(scenario())


def test_resolution_is_visible_as_resolved_marker():
    async def scenario():
        contexts = []
        notified = []

        def executor(resolve, reject, ctx):
            contexts.append(ctx)
            ctx.on_aborted(notified.append)
            resolve(10)

        await CancelableFuture(executor)
        ctx = contexts[0]
        assert ctx.is_aborted() and ctx.is_resolved()  # nosec B101 - pytest assert in tests
        assert ctx.resolved() == 10  # nosec B101 - pytest assert in tests
        assert notified == [ResolvedResult(10)]  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_cancellation_is_not_resolution():
    async def scenario():
        future, ctx = _capture()
        future.cancel()
        assert ctx.is_aborted() and not ctx.is_resolved()  # nosec B101 - pytest assert in tests
        assert ctx.resolved() is None  # nosec B101 - pytest assert in tests
        assert isinstance(ctx.abort_reason(), CanceledError)  # nosec B101 - pytest assert in tests
        with pytest.raises(CanceledError):
            ctx.throw_if_aborted()
        future.exception()

    asyncio.run(scenario())


def test_throw_if_aborted_wraps_plain_reasons():
    async def scenario():
        future, ctx = _capture({"reject_on_abort": False})
        future.abort("plain")
        with pytest.raises(AbortError) as info:
            ctx.throw_if_aborted()
        assert info.value.cause == "plain"  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_on_aborted_listeners_run_in_order_and_remover_detaches():
    async def scenario():
        future, ctx = _capture({"reject_on_abort": False})
        order = []
        ctx.on_aborted(lambda r: order.append(("first", r)))
        remove = ctx.on_aborted(lambda r: order.append(("removed", r)))
        ctx.on_aborted(lambda r: order.append(("third", r)))
        remove()
        future.abort("why")
        assert order == [("first", "why"), ("third", "why")]  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_on_aborted_after_abort_fires_immediately():
    async def scenario():
        future, ctx = _capture({"reject_on_abort": False})
        future.abort("early")
        seen = []
        ctx.on_aborted(seen.append)
        assert seen == ["early"]  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_listeners_are_released_at_settlement():
    async def scenario():
        future, ctx = _capture()
        ctx.on_aborted(lambda r: None)
        ctx.on_aborted(lambda r: None)
        future.reject(ValueError("done"))
        assert ctx.abort_signal.listener_count == 0  # nosec B101 - pytest assert in tests
        future.exception()

    asyncio.run(scenario())


def test_detached_listeners_do_not_accumulate_in_cleanup():
    async def scenario():
        future, ctx = _capture()
        baseline = len(future._cleanup)
        for _ in range(1000):
            ctx.on_aborted(lambda r: None)()
        assert len(future._cleanup) == baseline  # nosec B101 - pytest assert in tests
        assert ctx.abort_signal.listener_count == baseline  # nosec B101 - pytest assert in tests
        future.cancel()
        assert future._cleanup == []  # nosec B101 - pytest assert in tests
        future.exception()

    asyncio.run(scenario())
