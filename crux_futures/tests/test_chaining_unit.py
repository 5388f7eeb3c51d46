"""Chaining: then/catch/finally_ and chain-wide rejection.

Every derived future's ``reject`` points at the root's, so rejecting any link
fails the root once and the failure flows forward through the handlers.
"""
from __future__ import annotations

import asyncio
import gc

import pytest

from crux_futures import CancelableFuture, CanceledError


def _collect_loop_errors(loop):
    errors = []
    loop.set_exception_handler(lambda _loop, context: errors.append(context))
    return errors


def test_then_transforms_value_and_adopts_awaitables():
    async def scenario():
        async def double(value):
            await asyncio.sleep(0)
            return value * 2

        result = await CancelableFuture.resolved(3).then(lambda v: v + 1).then(double)
        assert result == 8  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_then_without_handlers_passes_outcome_through():
    async def scenario():
        assert await CancelableFuture.resolved("v").then() == "v"  # nosec B101 - pytest assert in tests
        with pytest.raises(KeyError):
            await CancelableFuture.rejected(KeyError("k")).then(lambda v: v)

    asyncio.run(scenario())


def test_catch_recovers_and_handler_errors_reject():
    async def scenario():
        recovered = await CancelableFuture.rejected(ValueError("x")).catch(lambda e: type(e).__name__)
        assert recovered == "ValueError"  # nosec B101 - pytest assert in tests

        def explode(_value):
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError, match="handler failed"):
            await CancelableFuture.resolved(1).then(explode)

    asyncio.run(scenario())


def test_rejecting_a_derived_link_reaches_the_root_and_its_handler():
    async def scenario():
        errors = _collect_loop_errors(asyncio.get_running_loop())
        seen = []
        root = CancelableFuture()
        tail = root.then(lambda v: v).catch(lambda e: seen.append(e) or "handled")
        assert tail.reject.__self__ is root  # nosec B101 - pytest assert in tests

        boom = ValueError("from tail")
        tail.reject(boom)
        assert root.done()  # nosec B101 - pytest assert in tests
        assert await tail == "handled"  # nosec B101 - pytest assert in tests
        assert seen == [boom]  # nosec B101 - pytest assert in tests

        del root, tail
        gc.collect()
        await asyncio.sleep(0)
        return errors

    assert asyncio.run(scenario()) == []  # nosec B101 - pytest assert in tests


def test_cancelling_a_derived_link_cancels_the_root():
    async def scenario():
        root = CancelableFuture()
        tail = root.then(lambda v: v).finally_(lambda: None).catch(lambda e: e)
        tail.cancel()
        assert isinstance(root.exception(), CanceledError)  # nosec B101 - pytest assert in tests
        assert isinstance(await tail, CanceledError)  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_unhandled_root_rejection_is_reported():
    async def scenario():
        errors = _collect_loop_errors(asyncio.get_running_loop())
        future = CancelableFuture()
        future.reject(ValueError("nobody listens"))
        del future
        gc.collect()
        await asyncio.sleep(0)
        return errors

    errors = asyncio.run(scenario())
    assert any("never retrieved" in e.get("message", "") for e in errors)  # nosec B101 - pytest assert in tests


def test_derived_abort_only_affects_that_link():
    async def scenario():
        root = CancelableFuture()
        derived = root.then(lambda v: v)
        derived.abort("just this link")
        assert derived.done()  # nosec B101 - pytest assert in tests
        assert not root.done()  # nosec B101 - pytest assert in tests
        derived.exception()
        root.cancel()
        root.exception()

    asyncio.run(scenario())


def test_finally_passes_value_through_and_runs_once():
    async def scenario():
        calls = []
        value = await CancelableFuture.resolved(3).finally_(lambda: calls.append("done"))
        assert value == 3 and calls == ["done"]  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_finally_passes_rejection_through():
    async def scenario():
        calls = []
        error = LookupError("kept")
        with pytest.raises(LookupError) as info:
            await CancelableFuture.rejected(error).finally_(lambda: calls.append("done"))
        assert info.value is error and calls == ["done"]  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_finally_awaits_async_callback_and_its_failure_wins():
    async def scenario():
        order = []

        async def cleanup():
            await asyncio.sleep(0)
            order.append("cleanup")

        future = CancelableFuture.resolved("v").finally_(cleanup).then(lambda v: order.append(v))
        await future
        assert order == ["cleanup", "v"]  # nosec B101 - pytest assert in tests

        def broken():
            raise RuntimeError("finally failed")

        with pytest.raises(RuntimeError, match="finally failed"):
            await CancelableFuture.resolved(1).finally_(broken)

    asyncio.run(scenario())


def test_finally_without_callback_is_passthrough():
    async def scenario():
        assert await CancelableFuture.resolved(5).finally_() == 5  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_derived_future_is_same_class():
    async def scenario():
        class Tagged(CancelableFuture):
            pass

        derived = Tagged.resolved(1).then(lambda v: v)
        assert isinstance(derived, Tagged)  # nosec B101 - pytest assert in tests
        assert await derived == 1  # nosec B101 - pytest assert in tests

    asyncio.run(scenario())


def test_handler_raising_cancelled_error_rejects_derived_future():
    async def scenario():
        errors = _collect_loop_errors(asyncio.get_running_loop())

        def handler(_value):
            raise asyncio.CancelledError()

        derived = CancelableFuture.resolved(1).then(handler)
        with pytest.raises(CanceledError):
            await asyncio.wait_for(derived, timeout=1)
        return errors

    assert asyncio.run(scenario()) == []  # nosec B101 - pytest assert in tests
