"""Unit tests for the error taxonomy and reason classification."""
from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError

from crux_futures import (
    AbortError,
    CanceledError,
    ErrorCode,
    FutureError,
    FutureOptions,
    FutureTimeoutError,
    classify_reason,
)


def test_marker_errors_messages_and_codes():
    assert str(AbortError()) == "Execution was aborted"  # nosec B101 - pytest assert in tests
    assert str(CanceledError()) == "Execution was canceled"  # nosec B101 - pytest assert in tests
    assert str(FutureTimeoutError(250)) == "Timeout reached: 250ms"  # nosec B101 - pytest assert in tests
    assert AbortError.code is ErrorCode.ABORTED  # nosec B101 - pytest assert in tests
    assert CanceledError.code is ErrorCode.CANCELLED  # nosec B101 - pytest assert in tests
    assert FutureTimeoutError.code is ErrorCode.TIMEOUT  # nosec B101 - pytest assert in tests


def test_timeout_error_is_builtin_timeout():
    err = FutureTimeoutError(10)
    assert isinstance(err, TimeoutError) and isinstance(err, FutureError)  # nosec B101 - pytest assert in tests
    assert err.timeout_ms == 10  # nosec B101 - pytest assert in tests


def test_abort_error_keeps_cause():
    plain = AbortError("why")
    assert plain.cause == "why" and plain.__cause__ is None  # nosec B101 - pytest assert in tests
    inner = KeyError("k")
    chained = AbortError(inner)
    assert chained.cause is inner and chained.__cause__ is inner  # nosec B101 - pytest assert in tests


def _validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as info:
        FutureOptions(timeout_ms=-1)
    return info.value


@pytest.mark.parametrize(
    "reason,expected",
    [
        (AbortError(), ErrorCode.ABORTED),
        (CanceledError(), ErrorCode.CANCELLED),
        (FutureTimeoutError(5), ErrorCode.TIMEOUT),
        (TimeoutError("plain"), ErrorCode.TIMEOUT),
        (asyncio.CancelledError(), ErrorCode.CANCELLED),
        (ValueError("x"), ErrorCode.REJECTED),
        ("text reason", ErrorCode.UNKNOWN),
        (None, ErrorCode.UNKNOWN),
    ],
)
def test_classify_reason(reason, expected):
    assert classify_reason(reason) is expected  # nosec B101 - pytest assert in tests


def test_classify_validation_error():
    assert classify_reason(_validation_error()) is ErrorCode.VALIDATION  # nosec B101 - pytest assert in tests


def test_error_code_is_string_enum():
    assert ErrorCode.TIMEOUT == "timeout"  # nosec B101 - pytest assert in tests
    assert ErrorCode("cancelled") is ErrorCode.CANCELLED  # nosec B101 - pytest assert in tests


def test_is_instance_type_guards():
    assert AbortError.is_instance(AbortError())  # nosec B101 - pytest assert in tests
    assert not AbortError.is_instance(CanceledError())  # nosec B101 - pytest assert in tests
    assert CanceledError.is_instance(CanceledError())  # nosec B101 - pytest assert in tests
    assert FutureTimeoutError.is_instance(FutureTimeoutError(5))  # nosec B101 - pytest assert in tests
    assert not FutureTimeoutError.is_instance(TimeoutError())  # nosec B101 - pytest assert in tests
    assert FutureError.is_instance(CanceledError())  # nosec B101 - pytest assert in tests
    assert not CanceledError.is_instance("canceled")  # nosec B101 - pytest assert in tests
