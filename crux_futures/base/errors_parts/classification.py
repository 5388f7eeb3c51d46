"""
Reason classification helpers mapping abort/rejection reasons to ErrorCode.

Settlement logging and metrics need one stable code per failure regardless of
what the producer rejected with; this module is the single place that decides.
"""
from __future__ import annotations

import asyncio
from typing import Any

from pydantic import ValidationError

from .error_code import ErrorCode
from .future_error import FutureError


def classify_reason(reason: Any) -> ErrorCode:
    """Classify a rejection or abort reason into a normalized :class:`ErrorCode`.

    Precedence:
        1. FutureError passthrough (abort / cancel / timeout markers).
        2. Timeout exceptions (builtin and asyncio).
        3. ``asyncio.CancelledError``.
        4. Pydantic validation failures.
        5. Any other exception is an ordinary rejection.
        6. ``UNKNOWN`` for reasons that are not exceptions at all.
    """
    if isinstance(reason, FutureError):
        return reason.code
    if isinstance(reason, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(reason, asyncio.CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(reason, ValidationError):
        return ErrorCode.VALIDATION
    if isinstance(reason, BaseException):
        return ErrorCode.REJECTED
    return ErrorCode.UNKNOWN


__all__ = ["classify_reason"]
