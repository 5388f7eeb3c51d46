"""Cancellation marker error.

Defines the public ``CanceledError`` used by ``cancel()``. Kept isolated to
satisfy one-class-per-file policy. Unrelated to ``asyncio.CancelledError``:
this error is an ordinary ``Exception`` carried as a rejection reason.
"""
from __future__ import annotations

from .error_code import ErrorCode
from .future_error import FutureError


class CanceledError(FutureError):
    """Raised when a future was cancelled cooperatively."""

    code = ErrorCode.CANCELLED

    def __init__(self) -> None:
        super().__init__("Execution was canceled")


__all__ = ["CanceledError"]
