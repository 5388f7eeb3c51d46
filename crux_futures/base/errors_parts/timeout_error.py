"""Timeout marker error.

Produced when the ``timeout_ms`` option elapses before a future settles. It
subclasses the builtin ``TimeoutError`` so generic timeout handling keeps
working for callers that do not know about this package.
"""
from __future__ import annotations

from typing import Any, Union

from .error_code import ErrorCode
from .future_error import FutureError


class FutureTimeoutError(FutureError, TimeoutError):
    """Raised when a future's timeout was reached.

    Attributes:
        timeout_ms: The configured timeout that elapsed, in milliseconds.
        cause: Optional underlying reason.
    """

    code = ErrorCode.TIMEOUT

    def __init__(self, timeout_ms: Union[int, float], cause: Any = None) -> None:
        super().__init__(f"Timeout reached: {timeout_ms}ms")
        self.timeout_ms = timeout_ms
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause


__all__ = ["FutureTimeoutError"]
