"""Abort marker error.

Used as the default reason of an abort and as the wrapper placed on a future
when it is rejected with a reason that is not an exception.
"""
from __future__ import annotations

from typing import Any

from .error_code import ErrorCode
from .future_error import FutureError


class AbortError(FutureError):
    """Raised when execution was aborted.

    Attributes:
        cause: The original abort reason, kept as-is (may be any object).
    """

    code = ErrorCode.ABORTED

    def __init__(self, cause: Any = None) -> None:
        super().__init__("Execution was aborted")
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause


__all__ = ["AbortError"]
