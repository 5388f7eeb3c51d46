"""
Base exception type for the futures error taxonomy.

Every marker error produced by the engine (abort, cancel, timeout) derives from
`FutureError` and carries a normalized `ErrorCode` as a class attribute.
"""
from __future__ import annotations

from typing import Any

from .error_code import ErrorCode


class FutureError(Exception):
    """Root of the marker errors raised or carried by cancelable futures."""

    code: ErrorCode = ErrorCode.UNKNOWN

    @classmethod
    def is_instance(cls, value: Any) -> bool:
        """Type guard: True when ``value`` is an instance of this error class."""
        return isinstance(value, cls)


__all__ = ["FutureError"]
