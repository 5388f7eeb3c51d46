"""Unified futures error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_futures.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.future_error import FutureError
from .errors_parts.abort_error import AbortError
from .errors_parts.canceled_error import CanceledError
from .errors_parts.timeout_error import FutureTimeoutError
from .errors_parts.classification import classify_reason

__all__ = [
    "ErrorCode",
    "FutureError",
    "AbortError",
    "CanceledError",
    "FutureTimeoutError",
    "classify_reason",
]
