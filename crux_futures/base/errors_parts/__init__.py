"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_futures.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .future_error import FutureError
from .abort_error import AbortError
from .canceled_error import CanceledError
from .timeout_error import FutureTimeoutError
from .classification import classify_reason

__all__ = [
    "ErrorCode",
    "FutureError",
    "AbortError",
    "CanceledError",
    "FutureTimeoutError",
    "classify_reason",
]
