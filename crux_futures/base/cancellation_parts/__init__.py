"""Abort channel parts package (one class per file)."""

from .abort_kind import AbortKind
from .state import State
from .resolved_result import ResolvedResult, with_resolved, is_resolve_result
from .abort_signal import AbortSignal, AbortListener
from .abort_controller import AbortController

__all__ = [
    "AbortKind",
    "State",
    "ResolvedResult",
    "with_resolved",
    "is_resolve_result",
    "AbortSignal",
    "AbortListener",
    "AbortController",
]
