"""Abort controller: the write side of an abort channel."""

from __future__ import annotations

from typing import Any

from ..errors_parts.abort_error import AbortError
from .abort_signal import AbortSignal
from .resolved_result import ResolvedResult
from .abort_kind import AbortKind


class AbortController:
    """Owns an ``AbortSignal`` and is the only object able to abort it."""

    __slots__ = ("_signal",)

    def __init__(self) -> None:
        self._signal = AbortSignal()

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def abort(self, reason: Any = None) -> bool:
        """Abort the signal with ``reason`` (``AbortError()`` when omitted).

        Returns True if this call performed the transition.
        """
        if reason is None:
            reason = AbortError()
        return self._signal._transition(AbortKind.ABORTED, reason)

    def mark_resolved(self, value: Any) -> bool:
        """Abort the signal with the result marker carrying ``value``."""
        return self._signal._transition(AbortKind.RESOLVED, ResolvedResult(value))

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"AbortController(signal={self._signal!r})"


__all__ = ["AbortController"]
