"""Execution context handed to a future's producer.

The context is a read/subscribe view over the future's internal abort
channel. Producers use it to notice cancellation, timeouts or an external
resolution and bail out cooperatively; they cannot abort the channel through
it.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from ..base.cancellation import AbortListener, AbortSignal

T = TypeVar("T")


class ExecutionContext(Generic[T]):
    """Producer-side view of a future's abort channel.

    Attributes:
        abort_signal: The future's internal signal (read-only use).
    """

    __slots__ = ("_signal", "_track_cleanup", "_untrack_cleanup")

    def __init__(
        self,
        signal: AbortSignal,
        track_cleanup: Callable[[Callable[[], None]], None],
        untrack_cleanup: Callable[[Callable[[], None]], None],
    ):
        self._signal = signal
        self._track_cleanup = track_cleanup
        self._untrack_cleanup = untrack_cleanup

    @property
    def abort_signal(self) -> AbortSignal:
        return self._signal

    def abort_reason(self) -> Any:
        """Current abort reason, or None if the channel is not aborted."""
        return self._signal.reason

    def is_aborted(self) -> bool:
        return self._signal.aborted

    def is_resolved(self) -> bool:
        """True iff the channel was aborted because the future resolved."""
        return self._signal.resolved

    def resolved(self) -> Optional[T]:
        """The resolved value when ``is_resolved()``, else None."""
        if not self._signal.resolved:
            return None
        return self._signal.reason.value

    def on_aborted(self, listener: AbortListener) -> Callable[[], None]:
        """Call ``listener(reason)`` once when the channel aborts.

        Returns the deregistration function; it also runs automatically when
        the future settles.
        """
        remove = self._signal.add_listener(listener)

        def detach() -> None:
            remove()
            self._untrack_cleanup(detach)

        self._track_cleanup(detach)
        return detach

    def throw_if_aborted(self) -> None:
        self._signal.throw_if_aborted()

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ExecutionContext(signal={self._signal!r})"


__all__ = ["ExecutionContext"]
