"""Single-fire abort signal.

``AbortSignal`` is the read/subscribe side of an abort channel; it is created
and driven by an ``AbortController``. The signal transitions at most once and
notifies its listeners synchronously, in registration order, at that moment.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Callable, List

from ..errors_parts.abort_error import AbortError
from ..logging import get_logger
from .abort_kind import AbortKind
from .state import State

AbortListener = Callable[[Any], None]

_LOGGER = get_logger("crux_futures.base.cancellation")


def _noop() -> None:
    return None


class AbortSignal:
    """Cooperative abort signal with listener support.

    Not thread-safe: a signal belongs to one event loop, like the futures that
    own it.
    """

    def __init__(self) -> None:
        self._state = State()
        self._listeners: List[AbortListener] = []

    @classmethod
    def aborted_with(cls, reason: Any = None) -> "AbortSignal":
        """Return a signal that is already aborted with ``reason``."""
        signal = cls()
        signal._transition(AbortKind.ABORTED, AbortError() if reason is None else reason)
        return signal

    @property
    def aborted(self) -> bool:  # noqa: D401 - short form
        """Whether the signal has transitioned (for any reason)."""
        return self._state.kind is not AbortKind.UNSET

    @property
    def reason(self) -> Any:  # noqa: D401 - short form
        """Abort reason, or None while unaborted."""
        return self._state.reason

    @property
    def kind(self) -> AbortKind:
        return self._state.kind

    @property
    def resolved(self) -> bool:
        """True iff the transition was a successful settlement."""
        return self._state.kind is AbortKind.RESOLVED

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: AbortListener) -> Callable[[], None]:
        """Register ``listener(reason)``; returns a function that removes it.

        On an already-aborted signal the listener runs immediately and nothing
        is retained.
        """
        if self.aborted:
            self._notify(listener, self._state.reason)
            return _noop
        self._listeners.append(listener)

        def remove() -> None:
            self.remove_listener(listener)

        return remove

    def remove_listener(self, listener: AbortListener) -> None:
        """Remove the first registration of ``listener`` (missing is fine)."""
        with contextlib.suppress(ValueError):
            self._listeners.remove(listener)

    def throw_if_aborted(self) -> None:
        """Raise the abort reason if aborted.

        Reasons that are not exceptions are raised wrapped in ``AbortError``.
        """
        if not self.aborted:
            return
        reason = self._state.reason
        if isinstance(reason, BaseException):
            raise reason
        raise AbortError(reason)

    async def wait(self) -> Any:
        """Wait until the signal aborts and return the reason."""
        if self.aborted:
            return self._state.reason
        waiter = asyncio.get_running_loop().create_future()

        def _wake(reason: Any) -> None:
            if not waiter.done():
                waiter.set_result(reason)

        remove = self.add_listener(_wake)
        try:
            return await waiter
        finally:
            remove()

    # ------------------------------------------------------------------ #
    def _transition(self, kind: AbortKind, reason: Any) -> bool:
        if self.aborted:
            return False
        self._state.kind = kind
        self._state.reason = reason
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            self._notify(listener, reason)
        return True

    @staticmethod
    def _notify(listener: AbortListener, reason: Any) -> None:
        try:
            listener(reason)
        except Exception:
            _LOGGER.exception("abort listener %r failed", listener)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"AbortSignal(kind={self._state.kind.value}, "
            f"reason={self._state.reason!r}, listeners={len(self._listeners)})"
        )


__all__ = ["AbortSignal", "AbortListener"]
