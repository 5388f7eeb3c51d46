"""Tag of the abort channel state.

The abort channel is a tagged variant: ``UNSET`` until the first transition,
then either ``ABORTED`` (any cancellation, timeout or rejection reason) or
``RESOLVED`` (the owning future settled successfully and the reason is a
``ResolvedResult``).
"""

from __future__ import annotations

from enum import Enum


class AbortKind(str, Enum):
    """Tag of the abort channel state."""

    UNSET = "unset"
    ABORTED = "aborted"
    RESOLVED = "resolved"


__all__ = ["AbortKind"]
