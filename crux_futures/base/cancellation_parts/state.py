"""Internal state holder for abort signals.

Module scoped to keep the signal class focused.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .abort_kind import AbortKind


@dataclass
class State:
    """Internal state for abort signals."""

    kind: AbortKind = AbortKind.UNSET
    reason: Any = None


__all__ = ["State"]
