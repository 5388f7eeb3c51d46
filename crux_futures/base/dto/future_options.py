"""Typed options object for cancelable futures.

Purpose
-------
Capture the configuration recognized by ``CancelableFuture`` in a small,
validated DTO so the constructor can accept either a ready ``FutureOptions``
or a plain mapping from call sites.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no side effects. ``ValidationError`` is raised for
  unknown keys, a non-positive ``timeout_ms`` or a non-signal ``abort_signal``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..cancellation import AbortSignal


class FutureOptions(BaseModel):
    """Options recognized by ``CancelableFuture`` and ``ManualFuture``.

    Attributes
    ----------
    abort_signal:
        Caller-owned signal. Aborting it aborts the future's internal channel
        with the same reason; the future never aborts the caller's signal.
    reject_on_abort:
        When true (default) any abort of the internal channel also rejects the
        future with the abort reason. When false an abort only notifies the
        producer through its context.
    timeout_ms:
        Delay in milliseconds after which the internal channel is aborted with
        a ``FutureTimeoutError``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True, extra="forbid")

    abort_signal: Optional[AbortSignal] = None
    reject_on_abort: bool = True
    timeout_ms: Optional[Union[int, float]] = Field(default=None, gt=0)

    @classmethod
    def coerce(cls, value: Union["FutureOptions", Mapping[str, Any], None]) -> "FutureOptions":
        """Normalize ``None``, a mapping, or an instance into ``FutureOptions``."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"options must be FutureOptions or a mapping, got {type(value).__name__}")


__all__ = ["FutureOptions"]
