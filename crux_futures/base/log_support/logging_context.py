"""Structured logging context object for futures.

This module defines :class:`FutureLogContext`, a dataclass used to carry the
identity of a future (sequence id, concrete type, parent link for derived
futures) on every log event it emits. ``to_dict`` merges the ``extra``
mapping and prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class FutureLogContext:
    """Structured context for future lifecycle events."""

    future_id: Optional[int] = None
    future_type: Optional[str] = None
    parent_id: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["FutureLogContext"]
