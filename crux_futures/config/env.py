"""crux_futures.config.env
=======================

Small environment parsing helpers shared by the configuration layer.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; they return the
  supplied default so a typo in the environment cannot break imports.
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_env_bool(name: str, default: bool) -> bool:
    """Parse an environment variable as a boolean flag.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` case-insensitively.
    Returns ``default`` when the variable is unset or unrecognized.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


def parse_env_str(name: str, default: Optional[str]) -> Optional[str]:
    """Return the stripped value of ``name`` or ``default`` when blank/unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["parse_env_bool", "parse_env_str"]
