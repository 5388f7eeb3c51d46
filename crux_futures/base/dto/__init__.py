"""Pydantic DTOs for the futures package."""

from .future_options import FutureOptions

__all__ = ["FutureOptions"]
