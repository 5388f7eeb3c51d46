"""Callable type aliases shared by the futures layer."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, TypeVar, Union

if TYPE_CHECKING:
    from .context import ExecutionContext

T = TypeVar("T")
R = TypeVar("R")

ResolveFn = Callable[..., None]
RejectFn = Callable[..., None]
ExecutorFn = Callable[[ResolveFn, RejectFn, "ExecutionContext[Any]"], Any]
OnFulfilledFn = Callable[[Any], Union[R, Awaitable[R]]]
OnRejectedFn = Callable[[BaseException], Union[R, Awaitable[R]]]
OnFinallyFn = Callable[[], Optional[Awaitable[Any]]]
WithFnFunction = Union[
    Callable[["ExecutionContext[Any]"], Union[T, Awaitable[T]]],
    Callable[[], Union[T, Awaitable[T]]],
]

__all__ = [
    "ResolveFn",
    "RejectFn",
    "ExecutorFn",
    "OnFulfilledFn",
    "OnRejectedFn",
    "OnFinallyFn",
    "WithFnFunction",
]
