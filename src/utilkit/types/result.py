"""Success/Failure result types.

A ``Result`` is either ``Success(data=...)`` or ``Failure(error=...)``,
discriminated by the ``success`` literal.  Both are frozen pydantic models.

:func:`to_result` is the one place exceptions become values; everything
else in the package raises.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Generic, Literal, ParamSpec, TypeAlias, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")
E = TypeVar("E")
_P = ParamSpec("_P")


class Success(BaseModel, Generic[T]):
    """Successful outcome carrying ``data``."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    success: Literal[True] = True
    data: T


class Failure(BaseModel, Generic[E]):
    """Failed outcome carrying ``error`` (an exception by default)."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    success: Literal[False] = False
    error: E


Result: TypeAlias = Union[Success[T], Failure[E]]  # noqa: UP007
AsyncResult: TypeAlias = Awaitable[Union[Success[T], Failure[E]]]  # noqa: UP007


def ok(data: T) -> Success[T]:
    return Success(data=data)


def err(error: E) -> Failure[E]:
    return Failure(error=error)


def to_result(func: Callable[_P, T], *args: _P.args, **kwargs: _P.kwargs) -> Result[T, Exception]:
    """Call *func* and wrap its outcome.

    Any ``Exception`` raised by *func* is returned as ``Failure``.
    ``BaseException`` subclasses (``KeyboardInterrupt``, cancellation)
    propagate.
    """
    try:
        data = func(*args, **kwargs)
    except Exception as exc:
        return Failure(error=exc)
    return Success(data=data)


async def to_async_result(
    func: Callable[_P, Awaitable[T]], *args: _P.args, **kwargs: _P.kwargs
) -> Result[T, Exception]:
    """Awaitable counterpart of :func:`to_result`."""
    try:
        data = await func(*args, **kwargs)
    except Exception as exc:
        return Failure(error=exc)
    return Success(data=data)

