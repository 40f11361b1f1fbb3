from __future__ import annotations
"""Minimal Ok / Err outcome pair fed to ``resolve`` and ``try_``.

The error payload is opaque: only the *variant* matters, so ``Err(None)`` is a
perfectly valid failure.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

U = TypeVar("U")
E = TypeVar("E")

__all__ = ["Ok", "Err", "Outcome", "is_ok", "capture", "capture_async"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[U]):  # noqa: D101
    value: U


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):  # noqa: D101
    error: E


Outcome = Union[Ok[U], Err[E]]


def is_ok(outcome: Outcome[U, E]) -> bool:  # noqa: D401
    """Return True for :class:`Ok`."""
    return isinstance(outcome, Ok)


# Convenience constructors ------------------------------------------------- #

def capture(fn: Callable[..., U], *args: Any, **kwargs: Any) -> Outcome[U, Exception]:
    """Call *fn* and wrap its result, or the ``Exception`` it raised."""
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:  # noqa: BLE001
        return Err(e)


async def capture_async(awaitable: Awaitable[U]) -> Outcome[U, Exception]:
    """Await an operation the caller already started and wrap its outcome."""
    try:
        return Ok(await awaitable)
    except Exception as e:  # noqa: BLE001
        return Err(e)
