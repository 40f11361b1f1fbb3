from __future__ import annotations

"""Optimistic value container – Resolved / Pending sum type.

A container is either :class:`Resolved` (authoritative value) or
:class:`Pending` (optimistically displayed value plus the last authoritative
*fallback*).  Containers are frozen; every transition returns a new one.

Example
-------
```python
from optimistic import from_resolved, push, revert, unwrap

likes = from_resolved(1)
likes = push(likes, 2)
likes = push(likes, 3)
unwrap(likes)           # 3
unwrap(revert(likes))   # 1 – rollback targets the last *resolved* value
```
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from optimistic.core.outcome import Err, Ok, Outcome

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

__all__ = [
    "Resolved",
    "Pending",
    "OptimisticValue",
    "from_resolved",
    "is_resolved",
    "is_pending",
    "unwrap",
    "fallback_of",
    "state_name",
    "push",
    "update",
    "force",
    "revert",
    "resolve",
    "try_",
    "try_combine",
]


@dataclass(frozen=True, slots=True)
class Resolved(Generic[T]):  # noqa: D101 – authoritative value, no fallback
    value: T


@dataclass(frozen=True, slots=True)
class Pending(Generic[T]):
    """Optimistic *value* shown ahead of confirmation.

    *fallback* is always a value that was once held by a :class:`Resolved`
    container; it is what :func:`revert` rolls back to.
    """

    value: T
    fallback: T


OptimisticValue = Union[Resolved[T], Pending[T]]


def _not_a_container(c: object) -> TypeError:
    return TypeError(f"expected Resolved or Pending, got {type(c).__name__}")


# --------------------------------------------------------------------------- #
# Construction & queries
# --------------------------------------------------------------------------- #

def from_resolved(value: T) -> Resolved[T]:  # noqa: D401
    """Return a resolved container holding *value* (the only entry point)."""
    return Resolved(value)


def is_resolved(c: OptimisticValue[T]) -> bool:
    return isinstance(c, Resolved)


def is_pending(c: OptimisticValue[T]) -> bool:
    return isinstance(c, Pending)


def unwrap(c: OptimisticValue[T]) -> T:  # noqa: D401
    """Return the currently displayed value (defined for both variants)."""
    match c:
        case Resolved(value) | Pending(value, _):
            return value
    raise _not_a_container(c)


def fallback_of(c: OptimisticValue[T]) -> T:  # noqa: D401
    """Return the last confirmed baseline of *c*.

    That is the value itself when resolved and the retained fallback when
    pending.  :func:`update` and :func:`try_` compute against this.
    """
    match c:
        case Resolved(value):
            return value
        case Pending(_, fallback):
            return fallback
    raise _not_a_container(c)


def state_name(c: OptimisticValue[T]) -> str:
    match c:
        case Resolved():
            return "resolved"
        case Pending():
            return "pending"
    raise _not_a_container(c)


# --------------------------------------------------------------------------- #
# Transitions
# --------------------------------------------------------------------------- #

def push(c: OptimisticValue[T], new_value: T) -> Pending[T]:  # noqa: D401
    """Show *new_value* optimistically.

    The fallback is the resolved value, or the already retained fallback when
    *c* is pending, so successive pushes never move the rollback target.
    """
    return Pending(new_value, fallback_of(c))


def update(c: OptimisticValue[T], f: Callable[[T], T]) -> Pending[T]:
    """Like :func:`push` but the new value is ``f(fallback)``.

    *f* is applied to the last confirmed baseline, **not** to the displayed
    value.  Two pending updates therefore do not compound:

    >>> c = update(from_resolved(1), lambda n: n + 1)
    >>> unwrap(update(c, lambda n: n + 1))
    2
    """
    base = fallback_of(c)
    return Pending(f(base), base)


def force(c: OptimisticValue[T]) -> Resolved[T]:  # noqa: D401
    """Commit to the displayed value and drop the fallback."""
    match c:
        case Resolved():
            return c
        case Pending(value, _):
            return Resolved(value)
    raise _not_a_container(c)


def revert(c: OptimisticValue[T]) -> Resolved[T]:  # noqa: D401
    """Roll back to the fallback; resolved containers are returned as-is."""
    match c:
        case Resolved():
            return c
        case Pending(_, fallback):
            return Resolved(fallback)
    raise _not_a_container(c)


def resolve(c: OptimisticValue[T], outcome: Outcome[T, E]) -> Resolved[T]:
    """Finalize *c* with the authoritative *outcome*.

    ``Ok(x)`` replaces everything with ``Resolved(x)``; ``Err`` reverts.  The
    error payload is never looked at.
    """
    match outcome:
        case Ok(value):
            return Resolved(value)
        case Err():
            return revert(c)
    raise TypeError(f"expected Ok or Err, got {type(outcome).__name__}")


def try_(
    c: OptimisticValue[T],
    outcome: Outcome[U, E],
    f: Callable[[T, U], T],
) -> Resolved[T]:
    """Combine a successful *outcome* with the confirmed baseline of *c*.

    ``Ok(a)`` yields ``Resolved(f(base, a))`` where *base* is the resolved
    value or the pending fallback, never the optimistic guess.  ``Err``
    reverts, exactly like :func:`resolve`.
    """
    match outcome:
        case Ok(value):
            return Resolved(f(fallback_of(c), value))
        case Err():
            return revert(c)
    raise TypeError(f"expected Ok or Err, got {type(outcome).__name__}")


# ``try`` is a keyword; keep a readable alias next to the trailing-underscore name
try_combine = try_
