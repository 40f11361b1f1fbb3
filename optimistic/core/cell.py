from __future__ import annotations

"""OptimisticCell – mutable holder of the *current* immutable container.

The container functions are pure; an application still needs one place that
remembers "the value on screen right now".  A cell keeps that container behind
a lock so several producers (UI handler, request callbacks…) can transition it
from different threads.  Ordering is last-writer-wins: there is no notion of
request identity here.
"""

import threading
from typing import Callable, Generic, TypeVar

from optimistic.core import value as ov
from optimistic.core.outcome import Outcome
from optimistic.core.value import OptimisticValue
from optimistic.utils.events import Transitioned, publish
from optimistic.utils.ids import new_cell_id
from optimistic.utils.logging import log

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

__all__ = ["OptimisticCell"]


class OptimisticCell(Generic[T]):  # noqa: D101
    def __init__(self, initial: T, *, name: str | None = None):
        self.name = name or new_cell_id()
        self._current: OptimisticValue[T] = ov.from_resolved(initial)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"OptimisticCell(name={self.name!r}, current={self._current!r})"

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @property
    def current(self) -> OptimisticValue[T]:
        return self._current

    @property
    def value(self) -> T:  # noqa: D401
        """Currently displayed value."""
        return ov.unwrap(self._current)

    @property
    def is_pending(self) -> bool:
        return ov.is_pending(self._current)

    @property
    def is_resolved(self) -> bool:
        return ov.is_resolved(self._current)

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #
    def apply(
        self,
        fn: Callable[[OptimisticValue[T]], OptimisticValue[T]],
        *,
        op: str | None = None,
    ) -> OptimisticValue[T]:
        """Replace the current container with ``fn(current)`` and return it.

        *fn* runs under the lock; if it raises, the cell is left untouched and
        the exception propagates.
        """
        op = op or getattr(fn, "__name__", "apply")
        with self._lock:
            before = self._current
            after = fn(before)
            self._current = after
        log.debug(
            "%s: %s %s -> %s", self.name, op, ov.state_name(before), ov.state_name(after)
        )
        publish(Transitioned(cell=self.name, op=op, before=before, after=after))
        return after

    def push(self, new_value: T) -> OptimisticValue[T]:
        return self.apply(lambda c: ov.push(c, new_value), op="push")

    def update(self, f: Callable[[T], T]) -> OptimisticValue[T]:
        return self.apply(lambda c: ov.update(c, f), op="update")

    def force(self) -> OptimisticValue[T]:
        return self.apply(ov.force, op="force")

    def revert(self) -> OptimisticValue[T]:
        return self.apply(ov.revert, op="revert")

    def resolve(self, outcome: Outcome[T, E]) -> OptimisticValue[T]:
        return self.apply(lambda c: ov.resolve(c, outcome), op="resolve")

    def try_(self, outcome: Outcome[U, E], f: Callable[[T, U], T]) -> OptimisticValue[T]:
        return self.apply(lambda c: ov.try_(c, outcome, f), op="try")
