import threading

import pytest

from optimistic import Err, Ok, OptimisticCell, Pending, Resolved
from optimistic.utils.events import Transitioned, subscribe, unsubscribe


@pytest.fixture()
def events():
    seen = []

    def _record(evt):
        seen.append(evt)

    subscribe(Transitioned)(_record)
    yield seen
    unsubscribe(Transitioned, _record)


def test_cell_transitions_follow_container_rules():
    cell = OptimisticCell(1, name="likes")
    cell.push(2)
    cell.push(3)
    assert cell.value == 3
    assert cell.is_pending
    cell.revert()
    assert cell.current == Resolved(1)

    cell.update(lambda n: n + 5)
    assert cell.current == Pending(6, 1)
    cell.force()
    assert cell.is_resolved and cell.value == 6


def test_cell_resolve_and_try():
    cell = OptimisticCell([], name="todos")
    cell.push(["draft"])
    cell.try_(Ok("saved"), lambda base, x: [*base, x])
    assert cell.current == Resolved(["saved"])

    cell.push(["saved", "draft"])
    cell.resolve(Err("503"))
    assert cell.current == Resolved(["saved"])


def test_cell_publishes_one_event_per_transition(events):
    cell = OptimisticCell(0, name="counter")
    cell.push(1)
    cell.resolve(Ok(1))

    mine = [e for e in events if e.cell == "counter"]
    assert [e.op for e in mine] == ["push", "resolve"]
    assert mine[0].before == Resolved(0)
    assert mine[0].after == Pending(1, 0)
    assert mine[1].after == Resolved(1)


def test_failing_transition_leaves_cell_untouched(events):
    cell = OptimisticCell(1, name="fragile")

    def boom(_):
        raise ValueError("nope")

    with pytest.raises(ValueError):
        cell.update(boom)
    assert cell.current == Resolved(1)
    assert not [e for e in events if e.cell == "fragile"]


def test_default_name_generated():
    cell = OptimisticCell("x")
    assert cell.name.startswith("cell_")
    assert "cell_" in repr(cell)


def test_concurrent_pushes_keep_original_fallback():
    cell = OptimisticCell(0, name="race")

    def worker(n):
        for i in range(100):
            cell.push(n * 1000 + i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert cell.is_pending
    assert cell.current.fallback == 0
    cell.revert()
    assert cell.value == 0


def test_concurrent_updates_never_compound():
    cell = OptimisticCell(10, name="updates")
    threads = [threading.Thread(target=cell.update, args=(lambda n: n + 1,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    # every update computes from the fallback (10)
    assert cell.current == Pending(11, 10)


def test_apply_names_op_after_function(events):
    cell = OptimisticCell(2, name="custom")

    def double_it(c):
        return Resolved(c.value * 2)

    assert cell.apply(double_it) == Resolved(4)
    cell.apply(lambda c: c, op="noop")

    mine = [e for e in events if e.cell == "custom"]
    assert [e.op for e in mine] == ["double_it", "noop"]
    assert mine[0].before == Resolved(2)
    assert mine[0].after == Resolved(4)
