import itertools
from datetime import datetime

import pytest

from time_optimizer.schema import Priority, TaskStatus
from time_optimizer.store import TaskStore

CLOCK = datetime(2025, 1, 6, 9, 0)


def _store():
    counter = itertools.count(1)
    return TaskStore(id_factory=lambda: f"id{next(counter)}", clock=lambda: CLOCK)


def test_add_sets_defaults():
    store = _store()
    task = store.add("Write report", 60, Priority.HIGH, "work")
    assert task.id == "id1"
    assert task.status is TaskStatus.PENDING
    assert task.completed is False
    assert task.created_at == CLOCK
    assert store.snapshot() == (task,)


def test_snapshot_is_not_affected_by_later_changes():
    store = _store()
    task = store.add("Write report", 60)
    before = store.snapshot()

    store.toggle_complete(task.id)

    assert before[0].completed is False
    assert store.get(task.id).completed is True


def test_toggle_complete_round_trip():
    store = _store()
    task = store.add("Write report", 60)

    done = store.toggle_complete(task.id)
    assert (done.completed, done.status, done.actual_end) == (True, TaskStatus.COMPLETED, CLOCK)

    reopened = store.toggle_complete(task.id)
    assert (reopened.completed, reopened.status, reopened.actual_end) == (False, TaskStatus.PENDING, None)


def test_mark_in_progress_and_update():
    store = _store()
    task = store.add("Write report", 60)
    started = store.mark_in_progress(task.id)
    assert started.status is TaskStatus.IN_PROGRESS
    assert started.actual_start == CLOCK

    renamed = store.update(task.id, title="Write annual report", duration=90)
    assert renamed.title == "Write annual report"
    assert renamed.status is TaskStatus.IN_PROGRESS


def test_unknown_ids():
    store = _store()
    store.add("a", 10)
    with pytest.raises(KeyError):
        store.update("missing", title="x")
    with pytest.raises(KeyError):
        store.toggle_complete("missing")
    store.delete("missing")
    assert len(store) == 1


def test_delete_keeps_order():
    store = _store()
    a, b, c = store.add("a", 10), store.add("b", 10), store.add("c", 10)
    store.delete(b.id)
    assert [t.id for t in store.snapshot()] == [a.id, c.id]


def test_duplicate_ids_rejected():
    store = _store()
    a, b = store.add("a", 10), store.add("b", 10)
    with pytest.raises(ValueError):
        TaskStore(tasks=(a, b, a))
    with pytest.raises(ValueError):
        store.update(b.id, id=a.id)
    assert store.update(b.id, id=b.id).id == b.id
    assert store.update(b.id, id="fresh").id == "fresh"
