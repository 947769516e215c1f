import threading

import pytest

from devdesk import concurrency
from devdesk.concurrency import TaskGroup, crash_handler


def test_task_group_runs_all_tasks():
    group = TaskGroup()
    results = []
    lock = threading.Lock()

    def make(n):
        def task():
            with lock:
                results.append(n)
        return task

    for n in range(10):
        group.run(make(n))
    group.wait()
    assert sorted(results) == list(range(10))
    assert group._threads == []


def test_task_group_wait_reraises_task_error():
    group = TaskGroup()

    def boom():
        raise RuntimeError("failed task")

    group.run(boom)
    with pytest.raises(RuntimeError, match="failed task"):
        group.wait()


def test_task_group_as_context_manager_waits():
    done = []
    event = threading.Event()

    def task():
        event.wait(1)
        done.append(True)

    with TaskGroup() as group:
        group.run(task)
        event.set()
    assert done == [True]
    assert group._threads == []


def test_wait_with_no_tasks_returns():
    group = TaskGroup()
    group.wait()
    group.run(lambda: None)
    group.wait()
    assert group._threads == []


def test_crash_handler_calls_handlers_and_reraises():
    seen = []
    with pytest.raises(ValueError):
        with crash_handler(seen.append, reraise=True):
            raise ValueError("bad")
    assert len(seen) == 1
    assert isinstance(seen[0], ValueError)


def test_crash_handler_can_suppress():
    seen = []

    def fails():
        raise KeyError("k")

    guarded = crash_handler(seen.append, lambda e: seen.append(str(e)), reraise=False)(fails)
    guarded()
    assert len(seen) == 2
    assert isinstance(seen[0], KeyError)
    assert seen[1] == str(KeyError("k"))


def test_crash_handler_without_error_calls_nothing():
    seen = []
    with crash_handler(seen.append, reraise=True):
        value = 1
    assert seen == []
    assert value == 1


def test_crash_handler_uses_global_handlers_first():
    order = []

    def global_handler(exc):
        order.append("global")

    def fails():
        raise RuntimeError("x")

    concurrency.PANIC_HANDLERS.append(global_handler)
    try:
        guarded = crash_handler(lambda e: order.append("local"), reraise=False)(fails)
        guarded()
    finally:
        concurrency.PANIC_HANDLERS.remove(global_handler)
    assert order == ["global", "local"]


def test_crash_handler_default_follows_really_crash():
    seen = []
    with pytest.raises(RuntimeError, match="x"):
        with crash_handler(seen.append):
            raise RuntimeError("x")
    assert len(seen) == 1
    assert isinstance(seen[0], RuntimeError)


def test_crash_handler_as_decorator():
    seen = []

    def fails():
        raise ZeroDivisionError("z")

    wrapped = crash_handler(seen.append, reraise=False)(fails)
    wrapped()
    assert len(seen) == 1
    assert isinstance(seen[0], ZeroDivisionError)