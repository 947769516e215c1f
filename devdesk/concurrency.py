"""Helpers for running work in threads and handling crashes."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator

REALLY_CRASH = True

PANIC_HANDLERS: list[Callable[[BaseException], None]] = []


class TaskGroup:
    """Runs callables in threads and waits for all of them to finish.

    The first exception raised by a task is re-raised by :meth:`wait`.
    """

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._error: BaseException | None = None

    def run(self, fn: Callable[[], object]) -> None:
        """Start fn in a new thread."""

        def target() -> None:
            try:
                fn()
            except BaseException as exc:  # noqa: BLE001 - handed to wait()
                with self._lock:
                    if self._error is None:
                        self._error = exc

        thread = threading.Thread(target=target, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()

    def wait(self) -> None:
        """Block until every started task has finished."""
        while True:
            with self._lock:
                pending = [t for t in self._threads if t.is_alive() or not t.ident]
                if not pending:
                    self._threads = []
                    error, self._error = self._error, None
                    break
            for thread in pending:
                thread.join()
        if error is not None:
            raise error

    def __enter__(self) -> "TaskGroup":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wait()


@contextmanager
def crash_handler(
    *args: Callable[[BaseException], None], reraise: bool | None = None
) -> Iterator[None]:
    """Pass any exception to PANIC_HANDLERS and the given handlers.

    The exception is re-raised when reraise is true; by default REALLY_CRASH decides.
    """
    try:
        yield
    except Exception as exc:
        for handler in list(PANIC_HANDLERS):
            handler(exc)
        for handler in args:
            handler(exc)
        if REALLY_CRASH if reraise is None else reraise:
            raise