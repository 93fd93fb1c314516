"""A fixed pool of worker threads fed from a bounded queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable


class CrewFullError(RuntimeError):
    """Raised when work is added to a full, non-blocking crew."""


class CrewClosedError(RuntimeError):
    """Raised when a crew that is closed or shut down is asked for more."""


class Crew:
    """``size`` threads that run queued routines, at most ``maxsize`` waiting.

    With ``block`` set, :meth:`add` waits for room in a full queue instead of
    raising :class:`CrewFullError`.
    """

    def __init__(self, size: int, maxsize: int, block: bool = True) -> None:
        if size < 0:
            raise ValueError("crew size must not be negative")
        if maxsize < 1:
            raise ValueError("crew queue must hold at least one item")
        self._size = size
        self._maxsize = maxsize
        self._block = block
        self._total = 0
        self._closed = False
        self._shutdown = False
        self._queue: deque[tuple[Callable[..., Any], tuple[Any, ...]]] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._empty = threading.Condition(self._lock)
        self._threads = [
            threading.Thread(target=self._work, name=f"crew-{n}", daemon=True)
            for n in range(size)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while True:
            with self._lock:
                while not self._queue and not self._shutdown:
                    self._not_empty.wait()
                if self._shutdown:
                    return
                routine, args = self._queue.popleft()
                if self._block and len(self._queue) == self._maxsize - 1:
                    self._not_full.notify_all()
                if not self._queue:
                    self._empty.notify_all()
            routine(*args)

    def _wake_all(self) -> None:
        self._not_empty.notify_all()
        self._not_full.notify_all()
        self._empty.notify_all()

    def add(self, routine: Callable[..., Any], *args: Any) -> None:
        """Queue ``routine(*args)`` for the next free worker."""
        with self._lock:
            if len(self._queue) == self._maxsize and not self._block:
                raise CrewFullError("work queue is full")
            while len(self._queue) == self._maxsize and not (self._shutdown or self._closed):
                self._not_full.wait()
            if self._shutdown or self._closed:
                raise CrewClosedError("crew no longer accepts work")
            self._queue.append((routine, args))
            if len(self._queue) == 1:
                self._not_empty.notify_all()
            self._total += 1

    def cancel(self) -> None:
        """Shut down at once; workers stop after their current routine."""
        with self._lock:
            self._shutdown = True
            self._wake_all()

    def join(self, finish: bool = True) -> None:
        """Close the crew and wait for its threads to end.

        With ``finish`` set, queued work is run first; otherwise it is
        dropped. Joining a crew twice, or after cancelling, raises
        :class:`CrewClosedError`.
        """
        with self._lock:
            if self._closed or self._shutdown:
                raise CrewClosedError("crew is already closed")
            self._closed = True
            if finish:
                while self._queue and not self._shutdown:
                    self._empty.wait()
            self._shutdown = True
            self._wake_all()
        for thread in self._threads:
            thread.join()

    def size(self) -> int:
        """The number of worker threads."""
        return self._size

    def total(self) -> int:
        """How many routines have been queued in all."""
        return self._total

    def shutdown(self) -> bool:
        """True once the crew has been joined or cancelled."""
        return self._shutdown