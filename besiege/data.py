"""Aggregate statistics for a load run."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

_MEGABYTE = 1024.0 * 1024.0


@dataclass
class Statistics:
    """Counters and timings collected across all transactions of a run.

    ``clock`` supplies the wall time read by :meth:`set_start` and
    :meth:`set_stop`. The rate, throughput and concurrency figures use the
    elapsed time last computed by :meth:`elapsed`.
    """

    total: float = 0.0
    bytes: int = 0
    count: int = 0
    code: int = 0
    okay: int = 0
    fail: int = 0
    highest: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _lowest: float = field(default=-1.0, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)
    _start: float = field(default=0.0, init=False, repr=False)
    _stop: float = field(default=0.0, init=False, repr=False)

    def increment_bytes(self, amount: int) -> None:
        self.bytes += amount

    def increment_count(self, amount: int) -> None:
        self.count += amount

    def increment_total(self, amount: float) -> None:
        self.total += amount

    def increment_code(self, amount: int) -> None:
        self.code += amount

    def increment_fail(self, amount: int) -> None:
        self.fail += amount

    def increment_okay(self, amount: int) -> None:
        self.okay += amount

    def set_start(self) -> None:
        """Record the start of the run."""
        self._start = self.clock()

    def set_stop(self) -> None:
        """Record the end of the run."""
        self._stop = self.clock()

    def set_highest(self, value: float) -> None:
        """Keep ``value`` if it is the longest transaction so far."""
        if self.highest < value:
            self.highest = value

    def set_lowest(self, value: float) -> None:
        """Keep ``value`` if it is the shortest transaction so far."""
        if self._lowest <= 0 or self._lowest > value:
            self._lowest = value

    def lowest(self) -> float:
        """The shortest transaction, or 0 when nothing succeeded."""
        return self._lowest if self.code else 0.0

    def megabytes(self) -> float:
        return self.bytes / _MEGABYTE

    def elapsed(self) -> float:
        """Seconds between start and stop; also remembered for the rates."""
        self._elapsed = self._stop - self._start
        return self._elapsed

    def availability(self) -> float:
        """Percentage of transactions that did not fail."""
        if self.count == 0:
            return 0.0
        return self.count / (self.count + self.fail) * 100

    def response_time(self) -> float:
        """Average seconds per transaction."""
        if self.total == 0 or self.count == 0:
            return 0.0
        return self.total / self.count

    def transaction_rate(self) -> float:
        """Transactions per second."""
        if self.count == 0 or self._elapsed == 0:
            return 0.0
        return self.count / self._elapsed

    def throughput(self) -> float:
        """Megabytes per second."""
        if self._elapsed == 0:
            return 0.0
        return self.bytes / (self._elapsed * _MEGABYTE)

    def concurrency(self) -> float:
        """Total transaction time divided by elapsed time."""
        if self._elapsed == 0:
            return 0.0
        return self.total / self._elapsed