# timeline/core/timer.py
"""
Cooperative timers driven by frame deltas.

Nothing here runs on a thread. The host advances a FrameClock with the time
elapsed since the last frame (directly, or through the 'dt' signal) and due
callbacks run inside that call.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional
import heapq
import itertools
import logging

from .signal import SignalBridge, Connection, SIGNAL_DT

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TimerHandle:
    """Cancellation token for a scheduled callback."""
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class FrameClock:
    """Monotonic clock that only moves when advanced."""

    def __init__(self):
        self._now: float = 0.0
        self._queue: List[tuple] = []
        self._seq = itertools.count()
        self._connection: Optional[Connection] = None

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(due=self._now + max(0.0, delay), callback=callback)
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    def advance(self, dt: float) -> int:
        """Move time forward by dt seconds and run every callback that became due."""
        self._now += max(0.0, dt)
        fired = 0

        while self._queue and self._queue[0][0] <= self._now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.fired = True
            handle.callback()
            fired += 1

        return fired

    def pending_count(self) -> int:
        return sum(1 for _, _, h in self._queue if h.pending)

    def bind(self, bridge: SignalBridge) -> Connection:
        self._connection = bridge.connect(SIGNAL_DT, self.advance)
        return self._connection

    def unbind(self):
        if self._connection:
            self._connection.cancel()
            self._connection = None


@dataclass
class Debouncer:
    """
    Collapses bursts of triggers into one callback, run `delay` seconds
    after the last trigger.
    """
    clock: FrameClock
    delay: float
    callback: Callable[[], None]
    _handle: Optional[TimerHandle] = field(default=None, repr=False)

    @property
    def pending(self) -> bool:
        return self._handle is not None and self._handle.pending

    def trigger(self):
        self.cancel()
        self._handle = self.clock.call_later(self.delay, self._fire)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self):
        self._handle = None
        logger.debug("debounced callback fired after %.3fs", self.delay)
        self.callback()
