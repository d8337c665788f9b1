"""Events and the time-ordered scheduler for discrete-event simulation."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class Event:
    """Single scheduled action. Ordered by (time, seq); seq breaks ties in insertion order.

    The event object is also the handle returned by EventScheduler.schedule.
    """

    time: float
    seq: int
    action: Callable[..., Any] = field(compare=False)
    args: tuple = field(compare=False, default=())
    cancelled: bool = field(compare=False, default=False)
    fired: bool = field(compare=False, default=False)

    @property
    def is_live(self) -> bool:
        return not (self.cancelled or self.fired)


class EventScheduler:
    """Binary-heap event list with a monotonic virtual clock and lazy cancellation.

    Cancelled events stay on the heap and are discarded when popped, so an
    action may cancel any pending event (including ones scheduled before it)
    without the heap being touched.
    """

    def __init__(self) -> None:
        self._heap: list[Event] = []
        self._seq = 0
        self._now = 0.0
        self._stop_requested = False
        self.executed = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of events still waiting to fire."""
        return sum(1 for ev in self._heap if ev.is_live)

    def schedule(self, delay: float, action: Callable[..., Any], *args: Any) -> Event:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        ev = Event(time=self._now + delay, seq=self._seq, action=action, args=args)
        self._seq += 1
        heapq.heappush(self._heap, ev)
        return ev

    def cancel(self, handle: Event | None) -> None:
        # Unknown, fired or already-cancelled handles are ignored.
        if handle is None or not handle.is_live:
            return
        handle.cancelled = True

    def stop(self) -> None:
        self._stop_requested = True

    def run_until(self, horizon: float) -> None:
        """Execute events in (time, seq) order while their time is <= horizon."""
        self._stop_requested = False
        while self._heap:
            head = self._heap[0]
            if head.cancelled:
                heapq.heappop(self._heap)
                continue
            if head.time > horizon:
                break
            heapq.heappop(self._heap)
            self._now = head.time
            head.fired = True
            self.executed += 1
            logger.debug("t=%.4f executing %s", head.time, getattr(head.action, "__name__", head.action))
            head.action(*head.args)
            if self._stop_requested:
                break
