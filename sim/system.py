"""M/M/c queueing system: one FIFO wait line feeding c identical servers."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Protocol

from sim.entities import ConsistencyError, Customer, Diagnostic, Server
from sim.events import Event, EventScheduler
from sim.statistics import StatisticsCollector

logger = logging.getLogger(__name__)


class VariateStream(Protocol):
    def next(self) -> float: ...


class QueueingSystem:
    """Arrival / assignment / departure state machine driven by an EventScheduler.

    Servers are scanned lowest index first. A customer is owned by exactly one
    of: the wait line, a server slot, or the completed list. At the horizon,
    in-service customers are force-completed and waiting customers are
    discarded without being counted.
    """

    def __init__(
        self,
        scheduler: EventScheduler,
        n_servers: int,
        horizon: float,
        arrivals: VariateStream,
        services: VariateStream,
        stats: StatisticsCollector | None = None,
        on_diagnostic: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        if n_servers < 1:
            raise ValueError(f"n_servers must be >= 1, got {n_servers}")
        self.scheduler = scheduler
        self.horizon = horizon
        self.arrivals = arrivals
        self.services = services
        self.stats = stats if stats is not None else StatisticsCollector()
        self.on_diagnostic = on_diagnostic

        self.servers = [Server(id=i) for i in range(n_servers)]
        self.wait_line: deque[Customer] = deque()
        self.completed: list[Customer] = []
        self.diagnostics: list[Diagnostic] = []
        self.stopped = False

        self._next_customer_id = 0
        self._next_arrival: Event | None = None
        self._completion_events: list[Event | None] = [None] * n_servers

    @property
    def n_servers(self) -> int:
        return len(self.servers)

    def start(self) -> None:
        """Seed the first arrival and the horizon event."""
        self._schedule_next_arrival()
        self.scheduler.schedule(self.horizon - self.scheduler.now, self.on_horizon_reached)

    # ----- event handlers -----

    def on_arrival(self) -> None:
        if self.stopped:
            return
        now = self.scheduler.now
        customer = Customer(id=self._next_customer_id, arrival_time=now)
        self._next_customer_id += 1

        server = next((s for s in self.servers if not s.busy), None)
        if server is not None:
            self._begin_service(server, customer)
        else:
            self.wait_line.append(customer)

        self._schedule_next_arrival()

    def on_service_completion(self, server_id: int) -> None:
        if self.stopped:
            return
        server = self.servers[server_id]
        self._completion_events[server_id] = None
        try:
            customer = server.end_service(self.scheduler.now)
        except ConsistencyError as e:
            self._report(e)
            return
        self._record_completion(customer)

        if self.wait_line:
            self._begin_service(server, self.wait_line.popleft())

    def on_horizon_reached(self) -> None:
        if self.stopped:
            return
        self.stopped = True
        now = self.scheduler.now

        self.scheduler.cancel(self._next_arrival)
        self._next_arrival = None
        for i, ev in enumerate(self._completion_events):
            self.scheduler.cancel(ev)
            self._completion_events[i] = None

        for server in self.servers:
            try:
                if server.busy:
                    self._record_completion(server.end_service(now))
                else:
                    server.finalize_idle_time(now)
            except ConsistencyError as e:
                self._report(e)
            self.stats.add_server_totals(server.total_service_time, server.total_idle_time)

        self.stats.discarded += len(self.wait_line)
        if self.wait_line:
            logger.debug("Discarding %d waiting customers at t=%.4f", len(self.wait_line), now)
        self.wait_line.clear()
        self.scheduler.stop()

    # ----- helpers -----

    def _schedule_next_arrival(self) -> None:
        if self.stopped:
            return
        delay = self.arrivals.next()
        if self.scheduler.now + delay < self.horizon:
            self._next_arrival = self.scheduler.schedule(delay, self.on_arrival)
        else:
            self._next_arrival = None

    def _begin_service(self, server: Server, customer: Customer) -> None:
        try:
            server.start_service(customer, self.scheduler.now)
        except ConsistencyError as e:
            self._report(e)
            self.wait_line.appendleft(customer)
            return
        duration = self.services.next()
        self._completion_events[server.id] = self.scheduler.schedule(
            duration, self.on_service_completion, server.id
        )

    def _record_completion(self, customer: Customer) -> None:
        self.completed.append(customer)
        self.stats.record_wait(customer.waiting_time)

    def _report(self, error: ConsistencyError) -> None:
        diag = Diagnostic(time=self.scheduler.now, server_id=error.server_id, message=error.message)
        self.diagnostics.append(diag)
        logger.warning("t=%.4f consistency violation: %s", diag.time, error)
        if self.on_diagnostic is not None:
            self.on_diagnostic(diag)
