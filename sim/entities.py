"""Simulator entities: Customer, Server, and consistency diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


class ConsistencyError(RuntimeError):
    """A server was asked to make a state transition its current state forbids."""

    def __init__(self, server_id: int, message: str) -> None:
        super().__init__(f"Server {server_id}: {message}")
        self.server_id = server_id
        self.message = message


@dataclass(frozen=True)
class Diagnostic:
    """Record of a skipped operation, observable by the caller of a run."""

    time: float
    server_id: int
    message: str


@dataclass
class Customer:
    """A customer in the system."""

    id: int
    arrival_time: float
    service_start_time: float | None = None  # set when a server picks it up
    service_end_time: float | None = None  # set when service completes

    @property
    def waiting_time(self) -> float:
        if self.service_start_time is None:
            return 0.0
        return self.service_start_time - self.arrival_time

    @property
    def service_time(self) -> float:
        if self.service_start_time is None or self.service_end_time is None:
            return 0.0
        return self.service_end_time - self.service_start_time


@dataclass
class Server:
    """A cashier/server with busy and idle bookkeeping.

    last_activity_time is None until the server first starts a service; the
    idle gap before that activation is measured from time 0.
    """

    id: int
    busy: bool = False
    current_customer: Customer | None = None
    total_service_time: float = 0.0
    total_idle_time: float = 0.0
    last_activity_time: float | None = None

    def _close_idle_interval(self, now: float) -> None:
        if self.last_activity_time is None:
            self.total_idle_time += now
        else:
            self.total_idle_time += now - self.last_activity_time

    def start_service(self, customer: Customer, now: float) -> None:
        if self.busy:
            raise ConsistencyError(self.id, "already busy")
        self._close_idle_interval(now)
        self.busy = True
        self.current_customer = customer
        customer.service_start_time = now
        self.last_activity_time = now

    def end_service(self, now: float) -> Customer:
        if not self.busy:
            raise ConsistencyError(self.id, "not busy")
        customer = self.current_customer
        if customer is None:
            self.busy = False
            self.last_activity_time = now
            raise ConsistencyError(self.id, "busy with no assigned customer")
        self.total_service_time += now - customer.service_start_time
        customer.service_end_time = now
        self.busy = False
        self.current_customer = None
        self.last_activity_time = now
        return customer

    def finalize_idle_time(self, now: float) -> None:
        """Close the trailing idle interval at the end of a run."""
        if self.busy:
            raise ConsistencyError(self.id, "cannot finalize idle time while busy")
        self._close_idle_interval(now)
        self.last_activity_time = now

    @property
    def accounted_time(self) -> float:
        return self.total_service_time + self.total_idle_time
