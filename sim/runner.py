"""Single-run driver: one fresh scheduler and queueing system per server count."""

from __future__ import annotations

import logging
from typing import Callable

from sim.entities import Diagnostic
from sim.events import EventScheduler
from sim.processes import ExponentialVariate, stream_seeds
from sim.statistics import ExperimentResult, StatisticsCollector
from sim.system import QueueingSystem, VariateStream

logger = logging.getLogger(__name__)


def make_streams(arrival_rate: float, service_rate: float, seed: int | None) -> tuple[ExponentialVariate, ExponentialVariate]:
    """Fresh (arrival, service) exponential streams for one run."""
    arrival_seed, service_seed = stream_seeds(seed)
    return (
        ExponentialVariate.from_rate(arrival_rate, arrival_seed),
        ExponentialVariate.from_rate(service_rate, service_seed),
    )


def run_configuration(
    n_servers: int,
    horizon: float,
    arrivals: VariateStream,
    services: VariateStream,
    on_diagnostic: Callable[[Diagnostic], None] | None = None,
) -> tuple[ExperimentResult, QueueingSystem]:
    """
    Run one simulation to the horizon and return (result, system).
    The system is returned for inspection of servers, completed customers and diagnostics.
    """
    scheduler = EventScheduler()
    stats = StatisticsCollector()
    system = QueueingSystem(
        scheduler,
        n_servers,
        horizon,
        arrivals,
        services,
        stats=stats,
        on_diagnostic=on_diagnostic,
    )
    system.start()
    scheduler.run_until(horizon)

    result = stats.summarize(n_servers)
    logger.info(
        "%d servers: %d customers, avg wait %.3f, utilization %.1f%%, %d discarded, %d events",
        n_servers,
        result.total_customers,
        result.avg_waiting_time,
        result.utilization * 100,
        stats.discarded,
        scheduler.executed,
    )
    return result, system
