"""Discrete-event simulator for an M/M/c checkout queue."""

from sim.entities import ConsistencyError, Customer, Diagnostic, Server
from sim.events import Event, EventScheduler
from sim.processes import ExponentialVariate, TraceVariate, stream_seeds
from sim.runner import make_streams, run_configuration
from sim.statistics import ExperimentResult, StatisticsCollector
from sim.system import QueueingSystem

__all__ = [
    "ConsistencyError",
    "Customer",
    "Diagnostic",
    "Server",
    "Event",
    "EventScheduler",
    "ExponentialVariate",
    "TraceVariate",
    "stream_seeds",
    "make_streams",
    "run_configuration",
    "ExperimentResult",
    "StatisticsCollector",
    "QueueingSystem",
]
