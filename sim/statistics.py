"""Per-run statistics and the immutable per-configuration result."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ExperimentResult:
    """Summary of one run for one server count."""

    server_count: int
    total_customers: int
    avg_waiting_time: float
    utilization: float  # 0..1
    efficiency_score: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class StatisticsCollector:
    """Accumulates waiting times and server busy/idle totals for one run."""

    waiting_times: list[float] = field(default_factory=list)
    total_service_time: float = 0.0
    total_idle_time: float = 0.0
    discarded: int = 0  # customers still waiting when the horizon was reached

    def record_wait(self, waiting_time: float) -> None:
        self.waiting_times.append(waiting_time)

    def add_server_totals(self, service_time: float, idle_time: float) -> None:
        self.total_service_time += service_time
        self.total_idle_time += idle_time

    @property
    def completed(self) -> int:
        return len(self.waiting_times)

    @property
    def avg_waiting_time(self) -> float:
        if not self.waiting_times:
            return 0.0
        return sum(self.waiting_times) / len(self.waiting_times)

    @property
    def utilization(self) -> float:
        denom = self.total_service_time + self.total_idle_time
        if denom <= 0:
            return 0.0
        return self.total_service_time / denom

    @property
    def efficiency_score(self) -> float:
        """Ranking heuristic: utilization / (avg wait + 1). Not derived from queueing theory."""
        return self.utilization / (self.avg_waiting_time + 1.0)

    def summarize(self, server_count: int) -> ExperimentResult:
        return ExperimentResult(
            server_count=server_count,
            total_customers=self.completed,
            avg_waiting_time=self.avg_waiting_time,
            utilization=self.utilization,
            efficiency_score=self.efficiency_score,
        )
