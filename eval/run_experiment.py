"""Sweep server counts 1..N, one independent run each, and pick a recommended count."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import numpy as np
import yaml

from eval.metrics import aggregate_metrics, mean_result
from eval.models import ExperimentConfig
from eval.selection import select_recommended
from sim.entities import Diagnostic
from sim.runner import make_streams, run_configuration
from sim.statistics import ExperimentResult

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


def load_config(config_path: str | Path | None = None) -> ExperimentConfig:
    """Load config YAML and validate it; a missing file yields the defaults."""
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        if config_path is not None:
            logger.warning("Config %s not found, using defaults", path)
        return ExperimentConfig()
    with open(path) as f:
        cfg: dict[str, Any] = yaml.safe_load(f) or {}
    return ExperimentConfig.model_validate(cfg)


class ExperimentRunner:
    """Runs one fresh simulation per server count and owns the ordered results."""

    def __init__(
        self,
        config: ExperimentConfig,
        on_diagnostic: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self.config = config
        self.on_diagnostic = on_diagnostic
        self.results: list[ExperimentResult] = []

    def resolve_seed(self, seed: int | None = None) -> int:
        """Return the given seed, else the configured one, else fresh OS entropy (logged)."""
        if seed is None:
            seed = self.config.sim.seed
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
            logger.info("No seed configured, drew entropy %d", seed)
        return seed

    def run_once(self, n_servers: int, seed: int | None) -> ExperimentResult:
        sim = self.config.sim
        arrivals, services = make_streams(sim.arrival_rate, sim.service_rate, seed)
        result, _ = run_configuration(
            n_servers, sim.horizon, arrivals, services, on_diagnostic=self.on_diagnostic
        )
        return result

    def run(self, seed: int | None = None) -> list[ExperimentResult]:
        """
        Sweep 1..max_servers in ascending order with the configured seed (or the given one).
        Every count reuses the same seed, so all configurations see the same arrivals.
        """
        sim = self.config.sim
        seed = self.resolve_seed(seed)
        logger.info(
            "Sweeping 1..%d servers (arrival rate %s, service rate %s, horizon %s, seed %s)",
            sim.max_servers,
            sim.arrival_rate,
            sim.service_rate,
            sim.horizon,
            seed,
        )
        results = [self.run_once(n, seed) for n in range(1, sim.max_servers + 1)]
        self.results = results
        return results

    def run_replications(self, k: int | None = None) -> tuple[list[ExperimentResult], list[dict[str, Any]]]:
        """
        Repeat the sweep k times with seeds seed, seed+1, ... and aggregate per server count.
        Returns (mean results in ascending count order, aggregate rows with std and CI).
        """
        k = k if k is not None else self.config.report.replications
        base_seed = self.resolve_seed()
        sweeps = [self.run(seed=base_seed + i) for i in range(k)]

        means: list[ExperimentResult] = []
        rows: list[dict[str, Any]] = []
        for idx in range(self.config.sim.max_servers):
            per_count = [sweep[idx] for sweep in sweeps]
            rows.append(aggregate_metrics(per_count))
            means.append(mean_result(per_count))
        self.results = means
        return means, rows

    def recommend(self, results: list[ExperimentResult] | None = None) -> ExperimentResult | None:
        sel = self.config.selection
        return select_recommended(
            self.results if results is None else results,
            sel.min_utilization,
            sel.max_utilization,
        )
