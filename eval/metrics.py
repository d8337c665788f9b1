"""Aggregation of per-configuration results across replications."""

from __future__ import annotations

from typing import Any

import numpy as np

from sim.statistics import ExperimentResult

METRIC_KEYS = ("total_customers", "avg_waiting_time", "utilization", "efficiency_score")
Z95 = 1.96


def confidence_interval_95(mean: float, std: float, n: int) -> tuple[float, float]:
    """Normal-approximation 95% interval for a sample mean; collapses to the mean for n < 2."""
    if n < 2:
        return (mean, mean)
    half = Z95 * std / np.sqrt(n)
    return (float(mean - half), float(mean + half))


def aggregate_metrics(results: list[ExperimentResult]) -> dict[str, Any]:
    """
    Aggregate replications of the same server count: mean, std and 95% CI per metric.
    Keys are "<metric>_mean", "<metric>_std", "<metric>_ci_lower", "<metric>_ci_upper".
    """
    if not results:
        return {}
    counts = {r.server_count for r in results}
    if len(counts) != 1:
        raise ValueError(f"cannot aggregate results for different server counts: {sorted(counts)}")

    out: dict[str, Any] = {"server_count": results[0].server_count, "replications": len(results)}
    for k in METRIC_KEYS:
        vals = np.array([getattr(r, k) for r in results], dtype=float)
        mean = float(vals.mean())
        std = float(vals.std(ddof=1)) if vals.size > 1 else 0.0
        out[f"{k}_mean"] = mean
        out[f"{k}_std"] = std
        lo, hi = confidence_interval_95(mean, std, vals.size)
        out[f"{k}_ci_lower"] = lo
        out[f"{k}_ci_upper"] = hi
    return out


def mean_result(results: list[ExperimentResult]) -> ExperimentResult:
    """Collapse replications into one ExperimentResult of means (for selection and plots)."""
    agg = aggregate_metrics(results)
    if not agg:
        raise ValueError("no results to average")
    return ExperimentResult(
        server_count=agg["server_count"],
        total_customers=int(round(agg["total_customers_mean"])),
        avg_waiting_time=agg["avg_waiting_time_mean"],
        utilization=agg["utilization_mean"],
        efficiency_score=agg["efficiency_score_mean"],
    )
