"""Recommended-configuration selection over a sweep of results."""

from __future__ import annotations

from sim.statistics import ExperimentResult

DEFAULT_MIN_UTILIZATION = 0.60
DEFAULT_MAX_UTILIZATION = 0.90


def in_band(result: ExperimentResult, min_utilization: float, max_utilization: float) -> bool:
    return min_utilization <= result.utilization <= max_utilization


def select_recommended(
    results: list[ExperimentResult],
    min_utilization: float = DEFAULT_MIN_UTILIZATION,
    max_utilization: float = DEFAULT_MAX_UTILIZATION,
) -> ExperimentResult | None:
    """
    Pick the result with the lowest average wait among those whose utilization is in
    [min_utilization, max_utilization]. If none is in band, fall back to the highest
    efficiency score overall. Ties keep the first encountered entry (smallest server
    count when results are in ascending order). Returns None for an empty sweep.
    """
    if not results:
        return None

    candidates = [r for r in results if in_band(r, min_utilization, max_utilization)]
    if candidates:
        best = candidates[0]
        for r in candidates[1:]:
            if r.avg_waiting_time < best.avg_waiting_time:
                best = r
        return best

    best = results[0]
    for r in results[1:]:
        if r.efficiency_score > best.efficiency_score:
            best = r
    return best
