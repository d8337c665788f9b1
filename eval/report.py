"""Console tables and two-column data series for a sweep of results."""

from __future__ import annotations

import csv
from pathlib import Path

from sim.statistics import ExperimentResult

UTILIZATION_DATA_FILE = "utilization_data.dat"
WAITING_TIME_DATA_FILE = "waiting_time_data.dat"
RESULTS_CSV_FILE = "results.csv"


def format_result_block(result: ExperimentResult) -> str:
    return "\n".join(
        [
            f"Results for {result.server_count} servers",
            f"Total customers served: {result.total_customers}",
            f"Average waiting time: {result.avg_waiting_time:.2f} seconds",
            f"System utilization: {result.utilization * 100:.1f}%",
            f"Efficiency score: {result.efficiency_score:.3f}",
        ]
    )


def format_comparison_table(results: list[ExperimentResult]) -> str:
    lines = [
        " Servers | Customers | Avg Wait Time | Utilization | Efficiency",
        "---------|-----------|---------------|-------------|------------",
    ]
    for r in results:
        lines.append(
            f"{r.server_count:>8} | {r.total_customers:>9} | {r.avg_waiting_time:>13.2f} | "
            f"{r.utilization * 100:>10.1f}% | {r.efficiency_score:>10.3f}"
        )
    return "\n".join(lines)


def format_recommendation(result: ExperimentResult | None, expected_customers: int) -> str:
    if result is None:
        return "No results available for a recommendation."
    return "\n".join(
        [
            "RECOMMENDATION",
            f"Optimal number of servers: {result.server_count}",
            f"For {expected_customers} expected customers:",
            f"  - Average waiting time: {result.avg_waiting_time:.2f} seconds",
            f"  - System utilization: {result.utilization * 100:.1f}%",
            f"  - Efficiency score: {result.efficiency_score:.3f}",
        ]
    )


def write_series(results: list[ExperimentResult], results_dir: str | Path) -> tuple[Path, Path]:
    """
    Write server count vs utilization (%) and server count vs average wait as
    whitespace-separated two-column files, sorted by server count.
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    ordered = sorted(results, key=lambda r: r.server_count)

    util_path = results_dir / UTILIZATION_DATA_FILE
    with open(util_path, "w") as f:
        f.write("# Servers Utilization(%)\n")
        for r in ordered:
            f.write(f"{r.server_count} {r.utilization * 100.0:.2f}\n")

    wait_path = results_dir / WAITING_TIME_DATA_FILE
    with open(wait_path, "w") as f:
        f.write("# Servers AvgWaitingTime\n")
        for r in ordered:
            f.write(f"{r.server_count} {r.avg_waiting_time:.3f}\n")

    return util_path, wait_path


def write_results_csv(rows: list[dict], path: str | Path) -> Path:
    """Write result dicts (ExperimentResult.as_dict() or aggregate rows) to CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        if rows:
            w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            w.writeheader()
            w.writerows(rows)
    return path
