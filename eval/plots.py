"""Generate figures: utilization and average waiting time vs number of servers."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from eval.report import RESULTS_CSV_FILE


def plot_utilization(csv_path: str | Path, output_path: str | Path | None = None) -> Path:
    """Line plot of utilization (%) against server count."""
    df = pd.read_csv(csv_path).sort_values("server_count")
    if output_path is None:
        output_path = Path(csv_path).parent / "utilization.png"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(df["server_count"], df["utilization"] * 100.0, marker="o", color="#0066cc", label="Utilization")
    ax.set_xlabel("Number of Servers")
    ax.set_ylabel("Utilization (%)")
    ax.set_title("Server Utilization vs Number of Servers")
    ax.set_ylim(0, 105)
    ax.set_xticks(df["server_count"])
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


def plot_waiting_time(csv_path: str | Path, output_path: str | Path | None = None) -> Path:
    """Line plot of average waiting time against server count."""
    df = pd.read_csv(csv_path).sort_values("server_count")
    if output_path is None:
        output_path = Path(csv_path).parent / "waiting_time.png"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(df["server_count"], df["avg_waiting_time"], marker="o", color="#cc0000", label="Average Waiting Time")
    ax.set_xlabel("Number of Servers")
    ax.set_ylabel("Average Waiting Time (seconds)")
    ax.set_title("Average Waiting Time vs Number of Servers")
    ax.set_ylim(bottom=0)
    ax.set_xticks(df["server_count"])
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


def generate_all_plots(results_dir: str | Path = "results") -> list[Path]:
    """Generate all plots from results dir if the results CSV exists."""
    results_dir = Path(results_dir)
    csv_path = results_dir / RESULTS_CSV_FILE
    if not csv_path.exists():
        return []
    return [
        plot_utilization(csv_path, results_dir / "utilization.png"),
        plot_waiting_time(csv_path, results_dir / "waiting_time.png"),
    ]


if __name__ == "__main__":
    import argparse

    p = argparse.ArgumentParser()
    p.add_argument("--results_dir", type=str, default="results")
    args = p.parse_args()
    for path in generate_all_plots(results_dir=args.results_dir):
        print(f"Saved {path}")
