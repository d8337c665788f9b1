"""Evaluation: sweep runner, selection, aggregation, reporting, plots."""

from eval.metrics import aggregate_metrics, confidence_interval_95, mean_result
from eval.models import ExperimentConfig
from eval.run_experiment import ExperimentRunner, load_config
from eval.selection import select_recommended

__all__ = [
    "aggregate_metrics",
    "confidence_interval_95",
    "mean_result",
    "ExperimentConfig",
    "ExperimentRunner",
    "load_config",
    "select_recommended",
]
