#!/usr/bin/env python3
"""
M/M/c staffing sweep
Simulates 1..N servers for a fixed horizon, prints a comparison table and a
recommended server count, and writes CSV, data series and plots.

Usage: python3 run_experiment.py [--options]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from eval.models import ExperimentConfig
from eval.report import (
    RESULTS_CSV_FILE,
    format_comparison_table,
    format_recommendation,
    format_result_block,
    write_results_csv,
    write_series,
)
from eval.run_experiment import ExperimentRunner, load_config

logger = logging.getLogger("run_experiment")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def write_outputs(config: ExperimentConfig, results, aggregate_rows=None) -> None:
    """Write CSV, series files and plots. Failures are logged and never raised."""
    results_dir = Path(config.report.results_dir)
    try:
        csv_path = write_results_csv([r.as_dict() for r in results], results_dir / RESULTS_CSV_FILE)
        logger.info("Wrote %s", csv_path)
        if aggregate_rows:
            agg_path = write_results_csv(aggregate_rows, results_dir / "results_aggregate.csv")
            logger.info("Wrote %s", agg_path)
        util_path, wait_path = write_series(results, results_dir)
        logger.info("Wrote %s and %s", util_path, wait_path)
    except OSError as e:
        logger.error("Could not write results to %s: %s", results_dir, e)
        return

    if not config.report.plots:
        return
    try:
        from eval.plots import generate_all_plots

        for path in generate_all_plots(results_dir):
            logger.info("Saved %s", path)
    except Exception as e:
        logger.error("Plot generation failed: %s", e)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="M/M/c server-count sweep",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default sweep (config/default.yaml)
  python3 run_experiment.py

  # 1..6 servers, faster service, shorter run
  python3 run_experiment.py --max-servers 6 --service-rate 1.5 --horizon 500

  # Average over 20 replications
  python3 run_experiment.py --replications 20 --results results/rep20
        """,
    )
    parser.add_argument("--config", type=str, help="Configuration YAML file")
    parser.add_argument("--max-servers", type=int, default=None, help="Maximum number of servers to test")
    parser.add_argument("--arrival-rate", type=float, default=None, help="Customer arrival rate (customers/second)")
    parser.add_argument("--service-rate", type=float, default=None, help="Service rate per server (customers/second)")
    parser.add_argument("--horizon", type=float, default=None, help="Simulation time in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--replications", type=int, default=None, help="Sweeps to average over")
    parser.add_argument("--results", type=str, default=None, help="Results directory")
    parser.add_argument("--no-plots", action="store_true", help="Skip PNG plot generation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        config = config.with_overrides(
            "sim",
            max_servers=args.max_servers,
            arrival_rate=args.arrival_rate,
            service_rate=args.service_rate,
            horizon=args.horizon,
            seed=args.seed,
        )
        config = config.with_overrides(
            "report",
            replications=args.replications,
            results_dir=args.results,
            plots=False if args.no_plots else None,
        )
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        print(f"Invalid configuration: {e}")
        return 2

    sim = config.sim
    print("M/M/c Queue Simulation")
    print(f"Arrival rate: {sim.arrival_rate} customers/second")
    print(f"Service rate: {sim.service_rate} customers/second")
    print(f"Simulation time: {sim.horizon} seconds")
    print(f"Expected customers: ~{config.expected_customers}")
    print(f"Testing 1 to {sim.max_servers} servers")

    runner = ExperimentRunner(config)
    aggregate_rows = None
    if config.report.replications > 1:
        results, aggregate_rows = runner.run_replications()
    else:
        results = runner.run()

    for r in results:
        print()
        print(format_result_block(r))

    print("\n Comparison Table ")
    print(format_comparison_table(results))

    best = runner.recommend(results)
    print()
    print(format_recommendation(best, config.expected_customers))

    write_outputs(config, results, aggregate_rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
