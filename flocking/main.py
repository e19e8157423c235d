"""
Main entry point for the flocking simulation.

Run with:
    python -m flocking.main                           # Interactive window
    python -m flocking.main --headless --ticks 2000   # Collect metrics only
"""

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from .core.config import ConfigurationError, FlockConfig


def run_interactive(config: FlockConfig) -> None:
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC         - Quit")
    print("  SPACE       - Pause / resume")
    print("  R           - Reseed the flock")
    print("  Left click  - Add a seek target")
    print("  Right click - Clear seek targets")
    print("\nEach color coheres only with its own group, while separation")
    print("and alignment act across all groups.")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config: FlockConfig, ticks: int, csv_file: Optional[str] = None,
                 json_file: Optional[str] = None, plot_file: Optional[str] = None) -> dict:
    """
    Run without a window and export the collected metrics.

    Args:
        config: Flock configuration
        ticks: Number of ticks to simulate
        csv_file: Write per-group metrics here if given
        json_file: Write the full run report here if given
        plot_file: Write a metrics plot here if given

    Returns:
        Results dictionary from the run
    """
    from .simulation.headless import HeadlessRun
    from .analysis.export import export_metrics_to_csv, export_run_report
    from .analysis.plotting import plot_group_metrics

    print("=" * 60)
    print("HEADLESS FLOCKING RUN")
    print("=" * 60)
    print(f"Agents: {config.agentCount}")
    print(f"World: {config.worldWidth:g}x{config.worldHeight:g}")
    print(f"Ticks: {ticks}")
    print(f"Seed: {config.seed}")
    print()

    run = HeadlessRun(config)
    results = run.run(ticks)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for group, stats in results["aggregates"].items():
        print(f"\nGroup {group}:")
        print(f"   Spread: {stats['spread_mean']:.2f} ± {stats['spread_std']:.2f}")
        print(f"   Speed: {stats['mean_speed_mean']:.3f}")
        print(f"   Polarization: {stats['polarization_mean']:.3f}")

    if csv_file:
        export_metrics_to_csv(results["metrics_over_time"], csv_file)
    if json_file:
        export_run_report(results, json_file)
    if plot_file:
        plot_group_metrics(results["metrics_over_time"], plot_file)

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grouped-color boids flocking simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a window and collect metrics")
    parser.add_argument("--ticks", type=int, default=2000, help="Ticks to simulate in headless mode")
    parser.add_argument("--agents", type=int, help="Number of agents")
    parser.add_argument("--seed", type=int, help="Random seed for initial placement")
    parser.add_argument("--width", type=float, help="World width")
    parser.add_argument("--height", type=float, help="World height")
    parser.add_argument("--grid", action="store_true", help="Use the spatial grid for neighbor lookup")
    parser.add_argument("--csv", nargs="?", const="flock_metrics.csv", help="Export metrics CSV (headless)")
    parser.add_argument("--json", nargs="?", const="flock_report.json", help="Export JSON report (headless)")
    parser.add_argument("--plot", nargs="?", const="flock_metrics.png", help="Save metrics plot (headless)")
    return parser


def config_from_args(args: argparse.Namespace) -> FlockConfig:
    """
    Apply command line overrides to the default configuration.

    Raises:
        ConfigurationError: If the resulting configuration is invalid
    """
    overrides = {}
    if args.agents is not None:
        overrides["agentCount"] = args.agents
    if args.seed is not None:
        overrides["seed"] = args.seed
    elif args.headless:
        overrides["seed"] = 42
    if args.width is not None:
        overrides["worldWidth"] = args.width
    if args.height is not None:
        overrides["worldHeight"] = args.height
    if args.grid:
        overrides["neighborStrategy"] = "grid"

    config = dataclasses.replace(FlockConfig(), **overrides)
    config.validate()
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.headless:
        run_headless(config, args.ticks, args.csv, args.json, args.plot)
    else:
        run_interactive(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
