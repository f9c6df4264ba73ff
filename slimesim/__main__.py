"""Headless command-line runner for the slime simulation.

Runs a world faster than realtime and logs population stats:

    python -m slimesim --seed demo --duration-ms 120000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from slimesim.config.settings import SimulationSettings
from slimesim.exceptions import SlimeSimError
from slimesim.simulation import Simulation

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 60


def resolve_overlaps(simulation: Simulation) -> int:
    """Feed slime/food overlaps to the simulation as contacts.

    Headless runs have no collision layer, so a circle overlap test stands
    in for it. Slimes are checked in population order, food in spawn order.

    Returns:
        Number of food items eaten
    """
    eaten = 0
    for slime in simulation.slime_manager.get_slimes():
        if not slime.is_alive:
            continue
        for food in simulation.food_manager.get_all_food():
            reach = slime.radius + food.radius
            if slime.position.distance_to(food.position) <= reach:
                simulation.handle_contact(slime, food)
                if food.is_consumed:
                    eaten += 1
    return eaten


def run_headless(
    settings: SimulationSettings,
    duration_ms: float,
    tick_ms: float,
    stats_interval_ms: float,
    export_genomes: Optional[str] = None,
) -> Simulation:
    """Run a simulation for *duration_ms* simulated milliseconds.

    Args:
        settings: Validated simulation settings
        duration_ms: Total simulated time
        tick_ms: Simulated time per tick
        stats_interval_ms: Log stats every this many simulated milliseconds
        export_genomes: Optional JSON file to write surviving genomes to

    Returns:
        The finished simulation
    """
    simulation = Simulation(settings)
    simulation.start()

    next_stats = stats_interval_ms
    total_eaten = 0
    while simulation.elapsed_ms < duration_ms:
        simulation.tick(tick_ms)
        total_eaten += resolve_overlaps(simulation)
        if simulation.elapsed_ms >= next_stats:
            _log_stats(simulation, total_eaten)
            next_stats += stats_interval_ms

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("Finished after %.0f ms", simulation.elapsed_ms)
    _log_stats(simulation, total_eaten)

    if export_genomes:
        _export_genomes(simulation, Path(export_genomes))
    return simulation


def _log_stats(simulation: Simulation, total_eaten: int) -> None:
    stats = simulation.stats()
    logger.info(
        "t=%.0fms slimes=%d/%d food=%d/%d eaten=%d deaths=%d",
        stats.elapsed_ms,
        stats.population,
        stats.max_population,
        stats.food_count,
        stats.max_food,
        total_eaten,
        stats.total_deaths,
    )
    if stats.mean_genes:
        logger.info(
            "  mean genes: %s",
            ", ".join(f"{name}={value:.3f}" for name, value in stats.mean_genes.items()),
        )


def _export_genomes(simulation: Simulation, path: Path) -> None:
    payload = simulation.save_state()
    payload["stats"] = simulation.stats().to_dict()
    path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
    logger.info("Exported %d genomes to %s", len(payload["genomes"]), path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m slimesim",
        description="Slime Ecosystem Simulation (headless)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two simulated minutes with the default world
  python -m slimesim

  # Reproducible run with a named seed
  python -m slimesim --seed demo --duration-ms 600000

  # Custom settings file, exporting surviving genomes
  python -m slimesim --config world.json --export-genomes genomes.json
        """,
    )
    parser.add_argument("--seed", type=str, default=None, help="Seed string (overrides config)")
    parser.add_argument(
        "--config", type=str, default=None, metavar="FILE", help="JSON settings file"
    )
    parser.add_argument(
        "--duration-ms",
        type=float,
        default=120000.0,
        help="Simulated milliseconds to run (default: 120000)",
    )
    parser.add_argument(
        "--tick-ms",
        type=float,
        default=1000.0 / 60.0,
        help="Simulated milliseconds per tick (default: one 60 Hz frame)",
    )
    parser.add_argument(
        "--stats-interval-ms",
        type=float,
        default=10000.0,
        help="Log stats every N simulated milliseconds (default: 10000)",
    )
    parser.add_argument(
        "--export-genomes",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Write RNG state and surviving genomes to a JSON file",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the simulation."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.tick_ms <= 0 or args.stats_interval_ms <= 0:
        logger.error("--tick-ms and --stats-interval-ms must be positive")
        return 2

    try:
        if args.config:
            settings = SimulationSettings.from_file(args.config)
        else:
            settings = SimulationSettings()
        if args.seed is not None:
            settings = settings.model_copy(update={"seed": args.seed})

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("SLIME ECOSYSTEM SIMULATION - HEADLESS")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("Using random seed: %s", settings.seed)
        run_headless(
            settings,
            args.duration_ms,
            args.tick_ms,
            args.stats_interval_ms,
            export_genomes=args.export_genomes,
        )
    except SlimeSimError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Could not write output: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
