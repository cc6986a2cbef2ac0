"""CLI main entry point."""

import argparse
import dataclasses
import logging
import sys
import time

import numpy as np

from swarm_sim.backends.factory import list_available_backends
from swarm_sim.physics.diagnostics import summary
from swarm_sim.physics.simulator import Simulator
from swarm_sim.presets.random_field import initialize
from swarm_sim.strategies.factory import get_strategy, list_strategies
from swarm_sim.utils.config import Config, load_config
from swarm_sim.utils.reproducibility import get_seed_info


def build_config(args) -> Config:
    """Merge an optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()

    sim_overrides = {
        'ship_count': args.ships,
        'planet_count': args.planets,
        'area_size': args.area,
        'gravitational_constant': args.G,
    }
    sim_overrides = {k: v for k, v in sim_overrides.items() if v is not None}
    if sim_overrides:
        config.simulation = dataclasses.replace(config.simulation, **sim_overrides)

    for field_name in ('strategy', 'backend', 'workers', 'chunk_size', 'dt', 'steps', 'seed', 'log_interval'):
        value = getattr(args, field_name)
        if value is not None:
            setattr(config, field_name, value)
    return config


def make_strategy(config: Config, name: str = None):
    """Strategy for ``config`` (``name`` overrides ``config.strategy``)."""
    name = (name or config.strategy).lower()
    if name == 'sequential':
        return get_strategy(name)
    if name == 'threaded':
        return get_strategy(name, workers=config.workers, chunk_size=config.chunk_size)
    return get_strategy(name, backend=config.backend, chunk_size=config.chunk_size, workers=config.workers)


def print_summary(label: str, stats: dict):
    print(
        f"{label}: K={stats['kinetic']:.4f} U={stats['potential']:.4f} "
        f"E={stats['total']:.4f} v_mean={stats['mean_speed']:.3f} "
        f"v_max={stats['max_speed']:.3f} out_of_bounds={stats['out_of_bounds']}"
    )


def run_simulation(config: Config):
    """Run one simulation and print before/after diagnostics."""
    sim_config = config.simulation
    strategy = make_strategy(config)

    print(f"Running {sim_config.ship_count} ships around {sim_config.planet_count} planets "
          f"for {config.steps} steps (dt={config.dt})")
    print(f"Strategy: {strategy!r}, seed: {get_seed_info(config.seed)}")

    with Simulator.from_config(sim_config, config.seed, strategy=strategy, dt=config.dt) as sim:
        sim.log_interval = config.log_interval
        sim.set_profiling(True)
        print_summary("Initial", summary(sim.world, sim_config))

        start = time.perf_counter()
        sim.run(config.steps)
        elapsed = time.perf_counter() - start

        print_summary("Final", summary(sim.world, sim_config))
        if config.steps:
            print(f"Elapsed: {elapsed:.3f} s ({elapsed * 1000.0 / config.steps:.3f} ms/step)")
    return sim


def run_benchmark(config: Config):
    """Run the same seeded world under every strategy and compare."""
    sim_config = config.simulation
    base_world = initialize(sim_config, config.seed if config.seed is not None else 0)

    print(f"Benchmark: {sim_config.ship_count} ships x {sim_config.planet_count} planets, "
          f"{config.steps} steps")
    reference = None
    for name in list_strategies():
        world = base_world.copy()
        with make_strategy(config, name) as strategy:
            start = time.perf_counter()
            for _ in range(config.steps):
                strategy.step(world, config.dt, sim_config)
            elapsed = time.perf_counter() - start

        if reference is None:
            reference = world
            deviation = 0.0
        else:
            deviation = float(np.max(np.abs(world.ship_positions - reference.ship_positions), initial=0.0))
        per_step = elapsed * 1000.0 / max(config.steps, 1)
        print(f"  {strategy!r:<60} {per_step:10.3f} ms/step   max |dx| vs sequential = {deviation:.3e}")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Ships under the gravity of fixed planets in a bounded square'
    )

    parser.add_argument('--config', type=str, default=None,
                       help='JSON or YAML run configuration')

    # Simulation
    parser.add_argument('--ships', type=int, default=None,
                       help='Number of ships')
    parser.add_argument('--planets', type=int, default=None,
                       help='Number of planets')
    parser.add_argument('--area', type=float, default=None,
                       help='Half-width of the square simulation area')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant')
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of ticks to run')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step per tick')

    # Execution
    parser.add_argument('--strategy', type=str, default=None, choices=list_strategies(),
                       help='Execution strategy')
    parser.add_argument('--backend', type=str, default=None,
                       help=f'Backend for the batched strategy. Available: {list_available_backends()}')
    parser.add_argument('--workers', type=int, default=None,
                       help='Worker threads for threaded/batched strategies')
    parser.add_argument('--chunk-size', type=int, default=None,
                       help='Ships per parallel task')

    # Reproducibility / output
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    parser.add_argument('--log-interval', type=int, default=None,
                       help='Log diagnostics every N steps (0 disables)')
    parser.add_argument('--log-level', type=str, default='WARNING',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level')

    # Modes
    parser.add_argument('--benchmark', action='store_true',
                       help='Time every strategy on the same seeded world')
    parser.add_argument('--list-backends', action='store_true',
                       help='List available backends and exit')
    parser.add_argument('--list-strategies', action='store_true',
                       help='List execution strategies and exit')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.list_backends:
        print("Available backends:")
        for backend in list_available_backends():
            print(f"  - {backend}")
        return 0

    if args.list_strategies:
        print("Available strategies:")
        for strategy in list_strategies():
            print(f"  - {strategy}")
        return 0

    try:
        config = build_config(args)
    except (OSError, TypeError, ValueError) as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return 1

    if args.benchmark:
        run_benchmark(config)
    else:
        run_simulation(config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
