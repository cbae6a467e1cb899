"""Headless command-line driver for the snake simulation."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

import numpy as np

from snake_sim.config import SimulationConfig
from snake_sim.runner import TickLoop
from snake_sim.simulation import Simulation
from snake_sim.snake import Direction, MoveOutcome

logger = logging.getLogger(__name__)

_HEADINGS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-sim",
        description="Run the snake simulation headless with random input.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Play a headless game.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    run_p.add_argument("--width", type=int, default=None)
    run_p.add_argument("--height", type=int, default=None)
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--tick-interval", type=float, default=None)
    run_p.add_argument("--ticks", type=int, default=200)
    run_p.add_argument(
        "--turn-chance", type=float, default=0.3,
        help="Probability of requesting a random heading before each tick.",
    )
    run_p.add_argument(
        "--realtime", action="store_true",
        help="Pace ticks with the fixed-timestep loop instead of running flat out.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write the default config as JSON.")
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="File to write; prints to stdout when omitted.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> SimulationConfig:
    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "seed": "seed",
        "tick_interval": "tick_interval",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        config = replace(config, **overrides)
    return config


class _RandomInput:
    """Requests a random heading before some ticks."""

    def __init__(self, simulation: Simulation, turn_chance: float, seed: int | None) -> None:
        self.simulation = simulation
        self.turn_chance = turn_chance
        self.rng = np.random.default_rng(seed)

    def sample(self) -> None:
        if self.simulation.snake.direction is Direction.UNSET or (
            self.rng.random() < self.turn_chance
        ):
            heading = _HEADINGS[int(self.rng.integers(len(_HEADINGS)))]
            self.simulation.request_direction(heading)


def _run_game(args: argparse.Namespace) -> int:
    config = _load_config(args)
    sim = Simulation(config)
    player = _RandomInput(sim, args.turn_chance, config.seed)
    best_score = 0

    def on_tick(result, _snapshot) -> None:
        nonlocal best_score
        best_score = max(best_score, result.score)
        if result.outcome is MoveOutcome.COLLIDED:
            logger.info(
                "Round over at tick %d (%s), score %d.",
                result.tick, result.collision.value, result.score,
            )
        player.sample()

    player.sample()
    if args.realtime:
        asyncio.run(TickLoop(sim, on_tick=on_tick).run(max_ticks=args.ticks))
    else:
        for _ in range(args.ticks):
            on_tick(sim.tick(), sim.snapshot())

    summary = sim.snapshot().to_dict()
    summary["rounds_played"] = sim.rounds_played
    summary["best_score"] = best_score
    print(json.dumps(summary, indent=2))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = SimulationConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-sim`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_game,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
