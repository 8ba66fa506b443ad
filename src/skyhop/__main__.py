#!/usr/bin/env python3
"""
Command-line entry point: opens the pygame window and runs the game.
"""

import argparse
import logging
import random

from .constants import GameConfig, RENDER_FPS, SpawnPolicy
from .runner_client import RunnerClient


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="skyhop", description="Endless jump-over-obstacles runner.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="frame rate cap (one physics step per frame)")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle and star generation")
    parser.add_argument("--ceiling", action="store_true", help="clamp the player at the top of the screen")
    parser.add_argument("--policy", choices=[p.value for p in SpawnPolicy], default=SpawnPolicy.DISTANCE.value,
                        help="obstacle spawn policy")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    config = GameConfig(clamp_ceiling=args.ceiling, spawn_policy=SpawnPolicy(args.policy))
    rng = random.Random(args.seed)

    RunnerClient(config, fps=args.fps, rng=rng).run()


if __name__ == "__main__":
    main()
