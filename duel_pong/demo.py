#!/usr/bin/env python3
"""
Headless Duel Pong match between two simple controllers
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from duel_pong.core.game_engine import GameEngine
from duel_pong.core.interfaces.player import InputSource
from duel_pong.display import ScoreTextDisplay
from duel_pong.players import create_input
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import game_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless Duel Pong match")
    parser.add_argument("--seconds", type=float, default=30.0, help="Simulated match length")
    parser.add_argument("--fps", type=int, default=None, help="Frames per simulated second")
    parser.add_argument(
        "--left",
        default="follow",
        choices=["idle", "random", "follow"],
        help="Left paddle controller",
    )
    parser.add_argument(
        "--right",
        default="random",
        choices=["idle", "random", "follow"],
        help="Right paddle controller",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random controllers")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every point")
    return parser.parse_args(argv)


def _make_input(kind: str, side: str, seed: int | None) -> InputSource:
    if kind == "random":
        return create_input(kind, name=f"Random_{side}", seed=seed)
    return create_input(kind)


def make_inputs(
    left_kind: str, right_kind: str, seed: int | None = None
) -> tuple[InputSource, InputSource]:
    """Creates both controllers, the right one seeded with seed + 1"""
    right_seed = seed + 1 if seed is not None else None
    return _make_input(left_kind, "left", seed), _make_input(right_kind, "right", right_seed)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config: GameConfig = game_config
    if args.config is not None:
        try:
            config = GameConfig.load_from_file(args.config)
        except (FileNotFoundError, ValidationError, json.JSONDecodeError) as e:
            print(f"Error: {e}")
            return 1

    fps = args.fps or config.FPS
    frames = int(args.seconds * fps)

    left, right = make_inputs(args.left, args.right, args.seed)
    display = ScoreTextDisplay(config)

    print("=== DUEL PONG ===")
    print(f"Left: {left.name}  Right: {right.name}")
    print(f"Simulating {frames} frames at {fps} FPS")
    print()

    engine = GameEngine(left, right, score_display=display, config=config)
    engine.start_game()
    engine.run(frames, 1.0 / fps)
    engine.stop_game()

    stats = engine.get_stats()
    print(display.text)
    print(f"Paddle hits: {stats['paddle_hits']}")
    print(f"Wall bounces: {stats['wall_bounces']}")
    print(f"Simulated time: {stats['time_elapsed']:.1f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
