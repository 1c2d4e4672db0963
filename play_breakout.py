#!/usr/bin/env python3
"""
Main script to launch Brick Breaker with PyGame graphical interface
"""

import argparse
import logging
import sys

from brick_breaker.gui.game_app import BreakoutApp
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Brick Breaker")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument(
        "--assets", type=str, default=None, help="Directory with img_ball.png and img_brick.png"
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run the simulation without a window"
    )
    parser.add_argument(
        "--ticks", type=int, default=600, help="Number of ticks to simulate in headless mode"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Options apply to this run only, the global config is left untouched
    config = game_config
    if args.config:
        try:
            config = GameConfig.load_from_file(args.config)
        except (FileNotFoundError, ValueError) as e:
            print(f"Could not load configuration from {args.config}: {e}")
            return 1
    if args.assets:
        config = config.model_copy()
        config.ASSETS_DIR = args.assets

    if args.headless:
        app = BreakoutApp(config, headless=True)
        state = app.run_headless(args.ticks)
        print(f"Ball: {state['ball_position']}  velocity: {state['ball_velocity']}")
        print(f"Bricks left: {len(state['bricks'])}")
        return 0

    print("=== BRICK BREAKER ===")
    print()
    print("CONTROLS:")
    print("  Left/Right arrows: Move paddle")
    print("  ESC: Pause / resume")
    print()

    app = BreakoutApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    return 0


if __name__ == "__main__":
    sys.exit(main())
