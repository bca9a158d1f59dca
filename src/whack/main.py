"""Entry point for the terminal whack-a-mole game.

Sets up the ECS world, event bus, logging and the full-screen terminal loop.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Sequence

from whack.constants import DEFAULT_BOARD_SIZE, POLL_INTERVAL, SUPPORTED_BOARD_SIZES
from whack.events.bus import EventBus
from whack.terminal import run_terminal_game
from whack.utils.logging_setup import configure_logging
from whack.world import create_world

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="whack", description="Whack the mole before it moves.")
    parser.add_argument(
        "--size",
        type=int,
        choices=SUPPORTED_BOARD_SIZES,
        default=DEFAULT_BOARD_SIZE,
        help="board dimension (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for mole placement")
    parser.add_argument("--log-file", default=None, help="write a debug log to this file")
    parser.add_argument("--log-level", default="INFO", help="log level (default: %(default)s)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    event_bus = EventBus()
    world = create_world(board_size=args.size, rng=random.Random(args.seed))
    logger.info("starting %dx%d game (seed=%s)", args.size, args.size, args.seed)
    try:
        run_terminal_game(world, event_bus, poll_interval=POLL_INTERVAL)
    except KeyboardInterrupt:
        logger.info("interrupted")
        return EXIT_INTERRUPTED
    except Exception as exc:
        logger.exception("game loop failed")
        print(f"whack: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
