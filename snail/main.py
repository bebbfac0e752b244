"""
Snail - steer a growing snail around a toroidal board in the terminal.

Usage:
    snail [--delay MS] [--dimensions N]
    snail --headless [--seed N] [--max-ticks N]
    snail --version

Keys:
    arrows / w a s d   steer
    p                  pause / resume
    y / n              play again / quit after game over
    Esc / Ctrl-C       quit
"""

import argparse
import curses
import json
import logging
import os
import random
import sys
import threading
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from snail import __version__
from snail.config import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
    GameConfig,
)
from snail.domain.commands import Quit, SetDirection
from snail.domain.game import SnailGame
from snail.players import KeyboardPlayer, RandomPlayer
from snail.services import CursesRenderer, GameDriver, RenderStyle

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 10_000


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snail",
        description="Snake on a torus: eat food, grow, don't bite yourself.",
    )
    parser.add_argument("--delay", type=int, default=None,
                        help="starting delay in milliseconds between ticks (min=100, max=200, default 150)")
    parser.add_argument("--dimensions", type=int, default=None,
                        help="x and y dimension of the game grid (min=10, max=50, default 20)")
    parser.add_argument("--version", action="store_true",
                        help="print version information")
    parser.add_argument("--headless", action="store_true",
                        help="let a random autopilot play without a terminal UI and print the result")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for food placement (and the autopilot)")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="stop a headless game after this many ticks")
    parser.add_argument("--log-file", type=str, default=os.getenv(LOG_FILE_ENV, DEFAULT_LOG_FILE),
                        help="where to write logs while the terminal UI is running")
    parser.add_argument("--log-level", type=str, default=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
                        help="logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """Log to a file while curses owns the terminal, to stderr otherwise."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=log_file,
    )


def run_headless(config: GameConfig, seed: Optional[int] = None,
                 max_ticks: int = DEFAULT_MAX_TICKS) -> Dict[str, Any]:
    """
    Play one game with the random autopilot, without threads or a screen.

    Returns:
        A dictionary summarizing the game (score, length, ticks, won, game_over).
    """
    game = SnailGame(config.width, config.height, config.delay_ms, rng=random.Random(seed))
    player = RandomPlayer(rng=random.Random(seed))

    state = game.state()
    while state.tick < max_ticks:
        command = player.next_command(state)
        if isinstance(command, Quit):
            break
        direction = command.direction if isinstance(command, SetDirection) else None
        state = game.tick(direction)

    logger.debug("Final board:\n%s", state.print_board())
    return {
        "score": state.score,
        "length": len(state.body),
        "ticks": state.tick,
        "won": state.won,
        "game_over": state.game_over,
        "delay_ms": state.delay_ms,
    }


def play(screen, config: GameConfig, seed: Optional[int] = None) -> None:
    """Run the interactive game inside a curses window until the player quits."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    colors = curses.has_colors()
    if colors:
        curses.start_color()

    rows, cols = screen.getmaxyx()
    if rows < config.height + 2 or cols < config.width * 2 + 2:
        logger.warning(
            "Terminal is %dx%d, the board needs %dx%d; parts will be cut off",
            cols, rows, config.width * 2 + 2, config.height + 2,
        )

    screen_lock = threading.Lock()
    renderer = CursesRenderer(screen, RenderStyle(), colors=colors, screen_lock=screen_lock)
    player = KeyboardPlayer(screen, screen_lock=screen_lock)
    game = SnailGame(config.width, config.height, config.delay_ms, rng=random.Random(seed))

    driver = GameDriver(game, player, render=renderer)
    final = driver.run()
    if final is not None:
        logger.info("Quit with score %d", final.score)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    if args.version:
        print(f"snail version {__version__}")
        return 0

    if args.headless:
        configure_logging(args.log_level)
        config = GameConfig.load(args.delay, args.dimensions)
        result = run_headless(config, seed=args.seed, max_ticks=args.max_ticks)
        print(json.dumps(result, indent=2))
        return 0

    configure_logging(args.log_level, args.log_file)
    config = GameConfig.load(args.delay, args.dimensions)
    logger.info("Starting snail %s (delay=%dms, board=%dx%d)",
                __version__, config.delay_ms, config.width, config.height)

    # Escape should quit right away, not after curses' default 1s wait
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(play, config, args.seed)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
