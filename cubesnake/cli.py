"""Command line entry point."""

import argparse
import logging
import os
import sys

import pygame

from .audio import AudioCues
from .config import CELL_SIZE, GRID_HEIGHT, GRID_WIDTH, MUSIC_STEP_MS, SAMPLE_RATE, TICK_MS, GameConfig
from .game import Game
from .render import Renderer

logger = logging.getLogger(__name__)

HEADLESS_FRAMES = 300


def build_parser():
    """Build the argument parser for the game flags."""
    parser = argparse.ArgumentParser(prog="cubesnake", description="Grid snake with menus and chiptune cues")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Board width in cells")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="Board height in cells")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="Milliseconds per simulation step")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--mute", action="store_true", help="Start with sound muted")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Use SDL dummy drivers and run a short unattended game",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help=f"Stop after this many frames (headless default {HEADLESS_FRAMES})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def parse_args(argv=None):
    """Parse argv into (namespace, GameConfig); bad settings exit via argparse."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            tick_ms=args.tick_ms,
            music_step_ms=MUSIC_STEP_MS,
            muted=args.mute,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, config


def main(argv=None):
    """Parse flags, open the window and run the game until it closes."""
    args, config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        os.environ["SDL_AUDIODRIVER"] = "dummy"

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Cube Snake")
    screen = pygame.display.set_mode(config.window_size)

    game = Game(config, Renderer(screen, config), AudioCues(muted=config.muted))
    max_frames = args.frames
    if args.headless:
        if max_frames is None:
            max_frames = HEADLESS_FRAMES
        # Press Enter on the main menu so the run exercises real ticks.
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))

    try:
        game.run(max_frames=max_frames)
    finally:
        pygame.quit()

    logger.info("Stopped in state %s", game.state.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
