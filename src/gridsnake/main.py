# src/gridsnake/main.py

import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import DEFAULT_CONFIG, DOWN, HEIGHT, HUD_HEIGHT, LEFT, RIGHT, UP, WIDTH, Config
from .loop import GameLoop, Timer
from .render import draw_game
from .rng import create_rng, default_rng

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


class DisplayError(RuntimeError):
    """No surface to draw on."""


class PygameTimer(Timer):
    """Posts TICK_EVENT on the pygame event queue every interval_ms."""

    def start(self, interval_ms: int) -> None:
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)


def handle_event(loop: GameLoop, event: pygame.event.Event) -> bool:
    """Route one pygame event into the loop. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK_EVENT:
        loop.tick()
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in KEY_DIRECTIONS:
            loop.handle_direction(KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_SPACE:
            loop.toggle_pause()
        elif event.key == pygame.K_r:
            loop.restart()
    return True


def open_display() -> pygame.Surface:
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
    except pygame.error as e:
        raise DisplayError(f"Display surface missing: {e}") from e
    return screen


def run(config: Config, seed: Optional[int] = None) -> int:
    """Play until the window closes. Returns the last score."""
    pygame.init()
    try:
        screen = open_display()
        pygame.display.set_caption("Snake")
        font = pygame.font.SysFont(None, 24)

        rng = create_rng(seed) if seed is not None else default_rng()

        def render(state) -> None:
            draw_game(screen, font, state, pygame.time.get_ticks())
            pygame.display.flip()

        loop = GameLoop(config, PygameTimer(), rng, render)
        render(loop.state)
        loop.start()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                running = handle_event(loop, event)
                if not running:
                    break
            clock.tick(60)

        loop.stop()
        return loop.state.score
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game.")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_CONFIG.grid_size)
    parser.add_argument("--start-length", type=int, default=DEFAULT_CONFIG.start_length)
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=DEFAULT_CONFIG.tick_ms,
        help="ms per step (ignored with --speed-ramp)",
    )
    parser.add_argument(
        "--speed-ramp",
        action="store_true",
        help="start slow and speed up as the score grows",
    )
    parser.add_argument(
        "--easy-food",
        action="store_true",
        help="put the first food two cells ahead of the snake",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed a reproducible food sequence",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Config:
    try:
        return Config(
            grid_size=args.grid_size,
            start_length=args.start_length,
            tick_ms=args.tick_ms,
            speed_ramp=args.speed_ramp,
            easy_first_food=args.easy_food,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = parse_config(parser, args)
    logger.debug("Starting with %s", config)

    score = run(config, seed=args.seed)
    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
