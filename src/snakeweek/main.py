# main.py
from __future__ import annotations
import argparse
import logging
import random
from typing import List, Optional, Set

import pygame # type: ignore

from .config import BOARD_TOP, CFG, KEY_RESTART
from .drawing import draw_game, draw_game_over, draw_paused
from .game import Level, new_game_state, on_key_down, on_key_up, update
from .maps import DEFAULT_MAP, load_map, parse_map

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the running game: the current GameState and the set of held keys.
    Key events and frame ticks are fed in from the pygame loop.
    """

    def __init__(self, level: Level, now_ms: int, seed: Optional[int] = None):
        self.level = level
        self.rng = random.Random(seed)
        self.pressed_keys: Set[int] = set()
        self.running = True
        self.state = new_game_state(level, now_ms, self.rng)
        logger.info("New game on a %dx%d level", level.width, level.height)

    def restart(self, now_ms: int) -> None:
        self.pressed_keys.clear()
        self.state = new_game_state(self.level, now_ms, self.rng)
        logger.info("New game")

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.state = on_key_down(self.state, event.key)
            self.pressed_keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self.state = on_key_up(self.state, event.key)
            self.pressed_keys.discard(event.key)

    def tick(self, now_ms: int) -> bool:
        """Advance one frame. Returns False once the snake is dead."""
        was_dead = self.state.dead
        self.state = update(self.state, self.pressed_keys, now_ms, self.rng)
        if self.state.dead and not was_dead:
            logger.info("Game over: score=%d, length=%d", self.state.score, len(self.state.snake))
        return not self.state.dead


def wait_for_restart(clock: pygame.time.Clock) -> bool:
    """Block on the game-over screen. True for R, False for quit."""
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == KEY_RESTART:
                return True
        clock.tick(30)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrapping grid.")
    parser.add_argument(
        "--level",
        type=str,
        default=None,
        help="Level image, one pixel per cell, dark pixels are walls. "
             "Defaults to the built-in maze.",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size, help="pixels per grid cell")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    level = load_map(args.level) if args.level else parse_map(DEFAULT_MAP)
    cell = args.cell_size

    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(
        ((level.width + 2) * cell, BOARD_TOP + (level.height + 1) * cell)
    )
    pygame.display.set_caption("Snakeweek")
    clock = pygame.time.Clock()

    session = GameSession(level, pygame.time.get_ticks(), seed=args.seed)

    while session.running:
        # 1) input
        for event in pygame.event.get():
            session.handle_event(event)
        if not session.running:
            break

        # 2) update
        alive = session.tick(pygame.time.get_ticks())

        # 3) render
        draw_game(screen, font, session.state, cell)
        if not alive:
            draw_game_over(screen, font, session.state.score)
            pygame.display.flip()
            if not wait_for_restart(clock):
                break
            session.restart(pygame.time.get_ticks())
            continue

        if session.state.paused:
            draw_paused(screen, font)
        pygame.display.flip()
        clock.tick(CFG.fps)  # movement gated by state.speed, not the frame rate

    pygame.quit()


if __name__ == "__main__":
    main()
