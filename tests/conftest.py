import os

# no window or sound card needed for the tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame  # type: ignore
import pytest

from snakeweek.game import Food, GameState, Heading, Level, Segment


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def level():
    return Level(width=10, height=10)


@pytest.fixture
def make_state(level):
    """Factory for hand-built states; segments all point along `direction`."""

    def _make(
        cells,
        direction=Heading.EAST,
        food=Food(0, 9, 0),
        level=level,
        **overrides,
    ):
        fields = dict(
            snake=tuple(Segment(x, y, direction, direction) for x, y in cells),
            direction=direction,
            level=level,
            food=food,
            score=0,
            speed=80,
            last_move=0,
            last_spawn=0,
            current_time=0,
        )
        fields.update(overrides)
        return GameState(**fields)

    return _make


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 18)
    pygame.font.quit()
