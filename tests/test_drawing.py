import pygame  # type: ignore

from snakeweek.config import BG, HEAD, RED
from snakeweek.drawing import (
    board_origin,
    draw_game,
    draw_game_over,
    draw_paused,
    food_color,
)
from snakeweek.game import Food, Heading


def test_board_is_centred_below_hud(make_state):
    screen = pygame.Surface((400, 300))
    state = make_state([(4, 3), (3, 3), (2, 3)])

    assert board_origin(screen, state, 20) == (100, 60)


def test_draw_game_paints_the_head(make_state, font):
    screen = pygame.Surface((400, 300))
    state = make_state([(4, 3), (3, 3), (2, 3)])

    draw_game(screen, font, state, cell_size=20)

    # head cell (4, 3) starts at (100 + 80, 60 + 60)
    assert tuple(screen.get_at((190, 130)))[:3] == HEAD
    assert tuple(screen.get_at((395, 295)))[:3] == BG


def test_draw_game_without_food(make_state, font):
    screen = pygame.Surface((400, 300))
    state = make_state([(4, 3), (4, 4), (3, 4)], direction=Heading.NORTH, food=None)

    draw_game(screen, font, state, cell_size=20)


def test_food_fades_with_age():
    food = Food(1, 1, 0)

    assert food_color(food, 0, 10_000) == RED
    assert food_color(food, 5_000, 10_000) != RED
    assert food_color(food, 20_000, 10_000) == food_color(food, 10_000, 10_000)


def test_overlays_draw(make_state, font):
    screen = pygame.Surface((400, 300))
    state = make_state([(4, 3), (3, 3), (2, 3)])
    draw_game(screen, font, state, cell_size=20)
    before = tuple(screen.get_at((190, 130)))

    draw_paused(screen, font)
    draw_game_over(screen, font, 1234)

    # dimmed, not wiped
    assert tuple(screen.get_at((190, 130))) != before
