import numpy as np  # type: ignore
import pygame  # type: ignore
import pytest

from snakeweek.game import new_game_state
from snakeweek.maps import DEFAULT_MAP, level_from_array, load_map, parse_map


def test_parse_default_map():
    level = parse_map(DEFAULT_MAP)

    assert (level.width, level.height) == (24, 16)
    assert (0, 0) in level.walls
    # gaps in the border so the snake can wrap
    assert (11, 0) not in level.walls
    assert (0, 7) not in level.walls
    assert (23, 8) not in level.walls


def test_default_map_fits_the_starting_snake(rng):
    state = new_game_state(parse_map(DEFAULT_MAP), 0, rng)

    assert not state.dead
    assert (state.food.x, state.food.y) not in parse_map(DEFAULT_MAP).walls


def test_parse_map_pads_short_rows():
    level = parse_map(["#..#", "#"])

    assert (level.width, level.height) == (4, 2)
    assert level.walls == {(0, 0), (3, 0), (0, 1)}


@pytest.mark.parametrize("rows", [[], [""], ["", ""]])
def test_parse_map_rejects_empty(rows):
    with pytest.raises(ValueError):
        parse_map(rows)


def test_level_from_array_is_indexed_y_then_x():
    grid = np.zeros((3, 5), dtype=bool)
    grid[2, 4] = True

    level = level_from_array(grid)

    assert (level.width, level.height) == (5, 3)
    assert level.walls == {(4, 2)}


def test_level_from_array_rejects_wrong_shape():
    with pytest.raises(ValueError):
        level_from_array(np.zeros(4, dtype=bool))


def test_load_map_reads_dark_pixels_as_walls(tmp_path):
    surface = pygame.Surface((4, 3))
    surface.fill((255, 255, 255))
    surface.set_at((1, 2), (0, 0, 0))
    surface.set_at((3, 0), (40, 40, 40))
    surface.set_at((2, 1), (200, 200, 200))
    path = tmp_path / "maze.bmp"
    pygame.image.save(surface, str(path))

    level = load_map(path)

    assert (level.width, level.height) == (4, 3)
    assert level.walls == {(1, 2), (3, 0)}
