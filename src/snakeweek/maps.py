# maps.py
from __future__ import annotations
from os import PathLike
from typing import Iterable, Union
import logging

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import WALL_THRESHOLD
from .game import Level

logger = logging.getLogger(__name__)

# '#' is a wall; the gaps in the border let the snake wrap around
DEFAULT_MAP = [
    "##########....##########",
    "#......................#",
    "#......................#",
    "#......................#",
    "#....#########.........#",
    "#......................#",
    "#..............#.......#",
    "...............#........",
    "...............#........",
    "#..............#.......#",
    "#......................#",
    "#.........#########....#",
    "#......................#",
    "#......................#",
    "#......................#",
    "##########....##########",
]


def level_from_array(grid) -> Level:
    """Build a Level from a 2-D boolean grid indexed [y, x], True meaning wall."""
    grid = np.asarray(grid, dtype=bool)
    if grid.ndim != 2 or grid.size == 0:
        raise ValueError(f"Level grid must be a non-empty 2-D array, got shape {grid.shape}")
    height, width = grid.shape
    walls = frozenset((int(x), int(y)) for y, x in np.argwhere(grid))
    return Level(width=width, height=height, walls=walls)


def parse_map(rows: Iterable[str]) -> Level:
    rows = [row.rstrip("\n") for row in rows]
    if not rows or not any(rows):
        raise ValueError("Map has no rows")

    width = max(len(row) for row in rows)
    grid = np.zeros((len(rows), width), dtype=bool)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            grid[y, x] = ch == "#"
    return level_from_array(grid)


def load_map(path: Union[str, PathLike]) -> Level:
    """
    Read a level bitmap: one pixel per cell, pixels darker than
    WALL_THRESHOLD (mean of R, G, B) are walls.
    """
    surface = pygame.image.load(str(path))
    rgb = pygame.surfarray.array3d(surface)   # [x, y, channel]
    walls = rgb.mean(axis=2) < WALL_THRESHOLD
    level = level_from_array(walls.T)
    logger.info(
        "Loaded level %s: %dx%d, %d wall cells",
        path, level.width, level.height, len(level.walls),
    )
    return level
