# game.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import AbstractSet, FrozenSet, Iterable, NamedTuple, Optional, Tuple
import logging
import random

from .config import (
    CFG, MAX_SPAWN_ATTEMPTS, START_SNAKE,
    SCORE_BASE, SCORE_FRESH_MS, SCORE_DIVISOR,
    KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN, KEY_PAUSE,
)

logger = logging.getLogger(__name__)


class InvalidHeadingError(ValueError):
    """A heading outside north/east/south/west reached the updater."""


class Heading(str, Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


# (dx, dy) per heading, y grows downwards
DELTAS = {
    Heading.NORTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, 1),
    Heading.WEST: (-1, 0),
}

OPPOSITES = {
    Heading.NORTH: Heading.SOUTH,
    Heading.EAST: Heading.WEST,
    Heading.SOUTH: Heading.NORTH,
    Heading.WEST: Heading.EAST,
}

# Arrow keys in the order they are consulted each frame
KEY_HEADINGS = (
    (KEY_LEFT, Heading.WEST),
    (KEY_UP, Heading.NORTH),
    (KEY_RIGHT, Heading.EAST),
    (KEY_DOWN, Heading.SOUTH),
)

# ---------- State ----------
class Segment(NamedTuple):
    """One occupied cell; from_dir/to_dir only pick the sprite to draw."""
    x: int
    y: int
    from_dir: Heading
    to_dir: Heading


class Food(NamedTuple):
    x: int
    y: int
    birth_time: int    # ms timestamp of the spawn


@dataclass(frozen=True)
class Level:
    width: int
    height: int
    walls: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Level must be at least 1x1, got {self.width}x{self.height}")
        object.__setattr__(self, "walls", frozenset(self.walls))


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Segment, ...]     # head at index 0
    direction: Heading
    level: Level
    food: Optional[Food]           # None until a free cell is found
    score: int
    speed: int                     # min ms between two snake steps
    last_move: int                 # ms timestamp of last step
    last_spawn: int                # ms timestamp of last food spawn
    current_time: int
    paused: bool = False
    dead: bool = False

    @property
    def head(self) -> Segment:
        return self.snake[0]


# ---------- Helpers ----------
def heading_delta(heading: Heading) -> Tuple[int, int]:
    try:
        return DELTAS[heading]
    except KeyError:
        raise InvalidHeadingError(f"No matching heading: {heading!r}") from None


def opposite(heading: Heading) -> Heading:
    try:
        return OPPOSITES[heading]
    except KeyError:
        raise InvalidHeadingError(f"No matching heading: {heading!r}") from None


def is_opposite(a: Heading, b: Heading) -> bool:
    return opposite(a) == b


def coords_equal(a, b) -> bool:
    """Compare the (x, y) part of two segments, food items or plain tuples."""
    return a[0] == b[0] and a[1] == b[1]


def wrap(x: int, y: int, level: Level) -> Tuple[int, int]:
    """Fold a position that stepped off one edge back onto the opposite edge."""
    if x < 0:
        x = level.width - 1
    elif x >= level.width:
        x = 0
    if y < 0:
        y = level.height - 1
    elif y >= level.height:
        y = 0
    return x, y


def get_age(food: Food, current_time: int) -> int:
    return current_time - food.birth_time


def get_score(age: int) -> int:
    """
    Points for food eaten at `age` ms, truncated toward zero. Fresh food is
    worth 700; past 7000 ms the result goes negative and is not clamped.
    """
    return int((SCORE_BASE + (SCORE_FRESH_MS - age)) / SCORE_DIVISOR)


def free_cells(state: GameState, exclude: Iterable[Tuple[int, int]] = ()) -> int:
    """Number of board cells holding neither a wall, the snake nor an excluded cell."""
    level = state.level
    blocked = set(level.walls) | {(s.x, s.y) for s in state.snake} | set(exclude)
    on_board = sum(1 for x, y in blocked if 0 <= x < level.width and 0 <= y < level.height)
    return level.width * level.height - on_board


# ---------- Construction ----------
def new_game_state(level: Level, now_ms: int, rng: Optional[random.Random] = None) -> GameState:
    for x, y in START_SNAKE:
        if not (0 <= x < level.width and 0 <= y < level.height) or (x, y) in level.walls:
            raise ValueError(
                f"Level {level.width}x{level.height} has no room for the starting snake at {(x, y)}"
            )
    snake = tuple(Segment(x, y, Heading.EAST, Heading.EAST) for x, y in START_SNAKE)
    state = GameState(
        snake=snake,
        direction=Heading.EAST,
        level=level,
        food=None,
        score=0,
        speed=CFG.start_speed_ms,
        last_move=now_ms,
        last_spawn=now_ms,
        current_time=now_ms,
    )
    return spawn_food(state, rng)

# ---------- Input ----------
def handle_input(state: GameState, pressed_keys: AbstractSet[int]) -> GameState:
    """Turn toward the first pressed arrow key (left, up, right, down) that isn't a 180° turn."""
    for key, heading in KEY_HEADINGS:
        if key in pressed_keys and not is_opposite(state.direction, heading):
            return replace(state, direction=heading)
    return state


def on_key_down(state: GameState, key: int) -> GameState:
    if key == KEY_PAUSE:
        return replace(state, paused=not state.paused)
    return state


def on_key_up(state: GameState, key: int) -> GameState:
    return state

# ---------- Food ----------
def spawn_food(
    state: GameState,
    rng: Optional[random.Random] = None,
    exclude: Iterable[Tuple[int, int]] = (),
) -> GameState:
    """
    Place food on a random free cell.

    Gives up after MAX_SPAWN_ATTEMPTS draws, or straight away when the board
    is full, and leaves food=None; update_food retries on the next tick.
    """
    rng = rng if rng is not None else random
    exclude = set(exclude)
    level = state.level

    if free_cells(state, exclude) <= 0:
        logger.debug("No free cell for food on a %dx%d board", level.width, level.height)
        return replace(state, food=None)

    blocked = set(level.walls) | {(s.x, s.y) for s in state.snake} | exclude
    for _ in range(MAX_SPAWN_ATTEMPTS):
        fx = rng.randrange(level.width)
        fy = rng.randrange(level.height)
        if (fx, fy) not in blocked:
            return replace(
                state,
                food=Food(fx, fy, state.current_time),
                last_spawn=state.current_time,
            )

    logger.debug("Food spawn gave up after %d attempts", MAX_SPAWN_ATTEMPTS)
    return replace(state, food=None)


def update_food(state: GameState, ttl: int, rng: Optional[random.Random] = None) -> GameState:
    food = state.food
    if food is None:
        return spawn_food(state, rng)
    if get_age(food, state.current_time) > ttl:
        logger.debug("Food at (%d, %d) expired", food.x, food.y)
        return spawn_food(state, rng, exclude=[(food.x, food.y)])
    return state


def eat_food(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    food = state.food
    if food is None or not coords_equal(state.head, food):
        return state
    points = get_score(get_age(food, state.current_time))
    fed = spawn_food(state, rng)
    return replace(
        fed,
        snake=grow(fed.snake),
        speed=max(fed.speed - 1, CFG.min_speed_ms),
        score=fed.score + points,
    )

# ---------- Movement ----------
def update_snake(state: GameState) -> Tuple[Segment, ...]:
    """
    Step the snake one cell: push a new head, turn the old head into a
    body segment recording the turn, drop the tail.
    """
    head, *rest = state.snake
    dx, dy = heading_delta(state.direction)
    nx, ny = wrap(head.x + dx, head.y + dy, state.level)
    new_head = Segment(nx, ny, head.to_dir, state.direction)
    neck = Segment(head.x, head.y, head.to_dir, state.direction)
    return (new_head, neck, *rest)[:-1]


def grow(snake: Tuple[Segment, ...]) -> Tuple[Segment, ...]:
    return snake + (snake[-1],)


def die(state: GameState) -> GameState:
    head, *body = state.snake
    if any(coords_equal(head, seg) for seg in body) or (head.x, head.y) in state.level.walls:
        return replace(state, dead=True)
    return state


def move_snake(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Step the snake if `speed` ms have passed since the last step."""
    if state.current_time - state.last_move <= state.speed:
        return state  # not time to move yet

    moved = replace(state, snake=update_snake(state), last_move=state.current_time)
    return eat_food(die(moved), rng)

# ---------- Tick ----------
def update(
    state: GameState,
    pressed_keys: AbstractSet[int],
    current_time: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Advance the game by one frame.

    Dead or paused states come back untouched. Otherwise the clock is set
    to `current_time` and input, food ageing and movement are applied in
    that order.
    """
    if state.dead or state.paused:
        return state

    state = replace(state, current_time=current_time)
    state = handle_input(state, pressed_keys)
    state = update_food(state, CFG.food_ttl_ms, rng)
    return move_snake(state, rng)


advance = update
