# src/snakeweek/__init__.py
"""Snake on a wrapping grid: pure game-state updates plus a pygame front end."""

from .game import (
    Food,
    GameState,
    Heading,
    InvalidHeadingError,
    Level,
    Segment,
    new_game_state,
    on_key_down,
    on_key_up,
    update,
)

__all__ = [
    "Food",
    "GameState",
    "Heading",
    "InvalidHeadingError",
    "Level",
    "Segment",
    "new_game_state",
    "on_key_down",
    "on_key_up",
    "update",
]
