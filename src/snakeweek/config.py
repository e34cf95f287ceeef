from __future__ import annotations
from dataclasses import dataclass

import pygame # type: ignore

# ----- Window & grid -----
CELL_SIZE = 20
BOARD_TOP = 60          # px reserved above the board for the HUD
FPS = 60

# ----- Colors -----
BG     = (0, 0, 0)
BOARD  = (20, 20, 24)
WALL   = (90, 90, 110)
GREEN  = (80, 200, 80)
HEAD   = (140, 240, 120)
TAIL   = (50, 140, 50)
TURN   = (30, 110, 30)
RED    = (200, 70, 70)
TEXT   = (220, 220, 230)

# ----- Key bindings -----
KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN = pygame.K_LEFT, pygame.K_UP, pygame.K_RIGHT, pygame.K_DOWN
KEY_PAUSE = pygame.K_SPACE
KEY_RESTART = pygame.K_r

# ----- Game rules -----
START_SPEED_MS = 80     # ms between snake steps at game start
MIN_SPEED_MS = 5
FOOD_TTL_MS = 10_000
MAX_SPAWN_ATTEMPTS = 1_000

# score for food eaten at age a: (SCORE_BASE + (SCORE_FRESH_MS - a)) / SCORE_DIVISOR
SCORE_BASE = 1000
SCORE_FRESH_MS = 6000
SCORE_DIVISOR = 10

# starting snake, head first: (x, y)
START_SNAKE = [(6, 3), (5, 3), (4, 3)]

# ----- Levels -----
WALL_THRESHOLD = 128    # mean RGB below this is a wall pixel

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int | None = None
    start_speed_ms: int = START_SPEED_MS
    min_speed_ms: int = MIN_SPEED_MS
    food_ttl_ms: int = FOOD_TTL_MS
    cell_size: int = CELL_SIZE
    fps: int = FPS

CFG = Config()
