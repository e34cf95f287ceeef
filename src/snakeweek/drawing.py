# drawing.py
from typing import Optional, Tuple
import pygame # type: ignore

from .config import (
    BG, BOARD, WALL, GREEN, HEAD, TAIL, TURN, RED, TEXT,
    BOARD_TOP, CFG,
)
from .game import Food, GameState, get_age

Color = Tuple[int, int, int]

# ---------- Helpers ----------
def board_origin(screen: pygame.Surface, state: GameState, cell_size: int) -> Tuple[int, int]:
    """Top-left pixel of the board: centred horizontally, below the HUD."""
    ox = (screen.get_width() - state.level.width * cell_size) // 2
    return max(ox, 0), BOARD_TOP

def draw_cell(
    screen: pygame.Surface,
    origin: Tuple[int, int],
    gx: int,
    gy: int,
    color: Color,
    cell_size: int,
    inset: int = 0,
) -> None:
    ox, oy = origin
    rect = pygame.Rect(
        ox + gx * cell_size + inset,
        oy + gy * cell_size + inset,
        cell_size - 2 * inset,
        cell_size - 2 * inset,
    )
    pygame.draw.rect(screen, color, rect)

def food_color(food: Food, current_time: int, ttl: int) -> Color:
    """Fade from RED toward the board colour as the food gets older."""
    t = min(max(get_age(food, current_time) / ttl, 0.0), 1.0) * 0.75
    return tuple(int(r + (b - r) * t) for r, b in zip(RED, BOARD))

# ---------- Board ----------
def draw_walls(screen: pygame.Surface, origin, state: GameState, cell_size: int) -> None:
    for x, y in state.level.walls:
        draw_cell(screen, origin, x, y, WALL, cell_size)

def draw_snake(screen: pygame.Surface, origin, state: GameState, cell_size: int) -> None:
    head, *tail = state.snake
    body, last = tail[:-1], tail[-1]

    for seg in body:
        draw_cell(screen, origin, seg.x, seg.y, GREEN, cell_size)
        # mark the cells where the snake turned
        if seg.from_dir != seg.to_dir:
            draw_cell(screen, origin, seg.x, seg.y, TURN, cell_size, inset=cell_size // 4)
    draw_cell(screen, origin, last.x, last.y, TAIL, cell_size, inset=cell_size // 8)
    draw_cell(screen, origin, head.x, head.y, HEAD, cell_size)

def draw_food(screen: pygame.Surface, origin, state: GameState, cell_size: int) -> None:
    food = state.food
    if food is None:
        return
    color = food_color(food, state.current_time, CFG.food_ttl_ms)
    draw_cell(screen, origin, food.x, food.y, color, cell_size, inset=cell_size // 6)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    score = font.render(f"Score: {state.score}", True, TEXT)
    speed = font.render(f"Speed: {state.speed} ms", True, TEXT)
    screen.blit(score, (8, 6))
    screen.blit(speed, (8, 6 + score.get_height() + 4))

def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    state: GameState,
    cell_size: Optional[int] = None,
) -> None:
    cell_size = cell_size or CFG.cell_size
    origin = board_origin(screen, state, cell_size)

    screen.fill(BG)
    board = pygame.Rect(
        origin[0], origin[1],
        state.level.width * cell_size, state.level.height * cell_size,
    )
    pygame.draw.rect(screen, BOARD, board)
    draw_snake(screen, origin, state, cell_size)
    draw_food(screen, origin, state, cell_size)
    draw_walls(screen, origin, state, cell_size)
    draw_hud(screen, font, state)

# ---------- Overlays ----------
def _dim(screen: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _dim(screen)
    w, h = screen.get_size()
    title = font.render("PAUSED", True, (240, 240, 250))
    sub   = font.render("Press SPACE to resume", True, TEXT)
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
    screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 16)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    _dim(screen)
    w, h = screen.get_size()

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, TEXT)
    sco   = font.render(f"Score: {score}", True, TEXT)

    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
    screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 16)))
    screen.blit(sco, sco.get_rect(center=(w // 2, h // 2 + 44)))
