# src/gridsnake/render.py

from typing import Tuple

import pygame  # type: ignore

from .config import BG, GRID_A, GRID_B, HUD_HEIGHT, TEXT
from .game import GameState


def hue_color(hue: float, saturation: float, lightness: float) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360, saturation, lightness, 100)
    return color


def palette(now_ms: int) -> Tuple[pygame.Color, pygame.Color, pygame.Color]:
    """Head, body and food colours; all three cycle through hue over time."""
    hue = (now_ms / 10) % 360
    head = hue_color(hue, 95, 60)
    body = hue_color(hue + 90, 90, 55)
    food = hue_color(hue + 210, 95, 58)
    return head, body, food


def status_text(state: GameState) -> str:
    if not state.alive:
        return "Game Over"
    if state.paused:
        return "Paused"
    return "Running"


def draw_grid(board: pygame.Surface, grid_size: int, cell: float) -> None:
    # Lines are translucent, so draw them on their own layer.
    width, height = board.get_size()
    layer = pygame.Surface((width, height), pygame.SRCALPHA)
    for i in range(grid_size + 1):
        pos = round(i * cell)
        vertical, horizontal = (GRID_A, GRID_B) if i % 2 == 0 else (GRID_B, GRID_A)
        pygame.draw.line(layer, vertical, (pos, 0), (pos, height))
        pygame.draw.line(layer, horizontal, (0, pos), (width, pos))
    board.blit(layer, (0, 0))


def draw_board(board: pygame.Surface, state: GameState, now_ms: int) -> None:
    board.fill(BG)
    cell = board.get_width() / state.grid_size
    draw_grid(board, state.grid_size, cell)

    head_color, body_color, food_color = palette(now_ms)

    # food
    if state.food is not None:
        fx, fy = state.food
        rect = pygame.Rect(round(fx * cell) + 2, round(fy * cell) + 2, round(cell) - 4, round(cell) - 4)
        pygame.draw.rect(board, food_color, rect)

    # snake
    for index, (x, y) in enumerate(state.snake):
        rect = pygame.Rect(round(x * cell) + 1, round(y * cell) + 1, round(cell) - 2, round(cell) - 2)
        pygame.draw.rect(board, head_color if index == 0 else body_color, rect)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    bar = pygame.Rect(0, 0, screen.get_width(), HUD_HEIGHT)
    screen.fill(BG, bar)
    score = font.render(f"Score: {state.score}", True, TEXT)
    status = font.render(status_text(state), True, TEXT)
    screen.blit(score, (8, (HUD_HEIGHT - score.get_height()) // 2))
    screen.blit(status, status.get_rect(midright=(screen.get_width() - 8, HUD_HEIGHT // 2)))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, now_ms: int) -> None:
    """Board below a HUD bar; the board fills the rest of the window."""
    board = screen.subsurface(
        pygame.Rect(0, HUD_HEIGHT, screen.get_width(), screen.get_height() - HUD_HEIGHT)
    )
    draw_board(board, state, now_ms)
    draw_hud(screen, font, state)
