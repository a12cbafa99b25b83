# render.py
from typing import Tuple
import pygame  # type: ignore

from .config import (
    CELL_SIZE, BG, GREEN, RED, WHITE,
    TEXT_POS, START_MESSAGE, GAME_OVER_MESSAGE,
)
from .game import GameState, Phase


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_message(screen: pygame.Surface, font: pygame.font.Font, message: str,
                 color: Tuple[int, int, int]) -> None:
    txt = font.render(message, True, color)
    screen.blit(txt, TEXT_POS)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    """Paint one frame. Reads the state, never changes it."""
    screen.fill(BG)

    if state.phase is Phase.NOT_STARTED:
        draw_message(screen, font, START_MESSAGE, WHITE)
    elif state.phase is Phase.RUNNING:
        # snake
        for x, y in state.snake:
            draw_cell(screen, x, y, GREEN)
        # food
        fx, fy = state.food.position
        draw_cell(screen, fx, fy, RED)
    else:
        draw_message(screen, font, GAME_OVER_MESSAGE, RED)
