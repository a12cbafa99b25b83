from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Window & grid -----
GRID_W, GRID_H = 20, 20
CELL_SIZE = 20
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE
CAPTION = "Snake Game"

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)
WHITE = (255, 255, 255)

# ----- Text -----
FONT_FILE = "FiraSansCondensed-Italic.ttf"
TEXT_POS = (100, 150)
START_MESSAGE = "Press Enter to Start"
GAME_OVER_MESSAGE = "Game Over! Press Enter to Restart"


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> fresh randomness every run
    initial_tick: float = 0.2      # seconds per step at the start
    tick_step: float = 0.02        # speed-up per threshold
    min_tick: float = 0.05
    foods_per_speedup: int = 4
    fps: int = 60
    font_size: int = 32


CFG = Config()
