# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import random

from .config import GRID_W, GRID_H, Config, CFG, Direction
from .snake import Cell, Snake, Food, in_bounds


# ---------- Phases & inputs ----------
class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class InputKind(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"

    @property
    def direction(self) -> Optional[Direction]:
        """The heading this input asks for, or None for CONFIRM."""
        if self is InputKind.CONFIRM:
            return None
        return Direction[self.name]


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Food
    rng: random.Random
    config: Config = field(default_factory=Config)
    phase: Phase = Phase.NOT_STARTED
    elapsed: float = 0.0           # seconds since the last step
    tick_interval: float = 0.2     # current seconds per step
    food_eaten: int = 0

    @property
    def started(self) -> bool:
        return self.phase is not Phase.NOT_STARTED

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER


def start_cell() -> Cell:
    return (GRID_W // 2, GRID_H // 2)


def new_game_state(config: Config = CFG) -> GameState:
    rng = random.Random(config.seed)
    return GameState(
        snake=Snake(start_cell()),
        food=Food.spawn(rng),
        rng=rng,
        config=config,
        tick_interval=config.initial_tick,
    )


def restart(state: GameState) -> None:
    """Fresh snake and food, counters back to their initial values, running."""
    state.snake = Snake(start_cell())
    state.food = Food.spawn(state.rng)
    state.food_eaten = 0
    state.tick_interval = state.config.initial_tick
    state.elapsed = 0.0
    state.phase = Phase.RUNNING


# ---------- Input / Update ----------
def handle_input(state: GameState, kind: InputKind) -> None:
    """
    Apply one input to the session.
    - before the first CONFIRM everything else is ignored
    - while running, arrows steer (no 180° turns) and CONFIRM does nothing
    - after game over only CONFIRM matters: it restarts
    """
    if state.phase is Phase.NOT_STARTED:
        if kind is InputKind.CONFIRM:
            state.phase = Phase.RUNNING
    elif state.phase is Phase.RUNNING:
        if kind.direction is not None:
            state.snake.set_direction(kind.direction)
    elif kind is InputKind.CONFIRM:
        restart(state)


def step_game(state: GameState) -> bool:
    """
    Advance the simulation by exactly one tick.
    Returns True if the snake is still alive, False on game over.
    """
    snake = state.snake
    cfg = state.config

    # Food is eaten when the head sits on it at the start of the tick
    ate = snake.head == state.food.position
    target = snake.projected_head()

    snake.advance(grew=ate)

    if ate:
        state.food.respawn(state.rng)
        state.food_eaten += 1
        if state.food_eaten % cfg.foods_per_speedup == 0:
            state.tick_interval = max(state.tick_interval - cfg.tick_step, cfg.min_tick)

    # The clamped head never leaves the grid; a wall hit shows up in the target
    if snake.has_self_collision() or not in_bounds(*target):
        state.phase = Phase.OVER
        return False
    return True


def update(state: GameState, dt: float) -> bool:
    """
    Per-frame update with elapsed time `dt` in seconds.
    Runs one step once the accumulator reaches the tick interval. The
    accumulator is zeroed after a step, so any overshoot is dropped.
    Returns True if a step ran this frame.
    """
    if state.phase is not Phase.RUNNING:
        return False

    stepped = False
    if state.elapsed >= state.tick_interval:
        step_game(state)
        state.elapsed = 0.0
        stepped = True
    state.elapsed += dt
    return stepped
