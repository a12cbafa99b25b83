"""Grid-based snake game: simulation core plus a pygame front-end."""

from .config import Config, Direction
from .game import GameState, InputKind, Phase, new_game_state, handle_input, update
from .snake import Snake, Food

__all__ = [
    "Config", "Direction",
    "GameState", "InputKind", "Phase", "new_game_state", "handle_input", "update",
    "Snake", "Food",
]
