# src/gridsnake/__init__.py
"""Grid snake: a pure state engine plus a timer-driven pygame front end."""

from .config import DEFAULT_CONFIG, DIRECTIONS, DOWN, LEFT, RIGHT, UP, Config
from .game import (
    GameState,
    create_initial_state,
    is_opposite,
    place_food,
    set_direction,
    step_state,
    toggle_pause,
)
from .loop import GameLoop, fixed_interval, ramped_interval
from .rng import create_rng, default_rng

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "DIRECTIONS",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "GameState",
    "create_initial_state",
    "is_opposite",
    "place_food",
    "set_direction",
    "step_state",
    "toggle_pause",
    "GameLoop",
    "fixed_interval",
    "ramped_interval",
    "create_rng",
    "default_rng",
]
