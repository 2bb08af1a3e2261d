# src/gridsnake/game.py

import dataclasses
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import DIRECTIONS, RIGHT, Config
from .rng import RandomSource

Vector = Tuple[int, int]
Snake = Tuple[Vector, ...]


# ---------- Helpers ----------
def is_opposite(a: Vector, b: Vector) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0


def in_bounds(grid_size: int, cell: Vector) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def place_food(grid_size: int, snake: Snake, rng: RandomSource) -> Optional[Vector]:
    """
    Pick a uniformly random open cell, or None when the snake fills the grid.
    Open cells are enumerated row by row (y outer, x inner) so a seeded
    source always lands on the same cell for the same snake.
    """
    occupied = set(snake)
    open_cells: List[Vector] = [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]
    if not open_cells:
        return None
    return open_cells[int(rng() * len(open_cells))]


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    grid_size: int
    snake: Snake                 # head at index 0
    dir: Vector                  # direction applied on the last step
    next_dir: Optional[Vector]   # pending direction for the next step
    food: Optional[Vector]       # None once the board is full
    score: int
    alive: bool
    paused: bool
    won: bool = False            # set when growing fills the board

    @property
    def head(self) -> Vector:
        return self.snake[0]


def create_initial_state(config: Config, rng: RandomSource) -> GameState:
    mid = config.grid_size // 2
    snake: Snake = tuple((mid - i, mid) for i in range(config.start_length))

    food: Optional[Vector] = None
    if config.easy_first_food:
        easy = (mid + 2, mid)
        if in_bounds(config.grid_size, easy) and easy not in snake:
            food = easy
    if food is None:
        food = place_food(config.grid_size, snake, rng)

    return GameState(
        grid_size=config.grid_size,
        snake=snake,
        dir=RIGHT,
        next_dir=RIGHT,
        food=food,
        score=0,
        alive=True,
        paused=False,
    )


# ---------- Transitions ----------
def set_direction(state: GameState, direction: Optional[Vector]) -> GameState:
    """
    Queue a turn for the next step. Anything but one of the four unit
    directions is ignored, as is a reversal of the applied direction.
    """
    if direction not in DIRECTIONS.values() or is_opposite(state.dir, direction):
        return state
    return dataclasses.replace(state, next_dir=direction)


def toggle_pause(state: GameState) -> GameState:
    if not state.alive:
        return state
    return dataclasses.replace(state, paused=not state.paused)


def step_state(state: GameState, rng: RandomSource) -> GameState:
    """
    Advance the game by one tick.
    - Paused or dead states come back unchanged.
    - A wall hit or a body hit (either is enough) kills the snake in place.
    - Eating grows the snake by one and moves the food; when no open cell
      remains the game ends with the grown snake (the board is filled).
    """
    if not state.alive or state.paused:
        return state

    direction = state.next_dir if state.next_dir is not None else state.dir
    hx, hy = state.head
    new_head = (hx + direction[0], hy + direction[1])

    hits_wall = not in_bounds(state.grid_size, new_head)
    will_eat = state.food is not None and new_head == state.food

    # The tail vacates its cell unless the snake grows this tick.
    body = state.snake if will_eat else state.snake[:-1]
    hits_body = new_head in body

    if hits_wall or hits_body:
        return dataclasses.replace(state, alive=False)

    if will_eat:
        snake = (new_head,) + state.snake
        score = state.score + 1
        food = place_food(state.grid_size, snake, rng)
    else:
        snake = (new_head,) + state.snake[:-1]
        score = state.score
        food = state.food

    if food is None:
        return dataclasses.replace(state, snake=snake, food=None, score=score, alive=False, won=will_eat)

    return dataclasses.replace(
        state,
        snake=snake,
        dir=direction,
        next_dir=direction,
        food=food,
        score=score,
    )
