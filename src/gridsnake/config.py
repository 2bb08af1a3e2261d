# src/gridsnake/config.py
from dataclasses import dataclass

# ----- Window -----
WIDTH, HEIGHT = 630, 630
HUD_HEIGHT = 36

# ----- Colors -----
BG = (12, 12, 18)
TEXT = (220, 220, 230)
GRID_A = (255, 230, 80, 102)
GRID_B = (80, 255, 120, 89)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

# ----- Speed ramp (ms per tick as the score grows) -----
RAMP_BASE_MS = 300
RAMP_STEP_MS = 8
RAMP_MIN_MS = 80


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 21
    start_length: int = 3
    tick_ms: int = 140
    speed_ramp: bool = False
    easy_first_food: bool = False

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.start_length < 1:
            raise ValueError(f"start_length must be at least 1, got {self.start_length}")
        # The starting snake extends left from the centre cell.
        if self.start_length > self.grid_size // 2 + 1:
            raise ValueError(
                f"start_length {self.start_length} does not fit a grid of size {self.grid_size}"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")


DEFAULT_CONFIG = Config()
