# src/gridsnake/loop.py

import logging
from typing import Callable, Optional

from .config import RAMP_BASE_MS, RAMP_MIN_MS, RAMP_STEP_MS, Config
from .game import (
    GameState,
    Vector,
    create_initial_state,
    set_direction,
    step_state,
    toggle_pause,
)
from .rng import RandomSource

logger = logging.getLogger(__name__)

IntervalStrategy = Callable[[int], int]
Renderer = Callable[[GameState], None]


# -----------------------------------------------------------------------------
# Tick interval strategies: score -> milliseconds
# -----------------------------------------------------------------------------
def fixed_interval(tick_ms: int) -> IntervalStrategy:
    return lambda score: tick_ms


def ramped_interval(score: int) -> int:
    """Speed up by RAMP_STEP_MS per food eaten, never faster than RAMP_MIN_MS."""
    return max(RAMP_MIN_MS, RAMP_BASE_MS - RAMP_STEP_MS * score)


def interval_strategy(config: Config) -> IntervalStrategy:
    if config.speed_ramp:
        return ramped_interval
    return fixed_interval(config.tick_ms)


# -----------------------------------------------------------------------------
# Timer contract
# -----------------------------------------------------------------------------
class Timer:
    """
    A repeating timer that calls back into GameLoop.tick().
    Subclasses schedule with start(interval_ms) and stop with cancel().
    """

    def start(self, interval_ms: int) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


# -----------------------------------------------------------------------------
# Game loop
# -----------------------------------------------------------------------------
class GameLoop:
    """
    Owns the one live GameState and the timer that advances it.

    Every operation replaces the state wholesale; the engine never mutates.
    At most one timer schedule is active: a running timer is always
    cancelled before it is scheduled again.
    """

    def __init__(
        self,
        config: Config,
        timer: Timer,
        rng: RandomSource,
        on_render: Renderer,
        interval: Optional[IntervalStrategy] = None,
    ):
        self.config = config
        self.timer = timer
        self.rng = rng
        self.on_render = on_render
        self.interval = interval if interval is not None else interval_strategy(config)

        self.state: GameState = create_initial_state(config, rng)
        self.interval_ms: int = self.interval(0)
        self.running = False

    # Timer control ------------------------------------------------------------
    def start(self) -> None:
        if self.running:
            return
        self.timer.start(self.interval_ms)
        self.running = True

    def stop(self) -> None:
        if not self.running:
            return
        self.timer.cancel()
        self.running = False

    def _reschedule(self, interval_ms: int) -> None:
        logger.debug("Tick interval %d ms -> %d ms", self.interval_ms, interval_ms)
        self.stop()
        self.interval_ms = interval_ms
        self.start()

    # Events -------------------------------------------------------------------
    def tick(self) -> None:
        was_alive = self.state.alive
        self.state = step_state(self.state, self.rng)
        self.on_render(self.state)

        if not self.state.alive:
            # A tick queued before the game ended finds it already over.
            if not was_alive:
                return
            self.stop()
            if self.state.won:
                logger.info("Board filled, snake wins with score %d", self.state.score)
            else:
                logger.info("Game over with score %d", self.state.score)
            return

        wanted = self.interval(self.state.score)
        if wanted != self.interval_ms and self.running:
            self._reschedule(wanted)

    def handle_direction(self, direction: Optional[Vector]) -> None:
        self.state = set_direction(self.state, direction)

    def toggle_pause(self) -> None:
        if not self.state.alive:
            return
        self.state = toggle_pause(self.state)
        if self.state.paused:
            logger.info("Paused")
            self.stop()
        else:
            logger.info("Resumed")
            self.start()
        self.on_render(self.state)

    def restart(self) -> None:
        logger.info("Restarting (previous score %d)", self.state.score)
        self.state = create_initial_state(self.config, self.rng)
        self.interval_ms = self.interval(0)
        self.on_render(self.state)
        self.stop()
        self.start()
