# src/gridsnake/rng.py
"""Random sources for food placement.

A random source is any zero-argument callable returning a float in [0, 1).
"""

import time
from typing import Callable, Optional

import numpy as np  # type: ignore

RandomSource = Callable[[], float]

# Park-Miller "minimal standard" generator
LCG_MODULUS = 2147483647
LCG_MULTIPLIER = 16807


def create_rng(seed: Optional[int] = None) -> RandomSource:
    """
    Seeded linear-congruential source. The same seed always yields the
    same sequence of draws. Without a seed, the wall clock (ms) is used.
    """
    if seed is None:
        seed = int(time.time() * 1000)

    value = seed % LCG_MODULUS
    if value <= 0:
        value += LCG_MODULUS - 1

    def draw() -> float:
        nonlocal value
        value = (value * LCG_MULTIPLIER) % LCG_MODULUS
        return (value - 1) / (LCG_MODULUS - 1)

    return draw


def default_rng(seed: Optional[int] = None) -> RandomSource:
    """Uniform [0, 1) draws from numpy's default generator."""
    gen = np.random.default_rng(seed)
    return lambda: float(gen.random())
