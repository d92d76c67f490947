"""
Random sources for mine placement.

A board draws coordinates from any object exposing ``randrange(stop)``.
Tests inject a fixed sequence; normal play shares one process-wide
generator seeded from the wall clock the first time it is needed.
"""
import random
import time
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can pick an integer in ``[0, stop)``."""

    def randrange(self, stop: int) -> int:
        ...


_default_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """Return the shared generator, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = random.Random(time.time_ns())
    return _default_rng


def seeded_rng(seed: int) -> random.Random:
    """Create an independent, reproducible generator."""
    return random.Random(seed)
