"""Injectable source of uniform random numbers."""

from __future__ import annotations

import random
import time
from typing import Optional, Protocol


class RandomSource(Protocol):
    """
    The two draws the generators need.

    :class:`random.Random` satisfies this protocol, so tests can pass a
    seeded instance (or any scripted object with the same methods).
    """

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        ...

    def random(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a new ``random.Random``, seeded from the wall clock when *seed* is None."""
    if seed is None:
        seed = time.time_ns()
    return random.Random(seed)
