"""Uniform random integers in a closed range."""

from __future__ import annotations

import random


class Randomizer:
    """Draws integers uniformly from ``begin`` to ``end`` inclusive."""

    def __init__(self, begin: int, end: int, rng: random.Random | None = None) -> None:
        if begin > end:
            raise ValueError(f"empty range: {begin} > {end}")
        self.begin = begin
        self.end = end
        self._rng = rng if rng is not None else random.SystemRandom()

    def element(self) -> int:
        """Return one random integer from the range."""
        return self._rng.randint(self.begin, self.end)