"""
Seedable uniform random stream.

Every randomized decision in the generator draws from one `TreeRandom`
instance, in a fixed order, so a seed reproduces the same scene exactly.
Each `generate` call creates its own instance; never share one across
concurrent calls.
"""

import numpy as np

SEED_MASK = 0xFFFFFFFFFFFFFFFF


class TreeRandom:
    """Uniform [0, 1) draws backed by a numpy PCG64 generator."""

    def __init__(self, seed: int = 0) -> None:
        self.seed(seed)

    def seed(self, value: int) -> None:
        """
        Reset the stream.

        Any integer is accepted. Negative seeds wrap to 64 bits, so -1 and
        2**64 - 1 name the same stream.
        """
        self._rng = np.random.default_rng(np.random.SeedSequence(int(value) & SEED_MASK))
        self.draws = 0

    def next(self) -> float:
        """Advance the stream by one uniform draw in [0, 1)."""
        self.draws += 1
        return float(self._rng.random())

    def choice_index(self, n: int) -> int:
        """Uniform index in [0, n) from a single draw."""
        return min(int(self.next() * n), n - 1)
