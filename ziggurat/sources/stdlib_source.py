"""Uniform 64-bit source backed by :class:`random.Random`."""

import random


class StdlibUniformSource:
    """Draw 64-bit integers with ``random.Random.getrandbits``."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.rng = rng if rng is not None else random.Random(seed)
        self._getrandbits = self.rng.getrandbits

    def next_u64(self) -> int:
        return self._getrandbits(64)
