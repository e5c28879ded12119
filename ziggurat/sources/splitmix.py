"""Pure Python SplitMix64 generator."""

from ..core._utils import MASK_INT64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class SplitMix64:
    """SplitMix64 (Steele, Lea and Flood 2014) over Python integers.

    Deterministic on every platform, which makes it the default source for
    reproducible runs. Not thread safe; give each thread its own instance.
    """

    def __init__(self, seed: int = 0):
        self._state = int(seed) & MASK_INT64

    def next_u64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK_INT64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK_INT64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK_INT64
        return z ^ (z >> 31)

    def __repr__(self):
        return f"SplitMix64(state={self._state:#018x})"
