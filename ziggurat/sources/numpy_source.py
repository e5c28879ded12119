"""Uniform 64-bit source backed by a NumPy generator."""

import numpy as np

UINT64_MAX = np.iinfo(np.uint64).max


class NumpyUniformSource:
    """Serve 64-bit draws from a :class:`numpy.random.Generator`.

    Draws are fetched in blocks of ``buffer_size`` and handed out one at a
    time as Python integers.

    Parameters
    ----------
    rng : np.random.Generator, optional
        Generator to draw from. Built with ``np.random.default_rng(seed)``
        when omitted.
    seed : int, optional
        Seed for the default generator. Not allowed together with ``rng``.
    buffer_size : int
        Number of draws fetched per block.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        buffer_size: int = 1024,
    ):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.buffer_size = buffer_size
        self._buffer = []
        self._pos = 0

    def _refill(self) -> None:
        block = self.rng.integers(
            0, UINT64_MAX, size=self.buffer_size, dtype=np.uint64, endpoint=True
        )
        self._buffer = block.tolist()
        self._pos = 0

    def next_u64(self) -> int:
        if self._pos >= len(self._buffer):
            self._refill()
        value = self._buffer[self._pos]
        self._pos += 1
        return value
