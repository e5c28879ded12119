"""Vectorised convenience wrappers around the scalar samplers."""

from collections.abc import Iterator

import numpy as np

from .protocols import SharedStateSamplerProtocol


def sample_array(sampler: SharedStateSamplerProtocol, n_samples: int) -> np.ndarray:
    """Draw ``n_samples`` deviates into a float64 array.

    Raises
    ------
    ValueError
        If ``n_samples`` is negative.
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}")
    draw = sampler.sample
    return np.fromiter((draw() for _ in range(n_samples)), dtype=np.float64, count=n_samples)


def sample_chunks(
    sampler: SharedStateSamplerProtocol, n_samples: int, chunk_size: int = 65_536
) -> Iterator[np.ndarray]:
    """Yield ``n_samples`` deviates in arrays of at most ``chunk_size``."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}")
    remaining = n_samples
    while remaining > 0:
        size = min(chunk_size, remaining)
        yield sample_array(sampler, size)
        remaining -= size
