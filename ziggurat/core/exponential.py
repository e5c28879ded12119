"""Modified ziggurat sampler for the exponential distribution.

Implements McFarland (2016), "A modified ziggurat algorithm for generating
exponentially and normally distributed pseudorandom numbers", Journal of
Statistical Computation and Simulation 86, 1281-1294.

Sampling from one 64-bit draw ``x``:

1. The low 8 bits pick ``i``. Layers ``i < I_MAX`` lie entirely under the
   density, so ``X[i] * (x >> 1)`` is returned directly (about 98.4% of calls).
2. Otherwise a second draw picks the tail or an overhang with alias sampling.
3. Overhangs are concave, so a point above the hypotenuse is reflected below
   it and accepted without evaluating ``exp`` when it is further than
   ``E_MAX`` from the hypotenuse.
4. The tail is itself exponential: each tail hit adds ``X_0`` and sampling
   restarts.
"""

import logging
import math
import numbers

from ._utils import MASK_INT8, interpolate
from .protocols import UniformSourceProtocol, check_uniform_source
from .tables.exponential import E_MAX, EXPONENTIAL_TABLES, I_MAX, X, X_0, Y

logger = logging.getLogger(__name__)


class Exponential:
    """Exponential deviates with the modified ziggurat method.

    Parameters
    ----------
    source : UniformSourceProtocol
        Source of uniform 64-bit integers.
    mean : float, optional
        Mean of the distribution, by default 1.0. The unit deviate is scaled
        by ``mean`` after sampling.

    Raises
    ------
    ValueError
        If ``mean`` is not a finite, strictly positive number.
    TypeError
        If ``source`` does not provide ``next_u64``.

    Examples
    --------
    >>> from ziggurat.sources import SplitMix64
    >>> sampler = Exponential(SplitMix64(42), mean=2.0)
    >>> sampler.sample() >= 0
    True
    """

    tables = EXPONENTIAL_TABLES

    def __init__(self, source: UniformSourceProtocol, mean: float = 1.0):
        if not isinstance(mean, numbers.Real) or not (
            mean > 0 and math.isfinite(mean)
        ):
            raise ValueError(f"Mean is not strictly positive: {mean}")
        self._source = check_uniform_source(source)
        self._next_u64 = source.next_u64
        self.mean = float(mean)
        logger.debug("Created exponential sampler (mean=%s)", self.mean)

    @classmethod
    def of(cls, source: UniformSourceProtocol, mean: float | None = None):
        """Create a sampler, with ``mean = 1`` when ``mean`` is omitted."""
        if mean is None:
            return cls(source)
        return cls(source, mean)

    @property
    def source(self) -> UniformSourceProtocol:
        return self._source

    def sample(self) -> float:
        """Draw one exponential deviate scaled by ``mean``."""
        x = self._next_u64()
        # The float product discards the low bits, so they can select the layer.
        i = x & MASK_INT8
        if i < I_MAX:
            return X[i] * (x >> 1) * self.mean
        # The upper 56 bits of x are still unused; recycle them.
        return self._edge_sample(x) * self.mean

    def with_uniform_source(self, source: UniformSourceProtocol) -> "Exponential":
        """Return a sampler with the same mean bound to ``source``."""
        return type(self)(source, self.mean)

    def _edge_sample(self, xx: int) -> float:
        j = self._select_region()
        if j != 0:
            return self._sample_overhang(j, xx)

        # Tail: the distribution beyond X_0 is again exponential. Keep adding
        # X_0 until a draw lands inside the ziggurat. xx is discarded since its
        # low bits already chose i.
        x0 = X_0
        while True:
            x = self._next_u64()
            i = x & MASK_INT8
            if i < I_MAX:
                return x0 + X[i] * (x >> 1)
            j = self._select_region()
            if j != 0:
                return x0 + self._sample_overhang(j, x)
            x0 += X_0

    def _select_region(self) -> int:
        return EXPONENTIAL_TABLES.select_region(self._next_u64())

    def _sample_overhang(self, j: int, xx: int) -> float:
        """Rejection sample from concave overhang ``j > 0``.

        ``u1`` and ``u2`` place a point in the rectangle covering the overhang;
        ``u2 - u1`` is the signed distance of the point below the hypotenuse.
        """
        u1 = xx >> 1
        while True:
            u_distance = (self._next_u64() >> 1) - u1
            if u_distance < 0:
                # Above the hypotenuse: reflect by swapping u1 and u2.
                u_distance = -u_distance
                u1 -= u_distance
            x = interpolate(X, j, u1)
            if u_distance >= E_MAX:
                # Far enough below the hypotenuse to be under the curve.
                return x
            if interpolate(Y, j, u1 + u_distance) <= math.exp(-x):
                return x
            u1 = self._next_u64() >> 1
