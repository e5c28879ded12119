"""Modified ziggurat sampler for the standard normal distribution.

Uses the same layered construction as :mod:`ziggurat.core.exponential` over
the positive half of the density, with the sign taken from the draw. The
overhangs split into three kinds around the inflection point ``x = 1``:

- ``0 < j < J_INFLECTION``: concave; reflect and early accept like the
  exponential sampler.
- ``j > J_INFLECTION``: convex; points below the hypotenuse are accepted
  outright, points above are rejected early when far from it.
- ``j == J_INFLECTION``: no shortcut, every point is tested against the pdf.

The tail (``j == 0``) uses Marsaglia's method with two exponential deviates.
"""

import logging
import math

from ._utils import MASK_INT8, MAX_INT64, interpolate
from .exponential import Exponential
from .protocols import UniformSourceProtocol, check_uniform_source
from .tables.gaussian import (
    CONCAVE_E_MAX,
    CONVEX_E_MAX,
    GAUSSIAN_TABLES,
    I_MAX,
    J_INFLECTION,
    ONE_OVER_X_0,
    X,
    X_0,
    Y,
)

logger = logging.getLogger(__name__)

_TWO_POW_64 = 1 << 64


class NormalizedGaussian:
    """Standard normal deviates (mean 0, standard deviation 1).

    Parameters
    ----------
    source : UniformSourceProtocol
        Source of uniform 64-bit integers. The exponential sampler used for
        the tail draws from the same source.
    """

    tables = GAUSSIAN_TABLES

    def __init__(self, source: UniformSourceProtocol):
        self._source = check_uniform_source(source)
        self._next_u64 = source.next_u64
        self._exponential = Exponential(source)
        logger.debug("Created normalized Gaussian sampler")

    @classmethod
    def of(cls, source: UniformSourceProtocol) -> "NormalizedGaussian":
        return cls(source)

    @property
    def source(self) -> UniformSourceProtocol:
        return self._source

    def sample(self) -> float:
        """Draw one standard normal deviate."""
        xx = self._next_u64()
        i = xx & MASK_INT8
        if i < I_MAX:
            # The signed draw carries the sign of the deviate.
            if xx > MAX_INT64:
                return X[i] * (xx - _TWO_POW_64)
            return X[i] * xx
        return self._edge_sample(xx)

    def with_uniform_source(self, source: UniformSourceProtocol) -> "NormalizedGaussian":
        """Return a new sampler bound to ``source`` sharing the same tables."""
        return type(self)(source)

    def _select_region(self) -> int:
        return GAUSSIAN_TABLES.select_region(self._next_u64())

    def _edge_sample(self, xx: int) -> float:
        next_u64 = self._next_u64
        # Drop the sign bit to reuse the draw as u1.
        u1 = xx & MAX_INT64
        # Bit 63 set gives +1.0, clear gives -1.0.
        sign = ((xx >> 62) & 0x2) - 1.0
        j = self._select_region()

        if j > J_INFLECTION:
            # Convex overhang.
            while True:
                x = interpolate(X, j, u1)
                u_distance = (next_u64() >> 1) - u1
                if u_distance >= 0:
                    # Lower-left triangle, always under the curve.
                    break
                if u_distance >= CONVEX_E_MAX and interpolate(
                    Y, j, u1 + u_distance
                ) < math.exp(-0.5 * x * x):
                    break
                u1 = next_u64() >> 1
        elif j < J_INFLECTION:
            if j == 0:
                # Tail.
                exponential = self._exponential
                while True:
                    x = ONE_OVER_X_0 * exponential.sample()
                    if exponential.sample() >= 0.5 * x * x:
                        break
                x += X_0
            else:
                # Concave overhang.
                while True:
                    u_distance = (next_u64() >> 1) - u1
                    if u_distance < 0:
                        # Reflect in the hypotenuse.
                        u_distance = -u_distance
                        u1 -= u_distance
                    x = interpolate(X, j, u1)
                    if u_distance > CONCAVE_E_MAX or interpolate(
                        Y, j, u1 + u_distance
                    ) < math.exp(-0.5 * x * x):
                        break
                    u1 = next_u64() >> 1
        else:
            # Inflection point.
            while True:
                x = interpolate(X, j, u1)
                if interpolate(Y, j, next_u64() >> 1) < math.exp(-0.5 * x * x):
                    break
                u1 = next_u64() >> 1
        return sign * x
