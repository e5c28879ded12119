"""Bit helpers shared by the ziggurat samplers.

Draws arrive as Python integers in ``[0, 2**64)``. The tables were built for
two's complement 64-bit arithmetic, so the helpers here reproduce the signed
view and the unsigned right shift of such a value.
"""

MASK_INT8 = 0xFF
MASK_INT64 = (1 << 64) - 1
# Largest signed 64-bit value; masks off the sign bit.
MAX_INT64 = (1 << 63) - 1
INT64_MIN = -(1 << 63)
TWO_POW_63 = 2.0**63


def to_signed(draw: int) -> int:
    """Read an unsigned 64-bit draw as a two's complement signed integer."""
    if draw > MAX_INT64:
        return draw - (1 << 64)
    return draw


def interpolate(v: tuple, j: int, u: int) -> float:
    """Linear interpolation between ``v[j]`` and ``v[j - 1]``.

    ``v`` is scaled by 2^-63 and ``u`` is a 63-bit uniform integer, so the
    result is ``v[j] + (u / 2**63) * (v[j - 1] - v[j])`` in unscaled units.
    Used to place the point ``(x, y)`` inside the rectangle covering overhang
    ``j``::

        X[j],Y[j]
            |\\
            | \\
            |  \\     overhang j
            |   \\
            +----- X[j-1],Y[j-1]
    """
    return v[j] * TWO_POW_63 + u * (v[j - 1] - v[j])
