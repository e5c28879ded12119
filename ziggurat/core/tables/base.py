"""Container for a precomputed ziggurat table set."""

import math
from dataclasses import dataclass

from .._utils import INT64_MIN, MASK_INT8, to_signed

ALIAS_TABLE_SIZE = 256


@dataclass(frozen=True)
class ZigguratTables:
    """Immutable table set shared by every sampler of one distribution.

    Attributes
    ----------
    name : str
        Distribution name, used in error messages and ``repr``.
    i_max : int
        Number of layers ``N``. Layer indices below ``i_max`` take the fast path.
    x_0 : float
        Start of the tail, equal to ``x[0] * 2**63``.
    x : tuple of float
        Layer lengths scaled by 2^-63, ``N + 1`` entries ending in 0.
    y : tuple of float
        Density at each ``x`` scaled by 2^-63, ``N + 1`` entries ending in pdf(0).
    alias_map : tuple of int
        Alias region for each of the 256 alias sections.
    ipmf : tuple of int
        Signed 64-bit alias thresholds; a draw at or above ``ipmf[k]`` uses
        ``alias_map[k]`` instead of ``k``.
    """

    name: str
    i_max: int
    x_0: float
    x: tuple
    y: tuple
    alias_map: tuple
    ipmf: tuple

    def select_region(self, draw: int) -> int:
        """Pick the tail (0) or an overhang in ``[1, i_max]`` from one 64-bit draw.

        The low 8 bits pick an alias section ``k``; the whole draw, read as a
        signed 64-bit integer, is then compared against the section threshold.
        """
        k = draw & MASK_INT8
        if to_signed(draw) >= self.ipmf[k]:
            return self.alias_map[k]
        return k

    def check_invariants(self) -> None:
        """Validate the structural invariants of the tables.

        Raises
        ------
        ValueError
            If any invariant is violated.
        """
        n = self.i_max
        if len(self.x) != n + 1 or len(self.y) != n + 1:
            raise ValueError(
                f"{self.name}: X and Y must have {n + 1} entries, "
                f"got {len(self.x)} and {len(self.y)}"
            )
        if len(self.alias_map) != ALIAS_TABLE_SIZE or len(self.ipmf) != ALIAS_TABLE_SIZE:
            raise ValueError(
                f"{self.name}: alias tables must have {ALIAS_TABLE_SIZE} entries"
            )
        if self.x[n] != 0.0:
            raise ValueError(f"{self.name}: X[{n}] must be 0, got {self.x[n]}")
        if any(a < b for a, b in zip(self.x, self.x[1:])):
            raise ValueError(f"{self.name}: X must be non-increasing")
        if any(a > b for a, b in zip(self.y, self.y[1:])):
            raise ValueError(f"{self.name}: Y must be non-decreasing")
        if not math.isclose(self.x[0] * 2.0**63, self.x_0, rel_tol=1e-15):
            raise ValueError(f"{self.name}: x_0 does not match X[0] * 2^63")
        for k in range(ALIAS_TABLE_SIZE):
            if not 0 <= self.alias_map[k] <= n:
                raise ValueError(
                    f"{self.name}: MAP[{k}] = {self.alias_map[k]} is not a region"
                )
            # Sections past the last overhang must always take the alias.
            if k > n and self.ipmf[k] != INT64_MIN:
                raise ValueError(
                    f"{self.name}: IPMF[{k}] must be {INT64_MIN} for an unused section"
                )
