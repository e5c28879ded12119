"""Sources that record and replay fixed sequences of draws.

Replaying a recorded sequence reproduces a sampler's output bit for bit, and
scripted sequences let tests steer a sampler into a chosen region.
"""

from collections.abc import Iterable

from ..core._utils import MASK_INT64
from ..core.protocols import UniformSourceProtocol, check_uniform_source


class SequenceSource:
    """Replay a fixed list of 64-bit draws.

    Negative values are read as two's complement, so signed 64-bit constants
    can be used directly.

    Parameters
    ----------
    values : Iterable[int]
        Draws to return, in order.
    cycle : bool
        Restart from the first value when the sequence runs out. Otherwise
        :class:`IndexError` is raised.
    """

    def __init__(self, values: Iterable[int], cycle: bool = False):
        self.values = [int(v) & MASK_INT64 for v in values]
        if cycle and not self.values:
            raise ValueError("A cycling sequence needs at least one value.")
        self.cycle = cycle
        self.position = 0

    def next_u64(self) -> int:
        if self.position >= len(self.values):
            if not self.cycle:
                raise IndexError(
                    f"Recorded sequence exhausted after {len(self.values)} draws"
                )
            self.position = 0
        value = self.values[self.position]
        self.position += 1
        return value

    def reset(self) -> None:
        self.position = 0


class RecordingSource:
    """Forward draws from another source and keep a copy of each."""

    def __init__(self, source: UniformSourceProtocol):
        self.source = check_uniform_source(source)
        self.values = []

    def next_u64(self) -> int:
        value = self.source.next_u64()
        self.values.append(value)
        return value

    def replay(self) -> SequenceSource:
        """Return a :class:`SequenceSource` over the draws recorded so far."""
        return SequenceSource(self.values)
