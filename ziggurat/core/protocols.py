"""Protocols for uniform bit sources and continuous samplers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UniformSourceProtocol(Protocol):
    """Source of uniformly distributed 64-bit integers.

    This is the only capability the samplers consume. Each call must advance
    the source and return an independent value in ``[0, 2**64)``.
    """

    def next_u64(self) -> int:
        """Return the next uniform integer in ``[0, 2**64)``."""
        ...


class SharedStateSamplerProtocol(Protocol):
    """Continuous sampler that can be rebound to another uniform source.

    Rebinding returns a new sampler sharing the immutable tables of the
    receiver, which keeps its own source.
    """

    def sample(self) -> float:
        """Draw one deviate."""
        ...

    def with_uniform_source(
        self, source: UniformSourceProtocol
    ) -> "SharedStateSamplerProtocol":
        """Return an equivalent sampler bound to ``source``."""
        ...


def check_uniform_source(source) -> UniformSourceProtocol:
    """Ensure ``source`` exposes ``next_u64``.

    Raises
    ------
    TypeError
        If ``source`` does not implement :class:`UniformSourceProtocol`.
    """
    if not isinstance(source, UniformSourceProtocol):
        raise TypeError(
            f"Uniform source must provide next_u64(), got {type(source).__name__}"
        )
    return source
