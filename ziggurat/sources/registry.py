"""Factory for the built-in uniform sources."""

import logging

from .numpy_source import NumpyUniformSource
from .splitmix import SplitMix64
from .stdlib_source import StdlibUniformSource

logger = logging.getLogger(__name__)

_source_registry = {}


def register_uniform_source(name: str):
    def decorator(factory):
        if name in _source_registry:
            raise ValueError(f"Uniform source '{name}' already registered")
        _source_registry[name] = factory
        return factory

    return decorator


def list_uniform_sources() -> list[str]:
    return sorted(_source_registry)


def make_uniform_source(kind: str = "splitmix64", seed: int | None = None, **kwargs):
    """Build a registered uniform source.

    Parameters
    ----------
    kind : str
        One of :func:`list_uniform_sources`.
    seed : int, optional
        Seed passed to the source. SplitMix64 uses 0 when omitted.
    **kwargs
        Extra keyword arguments for the source constructor.

    Raises
    ------
    ValueError
        If ``kind`` is not registered.
    """
    try:
        factory = _source_registry[kind.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown uniform source '{kind}'. Available: {list_uniform_sources()}"
        )
    logger.debug("Making %s uniform source (seed=%s)", kind, seed)
    return factory(seed=seed, **kwargs)


@register_uniform_source("splitmix64")
def _make_splitmix64(seed=None):
    return SplitMix64(0 if seed is None else seed)


@register_uniform_source("numpy")
def _make_numpy(seed=None, buffer_size=1024):
    return NumpyUniformSource(seed=seed, buffer_size=buffer_size)


@register_uniform_source("stdlib")
def _make_stdlib(seed=None):
    return StdlibUniformSource(seed=seed)
