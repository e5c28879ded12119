"""Name based lookup of the ziggurat samplers."""

import logging

from .exponential import Exponential
from .gaussian import NormalizedGaussian
from .protocols import UniformSourceProtocol

logger = logging.getLogger(__name__)

_sampler_registry = {}


def register_sampler(*names: str):
    """Register a sampler class under one or more names."""

    def decorator(cls):
        for name in names:
            if name in _sampler_registry:
                raise ValueError(f"Sampler '{name}' already registered")
            _sampler_registry[name] = cls
        return cls

    return decorator


def get_sampler_class(name: str):
    try:
        return _sampler_registry[name.lower()]
    except KeyError:
        raise ValueError(
            f"No sampler registered for '{name}'. Available: {list_samplers()}"
        )


def list_samplers() -> list[str]:
    return sorted(_sampler_registry)


def make_sampler(distribution: str, source: UniformSourceProtocol, **params):
    """Build a sampler for ``distribution`` bound to ``source``.

    Parameters
    ----------
    distribution : str
        Registered sampler name, e.g. ``"exponential"`` or ``"gaussian"``.
    source : UniformSourceProtocol
        Source of uniform 64-bit integers.
    **params
        Distribution parameters. Only the exponential accepts ``mean``.

    Raises
    ------
    ValueError
        If the distribution is unknown or a parameter is not accepted.
    """
    cls = get_sampler_class(distribution)
    if cls is Exponential:
        unknown = set(params) - {"mean"}
    else:
        unknown = set(params)
    if unknown:
        raise ValueError(
            f"Unsupported parameters for '{distribution}': {sorted(unknown)}"
        )
    logger.debug("Making %s sampler with params %s", distribution, params)
    return cls.of(source, **params)


register_sampler("exponential")(Exponential)
register_sampler("gaussian", "normalized_gaussian", "normal")(NormalizedGaussian)
