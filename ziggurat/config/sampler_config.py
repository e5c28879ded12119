"""Sampler configuration.

Configuration is a plain nested dict. Defaults come from
:func:`get_default_sampler_config`; YAML files override them key by key.
"""

import logging
from copy import deepcopy
from pathlib import Path

import yaml

from ..core.exponential import Exponential
from ..core.registry import get_sampler_class, make_sampler
from ..sources.registry import make_uniform_source

logger = logging.getLogger(__name__)


def get_default_sampler_config() -> dict:
    """Get the default sampler configuration.

    Returns
    -------
    dict
        Configuration with sections:

        - ``distribution``: registered sampler name
        - ``n_samples``: number of deviates to draw
        - ``mean``: mean of the exponential (ignored for the Gaussian)
        - ``source``: uniform source ``kind`` and ``seed``
        - ``chunk_size``: deviates per array when streaming
        - ``validation``: chi-square ``n_bins`` and ``significance``
    """
    return {
        "distribution": "gaussian",
        "n_samples": 100_000,
        "mean": 1.0,
        "source": {"kind": "splitmix64", "seed": 0},
        "chunk_size": 65_536,
        "validation": {"n_bins": 2000, "significance": 0.001},
    }


def _lower_keys(d):
    if isinstance(d, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in d.items()}
    return d


def merge_config(base: dict, overrides: dict) -> dict:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_sampler_config(config: dict) -> dict:
    """Check a sampler configuration.

    Raises
    ------
    ValueError
        On unknown top level keys, an unregistered distribution or a
        non-positive sample or chunk count.
    """
    unknown = set(config) - set(get_default_sampler_config())
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
    get_sampler_class(config["distribution"])
    if config["n_samples"] < 0:
        raise ValueError(f"n_samples must be non-negative, got {config['n_samples']}")
    if config["chunk_size"] < 1:
        raise ValueError(f"chunk_size must be positive, got {config['chunk_size']}")
    return config


def load_sampler_config(yaml_config_path=None, overrides: dict | None = None) -> dict:
    """Load a YAML configuration on top of the defaults.

    Parameters
    ----------
    yaml_config_path : str, Path or file-like, optional
        YAML file. Keys are case insensitive. When omitted only the defaults
        and ``overrides`` are used.
    overrides : dict, optional
        Values applied after the YAML file, e.g. from the command line.
    """
    config = get_default_sampler_config()
    if yaml_config_path is not None:
        if hasattr(yaml_config_path, "read"):
            from_yaml = yaml.safe_load(yaml_config_path)
        else:
            with open(Path(yaml_config_path), "rb") as f:
                from_yaml = yaml.safe_load(f)
        config = merge_config(config, _lower_keys(from_yaml or {}))
    if overrides:
        config = merge_config(config, _lower_keys(overrides))
    return validate_sampler_config(config)


def sampler_from_config(config: dict):
    """Build the uniform source and the sampler described by ``config``."""
    source_config = dict(config["source"])
    kind = source_config.pop("kind", "splitmix64")
    source = make_uniform_source(kind, **source_config)
    params = {}
    if get_sampler_class(config["distribution"]) is Exponential:
        params["mean"] = config["mean"]
    logger.info(
        "Sampler %s with %s source (%s)", config["distribution"], kind, source_config
    )
    return make_sampler(config["distribution"], source, **params)
