"""Modified ziggurat samplers for the exponential and normal distributions."""

from .batch import sample_array, sample_chunks
from .exponential import Exponential
from .gaussian import NormalizedGaussian
from .protocols import (
    SharedStateSamplerProtocol,
    UniformSourceProtocol,
    check_uniform_source,
)
from .registry import get_sampler_class, list_samplers, make_sampler, register_sampler
from .tables import EXPONENTIAL_TABLES, GAUSSIAN_TABLES, ZigguratTables

__all__ = [
    "Exponential",
    "NormalizedGaussian",
    "SharedStateSamplerProtocol",
    "UniformSourceProtocol",
    "check_uniform_source",
    "sample_array",
    "sample_chunks",
    "get_sampler_class",
    "list_samplers",
    "make_sampler",
    "register_sampler",
    "ZigguratTables",
    "EXPONENTIAL_TABLES",
    "GAUSSIAN_TABLES",
]
