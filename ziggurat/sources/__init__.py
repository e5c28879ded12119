"""Uniform 64-bit integer sources for the ziggurat samplers."""

from .numpy_source import NumpyUniformSource
from .registry import list_uniform_sources, make_uniform_source, register_uniform_source
from .sequence import RecordingSource, SequenceSource
from .splitmix import SplitMix64
from .stdlib_source import StdlibUniformSource

__all__ = [
    "NumpyUniformSource",
    "RecordingSource",
    "SequenceSource",
    "SplitMix64",
    "StdlibUniformSource",
    "list_uniform_sources",
    "make_uniform_source",
    "register_uniform_source",
]
