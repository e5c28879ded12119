__version__ = "0.1.0"

from .core import (
    Exponential,
    NormalizedGaussian,
    make_sampler,
    sample_array,
    sample_chunks,
)
from .sources import (
    NumpyUniformSource,
    RecordingSource,
    SequenceSource,
    SplitMix64,
    StdlibUniformSource,
    make_uniform_source,
)

__all__ = [
    "Exponential",
    "NormalizedGaussian",
    "make_sampler",
    "sample_array",
    "sample_chunks",
    "NumpyUniformSource",
    "RecordingSource",
    "SequenceSource",
    "SplitMix64",
    "StdlibUniformSource",
    "make_uniform_source",
]
