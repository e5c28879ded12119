"""Process-wide ziggurat tables.

The tables are module level constants: Python's import lock builds them once
and they are never mutated afterwards, so they are shared freely across
sampler instances and threads.
"""

from .base import ZigguratTables
from .exponential import EXPONENTIAL_TABLES
from .gaussian import GAUSSIAN_TABLES

__all__ = [
    "ZigguratTables",
    "EXPONENTIAL_TABLES",
    "GAUSSIAN_TABLES",
]
