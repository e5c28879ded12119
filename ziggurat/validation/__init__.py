"""Statistical checks of sampler output."""

from .goodness_of_fit import (
    chi_square_quantile_test,
    default_ranges,
    quantile_bin_counts,
    range_bin_counts,
    summarize_samples,
    theoretical_distribution,
)
from .plotting import plot_fit

__all__ = [
    "chi_square_quantile_test",
    "default_ranges",
    "plot_fit",
    "quantile_bin_counts",
    "range_bin_counts",
    "summarize_samples",
    "theoretical_distribution",
]
