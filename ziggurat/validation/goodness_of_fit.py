"""Goodness-of-fit checks for sampler output.

The global test bins samples into ``n_bins`` equiprobable bins given by the
quantiles of the theoretical CDF. Each sub-range test conditions on the range
and bins its samples by the conditional quantiles, so narrow regions such as
the tail get enough bins to be tested on their own.
"""

import logging

import numpy as np
import pandas as pd
from scipy import stats

from ..core.exponential import Exponential
from ..core.registry import get_sampler_class

logger = logging.getLogger(__name__)

MIN_RANGE_BINS = 10


def theoretical_distribution(name: str, mean: float | None = 1.0):
    """Frozen ``scipy.stats`` distribution matching a registered sampler.

    A ``mean`` of None means the unit exponential, as in :func:`make_sampler`.
    """
    if get_sampler_class(name) is Exponential:
        return stats.expon(scale=1.0 if mean is None else mean)
    return stats.norm()


def default_ranges(name: str) -> list[tuple[float, float]]:
    """Sub-ranges covering the mode, the inflection points and the tails."""
    if get_sampler_class(name) is Exponential:
        return [(0.0, 0.5), (1.0, 2.0), (7.0, np.inf)]
    return [
        (-0.5, 0.5),
        (-0.25, 0.25),
        (-0.1, 0.1),
        (-0.05, 0.05),
        (0.9, 1.1),
        (-1.1, -0.9),
        (3.0, np.inf),
        (-np.inf, -3.0),
    ]


def quantile_bin_counts(samples, dist, n_bins: int = 2000) -> np.ndarray:
    """Count samples in ``n_bins`` equiprobable bins of ``dist``.

    Bin ``k`` holds ``edges[k - 1] <= x < edges[k]``.
    """
    if n_bins < 2:
        raise ValueError(f"n_bins must be at least 2, got {n_bins}")
    edges = dist.ppf(np.arange(1, n_bins) / n_bins)
    index = np.searchsorted(edges, np.asarray(samples), side="right")
    return np.bincount(index, minlength=n_bins)


def _chi_square(observed: np.ndarray) -> tuple[float, float]:
    # Equiprobable bins: expected counts are uniform over the observed total.
    expected = np.full(len(observed), observed.sum() / len(observed))
    result = stats.chisquare(observed, expected)
    return float(result.statistic), float(result.pvalue)


def range_bin_counts(samples, dist, low: float, high: float, n_bins: int) -> np.ndarray:
    """Count samples in ``[low, high)`` binned by conditional quantiles."""
    samples = np.asarray(samples)
    inside = samples[(samples >= low) & (samples < high)]
    p_low, p_high = dist.cdf(low), dist.cdf(high)
    edges = dist.ppf(p_low + (p_high - p_low) * np.arange(1, n_bins) / n_bins)
    index = np.searchsorted(edges, inside, side="right")
    return np.bincount(index, minlength=n_bins)


def chi_square_quantile_test(
    samples,
    dist,
    n_bins: int = 2000,
    ranges: list[tuple[float, float]] | None = None,
) -> pd.DataFrame:
    """Chi-square test of ``samples`` against ``dist`` globally and per range.

    Parameters
    ----------
    samples : array-like
        Deviates to test.
    dist : scipy.stats frozen distribution
        Theoretical distribution.
    n_bins : int
        Number of global quantile bins.
    ranges : list of (low, high), optional
        Sub-ranges tested separately. Each gets as many conditional bins as
        the global bins it spans, and at least ``MIN_RANGE_BINS``.

    Returns
    -------
    pd.DataFrame
        One row per test with columns ``range``, ``low``, ``high``,
        ``n_samples``, ``n_bins``, ``chi2`` and ``p_value``. The first row is
        the global test.
    """
    samples = np.asarray(samples, dtype=np.float64)
    observed = quantile_bin_counts(samples, dist, n_bins)
    chi2, p_value = _chi_square(observed)
    rows = [
        {
            "range": "global",
            "low": -np.inf,
            "high": np.inf,
            "n_samples": len(samples),
            "n_bins": n_bins,
            "chi2": chi2,
            "p_value": p_value,
        }
    ]
    for low, high in ranges or []:
        mass = dist.cdf(high) - dist.cdf(low)
        range_bins = max(MIN_RANGE_BINS, int(round(n_bins * mass)))
        counts = range_bin_counts(samples, dist, low, high, range_bins)
        if counts.sum() == 0:
            logger.warning("No samples in range [%s, %s); skipping", low, high)
            chi2, p_value = np.nan, np.nan
        else:
            chi2, p_value = _chi_square(counts)
        rows.append(
            {
                "range": f"[{low}, {high})",
                "low": low,
                "high": high,
                "n_samples": int(counts.sum()),
                "n_bins": range_bins,
                "chi2": chi2,
                "p_value": p_value,
            }
        )
    return pd.DataFrame(rows)


def summarize_samples(samples) -> pd.Series:
    """Moments and extremes of a sample."""
    samples = np.asarray(samples, dtype=np.float64)
    return pd.Series(
        {
            "n": len(samples),
            "mean": np.mean(samples),
            "variance": np.var(samples, ddof=1),
            "skewness": stats.skew(samples),
            "excess_kurtosis": stats.kurtosis(samples),
            "min": np.min(samples),
            "max": np.max(samples),
        }
    )
