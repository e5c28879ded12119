"""
Statistical validation of the modified ziggurat samplers.

These tests verify that the samplers produce deviates following N(0,1) and
Exp(1):

1. Moment tests (mean, variance, skewness, kurtosis)
2. Kolmogorov-Smirnov test
3. Chi-squared test on equiprobable quantile bins, globally and in
   sub-ranges around the mode, the inflection points and the tails
4. Tail coverage tests (ensure we sample beyond the last layer)

The full size tests (10^7 deviates, 2000 bins) are marked ``statistical``.

Run with:
    pytest tests/test_ziggurat_validation.py -v
    pytest tests/test_ziggurat_validation.py -v --run-statistical
"""

import numpy as np
import pytest
from scipy import stats

from ziggurat.config import get_default_sampler_config
from ziggurat.core import Exponential, NormalizedGaussian, sample_array
from ziggurat.core.tables import exponential as exp_tables
from ziggurat.core.tables import gaussian as gauss_tables
from ziggurat.sources import NumpyUniformSource
from ziggurat.validation import chi_square_quantile_test, default_ranges

pytestmark = [
    pytest.mark.rng_validation,
]

N_SAMPLES = 200_000


@pytest.fixture(scope="module")
def gaussian_sample():
    return sample_array(NormalizedGaussian(NumpyUniformSource(seed=12345)), N_SAMPLES)


@pytest.fixture(scope="module")
def exponential_sample():
    return sample_array(Exponential(NumpyUniformSource(seed=54321)), N_SAMPLES)


class TestGaussianMoments:
    """Test that the Gaussian sampler produces correct moments."""

    def test_mean_close_to_zero(self, gaussian_sample):
        # std error of mean is 1/sqrt(2e5) ~ 0.0022; allow ~5 sigma
        mean = np.mean(gaussian_sample)
        assert abs(mean) < 0.012, f"Mean {mean:.6f} too far from 0"

    def test_variance_close_to_one(self, gaussian_sample):
        # std error of variance is sqrt(2/N) ~ 0.0032
        var = np.var(gaussian_sample, ddof=1)
        assert abs(var - 1.0) < 0.016, f"Variance {var:.6f} too far from 1.0"

    def test_skewness_close_to_zero(self, gaussian_sample):
        # std error of skewness is sqrt(6/N) ~ 0.0055
        skew = stats.skew(gaussian_sample)
        assert abs(skew) < 0.028, f"Skewness {skew:.6f} too far from 0"

    def test_kurtosis_close_to_zero(self, gaussian_sample):
        # std error of kurtosis is sqrt(24/N) ~ 0.011
        kurt = stats.kurtosis(gaussian_sample)
        assert abs(kurt) < 0.055, f"Excess kurtosis {kurt:.6f} too far from 0"


class TestGaussianDistribution:
    def test_ks_test(self, gaussian_sample):
        statistic, pvalue = stats.kstest(gaussian_sample, "norm")
        assert pvalue > 0.001, (
            f"KS test failed: statistic={statistic:.4f}, p-value={pvalue:.6f}"
        )

    def test_chi_squared_quantile_bins(self, gaussian_sample):
        results = chi_square_quantile_test(
            gaussian_sample, stats.norm(), n_bins=200, ranges=default_ranges("gaussian")
        )
        failed = results[results["p_value"] < 1e-4]
        assert failed.empty, f"Chi-squared tests failed:\n{failed.to_string()}"


class TestGaussianTails:
    def test_tail_coverage_3sigma(self, gaussian_sample):
        # P(|X| > 3) ~ 0.0027
        expected_prop = 2 * stats.norm.sf(3)
        observed_prop = np.mean(np.abs(gaussian_sample) > 3)
        rel_error = abs(observed_prop - expected_prop) / expected_prop
        assert rel_error < 0.2, (
            f"Tail (|x|>3) proportion {observed_prop:.5f} vs expected {expected_prop:.5f}"
        )

    def test_values_beyond_last_layer(self, gaussian_sample):
        x_0 = gauss_tables.X_0
        n_beyond = np.sum(np.abs(gaussian_sample) > x_0)
        expected = N_SAMPLES * 2 * stats.norm.sf(x_0)
        assert 0.4 * expected < n_beyond < 1.6 * expected

    def test_inflection_band_mass(self, gaussian_sample):
        expected_prop = stats.norm.cdf(1.1) - stats.norm.cdf(0.9)
        observed_prop = np.mean((gaussian_sample >= 0.9) & (gaussian_sample < 1.1))
        assert abs(observed_prop - expected_prop) / expected_prop < 0.05


class TestExponentialDistribution:
    def test_mean_and_variance(self, exponential_sample):
        assert abs(np.mean(exponential_sample) - 1.0) < 0.012
        # var of sample variance is (mu4 - 1) / N = 8 / N
        assert abs(np.var(exponential_sample, ddof=1) - 1.0) < 0.035

    def test_ks_test(self, exponential_sample):
        statistic, pvalue = stats.kstest(exponential_sample, "expon")
        assert pvalue > 0.001, (
            f"KS test failed: statistic={statistic:.4f}, p-value={pvalue:.6f}"
        )

    def test_chi_squared_quantile_bins(self, exponential_sample):
        results = chi_square_quantile_test(
            exponential_sample,
            stats.expon(),
            n_bins=200,
            ranges=default_ranges("exponential"),
        )
        failed = results[results["p_value"] < 1e-4]
        assert failed.empty, f"Chi-squared tests failed:\n{failed.to_string()}"

    def test_values_beyond_tail_start(self, exponential_sample):
        x_0 = exp_tables.X_0
        n_beyond = np.sum(exponential_sample > x_0)
        expected = N_SAMPLES * np.exp(-x_0)
        assert 0.4 * expected < n_beyond < 1.6 * expected


@pytest.mark.statistical
@pytest.mark.slow
class TestFullSizeQuantileFit:
    """10^7 deviates binned into 2000 equiprobable quantile bins."""

    @pytest.mark.parametrize(
        "name, sampler_class, dist, seed",
        [
            ("gaussian", NormalizedGaussian, stats.norm(), 0xABCDEF),
            ("exponential", Exponential, stats.expon(), 0xFEDCBA),
        ],
    )
    def test_quantile_fit(self, name, sampler_class, dist, seed):
        significance = get_default_sampler_config()["validation"]["significance"]
        samples = sample_array(sampler_class(NumpyUniformSource(seed=seed)), 10_000_000)
        results = chi_square_quantile_test(
            samples, dist, n_bins=2000, ranges=default_ranges(name)
        )
        failed = results[results["p_value"] < significance]
        assert failed.empty, f"Chi-squared tests failed:\n{failed.to_string()}"
