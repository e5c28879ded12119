import numpy as np
import pytest

from ziggurat.core import (
    Exponential,
    NormalizedGaussian,
    get_sampler_class,
    list_samplers,
    make_sampler,
    register_sampler,
    sample_array,
    sample_chunks,
)
from ziggurat.sources import SplitMix64


class TestRegistry:
    def test_builtin_names(self):
        names = list_samplers()
        assert "exponential" in names
        assert "gaussian" in names
        assert "normalized_gaussian" in names

    def test_lookup_is_case_insensitive(self):
        assert get_sampler_class("Gaussian") is NormalizedGaussian
        assert get_sampler_class("EXPONENTIAL") is Exponential

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="No sampler registered"):
            get_sampler_class("cauchy")

    def test_duplicate_registration_raises(self):
        with pytest.raises(ValueError, match="already registered"):
            register_sampler("gaussian")(NormalizedGaussian)

    def test_make_sampler(self):
        sampler = make_sampler("exponential", SplitMix64(0), mean=2.0)
        assert isinstance(sampler, Exponential)
        assert sampler.mean == 2.0
        assert isinstance(make_sampler("gaussian", SplitMix64(0)), NormalizedGaussian)

    def test_make_sampler_rejects_unknown_params(self):
        with pytest.raises(ValueError, match="Unsupported parameters"):
            make_sampler("gaussian", SplitMix64(0), mean=2.0)
        with pytest.raises(ValueError, match="Unsupported parameters"):
            make_sampler("exponential", SplitMix64(0), scale=2.0)

    def test_make_sampler_propagates_mean_validation(self):
        with pytest.raises(ValueError, match="Mean is not strictly positive"):
            make_sampler("exponential", SplitMix64(0), mean=-1.0)

    def test_make_sampler_none_mean_uses_default(self):
        sampler = make_sampler("exponential", SplitMix64(0), mean=None)
        assert sampler.mean == 1.0
        assert sampler.sample() == Exponential(SplitMix64(0)).sample()


class TestBatch:
    def test_sample_array_matches_scalar_calls(self):
        sampler = NormalizedGaussian(SplitMix64(3))
        scalar = NormalizedGaussian(SplitMix64(3))
        expected = [scalar.sample() for _ in range(500)]
        values = sample_array(sampler, 500)
        assert values.dtype == np.float64
        assert values.shape == (500,)
        np.testing.assert_array_equal(values, expected)

    def test_sample_array_empty(self):
        assert sample_array(Exponential(SplitMix64(0)), 0).shape == (0,)

    def test_sample_array_negative_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            sample_array(Exponential(SplitMix64(0)), -1)

    def test_chunks_cover_all_samples(self):
        chunks = list(sample_chunks(Exponential(SplitMix64(8)), 10, chunk_size=4))
        assert [len(c) for c in chunks] == [4, 4, 2]
        np.testing.assert_array_equal(
            np.concatenate(chunks), sample_array(Exponential(SplitMix64(8)), 10)
        )

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValueError, match="chunk_size"):
            list(sample_chunks(Exponential(SplitMix64(0)), 10, chunk_size=0))
