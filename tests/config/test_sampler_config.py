import io

import pytest
import yaml

from ziggurat.config import (
    get_default_sampler_config,
    load_sampler_config,
    merge_config,
    sampler_from_config,
    validate_sampler_config,
)
from ziggurat.core import Exponential, NormalizedGaussian
from ziggurat.sources import SplitMix64


@pytest.fixture
def yaml_buffer():
    def _make(config: dict):
        buffer = io.StringIO()
        yaml.dump(config, buffer)
        buffer.seek(0)
        return buffer

    return _make


def test_defaults_are_fresh_copies():
    config = get_default_sampler_config()
    config["source"]["seed"] = 99
    assert get_default_sampler_config()["source"]["seed"] == 0


def test_defaults_validate():
    config = get_default_sampler_config()
    assert validate_sampler_config(config) is config
    assert config["distribution"] == "gaussian"
    assert config["validation"]["n_bins"] == 2000


def test_merge_is_recursive_and_non_destructive():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    merged = merge_config(base, {"nested": {"y": 3}})
    assert merged == {"a": 1, "nested": {"x": 1, "y": 3}}
    assert base["nested"]["y"] == 2


def test_load_from_yaml_buffer_with_upper_case_keys(yaml_buffer):
    config = load_sampler_config(
        yaml_buffer({"DISTRIBUTION": "exponential", "MEAN": 2.0, "SOURCE": {"SEED": 7}})
    )
    assert config["distribution"] == "exponential"
    assert config["mean"] == 2.0
    assert config["source"] == {"kind": "splitmix64", "seed": 7}


def test_load_from_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"n_samples": 10, "chunk_size": 3}))
    config = load_sampler_config(path)
    assert config["n_samples"] == 10
    assert config["chunk_size"] == 3


def test_overrides_win_over_yaml(yaml_buffer):
    config = load_sampler_config(
        yaml_buffer({"source": {"kind": "numpy", "seed": 1}}),
        overrides={"source": {"seed": 5}},
    )
    assert config["source"] == {"kind": "numpy", "seed": 5}


def test_empty_yaml_gives_defaults(yaml_buffer):
    assert load_sampler_config(io.StringIO("")) == get_default_sampler_config()


@pytest.mark.parametrize(
    "bad, match",
    [
        ({"bogus": 1}, "Unknown configuration keys"),
        ({"distribution": "cauchy"}, "No sampler registered"),
        ({"n_samples": -1}, "n_samples"),
        ({"chunk_size": 0}, "chunk_size"),
    ],
)
def test_invalid_configs_raise(bad, match):
    with pytest.raises(ValueError, match=match):
        load_sampler_config(overrides=bad)


def test_sampler_from_config_exponential():
    config = load_sampler_config(
        overrides={"distribution": "exponential", "mean": 4.0, "source": {"seed": 3}}
    )
    sampler = sampler_from_config(config)
    assert isinstance(sampler, Exponential)
    assert sampler.mean == 4.0
    reference = Exponential(SplitMix64(3), mean=4.0)
    assert sampler.sample() == reference.sample()


def test_sampler_from_config_gaussian_ignores_mean():
    sampler = sampler_from_config(get_default_sampler_config())
    assert isinstance(sampler, NormalizedGaussian)
    assert sampler.sample() == NormalizedGaussian(SplitMix64(0)).sample()


def test_null_mean_in_yaml_uses_unit_exponential(yaml_buffer):
    config = load_sampler_config(
        yaml_buffer({"distribution": "exponential", "mean": None})
    )
    assert config["mean"] is None
    sampler = sampler_from_config(config)
    assert sampler.mean == 1.0
