import numpy as np
import pytest
import yaml
from typer.testing import CliRunner

from ziggurat.cli.generate import app, collect_cli_overrides, draw_samples
from ziggurat.config import load_sampler_config
from ziggurat.core import Exponential, sample_array
from ziggurat.sources import SplitMix64

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    def _make(config: dict):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump(config))
        return path

    return _make


def test_collect_cli_overrides_skips_missing_options():
    assert collect_cli_overrides() == {}
    assert collect_cli_overrides(distribution="exponential", seed=3, mean=2.0) == {
        "distribution": "exponential",
        "mean": 2.0,
        "source": {"seed": 3},
    }


def test_draw_samples_matches_sampler():
    config = load_sampler_config(
        overrides={
            "distribution": "exponential",
            "n_samples": 25,
            "chunk_size": 7,
            "source": {"seed": 4},
        }
    )
    samples = draw_samples(config, show_progress=False)
    np.testing.assert_array_equal(samples, sample_array(Exponential(SplitMix64(4)), 25))


def test_draw_samples_zero():
    config = load_sampler_config(overrides={"n_samples": 0})
    assert draw_samples(config, show_progress=False).shape == (0,)


def test_generate_writes_npy(tmp_path):
    output = tmp_path / "out" / "samples.npy"
    result = runner.invoke(
        app,
        [
            "generate",
            "--output",
            str(output),
            "--distribution",
            "exponential",
            "--n-samples",
            "1000",
            "--seed",
            "3",
            "--mean",
            "2.0",
        ],
    )
    assert result.exit_code == 0, result.output
    samples = np.load(output)
    assert samples.shape == (1000,)
    assert np.all(samples >= 0)
    np.testing.assert_array_equal(
        samples, sample_array(Exponential(SplitMix64(3), mean=2.0), 1000)
    )


def test_generate_from_config_file(tmp_path, config_file):
    path = config_file({"distribution": "gaussian", "n_samples": 300})
    output = tmp_path / "gauss.npy"
    result = runner.invoke(
        app, ["generate", "--config-path", str(path), "--output", str(output)]
    )
    assert result.exit_code == 0, result.output
    assert np.load(output).shape == (300,)


def test_generate_rejects_unknown_distribution(tmp_path):
    result = runner.invoke(
        app,
        ["generate", "--output", str(tmp_path / "x.npy"), "--distribution", "cauchy"],
    )
    assert result.exit_code != 0
    assert isinstance(result.exception, ValueError)


def test_validate_passes_for_gaussian(config_file):
    path = config_file(
        {
            "n_samples": 50_000,
            "source": {"kind": "numpy", "seed": 2024},
            "validation": {"n_bins": 100, "significance": 1e-6},
        }
    )
    result = runner.invoke(app, ["validate", "--config-path", str(path)])
    assert result.exit_code == 0, result.output
    assert "global" in result.output


def test_validate_fails_at_significance_one(config_file):
    path = config_file(
        {"n_samples": 2_000, "validation": {"n_bins": 20, "significance": 1.0}}
    )
    result = runner.invoke(app, ["validate", "--config-path", str(path)])
    assert result.exit_code == 1


def test_validate_rejects_zero_samples():
    result = runner.invoke(app, ["validate", "--n-samples", "0"])
    assert result.exit_code == 2


def test_validate_counts_empty_range_as_failure(config_file, monkeypatch):
    # No standard normal deviate reaches 50.
    monkeypatch.setattr(
        "ziggurat.cli.generate.default_ranges", lambda name: [(50.0, np.inf)]
    )
    path = config_file(
        {"n_samples": 2_000, "validation": {"n_bins": 20, "significance": 1e-12}}
    )
    result = runner.invoke(app, ["validate", "--config-path", str(path)])
    assert result.exit_code == 1
    assert "global" in result.output
