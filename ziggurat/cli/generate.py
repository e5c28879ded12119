import logging
import math
from pathlib import Path
from pprint import pformat

import numpy as np
import tqdm
import typer

from ziggurat.config import load_sampler_config, sampler_from_config
from ziggurat.core.batch import sample_chunks
from ziggurat.validation import (
    chi_square_quantile_test,
    default_ranges,
    summarize_samples,
    theoretical_distribution,
)

app = typer.Typer(add_completion=False)


def collect_cli_overrides(
    distribution: str | None = None,
    n_samples: int | None = None,
    seed: int | None = None,
    mean: float | None = None,
) -> dict:
    """Turn the command line options that were given into config overrides."""
    overrides = {}
    if distribution is not None:
        overrides["distribution"] = distribution
    if n_samples is not None:
        overrides["n_samples"] = n_samples
    if mean is not None:
        overrides["mean"] = mean
    if seed is not None:
        overrides["source"] = {"seed": seed}
    return overrides


def draw_samples(config: dict, show_progress: bool = True) -> np.ndarray:
    """Draw ``config["n_samples"]`` deviates with the configured sampler."""
    sampler = sampler_from_config(config)
    n_samples = config["n_samples"]
    chunk_size = config["chunk_size"]
    chunks = list(
        tqdm.tqdm(
            sample_chunks(sampler, n_samples, chunk_size),
            total=math.ceil(n_samples / chunk_size),
            desc=f"Sampling {config['distribution']}",
            unit="chunk",
            disable=not show_progress,
        )
    )
    if not chunks:
        return np.empty(0, dtype=np.float64)
    return np.concatenate(chunks)


log_level_option = typer.Option(
    "WARNING",
    "--log-level",
    "-l",
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    case_sensitive=False,
    show_default=True,
    rich_help_panel="Logging",
    metavar="LEVEL",
    autocompletion=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
)
config_path_option = typer.Option(None, help="Path to the YAML configuration file.")
distribution_option = typer.Option(
    None, "--distribution", "-d", help="Sampler name (gaussian, exponential)."
)
n_samples_option = typer.Option(
    None, "--n-samples", "-n", min=0, help="Number of deviates to draw."
)
seed_option = typer.Option(None, "--seed", help="Seed of the uniform source.")
mean_option = typer.Option(None, "--mean", help="Mean of the exponential sampler.")

epilog = "Example: `ziggurat-generate generate --distribution exponential -n 100000 --output exp.npy`"


def _setup_logging(log_level: str) -> logging.Logger:
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s"
    )
    return logging.getLogger(__name__)


@app.command(epilog=epilog)
def generate(
    output: Path = typer.Option(..., help="Path to the output .npy file."),
    config_path: Path = config_path_option,
    distribution: str = distribution_option,
    n_samples: int = n_samples_option,
    seed: int = seed_option,
    mean: float = mean_option,
    log_level: str = log_level_option,
):
    """
    Draw deviates and save them as a NumPy array.
    """
    logger = _setup_logging(log_level)
    if config_path is None:
        logger.warning("No config path provided, using default configuration.")
    config = load_sampler_config(
        config_path,
        overrides=collect_cli_overrides(distribution, n_samples, seed, mean),
    )
    logger.debug("SAMPLER CONFIG")
    logger.debug(pformat(config))

    samples = draw_samples(config)

    output.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Saving %d samples to: %s", len(samples), output)
    np.save(output, samples)
    if len(samples) > 1:
        logger.info("Summary:\n%s", summarize_samples(samples).to_string())
    logger.info("Sample generation finished")


@app.command()
def validate(
    config_path: Path = config_path_option,
    distribution: str = distribution_option,
    n_samples: int = n_samples_option,
    seed: int = seed_option,
    mean: float = mean_option,
    log_level: str = log_level_option,
):
    """
    Draw deviates and run chi-square goodness-of-fit tests on them.

    Exits with status 1 when any test falls below the configured significance.
    """
    logger = _setup_logging(log_level)
    config = load_sampler_config(
        config_path,
        overrides=collect_cli_overrides(distribution, n_samples, seed, mean),
    )
    if config["n_samples"] == 0:
        raise typer.BadParameter(
            "validation needs at least one sample", param_hint="--n-samples"
        )
    samples = draw_samples(config)
    dist = theoretical_distribution(config["distribution"], mean=config["mean"])
    results = chi_square_quantile_test(
        samples,
        dist,
        n_bins=config["validation"]["n_bins"],
        ranges=default_ranges(config["distribution"]),
    )
    typer.echo(results.to_string(index=False))

    significance = config["validation"]["significance"]
    # An untestable range (NaN p-value) counts as a rejection.
    failed = results[~(results["p_value"] >= significance)]
    if len(failed):
        logger.error("%d of %d tests rejected at %s", len(failed), len(results), significance)
        raise typer.Exit(code=1)
    logger.info("All %d tests passed at %s", len(results), significance)


if __name__ == "__main__":
    app()
