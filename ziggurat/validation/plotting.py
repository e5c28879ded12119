"""Histogram against the theoretical density, for eyeballing a sampler."""

import matplotlib.pyplot as plt
import numpy as np


def plot_fit(samples, dist, ax=None, bins: int = 200, log_scale: bool = False):
    """Plot a density histogram of ``samples`` with the pdf of ``dist`` on top.

    Returns the matplotlib axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))
    samples = np.asarray(samples)
    ax.hist(samples, bins=bins, density=True, histtype="step", label="samples")
    grid = np.linspace(samples.min(), samples.max(), 1000)
    ax.plot(grid, dist.pdf(grid), color="black", lw=1, label="pdf")
    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("x")
    ax.set_ylabel("density")
    ax.legend()
    return ax
