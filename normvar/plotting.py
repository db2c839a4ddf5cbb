"""Figures for experiment results and generated samples."""

import matplotlib.pyplot as plt
import numpy as np
from scipy import stats

from normvar.experiments.records import ExperimentResults


def _series_by_size(frame, column):
    for algorithm_id, group in frame.groupby("algorithm_id", sort=True):
        group = group.sort_values("target_size")
        yield algorithm_id, group["target_size"].to_numpy(), group[column].to_numpy()


def plot_produced_lengths(results: ExperimentResults, show=False):
    """Plot mean produced length per requested size for every series."""
    frame = results.to_dataframe()
    fig, ax = plt.subplots(figsize=(8, 5))

    for algorithm_id, sizes, ratio in _series_by_size(
        frame.assign(rate=frame["mean_produced_length"] / frame["target_size"]),
        "rate",
    ):
        ax.plot(sizes, ratio, marker="o", linewidth=2, label=algorithm_id)

    ax.axhline(np.sqrt(2.0 / (np.pi * np.e)), color="grey", linestyle="--")
    ax.axhline(np.pi / 4.0, color="grey", linestyle=":")
    ax.set_xscale("log")
    ax.set_title("Produced length / requested size")
    ax.set_xlabel("Requested size n")
    ax.set_ylabel("Mean produced length / n")
    ax.legend()

    fig.tight_layout()
    if show:
        plt.show()
    return fig


def plot_p_values(results: ExperimentResults, show=False):
    """Plot mean KS and Shapiro-Wilk p-values per requested size."""
    frame = results.to_dataframe()
    fig, axs = plt.subplots(1, 2, figsize=(12, 5), sharey=True)

    for ax, column, title in (
        (axs[0], "mean_ks_p_value", "Kolmogorov-Smirnov"),
        (axs[1], "mean_shapiro_p_value", "Shapiro-Wilk"),
    ):
        usable = frame.dropna(subset=[column])
        for algorithm_id, sizes, p_values in _series_by_size(usable, column):
            ax.plot(sizes, p_values, marker="o", linewidth=2, label=algorithm_id)
        ax.axhline(results.alpha, color="red", linestyle="--")
        ax.set_xscale("log")
        ax.set_title(title)
        ax.set_xlabel("Requested size n")

    axs[0].set_ylabel("Mean p-value")
    axs[0].legend()

    fig.tight_layout()
    if show:
        plt.show()
    return fig


def plot_sample_histograms(samples: dict, bins=50, show=False):
    """Histogram each named sample against the standard normal density."""
    fig, axs = plt.subplots(1, len(samples), figsize=(4 * len(samples), 4), squeeze=False)
    grid = np.linspace(-4, 4, 200)

    for ax, (name, sample) in zip(axs[0], samples.items()):
        ax.hist(np.asarray(sample), bins=bins, density=True, alpha=0.6)
        ax.plot(grid, stats.norm.pdf(grid), linewidth=2)
        ax.set_title(name)

    fig.tight_layout()
    if show:
        plt.show()
    return fig
