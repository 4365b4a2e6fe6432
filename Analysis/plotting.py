"""
Functions for plotting finished rocket configurations.
"""
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from Hardware.rocket import RocketConfiguration, format_weight


def plot_total_weights(
    configs: Sequence[RocketConfiguration],
    filename: Optional[str] = None,
    show: bool = False,
):
    """Bar chart of total weight per configuration. Returns the figure."""
    names = [config.name or "(unnamed)" for config in configs]
    weights = np.array([config.total_weight for config in configs], dtype=float)
    x = np.arange(len(names))

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar(x, weights, color="tab:blue", alpha=0.8)

    # Weight labels on top of each bar
    for bar, w in zip(bars, weights):
        ax.annotate(
            f"{format_weight(w)} t",
            xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
            xytext=(0, 3),
            textcoords="offset points",
            ha="center",
            va="bottom",
        )
    ax.set_xticks(x)
    ax.set_xticklabels(
        [f"{name}\n{config.stage_count()} stage(s)" for name, config in zip(names, configs)]
    )
    ax.set_ylabel("Total weight [t]")
    ax.set_title("Rocket configurations")
    if weights.size:
        ax.set_ylim(0, 1.15 * max(weights.max(), 1.0))
    fig.tight_layout()

    if filename:
        fig.savefig(filename)
        print(f"Saved weights chart to {filename}")
    if show:
        plt.show()
    return fig
