# src/Burstipy/plotting/direction_heatmap.py
# -*- coding: utf-8 -*-
"""
Heatmap of principal directions.

Each direction is drawn as a single column of coloured cells, one per
channel, ordered from the largest eigenvalue to the smallest. A final panel
holds the shared colour scale.
"""
import logging
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure

from Burstipy.core.analysis.directions import DirectionSet
from Burstipy.shared.constants import CHANNEL_NAMES, DIRECTION_COLORS, DIRECTION_CLIM
from Burstipy.shared.error_handling import PlottingError

log = logging.getLogger(__name__)

FLIPPED_DIRECTIONS = (2,)  # Display sign of these ranks is inverted


def direction_colormap() -> LinearSegmentedColormap:
    """Diverging blue / light grey / red colormap for eigenvector components."""
    return LinearSegmentedColormap.from_list("burstipy_directions", list(DIRECTION_COLORS))


def plot_direction_heatmap(
    directions: DirectionSet,
    channel_names: Optional[Sequence[str]] = None,
    n_directions: Optional[int] = None,
    figsize=(12, 5),
) -> Figure:
    """
    Plot the eigenvectors of `directions` as side-by-side heatmap columns.

    Args:
        directions: Eigen decomposition with ascending eigenvalues.
        channel_names: Row labels, bottom to top. Defaults to the six model channels.
        n_directions: Number of directions to draw, largest first. Defaults to all.
        figsize: Figure size in inches.

    Returns:
        The matplotlib Figure (not shown).

    Raises:
        PlottingError: If the channel names do not match the direction size.
    """
    n_channels = directions.n_channels
    if channel_names is None:
        channel_names = CHANNEL_NAMES[:n_channels] if n_channels <= len(CHANNEL_NAMES) else None
    if channel_names is None or len(channel_names) != n_channels:
        raise PlottingError(
            f"Expected {n_channels} channel names, got {None if channel_names is None else len(channel_names)}"
        )
    n_directions = n_channels if n_directions is None else int(n_directions)
    if not 1 <= n_directions <= n_channels:
        raise PlottingError(f"n_directions must be in [1, {n_channels}], got {n_directions}")

    cmap = direction_colormap()
    vmin, vmax = DIRECTION_CLIM

    fig, axes = plt.subplots(1, n_directions + 1, figsize=figsize)
    for rank, (ax, (value, vector)) in enumerate(zip(axes[:-1], directions.ranked(n_directions)), start=1):
        column = -vector if rank in FLIPPED_DIRECTIONS else vector
        ax.imshow(
            np.reshape(column, (n_channels, 1)),
            cmap=cmap, vmin=vmin, vmax=vmax,
            origin="lower", aspect="equal",
        )
        ax.set_xticks([])
        ax.set_xlabel(rf"$\lambda = {abs(value):.2e}$")
        for spine in ax.spines.values():
            spine.set_visible(False)
        if rank == 1:
            ax.set_yticks(range(n_channels))
            ax.set_yticklabels(channel_names)
            ax.tick_params(axis="y", length=0)
        else:
            ax.set_yticks([])

    # Colour scale panel
    levels = np.arange(vmin, vmax + 0.002, 0.002)
    cbar_ax = axes[-1]
    cbar_ax.imshow(
        levels.reshape(-1, 1),
        cmap=cmap, vmin=vmin, vmax=vmax,
        origin="lower", aspect="auto",
        extent=(0, 1, vmin, vmax),
    )
    cbar_ax.set_xticks([])
    cbar_ax.yaxis.tick_right()
    cbar_ax.set_yticks(np.round(np.arange(vmin, vmax + 0.1, 0.2), 1))
    cbar_ax.set_ylim(vmin, vmax)

    fig.tight_layout()
    log.debug(f"Direction heatmap with {n_directions} directions over {n_channels} channels.")
    return fig
