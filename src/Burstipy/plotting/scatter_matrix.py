# src/Burstipy/plotting/scatter_matrix.py
# -*- coding: utf-8 -*-
"""
Pairwise scatter matrix of conductance sets with principal directions.

Every pair of channels gets one panel in the lower triangle of a grid. The
two dominant principal directions are overlaid as line segments through the
population mean: the first solid, the second dashed.
"""
import logging
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from Burstipy.core.analysis.directions import DirectionSet
from Burstipy.shared.constants import (
    CHANNEL_NAMES,
    CHANNEL_LABELS,
    SCATTER_POINT_COLOR,
    SCATTER_MARKER_SIZE,
    DIRECTION_LINE_WIDTH,
)
from Burstipy.shared.error_handling import PlottingError

log = logging.getLogger(__name__)


def _direction_segment(mean_vec, vector, value, scale, i, j):
    """Endpoints of a direction segment projected on channels (i, j)."""
    half = scale * value * np.asarray(vector)
    xs = [mean_vec[i] - half[i], mean_vec[i] + half[i]]
    ys = [mean_vec[j] - half[j], mean_vec[j] + half[j]]
    return xs, ys


def plot_scatter_matrix(
    parameters,
    directions: DirectionSet,
    maxima: Sequence[float],
    scale_first: float,
    scale_second: float,
    color=SCATTER_POINT_COLOR,
    marker: str = "o",
    color_values=None,
    cmap: str = "inferno",
    mean_vec=None,
    channel_names: Optional[Sequence[str]] = None,
    figsize=(7.5, 7.5),
) -> Figure:
    """
    Plot all channel pairs of a conductance population.

    Args:
        parameters: Array-like (n_samples, n_channels) of conductances.
        directions: Principal directions of `parameters` (ascending eigenvalues).
        maxima: Upper axis limit per channel; every axis starts at 0.
        scale_first: Segment scale for the dominant direction.
        scale_second: Segment scale for the second direction.
        color: Point colour when `color_values` is not given.
        marker: Matplotlib marker style.
        color_values: Optional per-sample values mapped through `cmap`
            (e.g. the burstiness of each model).
        cmap: Colormap name used with `color_values`.
        mean_vec: Centre of the direction segments. Defaults to the column means.
        channel_names: Channel names in column order. Defaults to the six model channels.
        figsize: Figure size in inches.

    Returns:
        The matplotlib Figure (not shown).

    Raises:
        PlottingError: On inconsistent input shapes.
    """
    g_all = np.asarray(parameters, dtype=float)
    if g_all.ndim != 2 or g_all.shape[1] < 2:
        raise PlottingError(f"Parameter matrix must be (n_samples, n_channels>=2), got {g_all.shape}")
    n_channels = g_all.shape[1]
    if directions.n_channels != n_channels:
        raise PlottingError(
            f"Directions have {directions.n_channels} channels, parameters have {n_channels}"
        )
    maxima = np.asarray(maxima, dtype=float)
    if maxima.shape != (n_channels,):
        raise PlottingError(f"Expected {n_channels} axis maxima, got {maxima.shape}")
    if channel_names is None:
        channel_names = CHANNEL_NAMES[:n_channels]
    if len(channel_names) != n_channels:
        raise PlottingError(f"Expected {n_channels} channel names, got {len(channel_names)}")
    mean_vec = g_all.mean(axis=0) if mean_vec is None else np.asarray(mean_vec, dtype=float)
    if mean_vec.shape != (n_channels,):
        raise PlottingError(f"Expected a mean vector of length {n_channels}, got {mean_vec.shape}")
    if color_values is not None:
        color_values = np.asarray(color_values, dtype=float)
        if color_values.shape != (g_all.shape[0],):
            raise PlottingError(
                f"Expected {g_all.shape[0]} color values, got {color_values.shape}"
            )

    first = directions.rank(1)
    second = directions.rank(2)
    labels = [CHANNEL_LABELS.get(name, name) for name in channel_names]

    n_grid = n_channels - 1
    fig, axes = plt.subplots(n_grid, n_grid, figsize=figsize, squeeze=False)
    mappable = None

    for row in range(n_grid):
        j = row + 1  # y channel
        for i in range(n_grid):  # x channel
            ax = axes[row, i]
            if i > row:
                ax.set_visible(False)
                continue

            if color_values is None:
                ax.scatter(g_all[:, i], g_all[:, j], s=SCATTER_MARKER_SIZE, marker=marker,
                           color=color, edgecolors="k", linewidths=0.1)
            else:
                mappable = ax.scatter(g_all[:, i], g_all[:, j], s=SCATTER_MARKER_SIZE, marker=marker,
                                      c=color_values, cmap=cmap, edgecolors="k", linewidths=0.1)

            for (value, vector), scale, style in ((first, scale_first, "-"), (second, scale_second, "--")):
                xs, ys = _direction_segment(mean_vec, vector, value, scale, i, j)
                ax.plot(xs, ys, color="black", linewidth=DIRECTION_LINE_WIDTH, linestyle=style)

            ax.set_xlim(0, maxima[i])
            ax.set_ylim(0, maxima[j])
            ax.set_xticks([])
            ax.set_yticks([])
            if i == 0:
                ax.set_ylabel(labels[j], fontsize=18)
            if row == n_grid - 1:
                ax.set_xlabel(labels[i], fontsize=18)

    if mappable is not None:
        if n_grid > 1:
            # The top-right cell is outside the lower triangle, reuse it for the colour scale
            cax = axes[0, -1]
            cax.set_visible(True)
            fig.colorbar(mappable, cax=cax)
        else:
            fig.colorbar(mappable, ax=axes[0, 0])

    fig.tight_layout()
    log.debug(f"Scatter matrix of {g_all.shape[0]} samples over {n_channels} channels.")
    return fig
