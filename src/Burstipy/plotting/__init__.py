# -*- coding: utf-8 -*-
"""Static diagnostic figures of the conductance parameter space."""

from Burstipy.plotting.direction_heatmap import plot_direction_heatmap, direction_colormap
from Burstipy.plotting.scatter_matrix import plot_scatter_matrix

__all__ = [
    'plot_direction_heatmap',
    'direction_colormap',
    'plot_scatter_matrix',
]
