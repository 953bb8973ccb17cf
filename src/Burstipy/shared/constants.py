# -*- coding: utf-8 -*-
"""Shared constants for Burstipy."""

# Spike detection (Schmitt trigger band, mV)
SPIKE_UP_THRESHOLD_MV = 10.0
SPIKE_DOWN_THRESHOLD_MV = 0.0

# Burst classification
MIN_ISI_RANGE_MS = 10.0         # ISI range below this is tonic spiking
MIN_SPIKES_PER_BURST = 1.5      # Plausibility bounds on rounded spikes/burst
MAX_SPIKES_PER_BURST = 500.0
MIN_BURST_COUNT = 3             # Bursts needed for a spikes/burst estimate

MS_PER_S = 1000.0

# Conductance-based model channels, in parameter-matrix column order
CHANNEL_NAMES = ("gNa", "gKd", "gCaL", "gCaN", "gERG", "gleak")
CHANNEL_LABELS = {
    "gNa": r"$\bar{g}_{Na}$",
    "gKd": r"$\bar{g}_{Kd}$",
    "gCaL": r"$\bar{g}_{CaL}$",
    "gCaN": r"$\bar{g}_{CaN}$",
    "gERG": r"$\bar{g}_{ERG}$",
    "gleak": r"$g_{leak}$",
}

# Plotting Constants
DIRECTION_COLORS = ("#1874cd", "#ededed", "#cd3700")   # dodgerblue3, gray93, orangered3
DIRECTION_CLIM = (-1.0, 1.0)
SCATTER_POINT_COLOR = "#377eb8"
SCATTER_MARKER_SIZE = 12
DIRECTION_LINE_WIDTH = 2
SUPPORTED_EXPORT_FORMATS = ("png", "svg", "pdf", "jpg")

__all__ = [
    'SPIKE_UP_THRESHOLD_MV',
    'SPIKE_DOWN_THRESHOLD_MV',
    'MIN_ISI_RANGE_MS',
    'MIN_SPIKES_PER_BURST',
    'MAX_SPIKES_PER_BURST',
    'MIN_BURST_COUNT',
    'MS_PER_S',
    'CHANNEL_NAMES',
    'CHANNEL_LABELS',
    'DIRECTION_COLORS',
    'DIRECTION_CLIM',
    'SCATTER_POINT_COLOR',
    'SCATTER_MARKER_SIZE',
    'DIRECTION_LINE_WIDTH',
    'SUPPORTED_EXPORT_FORMATS',
]
