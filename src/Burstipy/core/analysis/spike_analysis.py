# src/Burstipy/core/analysis/spike_analysis.py
# -*- coding: utf-8 -*-
"""
Spike detection on simulated membrane voltage traces.

Spikes are detected with a Schmitt trigger: a sample above the upper
threshold marks a spike onset, and no further onset is accepted until the
voltage has dropped below the lower threshold. A single action potential
therefore yields exactly one spike time, however many samples it spends
above the upper threshold.

Times are in milliseconds, voltages in millivolts.
"""
import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from Burstipy.core.config import DetectionConfig, resolve_config
from Burstipy.core.results import SpikeTrainResult
from Burstipy.shared.error_handling import InvalidInputError

log = logging.getLogger(__name__)


def validate_trace(voltage: Sequence[float], time: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert a voltage/time pair to float arrays and check they can be analysed.

    Raises:
        InvalidInputError: If either trace is empty, not 1-D, not numeric,
            or if their lengths differ.
    """
    try:
        v = np.asarray(voltage, dtype=float)
        t = np.asarray(time, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Voltage and time traces must be numeric: {e}") from e

    if v.ndim != 1 or t.ndim != 1:
        raise InvalidInputError(
            f"Voltage and time traces must be one-dimensional, got shapes {v.shape} and {t.shape}"
        )
    if v.size == 0 or t.size == 0:
        raise InvalidInputError("Voltage and time traces must not be empty")
    if v.size != t.size:
        raise InvalidInputError(
            f"Voltage and time traces differ in length ({v.size} != {t.size})"
        )
    return v, t


def detect_spikes_hysteresis(
    voltage: Sequence[float],
    time: Sequence[float],
    config: Optional[DetectionConfig] = None,
) -> SpikeTrainResult:
    """
    Detect spike onsets with an up/down threshold pair.

    Args:
        voltage: Membrane potential samples (mV).
        time: Timestamps (ms), same length as `voltage`.
        config: Detection thresholds; defaults to 10 mV up / 0 mV down.

    Returns:
        SpikeTrainResult with onset times (ms) and sample indices.
    """
    v, t = validate_trace(voltage, time)
    config = resolve_config(config)

    # +1 arms a spike, -1 re-arms the detector, 0 keeps the previous state
    events = np.zeros(v.size, dtype=np.int8)
    events[v > config.spike_up_threshold_mv] = 1
    events[v < config.spike_down_threshold_mv] = -1

    last_event = np.where(events != 0, np.arange(v.size), 0)
    np.maximum.accumulate(last_event, out=last_event)
    in_spike = events[last_event] == 1

    onsets = np.flatnonzero(in_spike & ~np.concatenate(([False], in_spike[:-1])))
    spike_times = t[onsets]
    log.debug(f"Detected {onsets.size} spikes in {v.size} samples.")

    return SpikeTrainResult(
        value=int(onsets.size),
        unit="spikes",
        spike_times=spike_times,
        spike_indices=onsets,
        parameters={
            'spike_up_threshold_mv': config.spike_up_threshold_mv,
            'spike_down_threshold_mv': config.spike_down_threshold_mv,
        },
    )


def calculate_isi(spike_times) -> np.ndarray:
    """Calculates inter-spike intervals from a list of spike times."""
    spike_times = np.asarray(spike_times, dtype=float)
    if spike_times.size < 2:
        return np.array([])
    return np.diff(spike_times)
