# src/Burstipy/core/analysis/burst_analysis.py
# -*- coding: utf-8 -*-
"""
Analysis functions for characterizing bursting firing patterns.

Inter-spike intervals (ISIs) are split at the midpoint between the shortest
and the longest ISI: longer intervals separate two bursts (interburst),
shorter ones lie within a burst (intraburst). From this split we derive

    - interburst frequency (Hz), from the mean interburst ISI
    - intraburst frequency (Hz), from the mean intraburst ISI
    - spikes per burst, from the spacing of burst boundaries
    - burstiness = spikes_per_burst * intraburst_freq / interburst_period

All four are reported as not applicable when the trace is silent, fires too
regularly to be bursting, has too few bursts, or yields an implausible
number of spikes per burst.

This file is part of Burstipy, licensed under the GNU Affero General Public License v3.0.
"""
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from Burstipy.core.analysis.registry import AnalysisRegistry
from Burstipy.core.analysis.spike_analysis import calculate_isi, detect_spikes_hysteresis
from Burstipy.core.config import DetectionConfig, resolve_config
from Burstipy.core.results import BurstResult, BurstinessStats, as_float
from Burstipy.shared.constants import MS_PER_S

log = logging.getLogger(__name__)


def classify_isis(isis) -> Tuple[float, np.ndarray]:
    """
    Split ISIs into interburst and intraburst intervals.

    Args:
        isis: 1D array of inter-spike intervals (ms), at least one element.

    Returns:
        (threshold_ms, interburst_mask). An ISI is interburst when it is
        strictly longer than the midpoint of the shortest and longest ISI.
    """
    isis = np.asarray(isis, dtype=float)
    threshold = (float(np.max(isis)) + float(np.min(isis))) / 2.0
    return threshold, isis > threshold


def _not_applicable(reason: str, spike_count: int, **extra) -> BurstResult:
    log.debug(f"Burst statistics not applicable: {reason}")
    return BurstResult(
        value=None,
        unit="",
        is_valid=False,
        error_message=reason,
        spike_count=spike_count,
        **extra,
    )


def calculate_burstiness(spike_times_ms, config: Optional[DetectionConfig] = None) -> BurstResult:
    """
    Core logic: burst descriptors from detected spike times.

    Args:
        spike_times_ms: 1D array of spike times in milliseconds.
        config: Thresholds for the regularity and plausibility gates.

    Returns:
        BurstResult; either fully populated or invalid (not applicable).
    """
    config = resolve_config(config)
    spike_times_ms = np.asarray(spike_times_ms, dtype=float)
    spike_count = int(spike_times_ms.size)

    if spike_count < 1:
        return _not_applicable("Silent trace: no spikes detected.", spike_count)

    isis = calculate_isi(spike_times_ms)
    if isis.size == 0:
        return _not_applicable("Single spike: no inter-spike intervals.", spike_count)

    isi_range = float(np.max(isis) - np.min(isis))
    if isi_range < config.min_isi_range_ms:
        return _not_applicable(
            f"ISI range {isi_range:.3g} ms below {config.min_isi_range_ms} ms: regular spiking.",
            spike_count,
        )

    threshold, interburst_mask = classify_isis(isis)
    boundaries = np.flatnonzero(interburst_mask)
    if boundaries.size == 0:
        return _not_applicable("No interburst intervals: constant ISIs.", spike_count)

    interburst_period_s = float(np.mean(isis[interburst_mask])) / MS_PER_S
    interburst_freq_hz = 1.0 / interburst_period_s

    # Bursts between two consecutive boundaries; their spacing in spike-index space
    # is the number of spikes in the enclosed burst.
    burst_count = boundaries.size + 1
    if burst_count < config.min_burst_count:
        return _not_applicable(
            f"{burst_count} burst(s) detected, at least {config.min_burst_count} required.",
            spike_count,
            isi_threshold_ms=threshold,
            burst_boundaries=boundaries.tolist(),
        )
    spikes_per_burst = float(np.round(np.mean(np.diff(boundaries))))

    if not config.min_spikes_per_burst <= spikes_per_burst <= config.max_spikes_per_burst:
        return _not_applicable(
            f"Implausible spikes per burst ({spikes_per_burst:.0f}).",
            spike_count,
            isi_threshold_ms=threshold,
            burst_boundaries=boundaries.tolist(),
        )

    mean_intraburst_ms = float(np.mean(isis[~interburst_mask]))
    if not np.isfinite(mean_intraburst_ms) or mean_intraburst_ms <= 0:
        return _not_applicable(f"Non-positive mean intraburst ISI ({mean_intraburst_ms} ms).", spike_count)
    intraburst_freq_hz = 1.0 / (mean_intraburst_ms / MS_PER_S)

    # Divided by the interburst period (s), not by the interburst frequency.
    burstiness = (spikes_per_burst * intraburst_freq_hz) / interburst_period_s

    log.debug(
        f"Bursting: {burst_count} bursts, {spikes_per_burst:.0f} spikes/burst, "
        f"intra={intraburst_freq_hz:.2f} Hz, inter={interburst_freq_hz:.2f} Hz"
    )
    return BurstResult(
        value=burstiness,
        unit="",
        spike_count=spike_count,
        spikes_per_burst=spikes_per_burst,
        intraburst_freq_hz=intraburst_freq_hz,
        interburst_freq_hz=interburst_freq_hz,
        interburst_period_s=interburst_period_s,
        mean_intraburst_isi_ms=mean_intraburst_ms,
        isi_threshold_ms=threshold,
        burst_boundaries=boundaries.tolist(),
    )


def analyze_burstiness(
    voltage: Sequence[float],
    time: Sequence[float],
    config: Optional[DetectionConfig] = None,
) -> BurstResult:
    """Detect spikes in a trace and compute its burst descriptors."""
    config = resolve_config(config)
    spikes = detect_spikes_hysteresis(voltage, time, config)
    result = calculate_burstiness(spikes.spike_times, config)
    result.parameters = config.to_dict()
    return result


def extract_burstiness(
    voltage: Sequence[float],
    time: Sequence[float],
    config: Optional[DetectionConfig] = None,
) -> BurstinessStats:
    """
    Burst descriptors of a voltage trace.

    Args:
        voltage: Membrane potential samples (mV).
        time: Timestamps (ms), same length as `voltage`.
        config: Optional detection thresholds.

    Returns:
        BurstinessStats(burstiness, spikes_per_burst, intraburst_freq_hz,
        interburst_freq_hz), all floats or all NOT_APPLICABLE.

    Raises:
        InvalidInputError: If the traces are empty or differ in length.
    """
    return analyze_burstiness(voltage, time, config).as_tuple()


# --- WRAPPER (Registry Format) ---

@AnalysisRegistry.register(
    "burstiness",
    label="Burstiness",
    description="Burstiness index, spikes per burst, intra- and interburst frequency.",
    outputs=["burstiness", "spikes_per_burst", "intraburst_freq_hz", "interburst_freq_hz", "spike_count"],
)
def run_burstiness_wrapper(voltage: np.ndarray, time: np.ndarray, **kwargs) -> Dict[str, Any]:
    """
    Wrapper for burst analysis.

    Args:
        voltage: Voltage trace (mV).
        time: Time vector (ms).
        **kwargs: DetectionConfig fields overriding the defaults.

    Returns:
        Flat dict of results; NaN marks a not applicable statistic.
    """
    config = resolve_config(None, **kwargs)
    result = analyze_burstiness(voltage, time, config)
    stats = result.as_tuple()
    return {
        "burstiness": as_float(stats.burstiness),
        "spikes_per_burst": as_float(stats.spikes_per_burst),
        "intraburst_freq_hz": as_float(stats.intraburst_freq_hz),
        "interburst_freq_hz": as_float(stats.interburst_freq_hz),
        "spike_count": result.spike_count,
        "not_applicable_reason": result.error_message,
    }
