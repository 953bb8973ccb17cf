# src/Burstipy/core/analysis/firing_frequency.py
# -*- coding: utf-8 -*-
"""
Mean spiking frequency of a tonically firing trace.

The frequency is the reciprocal of the mean inter-spike interval. Traces
with fewer than three detected spikes (two ISIs) are reported as not
applicable rather than as a zero rate.
"""
import logging
from typing import Any, Dict, Optional, Sequence

import numpy as np

from Burstipy.core.analysis.registry import AnalysisRegistry
from Burstipy.core.analysis.spike_analysis import calculate_isi, detect_spikes_hysteresis
from Burstipy.core.config import DetectionConfig, resolve_config
from Burstipy.core.results import FrequencyResult, MaybeFloat, as_float
from Burstipy.shared.constants import MS_PER_S

log = logging.getLogger(__name__)

MIN_SPIKES = 2
MIN_ISIS = 2


def _not_applicable(reason: str, spike_count: int) -> FrequencyResult:
    log.debug(f"Spiking frequency not applicable: {reason}")
    return FrequencyResult(
        value=None,
        unit="Hz",
        is_valid=False,
        error_message=reason,
        spike_count=spike_count,
    )


def calculate_spiking_frequency(spike_times_ms) -> FrequencyResult:
    """
    Core logic: spiking frequency from detected spike times.

    Args:
        spike_times_ms: 1D array of spike times in milliseconds.

    Returns:
        FrequencyResult; invalid (not applicable) for silent or too short trains.
    """
    spike_times_ms = np.asarray(spike_times_ms, dtype=float)
    spike_count = int(spike_times_ms.size)

    if spike_count < MIN_SPIKES:
        return _not_applicable(f"Silent trace: {spike_count} spike(s) detected.", spike_count)

    isis = calculate_isi(spike_times_ms)
    if isis.size < MIN_ISIS:
        return _not_applicable(f"Only {isis.size} inter-spike interval(s).", spike_count)

    mean_isi_ms = float(np.mean(isis))
    if not np.isfinite(mean_isi_ms) or mean_isi_ms <= 0:
        return _not_applicable(f"Non-positive mean ISI ({mean_isi_ms} ms).", spike_count)

    frequency_hz = 1.0 / (mean_isi_ms / MS_PER_S)

    return FrequencyResult(
        value=frequency_hz,
        unit="Hz",
        spike_count=spike_count,
        mean_isi_ms=mean_isi_ms,
        isis=isis,
    )


def analyze_frequency(
    voltage: Sequence[float],
    time: Sequence[float],
    config: Optional[DetectionConfig] = None,
) -> FrequencyResult:
    """Detect spikes in a trace and compute its spiking frequency."""
    config = resolve_config(config)
    spikes = detect_spikes_hysteresis(voltage, time, config)
    result = calculate_spiking_frequency(spikes.spike_times)
    result.parameters = config.to_dict()
    return result


def extract_frequency(
    voltage: Sequence[float],
    time: Sequence[float],
    config: Optional[DetectionConfig] = None,
) -> MaybeFloat:
    """
    Mean spiking frequency of a voltage trace.

    Args:
        voltage: Membrane potential samples (mV).
        time: Timestamps (ms), same length as `voltage`.
        config: Optional detection thresholds.

    Returns:
        A positive finite frequency in Hz, or NOT_APPLICABLE.

    Raises:
        InvalidInputError: If the traces are empty or differ in length.
    """
    return analyze_frequency(voltage, time, config).as_value()


# --- WRAPPER (Registry Format) ---

@AnalysisRegistry.register(
    "firing_frequency",
    label="Spiking Frequency",
    description="Mean spiking frequency (Hz) from the reciprocal mean ISI.",
    outputs=["frequency_hz", "mean_isi_ms", "spike_count"],
)
def run_frequency_wrapper(voltage: np.ndarray, time: np.ndarray, **kwargs) -> Dict[str, Any]:
    """
    Wrapper for spiking frequency extraction.

    Args:
        voltage: Voltage trace (mV).
        time: Time vector (ms).
        **kwargs: DetectionConfig fields overriding the defaults.

    Returns:
        Flat dict of results; NaN marks a not applicable statistic.
    """
    config = resolve_config(None, **kwargs)
    result = analyze_frequency(voltage, time, config)
    return {
        "frequency_hz": as_float(result.as_value()),
        "mean_isi_ms": result.mean_isi_ms if result.mean_isi_ms is not None else np.nan,
        "spike_count": result.spike_count,
        "not_applicable_reason": result.error_message,
    }
