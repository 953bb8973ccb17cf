# src/Burstipy/core/analysis/__init__.py
"""
Burstipy Analysis Sub-package.

Importing this package registers the firing frequency and burstiness
analyses with the AnalysisRegistry.
"""
from .spike_analysis import detect_spikes_hysteresis, calculate_isi, validate_trace
from .firing_frequency import extract_frequency, calculate_spiking_frequency
from .burst_analysis import extract_burstiness, calculate_burstiness, classify_isis
from .directions import DirectionSet, principal_directions

__all__ = [
    'detect_spikes_hysteresis',
    'calculate_isi',
    'validate_trace',
    'extract_frequency',
    'calculate_spiking_frequency',
    'extract_burstiness',
    'calculate_burstiness',
    'classify_isis',
    'DirectionSet',
    'principal_directions',
]
