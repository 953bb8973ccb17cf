# -*- coding: utf-8 -*-
"""Tests for spiking frequency extraction."""
import math

import numpy as np
import pytest

from Burstipy.core.analysis.firing_frequency import (
    analyze_frequency,
    calculate_spiking_frequency,
    extract_frequency,
    run_frequency_wrapper,
)
from Burstipy.core.results import NOT_APPLICABLE
from Burstipy.shared.error_handling import InvalidInputError


class TestExtractFrequency:
    """Public contract: positive finite Hz or NOT_APPLICABLE."""

    def test_periodic_train_is_10_hz(self, periodic_trace):
        freq = extract_frequency(*periodic_trace)
        assert freq is not NOT_APPLICABLE
        assert freq == pytest.approx(10.0, abs=0.5)

    def test_silent_trace(self, silent_trace):
        assert extract_frequency(*silent_trace) is NOT_APPLICABLE

    def test_single_spike(self, single_spike_trace):
        assert extract_frequency(*single_spike_trace) is NOT_APPLICABLE

    def test_two_spikes_is_not_enough(self, pulse_train):
        """Two spikes give a single ISI, which is not a rate estimate."""
        assert extract_frequency(*pulse_train([10.0, 60.0])) is NOT_APPLICABLE

    def test_three_spikes(self, pulse_train):
        freq = extract_frequency(*pulse_train([0.0, 50.0, 100.0]))
        assert freq == pytest.approx(20.0)

    def test_doubling_isis_halves_frequency(self, periodic_trace):
        voltage, time = periodic_trace
        base = extract_frequency(voltage, time)
        slowed = extract_frequency(voltage, time * 2.0)
        assert slowed == pytest.approx(base / 2.0)

    def test_idempotent(self, bursting_trace):
        first = extract_frequency(*bursting_trace)
        second = extract_frequency(*bursting_trace)
        assert first == second

    def test_bursting_trace_mean_rate(self, bursting_trace):
        """Mean over all ISIs: (12 * 10 ms + 2 * 500 ms) / 14."""
        expected = 1000.0 / ((12 * 10.0 + 2 * 500.0) / 14)
        assert extract_frequency(*bursting_trace) == pytest.approx(expected)

    def test_length_mismatch_raises(self, periodic_trace):
        voltage, time = periodic_trace
        with pytest.raises(InvalidInputError):
            extract_frequency(voltage, time[:-1])

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            extract_frequency([], [])


class TestCalculateSpikingFrequency:
    """Core logic on spike times (ms)."""

    def test_known_value(self):
        result = calculate_spiking_frequency([0.0, 20.0, 40.0, 60.0])
        assert result.is_valid
        assert result.unit == "Hz"
        assert result.value == pytest.approx(50.0)
        assert result.mean_isi_ms == pytest.approx(20.0)
        assert result.spike_count == 4

    def test_not_applicable_carries_reason(self):
        result = calculate_spiking_frequency([5.0])
        assert not result.is_valid
        assert result.value is None
        assert "Silent" in result.error_message
        assert result.as_value() is NOT_APPLICABLE

    def test_repeated_timestamps(self):
        """Zero mean ISI cannot give a finite rate."""
        result = calculate_spiking_frequency([3.0, 3.0, 3.0])
        assert result.as_value() is NOT_APPLICABLE

    def test_result_is_positive_and_finite(self):
        rng = np.random.default_rng(0)
        times = np.cumsum(rng.uniform(1.0, 200.0, size=50))
        value = calculate_spiking_frequency(times).as_value()
        assert value > 0 and math.isfinite(value)


def test_analyze_frequency_records_parameters(periodic_trace):
    result = analyze_frequency(*periodic_trace)
    assert result.parameters["spike_up_threshold_mv"] == 10.0
    assert result.parameters["min_burst_count"] == 3


def test_wrapper_maps_not_applicable_to_nan(silent_trace):
    out = run_frequency_wrapper(*silent_trace)
    assert math.isnan(out["frequency_hz"])
    assert out["spike_count"] == 0
    assert out["not_applicable_reason"]


def test_wrapper_accepts_threshold_overrides(periodic_trace):
    out = run_frequency_wrapper(*periodic_trace, spike_up_threshold_mv=25.0)
    assert out["spike_count"] == 0
