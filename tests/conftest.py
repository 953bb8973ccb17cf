# -*- coding: utf-8 -*-
"""
Shared fixtures: synthetic voltage traces with known firing patterns.

Traces are square pulses on a 1 ms grid: each spike holds `peak_mv` for
`width_ms` then returns to `rest_mv`, below the 0 mV re-arm threshold.
"""
import numpy as np
import pytest


def make_pulse_train(spike_times_ms, duration_ms=None, dt_ms=1.0, width_ms=2.0,
                     peak_mv=20.0, rest_mv=-5.0):
    """Build (voltage, time) with one square pulse starting at each spike time."""
    spike_times_ms = np.asarray(spike_times_ms, dtype=float)
    if duration_ms is None:
        duration_ms = (spike_times_ms.max() if spike_times_ms.size else 0.0) + 100.0
    time = np.arange(0.0, duration_ms, dt_ms)
    voltage = np.full_like(time, rest_mv)
    for st in spike_times_ms:
        voltage[(time >= st) & (time < st + width_ms)] = peak_mv
    return voltage, time


def burst_spike_times(spikes_per_burst, n_bursts, intra_isi_ms=10.0, inter_isi_ms=500.0, start_ms=0.0):
    """Spike times of `n_bursts` identical bursts separated by `inter_isi_ms`."""
    times = []
    t = start_ms
    for _ in range(n_bursts):
        for k in range(spikes_per_burst):
            times.append(t)
            if k < spikes_per_burst - 1:
                t += intra_isi_ms
        t += inter_isi_ms
    return np.array(times)


@pytest.fixture
def silent_trace():
    """Subthreshold oscillation that never crosses 10 mV."""
    time = np.arange(0.0, 2000.0, 1.0)
    voltage = -50.0 + 5.0 * np.sin(2 * np.pi * time / 100.0)
    return voltage, time


@pytest.fixture
def periodic_trace():
    """20 mV for 2 samples then -5 mV for 98, repeated 5 times (10 Hz)."""
    voltage = np.tile(np.concatenate([np.full(2, 20.0), np.full(98, -5.0)]), 5)
    time = np.arange(voltage.size, dtype=float)
    return voltage, time


@pytest.fixture
def bursting_trace():
    """3 bursts of 5 spikes, 10 ms intraburst ISI, 500 ms interburst ISI."""
    return make_pulse_train(burst_spike_times(5, 3))


@pytest.fixture
def single_spike_trace():
    return make_pulse_train([50.0], duration_ms=200.0)


@pytest.fixture
def pulse_train():
    """Factory fixture: see make_pulse_train."""
    return make_pulse_train


@pytest.fixture
def burst_times():
    """Factory fixture: see burst_spike_times."""
    return burst_spike_times
