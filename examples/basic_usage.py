#!/usr/bin/env python3
"""
Basic Usage Example for Burstipy

This example demonstrates programmatic usage of Burstipy: extracting the
spiking frequency and burst statistics of voltage traces, tabulating them
for a population of conductance sets, and plotting the principal directions
of that population.

The traces are synthetic pulse trains whose firing pattern is derived from
the conductances by a toy rule; in real use they come from simulating a
conductance-based model with each parameter set.

This file is part of Burstipy, licensed under the GNU Affero General Public License v3.0.
See the LICENSE file in the root of the repository for full license details.
"""

import numpy as np
import pandas as pd
from matplotlib import pyplot as plt

# Import Burstipy components
from Burstipy import extract_burstiness, extract_frequency
from Burstipy.core.analysis.batch_engine import firing_pattern_table
from Burstipy.core.analysis.directions import principal_directions
from Burstipy.plotting import plot_direction_heatmap, plot_scatter_matrix
from Burstipy.shared.constants import CHANNEL_NAMES
from Burstipy.shared.logging_config import setup_logging


def pulse_train(spike_times_ms, duration_ms, dt_ms=0.1):
    """Square 2 ms pulses to +20 mV on a -60 mV baseline."""
    time = np.arange(0.0, duration_ms, dt_ms)
    voltage = np.full_like(time, -60.0)
    for st in spike_times_ms:
        voltage[(time >= st) & (time < st + 2.0)] = 20.0
    return voltage, time


def bursting_spikes(spikes_per_burst, intra_isi_ms, period_ms, duration_ms):
    """Spike times of a regular burster."""
    times = []
    for onset in np.arange(20.0, duration_ms - period_ms, period_ms):
        times.extend(onset + intra_isi_ms * np.arange(spikes_per_burst))
    return times


def create_synthetic_population(n_models=200, duration_ms=3000.0, seed=0):
    """Conductance sets and one voltage trace per set."""
    rng = np.random.default_rng(seed)
    g_na = rng.uniform(20.0, 40.0, n_models)
    g_kd = 0.5 * g_na + rng.normal(0.0, 1.0, n_models)   # co-regulated with gNa
    g_cal = rng.uniform(0.01, 0.1, n_models)
    g_can = rng.uniform(0.01, 0.1, n_models)
    g_erg = rng.uniform(0.01, 0.2, n_models)
    g_leak = rng.uniform(0.005, 0.02, n_models)
    parameters = pd.DataFrame(
        np.column_stack([g_na, g_kd, g_cal, g_can, g_erg, g_leak]),
        columns=list(CHANNEL_NAMES),
        index=[f"model_{i}" for i in range(n_models)],
    )

    traces = {}
    for model_id, g in parameters.iterrows():
        # Toy rule: calcium drive sets burst size, ERG sets the burst period
        calcium = g["gCaL"] + g["gCaN"]
        if calcium < 0.06:
            spikes = np.arange(20.0, duration_ms - 20.0, 1000.0 / (2.0 + 40.0 * g["gERG"]))
        else:
            spikes = bursting_spikes(
                spikes_per_burst=int(2 + 40 * calcium),
                intra_isi_ms=8.0,
                period_ms=300.0 + 2000.0 * g["gERG"],
                duration_ms=duration_ms,
            )
        traces[model_id] = pulse_train(spikes, duration_ms)
    return parameters, traces


def main():
    """Main function demonstrating Burstipy usage"""
    setup_logging()
    print("Burstipy Basic Usage Example")
    print("----------------------------")

    parameters, traces = create_synthetic_population()
    print(f"Created {len(traces)} synthetic traces")

    # Single trace
    voltage, time = traces["model_0"]
    print(f"\nmodel_0 frequency: {extract_frequency(voltage, time)}")
    stats = extract_burstiness(voltage, time)
    print(f"model_0 burstiness: {stats.burstiness}, spikes/burst: {stats.spikes_per_burst}")

    # Whole population
    table = firing_pattern_table(traces, parameters=parameters)
    n_bursting = int(table["burstiness"].notna().sum())
    print(f"\n{n_bursting}/{len(table)} models are bursting")
    print(table[["frequency_hz", "burstiness", "spikes_per_burst"]].describe())

    # Principal directions of the bursting subpopulation
    bursting = table[table["burstiness"].notna()]
    g_bursting = bursting[list(CHANNEL_NAMES)]
    directions = principal_directions(g_bursting)
    for rank, (value, vector) in enumerate(directions.ranked(2), start=1):
        print(f"Direction {rank}: lambda = {value:.3e}, vector = {np.round(vector, 3)}")

    plot_direction_heatmap(directions)
    plot_scatter_matrix(
        g_bursting,
        directions,
        maxima=parameters[list(CHANNEL_NAMES)].max().to_numpy(),
        scale_first=0.2,
        scale_second=0.2,
        color_values=bursting["burstiness"].to_numpy(),
    )

    # Option: save a figure (uncomment to use)
    """
    from Burstipy.shared.plot_exporter import save_figure
    save_figure(plt.gcf(), "scatter_matrix.pdf")
    """

    print("\nExample completed.")
    plt.show()


if __name__ == "__main__":
    main()
