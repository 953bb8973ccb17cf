# -*- coding: utf-8 -*-
"""
Burstipy: firing-pattern statistics and diagnostic plots for simulated neurons.

This package extracts spiking and bursting descriptors from membrane voltage
traces produced by conductance-based neuron models, and renders the
diagnostic figures used to inspect the conductance parameter space.
"""

# PEP 396 style version marker
__version__ = "0.1.0"
__license__ = "AGPL-3.0-or-later"

from Burstipy.core.results import NOT_APPLICABLE, NotApplicable  # noqa: E402
from Burstipy.core.analysis.firing_frequency import extract_frequency  # noqa: E402
from Burstipy.core.analysis.burst_analysis import extract_burstiness  # noqa: E402

__all__ = [
    "__version__",
    "__license__",
    "NOT_APPLICABLE",
    "NotApplicable",
    "extract_frequency",
    "extract_burstiness",
]
