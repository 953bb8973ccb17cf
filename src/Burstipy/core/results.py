from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Union

import numpy as np


class NotApplicable(Enum):
    """
    Marker for a statistic that cannot be computed from a trace.

    Silent, too-regular and implausible traces all map to this single value.
    It is falsy and deliberately not a number, so it cannot leak into
    arithmetic; use `as_float` when a numeric table needs NaN instead.
    """

    NOT_APPLICABLE = "not_applicable"

    def __bool__(self):
        return False

    def __repr__(self):
        return "NotApplicable"

    __str__ = __repr__


NOT_APPLICABLE = NotApplicable.NOT_APPLICABLE

MaybeFloat = Union[float, NotApplicable]


def as_float(value: MaybeFloat) -> float:
    """Map NOT_APPLICABLE to NaN and anything else to float."""
    if value is NOT_APPLICABLE:
        return float("nan")
    return float(value)


class BurstinessStats(NamedTuple):
    """Public burst descriptors, either all floats or all NOT_APPLICABLE."""

    burstiness: MaybeFloat
    spikes_per_burst: MaybeFloat
    intraburst_freq_hz: MaybeFloat
    interburst_freq_hz: MaybeFloat


NOT_APPLICABLE_BURST_STATS = BurstinessStats(*([NOT_APPLICABLE] * 4))


@dataclass
class AnalysisResult:
    """Base class for analysis results."""

    value: Any  # Primary result value (None when not applicable)
    unit: str
    is_valid: bool = True
    error_message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def set_error(self, message: str):
        self.is_valid = False
        self.error_message = message


@dataclass
class SpikeTrainResult(AnalysisResult):
    """
    Result of spike detection.
    Primary 'value' is the spike count.
    """

    spike_times: np.ndarray = field(default_factory=lambda: np.array([]))  # ms
    spike_indices: np.ndarray = field(default_factory=lambda: np.array([], dtype=int))
    parameters: Dict[str, Any] = field(default_factory=dict)

    @property
    def spike_count(self) -> int:
        return int(len(self.spike_times))

    def __repr__(self):
        if self.is_valid:
            return f"SpikeTrainResult(count={self.spike_count})"
        return f"SpikeTrainResult(Error: {self.error_message})"


@dataclass
class FrequencyResult(AnalysisResult):
    """
    Result of spiking frequency extraction.
    Primary 'value' is the mean spiking frequency in Hz.
    """

    spike_count: int = 0
    mean_isi_ms: Optional[float] = None
    isis: Optional[np.ndarray] = None
    parameters: Dict[str, Any] = field(default_factory=dict)

    def as_value(self) -> MaybeFloat:
        """The frequency in Hz, or NOT_APPLICABLE."""
        if not self.is_valid or self.value is None:
            return NOT_APPLICABLE
        return float(self.value)

    def __repr__(self):
        if self.is_valid:
            return f"FrequencyResult(freq={self.value:.2f} Hz, spikes={self.spike_count})"
        return f"FrequencyResult(Not applicable: {self.error_message})"


@dataclass
class BurstResult(AnalysisResult):
    """
    Result of burstiness extraction.
    Primary 'value' is the burstiness index.
    """

    spike_count: int = 0
    spikes_per_burst: Optional[float] = None
    intraburst_freq_hz: Optional[float] = None
    interburst_freq_hz: Optional[float] = None
    interburst_period_s: Optional[float] = None
    mean_intraburst_isi_ms: Optional[float] = None
    isi_threshold_ms: Optional[float] = None
    burst_boundaries: List[int] = field(default_factory=list)  # ISI indices preceding a burst onset
    parameters: Dict[str, Any] = field(default_factory=dict)

    def as_tuple(self) -> BurstinessStats:
        """The four public descriptors, jointly valid or jointly NOT_APPLICABLE."""
        if not self.is_valid:
            return NOT_APPLICABLE_BURST_STATS
        return BurstinessStats(
            burstiness=float(self.value),
            spikes_per_burst=float(self.spikes_per_burst),
            intraburst_freq_hz=float(self.intraburst_freq_hz),
            interburst_freq_hz=float(self.interburst_freq_hz),
        )

    def __repr__(self):
        if self.is_valid:
            return (
                f"BurstResult(burstiness={self.value:.3g}, spikes/burst={self.spikes_per_burst:.0f}, "
                f"intra={self.intraburst_freq_hz:.2f} Hz, inter={self.interburst_freq_hz:.2f} Hz)"
            )
        return f"BurstResult(Not applicable: {self.error_message})"
