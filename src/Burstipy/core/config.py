# src/Burstipy/core/config.py
# -*- coding: utf-8 -*-
"""
Detection configuration.

Bundles the fixed thresholds used by spike detection and burst classification
into one immutable object so callers can override them per analysis run.
"""
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Optional

from Burstipy.shared.constants import (
    SPIKE_UP_THRESHOLD_MV,
    SPIKE_DOWN_THRESHOLD_MV,
    MIN_ISI_RANGE_MS,
    MIN_SPIKES_PER_BURST,
    MAX_SPIKES_PER_BURST,
    MIN_BURST_COUNT,
)
from Burstipy.shared.error_handling import ConfigurationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionConfig:
    """Thresholds for spike detection and burst classification."""

    spike_up_threshold_mv: float = SPIKE_UP_THRESHOLD_MV      # Rising edge arms a spike
    spike_down_threshold_mv: float = SPIKE_DOWN_THRESHOLD_MV  # Falling edge re-arms detector
    min_isi_range_ms: float = MIN_ISI_RANGE_MS                # max(ISI) - min(ISI) gate
    min_spikes_per_burst: float = MIN_SPIKES_PER_BURST
    max_spikes_per_burst: float = MAX_SPIKES_PER_BURST
    min_burst_count: int = MIN_BURST_COUNT

    def __post_init__(self):
        if not self.spike_up_threshold_mv > self.spike_down_threshold_mv:
            raise ConfigurationError(
                f"spike_up_threshold_mv ({self.spike_up_threshold_mv}) must be greater than "
                f"spike_down_threshold_mv ({self.spike_down_threshold_mv})"
            )
        if self.min_isi_range_ms < 0:
            raise ConfigurationError(f"min_isi_range_ms must be non-negative, got {self.min_isi_range_ms}")
        if not 0 <= self.min_spikes_per_burst <= self.max_spikes_per_burst:
            raise ConfigurationError(
                "Spikes-per-burst bounds must satisfy 0 <= min <= max, got "
                f"({self.min_spikes_per_burst}, {self.max_spikes_per_burst})"
            )
        if int(self.min_burst_count) != self.min_burst_count or self.min_burst_count < 2:
            raise ConfigurationError(f"min_burst_count must be an integer >= 2, got {self.min_burst_count}")

    @classmethod
    def from_dict(cls, params: Optional[Mapping[str, Any]] = None) -> "DetectionConfig":
        """
        Build a config from a plain mapping, e.g. the 'params' of a batch task.

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        params = dict(params or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            raise ConfigurationError(f"Unknown detection parameter(s): {unknown}. Known: {sorted(known)}")
        try:
            return cls(**params)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = DetectionConfig()


def resolve_config(config: Optional[DetectionConfig] = None, **overrides) -> DetectionConfig:
    """
    Return `config` (or the defaults) with any keyword overrides applied.
    """
    base = config if config is not None else DEFAULT_CONFIG
    if not overrides:
        return base
    merged = base.to_dict()
    merged.update(overrides)
    log.debug(f"Detection config overrides: {overrides}")
    return DetectionConfig.from_dict(merged)
