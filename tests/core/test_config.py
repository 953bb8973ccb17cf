# -*- coding: utf-8 -*-
"""Tests for DetectionConfig."""
import dataclasses

import pytest

from Burstipy.core.config import DEFAULT_CONFIG, DetectionConfig, resolve_config
from Burstipy.shared.error_handling import ConfigurationError


class TestDetectionConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.spike_up_threshold_mv == 10.0
        assert DEFAULT_CONFIG.spike_down_threshold_mv == 0.0
        assert DEFAULT_CONFIG.min_isi_range_ms == 10.0
        assert DEFAULT_CONFIG.min_spikes_per_burst == 1.5
        assert DEFAULT_CONFIG.max_spikes_per_burst == 500.0
        assert DEFAULT_CONFIG.min_burst_count == 3

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.min_isi_range_ms = 5.0

    @pytest.mark.parametrize("kwargs", [
        {"spike_up_threshold_mv": 0.0},
        {"spike_up_threshold_mv": -5.0},
        {"min_isi_range_ms": -1.0},
        {"min_spikes_per_burst": 10.0, "max_spikes_per_burst": 5.0},
        {"min_spikes_per_burst": -1.0},
        {"min_burst_count": 1},
        {"min_burst_count": 2.5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            DetectionConfig(**kwargs)

    def test_round_trip_dict(self):
        config = DetectionConfig(min_isi_range_ms=20.0)
        assert DetectionConfig.from_dict(config.to_dict()) == config

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigurationError, match="threshold"):
            DetectionConfig.from_dict({"threshold": 5.0})

    def test_from_dict_none(self):
        assert DetectionConfig.from_dict(None) == DEFAULT_CONFIG


class TestResolveConfig:

    def test_default(self):
        assert resolve_config() is DEFAULT_CONFIG

    def test_passthrough(self):
        config = DetectionConfig(max_spikes_per_burst=50.0)
        assert resolve_config(config) is config

    def test_overrides_on_top_of_base(self):
        base = DetectionConfig(max_spikes_per_burst=50.0)
        merged = resolve_config(base, min_isi_range_ms=2.0)
        assert merged.max_spikes_per_burst == 50.0
        assert merged.min_isi_range_ms == 2.0
        assert base.min_isi_range_ms == 10.0

    def test_bad_override(self):
        with pytest.raises(ConfigurationError):
            resolve_config(refractory_ms=2.0)
