# src/Burstipy/core/analysis/registry.py
# -*- coding: utf-8 -*-
"""
Analysis Registry for dynamic function registration and lookup.

Analysis wrappers register themselves via decorators so the batch engine can
look them up by name from a pipeline configuration.
"""
import logging
from typing import Dict, Callable, Any, Optional

log = logging.getLogger(__name__)


class AnalysisRegistry:
    """
    Registry for analysis functions.

    Functions are registered using the @AnalysisRegistry.register decorator,
    and then retrieved by name for use in batch processing pipelines.
    """

    _registry: Dict[str, Callable] = {}
    _metadata: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(cls, name: str, **metadata) -> Callable:
        """
        Decorator to register an analysis function.

        Args:
            name: Unique identifier for the analysis function (e.g., "burstiness")
            **metadata: Free-form description of the analysis (label, params, ...)

        Example:
            @AnalysisRegistry.register("firing_frequency", label="Spiking frequency")
            def run_frequency_wrapper(voltage, time, **kwargs):
                ...
                return results_dict
        """
        def decorator(func: Callable) -> Callable:
            if name in cls._registry:
                log.warning(f"Analysis function '{name}' is already registered. Overwriting.")
            cls._registry[name] = func
            cls._metadata[name] = dict(metadata)
            log.debug(f"Registered analysis function: {name}")
            return func
        return decorator

    @classmethod
    def get_function(cls, name: str) -> Optional[Callable]:
        """
        Retrieve a registered analysis function by name, or None if not found.
        """
        func = cls._registry.get(name)
        if func is None:
            log.warning(f"Analysis function '{name}' not found in registry. Available: {list(cls._registry.keys())}")
        return func

    @classmethod
    def get_metadata(cls, name: str) -> Dict[str, Any]:
        """Metadata stored at registration time; empty dict if unknown."""
        return dict(cls._metadata.get(name, {}))

    @classmethod
    def list_registered(cls) -> list:
        return list(cls._registry.keys())

    @classmethod
    def clear(cls):
        """
        Clear all registered functions (mainly for testing).
        """
        cls._registry.clear()
        cls._metadata.clear()
        log.debug("Analysis registry cleared")
