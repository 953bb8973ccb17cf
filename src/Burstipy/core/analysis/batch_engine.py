"""
Batch Analysis Engine for Burstipy.

Runs registered analyses over many in-memory voltage traces (typically one
simulated trace per conductance set) and aggregates the results into a
pandas DataFrame.

The engine uses a registry-based architecture: analysis functions register
themselves via decorators, and the pipeline configuration names which
analyses to run with which parameters.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from Burstipy.core.analysis.registry import AnalysisRegistry
from Burstipy.core.analysis.firing_frequency import analyze_frequency
from Burstipy.core.analysis.burst_analysis import analyze_burstiness
from Burstipy.core.config import DetectionConfig, resolve_config
from Burstipy.core.results import as_float
from Burstipy.shared.error_handling import AnalysisError, BurstipyError

log = logging.getLogger(__name__)

Trace = Tuple[Sequence[float], Sequence[float]]

DEFAULT_PIPELINE = [
    {'analysis': 'firing_frequency', 'params': {}},
    {'analysis': 'burstiness', 'params': {}},
]

FIRING_PATTERN_COLUMNS = [
    'spike_count',
    'frequency_hz',
    'burstiness',
    'spikes_per_burst',
    'intraburst_freq_hz',
    'interburst_freq_hz',
]


class BatchAnalysisEngine:
    """
    Engine for running analyses across many traces using a flexible pipeline.

    Example Usage:
        engine = BatchAnalysisEngine()
        traces = {"model_0": (v0, t0), "model_1": (v1, t1)}
        pipeline = [
            {'analysis': 'firing_frequency', 'params': {}},
            {'analysis': 'burstiness', 'params': {'min_isi_range_ms': 20.0}},
        ]
        results_df = engine.run_batch(traces, pipeline)
    """

    def __init__(self):
        self._cancelled = False

    def cancel(self):
        """Request cancellation of the current batch run."""
        self._cancelled = True
        log.info("Batch analysis cancellation requested.")

    @staticmethod
    def list_available_analyses() -> List[str]:
        return AnalysisRegistry.list_registered()

    @staticmethod
    def get_analysis_info(name: str) -> Optional[Dict[str, Any]]:
        """
        Get information about a registered analysis function.

        Returns:
            Dictionary with function info and registration metadata, or None if not found.
        """
        func = AnalysisRegistry.get_function(name)
        if func is None:
            return None
        info = {
            'name': name,
            'docstring': func.__doc__ or "No documentation available.",
            'module': func.__module__,
        }
        info.update(AnalysisRegistry.get_metadata(name))
        return info

    def run_batch(self,
                  traces: Mapping[Hashable, Trace],
                  pipeline_config: Optional[List[Dict[str, Any]]] = None,
                  progress_callback: Optional[Callable[[int, int, str], None]] = None) -> pd.DataFrame:
        """
        Run the pipeline on every trace.

        Args:
            traces: Mapping of trace id -> (voltage, time).
            pipeline_config: List of task dictionaries, each defining:
                {
                    'analysis': str,  # Registered analysis name (e.g. 'burstiness')
                    'params': dict    # DetectionConfig overrides
                }
                Defaults to frequency and burstiness with default parameters.
            progress_callback: Optional callback (current, total, status_msg).

        Returns:
            Long-format DataFrame, one row per trace and task. Rows that failed
            carry the message in the 'error' column; the batch itself never aborts.
        """
        self._cancelled = False
        if pipeline_config is None:
            pipeline_config = DEFAULT_PIPELINE
        if not pipeline_config:
            log.warning("Empty pipeline_config provided. No analyses will be run.")
            return pd.DataFrame()

        results_list = []
        total = len(traces)
        batch_start_time = datetime.now()
        processed = 0

        for i, (trace_id, trace) in enumerate(traces.items()):
            if self._cancelled:
                log.info("Batch analysis cancelled by user.")
                break

            if progress_callback:
                progress_callback(i, total, f"Processing {trace_id}...")

            for task in pipeline_config:
                results_list.append(self._process_task(task, trace_id, trace))
            processed = i + 1

        if progress_callback:
            if self._cancelled:
                progress_callback(processed, total, "Batch analysis cancelled.")
            else:
                progress_callback(total, total, "Batch analysis complete.")

        df = pd.DataFrame(results_list)
        if not df.empty:
            if 'error' not in df.columns:
                df['error'] = None
            df['batch_timestamp'] = batch_start_time.isoformat()
        log.info(f"Batch analysis finished: {processed}/{total} traces, {len(df)} rows.")
        return df

    def _process_task(self, task: Dict[str, Any], trace_id: Hashable, trace: Trace) -> Dict[str, Any]:
        """
        Run a single analysis task on one trace.

        Returns:
            Result dictionary with trace id and analysis name added.
        """
        analysis_name = task.get('analysis')
        params = task.get('params', {}) or {}
        row = {'trace_id': trace_id, 'analysis': analysis_name}

        analysis_func = AnalysisRegistry.get_function(analysis_name)
        if analysis_func is None:
            log.error(f"Analysis function '{analysis_name}' not found in registry")
            row['error'] = f"Analysis function '{analysis_name}' not registered"
            return row

        try:
            voltage, time = trace
            result = analysis_func(voltage, time, **params)
            if not isinstance(result, Mapping):
                raise AnalysisError(
                    f"Analysis '{analysis_name}' returned {type(result).__name__}, expected a dict"
                )
            row.update(result)
        except (BurstipyError, TypeError, ValueError) as e:
            log.error(f"Error running {analysis_name} on trace {trace_id}: {e}", exc_info=True)
            row['error'] = str(e)
        return row


def firing_pattern_table(traces: Mapping[Hashable, Trace],
                         config: Optional[DetectionConfig] = None,
                         parameters: Optional[pd.DataFrame] = None) -> pd.DataFrame:
    """
    One row per trace with its spiking and bursting descriptors.

    Args:
        traces: Mapping of trace id -> (voltage, time).
        config: Detection thresholds shared by all traces.
        parameters: Optional DataFrame indexed by trace id (e.g. the
            conductances each trace was simulated with); joined column-wise.

    Returns:
        DataFrame indexed by trace id. NaN marks a not applicable statistic.

    Raises:
        InvalidInputError: If any trace is malformed.
    """
    config = resolve_config(config)
    rows = {}
    for trace_id, (voltage, time) in traces.items():
        frequency = analyze_frequency(voltage, time, config)
        bursts = analyze_burstiness(voltage, time, config)
        stats = bursts.as_tuple()
        rows[trace_id] = {
            'spike_count': frequency.spike_count,
            'frequency_hz': as_float(frequency.as_value()),
            'burstiness': as_float(stats.burstiness),
            'spikes_per_burst': as_float(stats.spikes_per_burst),
            'intraburst_freq_hz': as_float(stats.intraburst_freq_hz),
            'interburst_freq_hz': as_float(stats.interburst_freq_hz),
        }

    table = pd.DataFrame.from_dict(rows, orient='index', columns=FIRING_PATTERN_COLUMNS)
    table.index.name = 'trace_id'
    if not table.empty:
        table['spike_count'] = table['spike_count'].astype(np.int64)

    if parameters is not None:
        table = table.join(parameters, how='left')
    return table
