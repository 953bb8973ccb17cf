#!/usr/bin/env python
"""
Burstipy Ground-Truth Validation Suite
======================================

Generates synthetic voltage traces with analytically known firing patterns
and verifies that Burstipy's extractors recover the ground-truth values
within specified tolerances.

This script is intended for:
- Continuous integration (``python -m pytest validation/``)
- Regression detection after algorithm changes

Usage
-----
    python validation/validate_algorithms.py            # run all checks
    python validation/validate_algorithms.py --no-save  # do not write report files

Reference values are derived from the synthetic waveform parameters
(not from external software), making the suite self-contained.

"""
import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

# ---------------------------------------------------------------------------
# Burstipy imports
# ---------------------------------------------------------------------------
from Burstipy.core.analysis.burst_analysis import extract_burstiness
from Burstipy.core.analysis.directions import principal_directions
from Burstipy.core.analysis.firing_frequency import extract_frequency
from Burstipy.core.analysis.spike_analysis import detect_spikes_hysteresis
from Burstipy.core.results import NOT_APPLICABLE


# ---------------------------------------------------------------------------
# Result data classes
# ---------------------------------------------------------------------------
@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    expected: float
    measured: float
    tolerance_pct: float
    unit: str = ""
    passed: bool = False

    def __post_init__(self) -> None:
        if self.expected == 0:
            self.passed = abs(self.measured) < 1e-6
        else:
            error_pct = abs(self.measured - self.expected) / abs(self.expected) * 100
            self.passed = bool(error_pct <= self.tolerance_pct)


@dataclass
class ValidationReport:
    """Aggregated validation results."""

    checks: List[ValidationCheck] = field(default_factory=list)

    @property
    def n_passed(self) -> int:
        """Number of passed checks."""
        return sum(1 for c in self.checks if c.passed)

    @property
    def n_failed(self) -> int:
        """Number of failed checks."""
        return sum(1 for c in self.checks if not c.passed)

    @property
    def all_passed(self) -> bool:
        """Whether every check passed."""
        return self.n_failed == 0

    def add(self, check: ValidationCheck) -> None:
        """Add a check to the report."""
        self.checks.append(check)

    def summary_table(self) -> str:
        """Return a human-readable Markdown table."""
        lines = [
            "| Check | Expected | Measured | Tol (%) | Status |",
            "|-------|----------|----------|---------|--------|",
        ]
        for c in self.checks:
            status = "PASS" if c.passed else "**FAIL**"
            lines.append(
                f"| {c.name} | {c.expected:.4g} {c.unit} "
                f"| {c.measured:.4g} {c.unit} "
                f"| {c.tolerance_pct:.1f} | {status} |"
            )
        lines.append("")
        lines.append(
            f"**{self.n_passed}/{len(self.checks)} passed**"
        )
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Synthetic waveform generators
# ---------------------------------------------------------------------------
def _make_time(duration_ms: float, dt_ms: float) -> np.ndarray:
    """Create time vector (ms)."""
    return np.arange(0, duration_ms, dt_ms)


def generate_spike_train(
    spike_times_ms: List[float],
    dt_ms: float = 0.05,
    duration_ms: Optional[float] = None,
    baseline_mv: float = -60.0,
    spike_peak_mv: float = 30.0,
    spike_width_ms: float = 1.0,
) -> Tuple[np.ndarray, np.ndarray, Dict]:
    """Generate a voltage trace with triangular spike waveforms.

    Parameters
    ----------
    spike_times_ms : list of float
        Spike peak times in milliseconds.
    dt_ms : float
        Sampling interval (ms).
    duration_ms : float or None
        Total duration. Defaults to 100 ms after the last spike.
    baseline_mv : float
        Resting membrane potential (mV), below the re-arm threshold.
    spike_peak_mv : float
        Peak voltage of each spike (mV).
    spike_width_ms : float
        Full width of the triangular spike (ms).

    Returns
    -------
    data, time, ground_truth
    """
    if duration_ms is None:
        duration_ms = (max(spike_times_ms) if spike_times_ms else 0.0) + 100.0
    time = _make_time(duration_ms, dt_ms)
    data = np.full_like(time, baseline_mv)
    half_w = max(int(round(spike_width_ms / dt_ms / 2)), 1)

    actual_peaks = []
    for st in spike_times_ms:
        idx = int(round(st / dt_ms))
        if idx - half_w < 0 or idx + half_w >= len(data):
            continue
        # Rising phase
        data[idx - half_w: idx] = np.linspace(baseline_mv, spike_peak_mv, half_w)
        # Falling phase
        data[idx: idx + half_w] = np.linspace(spike_peak_mv, baseline_mv, half_w)
        actual_peaks.append(st)

    gt = {
        "spike_count": len(actual_peaks),
        "spike_times_ms": actual_peaks,
    }
    return data, time, gt


def generate_burst_train(
    spikes_per_burst: int = 6,
    n_bursts: int = 4,
    intra_isi_ms: float = 8.0,
    inter_isi_ms: float = 300.0,
    start_ms: float = 50.0,
    **kwargs,
) -> Tuple[np.ndarray, np.ndarray, Dict]:
    """Generate identical bursts separated by a fixed interburst interval.

    Returns
    -------
    data, time, ground_truth
    """
    spike_times = []
    t = start_ms
    for _ in range(n_bursts):
        for k in range(spikes_per_burst):
            spike_times.append(t)
            if k < spikes_per_burst - 1:
                t += intra_isi_ms
        t += inter_isi_ms
    data, time, gt = generate_spike_train(spike_times, **kwargs)

    intra_hz = 1000.0 / intra_isi_ms
    inter_period_s = inter_isi_ms / 1000.0
    gt.update({
        "spikes_per_burst": float(spikes_per_burst),
        "intraburst_freq_hz": intra_hz,
        "interburst_freq_hz": 1.0 / inter_period_s,
        "burstiness": spikes_per_burst * intra_hz / inter_period_s,
        "mean_frequency_hz": 1000.0 / np.mean(np.diff(spike_times)),
    })
    return data, time, gt


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------
def validate_spike_count(report: ValidationReport) -> None:
    """Validate spike count on a synthetic spike train."""
    data, time, gt = generate_spike_train([50.0 * k for k in range(1, 11)])
    result = detect_spikes_hysteresis(data, time)
    report.add(ValidationCheck(
        name="Spike count",
        expected=gt["spike_count"],
        measured=result.spike_count,
        tolerance_pct=0.0,  # exact match
        unit="spikes",
    ))


def validate_tonic_frequency(report: ValidationReport) -> None:
    """Validate frequency of a 20 Hz tonic train."""
    data, time, _ = generate_spike_train([50.0 * k for k in range(1, 11)])
    freq = extract_frequency(data, time)
    report.add(ValidationCheck(
        name="Frequency (20 Hz tonic)",
        expected=20.0,
        measured=float("nan") if freq is NOT_APPLICABLE else freq,
        tolerance_pct=0.1,
        unit="Hz",
    ))


def validate_tonic_not_bursting(report: ValidationReport) -> None:
    """A regular train must yield no burst statistics at all."""
    data, time, _ = generate_spike_train([50.0 * k for k in range(1, 11)])
    stats = extract_burstiness(data, time)
    report.add(ValidationCheck(
        name="Tonic train: burst stats not applicable",
        expected=4,
        measured=sum(1 for v in stats if v is NOT_APPLICABLE),
        tolerance_pct=0.0,
        unit="stats",
    ))


def validate_silent_trace(report: ValidationReport) -> None:
    """A silent trace must be not applicable for every extractor."""
    data, time, _ = generate_spike_train([], duration_ms=1000.0)
    n_na = int(extract_frequency(data, time) is NOT_APPLICABLE)
    n_na += sum(1 for v in extract_burstiness(data, time) if v is NOT_APPLICABLE)
    report.add(ValidationCheck(
        name="Silent trace: all not applicable",
        expected=5,
        measured=n_na,
        tolerance_pct=0.0,
        unit="stats",
    ))


def validate_burst_statistics(report: ValidationReport) -> None:
    """Validate all four burst descriptors on a regular burster."""
    data, time, gt = generate_burst_train()
    stats = extract_burstiness(data, time)

    checks = [
        ("Spikes per burst", "spikes_per_burst", 0.0, ""),
        ("Intraburst frequency", "intraburst_freq_hz", 0.5, "Hz"),
        ("Interburst frequency", "interburst_freq_hz", 0.5, "Hz"),
        ("Burstiness", "burstiness", 0.5, ""),
    ]
    for name, key, tol, unit in checks:
        value = getattr(stats, key)
        report.add(ValidationCheck(
            name=name,
            expected=gt[key],
            measured=float("nan") if value is NOT_APPLICABLE else value,
            tolerance_pct=tol,
            unit=unit,
        ))


def validate_burst_mean_frequency(report: ValidationReport) -> None:
    """The mean frequency of a burster averages intra- and interburst ISIs."""
    data, time, gt = generate_burst_train()
    freq = extract_frequency(data, time)
    report.add(ValidationCheck(
        name="Frequency (burster)",
        expected=gt["mean_frequency_hz"],
        measured=float("nan") if freq is NOT_APPLICABLE else freq,
        tolerance_pct=0.5,
        unit="Hz",
    ))


def validate_principal_direction(report: ValidationReport) -> None:
    """Parameters spread along one line have a single non-zero eigenvalue."""
    rng = np.random.default_rng(42)
    direction = np.array([2.0, 1.0, 0.5, 0.0, 0.0, 0.1])
    spread = rng.normal(0.0, 3.0, size=300)
    params = np.array([50.0, 20.0, 1.0, 1.0, 0.5, 0.01]) + np.outer(spread, direction)

    value, vector = principal_directions(params).rank(1)
    expected = np.var(spread, ddof=1) * float(direction @ direction)
    report.add(ValidationCheck(
        name="Dominant eigenvalue (rank-1 population)",
        expected=expected,
        measured=value,
        tolerance_pct=1e-6,
    ))
    report.add(ValidationCheck(
        name="Dominant direction alignment",
        expected=1.0,
        measured=abs(float(vector @ direction)) / np.linalg.norm(direction),
        tolerance_pct=1e-6,
    ))


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------
def run_all(save_report: bool = True) -> ValidationReport:
    """Run all validation checks.

    Parameters
    ----------
    save_report : bool
        If True, write a Markdown report to validation/report.md.

    Returns
    -------
    ValidationReport
    """
    report = ValidationReport()

    validate_spike_count(report)
    validate_tonic_frequency(report)
    validate_tonic_not_bursting(report)
    validate_silent_trace(report)
    validate_burst_statistics(report)
    validate_burst_mean_frequency(report)
    validate_principal_direction(report)

    # Print summary
    print(report.summary_table())
    print()

    if save_report:
        out_dir = Path(__file__).parent
        report_path = out_dir / "report.md"
        header = (
            "# Burstipy Algorithm Validation Report\n\n"
            "Auto-generated by `validate_algorithms.py`.\n\n"
        )
        report_path.write_text(header + report.summary_table() + "\n")
        print(f"Report saved to {report_path}")

        # Also dump JSON for CI consumption
        json_path = out_dir / "report.json"
        checks_list = []
        for c in report.checks:
            checks_list.append({
                "name": c.name,
                "expected": float(c.expected),
                "measured": float(c.measured),
                "tolerance_pct": float(c.tolerance_pct),
                "unit": c.unit,
                "passed": bool(c.passed),
            })
        json_path.write_text(json.dumps(checks_list, indent=2) + "\n")

    return report


def test_all_validations_pass():
    """Pytest entry point: every ground-truth check must pass."""
    report = run_all(save_report=False)
    failed = [c.name for c in report.checks if not c.passed]
    assert report.all_passed, f"Failed checks: {failed}"


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Burstipy validation suite")
    parser.add_argument(
        "--no-save", action="store_true",
        help="Do not save report files",
    )
    args = parser.parse_args()

    report = run_all(save_report=not args.no_save)
    sys.exit(0 if report.all_passed else 1)
