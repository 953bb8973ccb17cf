# src/Burstipy/shared/plot_exporter.py
# -*- coding: utf-8 -*-
"""
Plot Exporter Utility.
Handles export of diagnostic figures to various formats (SVG, PDF, PNG, JPG)
using Matplotlib.
"""
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

from matplotlib.figure import Figure

from Burstipy.shared.constants import SUPPORTED_EXPORT_FORMATS
from Burstipy.shared.error_handling import ExportError

log = logging.getLogger(__name__)


class PlotExporter:
    """
    Handles logic for exporting a Matplotlib figure to disk.
    """

    def __init__(self, figure: Figure, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            figure: The figure returned by one of the Burstipy plotting functions.
            config: Configuration dict. Supports 'transparent' (bool) and
                'close_after_export' (bool).
        """
        self.figure = figure
        self.config = config or {}

    @staticmethod
    def resolve_format(filename: Union[str, Path], fmt: Optional[str] = None) -> str:
        """
        Determine the export format from an explicit value or the file suffix.

        Raises:
            ExportError: If the format is missing or unsupported.
        """
        if fmt is None:
            fmt = Path(filename).suffix.lstrip('.')
        fmt = fmt.lower()
        if fmt == "jpeg":
            fmt = "jpg"
        if fmt not in SUPPORTED_EXPORT_FORMATS:
            raise ExportError(
                f"Unsupported export format '{fmt}'. Supported: {', '.join(SUPPORTED_EXPORT_FORMATS)}"
            )
        return fmt

    def export(self, filename: Union[str, Path], fmt: Optional[str] = None, dpi: int = 300) -> bool:
        """
        Export the figure to the specified file.
        Returns True if successful, raises ExportError otherwise.
        """
        fmt = self.resolve_format(filename, fmt)
        path = Path(filename)
        if not path.parent.exists():
            raise ExportError(f"Output directory does not exist: {path.parent}")

        try:
            self.figure.savefig(
                path,
                format=fmt,
                dpi=dpi,
                bbox_inches="tight",
                transparent=bool(self.config.get("transparent", False)),
            )
        except (OSError, ValueError) as e:
            log.error(f"Export failed: {e}")
            raise ExportError(f"Failed to export figure to {path}: {e}") from e

        log.info(f"Exported {fmt} figure to {path}")

        if self.config.get("close_after_export", False):
            import matplotlib.pyplot as plt
            plt.close(self.figure)
        return True


def save_figure(figure: Figure, filename: Union[str, Path], fmt: Optional[str] = None, dpi: int = 300) -> Path:
    """Convenience wrapper around PlotExporter; returns the written path."""
    PlotExporter(figure).export(filename, fmt=fmt, dpi=dpi)
    return Path(filename)
