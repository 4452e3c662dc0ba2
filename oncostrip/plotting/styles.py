"""Shared plotting style settings for deterministic oncostrip outputs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


@dataclass(frozen=True)
class PlotStyle:
    """Centralized plotting defaults used by the oncostrip renderer."""

    dpi: int = 200
    cell_width: float = 0.18
    cell_height: float = 0.45
    min_figsize: tuple[float, float] = (6.0, 3.0)
    cell_gap_x: float = 0.10
    cell_gap_y: float = 0.12
    cnv_bar_fraction: float = 0.35
    gene_fontsize: int = 10
    pct_fontsize: int = 10
    sample_fontsize: int = 7
    legend_fontsize: int = 8
    legend_rows: int = 2
    annotation_row_height: float = 0.6
    annotation_legend_max: int = 12
    pct_width_ratio: float = 0.08


DEFAULT_PLOT_STYLE = PlotStyle()


def apply_plot_style(style: PlotStyle = DEFAULT_PLOT_STYLE) -> None:
    """Apply deterministic matplotlib rcParams for oncostrip plots."""
    plt.rcParams.update(
        {
            "figure.dpi": style.dpi,
            "savefig.dpi": style.dpi,
            "savefig.facecolor": "white",
            "font.family": "DejaVu Sans",
            "legend.fontsize": style.legend_fontsize,
            "axes.grid": False,
        }
    )


def plot_style_dict(style: PlotStyle = DEFAULT_PLOT_STYLE) -> dict[str, Any]:
    """Return style + dependency versions for run metadata."""
    d = asdict(style)
    d["matplotlib_version"] = str(matplotlib.__version__)
    d["numpy_version"] = str(np.__version__)
    d["pandas_version"] = str(pd.__version__)
    return d
