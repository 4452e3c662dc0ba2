"""Shared plotting utilities used by figure factories."""

from __future__ import annotations

from pathlib import Path

import matplotlib.figure
import matplotlib.pyplot as plt

from oncostrip.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle


def figure_size(
    n_genes: int,
    n_samples: int,
    n_annotation_rows: int = 0,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> tuple[float, float]:
    """Figure size scaled to the matrix, never below `style.min_figsize`."""
    width = n_samples * style.cell_width + 3.0
    height = (n_genes + n_annotation_rows * style.annotation_row_height) * style.cell_height + 2.0
    return (max(style.min_figsize[0], width), max(style.min_figsize[1], height))


def save_figure(
    fig: matplotlib.figure.Figure,
    out_path: Path,
    *,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    bbox_tight: bool = True,
    close: bool = True,
) -> None:
    """Save figure deterministically and optionally close it."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    save_kwargs: dict[str, object] = {
        "dpi": style.dpi,
        "facecolor": "white",
        "pad_inches": 0.02,
    }
    if bbox_tight:
        save_kwargs["bbox_inches"] = "tight"
    fig.savefig(out_path, **save_kwargs)
    if close:
        plt.close(fig)
