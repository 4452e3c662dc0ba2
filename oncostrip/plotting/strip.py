"""Oncostrip renderer: colored gene x sample grid with side and bottom tracks."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Callable, Mapping

import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch, Rectangle

from oncostrip.core.cells import cell_paints
from oncostrip.core.layout import build_oncostrip_layout
from oncostrip.core.types import MutationMatrices, OncostripLayout
from oncostrip.plotting.styles import DEFAULT_PLOT_STYLE, PlotStyle
from oncostrip.plotting.utils import figure_size, save_figure

logger = logging.getLogger(__name__)

MISSING_ANNOTATION_COLOR = "white"

CellFun = Callable[[plt.Axes, int, int, Any], None]


def _hide_frame(ax: plt.Axes) -> None:
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.tick_params(left=False, bottom=False, top=False, right=False)


def make_cell_fun(
    color_map: Mapping[str, str], style: PlotStyle = DEFAULT_PLOT_STYLE
) -> CellFun:
    """Return the per-cell painter: background, then fills or short copy-number bars."""

    def cell_fun(ax: plt.Axes, i: int, j: int, label: Any) -> None:
        width = 1.0 - style.cell_gap_x
        full_height = 1.0 - style.cell_gap_y
        for paint in cell_paints(label, color_map, cnv_fraction=style.cnv_bar_fraction):
            height = full_height * paint.height_frac
            ax.add_patch(
                Rectangle(
                    (j + style.cell_gap_x / 2.0, i + (1.0 - height) / 2.0),
                    width,
                    height,
                    facecolor=paint.color,
                    edgecolor="none",
                    linewidth=0,
                )
            )

    return cell_fun


def draw_matrix(ax: plt.Axes, categorical: pd.DataFrame, cell_fun: CellFun) -> None:
    """Call `cell_fun` for every cell; row 0 is drawn at the top."""
    n_genes, n_samples = categorical.shape
    values = categorical.to_numpy()
    for i in range(n_genes):
        for j in range(n_samples):
            cell_fun(ax, i, j, values[i, j])
    ax.set_xlim(0, n_samples)
    ax.set_ylim(n_genes, 0)


def _draw_percentages(
    ax: plt.Axes, percentages: list[str], style: PlotStyle
) -> None:
    ax.set_xlim(0, 1)
    for i, text in enumerate(percentages):
        ax.text(
            1.0,
            i + 0.5,
            text,
            ha="right",
            va="center",
            fontsize=style.pct_fontsize,
        )
    ax.set_axis_off()


def _lookup_color(colors: Mapping[str, str], value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return MISSING_ANNOTATION_COLOR
    key = str(value)
    if key in colors:
        return colors[key]
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return colors.get(str(int(value)), MISSING_ANNOTATION_COLOR)
    return MISSING_ANNOTATION_COLOR


def _draw_annotation(
    ax: plt.Axes,
    annotation: pd.DataFrame,
    annotation_colors: Mapping[str, Mapping[str, str]],
    style: PlotStyle,
) -> None:
    n_samples = annotation.shape[0]
    for k, col in enumerate(annotation.columns):
        colors = annotation_colors.get(str(col), {})
        for j, value in enumerate(annotation[col].to_numpy()):
            ax.add_patch(
                Rectangle(
                    (j + style.cell_gap_x / 2.0, k + style.cell_gap_y / 2.0),
                    1.0 - style.cell_gap_x,
                    1.0 - style.cell_gap_y,
                    facecolor=_lookup_color(colors, value),
                    edgecolor="none",
                    linewidth=0,
                )
            )
    ax.set_xlim(0, n_samples)
    ax.set_ylim(annotation.shape[1], 0)
    ax.set_yticks(np.arange(annotation.shape[1]) + 0.5)
    ax.set_yticklabels([str(c) for c in annotation.columns], fontsize=style.gene_fontsize)
    ax.set_xticks([])
    _hide_frame(ax)


def _annotation_handles(
    annotation_colors: Mapping[str, Mapping[str, str]], style: PlotStyle
) -> list[Patch]:
    handles: list[Patch] = []
    for col, colors in annotation_colors.items():
        for value, color in list(colors.items())[: style.annotation_legend_max]:
            handles.append(Patch(facecolor=color, edgecolor="none", label=f"{col}: {value}"))
    return handles


def draw_oncostrip(
    layout: OncostripLayout,
    fig: matplotlib.figure.Figure | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> dict[str, plt.Axes]:
    """Draw a resolved layout onto `fig` (default: the active figure)."""
    fig = fig if fig is not None else plt.gcf()
    n_genes, n_samples = layout.categorical.shape
    has_annotation = layout.annotation is not None and layout.annotation.shape[1] > 0

    height_ratios = [float(n_genes)]
    if has_annotation:
        height_ratios.append(layout.annotation.shape[1] * style.annotation_row_height)
    gs = fig.add_gridspec(
        nrows=len(height_ratios),
        ncols=2,
        height_ratios=height_ratios,
        width_ratios=[1.0, style.pct_width_ratio],
        hspace=0.08,
        wspace=0.02,
    )

    ax_main = fig.add_subplot(gs[0, 0])
    draw_matrix(ax_main, layout.categorical, make_cell_fun(layout.color_map, style))
    ax_main.set_yticks(np.arange(n_genes) + 0.5)
    ax_main.set_yticklabels(layout.genes, fontsize=style.gene_fontsize)
    if layout.show_sample_names and not has_annotation:
        ax_main.set_xticks(np.arange(n_samples) + 0.5)
        ax_main.set_xticklabels(layout.samples, rotation=90, fontsize=style.sample_fontsize)
    else:
        ax_main.set_xticks([])
    _hide_frame(ax_main)

    ax_pct = fig.add_subplot(gs[0, 1], sharey=ax_main)
    _draw_percentages(ax_pct, layout.percentages, style)

    axes = {"matrix": ax_main, "percent": ax_pct}
    bottom_ax = ax_main
    if has_annotation:
        # not sharex: shared tickers would copy sample labels onto the matrix
        ax_anno = fig.add_subplot(gs[1, 0])
        _draw_annotation(ax_anno, layout.annotation, layout.annotation_colors, style)
        if layout.show_sample_names:
            ax_anno.set_xticks(np.arange(n_samples) + 0.5)
            ax_anno.set_xticklabels(layout.samples, rotation=90, fontsize=style.sample_fontsize)
        axes["annotation"] = ax_anno
        bottom_ax = ax_anno

    handles = [
        Patch(facecolor=color, edgecolor="none", label=label) for label, color in layout.legend
    ]
    if handles:
        ncol = max(1, math.ceil(len(handles) / max(1, style.legend_rows)))
        bottom_ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, -0.15 if not layout.show_sample_names else -0.6),
            ncol=ncol,
            frameon=False,
            fontsize=style.legend_fontsize,
        )
    if has_annotation:
        anno_handles = _annotation_handles(layout.annotation_colors, style)
        if anno_handles:
            fig.legend(
                handles=anno_handles,
                loc="center left",
                bbox_to_anchor=(1.0, 0.5),
                frameon=False,
                fontsize=style.legend_fontsize,
            )
    return axes


def oncostrip(
    mm: MutationMatrices,
    genes: list[str] | None = None,
    sort: bool = True,
    sort_by_annotation: bool = False,
    annotation: pd.DataFrame | None = None,
    annotation_color: Mapping[str, Mapping[object, str]] | None = None,
    remove_non_mutated: bool = True,
    top: int = 5,
    show_sample_names: bool = False,
    colors: Mapping[str, str] | None = None,
    sort_columns: list[str] | None = None,
    *,
    fig: matplotlib.figure.Figure | None = None,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
) -> None:
    """Draw an oncostrip onto `fig` or the active figure.

    Inputs are validated and the layout fully resolved before anything is drawn,
    so errors never leave a partial plot.
    """
    layout = build_oncostrip_layout(
        mm,
        genes=genes,
        sort=sort,
        sort_by_annotation=sort_by_annotation,
        annotation=annotation,
        annotation_color=annotation_color,
        remove_non_mutated=remove_non_mutated,
        top=top,
        show_sample_names=show_sample_names,
        colors=colors,
        sort_columns=sort_columns,
    )
    draw_oncostrip(layout, fig=fig, style=style)


def plot_oncostrip_to_file(
    mm: MutationMatrices,
    out_png: str | Path,
    *,
    style: PlotStyle = DEFAULT_PLOT_STYLE,
    **kwargs: Any,
) -> Path:
    """Render an oncostrip to a new figure sized to the matrix and save it."""
    layout = build_oncostrip_layout(mm, **kwargs)
    n_anno = 0 if layout.annotation is None else layout.annotation.shape[1]
    fig = plt.figure(
        figsize=figure_size(len(layout.genes), len(layout.samples), n_anno, style=style)
    )
    draw_oncostrip(layout, fig=fig, style=style)
    out_path = Path(out_png)
    save_figure(fig, out_path, style=style)
    logger.info("Saved oncostrip to %s", out_path.as_posix())
    return out_path
