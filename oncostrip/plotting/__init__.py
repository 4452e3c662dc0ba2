"""Plotting API for oncostrip figures."""

from oncostrip.plotting.strip import (
    draw_matrix,
    draw_oncostrip,
    make_cell_fun,
    oncostrip,
    plot_oncostrip_to_file,
)
from oncostrip.plotting.styles import (
    DEFAULT_PLOT_STYLE,
    PlotStyle,
    apply_plot_style,
    plot_style_dict,
)
from oncostrip.plotting.utils import figure_size, save_figure

__all__ = [
    "PlotStyle",
    "DEFAULT_PLOT_STYLE",
    "apply_plot_style",
    "plot_style_dict",
    "figure_size",
    "save_figure",
    "make_cell_fun",
    "draw_matrix",
    "draw_oncostrip",
    "oncostrip",
    "plot_oncostrip_to_file",
]
