import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from oncostrip.core.colors import NO_MUTATION
from oncostrip.core.layout import build_oncostrip_layout
from oncostrip.plotting import strip as strip_plotting
from oncostrip.plotting.strip import draw_oncostrip, oncostrip, plot_oncostrip_to_file


def test_oncostrip_draws_cells_on_given_figure(small_mm):
    fig = plt.figure()
    result = oncostrip(small_mm, top=3, fig=fig)
    assert result is None

    ax_main = fig.axes[0]
    # 12 backgrounds + 6 overlays (Missense;Amp contributes two)
    assert len(ax_main.patches) == 18
    assert [t.get_text() for t in ax_main.get_yticklabels()] == ["G1", "G2", "G3"]
    plt.close(fig)


def test_percent_labels_drawn_per_gene(small_mm):
    fig = plt.figure()
    axes = draw_oncostrip(build_oncostrip_layout(small_mm, top=3), fig=fig)
    assert [t.get_text() for t in axes["percent"].texts] == ["50%", "50%", "25%"]
    plt.close(fig)


def test_legend_lists_present_categories_only(small_mm):
    fig = plt.figure()
    axes = draw_oncostrip(build_oncostrip_layout(small_mm, top=3), fig=fig)
    labels = {t.get_text() for t in axes["matrix"].get_legend().get_texts()}
    assert labels == {"Missense_Mutation", "Amp", "Nonsense_Mutation", "Del", "Frame_Shift_Del"}
    assert NO_MUTATION not in labels
    plt.close(fig)


def test_oncostrip_uses_active_figure(small_mm):
    fig = plt.figure()
    oncostrip(small_mm)
    assert plt.gcf() is fig
    assert len(fig.axes) == 2
    plt.close(fig)


def test_errors_raise_before_drawing(make_matrices):
    mm = make_matrices([[1], [1]], [["Silent"], ["Silent"]])
    fig = plt.figure()
    with pytest.raises(ValueError):
        oncostrip(mm, fig=fig)
    assert fig.axes == []
    plt.close(fig)


def test_empty_selection_draws_nothing(small_mm, monkeypatch):
    def _no_draw(*_args, **_kwargs):
        raise AssertionError("nothing should be drawn")

    monkeypatch.setattr(strip_plotting, "draw_oncostrip", _no_draw)
    with pytest.raises(ValueError, match="Minimum 2 genes"):
        oncostrip(small_mm, top=1)


def test_annotation_sort_without_annotation_draws_nothing(small_mm, monkeypatch):
    def _no_draw(*_args, **_kwargs):
        raise AssertionError("nothing should be drawn")

    monkeypatch.setattr(strip_plotting, "draw_oncostrip", _no_draw)
    with pytest.raises(ValueError, match="Missing annotation data"):
        oncostrip(small_mm, sort_by_annotation=True)


def test_annotation_track_added(small_mm, subtype_annotation):
    fig = plt.figure()
    oncostrip(small_mm, top=3, annotation=subtype_annotation, show_sample_names=True, fig=fig)
    assert len(fig.axes) == 3
    ax_anno = fig.axes[2]
    assert len(ax_anno.patches) == 4
    assert [t.get_text() for t in ax_anno.get_xticklabels()] == ["S4", "S2", "S1", "S3"]
    plt.close(fig)


def test_plot_oncostrip_to_file(small_mm, subtype_annotation, tmp_path):
    out = plot_oncostrip_to_file(
        small_mm, tmp_path / "figs" / "strip.png", top=4, annotation=subtype_annotation
    )
    assert out.exists()
    assert out.stat().st_size > 0


def test_plot_style_helpers():
    from oncostrip.plotting.styles import PlotStyle, apply_plot_style, plot_style_dict

    style = PlotStyle(dpi=123)
    apply_plot_style(style)
    assert plt.rcParams["savefig.dpi"] == 123
    meta = plot_style_dict(style)
    assert meta["dpi"] == 123
    assert "matplotlib_version" in meta
    assert "pandas_version" in meta
