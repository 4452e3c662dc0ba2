"""Resolve selection, ordering, colors and labels into a draw-ready layout."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from oncostrip.core.annotation import annotation_colors, prepare_annotation
from oncostrip.core.colors import NO_MUTATION, legend_entries, resolve_colors, split_categories
from oncostrip.core import selection, sorting
from oncostrip.core.types import MutationMatrices, OncostripLayout

logger = logging.getLogger(__name__)


def has_call(label: object) -> bool:
    return len(split_categories(label)) > 0


def mutated_percentages(categorical: pd.DataFrame) -> list[str]:
    """Rounded percentage of samples with a non-empty call, one string per gene row."""
    n_samples = categorical.shape[1]
    labels: list[str] = []
    for _, row in categorical.iterrows():
        if n_samples == 0:
            labels.append("0%")
            continue
        n_hit = sum(has_call(v) for v in row)
        pct = 100.0 * n_hit / n_samples
        labels.append(f"{int(np.round(pct))}%")
    return labels


def fill_placeholder(categorical: pd.DataFrame) -> pd.DataFrame:
    """Replace blank cells with the no-mutation placeholder."""
    return categorical.apply(
        lambda col: col.map(lambda v: v if has_call(v) else NO_MUTATION)
    )


def build_oncostrip_layout(
    mm: MutationMatrices,
    genes: Sequence[str] | None = None,
    sort: bool = True,
    sort_by_annotation: bool = False,
    annotation: pd.DataFrame | None = None,
    annotation_color: Mapping[str, Mapping[object, str]] | None = None,
    remove_non_mutated: bool = True,
    top: int = 5,
    show_sample_names: bool = False,
    colors: Mapping[str, str] | None = None,
    sort_columns: Sequence[str] | None = None,
) -> OncostripLayout:
    """Select genes and samples, order them and resolve everything the renderer needs.

    `sort_by_annotation` and `sort` are mutually exclusive; annotation sorting wins
    when both are set and requires `annotation`.
    """
    selection.validate_matrices(mm)
    if sort_by_annotation and annotation is None:
        raise ValueError(
            "Missing annotation data. Provide `annotation` when sort_by_annotation=True."
        )

    numeric = selection.select_genes(mm.numeric, genes=genes, top=top)
    if remove_non_mutated:
        numeric = selection.remove_non_mutated(numeric)
    selection.check_grid(numeric, stage="gene and sample selection")

    if sort_by_annotation:
        numeric = sorting.sort_by_annotation(numeric, annotation, columns=sort_columns)
    elif sort:
        numeric = sorting.sort_by_mutation(numeric)

    categorical = sorting.match_categorical(mm.categorical, numeric)
    logger.info(
        "Oncostrip layout: %d gene(s) x %d sample(s).", categorical.shape[0], categorical.shape[1]
    )

    color_map = resolve_colors(colors)
    anno_frame = None
    anno_colors: dict[str, dict[str, str]] = {}
    if annotation is not None:
        anno_frame = prepare_annotation(annotation, categorical.columns)
        anno_colors = annotation_colors(anno_frame, annotation_color)

    return OncostripLayout(
        categorical=fill_placeholder(categorical),
        numeric=numeric,
        color_map=color_map,
        legend=legend_entries(categorical, color_map),
        percentages=mutated_percentages(categorical),
        annotation=anno_frame,
        annotation_colors=anno_colors,
        show_sample_names=bool(show_sample_names),
    )
