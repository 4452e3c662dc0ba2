from __future__ import annotations

import pandas as pd
import pytest

from oncostrip.core.layout import build_oncostrip_layout
from oncostrip.core.sorting import match_categorical, sort_by_annotation, sort_by_mutation


def test_sort_by_mutation_orders_by_binary_pattern(small_mm):
    numeric = small_mm.numeric.loc[["G1", "G2", "G3"], ["S1", "S2", "S3", "S4"]]
    ordered = sort_by_mutation(numeric)
    assert list(ordered.columns) == ["S4", "S2", "S1", "S3"]
    assert list(ordered.index) == ["G1", "G2", "G3"]


def test_sort_by_mutation_binarizes_counts_and_is_stable():
    numeric = pd.DataFrame(
        [[3, 1, 0, 1], [0, 0, 2, 0]],
        index=["G1", "G2"],
        columns=["A", "B", "C", "D"],
    )
    assert list(sort_by_mutation(numeric).columns) == ["A", "B", "D", "C"]


def test_sort_is_a_permutation(small_mm):
    sorted_layout = build_oncostrip_layout(small_mm, top=3, sort=True)
    unsorted_layout = build_oncostrip_layout(small_mm, top=3, sort=False)
    assert sorted_layout.samples != unsorted_layout.samples
    assert sorted(sorted_layout.samples) == sorted(unsorted_layout.samples)


def test_categorical_follows_numeric_order(small_mm):
    numeric = sort_by_mutation(small_mm.numeric.iloc[:3, :4])
    categorical = match_categorical(small_mm.categorical, numeric)
    assert list(categorical.index) == list(numeric.index)
    assert list(categorical.columns) == list(numeric.columns)
    assert categorical.loc["G1", "S4"] == "Missense_Mutation;Amp"


def test_layout_categorical_matches_sorted_numeric(small_mm):
    layout = build_oncostrip_layout(small_mm, top=3)
    assert list(layout.categorical.columns) == list(layout.numeric.columns)
    assert list(layout.categorical.index) == list(layout.numeric.index)


def test_sort_by_annotation_groups_then_mutation_sorts(small_mm, subtype_annotation):
    numeric = small_mm.numeric.iloc[:3, :]
    ordered = sort_by_annotation(numeric, subtype_annotation)
    assert list(ordered.columns) == ["S4", "S2", "S1", "S3", "S5", "S6"]


def test_sort_by_annotation_matches_dashed_ids():
    numeric = pd.DataFrame(
        [[1, 1, 0], [0, 1, 1]],
        index=["G1", "G2"],
        columns=["TCGA.01", "TCGA.02", "TCGA.03"],
    )
    annotation = pd.DataFrame(
        {"id": ["TCGA-03", "TCGA-01", "TCGA-02"], "arm": ["a", "b", "b"]}
    )
    ordered = sort_by_annotation(numeric, annotation)
    assert list(ordered.columns) == ["TCGA.03", "TCGA.02", "TCGA.01"]


def test_sort_by_annotation_unknown_column(small_mm, subtype_annotation):
    with pytest.raises(KeyError, match="Stage"):
        sort_by_annotation(small_mm.numeric, subtype_annotation, columns=["Stage"])


def test_sort_by_annotation_requires_annotation(small_mm):
    with pytest.raises(ValueError, match="Missing annotation data"):
        build_oncostrip_layout(small_mm, sort_by_annotation=True)


def test_annotation_sort_takes_precedence(small_mm, subtype_annotation):
    layout = build_oncostrip_layout(
        small_mm,
        top=3,
        sort=True,
        sort_by_annotation=True,
        annotation=subtype_annotation,
        remove_non_mutated=False,
    )
    assert layout.samples == ["S4", "S2", "S1", "S3", "S5", "S6"]
