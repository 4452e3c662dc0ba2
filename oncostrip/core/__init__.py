"""Core selection, ordering and color logic."""

from oncostrip.core.annotation import (
    annotation_colors,
    clean_annotation,
    normalize_sample_id,
    prepare_annotation,
)
from oncostrip.core.cells import CNV_BAR_FRACTION, cell_paints
from oncostrip.core.colors import (
    BACKGROUND_COLOR,
    DEFAULT_COLORS,
    NO_MUTATION,
    legend_entries,
    present_categories,
    resolve_colors,
    split_categories,
)
from oncostrip.core.layout import build_oncostrip_layout, mutated_percentages
from oncostrip.core.selection import (
    check_grid,
    remove_non_mutated,
    select_genes,
    validate_matrices,
)
from oncostrip.core.sorting import match_categorical, sort_by_annotation, sort_by_mutation
from oncostrip.core.types import CellPaint, MutationMatrices, OncostripLayout

__all__ = [
    "MutationMatrices",
    "OncostripLayout",
    "CellPaint",
    "validate_matrices",
    "select_genes",
    "check_grid",
    "remove_non_mutated",
    "sort_by_mutation",
    "sort_by_annotation",
    "match_categorical",
    "NO_MUTATION",
    "BACKGROUND_COLOR",
    "DEFAULT_COLORS",
    "resolve_colors",
    "split_categories",
    "present_categories",
    "legend_entries",
    "CNV_BAR_FRACTION",
    "cell_paints",
    "normalize_sample_id",
    "clean_annotation",
    "prepare_annotation",
    "annotation_colors",
    "mutated_percentages",
    "build_oncostrip_layout",
]
