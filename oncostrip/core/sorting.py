"""Sample ordering for oncostrip matrices."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from oncostrip.core.annotation import align_annotation, clean_annotation

logger = logging.getLogger(__name__)


def sort_by_mutation(numeric: pd.DataFrame) -> pd.DataFrame:
    """Order samples by their binarized mutation pattern, mutated first.

    Samples are compared gene by gene in row order; ties keep input order.
    Gene order is not changed.
    """
    binary = (numeric.to_numpy() != 0).astype(int)
    n_samples = binary.shape[1]
    # np.lexsort: last key is primary, so the first gene goes last.
    keys = [np.arange(n_samples)] + [-binary[i] for i in range(binary.shape[0] - 1, -1, -1)]
    order = np.lexsort(keys)
    return numeric.iloc[:, order]


def sort_by_annotation(
    numeric: pd.DataFrame,
    annotation: pd.DataFrame,
    columns: Sequence[str] | None = None,
) -> pd.DataFrame:
    """Group samples by annotation values, mutation-sort within each group.

    Groups follow sorted annotation values; samples without an annotation are
    appended last.
    """
    clean = clean_annotation(annotation)
    cols = [str(c) for c in columns] if columns else [clean.columns[0]]
    missing = [c for c in cols if c not in clean.columns]
    if missing:
        raise KeyError(f"Annotation columns not found: {', '.join(missing)}")

    aligned = align_annotation(clean[cols], numeric.columns).dropna(how="any")
    order: list[str] = []
    for _, group in aligned.groupby(cols, sort=True):
        block = sort_by_mutation(numeric.loc[:, list(group.index)])
        order.extend(block.columns)

    annotated = set(order)
    rest = [s for s in numeric.columns if s not in annotated]
    if rest:
        logger.info("%d sample(s) without annotation placed last.", len(rest))
        order.extend(sort_by_mutation(numeric.loc[:, rest]).columns)
    return numeric.loc[:, order]


def match_categorical(categorical: pd.DataFrame, numeric: pd.DataFrame) -> pd.DataFrame:
    """Reindex the categorical matrix to the numeric matrix's gene and sample order."""
    return categorical.loc[numeric.index, numeric.columns]
