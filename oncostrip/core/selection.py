"""Input validation and gene/sample selection."""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from oncostrip.core.types import MutationMatrices

logger = logging.getLogger(__name__)

MIN_SAMPLES = 2
MIN_GENES = 2


def check_grid(numeric: pd.DataFrame, stage: str | None = None) -> None:
    """Raise unless `numeric` still spans at least a 2x2 grid."""
    n_genes, n_samples = numeric.shape
    where = f" after {stage}" if stage else ""
    if n_samples < MIN_SAMPLES:
        raise ValueError(
            f"Cannot create oncostrip for {n_samples} sample(s){where}. "
            f"Minimum {MIN_SAMPLES} samples required."
        )
    if n_genes < MIN_GENES:
        raise ValueError(
            f"Cannot create oncostrip for {n_genes} gene(s){where}. "
            f"Minimum {MIN_GENES} genes required."
        )


def validate_matrices(mm: MutationMatrices) -> None:
    """Reject inputs that cannot span at least a 2x2 grid."""
    numeric = mm.numeric
    check_grid(numeric)

    missing_genes = numeric.index.difference(mm.categorical.index)
    missing_samples = numeric.columns.difference(mm.categorical.columns)
    if len(missing_genes) > 0 or len(missing_samples) > 0:
        raise ValueError(
            "Categorical matrix does not cover the numeric matrix: "
            f"missing genes={list(missing_genes)[:5]}, "
            f"missing samples={list(missing_samples)[:5]}."
        )


def select_genes(
    numeric: pd.DataFrame,
    genes: Sequence[str] | None = None,
    top: int = 5,
) -> pd.DataFrame:
    """Pick explicit genes (caller order) or the first `top` rows."""
    if genes is None:
        if int(top) < 1:
            raise ValueError(f"top must be >= 1, got {top}.")
        n_rows = numeric.shape[0]
        if int(top) > n_rows:
            logger.warning(
                "Requested top=%d genes but only %d available; using all.", top, n_rows
            )
        return numeric.iloc[: int(top), :]

    wanted = list(genes)
    missing = [g for g in wanted if g not in numeric.index]
    if missing:
        raise KeyError(
            f"Genes not found in mutation matrix: {', '.join(str(g) for g in missing)}"
        )
    return numeric.loc[wanted, :]


def remove_non_mutated(numeric: pd.DataFrame) -> pd.DataFrame:
    """Drop samples with no mutation across the selected genes."""
    col_sums = numeric.sum(axis=0)
    keep = col_sums != 0
    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.info("Removed %d non-mutated sample(s).", n_dropped)
    return numeric.loc[:, keep]
