"""Build oncostrip matrices from MAF-like variant tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from oncostrip.core.colors import CATEGORY_SEPARATOR, is_cnv
from oncostrip.core.types import MutationMatrices

logger = logging.getLogger(__name__)

GENE_COL = "Hugo_Symbol"
CLASS_COL = "Variant_Classification"
SAMPLE_COL = "Tumor_Sample_Barcode"
REQUIRED_MAF_COLUMNS: tuple[str, ...] = (GENE_COL, CLASS_COL, SAMPLE_COL)
MULTI_HIT = "Multi_Hit"


def read_maf(path: str | Path) -> pd.DataFrame:
    """Read the required columns of a tab-separated MAF (.maf or .maf.gz)."""
    maf_path = Path(path)
    if not maf_path.exists():
        raise FileNotFoundError(f"MAF file not found: {maf_path}")
    return pd.read_csv(
        maf_path,
        sep="\t",
        comment="#",
        usecols=list(REQUIRED_MAF_COLUMNS),
        dtype=str,
        low_memory=False,
    )


def _cell_label(classes: Iterable[str], collapse_multi_hit: bool) -> str:
    distinct = sorted(set(classes))
    point = [c for c in distinct if not is_cnv(c)]
    cnv = [c for c in distinct if is_cnv(c)]
    if collapse_multi_hit and len(point) > 1:
        point = [MULTI_HIT]
    return CATEGORY_SEPARATOR.join(point + cnv)


def build_mutation_matrices(
    maf: pd.DataFrame, collapse_multi_hit: bool = False
) -> MutationMatrices:
    """Pivot variant records into numeric (record counts) and categorical matrices.

    Genes are ordered by number of mutated samples, most first, ties by name.
    """
    missing = [c for c in REQUIRED_MAF_COLUMNS if c not in maf.columns]
    if missing:
        raise ValueError(f"MAF table missing required columns: {', '.join(missing)}")

    df = maf.loc[:, list(REQUIRED_MAF_COLUMNS)].dropna().astype(str)
    n_dropped = maf.shape[0] - df.shape[0]
    if n_dropped:
        logger.debug("Skipped %d MAF record(s) with missing fields.", n_dropped)
    if df.empty:
        raise ValueError("MAF table has no usable records.")

    numeric = pd.crosstab(df[GENE_COL], df[SAMPLE_COL])
    labels = df.groupby([GENE_COL, SAMPLE_COL])[CLASS_COL].agg(
        lambda s: _cell_label(s, collapse_multi_hit)
    )
    categorical = labels.unstack(fill_value="").reindex(
        index=numeric.index, columns=numeric.columns, fill_value=""
    )

    n_mutated = (numeric > 0).sum(axis=1)
    order = sorted(numeric.index, key=lambda g: (-int(n_mutated[g]), str(g)))
    numeric = numeric.loc[order].rename_axis(index=None, columns=None)
    categorical = categorical.loc[order].rename_axis(index=None, columns=None)
    logger.info(
        "Built mutation matrices: %d gene(s) x %d sample(s).", numeric.shape[0], numeric.shape[1]
    )
    return MutationMatrices(numeric=numeric, categorical=categorical)
