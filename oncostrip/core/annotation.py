"""Sample annotation cleanup, alignment and coloring."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

import matplotlib
import matplotlib.colors as mcolors
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

CATEGORICAL_CMAP = "tab20"
NUMERIC_CMAP = "viridis"


def normalize_sample_id(sample: object) -> str:
    """Dash-to-dot sample naming used when matching annotations to matrix columns."""
    return str(sample).strip().replace("-", ".")


def clean_annotation(annotation: pd.DataFrame) -> pd.DataFrame:
    """Normalize ids, drop duplicate and incomplete rows.

    Returns a frame indexed by normalized sample id holding only annotation columns.
    """
    if annotation.shape[1] < 2:
        raise ValueError(
            "Annotation table needs a sample id column followed by at least one "
            "annotation column."
        )
    df = annotation.copy()
    id_col = df.columns[0]
    df[id_col] = df[id_col].map(lambda v: v if pd.isna(v) else normalize_sample_id(v))

    dup = df.duplicated(subset=id_col, keep="first")
    if dup.any():
        logger.debug("Dropping %d duplicate annotation row(s).", int(dup.sum()))
        df = df.loc[~dup]

    incomplete = df.isna().any(axis=1)
    if incomplete.any():
        logger.debug("Dropping %d incomplete annotation row(s).", int(incomplete.sum()))
        df = df.loc[~incomplete]

    return df.set_index(id_col)


def align_annotation(clean: pd.DataFrame, samples: Iterable[str]) -> pd.DataFrame:
    """Reorder a cleaned annotation to `samples`; unannotated samples become NaN rows."""
    samples = [str(s) for s in samples]
    aligned = clean.reindex([normalize_sample_id(s) for s in samples])
    aligned.index = pd.Index(samples, name="sample")
    return aligned


def prepare_annotation(annotation: pd.DataFrame, samples: Iterable[str]) -> pd.DataFrame:
    return align_annotation(clean_annotation(annotation), samples)


def _is_numeric_column(values: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(values) and not pd.api.types.is_bool_dtype(values)


def annotation_colors(
    frame: pd.DataFrame,
    annotation_color: Mapping[str, Mapping[object, str]] | None = None,
) -> dict[str, dict[str, str]]:
    """Resolve `{column: {value: color}}` for every annotation column.

    Caller colors win per column; other columns get "tab20" for categorical values
    or a "viridis" scale over the observed range for numeric values.
    """
    annotation_color = annotation_color or {}
    resolved: dict[str, dict[str, str]] = {}
    for col in frame.columns:
        values = frame[col].dropna()
        if col in annotation_color:
            resolved[str(col)] = {str(k): str(v) for k, v in annotation_color[col].items()}
            continue
        if values.empty:
            resolved[str(col)] = {}
            continue
        if _is_numeric_column(values):
            cmap = matplotlib.colormaps[NUMERIC_CMAP]
            lo, hi = float(values.min()), float(values.max())
            norm = mcolors.Normalize(vmin=lo, vmax=hi if hi > lo else lo + 1.0)
            resolved[str(col)] = {
                str(v): mcolors.to_hex(cmap(norm(float(v)))) for v in np.unique(values)
            }
        else:
            cmap = matplotlib.colormaps[CATEGORICAL_CMAP]
            levels = sorted({str(v) for v in values})
            resolved[str(col)] = {
                level: mcolors.to_hex(cmap(i % cmap.N)) for i, level in enumerate(levels)
            }
    return resolved
