"""Mutation-category color tables and legend bookkeeping."""

from __future__ import annotations

from typing import Iterable, Mapping

import matplotlib
import matplotlib.colors as mcolors
import pandas as pd

NO_MUTATION = "xxx"
BACKGROUND_COLOR = "#CCCCCC"
CNV_CATEGORIES: tuple[str, ...] = ("Amp", "Del")
CATEGORY_SEPARATOR = ";"

VARIANT_CLASSES: tuple[str, ...] = (
    "Nonstop_Mutation",
    "Frame_Shift_Del",
    "IGR",
    "Missense_Mutation",
    "Silent",
    "Nonsense_Mutation",
    "RNA",
    "Splice_Site",
    "Intron",
    "Frame_Shift_Ins",
    "Nonstop_Mutation",
    "In_Frame_Del",
    "ITD",
    "In_Frame_Ins",
    "Translation_Start_Site",
    "Multi_Hit",
    "Amp",
    "Del",
)


def _default_palette() -> list[str]:
    paired = [mcolors.to_hex(c) for c in matplotlib.colormaps["Paired"].colors]
    spectral = matplotlib.colormaps["Spectral"].resampled(11)
    return paired + [mcolors.to_hex(spectral(i)) for i in range(3)] + [
        "black",
        "violet",
        "royalblue",
    ]


def _build_default_colors() -> dict[str, str]:
    colors: dict[str, str] = {}
    for name, color in zip(VARIANT_CLASSES, _default_palette()):
        # first assignment wins for repeated class names
        colors.setdefault(name, color)
    return colors


DEFAULT_COLORS: dict[str, str] = _build_default_colors()


def resolve_colors(colors: Mapping[str, str] | None = None) -> dict[str, str]:
    """Category -> color map including the no-mutation placeholder."""
    base = dict(DEFAULT_COLORS) if colors is None else {str(k): str(v) for k, v in colors.items()}
    base[NO_MUTATION] = BACKGROUND_COLOR
    return base


def split_categories(label: object) -> list[str]:
    """Parse a cell label into its categories; blank and placeholder cells are empty."""
    if label is None or (not isinstance(label, str) and pd.isna(label)):
        return []
    text = str(label).strip()
    if text in ("", NO_MUTATION):
        return []
    return [part.strip() for part in text.split(CATEGORY_SEPARATOR) if part.strip()]


def present_categories(categorical: pd.DataFrame) -> list[str]:
    """Distinct categories in first-seen order (column-major), placeholder excluded."""
    seen: dict[str, None] = {}
    for col in categorical.columns:
        for label in categorical[col]:
            for cat in split_categories(label):
                if cat != NO_MUTATION:
                    seen.setdefault(cat, None)
    return list(seen)


def legend_entries(
    categorical: pd.DataFrame, color_map: Mapping[str, str]
) -> list[tuple[str, str]]:
    """`(label, color)` for categories both present in the matrix and color-mapped."""
    return [
        (cat, color_map[cat])
        for cat in present_categories(categorical)
        if cat in color_map and cat != NO_MUTATION
    ]


def is_cnv(category: str, cnv_categories: Iterable[str] = CNV_CATEGORIES) -> bool:
    return category in tuple(cnv_categories)
