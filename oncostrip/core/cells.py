"""Per-cell paint rule for oncostrip matrices."""

from __future__ import annotations

from typing import Mapping

from oncostrip.core.colors import BACKGROUND_COLOR, NO_MUTATION, is_cnv, split_categories
from oncostrip.core.types import CellPaint

CNV_BAR_FRACTION = 0.35


def _category_paint(
    category: str, color_map: Mapping[str, str], cnv_fraction: float
) -> CellPaint | None:
    color = color_map.get(category)
    if color is None:
        return None
    if is_cnv(category):
        return CellPaint(color=color, height_frac=cnv_fraction)
    return CellPaint(color=color, height_frac=1.0)


def cell_paints(
    label: object,
    color_map: Mapping[str, str],
    *,
    cnv_fraction: float = CNV_BAR_FRACTION,
) -> list[CellPaint]:
    """Ordered rectangles for one cell, background first.

    Single calls overlay one fill on the background. Multi-hit calls paint every
    category without re-filling the background between them; full-height fills
    go before copy-number bars so bars stay visible.
    """
    background = CellPaint(color=color_map.get(NO_MUTATION, BACKGROUND_COLOR))
    categories = split_categories(label)
    paints = [background]
    if not categories:
        return paints

    overlays = [_category_paint(cat, color_map, cnv_fraction) for cat in categories]
    overlays = [p for p in overlays if p is not None]
    if len(categories) > 1:
        overlays = sorted(overlays, key=lambda p: p.height_frac < 1.0)
    paints.extend(overlays)
    return paints
