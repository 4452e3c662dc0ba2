"""Typed containers for oncostrip inputs and resolved layouts."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd


@dataclass(frozen=True)
class MutationMatrices:
    """Parallel gene x sample matrices describing one cohort.

    - `numeric`: mutation counts (0 = not mutated), rows ordered most-mutated first.
    - `categorical`: mutation-category labels, `""` for no call, `"A;B"` for multi-hit.
    """

    numeric: pd.DataFrame
    categorical: pd.DataFrame

    @property
    def genes(self) -> list[str]:
        return [str(g) for g in self.numeric.index]

    @property
    def samples(self) -> list[str]:
        return [str(s) for s in self.numeric.columns]


@dataclass(frozen=True)
class CellPaint:
    """One rectangle painted inside a matrix cell."""

    color: str
    height_frac: float = 1.0


@dataclass(frozen=True)
class OncostripLayout:
    """Draw-ready state produced by `build_oncostrip_layout`."""

    categorical: pd.DataFrame
    numeric: pd.DataFrame
    color_map: dict[str, str]
    legend: list[tuple[str, str]]
    percentages: list[str]
    annotation: pd.DataFrame | None = None
    annotation_colors: dict[str, dict[str, str]] = field(default_factory=dict)
    show_sample_names: bool = False

    @property
    def genes(self) -> list[str]:
        return [str(g) for g in self.categorical.index]

    @property
    def samples(self) -> list[str]:
        return [str(s) for s in self.categorical.columns]
