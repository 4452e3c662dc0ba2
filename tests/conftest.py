from __future__ import annotations

import pandas as pd
import pytest

from oncostrip.core.types import MutationMatrices

SAMPLES = ["S1", "S2", "S3", "S4", "S5", "S6"]
GENES = ["G1", "G2", "G3", "G4"]


def _matrices(numeric_rows, categorical_rows, genes=None, samples=None) -> MutationMatrices:
    genes = genes or GENES[: len(numeric_rows)]
    samples = samples or SAMPLES[: len(numeric_rows[0])]
    return MutationMatrices(
        numeric=pd.DataFrame(numeric_rows, index=genes, columns=samples),
        categorical=pd.DataFrame(categorical_rows, index=genes, columns=samples),
    )


@pytest.fixture
def make_matrices():
    """Build a `MutationMatrices` pair from nested row lists."""
    return _matrices


@pytest.fixture
def small_mm() -> MutationMatrices:
    numeric = [
        [0, 1, 0, 1, 0, 0],
        [1, 0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 1],
    ]
    categorical = [
        ["", "Missense_Mutation", "", "Missense_Mutation;Amp", "", ""],
        ["Nonsense_Mutation", "", "", "Del", "", ""],
        ["", "", "Frame_Shift_Del", "", "", ""],
        ["", "", "", "", "", "Splice_Site"],
    ]
    return _matrices(numeric, categorical)


@pytest.fixture
def subtype_annotation() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Tumor_Sample_Barcode": ["S1", "S2", "S3", "S4"],
            "Subtype": ["B", "A", "B", "A"],
        }
    )
