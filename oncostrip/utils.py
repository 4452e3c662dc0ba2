"""Shared utilities for oncostrip workflows."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pandas as pd


def ensure_dir(path: str) -> None:
    """Create a directory (and parents) if it does not exist."""
    if path == "":
        return
    os.makedirs(path, exist_ok=True)


def setup_logger(log_path: Path, logger_name: str) -> logging.Logger:
    ensure_dir(log_path.parent.as_posix())
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    fh = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    fh.setFormatter(formatter)
    logger.addHandler(fh)
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    return logger


def read_matrix_tsv(path: str | Path, as_text: bool = False) -> pd.DataFrame:
    """Read a gene x sample TSV with gene names in the first column.

    `as_text` keeps blank cells as empty strings (categorical matrices).
    """
    matrix_path = Path(path)
    if not matrix_path.exists():
        raise FileNotFoundError(f"Input file '{matrix_path}' not found.")
    if as_text:
        return pd.read_csv(
            matrix_path, sep="\t", index_col=0, dtype=str, keep_default_na=False
        )
    return pd.read_csv(matrix_path, sep="\t", index_col=0)
