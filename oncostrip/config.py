"""Configuration loading utilities for oncostrip runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class OncostripConfig:
    """Drawing options shared by the CLI and config files."""

    genes: list[str] | None = None
    top: int = 5
    sort: bool = True
    sort_by_annotation: bool = False
    sort_columns: list[str] | None = None
    remove_non_mutated: bool = True
    show_sample_names: bool = False
    colors: dict[str, str] | None = None
    annotation_color: dict[str, dict[str, str]] | None = None
    collapse_multi_hit: bool = False

    def draw_kwargs(self) -> dict[str, Any]:
        return {
            "genes": self.genes,
            "top": self.top,
            "sort": self.sort,
            "sort_by_annotation": self.sort_by_annotation,
            "sort_columns": self.sort_columns,
            "remove_non_mutated": self.remove_non_mutated,
            "show_sample_names": self.show_sample_names,
            "colors": self.colors,
            "annotation_color": self.annotation_color,
        }


def load_json_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a config from a JSON file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if config_path.suffix.lower() != ".json":
        raise ValueError(
            f"Unsupported config format for '{config_path}'. Use a .json config file."
        )

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"Invalid JSON in config '{config_path}' at line {exc.lineno}, "
            f"column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid config root in '{config_path}': expected JSON object, got {type(data).__name__}."
        )
    return data


def config_from_dict(data: dict[str, Any]) -> OncostripConfig:
    """Build an `OncostripConfig`; unknown keys are rejected."""
    known = {f.name for f in fields(OncostripConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown oncostrip config key(s): {', '.join(unknown)}")
    top = data.get("top", 5)
    if not isinstance(top, int) or isinstance(top, bool):
        raise ValueError(f"Config 'top' must be an integer, got {top!r}.")
    return OncostripConfig(**data)
