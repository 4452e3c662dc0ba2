"""Command-line interface for rendering oncostrips from files."""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import pandas as pd

from oncostrip.config import OncostripConfig, config_from_dict, load_json_config
from oncostrip.core.maf import build_mutation_matrices, read_maf
from oncostrip.core.types import MutationMatrices
from oncostrip.plotting.strip import plot_oncostrip_to_file
from oncostrip.plotting.styles import apply_plot_style, plot_style_dict
from oncostrip.utils import read_matrix_tsv, setup_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a mutation oncostrip")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--maf", help="MAF file (.maf or .maf.gz)")
    source.add_argument("--numeric", help="Gene x sample numeric matrix (TSV)")
    parser.add_argument("--categorical", help="Gene x sample label matrix (TSV)")
    parser.add_argument("--annotation", help="Sample annotation table (TSV)")
    parser.add_argument("--config", help="JSON config with drawing options")
    parser.add_argument("--genes", nargs="+", default=None, help="Genes to draw")
    parser.add_argument("--top", type=int, default=None, help="Number of top genes")
    parser.add_argument("--no-sort", action="store_true", help="Keep input sample order")
    parser.add_argument(
        "--sort-by-annotation", action="store_true", help="Group samples by annotation"
    )
    parser.add_argument(
        "--keep-non-mutated", action="store_true", help="Keep samples without mutations"
    )
    parser.add_argument(
        "--show-sample-names", action="store_true", help="Label sample columns"
    )
    parser.add_argument("--out", required=True, help="Output PNG path")
    parser.add_argument("--log", default=None, help="Log file (default: next to --out)")
    return parser


def _load_matrices(args: argparse.Namespace, cfg: OncostripConfig) -> MutationMatrices:
    if args.maf:
        return build_mutation_matrices(
            read_maf(args.maf), collapse_multi_hit=cfg.collapse_multi_hit
        )
    if not args.categorical:
        raise ValueError("--categorical is required together with --numeric.")
    return MutationMatrices(
        numeric=read_matrix_tsv(args.numeric),
        categorical=read_matrix_tsv(args.categorical, as_text=True),
    )


def _merge_cli_options(cfg: OncostripConfig, args: argparse.Namespace) -> OncostripConfig:
    updates: dict[str, object] = {}
    if args.genes is not None:
        updates["genes"] = list(args.genes)
    if args.top is not None:
        updates["top"] = int(args.top)
    if args.no_sort:
        updates["sort"] = False
    if args.sort_by_annotation:
        updates["sort_by_annotation"] = True
    if args.keep_non_mutated:
        updates["remove_non_mutated"] = False
    if args.show_sample_names:
        updates["show_sample_names"] = True
    return replace(cfg, **updates)


def write_run_metadata(
    path: Path, cfg: OncostripConfig, mm: MutationMatrices, out_png: Path
) -> Path:
    """Record drawing options, plot style and library versions next to the figure."""
    payload = {
        "collapse_multi_hit": cfg.collapse_multi_hit,
        "figure": out_png.name,
        "n_genes_input": int(mm.numeric.shape[0]),
        "n_samples_input": int(mm.numeric.shape[1]),
        "options": cfg.draw_kwargs(),
        "style": plot_style_dict(),
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return path


def oncostrip_main(argv: Iterable[str] | None = None) -> int:
    """Render an oncostrip PNG.

    Args:
        argv: Command-line arguments (if None, uses sys.argv).

    Returns:
        Exit code (0 for success).
    """
    args = _build_parser().parse_args(list(argv) if argv is not None else None)
    out_png = Path(args.out)
    log_path = Path(args.log) if args.log else out_png.with_suffix(".log")
    logger = setup_logger(log_path, "oncostrip")

    cfg = config_from_dict(load_json_config(args.config)) if args.config else OncostripConfig()
    cfg = _merge_cli_options(cfg, args)

    mm = _load_matrices(args, cfg)
    annotation = pd.read_csv(args.annotation, sep="\t") if args.annotation else None
    logger.info(
        "Loaded %d gene(s) x %d sample(s).", mm.numeric.shape[0], mm.numeric.shape[1]
    )

    apply_plot_style()
    plot_oncostrip_to_file(mm, out_png, annotation=annotation, **cfg.draw_kwargs())
    meta_path = write_run_metadata(out_png.with_suffix(".json"), cfg, mm, out_png)
    logger.info("Wrote %s and %s", out_png.as_posix(), meta_path.name)
    return 0


def main() -> int:
    return oncostrip_main()


if __name__ == "__main__":
    raise SystemExit(main())
