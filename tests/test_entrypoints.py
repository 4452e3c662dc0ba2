from __future__ import annotations

import importlib.util
import sys
from pathlib import Path


def _load_script_module(script_name: str):
    root = Path(__file__).resolve().parents[1]
    script_path = root / "scripts" / script_name
    spec = importlib.util.spec_from_file_location(script_name.replace(".py", ""), script_path)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Unable to load script module: {script_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_plot_script_delegates_to_cli(monkeypatch):
    module = _load_script_module("plot_oncostrip.py")
    called: list[list[str]] = []

    def _fake_main(argv=None) -> int:
        called.append(list(sys.argv[1:]))
        return 0

    monkeypatch.setattr(module, "oncostrip_main", _fake_main)
    monkeypatch.setattr(sys, "argv", ["plot_oncostrip.py", "--maf", "x.maf", "--out", "x.png"])

    assert module.main() == 0
    assert called == [["--maf", "x.maf", "--out", "x.png"]]
