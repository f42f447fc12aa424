from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

import cli.main

ROOT = Path(__file__).resolve().parents[1]


def _load_root_main():
    spec = importlib.util.spec_from_file_location("openclaw_dev_main", ROOT / "main.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_dev_entry_point_runs_the_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(cli.main, "run", lambda: calls.append("run"))
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p != str(ROOT / "src")])

    module = _load_root_main()
    module.main()

    assert calls == ["run"]
    assert sys.path[0] == str(ROOT / "src")
    assert module.SRC_DIR == ROOT / "src"
