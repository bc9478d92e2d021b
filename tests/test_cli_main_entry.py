from __future__ import annotations

import runpy
from pathlib import Path

import hoiola_app.__main__ as cli_main


def test_main_without_args_takes_snapshot(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_main.main([])
    assert rc == 0
    assert calls == [[]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_main.main(["--help"])
    assert rc == 0
    assert calls == [["--help"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = Path(__file__).resolve().parents[1] / "apps" / "cli" / "hoiola_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
