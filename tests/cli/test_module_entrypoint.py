import runpy
import sys
from pathlib import Path


def test_python_dash_m_entrypoint(tmp_path: Path, monkeypatch) -> None:
    roads = tmp_path / "roads.txt"
    routes = tmp_path / "routes.txt"
    results = tmp_path / "result.txt"
    roads.write_text("A B 5\nB C 3\nA C 10\n")
    routes.write_text("A C\n")

    monkeypatch.setattr(
        sys, "argv", ["roadgraph", str(roads), str(routes), str(results)]
    )
    runpy.run_module("roadgraph", run_name="__main__")

    assert results.read_text().startswith("Route: A --> C (8 km):\n")
