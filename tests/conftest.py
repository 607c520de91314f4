"""Shared road network fixtures."""

from __future__ import annotations

import pytest

from roadgraph.graph.io import load_road_graph


@pytest.fixture
def detour():
    #        [5]      [3]
    #  A───────►B───────►C
    #  │                 ▲
    #  └─────────────────┘
    #          [10]
    return load_road_graph(["A B 5", "B C 3", "A C 10"])


@pytest.fixture
def square():
    # Two equal-cost routes A->C: via B and via D.
    #  A──[1]──►B──[1]──►C
    #  │                 ▲
    #  └─[1]──►D──[1]────┘
    return load_road_graph(["A D 1", "D C 1", "A B 1", "B C 1"])


@pytest.fixture
def parallel_roads():
    # Three parallel A->B roads plus a direct A->C road.
    return load_road_graph(["A B 7", "A B 2", "A B 4", "B C 1", "A C 9"])


@pytest.fixture
def disconnected():
    # X is only ever a destination; Y and Z form a separate island.
    return load_road_graph(["A B 1", "B X 2", "Y Z 4"])


@pytest.fixture
def mesh():
    # Small mesh with cycles and zero-length roads.
    return load_road_graph(
        [
            "A B 4",
            "A C 1",
            "C B 2",
            "B D 5",
            "C D 8",
            "C E 10",
            "D E 2",
            "E D 0",
            "D F 6",
            "E F 2",
            "F A 3",
            "B A 0",
        ]
    )
