"""roadgraph: shortest routes in a directed road network.

Primary API:
    load_road_graph() - Build a frozen RoadGraph from text lines
    shortest_paths() - Dijkstra SPF from one location
    plan_route() - Answer a single route request
    run_route_requests() - Answer a batch and write rendered results

Example:
    from roadgraph import load_road_graph, plan_route

    graph = load_road_graph(["A B 5", "B C 3", "A C 10"])
    result = plan_route(graph, "A", "C")
    print(result.text)
"""

from __future__ import annotations

from roadgraph import cli, logging
from roadgraph._version import __version__
from roadgraph.algorithms.spf import shortest_paths
from roadgraph.algorithms.types import DistanceTable
from roadgraph.config import REPORT_CONFIG, ReportConfig
from roadgraph.graph.io import load_road_graph, read_route_requests
from roadgraph.graph.road_graph import RoadGraph
from roadgraph.model.route import Hop, Route, reconstruct_route
from roadgraph.planner import RouteResult, plan_route, run_route_requests
from roadgraph.report import render
from roadgraph.types.base import INFINITY, RouteStatus
from roadgraph.types.dto import Road, RouteRequest

__all__ = [
    # Version
    "__version__",
    # Graph
    "RoadGraph",
    "Road",
    "load_road_graph",
    "read_route_requests",
    # Engine
    "shortest_paths",
    "DistanceTable",
    "INFINITY",
    # Routes and results
    "Hop",
    "Route",
    "reconstruct_route",
    "RouteRequest",
    "RouteResult",
    "RouteStatus",
    "plan_route",
    "run_route_requests",
    "render",
    # Configuration
    "ReportConfig",
    "REPORT_CONFIG",
    # Utilities
    "cli",
    "logging",
]
