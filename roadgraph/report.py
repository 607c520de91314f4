"""Text rendering of route results.

Every result is a block that ends with a blank line:

    Route: A --> C (8 km):
    A --> B 5 km
    B --> C 3 km

Unknown locations and unreachable destinations get a one-line header with the
matching message instead of hop lines.
"""

from __future__ import annotations

from typing import List, Optional

from roadgraph.algorithms.types import DistanceTable
from roadgraph.config import REPORT_CONFIG, ReportConfig
from roadgraph.graph.road_graph import RoadGraph
from roadgraph.model.route import Route, reconstruct_route
from roadgraph.types.base import NodeID, RouteStatus


def _header(start: NodeID, end: NodeID, config: ReportConfig) -> str:
    return f"{config.header_prefix} {start}{config.arrow}{end}"


def format_route(route: Route, config: Optional[ReportConfig] = None) -> str:
    """Return the full report block for a found route."""
    config = config or REPORT_CONFIG
    lines: List[str] = [
        f"{_header(route.start, route.end, config)} "
        f"({config.format_distance(route.distance)}):"
    ]
    for hop in route:
        lines.append(
            f"{hop.source}{config.arrow}{hop.destination} "
            f"{config.format_distance(hop.distance)}"
        )
    return "\n".join(lines) + "\n\n"


def format_no_connection(
    start: NodeID, end: NodeID, config: Optional[ReportConfig] = None
) -> str:
    """Return the block for a request naming a location outside the network."""
    config = config or REPORT_CONFIG
    return f"{_header(start, end, config)} ({config.no_connection_text})\n\n"


def format_no_route(
    start: NodeID, end: NodeID, config: Optional[ReportConfig] = None
) -> str:
    """Return the block for a request whose destination cannot be reached."""
    config = config or REPORT_CONFIG
    return f"{_header(start, end, config)} ({config.no_route_text})\n\n"


def locations_known(graph: RoadGraph, start: NodeID, end: NodeID) -> bool:
    """Return True when both locations are part of the road network."""
    return graph.has_node(start) and graph.has_node(end)


def route_status(
    start: NodeID,
    end: NodeID,
    table: Optional[DistanceTable],
    graph: RoadGraph,
) -> RouteStatus:
    """Classify one route request.

    The unknown-location check runs first; only then is reachability checked,
    so ``table`` may be None when a location is unknown.

    Raises:
        ValueError: If both locations are known but no table is given.
    """
    if not locations_known(graph, start, end):
        return RouteStatus.UNKNOWN_NODE
    if table is None:
        raise ValueError(f"No distance table given for known route {start} -> {end}.")
    if not table.is_reachable(end):
        return RouteStatus.UNREACHABLE
    return RouteStatus.FOUND


def render(
    start: NodeID,
    end: NodeID,
    table: Optional[DistanceTable],
    graph: RoadGraph,
    config: Optional[ReportConfig] = None,
) -> str:
    """Render the result of one route request.

    Args:
        start: Requested start location.
        end: Requested end location.
        table: SPF result computed from ``start``; may be None when either
            location is unknown.
        graph: Graph the table was computed on.
        config: Report vocabulary; defaults to ``REPORT_CONFIG``.

    Returns:
        The rendered block, terminated by a blank line.
    """
    status = route_status(start, end, table, graph)
    if status == RouteStatus.UNKNOWN_NODE:
        return format_no_connection(start, end, config)
    if status == RouteStatus.UNREACHABLE:
        return format_no_route(start, end, config)
    assert table is not None
    return format_route(reconstruct_route(graph, table, end), config)
