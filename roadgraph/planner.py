"""Route request processing.

Runs each request against a loaded road network and writes the rendered
results, in request order, to a single text sink. Classification and text
both come from ``roadgraph.report``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

from roadgraph.algorithms.spf import shortest_paths
from roadgraph.algorithms.types import DistanceTable
from roadgraph.config import ReportConfig
from roadgraph.graph.road_graph import RoadGraph
from roadgraph.logging import get_logger
from roadgraph.model.route import Route, reconstruct_route
from roadgraph.report import locations_known, render, route_status
from roadgraph.types.base import NodeID, RouteStatus
from roadgraph.types.dto import RouteRequest

logger = get_logger(__name__)


@dataclass(frozen=True)
class RouteResult:
    """Outcome of a single route request.

    Attributes:
        start: Requested start location.
        end: Requested end location.
        status: Result category.
        text: Rendered result block.
        route: The reconstructed route when ``status`` is FOUND, else None.
    """

    start: NodeID
    end: NodeID
    status: RouteStatus
    text: str
    route: Optional[Route] = None


def plan_route(
    graph: RoadGraph,
    start: NodeID,
    end: NodeID,
    config: Optional[ReportConfig] = None,
) -> RouteResult:
    """Answer one route request.

    SPF only runs when both locations are in the graph, so requests naming
    unknown locations never touch the engine.

    Args:
        graph: Loaded road network.
        start: Requested start location.
        end: Requested end location.
        config: Report vocabulary; defaults to ``REPORT_CONFIG``.
    """
    table: Optional[DistanceTable] = None
    if locations_known(graph, start, end):
        table = shortest_paths(graph, start)

    status = route_status(start, end, table, graph)
    route: Optional[Route] = None
    if status == RouteStatus.FOUND:
        assert table is not None
        route = reconstruct_route(graph, table, end)

    logger.debug(f"Route request {start} -> {end}: {status.name}")
    return RouteResult(
        start=start,
        end=end,
        status=status,
        text=render(start, end, table, graph, config),
        route=route,
    )


def run_route_requests(
    graph: RoadGraph,
    requests: Iterable[RouteRequest],
    sink: TextIO,
    config: Optional[ReportConfig] = None,
) -> List[RouteResult]:
    """Process requests sequentially and write every result to ``sink``.

    Args:
        graph: Loaded road network.
        requests: Route requests, in the order results must appear.
        sink: Writable text stream receiving one block per request.
        config: Report vocabulary; defaults to ``REPORT_CONFIG``.

    Returns:
        The results, in request order.
    """
    results: List[RouteResult] = []
    for request in requests:
        result = plan_route(graph, request.start, request.end, config)
        sink.write(result.text)
        results.append(result)

    counts = Counter(result.status for result in results)
    logger.info(
        f"Processed {len(results)} route request(s): "
        f"{counts[RouteStatus.FOUND]} found, "
        f"{counts[RouteStatus.UNKNOWN_NODE]} unknown location, "
        f"{counts[RouteStatus.UNREACHABLE]} unreachable"
    )
    return results
