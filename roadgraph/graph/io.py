"""Text input/output for road networks and route requests.

Road lines carry ``<source> <destination> <distance>``; route request lines
carry ``<start> <end>``. Tokens are separated by any whitespace. Lines that do
not yield the required fields are skipped: the parsers return ``None`` as a
skip signal instead of raising.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import networkx as nx

from roadgraph.graph.road_graph import RoadGraph
from roadgraph.logging import get_logger
from roadgraph.types.dto import Road, RouteRequest

logger = get_logger(__name__)


def parse_road_line(line: str) -> Optional[Road]:
    """Parse one road network line.

    Only the first three tokens are read; anything after them is ignored.

    Args:
        line: Raw input line, trailing newline allowed.

    Returns:
        The parsed ``Road``, or None when the line has fewer than three tokens
        or the distance is not a plain run of ASCII digits (signs, underscores,
        decimal points and non-ASCII digits are all rejected).
    """
    tokens = line.split()
    if len(tokens) < 3:
        return None

    source, destination, raw_distance = tokens[:3]
    if not (raw_distance.isascii() and raw_distance.isdigit()):
        return None

    return Road(source=source, destination=destination, distance=int(raw_distance))


def parse_route_line(line: str) -> Optional[RouteRequest]:
    """Parse one route request line.

    Returns:
        The parsed ``RouteRequest``, or None when the line has fewer than two
        tokens.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None
    return RouteRequest(start=tokens[0], end=tokens[1])


def load_road_graph(
    lines: Iterable[str],
    graph: Optional[RoadGraph] = None,
    freeze: bool = True,
) -> RoadGraph:
    """Build (or extend) a ``RoadGraph`` from road network lines.

    Args:
        lines: An iterable of strings, each describing one road.
        graph: An existing, unfrozen RoadGraph to update; if None, a new graph
            is created.
        freeze: If True, freeze the graph with ``networkx.freeze`` once all
            lines are loaded so later mutation attempts raise.

    Returns:
        The populated RoadGraph.
    """
    if graph is None:
        graph = RoadGraph()

    loaded = 0
    skipped = 0
    for line in lines:
        road = parse_road_line(line)
        if road is None:
            skipped += 1
            continue
        graph.add_road(road.source, road.destination, road.distance)
        loaded += 1

    if skipped:
        logger.debug(f"Skipped {skipped} malformed road line(s)")
    logger.info(
        f"Loaded road network: {graph.number_of_nodes()} locations, "
        f"{loaded} roads"
    )

    if freeze:
        nx.freeze(graph)
    return graph


def read_route_requests(lines: Iterable[str]) -> List[RouteRequest]:
    """Return every well-formed route request, in input order."""
    requests: List[RouteRequest] = []
    skipped = 0
    for line in lines:
        request = parse_route_line(line)
        if request is None:
            skipped += 1
            continue
        requests.append(request)

    if skipped:
        logger.debug(f"Skipped {skipped} malformed route request line(s)")
    return requests


def graph_to_edgelist(graph: RoadGraph, separator: str = " ") -> List[str]:
    """Convert a RoadGraph into road network lines.

    Each parallel road becomes its own line. Lines are sorted by source, then
    destination, then distance, so the export is stable and can be fed back
    into ``load_road_graph``.

    Args:
        graph: The RoadGraph to export.
        separator: The string used to join tokens (default is a space).

    Returns:
        A list of ``<source> <destination> <distance>`` strings.
    """
    lines: List[str] = []
    for source in sorted(graph.nodes):
        for destination, distance in graph.roads_from(source):
            lines.append(separator.join((source, destination, str(distance))))
    return lines


def describe_graph(graph: RoadGraph) -> str:
    """Return a human-readable listing of every location and its roads.

    Locations are listed in sorted order. Each outgoing road is numbered from 1
    and every location block ends with a blank line.
    """
    blocks: List[str] = []
    for node in sorted(graph.nodes):
        lines = [f"Node: {node}"]
        for counter, (destination, distance) in enumerate(graph.roads_from(node), 1):
            lines.append(f"Connection {counter}: {destination} (Distance: {distance})")
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)
