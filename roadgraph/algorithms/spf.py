"""Shortest-path-first (SPF) over a RoadGraph.

Implements Dijkstra's algorithm with a binary-heap frontier. Frontier entries
are ``(distance, node)`` tuples, so entries with equal distance pop in
lexicographic order of the node name. This makes predecessor choice, and hence
every rendered route, reproducible across runs.

Notes:
    There is no decrease-key. An improved distance pushes a new entry and the
    superseded one stays in the heap; it is skipped when popped because its
    distance no longer matches the node's best.
"""

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from roadgraph.algorithms.types import DistanceTable
from roadgraph.graph.road_graph import RoadGraph
from roadgraph.logging import get_logger
from roadgraph.types.base import INFINITY, Distance, NodeID

logger = get_logger(__name__)


def shortest_paths(graph: RoadGraph, start: NodeID) -> DistanceTable:
    """Compute shortest distances from ``start`` to every node of ``graph``.

    Args:
        graph: Road network with non-negative distances.
        start: Source node. If it is not in the graph the search stops at once
            and every node is reported unreachable.

    Returns:
        DistanceTable covering every node of the graph. Reachable nodes have a
        finite distance and a predecessor chain back to ``start``.
    """
    distances: Dict[NodeID, Distance] = {node: INFINITY for node in graph.nodes}
    predecessors: Dict[NodeID, Optional[NodeID]] = {node: None for node in graph.nodes}
    if start in graph:
        distances[start] = 0
    min_pq: List[Tuple[Distance, NodeID]] = [(0, start)]

    while min_pq:
        current_dist, node_id = heappop(min_pq)
        if node_id not in graph:
            logger.debug(f"Start node '{node_id}' is not in the road network")
            break

        # Superseded entry: a shorter path was already recorded and expanded
        if current_dist > distances[node_id]:
            continue

        for neighbor_id, distance in graph.roads_from(node_id):
            candidate = distances[node_id] + distance
            if candidate < distances[neighbor_id]:
                distances[neighbor_id] = candidate
                predecessors[neighbor_id] = node_id
                heappush(min_pq, (candidate, neighbor_id))

    return DistanceTable(source=start, distances=distances, predecessors=predecessors)
