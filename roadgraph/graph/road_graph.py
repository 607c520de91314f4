"""Directed multigraph of roads between named locations.

`RoadGraph` extends `networkx.MultiDiGraph` with road-oriented helpers. Every
edge carries its length under the ``distance`` attribute. Parallel roads
between the same pair of locations are kept as separate edges.
"""

from __future__ import annotations

from typing import Hashable, List, Optional, Tuple

import networkx as nx

from roadgraph.types.base import NodeID

EdgeID = Hashable

#: Outgoing road as seen from its source: ``(destination, distance)``.
RoadTuple = Tuple[NodeID, int]

DISTANCE_ATTR = "distance"


class RoadGraph(nx.MultiDiGraph):
    """A directed multigraph whose edges are weighted roads.

    Endpoints are created on demand: adding a road guarantees that both
    locations exist as nodes, even if the destination has no outgoing roads
    of its own.

    Inherits from:
        networkx.MultiDiGraph
    """

    def add_road(self, source: NodeID, destination: NodeID, distance: int) -> EdgeID:
        """Add a directed road from ``source`` to ``destination``.

        Args:
            source: Location the road starts at.
            destination: Location the road leads to.
            distance: Non-negative road length.

        Returns:
            EdgeID: The key networkx assigned to the new parallel edge.

        Raises:
            networkx.NetworkXError: If the graph has been frozen.
        """
        return self.add_edge(source, destination, **{DISTANCE_ATTR: distance})

    def roads_from(self, node: NodeID) -> List[RoadTuple]:
        """Return every outgoing road of ``node``.

        Parallel roads are all included. The list is ordered by destination and
        then by distance so iteration order never depends on input line order.

        Args:
            node: Location to look up.

        Returns:
            List[RoadTuple]: ``(destination, distance)`` pairs, or an empty list
            when the node is unknown or has no outgoing roads.
        """
        if node not in self._succ:
            return []
        return sorted(
            (destination, attr[DISTANCE_ATTR])
            for destination, edges_map in self._succ[node].items()
            for attr in edges_map.values()
        )

    def road_distance(self, source: NodeID, destination: NodeID) -> Optional[int]:
        """Return the length of the first ``source -> destination`` road.

        Roads are matched in ``roads_from`` order, so with parallel roads the
        shortest one is returned.

        Returns:
            Optional[int]: The distance, or None when no such road exists.
        """
        for neighbor, distance in self.roads_from(source):
            if neighbor == destination:
                return distance
        return None

    def road_count(self) -> int:
        """Return the number of roads, parallel roads included."""
        return self.number_of_edges()
