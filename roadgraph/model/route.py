"""Representation of a single reconstructed route.

``reconstruct_route`` walks predecessor links of a ``DistanceTable`` back from
the destination, reverses them, and looks up the length of every hop in the
road graph. The resulting ``Route`` holds the hops and the total distance.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, List, Tuple

from roadgraph.algorithms.types import DistanceTable
from roadgraph.graph.road_graph import RoadGraph
from roadgraph.types.base import Distance, NodeID


@dataclass(frozen=True)
class Hop:
    """One road travelled along a route."""

    source: NodeID
    destination: NodeID
    distance: int


@dataclass(frozen=True)
class Route:
    """A shortest route between two locations.

    Attributes:
        start: Location the route starts at.
        end: Location the route ends at.
        distance: Total distance as computed by SPF.
        hops: Roads travelled, in order. Empty when ``start == end``.
    """

    start: NodeID
    end: NodeID
    distance: Distance
    hops: Tuple[Hop, ...]

    @cached_property
    def nodes(self) -> Tuple[NodeID, ...]:
        """Return every location visited, start and end included."""
        return (self.start,) + tuple(hop.destination for hop in self.hops)

    def __iter__(self) -> Iterator[Hop]:
        return iter(self.hops)

    def __len__(self) -> int:
        """Return the number of hops."""
        return len(self.hops)


def reconstruct_route(graph: RoadGraph, table: DistanceTable, end: NodeID) -> Route:
    """Build the route from ``table.source`` to ``end``.

    Args:
        graph: Graph the table was computed on.
        table: SPF result for the route's start.
        end: Destination node.

    Returns:
        Route: The reconstructed route.

    Raises:
        ValueError: If ``end`` is unreachable, or the predecessor chain does not
            lead back to the table's source.
    """
    if not table.is_reachable(end):
        raise ValueError(f"Node '{end}' is not reachable from '{table.source}'.")

    walked: List[NodeID] = []
    current = end
    while current is not None:
        walked.append(current)
        current = table.predecessor(current)
    walked.reverse()

    if walked[0] != table.source:
        raise ValueError(
            f"Predecessor chain of '{end}' ends at '{walked[0]}', "
            f"not at '{table.source}'."
        )

    hops: List[Hop] = []
    for source, destination in zip(walked, walked[1:]):
        distance = graph.road_distance(source, destination)
        if distance is None:
            raise ValueError(f"No road from '{source}' to '{destination}'.")
        hops.append(Hop(source=source, destination=destination, distance=distance))

    return Route(
        start=table.source,
        end=end,
        distance=table.distance(end),
        hops=tuple(hops),
    )
