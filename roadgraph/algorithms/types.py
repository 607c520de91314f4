"""Types and data structures for shortest-path results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from roadgraph.types.base import INFINITY, Distance, NodeID


@dataclass(frozen=True)
class DistanceTable:
    """Best distances and predecessors from one source, as computed by SPF.

    The table is built fresh for every query and covers every node of the
    graph it was computed on.

    Attributes:
        source: Node the distances are measured from.
        distances: Best known distance per node; ``INFINITY`` when unreachable.
        predecessors: Previous node on the best path; None for the source and
            for unreachable nodes.
    """

    source: NodeID
    distances: Dict[NodeID, Distance]
    predecessors: Dict[NodeID, Optional[NodeID]]

    def distance(self, node: NodeID) -> Distance:
        """Return the distance to ``node``; nodes missing from the table are
        unreachable."""
        return self.distances.get(node, INFINITY)

    def predecessor(self, node: NodeID) -> Optional[NodeID]:
        return self.predecessors.get(node)

    def is_reachable(self, node: NodeID) -> bool:
        return self.distance(node) != INFINITY

    def reachable_nodes(self) -> List[NodeID]:
        """Return reachable nodes ordered by distance, then by name."""
        return sorted(
            (node for node, dist in self.distances.items() if dist != INFINITY),
            key=lambda node: (self.distances[node], node),
        )
