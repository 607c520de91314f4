"""Base aliases and enums shared by the graph, engine and planner."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Node identifier: an opaque, case-sensitive location name.
NodeID = str

#: Road distance. Loaded distances are ints; ``INFINITY`` is a float.
Distance = Union[int, float]

#: Distance of a node that cannot be reached from the query start.
INFINITY: float = math.inf


class RouteStatus(IntEnum):
    """Outcome category of a single route request."""

    #: A route exists and was reconstructed.
    FOUND = 1
    #: The start or end node does not appear in the road network.
    UNKNOWN_NODE = 2
    #: Both nodes exist but the end cannot be reached from the start.
    UNREACHABLE = 3
