"""Small immutable records exchanged between the loader and the planner."""

from __future__ import annotations

from dataclasses import dataclass

from roadgraph.types.base import NodeID


@dataclass(frozen=True)
class Road:
    """One parsed line of the road network input.

    Attributes:
        source: Location the road starts at.
        destination: Location the road leads to.
        distance: Non-negative road length.
    """

    source: NodeID
    destination: NodeID
    distance: int


@dataclass(frozen=True)
class RouteRequest:
    """One parsed line of the route request input.

    Attributes:
        start: Location the route starts at.
        end: Location the route must reach.
    """

    start: NodeID
    end: NodeID
