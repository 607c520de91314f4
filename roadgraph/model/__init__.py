"""Route model built from shortest-path results."""

from roadgraph.model.route import Hop, Route, reconstruct_route

__all__ = ["Hop", "Route", "reconstruct_route"]
