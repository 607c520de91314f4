"""Graph primitives and helpers.

This package provides the road network type `RoadGraph` and the text
loader/exporter helpers in `io`.
"""

from roadgraph.graph.road_graph import RoadGraph

__all__ = ["RoadGraph"]
