"""Shortest-path algorithms over a RoadGraph."""
