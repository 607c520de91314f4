"""Configuration classes for roadgraph components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """Vocabulary used when rendering route results as text."""

    # Unit appended to every distance
    unit: str = "km"

    # Separator placed between two node names
    arrow: str = " --> "

    # Leading word of every result header
    header_prefix: str = "Route:"

    # Shown when the start or end node is not part of the network
    no_connection_text: str = "No connection information"

    # Shown when both nodes exist but no path joins them
    no_route_text: str = "Route cannot be determined"

    def format_distance(self, distance: int) -> str:
        """Return ``distance`` followed by the configured unit."""
        return f"{distance} {self.unit}"


# Global configuration instance
REPORT_CONFIG = ReportConfig()
