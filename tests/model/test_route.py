import pytest

from roadgraph.algorithms.spf import shortest_paths
from roadgraph.algorithms.types import DistanceTable
from roadgraph.model.route import Hop, Route, reconstruct_route


def test_reconstruct_detour(detour):
    route = reconstruct_route(detour, shortest_paths(detour, "A"), "C")

    assert route == Route(
        start="A",
        end="C",
        distance=8,
        hops=(Hop("A", "B", 5), Hop("B", "C", 3)),
    )
    assert route.nodes == ("A", "B", "C")
    assert len(route) == 2


def test_hop_distance_uses_lightest_parallel_road(parallel_roads):
    route = reconstruct_route(parallel_roads, shortest_paths(parallel_roads, "A"), "C")

    assert [hop.distance for hop in route] == [2, 1]
    assert route.distance == sum(hop.distance for hop in route)


def test_start_equals_end_has_no_hops(detour):
    route = reconstruct_route(detour, shortest_paths(detour, "B"), "B")

    assert route.distance == 0
    assert route.hops == ()
    assert route.nodes == ("B",)
    assert len(route) == 0


def test_hop_distances_sum_to_total(mesh):
    table = shortest_paths(mesh, "A")
    for end in table.reachable_nodes():
        route = reconstruct_route(mesh, table, end)
        assert route.nodes[0] == "A"
        assert route.nodes[-1] == end
        assert sum(hop.distance for hop in route) == table.distance(end)


def test_unreachable_end_raises(disconnected):
    table = shortest_paths(disconnected, "A")

    with pytest.raises(ValueError, match="not reachable"):
        reconstruct_route(disconnected, table, "Y")


def test_broken_predecessor_chain_raises(detour):
    table = DistanceTable(
        source="A",
        distances={"A": 0, "B": 5, "C": 8},
        predecessors={"A": None, "B": None, "C": "B"},
    )

    with pytest.raises(ValueError, match="ends at 'B'"):
        reconstruct_route(detour, table, "C")
