import networkx as nx
import pytest

from roadgraph.graph.io import (
    describe_graph,
    graph_to_edgelist,
    load_road_graph,
    parse_road_line,
    parse_route_line,
    read_route_requests,
)
from roadgraph.types.dto import Road, RouteRequest


class TestParseRoadLine:
    def test_valid_line(self):
        assert parse_road_line("A B 5\n") == Road("A", "B", 5)

    def test_any_whitespace_separates_tokens(self):
        assert parse_road_line("  A\tB   12  ") == Road("A", "B", 12)

    def test_extra_tokens_are_ignored(self):
        assert parse_road_line("A B 5 highway") == Road("A", "B", 5)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "\n",
            "   ",
            "A",
            "A B",
            "A B five",
            "A B 5.5",
            "A B -3",
            "A B +5",
            "A B 1_0",
            "A B \u0663",
            "A B 5km",
        ],
    )
    def test_malformed_lines_yield_skip_signal(self, line):
        assert parse_road_line(line) is None

    def test_zero_distance_is_valid(self):
        assert parse_road_line("A B 0") == Road("A", "B", 0)

    def test_leading_zeros_are_valid(self):
        assert parse_road_line("A B 007") == Road("A", "B", 7)


class TestParseRouteLine:
    def test_valid_line(self):
        assert parse_route_line("A C\n") == RouteRequest("A", "C")

    def test_extra_tokens_are_ignored(self):
        assert parse_route_line("A C D") == RouteRequest("A", "C")

    @pytest.mark.parametrize("line", ["", "\n", "A", "  A  "])
    def test_malformed_lines_yield_skip_signal(self, line):
        assert parse_route_line(line) is None


def test_load_skips_malformed_lines():
    g = load_road_graph(["A B 5", "", "garbage", "B C x", "B C 3\n"])

    assert sorted(g.nodes) == ["A", "B", "C"]
    assert g.road_count() == 2


def test_load_registers_destination_only_nodes():
    g = load_road_graph(["A B 5"])

    assert g.has_node("B")
    assert g.roads_from("B") == []


def test_load_freezes_graph_by_default():
    g = load_road_graph(["A B 5"])

    assert nx.is_frozen(g)
    with pytest.raises(nx.NetworkXError):
        g.add_road("C", "D", 1)


def test_load_without_freeze_allows_extension():
    g = load_road_graph(["A B 5"], freeze=False)
    load_road_graph(["B C 3"], graph=g)

    assert g.road_distance("B", "C") == 3
    assert nx.is_frozen(g)


def test_load_logs_skipped_lines(caplog):
    with caplog.at_level("DEBUG", logger="roadgraph"):
        load_road_graph(["A B 5", "bad", "A"])

    assert "Skipped 2 malformed road line(s)" in caplog.text
    assert "2 locations, 1 roads" in caplog.text


def test_read_route_requests_keeps_input_order():
    requests = read_route_requests(["B A", "", "A", "A C", "C B\n"])

    assert requests == [
        RouteRequest("B", "A"),
        RouteRequest("A", "C"),
        RouteRequest("C", "B"),
    ]


def test_graph_to_edgelist_is_sorted_and_reloadable():
    lines = ["B C 3", "A B 5", "A C 10", "A B 2"]
    g = load_road_graph(lines)

    exported = graph_to_edgelist(g)
    assert exported == ["A B 2", "A B 5", "A C 10", "B C 3"]

    reloaded = load_road_graph(exported)
    assert graph_to_edgelist(reloaded) == exported
    assert sorted(reloaded.nodes) == sorted(g.nodes)


def test_graph_to_edgelist_custom_separator():
    g = load_road_graph(["A B 5"])
    assert graph_to_edgelist(g, separator="\t") == ["A\tB\t5"]


def test_describe_graph():
    g = load_road_graph(["B C 3", "A C 10", "A B 5"])

    assert describe_graph(g) == (
        "Node: A\n"
        "Connection 1: B (Distance: 5)\n"
        "Connection 2: C (Distance: 10)\n"
        "\n"
        "Node: B\n"
        "Connection 1: C (Distance: 3)\n"
        "\n"
        "Node: C\n"
        "\n"
    )


def test_describe_empty_graph():
    assert describe_graph(load_road_graph([])) == ""
