import itertools

import pytest

from labgraph.domain.errors import NodeNotFoundError, NoRouteFoundError
from labgraph.graph.traversal import get_route, has_route


def make_letter_graph(graph):
    for label in ["A", "B", "C", "D", "E", "F", "G", "H", "J"]:
        graph.add_node(label)
    for source, target in [
        ("A", "B"),
        ("A", "C"),
        ("C", "E"),
        ("E", "B"),
        ("C", "F"),
        ("B", "J"),
        ("J", "D"),
        ("D", "C"),
    ]:
        graph.add_directed_edge(source, target)
    return graph


def make_numbered_graph(graph):
    for first, second in [
        ("1", "4"),
        ("4", "7"),
        ("4", "2"),
        ("7", "2"),
        ("2", "5"),
        ("2", "3"),
        ("5", "9"),
        ("9", "10"),
    ]:
        graph.add_undirected_edge(first, second)
    return graph


def make_diamond_graph(graph):
    for label in ["A", "V", "C", "D", "E", "F", "G", "H"]:
        graph.add_node(label)
    for source, target in [
        ("A", "G"),
        ("G", "B"),
        ("C", "A"),
        ("C", "E"),
        ("E", "B"),
        ("E", "D"),
        ("D", "F"),
        ("G", "H"),
        ("F", "H"),
        ("B", "F"),
    ]:
        graph.add_directed_edge(source, target)
    return graph


def make_simple_graph(graph):
    for label in ["node 1", "node 2", "node 3", "node 4"]:
        graph.add_node(label)
    graph.add_directed_edge("node 1", "node 2")
    graph.add_directed_edge("node 2", "node 3")
    return graph


def shortest_hops_exhaustive(graph, source, target):
    """Length of the shortest simple path, found by trying every path."""
    best = None

    def explore(current, seen, hops):
        nonlocal best
        if current == target:
            best = hops if best is None else min(best, hops)
            return
        for neighbor in graph.neighbors(current):
            if neighbor not in seen:
                explore(neighbor, seen | {neighbor}, hops + 1)

    explore(source, {source}, 0)
    return best


def is_walk(graph, path):
    return all(
        second in graph.neighbors(first) for first, second in zip(path, path[1:])
    )


class TestHasRoute:
    def test_letter_graph_routes(self, graph):
        make_letter_graph(graph)

        assert has_route(graph, "A", "F")
        assert has_route(graph, "A", "B")
        assert has_route(graph, "A", "C")
        assert has_route(graph, "D", "J")

    def test_letter_graph_isolated_and_sink_nodes(self, graph):
        make_letter_graph(graph)

        assert not has_route(graph, "A", "G")
        assert not has_route(graph, "F", "A")
        assert not has_route(graph, "H", "J")

    def test_start_equals_target(self, graph):
        graph.add_node("A")

        assert has_route(graph, "A", "A")

    def test_respects_edge_direction(self, graph):
        graph.add_directed_edge("node 1", "node 2")

        assert has_route(graph, "node 1", "node 2")
        assert not has_route(graph, "node 2", "node 1")

    def test_terminates_on_cycles(self, graph):
        graph.add_undirected_edge("A", "B")
        graph.add_undirected_edge("B", "C")
        graph.add_directed_edge("C", "A")
        graph.add_node("Z")

        assert not has_route(graph, "A", "Z")

    def test_unknown_start_fails_fast(self, graph):
        graph.add_node("A")

        with pytest.raises(NodeNotFoundError):
            has_route(graph, "missing", "A")

    def test_unknown_target_is_unreachable(self, graph):
        graph.add_node("A")

        assert not has_route(graph, "A", "missing")


class TestGetRoute:
    def test_simple_route(self, graph):
        make_simple_graph(graph)

        assert get_route(graph, "node 1", "node 3") == ["node 1", "node 2", "node 3"]

    def test_letter_graph_shortest_route(self, graph):
        make_letter_graph(graph)

        # A -> B -> J -> D beats the longer A -> C -> E -> B -> J -> D.
        assert get_route(graph, "A", "D") == ["A", "B", "J", "D"]

    def test_undirected_numbered_graph(self, graph):
        make_numbered_graph(graph)

        assert get_route(graph, "1", "10") == ["1", "4", "2", "5", "9", "10"]

    def test_prefers_direct_edge_over_longer_route(self, graph):
        make_diamond_graph(graph)

        assert get_route(graph, "G", "H") == ["G", "H"]

    def test_tied_routes_have_minimal_length(self, graph):
        make_diamond_graph(graph)

        route = get_route(graph, "E", "H")

        assert len(route) == 4
        assert route[0] == "E"
        assert route[-1] == "H"
        assert is_walk(graph, route)

    def test_same_node_returns_single_element_route(self, graph):
        make_diamond_graph(graph)

        assert get_route(graph, "A", "A") == ["A"]

    def test_same_node_with_self_loop(self, graph):
        graph.add_directed_edge("A", "A")

        assert get_route(graph, "A", "A") == ["A"]

    def test_unreachable_node_raises(self, graph):
        make_simple_graph(graph)

        with pytest.raises(NoRouteFoundError) as excinfo:
            get_route(graph, "node 1", "node 4")

        assert excinfo.value.source == "node 1"
        assert excinfo.value.target == "node 4"

    def test_reverse_of_directed_edge_raises(self, graph):
        graph.add_node("node 1")
        graph.add_node("node 2")
        graph.add_directed_edge("node 1", "node 2")

        with pytest.raises(NoRouteFoundError):
            get_route(graph, "node 2", "node 1")

    def test_cycle_back_to_source_does_not_break_route(self, graph):
        graph.add_directed_edge("A", "B")
        graph.add_directed_edge("B", "A")
        graph.add_directed_edge("B", "C")

        assert get_route(graph, "A", "C") == ["A", "B", "C"]

    def test_repeated_calls_return_same_route(self, graph):
        make_numbered_graph(graph)

        first = get_route(graph, "3", "10")
        assert all(get_route(graph, "3", "10") == first for _ in range(5))


@pytest.mark.parametrize(
    "builder", [make_letter_graph, make_numbered_graph, make_diamond_graph]
)
def test_has_route_agrees_with_get_route(graph, builder):
    builder(graph)

    for source, target in itertools.product(graph.all_nodes(), repeat=2):
        if has_route(graph, source, target):
            route = get_route(graph, source, target)
            assert route[0] == source
            assert route[-1] == target
            assert is_walk(graph, route)
        else:
            with pytest.raises(NoRouteFoundError):
                get_route(graph, source, target)


@pytest.mark.parametrize(
    "builder", [make_letter_graph, make_numbered_graph, make_diamond_graph]
)
def test_get_route_is_never_longer_than_exhaustive_search(graph, builder):
    builder(graph)

    for source, target in itertools.product(graph.all_nodes(), repeat=2):
        best = shortest_hops_exhaustive(graph, source, target)
        if best is None:
            continue
        assert len(get_route(graph, source, target)) - 1 == best
