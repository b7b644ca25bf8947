"""Tests for the Graph / Node / Edge collaborators."""
import pytest

from graph import Edge, Graph, Node


def _graph():
    return Graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "D", 5), ("A", "C", 2), ("C", "D", 2)],
    )


def test_edges_are_undirected():
    g = _graph()
    assert sorted(g.neighbors("A")) == [("B", 1.0), ("C", 2.0)]
    assert sorted(g.neighbors("D")) == [("B", 5.0), ("C", 2.0)]


def test_edge_get_other():
    a, b, c = Node("A"), Node("B"), Node("C")
    edge = Edge(a, b, 3.0)
    assert edge.get_other(a) is b
    assert edge.get_other(b) is a
    assert edge.length == 3.0
    with pytest.raises(ValueError):
        edge.get_other(c)


def test_node_get_edge():
    g = _graph()
    edge = g.node("A").get_edge(g.node("C"))
    assert edge.cost == 2.0
    with pytest.raises(ValueError):
        g.node("A").get_edge(g.node("D"))


def test_nodes_hash_by_identity():
    assert Node("A") != Node("A")
    node = Node("A")
    assert {node: 1}[node] == 1


def test_shortest_path_by_name():
    g = _graph()
    cost, path = g.shortest_path("A", "D")
    assert cost == 4.0
    assert path == ["A", "C", "D"]


def test_shortest_path_unreachable_raises():
    g = Graph(["A", "B"], [])
    with pytest.raises(ValueError):
        g.shortest_path("A", "B")


def test_path_cost():
    g = _graph()
    assert g.path_cost(["A", "B", "D"]) == 6.0
    assert g.path_cost(["A"]) == 0.0
    with pytest.raises(ValueError):
        g.path_cost(["A", "D"])


def test_unknown_node_lookup():
    g = _graph()
    assert "A" in g
    assert "Z" not in g
    with pytest.raises(KeyError):
        g.node("Z")


@pytest.mark.parametrize(
    "nodes, edges",
    [
        (["A", "A"], []),
        (["A", "B"], [("A", "Z", 1)]),
        (["A", "B"], [("A", "A", 1)]),
        (["A", "B"], [("A", "B", -1)]),
    ],
)
def test_invalid_graphs_are_rejected(nodes, edges):
    with pytest.raises(ValueError):
        Graph(nodes, edges)
