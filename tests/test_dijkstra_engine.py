"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

from dataclasses import dataclass
from decimal import Decimal
import math

import pytest

from adjacency_list_graph import AdjacencyListGraph, graph_with_nodes
from dijkstra_engine import SimpleDijkstraEngine
from errors import InvalidWeight, NodeNotFound
from settings import DijkstraSettings


@dataclass(frozen=True)
class DummyNode:
    """
    Minimal hashable node type for Dijkstra tests.
    """
    _id: str


def test_dijkstra_basic_paths():
    a = DummyNode("A")
    b = DummyNode("B")
    c = DummyNode("C")
    g = graph_with_nodes(a, b, c)

    # A -> B (1), A -> C (4), B -> C (2)
    g.add_edge(a, b, 1.0)
    g.add_edge(a, c, 4.0)
    g.add_edge(b, c, 2.0)

    engine = SimpleDijkstraEngine()
    dist = engine.shortest_path_costs(g, a)

    assert dist[a] == 0.0
    assert dist[b] == 1.0
    # Shortest A->C is A->B->C with cost 3.0
    assert dist[c] == 3.0


def test_dijkstra_unreachable_node_absent():
    a = DummyNode("A")
    b = DummyNode("B")
    c = DummyNode("C")  # unreachable from A
    g = graph_with_nodes(a, b, c)

    g.add_edge(a, b, 2.0)

    engine = SimpleDijkstraEngine()
    dist, prev = engine.shortest_paths(g, a)

    assert dist == {a: 0.0, b: 2.0}
    # Unreachable node should not appear in either map
    assert c not in dist
    assert c not in prev
    assert engine.shortest_path(g, a, c) is None


def test_dijkstra_predecessors_undirected():
    g = graph_with_nodes("Sydney", "Melbourne", "Perth")
    g.add_undirected_edge("Sydney", "Melbourne", 7)
    g.add_undirected_edge("Melbourne", "Perth", 5)
    g.add_undirected_edge("Sydney", "Perth", 15)

    dist, prev = SimpleDijkstraEngine().shortest_paths(g, "Sydney")

    assert dist["Melbourne"] == 7
    assert dist["Perth"] == 12
    assert "Sydney" not in prev
    assert prev["Melbourne"] == "Sydney"
    assert prev["Perth"] == "Melbourne"


def test_shortest_path_to_target():
    g = graph_with_nodes("s", "a", "b", "t")
    g.add_edge("s", "a", 1)
    g.add_edge("s", "b", 5)
    g.add_edge("a", "b", 1)
    g.add_edge("b", "t", 1)
    g.add_edge("a", "t", 10)

    path = SimpleDijkstraEngine().shortest_path(g, "s", "t")

    assert path is not None
    assert path.cost == 3
    assert list(path.nodes) == ["s", "a", "b", "t"]
    assert path.hops == 3


def test_shortest_path_to_self():
    g = graph_with_nodes("s")

    path = SimpleDijkstraEngine().shortest_path(g, "s", "s")

    assert path.cost == 0
    assert list(path.nodes) == ["s"]


def test_distances_are_minimal_and_monotone_along_paths():
    g = graph_with_nodes(*"abcdef")
    edges = [
        ("a", "b", 7), ("a", "c", 9), ("a", "f", 14),
        ("b", "c", 10), ("b", "d", 15), ("c", "d", 11),
        ("c", "f", 2), ("d", "e", 6), ("f", "e", 9),
    ]
    for u, v, w in edges:
        g.add_edge(u, v, w)

    dist, prev = SimpleDijkstraEngine().shortest_paths(g, "a")

    assert dist == {"a": 0, "b": 7, "c": 9, "d": 20, "e": 20, "f": 11}
    for node, parent in prev.items():
        assert dist[parent] <= dist[node]
        assert dist[node] == dist[parent] + g.edge_label(parent, node)


def test_ties_broken_by_discovery_order():
    g = graph_with_nodes("s", "x", "y", "t")
    g.add_edge("s", "x", 1)
    g.add_edge("s", "y", 1)
    g.add_edge("x", "t", 1)
    g.add_edge("y", "t", 1)

    _, prev = SimpleDijkstraEngine().shortest_paths(g, "s")

    # x was discovered first, settles first and claims t
    assert prev["t"] == "x"


def test_unlabelled_edge_is_invalid_by_default():
    g = graph_with_nodes("a", "b")
    g.add_edge("a", "b")

    with pytest.raises(InvalidWeight) as excinfo:
        SimpleDijkstraEngine().shortest_path_costs(g, "a")

    assert excinfo.value.source == "a"
    assert excinfo.value.destination == "b"
    assert excinfo.value.label is None


def test_default_weight_counts_hops():
    g = graph_with_nodes("a", "b", "c")
    g.add_edge("a", "b")
    g.add_edge("b", "c")
    g.add_edge("a", "c", 5)

    engine = SimpleDijkstraEngine(DijkstraSettings(default_weight=1.0))

    assert engine.shortest_path_costs(g, "a") == {"a": 0.0, "b": 1.0, "c": 2.0}


@pytest.mark.parametrize("label", [-1, math.nan, "3", True])
def test_unusable_costs_rejected(label):
    g = graph_with_nodes("a", "b")
    g.add_edge("a", "b", label)

    with pytest.raises(InvalidWeight):
        SimpleDijkstraEngine().shortest_path_costs(g, "a")


def test_weight_projection():
    g = graph_with_nodes("a", "b", "c")
    g.add_edge("a", "b", {"km": 3})
    g.add_edge("b", "c", {"km": 4})
    g.add_edge("a", "c", {"mi": 1})

    engine = SimpleDijkstraEngine()
    costs = engine.shortest_path_costs(g, "a", weight=lambda e: e.get("km", 100))

    assert costs == {"a": 0.0, "b": 3, "c": 7}

    # a projection that cannot read a label surfaces as InvalidWeight
    with pytest.raises(InvalidWeight):
        engine.shortest_path_costs(g, "a", weight=lambda e: int(e.get("km", "n/a")))


def test_missing_source_or_target():
    g = graph_with_nodes("a")
    engine = SimpleDijkstraEngine()

    with pytest.raises(NodeNotFound):
        engine.shortest_path_costs(g, "z")
    with pytest.raises(NodeNotFound):
        engine.shortest_path(g, "a", "z")


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        SimpleDijkstraEngine(DijkstraSettings(default_weight=-1.0))
    with pytest.raises(ValueError):
        DijkstraSettings(default_weight=math.nan).validate()


def test_engine_does_not_mutate_graph():
    g = AdjacencyListGraph(["a", "b"])
    g.add_edge("a", "b", 2)
    before = g.copy()

    SimpleDijkstraEngine().shortest_paths(g, "a")

    assert g == before


def test_numpy_scalar_costs():
    np = pytest.importorskip("numpy")
    g = graph_with_nodes("a", "b", "c")
    g.add_edge("a", "b", np.float64(1.5))
    g.add_edge("b", "c", np.int64(2))

    costs = SimpleDijkstraEngine().shortest_path_costs(g, "a")

    assert costs["c"] == pytest.approx(3.5)

    g.add_edge("a", "c", np.float64("nan"))
    with pytest.raises(InvalidWeight):
        SimpleDijkstraEngine().shortest_path_costs(g, "a")


def test_projection_lookup_failures_are_invalid_weight():
    g = graph_with_nodes("a", "b")
    g.add_edge("a", "b", {"mi": 1})
    engine = SimpleDijkstraEngine()

    with pytest.raises(InvalidWeight) as excinfo:
        engine.shortest_path_costs(g, "a", weight=lambda e: e["km"])
    assert not isinstance(excinfo.value, NodeNotFound)
    assert isinstance(excinfo.value.__cause__, KeyError)

    g.add_edge("a", "b", frozenset("01"))
    with pytest.raises(InvalidWeight) as excinfo:
        engine.shortest_path_costs(g, "a", weight=lambda e: e.cost)
    assert isinstance(excinfo.value.__cause__, AttributeError)


def test_decimal_costs_rejected():
    g = graph_with_nodes("a", "b")
    g.add_edge("a", "b", Decimal("2"))

    with pytest.raises(InvalidWeight):
        SimpleDijkstraEngine().shortest_path_costs(g, "a")
    with pytest.raises(ValueError):
        DijkstraSettings(default_weight=Decimal("1")).validate()


def test_missing_source_reported_before_target():
    g = graph_with_nodes("a")

    with pytest.raises(NodeNotFound) as excinfo:
        SimpleDijkstraEngine().shortest_path(g, "x", "y")
    assert excinfo.value.node == "x"
