"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from algorithms import DijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from exceptions import GraphError, NegativeWeightError, WeightTypeError
from weighted_graph import NO_WEIGHT


def weighted(n: int) -> AdjacencyListGraph:
    return AdjacencyListGraph([f"n{i}" for i in range(n)], default_weight=0.0)


def test_dijkstra_basic_paths():
    g = weighted(3)

    # 0 -> 1 (1), 0 -> 2 (4), 1 -> 2 (2)
    g.add_weighted_connection(0, 1, 1.0)
    g.add_weighted_connection(0, 2, 4.0)
    g.add_weighted_connection(1, 2, 2.0)

    engine = SimpleDijkstraEngine()
    dist, prev = engine.shortest_paths(g, 0)

    assert dist[0] == 0.0
    assert dist[1] == 1.0
    # Shortest 0->2 is 0->1->2 with cost 3.0
    assert dist[2] == 3.0
    assert prev == {1: 0, 2: 1}
    assert engine.shortest_path_costs(g, 0) == dist


def test_dijkstra_unreachable_node_absent():
    g = weighted(3)  # node 2 unreachable from 0
    g.add_weighted_connection(0, 1, 2.0)

    dist = SimpleDijkstraEngine().shortest_path_costs(g, 0)

    assert dist == {0: 0.0, 1: 2.0}
    assert g.find_path_dijkstra(0, 2) is None


def test_find_path_dijkstra_returns_path_and_cost():
    g = weighted(4)
    g.add_weighted_connection(0, 3, 10.0)
    g.add_weighted_connection(0, 1, 1.0)
    g.add_weighted_connection(1, 2, 1.0)
    g.add_weighted_connection(2, 3, 1.0)

    assert g.find_path_dijkstra(0, 3) == ([0, 1, 2, 3], 3.0)
    assert g.find_path_bfs(0, 3) == [0, 3]
    assert g.find_path_dijkstra(2, 2) == ([2], 0.0)


def test_equal_costs_break_ties_by_discovery_order():
    g = weighted(4)
    g.add_weighted_connection(0, 2, 1.0)
    g.add_weighted_connection(0, 1, 1.0)
    g.add_weighted_connection(1, 3, 1.0)
    g.add_weighted_connection(2, 3, 1.0)

    assert g.find_path_dijkstra(0, 3) == ([0, 2, 3], 2.0)


def test_unweighted_graph_gets_fewest_hop_path():
    g = AdjacencyListGraph(["a", "b", "c", "d"])
    g.add_connection(0, 1)
    g.add_connection(0, 2)
    g.add_connection(0, 3)
    g.add_connection(1, 2)
    g.add_connection(2, 3)

    assert g.find_path_dijkstra(0, 3) == ([0, 3], NO_WEIGHT)
    assert set(g.shortest_path_costs(0)) == {0, 1, 2, 3}


def test_cycles_and_dangling_edges():
    g = AdjacencyListGraph(["a", "b"], default_weight=0)
    g.add_weighted_connection(0, 1, 3)
    g.add_weighted_connection(1, 0, 1)
    g.add_weighted_connection(1, 8, 2)

    assert g.shortest_path_costs(0) == {0: 0, 1: 3, 8: 5}
    assert g.find_path_dijkstra(0, 8) == ([0, 1, 8], 5)


def test_negative_weight_raises():
    g = weighted(2)
    g.add_weighted_connection(0, 1, -1.0)

    with pytest.raises(NegativeWeightError):
        g.find_path_dijkstra(0, 1)
    with pytest.raises(ValueError):
        g.shortest_path_costs(0)


def test_engine_can_be_swapped_per_graph():
    class RecordingEngine(SimpleDijkstraEngine):
        def __init__(self) -> None:
            self.sources = []

        def shortest_paths(self, graph, source):
            self.sources.append(source)
            return super().shortest_paths(graph, source)

    g = weighted(2)
    g.add_weighted_connection(0, 1, 1.0)
    engine = RecordingEngine()
    g.dijkstra_engine = engine

    assert isinstance(engine, DijkstraEngine)
    assert g.find_path_dijkstra(0, 1) == ([0, 1], 1.0)
    assert g.shortest_path_costs(1) == {1: 0.0}
    assert engine.sources == [0, 1]
    assert AdjacencyListGraph.dijkstra_engine is not engine


def test_numeric_weight_on_unweighted_graph_raises_weight_type_error():
    """A numeric weight stored next to NO_WEIGHT edges cannot be costed."""
    g = AdjacencyListGraph(["a", "b", "c"])
    g.add_connection(0, 1)
    assert g.add_weighted_connection(1, 2, 2.5) is True

    with pytest.raises(WeightTypeError):
        g.find_path_dijkstra(0, 2)
    with pytest.raises(GraphError):
        g.shortest_path_costs(0)
    with pytest.raises(TypeError):
        SimpleDijkstraEngine().shortest_paths(g, 1)

    # searches that ignore weights are unaffected
    assert g.find_path_bfs(0, 2) == [0, 1, 2]
    assert g.adjacency_matrix()[1, 2] == 2.5
