import networkx as nx
import pytest

from lazygraph.algorithms.paths import dag_paths, path
from lazygraph.algorithms.spf import (
    all_shortest_paths,
    all_shortest_predecessors,
    shortest_costs,
    shortest_path_tree,
    spf,
)
from lazygraph.algorithms.traversal import bfs


def _weight(weights):
    return lambda u, v: weights[(u, v)]


class TestSPF:
    def test_spf_square(self, square_weighted):
        adj, weights = square_weighted
        costs, pred = spf("A", adj.__getitem__, _weight(weights))
        assert costs == {"A": 0, "B": 1, "D": 1, "C": 2}
        assert pred == {"A": set(), "B": {"A"}, "D": {"A"}, "C": {"B", "D"}}

    def test_spf_square_single_path(self, square_weighted):
        adj, weights = square_weighted
        costs, pred = spf("A", adj.__getitem__, _weight(weights), multipath=False)
        assert costs == {"A": 0, "B": 1, "D": 1, "C": 2}
        # first relaxer of C at cost 2 is B
        assert pred == {"A": set(), "B": {"A"}, "D": {"A"}, "C": {"B"}}

    def test_spf_graph3(self, graph3):
        adj, weights = graph3
        costs, pred = spf("A", adj.__getitem__, _weight(weights))
        assert costs == {"A": 0, "B": 1, "E": 1, "C": 2, "F": 3, "D": 4}
        assert pred == {
            "A": set(),
            "B": {"A"},
            "E": {"A"},
            "C": {"B", "E"},
            "F": {"C"},
            "D": {"A", "F"},
        }

    def test_spf_isolated_root(self):
        costs, pred = spf("X", lambda v: [], lambda u, v: 1)
        assert costs == {"X": 0}
        assert pred == {"X": set()}

    def test_negative_weight_raises(self):
        with pytest.raises(ValueError, match="Negative weight"):
            spf("A", {"A": ["B"], "B": []}.__getitem__, lambda u, v: -1)

    def test_vertices_need_not_be_orderable(self):
        class Node:
            pass

        a, b, c = Node(), Node(), Node()
        adj = {a: [b, c], b: [], c: []}
        costs, _ = spf(a, adj.__getitem__, lambda u, v: 1)
        assert costs == {a: 0, b: 1, c: 1}

    def test_zero_weight_edges(self):
        adj = {"A": ["B"], "B": ["C"], "C": []}
        costs = shortest_costs("A", adj.__getitem__, lambda u, v: 0)
        assert costs == {"A": 0, "B": 0, "C": 0}


class TestShortestCosts:
    def test_unit_weights_match_bfs(self, make_grid):
        moves = make_grid(6, 4, frozenset({(1, 1), (2, 1), (1, 3), (2, 4)}))
        costs = shortest_costs((0, 0), moves, lambda u, v: 1)
        pred = bfs((0, 0), moves)
        assert costs == {v: len(path(pred, v)) - 1 for v in pred}

    def test_matches_networkx(self, random_digraphs):
        for vertices, adj, weights in random_digraphs:
            G = nx.DiGraph()
            G.add_nodes_from(vertices)
            for (u, v), w in weights.items():
                G.add_edge(u, v, weight=w)
            expected = nx.single_source_dijkstra_path_length(G, 0, weight="weight")
            assert shortest_costs(0, adj.__getitem__, _weight(weights)) == expected

    def test_state_space_search(self):
        # Lights toggled by buttons; cheapest number of presses to light {0, 2}
        buttons = [frozenset({0, 1}), frozenset({1, 2}), frozenset({0})]

        def press(state):
            return {state ^ b for b in buttons}

        costs = shortest_costs(frozenset(), press, lambda u, v: 1)
        assert costs[frozenset({0, 2})] == 2
        assert costs[frozenset({0})] == 1


class TestShortestPathTree:
    def test_tree_is_usable_with_path(self, square_weighted):
        adj, weights = square_weighted
        tree = shortest_path_tree("A", adj.__getitem__, _weight(weights))
        assert tree == {"A": None, "B": "A", "D": "A", "C": "B"}
        assert path(tree, "C") == ["A", "B", "C"]

    def test_tree_paths_have_minimal_cost(self, random_digraphs):
        for _, adj, weights in random_digraphs:
            w = _weight(weights)
            costs = shortest_costs(0, adj.__getitem__, w)
            tree = shortest_path_tree(0, adj.__getitem__, w)
            assert set(tree) == set(costs)
            for vertex in tree:
                route = path(tree, vertex)
                assert route[0] == 0
                assert sum(w(u, v) for u, v in zip(route, route[1:])) == costs[vertex]


class TestAllShortestPredecessors:
    def test_two_optimal_paths(self, square_weighted):
        adj, weights = square_weighted
        pred = all_shortest_predecessors("A", adj.__getitem__, _weight(weights))
        assert pred["C"] == {"B", "D"}
        backwards = dag_paths("C", pred.__getitem__)
        assert {tuple(reversed(p)) for p in backwards} == {
            ("A", "B", "C"),
            ("A", "D", "C"),
        }

    def test_strict_improvement_resets_predecessors(self):
        # C is first reached from A at cost 5, then improved through B
        adj = {"A": ["C", "B"], "B": ["C"], "C": []}
        weights = {("A", "C"): 5, ("A", "B"): 1, ("B", "C"): 1}
        pred = all_shortest_predecessors("A", adj.__getitem__, _weight(weights))
        assert pred["C"] == {"B"}

    def test_predecessor_sets_are_exact(self, random_digraphs):
        for _, adj, weights in random_digraphs:
            positive = {e: max(1, w) for e, w in weights.items()}
            w = _weight(positive)
            costs = shortest_costs(0, adj.__getitem__, w)
            pred = all_shortest_predecessors(0, adj.__getitem__, w)
            assert set(pred) == set(costs)
            for vertex in costs:
                if vertex == 0:
                    assert pred[vertex] == set()
                    continue
                expected = {
                    u
                    for u in costs
                    if vertex in adj[u] and costs[u] + w(u, vertex) == costs[vertex]
                }
                assert pred[vertex] == expected


class TestAllShortestPaths:
    def test_graph3(self, graph3):
        adj, weights = graph3
        result = all_shortest_paths("A", "D", adj.__getitem__, _weight(weights))
        assert result == {
            ("A", "D"),
            ("A", "B", "C", "F", "D"),
            ("A", "E", "C", "F", "D"),
        }

    def test_root_target(self, graph3):
        adj, weights = graph3
        assert all_shortest_paths("A", "A", adj.__getitem__, _weight(weights)) == {
            ("A",)
        }

    def test_unreachable_target(self, diamond):
        assert all_shortest_paths("D", "A", diamond.__getitem__, lambda u, v: 1) == set()

    def test_matches_networkx(self, random_digraphs):
        for vertices, adj, weights in random_digraphs:
            positive = {e: max(1, w) for e, w in weights.items()}
            G = nx.DiGraph()
            G.add_nodes_from(vertices)
            for (u, v), w in positive.items():
                G.add_edge(u, v, weight=w)
            target = vertices[-1]
            if not nx.has_path(G, 0, target):
                continue
            expected = {
                tuple(p) for p in nx.all_shortest_paths(G, 0, target, weight="weight")
            }
            result = all_shortest_paths(0, target, adj.__getitem__, _weight(positive))
            assert result == expected
