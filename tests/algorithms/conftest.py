"""Sample graphs for algorithm tests.

Most fixtures return ``dict[vertex, list[vertex]]`` and are used through
``graph.__getitem__`` or ``graph.get``; lists keep neighbor order deterministic
so traversal order can be asserted exactly.
"""

import pytest


@pytest.fixture
def diamond():
    #      ┌──►B──┐
    #  A───┤      ├──►D
    #      └──►C──┘
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}


@pytest.fixture
def line1():
    #  A──►B──►C──►D
    return {"A": ["B"], "B": ["C"], "C": ["D"], "D": []}


@pytest.fixture
def cycle1():
    #  A──►B──►C
    #  ▲       │
    #  └───────┘
    return {"A": ["B"], "B": ["C"], "C": ["A"]}


@pytest.fixture
def tree1():
    #        A
    #      ┌─┴─┐
    #      B   C
    #     ┌┴┐  │
    #     D E  F
    return {
        "A": ["B", "C"],
        "B": ["D", "E"],
        "C": ["F"],
        "D": [],
        "E": [],
        "F": [],
    }


@pytest.fixture
def square_weighted():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    #   A──►C direct costs 3
    adj = {"A": ["B", "D", "C"], "B": ["C"], "D": ["C"], "C": []}
    weights = {
        ("A", "B"): 1,
        ("B", "C"): 1,
        ("A", "D"): 1,
        ("D", "C"): 1,
        ("A", "C"): 3,
    }
    return adj, weights


@pytest.fixture
def graph3():
    # Undirected weighted graph (both directions listed):
    #   A-B 1, A-E 1, B-C 1, E-C 1, C-F 1, F-D 1, A-D 4, C-D 3
    edges = {
        ("A", "B"): 1,
        ("A", "E"): 1,
        ("B", "C"): 1,
        ("E", "C"): 1,
        ("C", "F"): 1,
        ("F", "D"): 1,
        ("A", "D"): 4,
        ("C", "D"): 3,
    }
    weights = {}
    adj = {}
    for (u, v), w in edges.items():
        weights[(u, v)] = w
        weights[(v, u)] = w
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, []).append(u)
    return adj, weights


@pytest.fixture
def three_clusters():
    # {1,2,3} triangle, {4,5} pair, {6} isolated; symmetric relation
    return {
        1: [2, 3],
        2: [1, 3],
        3: [1, 2],
        4: [5],
        5: [4],
        6: [],
    }


def grid_moves(width, height, walls=frozenset()):
    """4-neighborhood moves on a bounded grid, skipping wall cells."""

    def moves(cell):
        r, c = cell
        result = []
        for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and (nr, nc) not in walls:
                result.append((nr, nc))
        return result

    return moves


@pytest.fixture
def grid5():
    return grid_moves(5, 5)


@pytest.fixture
def make_grid():
    return grid_moves


@pytest.fixture
def random_digraphs():
    """Small seeded random digraphs as (vertices, adjacency, weights) triples."""
    import random

    rng = random.Random(20240611)
    graphs = []
    for _ in range(25):
        n = rng.randint(2, 8)
        vertices = list(range(n))
        adj = {v: [] for v in vertices}
        weights = {}
        for u in vertices:
            for v in vertices:
                if u != v and rng.random() < 0.35:
                    adj[u].append(v)
                    weights[(u, v)] = rng.randint(0, 6)
        graphs.append((vertices, adj, weights))
    return graphs
