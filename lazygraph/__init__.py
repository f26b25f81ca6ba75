"""lazygraph: graph algorithms over implicit graphs.

A graph is described only by a root vertex and a function returning the
neighbors of a vertex; nothing is materialized up front. Vertices are any
hashable, immutable values.

Primary API:
    bfs(), dfs(), topological_sort() - Traversal with predecessor maps
    path(), dag_paths(), simple_paths() - Path reconstruction and enumeration
    shortest_costs(), shortest_path_tree(), all_shortest_predecessors() - SPF
    connected_components(), kruskal() - Components and spanning forests
    to_dot() - Graphviz export of a DFS spanning tree
    Adjacency - Explicit adjacency map usable as a neighbor function

Example:
    from lazygraph import Adjacency, bfs, path, shortest_costs

    adj = Adjacency({"A": ["B", "C"], "B": ["D"], "C": ["D"]})
    pred = bfs("A", adj)
    path(pred, "D")                       # ['A', 'B', 'D'] or ['A', 'C', 'D']
    shortest_costs("A", adj, lambda u, v: 1)["D"]   # 2
"""

from __future__ import annotations

from lazygraph import logging
from lazygraph._version import __version__
from lazygraph.algorithms import (
    all_shortest_paths,
    all_shortest_predecessors,
    bfs,
    bfs_filtered,
    connected_components,
    dag_path_count,
    dag_paths,
    dfs,
    dfs_filtered,
    kruskal,
    path,
    shortest_costs,
    shortest_path_tree,
    simple_paths,
    spf,
    to_dot,
    topological_sort,
)
from lazygraph.config import SEARCH_CONFIG, SearchConfig
from lazygraph.lib.adjacency import Adjacency
from lazygraph.types.base import NeighborProvider, WeightedEdge

__all__ = [
    # Version
    "__version__",
    # Traversal
    "bfs",
    "bfs_filtered",
    "dfs",
    "dfs_filtered",
    "topological_sort",
    # Paths
    "path",
    "dag_paths",
    "dag_path_count",
    "simple_paths",
    # Shortest paths
    "spf",
    "shortest_costs",
    "shortest_path_tree",
    "all_shortest_predecessors",
    "all_shortest_paths",
    # Components
    "connected_components",
    "kruskal",
    # Export
    "to_dot",
    # Types
    "NeighborProvider",
    "WeightedEdge",
    "Adjacency",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
