"""Graph algorithms over implicit graphs.

Every function takes a root (or a vertex collection) and a neighbor function
or ``NeighborProvider``; nothing is materialized up front.
"""

from lazygraph.algorithms.components import connected_components, kruskal
from lazygraph.algorithms.dot import to_dot
from lazygraph.algorithms.paths import (
    dag_path_count,
    dag_paths,
    path,
    simple_paths,
)
from lazygraph.algorithms.spf import (
    all_shortest_paths,
    all_shortest_predecessors,
    shortest_costs,
    shortest_path_tree,
    spf,
)
from lazygraph.algorithms.traversal import (
    bfs,
    bfs_filtered,
    dfs,
    dfs_filtered,
    topological_sort,
)

__all__ = [
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
]
