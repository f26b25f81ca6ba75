"""NetworkX interoperability.

Lets a NetworkX graph drive lazygraph algorithms and turns a traversal back
into a NetworkX graph for plotting or further analysis.

Example:
    >>> import networkx as nx
    >>> from lazygraph.algorithms import shortest_costs
    >>> from lazygraph.lib.nx import neighbors_from_networkx, weight_from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>> shortest_costs("A", neighbors_from_networkx(G), weight_from_networkx(G))
    {'A': 0, 'B': 2, 'C': 5}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from lazygraph.algorithms.dot import EdgeLabelFunc
from lazygraph.algorithms.traversal import dfs
from lazygraph.types.base import Cost, NeighborFunc, Neighbors, Vertex, WeightFunc

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def _check_graph(G: NxGraph) -> bool:
    """Validate ``G`` and report whether it is a multigraph."""
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    return G.is_multigraph()


def neighbors_from_networkx(G: NxGraph) -> NeighborFunc:
    """Neighbor function backed by a NetworkX graph.

    Directed graphs yield successors; undirected graphs yield all adjacent
    nodes. Vertices not in ``G`` have no neighbors.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    _check_graph(G)

    def neighbors_of(vertex: Vertex):
        if vertex not in G:
            return ()
        return G.adj[vertex]

    return neighbors_of


def weight_from_networkx(
    G: NxGraph, weight_attr: str = "weight", default_weight: Cost = 1
) -> WeightFunc:
    """Weight function reading an edge attribute.

    For multigraphs the cheapest parallel edge is used.

    Args:
        G: NetworkX graph.
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight when the attribute is missing (default: 1).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    is_multigraph = _check_graph(G)

    def weight(src: Vertex, dst: Vertex) -> Cost:
        data = G.adj[src][dst]
        if is_multigraph:
            return min(d.get(weight_attr, default_weight) for d in data.values())
        return data.get(weight_attr, default_weight)

    return weight


def to_networkx(
    root: Vertex,
    neighbors: Neighbors,
    edge_labels: Optional[EdgeLabelFunc] = None,
    *,
    label_attr: str = "label",
) -> "nx.DiGraph":
    """DFS spanning tree reachable from ``root`` as a NetworkX DiGraph.

    Same structure as :func:`lazygraph.algorithms.dot.to_dot`: one node per
    discovered vertex and one edge per tree edge. Non-``None`` labels are
    stored under ``label_attr``.
    """
    import networkx as nx

    G = nx.DiGraph()
    G.add_node(root)
    for vertex, parent in dfs(root, neighbors).items():
        if parent is None:
            continue
        label = edge_labels(parent, vertex) if edge_labels is not None else None
        if label is None:
            G.add_edge(parent, vertex)
        else:
            G.add_edge(parent, vertex, **{label_attr: label})
    return G
