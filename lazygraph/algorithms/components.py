"""Connected components and minimum spanning forests."""

from __future__ import annotations

from heapq import heapify, heappop
from typing import Dict, FrozenSet, Iterable, List, Set

from lazygraph.algorithms.traversal import bfs
from lazygraph.logging import get_logger
from lazygraph.types.base import Neighbors, Vertex, WeightedEdge

_logger = get_logger(__name__)


def connected_components(
    vertices: Iterable[Vertex], neighbors: Neighbors
) -> Set[FrozenSet[Vertex]]:
    """Partition ``vertices`` into connected components.

    Each vertex not yet covered seeds a breadth-first search whose discovered
    set becomes one component. The neighbor relation must be symmetric for the
    result to be an undirected connectivity partition; with a directed relation
    each component is just what its seed could reach.

    Args:
        vertices: Vertices to partition.
        neighbors: Neighbor function or provider.

    Returns:
        Set of disjoint frozensets.
    """
    visited: Set[Vertex] = set()
    components: Set[FrozenSet[Vertex]] = set()
    for vertex in vertices:
        if vertex in visited:
            continue
        component = frozenset(bfs(vertex, neighbors))
        visited.update(component)
        components.add(component)

    _logger.debug("connected_components found %d components", len(components))
    return components


class _DisjointSet:
    """Union-find with path compression and union by size."""

    def __init__(self, items: Iterable[Vertex]) -> None:
        self._parent: Dict[Vertex, Vertex] = {}
        self._size: Dict[Vertex, int] = {}
        for item in items:
            self._parent[item] = item
            self._size[item] = 1

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: Vertex) -> Vertex:
        root = self._parent[item]
        while root != self._parent[root]:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Vertex, b: Vertex) -> bool:
        """Merge the sets of ``a`` and ``b``; False if already merged."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True


def kruskal(
    vertices: Iterable[Vertex], edges: Iterable[WeightedEdge]
) -> List[WeightedEdge]:
    """Minimum spanning forest by Kruskal's algorithm.

    Edges are considered in non-decreasing weight order; an edge is accepted
    when it joins two different trees. The input is copied, not consumed.

    Args:
        vertices: All vertices of the graph.
        edges: Candidate edges, treated as undirected.

    Returns:
        Accepted edges in acceptance order. For a connected graph the last one
        is the heaviest edge of the spanning tree.

    Raises:
        KeyError: If an edge names a vertex missing from ``vertices``.
    """
    forest = _DisjointSet(vertices)
    needed = len(forest) - 1
    queue = list(edges)
    heapify(queue)

    accepted: List[WeightedEdge] = []
    while queue and len(accepted) < needed:
        edge = heappop(queue)
        if forest.union(edge.src, edge.dst):
            accepted.append(edge)

    _logger.debug(
        "kruskal accepted %d edges over %d vertices", len(accepted), len(forest)
    )
    return accepted
