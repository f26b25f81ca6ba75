"""Explicit adjacency maps usable wherever a neighbor function is expected."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Set, Tuple

from lazygraph.types.base import Vertex

_EMPTY: FrozenSet[Vertex] = frozenset()


class Adjacency:
    """An immutable vertex -> neighbors map implementing ``NeighborProvider``.

    Vertices without an entry have no neighbors, so lookups never fail. An
    instance is also callable, so it can be passed where a plain neighbor
    function is expected.

    Example:
        >>> adj = Adjacency({"A": ["B", "C"], "B": ["D"], "C": ["D"]})
        >>> sorted(adj("A"))
        ['B', 'C']
        >>> adj("D")
        frozenset()
    """

    def __init__(
        self, mapping: Optional[Mapping[Vertex, Iterable[Vertex]]] = None
    ) -> None:
        self._adj: Dict[Vertex, FrozenSet[Vertex]] = {}
        for vertex, nbrs in (mapping or {}).items():
            self._adj[vertex] = frozenset(nbrs)

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[Vertex, Vertex]], symmetric: bool = False
    ) -> "Adjacency":
        """Build from ``(src, dst)`` pairs.

        Args:
            edges: Directed edges.
            symmetric: Also add every reverse edge.
        """
        adj: Dict[Vertex, Set[Vertex]] = {}
        for src, dst in edges:
            adj.setdefault(src, set()).add(dst)
            adj.setdefault(dst, set())
            if symmetric:
                adj[dst].add(src)
        return cls(adj)

    def neighbors_of(self, vertex: Vertex) -> FrozenSet[Vertex]:
        return self._adj.get(vertex, _EMPTY)

    __call__ = neighbors_of

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        for src, nbrs in self._adj.items():
            for dst in nbrs:
                yield src, dst

    def vertices(self) -> Set[Vertex]:
        """Every vertex appearing as a key or as a neighbor."""
        result = set(self._adj)
        for nbrs in self._adj.values():
            result.update(nbrs)
        return result

    def reversed(self) -> "Adjacency":
        """The same graph with every edge flipped."""
        flipped: Dict[Vertex, Set[Vertex]] = {v: set() for v in self._adj}
        for src, dst in self.edges():
            flipped.setdefault(dst, set()).add(src)
        return Adjacency(flipped)

    def symmetric(self) -> "Adjacency":
        """The undirected closure: every edge present in both directions."""
        closure: Dict[Vertex, Set[Vertex]] = {v: set(n) for v, n in self._adj.items()}
        for src, dst in self.edges():
            closure.setdefault(dst, set()).add(src)
        return Adjacency(closure)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Adjacency({len(self._adj)} vertices)"
