"""Breadth-first and depth-first traversal over implicit graphs.

The graph is never materialized: structure comes from a neighbor function (or
``NeighborProvider``) evaluated lazily as vertices are expanded.

Notes:
    Depth-first operations run on an explicit stack of ``(vertex, iterator)``
    frames. Discovery and finish order are identical to recursive descent, but
    depth is bounded by memory rather than the interpreter recursion limit.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterator, List, Optional, Set, Tuple

from lazygraph.logging import get_logger
from lazygraph.types.base import AdmitFunc, Neighbors, Vertex, as_neighbor_func

_logger = get_logger(__name__)

#: Predecessor map: each discovered vertex maps to the vertex it was reached
#: from. The root maps to ``None``. Insertion order is discovery order.
PredMap = Dict[Vertex, Optional[Vertex]]


def bfs_filtered(root: Vertex, neighbors: Neighbors, admit: AdmitFunc) -> None:
    """Breadth-first expansion driven entirely by an admission filter.

    Each candidate ``n`` produced while expanding ``parent`` is enqueued only if
    ``admit(n, parent)`` is true. The root is always expanded and is never
    passed to ``admit``.

    No deduplication happens here. A filter that admits an already admitted
    vertex causes it to be expanded again, and on a cyclic graph a filter that
    never rejects anything makes the search run forever.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.
        admit: Called as ``admit(candidate, parent)``.
    """
    neighbors_of = as_neighbor_func(neighbors)
    queue: Deque[Vertex] = deque([root])
    while queue:
        parent = queue.popleft()
        for candidate in neighbors_of(parent):
            if admit(candidate, parent):
                queue.append(candidate)


def bfs(
    root: Vertex,
    neighbors: Neighbors,
    visit: Optional[Callable[[Vertex], None]] = None,
) -> PredMap:
    """Breadth-first search.

    Vertices are discovered in non-decreasing edge distance from ``root``; each
    is discovered once.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.
        visit: Optional callback, invoked once per newly discovered vertex at
            the moment of discovery (the root is not passed to it).

    Returns:
        Predecessor map in discovery order, root first and mapped to ``None``.
    """
    pred: PredMap = {root: None}

    def admit(candidate: Vertex, parent: Vertex) -> bool:
        if candidate in pred:
            return False
        pred[candidate] = parent
        if visit is not None:
            visit(candidate)
        return True

    bfs_filtered(root, neighbors, admit)
    _logger.debug("bfs from %r discovered %d vertices", root, len(pred))
    return pred


def dfs_filtered(
    root: Vertex,
    neighbors: Neighbors,
    admit: AdmitFunc,
    finished: Optional[Callable[[Vertex], None]] = None,
) -> None:
    """Depth-first expansion driven by an admission filter.

    A candidate ``n`` of the vertex on top of the stack is descended into
    immediately when ``admit(n, parent)`` is true. ``finished(v)`` runs once all
    of ``v``'s admitted descendants have been finished (post-order), the root
    last. As with :func:`bfs_filtered`, the filter is solely responsible for
    preventing revisits.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.
        admit: Called as ``admit(candidate, parent)``.
        finished: Optional post-order callback.
    """
    neighbors_of = as_neighbor_func(neighbors)
    stack: List[Tuple[Vertex, Iterator[Vertex]]] = [(root, iter(neighbors_of(root)))]
    while stack:
        vertex, candidates = stack[-1]
        for candidate in candidates:
            if admit(candidate, vertex):
                stack.append((candidate, iter(neighbors_of(candidate))))
                break
        else:
            stack.pop()
            if finished is not None:
                finished(vertex)


def dfs(
    root: Vertex,
    neighbors: Neighbors,
    finished: Optional[Callable[[Vertex], None]] = None,
) -> PredMap:
    """Depth-first search.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.
        finished: Optional callback invoked in post-order, after every vertex
            reachable through a vertex's discovered children is finished.

    Returns:
        Predecessor map in pre-order discovery order, root mapped to ``None``.
    """
    pred: PredMap = {root: None}

    def admit(candidate: Vertex, parent: Vertex) -> bool:
        if candidate in pred:
            return False
        pred[candidate] = parent
        return True

    dfs_filtered(root, neighbors, admit, finished)
    _logger.debug("dfs from %r discovered %d vertices", root, len(pred))
    return pred


def topological_sort(root: Vertex, neighbors: Neighbors) -> List[Vertex]:
    """Topologically order the vertices reachable from ``root``.

    For any edge ``u -> w`` in the reachable subgraph, ``u`` precedes ``w`` in
    the result. The root always comes first.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.

    Returns:
        Reverse post-order of a depth-first search from ``root``.

    Raises:
        ValueError: If a cycle is reachable from ``root``.
    """
    discovered: Set[Vertex] = {root}
    on_stack: Set[Vertex] = {root}
    order: List[Vertex] = []

    def admit(candidate: Vertex, parent: Vertex) -> bool:
        if candidate in on_stack:
            raise ValueError(
                f"Graph has a cycle through edge {parent!r} -> {candidate!r}; "
                "topological order is undefined"
            )
        if candidate in discovered:
            return False
        discovered.add(candidate)
        on_stack.add(candidate)
        return True

    def finish(vertex: Vertex) -> None:
        on_stack.discard(vertex)
        order.append(vertex)

    dfs_filtered(root, neighbors, admit, finish)
    order.reverse()
    return order
