"""Path reconstruction and enumeration over implicit graphs."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, List, Mapping, Optional, Set, Tuple, TypeVar

from lazygraph.config import SEARCH_CONFIG
from lazygraph.logging import get_logger
from lazygraph.types.base import NeighborFunc, Neighbors, Vertex, as_neighbor_func

_logger = get_logger(__name__)

#: A path is a root-first tuple of vertices.
PathTuple = Tuple[Vertex, ...]

T = TypeVar("T")


def path(pred: Mapping[Vertex, Optional[Vertex]], end: Vertex) -> List[Vertex]:
    """Reconstruct the root-first path to ``end`` from a predecessor map.

    Args:
        pred: Predecessor map from :func:`bfs`, :func:`dfs` or
            :func:`shortest_path_tree`; the root maps to ``None``.
        end: A vertex present in ``pred``.

    Returns:
        List of vertices from the search root to ``end`` inclusive.

    Raises:
        KeyError: If ``end`` was not discovered.
    """
    if end not in pred:
        raise KeyError(f"Vertex {end!r} is not in the predecessor map")

    result = [end]
    prev = pred[end]
    while prev is not None:
        result.append(prev)
        prev = pred[prev]
    result.reverse()
    return result


def _fold_postorder(
    root: Vertex,
    neighbors_of: NeighborFunc,
    combine: Callable[[Vertex, List[Vertex], Dict[Vertex, T]], T],
    memo: Dict[Vertex, T],
) -> T:
    """Evaluate ``combine`` bottom-up over the DAG reachable from ``root``.

    Vertices already in ``memo`` are treated as leaves and not expanded. Each
    other vertex is expanded once; ``combine(vertex, successors, memo)`` is
    called after all its successors have a memo entry.

    Raises:
        ValueError: If a cycle is reachable from ``root``.
    """
    if root in memo:
        return memo[root]

    successors = list(neighbors_of(root))
    stack = [(root, successors, iter(successors))]
    on_stack = {root}
    while stack:
        vertex, succ, pending = stack[-1]
        for nxt in pending:
            if nxt in memo:
                continue
            if nxt in on_stack:
                raise ValueError(
                    f"Graph has a cycle through edge {vertex!r} -> {nxt!r}; "
                    "it must be acyclic"
                )
            nxt_succ = list(neighbors_of(nxt))
            stack.append((nxt, nxt_succ, iter(nxt_succ)))
            on_stack.add(nxt)
            break
        else:
            stack.pop()
            on_stack.discard(vertex)
            memo[vertex] = combine(vertex, succ, memo)
    return memo[root]


def _extend_paths(
    vertex: Vertex, succ: List[Vertex], memo: Dict[Vertex, Set[PathTuple]]
) -> Set[PathTuple]:
    if not succ:
        return {(vertex,)}
    return {(vertex,) + tail for nxt in succ for tail in memo[nxt]}


def dag_paths(root: Vertex, neighbors: Neighbors) -> Set[PathTuple]:
    """All maximal paths starting at ``root`` in a DAG.

    A maximal path ends at a vertex with no neighbors. For a sink ``root`` the
    result is ``{(root,)}``. The number of paths can grow exponentially with
    branching, so this is intended for small graphs.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.

    Returns:
        Set of root-first vertex tuples.

    Raises:
        ValueError: If a cycle is reachable from ``root``.
    """
    memo: Dict[Vertex, Set[PathTuple]] = {}
    result = _fold_postorder(root, as_neighbor_func(neighbors), _extend_paths, memo)
    _logger.debug("dag_paths from %r found %d maximal paths", root, len(result))
    return result


def dag_path_count(src: Vertex, dst: Vertex, neighbors: Neighbors) -> int:
    """Count distinct paths from ``src`` to ``dst`` in a DAG.

    Counts are memoized per vertex, so the cost is linear in the size of the
    reachable subgraph regardless of how many paths exist. ``dst`` itself is
    not expanded. ``src == dst`` counts as a single (empty) path.

    Raises:
        ValueError: If a cycle is reachable from ``src`` without passing
            through ``dst``.
    """

    def combine(vertex: Vertex, succ: List[Vertex], memo: Dict[Vertex, int]) -> int:
        return sum(memo[nxt] for nxt in succ)

    return _fold_postorder(src, as_neighbor_func(neighbors), combine, {dst: 1})


def simple_paths(
    src: Vertex,
    dst: Vertex,
    neighbors: Neighbors,
    prune: Optional[Callable[[PathTuple], bool]] = None,
    max_paths: Optional[int] = None,
) -> Set[PathTuple]:
    """Enumerate simple (vertex-disjoint) paths from ``src`` to ``dst``.

    Partial paths are extended breadth-first from a worklist. An extension
    that would revisit a vertex on the path is skipped. Otherwise, if
    ``prune(extended)`` is true the extension is dropped for good; if it reaches
    ``dst`` it is recorded as complete; else it goes back on the worklist.
    Since completed paths are never extended, ``dst`` appears only at the end
    and ``src == dst`` yields no paths.

    Without pruning, enumeration is exhaustive and can take exponential time
    on dense graphs.

    Args:
        src: Start vertex.
        dst: End vertex.
        neighbors: Neighbor function or provider.
        prune: Called with every candidate extension; return True to discard.
        max_paths: Stop after this many completed paths. Defaults to
            ``SEARCH_CONFIG.max_simple_paths`` (unlimited unless configured).

    Returns:
        Set of ``src``-first vertex tuples ending at ``dst``.
    """
    neighbors_of = as_neighbor_func(neighbors)
    limit = SEARCH_CONFIG.effective_max_paths(max_paths)

    completed: Set[PathTuple] = set()
    if limit == 0:
        return completed

    worklist: Deque[PathTuple] = deque([(src,)])
    while worklist:
        partial = worklist.popleft()
        for nxt in neighbors_of(partial[-1]):
            if nxt in partial:
                continue
            extended = partial + (nxt,)
            if prune is not None and prune(extended):
                continue
            if nxt == dst:
                completed.add(extended)
                if limit is not None and len(completed) >= limit:
                    _logger.debug(
                        "simple_paths %r -> %r stopped at cap of %d", src, dst, limit
                    )
                    return completed
            else:
                worklist.append(extended)

    _logger.debug("simple_paths %r -> %r found %d paths", src, dst, len(completed))
    return completed
