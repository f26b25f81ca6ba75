"""Shortest-path-first (SPF) algorithms over implicit weighted graphs.

Implements Dijkstra-style single-source relaxation with pluggable neighbor and
weight functions. Three result shapes are offered on top of one loop:
minimum costs, a single-predecessor tree, and an all-predecessors DAG that
captures every tied optimal route.

Notes:
    The heap has no decrease-key. Every strict improvement pushes a new
    ``(cost, seq, vertex)`` entry and stale entries are discarded on pop once
    the vertex is finalized (lazy deletion), keeping O(E log E) time. The
    ``seq`` counter breaks cost ties so vertices themselves are never compared.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from lazygraph.algorithms.paths import PathTuple, dag_paths
from lazygraph.logging import get_logger
from lazygraph.types.base import Cost, Neighbors, Vertex, WeightFunc, as_neighbor_func

_logger = get_logger(__name__)

#: Vertex -> every predecessor on some minimum-cost path. The root maps to
#: an empty set.
MultiPredMap = Dict[Vertex, Set[Vertex]]


def spf(
    root: Vertex,
    neighbors: Neighbors,
    weight: WeightFunc,
    multipath: bool = True,
) -> Tuple[Dict[Vertex, Cost], MultiPredMap]:
    """Compute shortest paths from ``root`` to every reachable vertex.

    Repeatedly finalizes the pending vertex with the smallest tentative cost
    and relaxes its non-finalized neighbors. On a strict improvement the
    neighbor's predecessor set is reset to the finalized vertex. On an exact
    tie the finalized vertex is added to the set if ``multipath`` is True and
    ignored otherwise, so the first relaxer wins.

    Args:
        root: Source vertex.
        neighbors: Neighbor function or provider.
        weight: Non-negative weight of an edge ``(src, dst)``.
        multipath: Whether to record all equal-cost predecessors.

    Returns:
        tuple[dict[Vertex, Cost], dict[Vertex, set[Vertex]]]:
            Minimal costs and predecessor sets, both keyed by every reachable
            vertex in first-discovery order.

    Raises:
        ValueError: If ``weight`` returns a negative value.
    """
    neighbors_of = as_neighbor_func(neighbors)

    costs: Dict[Vertex, Cost] = {root: 0}
    pred: MultiPredMap = {root: set()}
    selected: Set[Vertex] = set()
    seq = count()
    min_pq: List[Tuple[Cost, int, Vertex]] = [(0, next(seq), root)]

    while min_pq:
        current_cost, _, node = heappop(min_pq)
        if node in selected:
            continue
        selected.add(node)

        for neighbor in neighbors_of(node):
            if neighbor in selected:
                continue

            edge_cost = weight(node, neighbor)
            if edge_cost < 0:
                raise ValueError(
                    f"Negative weight {edge_cost} on edge {node!r} -> {neighbor!r}"
                )

            new_cost = current_cost + edge_cost
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                pred[neighbor] = {node}
                heappush(min_pq, (new_cost, next(seq), neighbor))
            elif multipath and new_cost == costs[neighbor]:
                pred[neighbor].add(node)

    _logger.debug("spf from %r finalized %d vertices", root, len(selected))
    return costs, pred


def shortest_costs(
    root: Vertex, neighbors: Neighbors, weight: WeightFunc
) -> Dict[Vertex, Cost]:
    """Minimum total weight from ``root`` to every reachable vertex."""
    costs, _ = spf(root, neighbors, weight, multipath=False)
    return costs


def shortest_path_tree(
    root: Vertex, neighbors: Neighbors, weight: WeightFunc
) -> Dict[Vertex, Optional[Vertex]]:
    """One shortest-path predecessor per reachable vertex.

    Ties between equally short routes go to whichever predecessor relaxed the
    vertex first. The result works with :func:`lazygraph.algorithms.paths.path`.

    Returns:
        Predecessor map with ``root`` mapped to ``None``.
    """
    _, pred = spf(root, neighbors, weight, multipath=False)
    return {v: next(iter(p)) if p else None for v, p in pred.items()}


def all_shortest_predecessors(
    root: Vertex, neighbors: Neighbors, weight: WeightFunc
) -> MultiPredMap:
    """All predecessors lying on some minimum-cost path, per vertex.

    Read as a graph, the result is a DAG rooted at ``root`` in which every
    root-to-vertex path has the same minimal total weight.
    """
    _, pred = spf(root, neighbors, weight, multipath=True)
    return pred


def all_shortest_paths(
    root: Vertex, target: Vertex, neighbors: Neighbors, weight: WeightFunc
) -> Set[PathTuple]:
    """Every minimum-cost path from ``root`` to ``target``.

    Walks the all-predecessors DAG backwards from ``target`` with
    :func:`dag_paths` and reverses each result.

    Returns:
        Set of root-first vertex tuples; empty if ``target`` is unreachable.
    """
    pred = all_shortest_predecessors(root, neighbors, weight)
    if target not in pred:
        return set()
    backwards = dag_paths(target, pred.__getitem__)
    return {tuple(reversed(p)) for p in backwards}
