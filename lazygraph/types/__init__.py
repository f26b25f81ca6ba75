"""Shared typing constructs for lazygraph.

Vertices are opaque hashable values; graph structure is supplied by a neighbor
function or a ``NeighborProvider``. This package centralizes those aliases and
the small value types passed between algorithms.
"""

from lazygraph.types.base import (
    AdmitFunc,
    Cost,
    NeighborFunc,
    NeighborProvider,
    Neighbors,
    Vertex,
    WeightedEdge,
    WeightFunc,
    as_neighbor_func,
)

__all__ = [
    # Type aliases
    "Vertex",
    "Cost",
    "NeighborFunc",
    "WeightFunc",
    "AdmitFunc",
    "Neighbors",
    # Protocols and helpers
    "NeighborProvider",
    "as_neighbor_func",
    # Value types
    "WeightedEdge",
]
