"""Base type aliases, protocols, and value types for implicit-graph algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, Protocol, Union, runtime_checkable

#: Any hashable, immutable value identifying a vertex. ``None`` is reserved as
#: the "no predecessor" marker and must not be used as a vertex.
Vertex = Hashable

#: Represents a numeric edge weight or accumulated path cost.
Cost = Union[int, float]

#: Maps a vertex to the vertices adjacent to it.
NeighborFunc = Callable[[Vertex], Iterable[Vertex]]

#: Maps an adjacent (src, dst) pair to a non-negative weight.
WeightFunc = Callable[[Vertex, Vertex], Cost]

#: Receives a candidate vertex and the vertex it would be reached from.
AdmitFunc = Callable[[Vertex, Vertex], bool]


@runtime_checkable
class NeighborProvider(Protocol):
    """Anything that can enumerate the neighbors of a vertex."""

    def neighbors_of(self, vertex: Vertex) -> Iterable[Vertex]: ...


Neighbors = Union[NeighborFunc, NeighborProvider]


def as_neighbor_func(neighbors: Neighbors) -> NeighborFunc:
    """Normalize a neighbor provider or plain callable into a callable.

    Providers take precedence, so a class that is both callable and a
    ``NeighborProvider`` is queried through ``neighbors_of``.

    Raises:
        TypeError: If ``neighbors`` is neither.
    """
    if isinstance(neighbors, NeighborProvider):
        return neighbors.neighbors_of
    if callable(neighbors):
        return neighbors
    raise TypeError(
        f"Expected a callable or NeighborProvider, got {type(neighbors).__name__}"
    )


@dataclass(frozen=True)
class WeightedEdge:
    """A directed (src, dst) pair with a weight.

    Instances order by weight alone, so they can be pushed onto a heap or
    sorted directly. Equality and hashing still consider all fields.

    Attributes:
        src: Source vertex.
        dst: Destination vertex.
        weight: Edge weight.
    """

    src: Vertex
    dst: Vertex
    weight: Cost

    def __lt__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight >= other.weight

    def reversed(self) -> "WeightedEdge":
        """Return the same edge pointing the other way."""
        return WeightedEdge(self.dst, self.src, self.weight)
