"""Adjacency sources for lazygraph.

This package contains explicit adjacency maps and integration modules for
external graph libraries.
"""

from lazygraph.lib.adjacency import Adjacency
from lazygraph.lib.nx import neighbors_from_networkx, to_networkx, weight_from_networkx

__all__ = [
    "Adjacency",
    "neighbors_from_networkx",
    "weight_from_networkx",
    "to_networkx",
]
