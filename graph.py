"""
Directed, weighted graph abstraction for the route network.

Vertices are any hashable site identifiers.
Edges are directed: u -> v with a positive integer weight.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Mapping

Vertex = Hashable


class Graph(ABC):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def vertices(self) -> Iterable[Vertex]:
        """Return all vertices in the graph, in a stable order."""
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, vertex: Vertex) -> bool:
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[Vertex, int], empty for an unknown vertex.
        """
        raise NotImplementedError
