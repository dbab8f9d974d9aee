"""
Algorithm interfaces for the route network.

Keeps path algorithms separate from graph storage and query wiring.
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple

from graph import Graph, Vertex
from paths import PathMap


class PathEnumerator(ABC):
    """
    Interface for enumerating every route between two vertices.
    """

    @abstractmethod
    def all_simple_paths(self, graph: Graph, source: Vertex, destination: Vertex) -> PathMap:
        """
        Enumerate every path from source to destination that repeats no vertex.

        Returns:
            Mapping vertex_sequence -> total weight of the sequence.
        """
        raise NotImplementedError

    @abstractmethod
    def all_paths(
        self,
        graph: Graph,
        source: Vertex,
        destination: Vertex,
        include_cycles: bool = True,
    ) -> PathMap:
        """
        Simple paths, optionally extended once around each cycle at destination.
        """
        raise NotImplementedError


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, int]:
        """
        Compute shortest-path costs from source to all reachable vertices.

        Returns:
            Mapping dest_vertex -> path_cost(source -> dest_vertex).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> Tuple[Dict[Vertex, int], Dict[Vertex, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError
